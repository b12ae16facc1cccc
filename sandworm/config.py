"""
Game configuration: board sizes per device class, tick speed tuning and the
starting layout loaded from the bundled data.json.
"""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from sandworm.definitions import (
    Coordinates,
    Dimension,
    Direction,
    WormAnatomy,
    WormSegment,
)
from sandworm.errors import InvalidArgument

logger = logging.getLogger(__name__)

# ---------- Config ----------
DATA_PATH = Path(__file__).with_name("data.json")

MOBILE_MAX_WIDTH = 768     # px, inclusive
TABLET_MAX_WIDTH = 1024    # px, inclusive
WINDOW_FILL = 0.9          # share of the window the board may cover

SPEED_MS = 300             # starting tick interval
SPEED_STEP_MS = 20         # faster by this much per food
MIN_SPEED_MS = 60          # never tick faster than this
SCORE_PER_FOOD = 100


class Device(enum.Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


GAME_DIMENSIONS = {
    Device.MOBILE: Dimension(rows=10, columns=15),
    Device.TABLET: Dimension(rows=11, columns=20),
    Device.DESKTOP: Dimension(rows=15, columns=30),
}


def device_for_width(width) -> Device:
    """Pick the device class for a window width in pixels."""
    if not width or width <= 0:
        raise InvalidArgument("Cannot determine device type. Window width is invalid.")
    if width <= MOBILE_MAX_WIDTH:
        return Device.MOBILE
    if width <= TABLET_MAX_WIDTH:
        return Device.TABLET
    return Device.DESKTOP


def tile_size_for_window(width, height, device: Device) -> int:
    """Largest square tile (px) that lets the device's board fit the window."""
    if not width or not height or device is None:
        raise InvalidArgument("Cannot calculate tile size. Invalid window size or device.")
    dims = GAME_DIMENSIONS[device]
    size = min(width * WINDOW_FILL / dims.columns, height * WINDOW_FILL / dims.rows)
    return int(size)


@dataclass
class Params:
    device: Device = Device.DESKTOP
    start_direction: Direction = Direction.RIGHT
    segments: Tuple[WormSegment, ...] = ()
    food: Tuple[Coordinates, ...] = ()
    speed_ms: int = SPEED_MS
    speed_step_ms: int = SPEED_STEP_MS
    min_speed_ms: int = MIN_SPEED_MS
    score_per_food: int = SCORE_PER_FOOD
    seed: Optional[int] = None
    dimensions: Dimension = field(init=False)

    def __post_init__(self):
        self.dimensions = GAME_DIMENSIONS[self.device]


# ---------- Loading ----------
def _parse_location(raw: dict) -> Coordinates:
    try:
        return Coordinates(row=int(raw["row"]), column=int(raw["column"]))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidArgument(f"Invalid location in game data: {raw!r}") from e


def _parse_segment(raw: dict) -> WormSegment:
    try:
        part = WormAnatomy(raw["part"])
    except (KeyError, ValueError) as e:
        raise InvalidArgument(f"Invalid worm part: {raw.get('part')!r}") from e
    return WormSegment(key=int(raw["key"]), part=part, location=_parse_location(raw["location"]))


def load_params(path=None, device: Device = Device.DESKTOP, seed=None) -> Params:
    """
    Build Params from a JSON game data file (defaults to the bundled one).

    Unknown start directions fall back to RIGHT; unknown worm parts are an
    error because the board cannot be stamped without them.
    """
    path = Path(path) if path is not None else DATA_PATH
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    worm = data["game"]["sandWorm"]
    try:
        start = Direction(worm.get("startDirection"))
    except ValueError:
        logger.warning("Unknown start direction %r, using right.", worm.get("startDirection"))
        start = Direction.RIGHT

    segments = tuple(sorted((_parse_segment(s) for s in worm["segments"]), key=lambda s: s.key))
    food = tuple(_parse_location(item["location"]) for item in data["game"].get("food", []))
    context = data.get("context", {})

    return Params(
        device=device,
        start_direction=start,
        segments=segments,
        food=food,
        speed_ms=int(context.get("speed", SPEED_MS)),
        speed_step_ms=int(context.get("speedStep", SPEED_STEP_MS)),
        min_speed_ms=int(context.get("minSpeed", MIN_SPEED_MS)),
        score_per_food=int(context.get("scorePerFood", SCORE_PER_FOOD)),
        seed=seed,
    )
