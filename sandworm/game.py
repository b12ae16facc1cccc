"""
Sandworm — Pygame front end
Controls: Arrow keys / WASD to steer, P to pause, R to restart, ESC to quit.
"""

import argparse
import logging
import sys

import numpy as np
import pygame

from sandworm.config import Device, device_for_width, load_params, tile_size_for_window
from sandworm.definitions import Direction, GroundTexture, WormAnatomy
from sandworm.engine import new_game, tick

logger = logging.getLogger(__name__)

# ---------- Config ----------
HUD_H = 36                # pixels reserved for the score line
BORDER = 1                # gap between tiles
FALLBACK_WINDOW = (1280, 720)

# Colors (R, G, B)
BG    = (40, 28, 16)
TEXT  = (240, 230, 210)
TILE_COLORS = {
    GroundTexture.SAND: (232, 190, 120),
    GroundTexture.FOOD: (220, 70, 60),
    WormAnatomy.HEAD:   (20, 20, 20),
    WormAnatomy.BODY:   (245, 245, 245),
    WormAnatomy.TAIL:   (130, 130, 130),
}

KEY_TO_DIR = {
    pygame.K_UP:    Direction.UP,
    pygame.K_w:     Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_s:     Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_a:     Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d:     Direction.RIGHT,
}


# ---------- Game ----------
class SandwormGame:
    """Holds the current snapshot plus the single pending input direction."""

    def __init__(self, params, rng=None):
        self.params = params
        self.rng = rng if rng is not None else np.random.default_rng(params.seed)
        self.reset()

    def reset(self):
        self.state = new_game(self.params)
        self.pending_dir = None
        self.paused = False

    def set_direction(self, direction):
        """Remember the latest key; only the last one before a tick counts."""
        if self.state.finished:
            return
        self.pending_dir = direction

    def step(self):
        if self.state.finished or self.paused:
            return
        self.state = tick(self.state, self.pending_dir, self.params, self.rng)
        self.pending_dir = None

    def toggle_pause(self):
        if not self.state.finished:
            self.paused = not self.paused


# ---------- Rendering ----------
def render(surface, game, font, tile):
    surface.fill(BG)
    state = game.state

    for row in state.field.tile_grid:
        for t in row:
            loc = t.data.location
            rect = (loc.column * tile + BORDER, HUD_H + loc.row * tile + BORDER,
                    tile - 2 * BORDER, tile - 2 * BORDER)
            pygame.draw.rect(surface, TILE_COLORS[t.type], rect, border_radius=4)

    hud = font.render(f"Score: {state.score}   Length: {len(state.segments)}", True, TEXT)
    surface.blit(hud, (10, 8))

    w, h = surface.get_size()
    msg = None
    if game.paused:
        msg = "Paused — press P to resume"
    elif state.game_won:
        msg = "The sands are yours! Press R to play again"
    elif state.game_over:
        msg = "Game Over — press R to restart"
    if msg:
        text = font.render(msg, True, TEXT)
        surface.blit(text, (w // 2 - text.get_width() // 2, h // 2 - text.get_height() // 2))


# ---------- Main loop ----------
def choose_device(name, screen_width):
    """The named device class, or the one matching the screen width."""
    if name:
        return Device(name)
    return device_for_width(screen_width)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="sandworm", description="Sandworm arcade game.")
    parser.add_argument("--device", choices=[d.value for d in Device], default=None,
                        help="board size class (default: picked from the screen width)")
    parser.add_argument("--data", default=None, help="path to a game data JSON file")
    parser.add_argument("--seed", type=int, default=None, help="seed for food drops and turns")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption("Sandworm")
    info = pygame.display.Info()
    window = (info.current_w, info.current_h) if info.current_w > 0 else FALLBACK_WINDOW
    device = choose_device(args.device, window[0])
    logger.info("Playing on a %s board.", device.value)
    params = load_params(args.data, device=device, seed=args.seed)
    tile = tile_size_for_window(window[0], window[1] - HUD_H, params.device)
    dims = params.dimensions
    screen = pygame.display.set_mode((dims.columns * tile, dims.rows * tile + HUD_H))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 28)

    game = SandwormGame(params)

    # Timed update event so the worm speed is independent of frame rate
    UPDATE = pygame.USEREVENT + 1
    pygame.time.set_timer(UPDATE, game.state.speed_ms)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == pygame.K_p:
                    game.toggle_pause()
                if event.key == pygame.K_r and game.state.finished:
                    game.reset()
                    pygame.time.set_timer(UPDATE, game.state.speed_ms)
                if event.key in KEY_TO_DIR:
                    game.set_direction(KEY_TO_DIR[event.key])
            elif event.type == UPDATE:
                speed = game.state.speed_ms
                was_finished = game.state.finished
                game.step()
                if not was_finished and game.state.error:
                    logger.error("Game stopped: %s", game.state.error)
                # refresh timer when the worm sped up
                if game.state.speed_ms != speed:
                    pygame.time.set_timer(UPDATE, game.state.speed_ms)

        render(screen, game, font, tile)
        pygame.display.flip()
        clock.tick(60)  # render at up to 60 FPS; logic is driven by UPDATE timer


if __name__ == "__main__":
    main()
