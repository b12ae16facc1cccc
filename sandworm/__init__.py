"""
sandworm — a snake-like arcade game on a sand grid.

  definitions  – directions, tiles, board and worm types.
  grid         – board building, tile placement, food drops, growth.
  validation   – boundary and reversal checks.
  movement     – next-move computation and head steering.
  navigation   – per-segment direction path.
  engine       – GameState and the tick reducer.
  config       – device sizes, speed tuning, data.json loading.
  game         – pygame front end.
"""

__version__ = "0.1.0"
