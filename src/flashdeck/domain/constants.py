"""Centralized constants for flashdeck.

Magic numbers and defaults live here so every layer imports from a single
source of truth.
"""

# ---------- Weighted selection ----------
# Prior weight for cards that have never been answered.
UNSEEN_WEIGHT = 3.0

# ---------- Persistence ----------
DEFAULT_DECK_FILENAME = "deck.yaml"
CONFIG_DIR_NAME = ".config/flashdeck"

# ---------- Rendering ----------
GAUGE_WIDTH = 30
