"""Shared constants for Tallgrass. All game-wide configuration lives here."""

# --- Display ---
FPS = 60
CELL_WIDTH = 14   # pixels per map cell
CELL_HEIGHT = 20
FONT_NAME = "monospace"
FONT_SIZE = 18

# --- Map ---
MAP_SIZE = 31  # square map, in cells
DEFAULT_SEED = 42

# --- Field of vision ---
FOV_RADIUS = 15  # trie radius; cells beyond FOV_RADIUS - 0.5 are never visible

# Tall grass eats into a ray's vision budget. Weights follow the nethack
# distance metric: 95 per straight step, 95 + 46 per diagonal step.
VISION_RADIUS = 3
VISION_LOSS_OBSCURE = 95
VISION_LOSS_DIAGONAL = 46
# A straight ray through pure tall grass reaches exactly VISION_RADIUS cells.
VISION_INITIAL = VISION_LOSS_OBSCURE * VISION_RADIUS
VISION_NOT_VISIBLE = -1

# --- Scheduling ---
# Energy units charged per round (scaled by speed) and paid per action.
TURN_TIMER = 120
MOVE_TIMER = 960
FAILED_ACTION_TURNS = 1  # a failed non-player action still costs a turn

# --- World generation ---
AUTOMATA_FILL_PCT = 45
AUTOMATA_ITERATIONS = 3
AUTOMATA_SPARSE_ITERATIONS = 2  # early passes also fill isolated cells
WILD_POKEMON_COUNT = 6
MAX_SPAWN_ATTEMPTS = 100

# --- Player ---
PLAYER_NAME = "Red"
PLAYER_HP = 40
PLAYER_SPEED = 1.0
STARTER_SPECIES = "Rattata"

# --- Colors (RGB; None means the window default) ---
COLOR_BG = (0, 0, 0)
COLOR_TEXT = (200, 200, 200)
COLOR_TALL_GRASS = (135, 175, 95)
COLOR_TREE = (0, 95, 0)
