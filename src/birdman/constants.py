"""
constants.py: Centralized configuration for the game world and tuning tables.
"""

# -------- Time --------
TICK_RATE = 60                  # Logical ticks per second

# -------- Game World Config --------
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
BIRDMAN_SPRITE_SIZE = 100
BIRD_SPRITE_SIZE = 100
COLLISION_RADIUS = 50           # Shared by birdman and bird
CLIFF_WIDTH = 100

# -------- Start Of Run --------
INITIAL_BIRDMAN_X = -60         # On the cliff, left of the world origin
INITIAL_CAMERA_X = -100
INITIAL_CAMERA_Y = 0

# -------- Movement (pixels / tick) --------
RUN_SPEED = 1
FLY_SPEED = 1
CAMERA_SPEED = 1
BIRD_SPEED = 1
DAMAGED_FALL_SPEED = 1
GRAVITY = 1
MAX_FALL_VELOCITY = 5

# -------- Bird Spawner --------
BIRD_SPAWN_INTERVAL = 200       # World units between spawns
BIRD_SPAWN_MARGIN = 50          # Keep birds away from top and bottom edges

# -------- Difficulty --------
# (distance upper bound, flap impulse); last band is unbounded
FLAP_IMPULSE_BANDS = (
    (1000, 20),
    (2000, 15),
    (3000, 10),
    (4000, 7),
)
MIN_FLAP_IMPULSE = 5

# -------- Scoring --------
RECORD_UNIT = 10                # World units per metre

# -------- Telemetry --------
TELEMETRY_GAME_NAME = "birdman"
