# ------------ Screen ------------
SCREEN_W = 820
SCREEN_H = 360
GROUND_OFFSET = 32
FPS = 60

# Largest delta (seconds) a single frame may advance the simulation
MAX_DT = 0.05

# ------------ Player ------------
PLAYER_X = 80
PLAYER_W = 44
PLAYER_H = 56
GRAVITY = 2200.0          # px/sec^2
JUMP_IMPULSE = -760.0     # px/sec
GROUND_Y = SCREEN_H - GROUND_OFFSET - PLAYER_H

# ------------ Entities ------------
SPAWN_X = SCREEN_W + 10
CULL_EDGE = -20           # entities whose right edge is <= this are dropped

OBSTACLE_H_RANGE = (36, 64)
OBSTACLE_W_RANGE = (30, 46)
BONUS_CAN_H_RANGE = (28, 40)
BONUS_CAN_W_RANGE = (22, 32)

COLLECTIBLE_SIZE = 18
POWERUP_SIZE = 20
# Floating bands, measured upward from the bottom of the screen
COLLECTIBLE_BAND = (80, 140)
POWERUP_BAND = (100, 160)

# ------------ Collisions ------------
STOMP_TOLERANCE = 6
STOMP_BOUNCE = 0.6        # fraction of the jump impulse
STOMP_POINTS = 10
COLLECT_POINTS = 10
BONUS_POINTS = 25
BONUS_CONFETTI_POINTS = 50

# ------------ Powerups ------------
FILTER_DURATION = 3.0
SPEED_BOOST_DURATION = 2.5
SPEED_BOOST_DELTA = 60.0

# ------------ Progression ------------
RAMP_INTERVAL = 10.0
MILESTONES = (100, 250, 500, 1000, 2500)

# ------------ Effects ------------
CONFETTI_COUNT = 50
CONFETTI_GRAVITY = 900.0
SPEED_LINE_COUNT = 30
AURA_GROWTH = 100.0       # px/sec
AURA_FADE = 1.2           # opacity/sec

# ------------ Colors ------------
C_SKY = (230, 248, 255)
C_GROUND = (212, 240, 255)
C_TEXT = (6, 32, 51)
C_DROP = (46, 157, 247)
C_DROP_FILTERED = (46, 168, 74)
C_OUTLINE = (4, 34, 60)
C_BARREL = (27, 27, 27)
C_BARREL_BAND = (47, 47, 47)
C_CAN = (255, 201, 7)
C_COLLECTIBLE = (79, 203, 83)
C_FILTER = (139, 209, 203)
C_PUMP = (255, 144, 42)
C_WELL = (21, 154, 72)
C_CONFETTI = [
    (255, 193, 7),
    (255, 87, 34),
    (255, 128, 171),
    (139, 209, 203),
    (46, 157, 247),
]

# ------------ Game over ------------
WATER_FACTS = [
    "771 million people lack access to clean water.",
    "Clean water improves health and education.",
    "Every drop counts!",
    "Women and children spend 200 million hours daily collecting water.",
    "Access to clean water can break the cycle of poverty.",
]
