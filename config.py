"""
Simulation tuning knobs.
"""

# Population controls
START_POP = 100

# Generation timing
MAX_TIME = 2600  # ticks per generation

# Selection + mutation
ELITE = 0.05  # fraction of the population kept as breeding pool
MUTATION_RATE = 0.03
MUT_SIGMA = 0.30

# Default policies ("threshold_pair" | "argmax", "age" | "liveness")
ACTION_POLICY = "threshold_pair"
FITNESS_POLICY = "age"

# Brain shape: inputs are x, y, age
NN_INPUTS = 3
NN_HIDDEN = 6
NN_OUTPUTS = 4

# Movement
STEP_SIZE = 1.0

# Environment
SCREEN_W, SCREEN_H = 800, 600

# Sweeping danger zone
HAZARD_START = 500  # tick the zone appears
HAZARD_LEG = 500  # ticks per side of the sweep
HAZARD_SCALE = 0.3  # zone size relative to the world

# Runtime pacing
MIN_TICKS_PER_FRAME = 1
MAX_TICKS_PER_FRAME = 100
FPS = 60

# Rendering
BUB_RADIUS = 5

LOG_LEVEL = "INFO"
