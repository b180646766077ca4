# --- Display ---
WIDTH = 480
HEIGHT = 640
FPS = 60
TITLE = "Flappy Gate"

# --- Bird / Physics ---
# Fixed per-frame increments (px/frame, px/frame^2), not scaled by dt
GRAVITY = 0.25
JUMP_FORCE = -5.5
BIRD_X = 80                 # bird's fixed x (world scrolls left)
BIRD_START_Y = 200
BIRD_W = 35
BIRD_H = 35
BIRD_ROTATION_PER_VY = 0.1  # radians of tilt per px/frame of vy (cosmetic)

# --- Pipes ---
PIPE_GAP = 200
PIPE_WIDTH = 60
PIPE_SPACING = 280          # px between consecutive pipes
PIPE_SPEED = 2              # px/frame
PIPE_MIN_HEIGHT = 80        # min visible length of each pipe segment
PIPE_LIP_W = 10
PIPE_LIP_H = 10

# Smallest window that still leaves room for a gate
MIN_WIDTH = BIRD_X + BIRD_W + PIPE_WIDTH
MIN_HEIGHT = PIPE_GAP + 2 * PIPE_MIN_HEIGHT + 1

# --- Clouds (cosmetic) ---
CLOUD_COUNT = 3
CLOUD_SPEED = 20            # px/s
CLOUD_SPREAD_X = 200
CLOUD_BASE_Y = 50
CLOUD_STEP_Y = 40

# --- Persistence ---
SCORE_FILE_DEFAULT = "~/.flappy_gate/highscore.json"
SCORE_FILE_ENV = "FLAPPY_SCORE_FILE"

# --- Colors (RGB / RGBA) ---
COLOR_SKY_TOP = (112, 197, 206)
COLOR_SKY_BOTTOM = (186, 230, 236)
COLOR_CLOUD = (255, 255, 255, 128)
COLOR_BIRD = (255, 215, 0)
COLOR_OUTLINE = (0, 0, 0)
COLOR_PIPE_LIGHT = (46, 204, 113)
COLOR_PIPE_DARK = (39, 174, 96)
COLOR_FG = (255, 255, 255)
COLOR_HINT = (235, 245, 250)
COLOR_PANEL = (0, 0, 0, 140)
COLOR_BUTTON = (255, 140, 0)
COLOR_BUTTON_EDGE = (200, 100, 0)

# --- UI ---
FONT_NAME = "arial"
FONT_SIZE_SCORE = 48
FONT_SIZE_TITLE = 40
FONT_SIZE_TEXT = 22
BUTTON_W = 160
BUTTON_H = 50
