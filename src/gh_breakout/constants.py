"""Global constants for the application."""

import math

# Board layout (pixels)
PADDING = 15  # Space between the canvas edge and the playfield
NUM_DAYS = 7  # Number of days in a week (Sun-Sat)
BRICK_SIZE = 12  # Brick edge length
BRICK_GAP = 3  # Gap between neighbouring bricks
BRICK_RADIUS = 3  # Corner radius of a brick

PADDLE_WIDTH = 75
PADDLE_HEIGHT = 10
PADDLE_RADIUS = 5  # Corner radius of the paddle
PADDLE_BRICK_GAP = 100  # Space between the last brick row and the paddle

BALL_RADIUS = 8
BALL_SPEED = 10  # Pixels the ball travels per frame
BALL_LAUNCH_ANGLE = -math.pi / 4  # Screen coordinates, y grows downward
BALL_START_OFFSET = 30  # Distance of the ball's start from the canvas bottom

# Animation settings
DEFAULT_FPS = 30
ANIMATE_STEP = 1  # Keep one snapshot every N simulated frames
MAX_FRAMES = 30000  # Safety cap for layouts the ball never clears

# Colors
GITHUB_LIGHT_PALETTE = ("#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39")
GITHUB_DARK_PALETTE = ("#151B23", "#033A16", "#196C2E", "#2EA043", "#56D364")
DEFAULT_PADDLE_COLOR = "#1F6FEB"
DEFAULT_BALL_COLOR = "#1F6FEB"
LIGHT_BACKGROUND_COLOR = "#ffffff"  # Raster outputs only, SVG stays transparent
DARK_BACKGROUND_COLOR = "#0d1117"
