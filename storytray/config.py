import os

TRAY_SIZE = (80, 80)
TRAY_SHAPE = 'circle'

# ARGB, same alpha on every stop
BORDER_GRADIENT_COLORS = [
    0xaf405de6,
    0xaf5851db,
    0xaf833ab4,
    0xafc13584,
    0xafe1306c,
    0xaffd1d1d,
    0xaf405de6,
]

GAP_SIZE = 3
STROKE_WIDTH = 2
TRAY_PADDING = 2

SPACE_LENGTH = 10
SEGMENT_COLOR = "#009688"
SINGLE_STORY_COLOR = "#4CAF50"
PLACEHOLDER_COLOR = "#e4e8f0"

ANIMATION_DURATION_MS = 1200
FRAME_INTERVAL_MS = 16

# How long the demo pretends a tray needs to prepare its stories
PREPARE_DELAY_MS = 2500

GIF_SIZE = 128
GIF_FRAMES = 24
GIF_OUTPUT = os.path.join('resources', 'story_tray.gif')

LOG_LEVEL = 'INFO'
# Daily log file in LOG_DIR, off unless enabled
LOG_TO_FILE = False
LOG_DIR = os.path.join(os.getcwd(), 'logs')
