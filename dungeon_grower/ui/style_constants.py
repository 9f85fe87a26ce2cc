"""
Style tokens for the dungeon generator panel (dark theme).
"""

# Actions
PRIMARY_ACTION = "#4CAF50"        # Generate
PRIMARY_ACTION_HOVER = "#45a049"
FOCUS_COLOR = "#64B5F6"

# Surfaces
BG_DARKEST = "#1e1e1e"            # Lists
BG_MEDIUM = "#353535"             # Group boxes
BG_LIGHT = "#404040"              # Inputs, buttons
BG_HIGHLIGHT = "#4a4a4a"
BG_PRESSED = "#333333"

# Text
TEXT_PRIMARY = "#e0e0e0"
TEXT_SUCCESS = "#88ff88"
TEXT_WARNING = "#ffff88"
TEXT_ERROR = "#ff8888"

# Borders
BORDER_DARK = "#444444"
BORDER_MEDIUM = "#555555"

# Sizes
FONT_SIZE_SM = "11pt"
FONT_SIZE_LG = "13pt"
BORDER_RADIUS_MD = "4px"
BORDER_RADIUS_LG = "6px"
SPACING_XS = 4
SPACING_SM = 8
SPACING_MD = 12
BUTTON_MIN_WIDTH = 32
HIT_TARGET_MIN = 28
INPUT_MIN_WIDTH_SM = 60
