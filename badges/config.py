"""
Centralized configuration for the measure badge service.

This module contains all configurable constants used throughout the codebase,
organized into logical categories. Import from here instead of hardcoding values.
"""

import os
from pathlib import Path

# Path resolution - runtime files live relative to project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# =============================================================================
# COLORS
# =============================================================================

# Badge colors (shields.io conventions)
COLOR_HEX = {
    'green': '#4c1',
    'orange': '#fe7d37',
    'red': '#e05d44',
    'blue': '#007ec6',
    'gray': '#9f9f9f',
    'dark_gray': '#555',
}

# Quality gate alert levels -> color names
ALERT_COLORS = {
    'OK': 'green',
    'WARN': 'orange',
    'ERROR': 'red',
}
DEFAULT_ALERT_COLOR = 'blue'

# Value shown when a project or metric is unknown
NOT_FOUND_TEXT = 'not found'

# Ratings are stored as 1..5 and displayed as letters
RATING_LETTERS = {1: 'A', 2: 'B', 3: 'C', 4: 'D', 5: 'E'}


# =============================================================================
# LAYOUT
# =============================================================================

BADGE_HEIGHT = 20
BADGE_PADDING = 6         # Horizontal padding on each side of a text
CORNER_RADIUS = 3         # Only used by rounded templates
TEXT_BASELINE_Y = 14
TEXT_SHADOW_Y = 15
FONT_FAMILY = 'DejaVu Sans,Verdana,Geneva,sans-serif'


# =============================================================================
# FONTS
# =============================================================================

FONT_PATH = os.getenv('BADGE_FONT_PATH', 'DejaVuSans.ttf')
FONT_SIZE = int(os.getenv('BADGE_FONT_SIZE', '11'))


# =============================================================================
# POST-PROCESSING
# =============================================================================

# Parameter understood by the minimizer
BLINKING_PARAMETER = 'IS_BLINKING_BADGE'

# Element ids the renderer puts on the badge halves, removed after use
LABEL_BACKGROUND_ID = 'label-bg'
VALUE_BACKGROUND_ID = 'value-bg'

BLINK_DURATION = '1s'


# =============================================================================
# SERVICE
# =============================================================================

SERVICE_NAME = 'measure-badges'
MEASURES_FILE = os.getenv('MEASURES_FILE', str(PROJECT_ROOT / 'measures.json'))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
DEFAULT_PORT = 8000
SVG_CONTENT_TYPE = 'image/svg+xml'
