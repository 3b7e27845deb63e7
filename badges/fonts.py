"""
Font resolution and text measurement for badge layout.
"""

import logging
import math

from PIL import ImageFont

from badges.config import FONT_PATH, FONT_SIZE

logger = logging.getLogger(__name__)


class FontProvider:
    """Loads the badge font once and measures text widths with it."""

    def __init__(self, font_path: str = FONT_PATH, font_size: int = FONT_SIZE):
        self.font_path = font_path
        self.font_size = font_size
        try:
            self._font = ImageFont.truetype(font_path, font_size)
        except (OSError, ImportError) as e:
            logger.warning(f"Could not load font '{font_path}' ({e}), using Pillow default font")
            self._font = ImageFont.load_default()

    def text_width(self, text: str) -> int:
        """Width of text in pixels, rounded up."""
        if not text:
            return 0
        return math.ceil(self._font.getlength(text))
