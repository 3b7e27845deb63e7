"""
Colors, templates and the immutable description of a badge to render.
"""

from dataclasses import dataclass
from enum import Enum

from badges.config import COLOR_HEX


class ImageColor(Enum):
    """Background colors a badge half can use."""
    GREEN = COLOR_HEX['green']
    ORANGE = COLOR_HEX['orange']
    RED = COLOR_HEX['red']
    BLUE = COLOR_HEX['blue']
    GRAY = COLOR_HEX['gray']
    DARK_GRAY = COLOR_HEX['dark_gray']

    @property
    def hex(self) -> str:
        return self.value


class ImageTemplate(Enum):
    """Visual badge layouts."""
    FLAT = 'flat'
    FLAT_SQUARE = 'flat-square'
    PLASTIC = 'plastic'

    @classmethod
    def from_name(cls, name: str) -> 'ImageTemplate':
        """
        Resolve a template from a request parameter.

        Accepts the enum value or member name in any case, with '-' and '_'
        treated alike (e.g. 'flat-square', 'FLAT_SQUARE').

        Raises:
            ValueError: if no template matches
        """
        normalized = (name or '').strip().lower().replace('_', '-')
        for template in cls:
            if template.value == normalized:
                return template
        raise ValueError(f"Unknown badge template: {name!r}")


@dataclass(frozen=True)
class BadgeData:
    """Everything the renderer needs to draw one badge."""
    template: ImageTemplate
    label_text: str
    label_color: ImageColor
    value_text: str
    value_color: ImageColor
