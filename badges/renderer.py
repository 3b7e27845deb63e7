"""
SVG badge renderer.

Generates shields.io-style badges for a BadgeData descriptor. The output keeps
indentation and float coordinates; the minimizer shrinks it.
"""

import logging
from io import BytesIO
from xml.sax.saxutils import escape

from badges.config import (
    BADGE_HEIGHT,
    BADGE_PADDING,
    CORNER_RADIUS,
    FONT_FAMILY,
    TEXT_BASELINE_Y,
    TEXT_SHADOW_Y,
    LABEL_BACKGROUND_ID,
    VALUE_BACKGROUND_ID,
)
from badges.errors import RenderError
from badges.fonts import FontProvider
from badges.images import BadgeData, ImageTemplate

logger = logging.getLogger(__name__)

# Gradient overlays per template; flat-square has none
_GRADIENTS = {
    ImageTemplate.FLAT: '''  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>''',
    ImageTemplate.PLASTIC: '''  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#fff" stop-opacity=".7"/>
    <stop offset=".1" stop-color="#aaa" stop-opacity=".1"/>
    <stop offset=".9" stop-color="#000" stop-opacity=".3"/>
    <stop offset="1" stop-color="#000" stop-opacity=".5"/>
  </linearGradient>''',
}

_CORNER_RADII = {
    ImageTemplate.FLAT: CORNER_RADIUS,
    ImageTemplate.FLAT_SQUARE: 0,
    ImageTemplate.PLASTIC: CORNER_RADIUS + 1,
}


class BadgeRenderer:
    """Turns BadgeData into raw SVG streams."""

    def __init__(self, font_provider: FontProvider = None):
        self.font_provider = font_provider or FontProvider()

    def generate_for(self, data: BadgeData) -> BytesIO:
        """
        Render the badge described by data.

        Args:
            data: Badge descriptor

        Returns:
            BytesIO holding UTF-8 encoded SVG markup, positioned at 0

        Raises:
            RenderError: if the template is unknown or layout fails
        """
        if data.template not in _CORNER_RADII:
            raise RenderError(f"Unsupported badge template: {data.template!r}")
        logger.debug(f"Rendering {data.template.value} badge for '{data.label_text}'")
        try:
            svg = self._render(data)
        except Exception as e:
            raise RenderError(f"Failed to render badge '{data.label_text}': {e}") from e
        return BytesIO(svg.encode('utf-8'))

    def _render(self, data: BadgeData) -> str:
        label_width = self.font_provider.text_width(data.label_text) + BADGE_PADDING * 2
        value_width = self.font_provider.text_width(data.value_text) + BADGE_PADDING * 2
        total_width = label_width + value_width

        label_x = label_width / 2
        value_x = label_width + value_width / 2

        label = escape(data.label_text)
        value = escape(data.value_text)
        aria_label = escape(f"{data.label_text}: {data.value_text}", {'"': '&quot;'})

        radius = _CORNER_RADII[data.template]
        gradient = _GRADIENTS.get(data.template)
        overlay = ''
        if gradient:
            overlay = f'\n    <rect width="{total_width}" height="{BADGE_HEIGHT}" fill="url(#s)"/>'
        else:
            gradient = ''

        return f'''<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="{BADGE_HEIGHT}" role="img" aria-label="{aria_label}">
  <title>{label}: {value}</title>
{gradient}
  <clipPath id="r">
    <rect width="{total_width}" height="{BADGE_HEIGHT}" rx="{radius}" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect id="{LABEL_BACKGROUND_ID}" width="{label_width}" height="{BADGE_HEIGHT}" fill="{data.label_color.hex}"/>
    <rect id="{VALUE_BACKGROUND_ID}" x="{label_width}" width="{value_width}" height="{BADGE_HEIGHT}" fill="{data.value_color.hex}"/>{overlay}
  </g>
  <g fill="#fff" text-anchor="middle" font-family="{FONT_FAMILY}" font-size="{self.font_provider.font_size}">
    <text aria-hidden="true" x="{label_x}" y="{TEXT_SHADOW_Y}" fill="#010101" fill-opacity=".3">{label}</text>
    <text x="{label_x}" y="{TEXT_BASELINE_Y}">{label}</text>
    <text aria-hidden="true" x="{value_x}" y="{TEXT_SHADOW_Y}" fill="#010101" fill-opacity=".3">{value}</text>
    <text x="{value_x}" y="{TEXT_BASELINE_Y}">{value}</text>
  </g>
</svg>'''
