"""
SVG post-processing.

Shrinks raw badge markup (whitespace, redundant float notation, internal
markers) and, when requested, makes the value background blink.
"""

import logging
import re
import xml.etree.ElementTree as ET
from io import BytesIO

from badges.config import (
    BLINK_DURATION,
    BLINKING_PARAMETER,
    COLOR_HEX,
    LABEL_BACKGROUND_ID,
    VALUE_BACKGROUND_ID,
)
from badges.errors import PostProcessError

logger = logging.getLogger(__name__)

# Register svg namespace as default to avoid ns0: prefix
SVG_NAMESPACE = 'http://www.w3.org/2000/svg'
ET.register_namespace('', SVG_NAMESPACE)
SVG_NS = f'{{{SVG_NAMESPACE}}}'

_INTEGRAL_FLOAT = re.compile(r'^(-?\d+)\.0+$')


class SVGMinimizer:
    """Minimizes rendered SVG badges."""

    def process(self, stream, parameters: dict = None) -> BytesIO:
        """
        Minimize an SVG stream.

        Args:
            stream: Readable binary stream holding the raw SVG
            parameters: Options; recognizes IS_BLINKING_BADGE ("true"/"false")

        Returns:
            BytesIO holding the minimized SVG, positioned at 0

        Raises:
            PostProcessError: if the input cannot be read or parsed
        """
        parameters = parameters or {}
        blinking = str(parameters.get(BLINKING_PARAMETER, 'false')).lower() == 'true'

        try:
            root = ET.fromstring(stream.read())
        except (ET.ParseError, OSError, ValueError) as e:
            raise PostProcessError(f"Could not parse SVG image: {e}") from e

        for element in root.iter():
            _strip_whitespace(element)
            for name, value in list(element.attrib.items()):
                match = _INTEGRAL_FLOAT.match(value)
                if match:
                    element.set(name, match.group(1))

        label_background = _pop_marked_rect(root, LABEL_BACKGROUND_ID)
        value_background = _pop_marked_rect(root, VALUE_BACKGROUND_ID)
        if blinking:
            if value_background is None:
                logger.warning("No value background found, badge will not blink")
            else:
                label_color = COLOR_HEX['dark_gray']
                if label_background is not None:
                    label_color = label_background.get('fill', label_color)
                _add_blinking(value_background, label_color)

        return BytesIO(ET.tostring(root, encoding='utf-8', xml_declaration=False))


def _strip_whitespace(element):
    if element.text is not None and not element.text.strip():
        element.text = None
    if element.tail is not None and not element.tail.strip():
        element.tail = None


def _pop_marked_rect(root, marker):
    """Find the rect carrying a renderer marker id and strip the id."""
    for rect in root.iter(f'{SVG_NS}rect'):
        if rect.get('id') == marker:
            del rect.attrib['id']
            return rect
    return None


def _add_blinking(rect, label_color):
    color = rect.get('fill')
    ET.SubElement(rect, f'{SVG_NS}animate', {
        'attributeName': 'fill',
        'values': f"{color};{label_color};{color}",
        'dur': BLINK_DURATION,
        'repeatCount': 'indefinite',
    })
