"""
SVG badges for project measures.

Provides cached generation of shields.io-style badges:
- Measure lookup (MeasureRepository, MeasureHolder)
- Rendering (BadgeRenderer) and minimizing (SVGMinimizer)
- Caching generator (MeasureBadgeGenerator)

Usage:
    from badges import MeasureBadgeGenerator, BadgeRenderer, SVGMinimizer

    generator = MeasureBadgeGenerator(BadgeRenderer(), SVGMinimizer())
    stream = generator.svg_image_stream_for(measure, ImageTemplate.FLAT, blinking=False)
"""

from .errors import BadgeError, RenderError, PostProcessError, ResourceReuseError
from .images import BadgeData, ImageColor, ImageTemplate
from .measure import MeasureHolder, MeasureRepository
from .renderer import BadgeRenderer
from .minimizer import SVGMinimizer
from .generator import CachedImage, MeasureBadgeGenerator

__all__ = [
    'BadgeError',
    'RenderError',
    'PostProcessError',
    'ResourceReuseError',
    'BadgeData',
    'ImageColor',
    'ImageTemplate',
    'MeasureHolder',
    'MeasureRepository',
    'BadgeRenderer',
    'SVGMinimizer',
    'CachedImage',
    'MeasureBadgeGenerator',
]
