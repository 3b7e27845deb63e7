"""
Cached SVG badge generation for measures.

Rendering and minimizing a badge is comparatively expensive, so every
generated image is kept for the lifetime of the generator. Images are keyed
by (template, measure) in one of two partitions depending on whether blinking
was requested, so the blinking and steady variants of the same badge can be
cached side by side.

Cached content is stored as immutable bytes. Each caller gets its own
BytesIO over those bytes, so one consumer can never leave the image at a
position another consumer would then read from.

Usage:
    generator = MeasureBadgeGenerator(BadgeRenderer(), SVGMinimizer())
    stream = generator.svg_image_stream_for(measure, ImageTemplate.FLAT, blinking=True)
"""

import logging
import threading
from dataclasses import dataclass
from io import BytesIO

from badges.config import BLINKING_PARAMETER
from badges.errors import BadgeError, PostProcessError, RenderError, ResourceReuseError
from badges.images import BadgeData, ImageColor, ImageTemplate
from badges.measure import MeasureHolder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedImage:
    """Immutable content of a generated badge."""
    content: bytes

    def open(self) -> BytesIO:
        """Get a fresh reader positioned at the start of the image."""
        return BytesIO(self.content)


class MeasureBadgeGenerator:
    """
    Generates SVG badges for measures and caches the minimized result.

    The renderer must provide generate_for(BadgeData) -> stream, the
    minimizer process(stream, parameters) -> stream. Both may raise; any
    failure surfaces as a BadgeError and leaves the cache untouched.
    """

    def __init__(self, renderer, minimizer):
        """
        Initialize the generator with empty caches for every template.

        Args:
            renderer: Service turning BadgeData into raw SVG streams
            minimizer: Service post-processing raw SVG streams
        """
        self.renderer = renderer
        self.minimizer = minimizer

        self._steady_badges = {template: {} for template in ImageTemplate}
        self._blinking_badges = {template: {} for template in ImageTemplate}

        self._guard = threading.Lock()
        self._slot_locks = {}
        self._generations = 0
        self._hits = 0

        logger.info("MeasureBadgeGenerator is now ready.")

    def svg_image_stream_for(self, measure: MeasureHolder, template: ImageTemplate,
                             blinking: bool) -> BytesIO:
        """
        Get a stream holding the badge image for a measure.

        Args:
            measure: Measure the badge is generated for
            template: Template to use
            blinking: True if the badge must blink when the measure is in error

        Returns:
            BytesIO positioned at the start of the minimized SVG image

        Raises:
            BadgeError: if rendering, minimizing or capturing the image fails
        """
        table = self._table_for(blinking)[template]

        image = table.get(measure)
        if image is not None:
            logger.debug(f"Found SVG image for '{measure.metric_name}' in cache, reusing it.")
            self._record_hit()
            return image.open()

        with self._slot_lock(template, measure, blinking):
            # Another thread may have generated it while we waited
            image = table.get(measure)
            if image is not None:
                self._record_hit()
            else:
                logger.debug(f"Generating SVG image for '{measure.metric_name}', then caching it.")
                image = self._generate(measure, template, blinking)
                table[measure] = image
                with self._guard:
                    self._generations += 1

        return image.open()

    def cached_entries(self, blinking: bool) -> int:
        """Number of images cached in one partition."""
        return sum(len(images) for images in self._table_for(blinking).values())

    def stats(self) -> dict:
        """
        Get cache statistics for monitoring.

        Returns:
            Dict with generation and hit counts and entries per partition
        """
        with self._guard:
            return {
                'generations': self._generations,
                'hits': self._hits,
                'steady_entries': self.cached_entries(False),
                'blinking_entries': self.cached_entries(True),
            }

    def _table_for(self, blinking: bool) -> dict:
        return self._blinking_badges if blinking else self._steady_badges

    def _slot_lock(self, template, measure, blinking) -> threading.Lock:
        key = (blinking, template, measure)
        with self._guard:
            lock = self._slot_locks.get(key)
            if lock is None:
                lock = self._slot_locks[key] = threading.Lock()
            return lock

    def _record_hit(self):
        with self._guard:
            self._hits += 1

    def _generate(self, measure: MeasureHolder, template: ImageTemplate,
                  blinking: bool) -> CachedImage:
        data = BadgeData(
            template=template,
            label_text=measure.metric_name,
            label_color=ImageColor.DARK_GRAY,
            value_text=measure.value,
            value_color=measure.background_color,
        )
        try:
            raw_stream = self.renderer.generate_for(data)
        except BadgeError:
            raise
        except Exception as e:
            raise RenderError(f"Failed to render badge for '{measure.metric_name}': {e}") from e

        # Blinking only matters for measures in error; the cache key keeps the requested flag
        parameters = {
            BLINKING_PARAMETER: str(bool(blinking) and measure.is_alert).lower(),
        }
        try:
            transformed_stream = self.minimizer.process(raw_stream, parameters)
        except BadgeError:
            raise
        except Exception as e:
            raise PostProcessError(f"Failed to minimize badge for '{measure.metric_name}': {e}") from e

        try:
            content = transformed_stream.read()
        except Exception as e:
            raise ResourceReuseError(f"Could not capture badge for '{measure.metric_name}': {e}") from e
        if isinstance(content, bytearray):
            content = bytes(content)
        elif isinstance(content, str):
            content = content.encode('utf-8')
        if not isinstance(content, bytes):
            raise ResourceReuseError(
                f"Minimizer returned unreadable content for '{measure.metric_name}'"
            )
        return CachedImage(content)
