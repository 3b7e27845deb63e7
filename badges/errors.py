"""
Exceptions raised while producing badge images.

Every failure is an OSError so callers can treat the whole render and
post-process pipeline as a single I/O operation.
"""


class BadgeError(OSError):
    """Base class for all badge pipeline failures."""


class RenderError(BadgeError):
    """Raised when the renderer cannot produce a raw SVG image."""


class PostProcessError(BadgeError):
    """Raised when the minimizer cannot transform a raw SVG image."""


class ResourceReuseError(BadgeError):
    """Raised when a generated image cannot be captured or read again."""
