"""
Measures shown on badges and where they come from.

A MeasureHolder is the semantic identity of a badge: two holders with the
same metric name, value and color always produce the same image, which is
what makes them usable as cache keys.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from badges.config import ALERT_COLORS, DEFAULT_ALERT_COLOR, NOT_FOUND_TEXT, RATING_LETTERS
from badges.images import ImageColor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasureHolder:
    """A metric name, its display value and the derived background color."""
    metric_name: str
    value: str
    background_color: ImageColor

    @classmethod
    def from_measure(cls, metric_name: str, value, alert_status: str = None,
                     value_type: str = None) -> 'MeasureHolder':
        """
        Build a holder from a raw measure.

        Args:
            metric_name: Label shown on the left side
            value: Raw measure value
            alert_status: Quality gate level ('OK', 'WARN', 'ERROR'), if any
            value_type: 'PERCENT' or 'RATING' to format the value, else None

        Returns:
            MeasureHolder with a formatted value and derived color
        """
        color_name = ALERT_COLORS.get((alert_status or '').upper(), DEFAULT_ALERT_COLOR)
        return cls(
            metric_name=metric_name,
            value=_format_value(value, value_type),
            background_color=ImageColor[color_name.upper()],
        )

    @classmethod
    def not_found(cls, metric_name: str) -> 'MeasureHolder':
        return cls(metric_name, NOT_FOUND_TEXT, ImageColor.GRAY)

    @property
    def is_alert(self) -> bool:
        """True when the measure is in an error (red) state."""
        return self.background_color is ImageColor.RED


def _format_value(value, value_type):
    if value_type:
        value_type = value_type.upper()
    if value_type == 'PERCENT' and isinstance(value, (int, float)):
        number = float(value)
        text = str(int(number)) if number.is_integer() else f"{number:.1f}"
        return f"{text}%"
    if value_type == 'RATING':
        try:
            return RATING_LETTERS[int(value)]
        except (KeyError, TypeError, ValueError):
            logger.debug(f"Rating value {value!r} out of range, showing it as is")
    return str(value)


class MeasureRepository:
    """
    In-memory lookup of measures per project.

    Data layout:
        {project_key: {metric_name: {"value": ..., "alert": ..., "type": ...}}}
    """

    def __init__(self, measures: dict = None):
        """
        Raises:
            ValueError: if a project or metric entry is not a JSON object
        """
        self._measures = measures or {}
        for project_key, metrics in self._measures.items():
            if not isinstance(metrics, dict):
                raise ValueError(f"Measures of project '{project_key}' must be an object")
            for metric_name, entry in metrics.items():
                if not isinstance(entry, dict):
                    raise ValueError(
                        f"Measure '{metric_name}' of project '{project_key}' must be an object"
                    )

    @classmethod
    def from_file(cls, path) -> 'MeasureRepository':
        """
        Load measures from a JSON file.

        A missing file yields an empty repository (every badge reads
        'not found'). Invalid JSON or a badly shaped project or
        metric entry raises ValueError.
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Measures file not found: {path}")
            return cls()
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Measures file {path} must contain a JSON object")
        logger.info(f"Loaded measures for {len(data)} project(s) from {path}")
        return cls(data)

    def projects(self) -> list:
        return sorted(self._measures)

    def measure_for(self, project_key: str, metric_name: str) -> MeasureHolder:
        """
        Get the measure of a project's metric.

        Returns:
            MeasureHolder, or a 'not found' holder when project or metric is unknown
        """
        entry = self._measures.get(project_key, {}).get(metric_name)
        if entry is None:
            logger.debug(f"No measure '{metric_name}' for project '{project_key}'")
            return MeasureHolder.not_found(metric_name)
        return MeasureHolder.from_measure(
            metric_name,
            entry.get('value'),
            alert_status=entry.get('alert'),
            value_type=entry.get('type'),
        )
