"""Font metrics data model and metrics table loading.

The metrics table is a JSON object keyed by normalized family names (see
:func:`fontfallback.core.naming.normalize_font_family`). Each value carries
the capsize-style metrics of one family:

    {
        "inter": {
            "familyName": "Inter",
            "category": "sans-serif",
            "capHeight": 2048,
            "ascent": 2728,
            "descent": -680,
            "lineGap": 0,
            "unitsPerEm": 2816,
            "xHeight": 1536,
            "xWidthAvg": 1335
        }
    }

The packaged table lives in ``fontfallback/data/capsize-font-metrics.json``
and is loaded lazily on first access.
"""

import dataclasses
import functools
import json
import logging
import types
from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import Any

from fontfallback.exceptions import MetricsResourceUnavailableError

logger = logging.getLogger(__name__)

METRICS_RESOURCE = "capsize-font-metrics.json"

SERIF = "serif"
SANS_SERIF = "sans-serif"

# JSON field name -> dataclass attribute
_REQUIRED_INT_FIELDS: dict[str, str] = {
    "ascent": "ascent",
    "descent": "descent",
    "lineGap": "line_gap",
    "unitsPerEm": "units_per_em",
}
_OPTIONAL_INT_FIELDS: dict[str, str] = {
    "capHeight": "cap_height",
    "xHeight": "x_height",
}


@dataclasses.dataclass(frozen=True)
class FontMetrics:
    """Metrics of a single font family.

    Attributes:
        category: Generic family, ``"serif"`` or ``"sans-serif"``.
        ascent: Ascender in font design units.
        descent: Descender in font design units, usually negative.
        line_gap: Line gap in font design units.
        units_per_em: Design units per em.
        x_width_avg: Average glyph advance width in design units.
        family_name: Human readable family name.
        cap_height: Cap height in design units. Not used for adjustments.
        x_height: x-height in design units. Not used for adjustments.
    """

    category: str
    ascent: int
    descent: int
    line_gap: int
    units_per_em: int
    x_width_avg: float
    family_name: str = ""
    cap_height: int = 0
    x_height: int = 0

    @property
    def is_serif(self) -> bool:
        return self.category == SERIF

    @classmethod
    def from_dict(cls, data: Any, key: str = "<entry>") -> "FontMetrics":
        """Create FontMetrics from a camelCase metrics entry.

        Args:
            data: Dictionary in the metrics table format.
            key: Table key, used in error messages.

        Returns:
            FontMetrics instance.

        Raises:
            ValueError: If the entry is not a dictionary, misses a required
                field, or has a field of the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Metrics for '{key}' must be a dictionary, got {type(data).__name__}"
            )

        required_fields = {"category", "xWidthAvg", *_REQUIRED_INT_FIELDS}
        missing_fields = required_fields - set(data.keys())
        if missing_fields:
            raise ValueError(
                f"Metrics for '{key}' missing required fields: "
                f"{', '.join(sorted(missing_fields))}"
            )

        if not isinstance(data["category"], str):
            raise ValueError(
                f"Category for '{key}' must be a string, "
                f"got {type(data['category']).__name__}"
            )

        values: dict[str, Any] = {"category": data["category"]}
        for field, attr in {**_REQUIRED_INT_FIELDS, **_OPTIONAL_INT_FIELDS}.items():
            if field not in data:
                continue
            value = data[field]
            if not _is_int(value):
                raise ValueError(
                    f"Field '{field}' for '{key}' must be an integer, "
                    f"got {type(value).__name__}"
                )
            values[attr] = value

        for field in ("lineGap", "unitsPerEm"):
            if data[field] < 0:
                raise ValueError(
                    f"Field '{field}' for '{key}' must not be negative, "
                    f"got {data[field]}"
                )

        x_width_avg = data["xWidthAvg"]
        if isinstance(x_width_avg, bool) or not isinstance(x_width_avg, (int, float)):
            raise ValueError(
                f"Field 'xWidthAvg' for '{key}' must be a number, "
                f"got {type(x_width_avg).__name__}"
            )
        values["x_width_avg"] = float(x_width_avg)

        family_name = data.get("familyName", "")
        if not isinstance(family_name, str):
            raise ValueError(
                f"Field 'familyName' for '{key}' must be a string, "
                f"got {type(family_name).__name__}"
            )
        values["family_name"] = family_name

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase metrics table format."""
        return {
            "familyName": self.family_name,
            "category": self.category,
            "capHeight": self.cap_height,
            "ascent": self.ascent,
            "descent": self.descent,
            "lineGap": self.line_gap,
            "unitsPerEm": self.units_per_em,
            "xHeight": self.x_height,
            "xWidthAvg": self.x_width_avg,
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclasses.dataclass(frozen=True)
class DefaultFallbackFont:
    """A locally installed font used as the fallback target."""

    name: str
    metrics: FontMetrics


DEFAULT_SANS_SERIF_FONT = DefaultFallbackFont(
    name="Arial",
    metrics=FontMetrics(
        family_name="Arial",
        category=SANS_SERIF,
        cap_height=1467,
        ascent=1854,
        descent=-434,
        line_gap=67,
        units_per_em=2048,
        x_height=1062,
        x_width_avg=934.5116279069767,
    ),
)

DEFAULT_SERIF_FONT = DefaultFallbackFont(
    name="Times New Roman",
    metrics=FontMetrics(
        family_name="Times New Roman",
        category=SERIF,
        cap_height=1356,
        ascent=1825,
        descent=-443,
        line_gap=87,
        units_per_em=2048,
        x_height=916,
        x_width_avg=854.3953488372093,
    ),
)


MetricsTable = Mapping[str, FontMetrics]


def parse_metrics_table(data: Any, source: str = "metrics") -> dict[str, FontMetrics]:
    """Convert a decoded JSON object into a metrics table.

    Args:
        data: Decoded JSON value.
        source: Description of where the data came from, for error messages.

    Returns:
        Dictionary mapping normalized family keys to FontMetrics.

    Raises:
        MetricsResourceUnavailableError: If the structure or any entry is invalid.
    """
    if not isinstance(data, dict):
        raise MetricsResourceUnavailableError(
            f"Font metrics in {source} must be a dictionary, got {type(data).__name__}"
        )

    table: dict[str, FontMetrics] = {}
    for key, entry in data.items():
        try:
            table[key] = FontMetrics.from_dict(entry, key)
        except ValueError as e:
            raise MetricsResourceUnavailableError(
                f"Invalid font metrics in {source}: {e}"
            ) from e
    return table


@functools.lru_cache(maxsize=1)
def load_default_metrics() -> MetricsTable:
    """Load the packaged metrics table on first access.

    Returns:
        Read-only mapping of normalized family keys to FontMetrics, shared
        by every caller.

    Raises:
        MetricsResourceUnavailableError: If the resource is missing or invalid.
    """
    try:
        data_path = files("fontfallback.data").joinpath(METRICS_RESOURCE)
        metrics_json = data_path.read_text(encoding="utf-8")
        data = json.loads(metrics_json)
    except (OSError, ValueError) as e:
        raise MetricsResourceUnavailableError(
            f"Failed to load {METRICS_RESOURCE}: {e}"
        ) from e

    table = parse_metrics_table(data, METRICS_RESOURCE)
    logger.debug(f"Loaded {len(table)} font metrics from resource file")
    return types.MappingProxyType(table)


def load_metrics_from_json(file_path: str | Path) -> dict[str, FontMetrics]:
    """Load a metrics table from a JSON file.

    Args:
        file_path: Path to a JSON file in the metrics table format.

    Returns:
        Dictionary mapping normalized family keys to FontMetrics.

    Raises:
        MetricsResourceUnavailableError: If the file is missing, is not valid
            JSON, or contains invalid entries.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise MetricsResourceUnavailableError(
            f"Font metrics file not found: {file_path}"
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MetricsResourceUnavailableError(
            f"Invalid JSON in font metrics file '{file_path}': {e.msg}"
        ) from e
    except OSError as e:
        raise MetricsResourceUnavailableError(
            f"Failed to read font metrics file '{file_path}': {e}"
        ) from e

    table = parse_metrics_table(data, f"'{file_path}'")
    logger.info(f"Loaded {len(table)} font metrics from '{file_path}'")
    return table
