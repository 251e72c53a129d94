"""Metrics lookup and fallback font selection."""

import dataclasses
import logging

from fontfallback.core.adjustment import FontAdjustment, compute_adjustment
from fontfallback.core.metrics import (
    DEFAULT_SANS_SERIF_FONT,
    DEFAULT_SERIF_FONT,
    SANS_SERIF,
    SERIF,
    DefaultFallbackFont,
    FontMetrics,
    MetricsTable,
)
from fontfallback.core.naming import normalize_font_family
from fontfallback.exceptions import FontNotFoundError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Fallback:
    """Local fallback font and its optional metric overrides."""

    font_family: str
    adjustment: FontAdjustment | None = None


def resolve_metrics(
    font_family: str, table: MetricsTable
) -> tuple[FontMetrics, DefaultFallbackFont]:
    """Find the metrics of ``font_family`` and pick the fallback font for it.

    Serif families fall back to Times New Roman; every other category,
    including unrecognized ones, falls back to Arial.

    Args:
        font_family: Family name as requested, e.g. ``"Roboto Slab"``.
        table: Metrics table keyed by normalized family names.

    Returns:
        Tuple of the requested font metrics and the default fallback font.

    Raises:
        FontNotFoundError: If the normalized name is not in ``table``.
    """
    key = normalize_font_family(font_family)
    metrics = table.get(key)
    if metrics is None:
        logger.debug(f"Font '{font_family}' (key '{key}') not found in metrics")
        raise FontNotFoundError(font_family, key)

    if metrics.category not in (SERIF, SANS_SERIF):
        logger.debug(
            f"Unrecognized category '{metrics.category}' for '{font_family}', "
            "treating as sans-serif"
        )

    fallback = DEFAULT_SERIF_FONT if metrics.is_serif else DEFAULT_SANS_SERIF_FONT
    logger.debug(f"Resolved '{font_family}' to fallback font '{fallback.name}'")
    return metrics, fallback


def lookup_fallback(font_family: str, table: MetricsTable, adjust: bool) -> Fallback:
    """Resolve the fallback font, computing overrides when ``adjust`` is set.

    Raises:
        FontNotFoundError: If the family is not in ``table``.
        InvalidFontMetricsError: If ``adjust`` is set and the metrics are degenerate.
    """
    metrics, fallback = resolve_metrics(font_family, table)
    adjustment = compute_adjustment(metrics, fallback.metrics) if adjust else None
    return Fallback(font_family=fallback.name, adjustment=adjustment)
