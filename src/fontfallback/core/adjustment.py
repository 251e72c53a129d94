"""Metric override calculation for fallback fonts.

The fallback font is scaled so that its average glyph width matches the
requested font, then the requested font's vertical metrics are expressed
relative to that scaled em. The results map directly onto the CSS
``size-adjust``, ``ascent-override``, ``descent-override`` and
``line-gap-override`` descriptors.
"""

import dataclasses
import math

from fontfallback.core.metrics import FontMetrics
from fontfallback.exceptions import InvalidFontMetricsError


@dataclasses.dataclass(frozen=True)
class FontAdjustment:
    """Override values for a fallback ``@font-face``.

    Attributes:
        ascent: Ascent as a fraction of the em.
        descent: Descent as a fraction of the em, negative below the baseline.
        line_gap: Line gap as a fraction of the em.
        size_adjust: Scale factor applied to the fallback font.
    """

    ascent: float
    descent: float
    line_gap: float
    size_adjust: float

    def to_dict(self) -> dict[str, float]:
        return {
            "ascent": self.ascent,
            "descent": self.descent,
            "lineGap": self.line_gap,
            "sizeAdjust": self.size_adjust,
        }


def compute_adjustment(requested: FontMetrics, fallback: FontMetrics) -> FontAdjustment:
    """Compute override values that make ``fallback`` resemble ``requested``.

    Args:
        requested: Metrics of the web font being loaded.
        fallback: Metrics of the local fallback font.

    Returns:
        FontAdjustment for the fallback ``@font-face``.

    Raises:
        InvalidFontMetricsError: If either font has a zero ``units_per_em`` or
            ``x_width_avg``, or the result is not finite.
    """
    for label, metrics in (("requested", requested), ("fallback", fallback)):
        if metrics.units_per_em == 0:
            raise InvalidFontMetricsError(
                f"{label.capitalize()} font has zero unitsPerEm"
            )
        if metrics.x_width_avg == 0:
            raise InvalidFontMetricsError(
                f"{label.capitalize()} font has zero xWidthAvg"
            )

    main_font_avg_width = requested.x_width_avg / requested.units_per_em
    fallback_font_avg_width = fallback.x_width_avg / fallback.units_per_em
    size_adjust = main_font_avg_width / fallback_font_avg_width

    ascent = requested.ascent / (requested.units_per_em * size_adjust)
    descent = requested.descent / (requested.units_per_em * size_adjust)
    line_gap = requested.line_gap / (requested.units_per_em * size_adjust)

    adjustment = FontAdjustment(
        ascent=ascent,
        descent=descent,
        line_gap=line_gap,
        size_adjust=size_adjust,
    )
    if not all(math.isfinite(value) for value in dataclasses.astuple(adjustment)):
        raise InvalidFontMetricsError(f"Non-finite font adjustment: {adjustment}")
    return adjustment
