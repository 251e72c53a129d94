"""Fallback font resolution for a web font request.

Resolution steps:
1. A non-empty manual fallback list is returned untouched.
2. The metrics table is loaded. If that fails, no fallback is generated.
3. The family is looked up and, when enabled, metric overrides are computed.
   Missing or degenerate metrics are reported through the issue sink.

None of these steps raise: every failure degrades to
:class:`FallbackUnavailable`.
"""

import dataclasses
import logging
from collections.abc import Callable
from typing import Union

from fontfallback.config import FontFallbackOptions, metrics_loader
from fontfallback.core.adjustment import FontAdjustment
from fontfallback.core.metrics import MetricsTable
from fontfallback.core.resolver import lookup_fallback
from fontfallback.core.scoping import (
    FontFamilyType,
    compute_request_hash,
    get_scoped_font_family,
)
from fontfallback.exceptions import FontNotFoundError, InvalidFontMetricsError
from fontfallback.issues import FontIssue, IssueSeverity, IssueSink, log_issue

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ManualFallback:
    """User supplied fallback families."""

    font_families: list[str]


@dataclasses.dataclass(frozen=True)
class AutomaticFallback:
    """Fallback derived from the metrics table.

    Attributes:
        scoped_font_family: Unique family name for the generated ``@font-face``.
        local_font_family: Locally installed font the face points to.
        adjustment: Metric overrides, or None when adjustment is disabled.
    """

    scoped_font_family: str
    local_font_family: str
    adjustment: FontAdjustment | None = None


@dataclasses.dataclass(frozen=True)
class FallbackUnavailable:
    """No fallback could be generated."""


FontFallback = Union[ManualFallback, AutomaticFallback, FallbackUnavailable]

ScopeFontFamily = Callable[[FontFamilyType, str, int], str]


def get_font_fallback(
    options: FontFallbackOptions,
    load_metrics: Callable[[], MetricsTable] | None = None,
    emit_issue: IssueSink = log_issue,
    request_hash: int | None = None,
    scope_font_family: ScopeFontFamily = get_scoped_font_family,
    context: str | None = None,
) -> FontFallback:
    """Resolve the fallback for a font request.

    Args:
        options: Request options.
        load_metrics: Callable returning the metrics table. Defaults to the
            loader selected by ``options.metrics_path``.
        emit_issue: Sink for user-facing diagnostics.
        request_hash: Hash used to scope the fallback family name. Computed
            from ``options`` when omitted.
        scope_font_family: Generator for the scoped family name.
        context: Optional path or description attached to issues.

    Returns:
        ManualFallback, AutomaticFallback or FallbackUnavailable.
    """
    if options.has_manual_fallback():
        logger.debug(f"Using manual fallback for '{options.font_family}'")
        return ManualFallback(list(options.fallback or []))

    if load_metrics is None:
        load_metrics = metrics_loader(options)

    try:
        table = load_metrics()
    except Exception as e:
        logger.warning(f"Failed to load font metrics: {e}. Skipping fallback font.")
        return FallbackUnavailable()

    try:
        fallback = lookup_fallback(
            options.font_family, table, options.adjust_font_fallback
        )
    except FontNotFoundError:
        emit_issue(
            FontIssue(
                title=(
                    "Failed to find font override values for font "
                    f"`{options.font_family}`"
                ),
                description="Skipping generating a fallback font.",
                severity=IssueSeverity.WARNING,
                path=context,
            )
        )
        return FallbackUnavailable()
    except InvalidFontMetricsError as e:
        emit_issue(
            FontIssue(
                title=f"Invalid font metrics for font `{options.font_family}`: {e}",
                description="Skipping generating a fallback font.",
                severity=IssueSeverity.WARNING,
                path=context,
            )
        )
        return FallbackUnavailable()

    if request_hash is None:
        request_hash = compute_request_hash(options)

    return AutomaticFallback(
        scoped_font_family=scope_font_family(
            FontFamilyType.FALLBACK, options.font_family, request_hash
        ),
        local_font_family=fallback.font_family,
        adjustment=fallback.adjustment,
    )
