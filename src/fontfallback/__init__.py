from fontfallback.config import FontFallbackOptions, metrics_loader
from fontfallback.core.adjustment import FontAdjustment, compute_adjustment
from fontfallback.core.fallback import (
    AutomaticFallback,
    FallbackUnavailable,
    FontFallback,
    ManualFallback,
    get_font_fallback,
)
from fontfallback.core.metrics import (
    DEFAULT_SANS_SERIF_FONT,
    DEFAULT_SERIF_FONT,
    DefaultFallbackFont,
    FontMetrics,
    MetricsTable,
    load_default_metrics,
    load_metrics_from_json,
)
from fontfallback.core.naming import normalize_font_family
from fontfallback.core.resolver import Fallback, lookup_fallback, resolve_metrics
from fontfallback.core.scoping import (
    FontFamilyType,
    compute_request_hash,
    get_scoped_font_family,
)
from fontfallback.exceptions import (
    FontFallbackError,
    FontNotFoundError,
    InvalidFontMetricsError,
    MetricsResourceUnavailableError,
)
from fontfallback.issues import FontIssue, IssueSeverity, log_issue
from fontfallback.version import __version__ as __version__

__all__ = [
    "AutomaticFallback",
    "DEFAULT_SANS_SERIF_FONT",
    "DEFAULT_SERIF_FONT",
    "DefaultFallbackFont",
    "Fallback",
    "FallbackUnavailable",
    "FontAdjustment",
    "FontFallback",
    "FontFallbackError",
    "FontFallbackOptions",
    "FontFamilyType",
    "FontIssue",
    "FontMetrics",
    "FontNotFoundError",
    "InvalidFontMetricsError",
    "IssueSeverity",
    "ManualFallback",
    "MetricsResourceUnavailableError",
    "MetricsTable",
    "compute_adjustment",
    "compute_request_hash",
    "get_font_fallback",
    "get_scoped_font_family",
    "load_default_metrics",
    "load_metrics_from_json",
    "log_issue",
    "lookup_fallback",
    "metrics_loader",
    "normalize_font_family",
    "resolve_metrics",
]
