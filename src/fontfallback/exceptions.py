"""Exceptions raised while resolving fallback fonts.

Loaders and the resolver raise these; :func:`fontfallback.get_font_fallback`
catches them and degrades to :class:`~fontfallback.FallbackUnavailable`.
"""


class FontFallbackError(Exception):
    """Base class for fallback resolution errors."""


class MetricsResourceUnavailableError(FontFallbackError):
    """The font metrics table could not be loaded or parsed."""


class FontNotFoundError(FontFallbackError, KeyError):
    """The requested font family is not in the metrics table."""

    def __init__(self, font_family: str, key: str) -> None:
        super().__init__(font_family)
        self.font_family = font_family
        self.key = key

    def __str__(self) -> str:
        return f"Font '{self.font_family}' not found in metrics (key '{self.key}')"


class InvalidFontMetricsError(FontFallbackError, ValueError):
    """Metrics cannot produce finite override values."""
