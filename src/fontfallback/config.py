"""Options for fallback font resolution.

Options can be set via constructor parameters, a request dictionary, or
environment variables. Constructor parameters take precedence over
environment variables.

Environment variables:
    FONTFALLBACK_METRICS_PATH: Path to a custom metrics JSON file
        (default: packaged capsize metrics)
    FONTFALLBACK_ADJUST: Whether to compute metric overrides
        (default: true)
"""

import dataclasses
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fontfallback.core.metrics import (
    MetricsTable,
    load_default_metrics,
    load_metrics_from_json,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_env_bool(key: str, default: bool) -> bool:
    """Parse a boolean environment variable.

    Raises:
        ValueError: If the value is not a recognized boolean.
    """
    value_str = os.environ.get(key)
    if value_str is None:
        return default

    value = value_str.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable {key}={value_str!r} is not a valid boolean")


@dataclasses.dataclass
class FontFallbackOptions:
    """Request options for a single font.

    Attributes:
        font_family: Family name of the requested web font.
        fallback: Manual fallback families. When non-empty, no metrics are
            looked up and these families are used as is.
        adjust_font_fallback: Compute metric overrides for the automatic
            fallback font.
        metrics_path: Optional path to a custom metrics JSON file.

    Example:
        >>> options = FontFallbackOptions("Inter")
        >>> options = FontFallbackOptions("Inter", fallback=["system-ui", "arial"])
        >>> options = FontFallbackOptions.from_dict(
        ...     {"family": "Inter", "adjustFontFallback": False}
        ... )
    """

    font_family: str
    fallback: list[str] | None = None
    adjust_font_fallback: bool = True
    metrics_path: str | Path | None = None

    def __post_init__(self) -> None:
        """Validate the manual fallback list.

        Raises:
            ValueError: If ``fallback`` is not a list or tuple of strings.
        """
        if self.fallback is None:
            return
        if not isinstance(self.fallback, (list, tuple)) or not all(
            isinstance(name, str) for name in self.fallback
        ):
            raise ValueError(
                f"'fallback' must be a list of strings, got {self.fallback!r}"
            )
        self.fallback = list(self.fallback)

    @classmethod
    def default(cls, font_family: str, **kwargs: Any) -> "FontFallbackOptions":
        """Create options with defaults taken from environment variables.

        Raises:
            ValueError: If an environment variable contains an invalid value.
        """
        env: dict[str, Any] = {
            "adjust_font_fallback": _parse_env_bool("FONTFALLBACK_ADJUST", True),
        }
        metrics_path = os.environ.get("FONTFALLBACK_METRICS_PATH")
        if metrics_path:
            env["metrics_path"] = metrics_path
        env.update(kwargs)
        return cls(font_family=font_family, **env)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontFallbackOptions":
        """Create options from a camelCase request dictionary.

        Accepted keys: ``family`` or ``fontFamily`` (required), ``fallback``,
        ``adjustFontFallback`` and ``metricsPath``.

        Raises:
            ValueError: If the family is missing or a field has the wrong type.
        """
        font_family = data.get("family", data.get("fontFamily"))
        if not isinstance(font_family, str) or not font_family:
            raise ValueError("Font options require a non-empty 'family' string")

        fallback = data.get("fallback")
        adjust = data.get("adjustFontFallback", True)
        if not isinstance(adjust, bool):
            raise ValueError(
                f"'adjustFontFallback' must be a boolean, got {type(adjust).__name__}"
            )

        return cls(
            font_family=font_family,
            fallback=fallback,
            adjust_font_fallback=adjust,
            metrics_path=data.get("metricsPath"),
        )

    def has_manual_fallback(self) -> bool:
        return bool(self.fallback)


def metrics_loader(options: FontFallbackOptions) -> Callable[[], MetricsTable]:
    """Return the metrics table loader selected by ``options``."""
    if options.metrics_path is not None:
        path = options.metrics_path
        logger.debug(f"Using custom font metrics from '{path}'")
        return lambda: load_metrics_from_json(path)
    return load_default_metrics
