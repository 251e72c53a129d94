"""CSS serialization of fallback fonts."""

import logging
import re

from fontfallback.core.fallback import (
    AutomaticFallback,
    FallbackUnavailable,
    FontFallback,
    ManualFallback,
)

logger = logging.getLogger(__name__)

GENERIC_FAMILIES = frozenset(
    {
        "serif",
        "sans-serif",
        "monospace",
        "cursive",
        "fantasy",
        "system-ui",
        "ui-serif",
        "ui-sans-serif",
        "ui-monospace",
        "ui-rounded",
        "emoji",
        "math",
        "fangsong",
    }
)


def quote_family(font_family: str) -> str:
    """Quote a family name for use in CSS, leaving generic keywords bare."""
    if font_family in GENERIC_FAMILIES:
        return font_family
    escaped = font_family.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _percent(value: float) -> str:
    return f"{value * 100:.2f}%"


def to_font_face_css(fallback: AutomaticFallback) -> str:
    """Generate the ``@font-face`` rule for an automatic fallback.

    Example:
        >>> print(to_font_face_css(fallback))
        @font-face {
          font-family: '__Inter_Fallback_1a2b3c';
          src: local("Arial");
          ascent-override: 93.24%;
          descent-override: 23.24%;
          line-gap-override: 0.00%;
          size-adjust: 103.89%;
        }
    """
    lines = [
        "@font-face {",
        f"  font-family: {quote_family(fallback.scoped_font_family)};",
        f'  src: local("{fallback.local_font_family}");',
    ]
    adjustment = fallback.adjustment
    if adjustment is not None:
        lines.extend(
            [
                f"  ascent-override: {_percent(adjustment.ascent)};",
                f"  descent-override: {_percent(abs(adjustment.descent))};",
                f"  line-gap-override: {_percent(adjustment.line_gap)};",
                f"  size-adjust: {_percent(adjustment.size_adjust)};",
            ]
        )
    lines.append("}")
    return "\n".join(lines)


def font_family_chain(primary_font_family: str, fallback: FontFallback) -> list[str]:
    """Return the families for the ``font-family`` declaration, in order."""
    families = [primary_font_family]
    if isinstance(fallback, ManualFallback):
        families.extend(fallback.font_families)
    elif isinstance(fallback, AutomaticFallback):
        families.append(fallback.scoped_font_family)
    elif isinstance(fallback, FallbackUnavailable):
        logger.debug(f"No fallback font available for '{primary_font_family}'")
    return families


def font_family_declaration(primary_font_family: str, fallback: FontFallback) -> str:
    """Generate the ``font-family`` declaration for a font request."""
    chain = font_family_chain(primary_font_family, fallback)
    return f"font-family: {', '.join(quote_family(name) for name in chain)};"


def class_selector(font_family: str) -> str:
    """Build a class selector from a scoped family name.

    Example:
        >>> class_selector("__Inter_1a2b")
        '.__Inter_1a2b'
    """
    return "." + re.sub(r"[^\w-]", "_", font_family)


def to_stylesheet(
    primary_font_family: str, fallback: FontFallback, selector: str | None = None
) -> str:
    """Generate the fallback ``@font-face`` rule (if any) and a rule using it.

    Args:
        primary_font_family: Scoped family name of the web font.
        fallback: Fallback resolved for the web font.
        selector: Selector of the rule carrying the ``font-family``
            declaration. Defaults to a class named after the web font.
    """
    if selector is None:
        selector = class_selector(primary_font_family)
    rules: list[str] = []
    if isinstance(fallback, AutomaticFallback):
        rules.append(to_font_face_css(fallback))
    rules.append(
        f"{selector} {{\n  "
        + font_family_declaration(primary_font_family, fallback)
        + "\n}"
    )
    return "\n\n".join(rules)
