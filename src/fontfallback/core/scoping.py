"""Scoped font family names.

Generated stylesheets declare fonts under unique family names so that two
requests for the same family with different options never collide.
"""

import hashlib
import json
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fontfallback.config import FontFallbackOptions


class FontFamilyType(Enum):
    WEB_FONT = "web_font"
    FALLBACK = "fallback"


def get_scoped_font_family(
    kind: FontFamilyType, font_family: str, request_hash: int
) -> str:
    """Return a unique family name for a generated ``@font-face``.

    Example:
        >>> get_scoped_font_family(FontFamilyType.FALLBACK, "Roboto Slab", 0xABC)
        '__Roboto_Slab_Fallback_abc'
    """
    if kind is FontFamilyType.FALLBACK:
        font_family = f"{font_family} Fallback"
    return f"__{font_family.replace(' ', '_')}_{request_hash:x}"


def compute_request_hash(options: "FontFallbackOptions") -> int:
    """Stable 32-bit hash of the options that affect the generated fallback."""
    payload = json.dumps(
        [options.font_family, options.fallback, options.adjust_font_fallback],
        separators=(",", ":"),
    )
    digest = hashlib.md5(payload.encode("utf-8")).hexdigest()
    return int(digest[:8], 16)
