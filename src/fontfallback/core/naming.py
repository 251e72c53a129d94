"""Font family name normalization.

Metrics tables are keyed by camelCase identifiers derived from the family
name, e.g. ``"Roboto Slab"`` is stored under ``"robotoSlab"``.
"""

import unicodedata

# Combining marks and connector punctuation, e.g. U+0301 and "_"
_WORD_CATEGORIES = frozenset({"Mn", "Mc", "Pc"})


def _is_word_char(char: str) -> bool:
    return char.isalnum() or unicodedata.category(char) in _WORD_CATEGORIES


def _is_boundary(text: str, index: int) -> bool:
    """Whether the character at ``index`` starts a new word fragment.

    A fragment starts at a leading word character, at any ASCII uppercase
    letter, or at a word character that follows a non-word character.
    """
    char = text[index]
    if "A" <= char <= "Z":
        return True
    if not _is_word_char(char):
        return False
    return index == 0 or not _is_word_char(text[index - 1])


def normalize_font_family(font_family: str) -> str:
    """Convert a font family name into its metrics table key.

    The first fragment start is lower-cased and every later one upper-cased,
    then whitespace is dropped.

    Example:
        >>> normalize_font_family("Roboto Slab")
        'robotoSlab'
        >>> normalize_font_family("Inter")
        'inter'
    """
    chars: list[str] = []
    first = True
    for index, char in enumerate(font_family):
        if _is_boundary(font_family, index):
            char = char.lower() if first else char.upper()
            first = False
        if not char.isspace():
            chars.append(char)
    return "".join(chars)
