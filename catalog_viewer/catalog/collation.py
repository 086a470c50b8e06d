"""Locale-aware string ordering for name sorts.

Approximates the root collation browsers use for ``localeCompare``:
whitespace, punctuation and symbols sort ahead of digits, and digits
ahead of letters. Letters compare by base character first, so "banana"
falls between "Apple" and "Cherry"; accents break ties next; case breaks
ties last, with lowercase ahead of uppercase.
"""

import unicodedata

# Root collation groups: whitespace, punctuation, symbols, digits, then letters.
_GROUP_RANKS = {"Z": 0, "C": 0, "P": 1, "S": 2, "N": 3}
_LETTER_RANK = 4


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _weight(ch: str) -> tuple[int, str]:
    return _GROUP_RANKS.get(unicodedata.category(ch)[0], _LETTER_RANK), ch


def collation_key(text: str) -> tuple[tuple[tuple[int, str], ...], str, tuple[int, ...]]:
    """Build a sort key that orders strings alphabetically.

    Args:
        text: String to order.

    Returns:
        Tuple of (grouped base characters, accented letters, case weights).
    """
    normalized = unicodedata.normalize("NFKC", text)
    primary = tuple(_weight(ch) for ch in _strip_accents(normalized).casefold())
    secondary = normalized.casefold()
    tertiary = tuple(1 if ch.isupper() else 0 for ch in normalized)
    return primary, secondary, tertiary
