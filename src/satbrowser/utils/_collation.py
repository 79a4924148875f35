"""String collation helpers.

Provides a locale-independent approximation of a natural-language
collation: accents are folded onto their base letters and case is
ignored on the primary level. Strings that differ only in case sort
lowercase first, as ICU-based ``localeCompare`` does, and the raw string
is the final tie-break so that ordering stays total and deterministic.
"""

from __future__ import annotations

import unicodedata


def collation_key(text: str) -> tuple[str, str, str, str]:
    """Return a sort key approximating a locale-aware string comparison.

    Args:
        text: String to collate.

    Returns:
        Tuple of (primary, secondary, tertiary, raw) keys. The primary key
        is accent- and case-insensitive, the secondary key is
        case-insensitive only, and the tertiary key orders lowercase before
        uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), decomposed.casefold(), decomposed.swapcase(), text)


def compare_collated(a: str, b: str) -> int:
    """Compare two strings using :func:`collation_key`.

    Args:
        a: First string.
        b: Second string.

    Returns:
        -1 if a sorts before b, 0 if they are identical, 1 otherwise.
    """
    ka = collation_key(a)
    kb = collation_key(b)
    if ka < kb:
        return -1
    elif ka > kb:
        return 1
    else:
        return 0
