"""
services/text_normalizer.py

Canonical form of answer text used before equality comparison.
"""

import re
from typing import List, Optional

_WHITESPACE_RE = re.compile(r"\s+")
# Standalone punctuation; a mark right after a digit stays ("3.14", "1,000")
_PUNCTUATION_RE = re.compile(r"(?<!\d)[.,;:!?]")

_QUOTE_MAP = str.maketrans({
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote, apostrophe
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
})


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: Optional[str]) -> str:
    """
    Lower-case, trim, collapse whitespace, strip standalone punctuation and
    straighten typographic quotes. None normalizes to "".

    Whitespace is collapsed again after the punctuation pass so that
    "paris !" becomes "paris" rather than "paris ", which keeps
    normalize(normalize(s)) == normalize(s).
    """
    if text is None:
        return ""

    normalized = _collapse(text.lower())
    normalized = _PUNCTUATION_RE.sub("", normalized)
    normalized = _collapse(normalized)
    return normalized.translate(_QUOTE_MAP)


def split_list_items(text: Optional[str], separator: str = ",") -> List[str]:
    """Split a comma-separated list answer into trimmed items."""
    if not text:
        return []
    items = (item.strip() for item in text.split(separator))
    # blank items are dropped, so "A,,B," has two items and never inflates the denominator
    return [item for item in items if item]
