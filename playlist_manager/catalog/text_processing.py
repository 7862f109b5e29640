"""Text processing utilities for video titles and search queries."""

import re
import unicodedata
from typing import Set

# Ligatures and letters that NFD decomposition does not reduce to ASCII
TRANSLITERATION_MAP = {
    'œ': 'oe', 'Œ': 'OE', 'æ': 'ae', 'Æ': 'AE',
    'ß': 'ss', 'ø': 'o', 'Ø': 'O', 'đ': 'd', 'Đ': 'D',
    'ł': 'l', 'Ł': 'L', 'þ': 'th', 'Þ': 'TH',
}

KEYWORD_SEPARATORS = re.compile(r'[\s-]+')
NON_ALPHANUMERIC = re.compile(r'[^a-zA-Z0-9]')


def transliterate(text: str) -> str:
    """
    Reduce text to the base latin alphabet.

    Args:
        text: Input string that may contain accented characters.

    Returns:
        String with accents removed and ligatures expanded.

    Examples:
        >>> transliterate("café")
        'cafe'
        >>> transliterate("cœur")
        'coeur'
    """
    if not text:
        return ""

    for special, plain in TRANSLITERATION_MAP.items():
        text = text.replace(special, plain)

    text = unicodedata.normalize('NFD', text)
    return ''.join(c for c in text if unicodedata.category(c) != 'Mn')


def remove_symbols_and_case(text: str) -> str:
    """
    Normalize a string for comparison.

    Transliterates, drops every non-alphanumeric character (spaces included)
    and lowercases.

    Examples:
        >>> remove_symbols_and_case("Go Tutorial!")
        'gotutorial'
    """
    return NON_ALPHANUMERIC.sub('', transliterate(text)).lower()


def keyword_set(title: str) -> Set[str]:
    """
    Split a title into its set of normalized keywords.

    The title is split on whitespace and hyphens, each piece is normalized
    with remove_symbols_and_case, and empty pieces are dropped.

    Args:
        title: Video title or search query.

    Returns:
        Set of keyword tokens.

    Examples:
        >>> sorted(keyword_set("Spider-Man: Café Édition"))
        ['cafe', 'edition', 'man', 'spider']
    """
    if not title:
        return set()

    tokens = (remove_symbols_and_case(piece) for piece in KEYWORD_SEPARATORS.split(title))
    return {token for token in tokens if token}
