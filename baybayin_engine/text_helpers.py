#!/usr/bin/env python3
"""
text_helpers.py

Utility functions for text processing shared by the segmenters and the advisor.
"""

import unicodedata
from typing import List, Tuple

import regex as re  # For Unicode script properties (\p{Latin})
import unidecode

from baybayin_engine.default_mappings import (
    BAYBAYIN_BLOCK_END,
    BAYBAYIN_BLOCK_START,
    TRAILING_PUNCTUATION,
)

WHITESPACE_RUN_REGEX = re.compile(r"(\s+)")
LATIN_LETTER_REGEX = re.compile(r"\p{Latin}")
NON_ASCII_LATIN_REGEX = re.compile(r"(?![\x00-\x7F])\p{Latin}")
BAYBAYIN_CHAR_REGEX = re.compile(r"[\u1700-\u171F]")


def is_in_baybayin_block(char: str) -> bool:
    """Check whether a single character lies in the Baybayin block (U+1700 to U+171F)."""
    if not char or len(char) != 1:
        return False
    return BAYBAYIN_BLOCK_START <= ord(char) <= BAYBAYIN_BLOCK_END


def contains_baybayin(text: str) -> bool:
    """Check if a string contains any Baybayin characters."""
    if not text:
        return False
    return BAYBAYIN_CHAR_REGEX.search(text) is not None


def contains_latin(text: str) -> bool:
    if not text:
        return False
    return LATIN_LETTER_REGEX.search(text) is not None


def find_latin_letters(text: str) -> List[str]:
    """
    Return the distinct Latin letters in ``text`` in first-seen order.

    Accented letters (``é``, ``ñ``) count as Latin letters; digits and
    punctuation do not.
    """
    if not text:
        return []
    seen = {}
    for match in LATIN_LETTER_REGEX.finditer(text):
        seen.setdefault(match.group(), None)
    return list(seen)


def fold_diacritics(text: str) -> str:
    """
    Fold accented Latin letters to plain ASCII (``ñ`` -> ``n``, ``é`` -> ``e``).

    Only non-ASCII Latin letters are touched, so Baybayin, digits and other
    scripts pass through unchanged.
    """
    if not text:
        return ""
    return NON_ASCII_LATIN_REGEX.sub(lambda m: unidecode.unidecode(m.group()), text)


def normalize_input(text: str, fold: bool = False) -> str:
    """
    Normalize Latin input before segmentation: NFC, optional folding, lowercase.

    Case and accents cannot be recovered by the reverse conversion.
    """
    if not text:
        return ""
    normalized = unicodedata.normalize("NFC", text)
    if fold:
        normalized = fold_diacritics(normalized)
    return normalized.lower()


def split_whitespace_runs(text: str) -> List[str]:
    """
    Split text into alternating tokens and whitespace runs.

    Joining the result gives back ``text`` exactly.
    """
    if not text:
        return []
    return [chunk for chunk in WHITESPACE_RUN_REGEX.split(text) if chunk]


def strip_trailing_punctuation(token: str) -> Tuple[str, str]:
    """
    Split a token into its stem and trailing punctuation.

    Returns:
        (stem, punctuation) such that ``stem + punctuation == token``
    """
    stem = token.rstrip(TRAILING_PUNCTUATION)
    return stem, token[len(stem):]
