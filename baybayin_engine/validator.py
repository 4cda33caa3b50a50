"""Well-formedness checks and advisory diagnostics for conversions."""

import logging
from typing import List

import regex as re

from baybayin_engine.baybayin_types import ConversionDiagnostic
from baybayin_engine.default_mappings import ALLOWED_PUNCTUATION, LOSSY_LETTER_ADVISORIES
from baybayin_engine.enums import BaybayinCharType, DiagnosticSeverity
from baybayin_engine.text_helpers import contains_baybayin, contains_latin, find_latin_letters

logger = logging.getLogger(__name__)

# Baybayin block, whitespace and the punctuation allowed between words
VALID_BAYBAYIN_REGEX = re.compile(
    r"[\u1700-\u171F\s" + re.escape(ALLOWED_PUNCTUATION) + r"]*"
)

NON_BAYBAYIN_INPUT_MESSAGE = "Input contains non-Baybayin characters"


def is_valid_baybayin(text: str) -> bool:
    """
    Validate that a string contains only Baybayin, whitespace and allowed punctuation.

    Args:
        text: The text to validate

    Returns:
        True if every character is allowed (the empty string is valid)
    """
    return VALID_BAYBAYIN_REGEX.fullmatch(text) is not None


def diagnostics(original: str, converted: str) -> List[ConversionDiagnostic]:
    """
    Gets suggestions for improving a Latin to Baybayin conversion.

    Args:
        original: The text the caller submitted
        converted: The conversion result

    Returns:
        Leftover-letter warning, mixed-script note, then one note per
        lossy letter found in ``original``. Never alters the conversion.
    """
    results: List[ConversionDiagnostic] = []

    leftovers = find_latin_letters(converted)
    if leftovers:
        results.append(ConversionDiagnostic(
            DiagnosticSeverity.WARNING,
            f"Some characters could not be converted: {', '.join(leftovers)}",
        ))

    if contains_baybayin(converted) and contains_latin(converted):
        results.append(ConversionDiagnostic(
            DiagnosticSeverity.INFO,
            "Text contains both Baybayin and Latin characters",
        ))

    lowered = original.lower()
    for letter, _replacement, message in LOSSY_LETTER_ADVISORIES:
        if letter in lowered:
            results.append(ConversionDiagnostic(DiagnosticSeverity.INFO, message))

    return results


def structure_diagnostics(text: str) -> List[ConversionDiagnostic]:
    """
    Report kudlit and virama marks that do not directly follow a consonant.

    The reverse segmenter still converts such text; these are advisory.
    """
    results: List[ConversionDiagnostic] = []
    previous = BaybayinCharType.UNKNOWN
    for i, char in enumerate(text):
        char_type = BaybayinCharType.get_type(char)
        if char_type in (BaybayinCharType.VOWEL_MARK, BaybayinCharType.VIRAMA):
            if previous != BaybayinCharType.CONSONANT:
                mark = "Vowel mark" if char_type == BaybayinCharType.VOWEL_MARK else "Virama"
                logger.debug(f"{mark} not following a consonant at position {i}")
                results.append(ConversionDiagnostic(
                    DiagnosticSeverity.ERROR,
                    f"{mark} not following a consonant at position {i}",
                ))
        previous = char_type
    return results
