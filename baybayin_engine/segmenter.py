"""
Latin <-> Baybayin segmentation.

The forward direction walks each word with a cursor and tries an ordered
cascade of syllable rules at every position. The first rule that matches wins,
and the order (digraph before single consonant, consonant + vowel before the
killed consonant, standalone vowel last) makes that the longest match.

The reverse direction is a greedy longest-match scan over the lexicon and
glyph table reverse entries.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

import regex as re

from baybayin_engine.baybayin_types import GlyphTableError
from baybayin_engine.default_mappings import CONSONANTS, VOWEL_LETTERS
from baybayin_engine.glyph_table import GlyphTable
from baybayin_engine.lexicon import Lexicon
from baybayin_engine.text_helpers import (
    is_in_baybayin_block,
    normalize_input,
    split_whitespace_runs,
    strip_trailing_punctuation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyllableRule:
    """One step of the segmentation cascade."""

    name: str
    pattern: "re.Pattern"

    def match(self, word: str, pos: int) -> Optional[Tuple[str, int]]:
        """
        Try the rule at ``pos``.

        Returns:
            (glyph table key, number of characters consumed), or None
        """
        found = self.pattern.match(word, pos)
        if not found:
            return None
        groups = found.groupdict()
        key = groups.get("consonant") or ""
        if groups.get("vowel"):
            key += VOWEL_LETTERS[groups["vowel"]]
        return key, found.end() - pos


def build_syllable_rules(
    consonants: Sequence[str] = tuple(CONSONANTS),
    vowel_letters: Mapping[str, str] = VOWEL_LETTERS,
) -> Tuple[SyllableRule, ...]:
    """Build the cascade in its fixed precedence order."""
    digraphs = sorted((c for c in consonants if len(c) > 1), key=len, reverse=True)
    singles = "".join(re.escape(c) for c in consonants if len(c) == 1)
    vowels = "".join(re.escape(v) for v in vowel_letters)

    rules: List[SyllableRule] = []
    if digraphs:
        digraph_alt = "|".join(re.escape(d) for d in digraphs)
        rules.append(SyllableRule(
            "digraph_vowel", re.compile(rf"(?P<consonant>{digraph_alt})(?P<vowel>[{vowels}])")
        ))
        rules.append(SyllableRule(
            "digraph_killed", re.compile(rf"(?P<consonant>{digraph_alt})")
        ))
    rules.append(SyllableRule(
        "consonant_vowel", re.compile(rf"(?P<consonant>[{singles}])(?P<vowel>[{vowels}])")
    ))
    rules.append(SyllableRule(
        "consonant_killed", re.compile(rf"(?P<consonant>[{singles}])")
    ))
    rules.append(SyllableRule(
        "standalone_vowel", re.compile(rf"(?P<vowel>[{vowels}])")
    ))
    return tuple(rules)


class ForwardSegmenter:
    """Converts Latin-alphabet Filipino text to Baybayin."""

    def __init__(
        self,
        glyph_table: GlyphTable,
        lexicon: Lexicon,
        rules: Optional[Sequence[SyllableRule]] = None,
    ):
        self.glyph_table = glyph_table
        self.lexicon = lexicon
        self.rules = tuple(rules) if rules is not None else build_syllable_rules()
        self._check_rule_keys()

    def _check_rule_keys(self) -> None:
        """Every key the cascade can produce must exist in the glyph table."""
        vowel_keys = set(VOWEL_LETTERS.values())
        expected = set(vowel_keys)
        for consonant in CONSONANTS:
            expected.add(consonant)
            expected.update(consonant + vowel for vowel in vowel_keys)
        missing = sorted(key for key in expected if key not in self.glyph_table)
        if missing:
            raise GlyphTableError(f"Glyph table is missing keys used by the segmenter: {missing}")

    def segment(self, text: str, use_word_mapping: bool = True, fold_diacritics: bool = False) -> str:
        """
        Convert ``text`` to Baybayin.

        Whitespace runs are kept verbatim; anything no rule covers is copied
        through unchanged.
        """
        if not text:
            return ""
        normalized = normalize_input(text, fold=fold_diacritics)
        parts = []
        for chunk in split_whitespace_runs(normalized):
            if chunk.isspace():
                parts.append(chunk)
            else:
                parts.append(self.convert_token(chunk, use_word_mapping))
        return "".join(parts)

    def convert_token(self, token: str, use_word_mapping: bool = True) -> str:
        """Convert one whitespace-free, already normalized token."""
        if use_word_mapping:
            stem, punctuation = strip_trailing_punctuation(token)
            glyphs = self.lexicon.lookup(stem)
            if glyphs is not None:
                return glyphs + punctuation
        return self.segment_word(token)

    def segment_word(self, word: str) -> str:
        """Apply the rule cascade to a single normalized word."""
        result = []
        pos = 0
        while pos < len(word):
            char = word[pos]
            # Already converted spans pass through
            if is_in_baybayin_block(char):
                result.append(char)
                pos += 1
                continue

            for rule in self.rules:
                found = rule.match(word, pos)
                if found is None:
                    continue
                key, consumed = found
                result.append(self.glyph_table.lookup_forward(key))
                pos += consumed
                break
            else:
                result.append(char)
                pos += 1
        return "".join(result)


class ReverseSegmenter:
    """Recovers approximate Latin text from Baybayin."""

    def __init__(self, glyph_table: GlyphTable, lexicon: Lexicon):
        # Lexicon first so whole-word spellings win ties against glyph entries
        candidates = {}
        for entry in lexicon:
            candidates.setdefault(entry.glyph_sequence, entry.word)
        for entry in glyph_table:
            candidates.setdefault(entry.glyph, entry.key)
        self._candidates = MappingProxyType(candidates)
        self._max_span = max((len(glyphs) for glyphs in candidates), default=0)
        logger.debug(
            f"Reverse segmenter ready with {len(candidates)} candidates, longest span {self._max_span}"
        )

    def candidates(self) -> Tuple[Tuple[str, str], ...]:
        """Candidate ``(glyphs, latin)`` pairs in the order they are tried."""
        return tuple(sorted(self._candidates.items(), key=lambda item: len(item[0]), reverse=True))

    def segment(self, text: str) -> str:
        if not text:
            return ""
        result = []
        pos = 0
        length = len(text)
        while pos < length:
            for span in range(min(self._max_span, length - pos), 0, -1):
                latin = self._candidates.get(text[pos:pos + span])
                if latin is not None:
                    result.append(latin)
                    pos += span
                    break
            else:
                result.append(text[pos])
                pos += 1
        return "".join(result)
