from typing import Dict, Iterable, Mapping

import regex as re

from baybayin_engine.baybayin_types import GlyphEntry, GlyphTableError, LexiconEntry, LexiconError
from baybayin_engine.text_helpers import is_in_baybayin_block

LEXICON_WORD_REGEX = re.compile(r"\p{Latin}+")


class GlyphTableValidator:
    """Validates glyph table entries against the supported inventory."""

    def __init__(self, consonants: Iterable[str], vowels: Iterable[str]):
        self.consonants = set(consonants)
        self.vowels = set(vowels)

    def validate_key(self, key: str) -> None:
        """Validate that a key is a vowel, a consonant, or a consonant + vowel."""
        if not key:
            raise GlyphTableError("Glyph table key cannot be empty")
        if key in self.vowels or key in self.consonants:
            return
        consonant, vowel = key[:-1], key[-1]
        if consonant in self.consonants and vowel in self.vowels:
            return
        raise GlyphTableError(f"Glyph table key outside the supported inventory: {key!r}")

    def validate_glyph(self, key: str, glyph: str) -> None:
        if not glyph:
            raise GlyphTableError(f"Empty glyph for key {key!r}")
        for char in glyph:
            if not is_in_baybayin_block(char):
                raise GlyphTableError(
                    f"Glyph for key {key!r} contains non-Baybayin character U+{ord(char):04X}"
                )

    def validate_entries(self, entries: Iterable[GlyphEntry]) -> None:
        """Validate keys, glyphs and uniqueness of both."""
        seen_keys = set()
        seen_glyphs: Dict[str, str] = {}
        for entry in entries:
            self.validate_key(entry.key)
            self.validate_glyph(entry.key, entry.glyph)
            if entry.key in seen_keys:
                raise GlyphTableError(f"Duplicate glyph table key: {entry.key!r}")
            if entry.glyph in seen_glyphs:
                raise GlyphTableError(
                    f"Duplicate glyph {entry.glyph!r} for keys "
                    f"{seen_glyphs[entry.glyph]!r} and {entry.key!r}"
                )
            seen_keys.add(entry.key)
            seen_glyphs[entry.glyph] = entry.key

    def validate_inverse(self, forward: Mapping[str, str], reverse: Mapping[str, str]) -> None:
        """Validate that the reverse index inverts the forward table exactly."""
        if len(forward) != len(reverse):
            raise GlyphTableError(
                f"Reverse index size {len(reverse)} does not match forward table size {len(forward)}"
            )
        for key, glyph in forward.items():
            if reverse.get(glyph) != key:
                raise GlyphTableError(f"Reverse index drifted for key {key!r}")


class LexiconValidator:
    """Validates whole-word lexicon entries."""

    def validate_entry(self, entry: LexiconEntry) -> None:
        if not entry.word:
            raise LexiconError("Lexicon word cannot be empty")
        if not LEXICON_WORD_REGEX.fullmatch(entry.word):
            raise LexiconError(f"Lexicon word must contain only Latin letters: {entry.word!r}")
        if entry.word != entry.word.lower():
            raise LexiconError(f"Lexicon word must be lowercase: {entry.word!r}")
        if not entry.glyph_sequence:
            raise LexiconError(f"Empty glyph sequence for word {entry.word!r}")
        if not all(is_in_baybayin_block(char) for char in entry.glyph_sequence):
            raise LexiconError(
                f"Glyph sequence for word {entry.word!r} is not pure Baybayin"
            )

    def validate_entries(self, entries: Iterable[LexiconEntry]) -> None:
        seen = set()
        for entry in entries:
            self.validate_entry(entry)
            if entry.word in seen:
                raise LexiconError(f"Duplicate lexicon word: {entry.word!r}")
            seen.add(entry.word)
