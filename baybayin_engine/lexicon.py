"""Whole-word lexicon of precomposed Baybayin spellings."""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from baybayin_engine.baybayin_types import LexiconEntry
from baybayin_engine.default_mappings import COMMON_WORDS
from baybayin_engine.table_validator import LexiconValidator

logger = logging.getLogger(__name__)


class Lexicon:
    """
    Exact whole-word lookup in both directions.

    Latin lookups are case-insensitive. When several words share a glyph
    sequence, ``reverse_lookup`` returns the one inserted first.
    """

    def __init__(self, words: Optional[Union[Mapping[str, str], Iterable[LexiconEntry]]] = None):
        if words is None:
            words = COMMON_WORDS
        if isinstance(words, Mapping):
            entries = tuple(LexiconEntry(word, glyphs) for word, glyphs in words.items())
        else:
            entries = tuple(words)

        LexiconValidator().validate_entries(entries)

        forward = {}
        reverse = {}
        for entry in entries:
            forward[entry.word] = entry.glyph_sequence
            reverse.setdefault(entry.glyph_sequence, entry.word)
        if len(reverse) < len(forward):
            logger.debug(
                f"{len(forward) - len(reverse)} lexicon words share a glyph sequence; "
                "reverse lookup keeps the first"
            )

        self._entries: Tuple[LexiconEntry, ...] = entries
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)
        logger.debug(f"Built lexicon with {len(entries)} words")

    @property
    def entries(self) -> Tuple[LexiconEntry, ...]:
        return self._entries

    def lookup(self, word: str) -> Optional[str]:
        """Return the precomposed spelling of ``word``, or None when it is not a known word."""
        if not word:
            return None
        return self._forward.get(word.lower())

    def reverse_lookup(self, glyph_sequence: str) -> Optional[str]:
        if not glyph_sequence:
            return None
        return self._reverse.get(glyph_sequence)

    def words(self) -> Tuple[str, ...]:
        return tuple(self._forward)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LexiconEntry]:
        return iter(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._forward
