"""Bidirectional glyph table for Baybayin syllables."""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from baybayin_engine.baybayin_types import GlyphEntry
from baybayin_engine.default_mappings import (
    CONSONANTS,
    INHERENT_VOWEL,
    KUDLIT,
    VIRAMA,
    VOWELS,
)
from baybayin_engine.table_validator import GlyphTableValidator

logger = logging.getLogger(__name__)


def build_default_entries() -> Tuple[GlyphEntry, ...]:
    """
    Generate the glyph entries from the vowel and consonant inventories.

    Each consonant yields four entries: inherent ``a`` (bare base), ``i`` and
    ``u`` (base + kudlit) and the killed form (base + virama).
    """
    entries = [GlyphEntry(vowel, char) for vowel, char in VOWELS.items()]
    for consonant, base in CONSONANTS.items():
        entries.append(GlyphEntry(consonant + INHERENT_VOWEL, base))
        for vowel, mark in KUDLIT.items():
            entries.append(GlyphEntry(consonant + vowel, base + mark))
        entries.append(GlyphEntry(consonant, base + VIRAMA))
    return tuple(entries)


class GlyphTable:
    """
    Maps syllable keys (``"ka"``, ``"ng"``, ``"u"``) to Baybayin glyphs and back.

    The reverse index is derived from the forward entries at construction time
    and both are checked before the table is usable; afterwards the table is
    read-only.
    """

    def __init__(self, entries: Optional[Iterable[GlyphEntry]] = None):
        self._entries = tuple(entries) if entries is not None else build_default_entries()

        validator = GlyphTableValidator(CONSONANTS, VOWELS)
        validator.validate_entries(self._entries)

        forward = {entry.key: entry.glyph for entry in self._entries}
        reverse = {glyph: key for key, glyph in forward.items()}
        validator.validate_inverse(forward, reverse)

        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)
        logger.debug(f"Built glyph table with {len(self._entries)} entries")

    @property
    def entries(self) -> Tuple[GlyphEntry, ...]:
        return self._entries

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    def lookup_forward(self, key: str) -> Optional[str]:
        """Return the glyph for a syllable key, or None if the key is unknown."""
        return self._forward.get(key)

    def lookup_reverse(self, glyph: str) -> Optional[str]:
        """Return the syllable key for a glyph, or None if the glyph is unknown."""
        return self._reverse.get(glyph)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GlyphEntry]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._forward
