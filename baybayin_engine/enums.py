# Extracted from the engine modules so tables, segmenters and the advisor share them
import enum


class BaybayinCharType(enum.Enum):
    """Define types of Baybayin characters."""

    CONSONANT = "consonant"
    VOWEL = "vowel"
    VOWEL_MARK = "vowel_mark"
    VIRAMA = "virama"
    UNKNOWN = "unknown"

    @classmethod
    def get_type(cls, char: str) -> "BaybayinCharType":
        """Determine the type of a Baybayin character."""
        if not char or len(char) != 1:
            return cls.UNKNOWN
        code_point = ord(char)
        if 0x1700 <= code_point <= 0x1702:
            return cls.VOWEL
        elif 0x1703 <= code_point <= 0x1711:
            return cls.CONSONANT
        elif code_point in (0x1712, 0x1713):
            return cls.VOWEL_MARK
        elif code_point == 0x1714:
            return cls.VIRAMA
        return cls.UNKNOWN


class DiagnosticSeverity(enum.Enum):
    """How loudly a conversion caveat should be surfaced to the caller."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self):
        return self.value


class Direction(enum.Enum):
    """Conversion direction understood by the translator facade."""

    TO_BAYBAYIN = "to_baybayin"
    TO_LATIN = "to_latin"

    @classmethod
    def from_string(cls, direction_str: str) -> "Direction":
        """Convert a string such as ``"to-latin"`` or ``"baybayin"`` to a Direction."""
        normalized = str(direction_str).lower().replace("-", "_").strip()
        for direction in cls:
            if direction.value == normalized:
                return direction

        # Short and legacy spellings used by the translation screen
        legacy_mapping = {
            "baybayin": cls.TO_BAYBAYIN,
            "latin": cls.TO_LATIN,
            "tagalog": cls.TO_LATIN,
            "tagalog_to_baybayin": cls.TO_BAYBAYIN,
            "baybayin_to_tagalog": cls.TO_LATIN,
        }
        if normalized in legacy_mapping:
            return legacy_mapping[normalized]
        raise ValueError(f"Unknown conversion direction: '{direction_str}'")

    def __str__(self):
        return self.value
