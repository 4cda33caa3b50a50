from dataclasses import dataclass, field
from typing import Dict, List

from baybayin_engine.enums import DiagnosticSeverity, Direction


@dataclass(frozen=True)
class GlyphEntry:
    key: str  # canonical syllable spelling, e.g. "ka", "ngi", "k", "a"
    glyph: str  # base character + optional kudlit or virama


@dataclass(frozen=True)
class LexiconEntry:
    word: str  # lowercase whole word
    glyph_sequence: str  # precomposed spelling, reproduced exactly


@dataclass(frozen=True)
class ConversionDiagnostic:
    severity: DiagnosticSeverity
    message: str

    def to_dict(self) -> Dict[str, str]:
        """Plain ``{severity, message}`` form handed to external callers."""
        return {"severity": self.severity.value, "message": self.message}

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"


@dataclass(frozen=True)
class TranslationResult:
    text: str
    direction: Direction
    diagnostics: List[ConversionDiagnostic] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return any(
            d.severity in (DiagnosticSeverity.WARNING, DiagnosticSeverity.ERROR)
            for d in self.diagnostics
        )


# Custom exceptions
class BaybayinEngineError(Exception):
    """Base exception for transliteration engine errors."""
    pass

class GlyphTableError(BaybayinEngineError):
    """Raised when the glyph table is malformed (duplicates, foreign inventory, drift)."""
    pass

class LexiconError(BaybayinEngineError):
    """Raised when a lexicon entry is not a plain word or not pure Baybayin."""
    pass
