"""
Latin-Filipino <-> Baybayin transliteration engine.

Callers use the plain function API::

    from baybayin_engine import to_baybayin, to_latin, get_diagnostics

    to_baybayin("ako")          # 'ᜀᜃᜓ'
    to_latin("ᜃᜓ")              # 'ku'

Tables are built once, on first use, and shared read-only afterwards.
"""

__version__ = '1.0.0'

from baybayin_engine.baybayin_types import (
    BaybayinEngineError,
    ConversionDiagnostic,
    GlyphEntry,
    GlyphTableError,
    LexiconEntry,
    LexiconError,
    TranslationResult,
)
from baybayin_engine.enums import DiagnosticSeverity, Direction
from baybayin_engine.translator import (
    BaybayinEngine,
    get_diagnostics,
    get_engine,
    is_valid_baybayin,
    to_baybayin,
    to_latin,
    translate,
)

__all__ = [
    "BaybayinEngine",
    "BaybayinEngineError",
    "ConversionDiagnostic",
    "DiagnosticSeverity",
    "Direction",
    "GlyphEntry",
    "GlyphTableError",
    "LexiconEntry",
    "LexiconError",
    "TranslationResult",
    "get_diagnostics",
    "get_engine",
    "is_valid_baybayin",
    "to_baybayin",
    "to_latin",
    "translate",
]
