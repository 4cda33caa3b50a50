"""Transliteration engine facade: shared tables plus the public function API."""

import logging
import threading
from typing import List, Optional, Union

from baybayin_engine import validator
from baybayin_engine.baybayin_types import ConversionDiagnostic, TranslationResult
from baybayin_engine.config import EngineConfig, load_config
from baybayin_engine.enums import DiagnosticSeverity, Direction
from baybayin_engine.glyph_table import GlyphTable
from baybayin_engine.lexicon import Lexicon
from baybayin_engine.segmenter import ForwardSegmenter, ReverseSegmenter

logger = logging.getLogger(__name__)


def _require_text(value: object, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


class BaybayinEngine:
    """Owns the glyph table, the lexicon and both segmenters."""

    def __init__(
        self,
        glyph_table: Optional[GlyphTable] = None,
        lexicon: Optional[Lexicon] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.glyph_table = glyph_table if glyph_table is not None else GlyphTable()
        self.lexicon = lexicon if lexicon is not None else Lexicon()
        self.config = config or load_config()
        self.forward = ForwardSegmenter(self.glyph_table, self.lexicon)
        self.reverse = ReverseSegmenter(self.glyph_table, self.lexicon)
        logger.debug(
            f"Engine ready: {len(self.glyph_table)} glyphs, {len(self.lexicon)} lexicon words"
        )

    def to_baybayin(self, text: str, use_word_mapping: bool = True, *, fold_diacritics: bool = False) -> str:
        return self.forward.segment(
            _require_text(text), use_word_mapping=use_word_mapping, fold_diacritics=fold_diacritics
        )

    def to_latin(self, text: str) -> str:
        return self.reverse.segment(_require_text(text))

    def translate(
        self,
        text: str,
        direction: Union[Direction, str],
        use_word_mapping: Optional[bool] = None,
    ) -> TranslationResult:
        """
        Convert ``text`` and collect the diagnostics that go with it.

        Args:
            text: Input text
            direction: Direction or its string name
            use_word_mapping: None uses the configured default

        Returns:
            TranslationResult with the converted text and advisory diagnostics
        """
        text = _require_text(text)
        if not isinstance(direction, Direction):
            direction = Direction.from_string(direction)
        if use_word_mapping is None:
            use_word_mapping = self.config.use_word_mapping

        if direction is Direction.TO_BAYBAYIN:
            converted = self.to_baybayin(
                text, use_word_mapping, fold_diacritics=self.config.fold_diacritics
            )
            found = validator.diagnostics(text, converted)
        else:
            converted = self.to_latin(text)
            found = []
            if not validator.is_valid_baybayin(text):
                found.append(ConversionDiagnostic(
                    DiagnosticSeverity.WARNING, validator.NON_BAYBAYIN_INPUT_MESSAGE
                ))
            found.extend(validator.structure_diagnostics(text))
        return TranslationResult(converted, direction, found)


_engine: Optional[BaybayinEngine] = None
_engine_lock = threading.Lock()


def get_engine() -> BaybayinEngine:
    """Return the process-wide engine, building its tables on first use."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = BaybayinEngine()
    return _engine


def to_baybayin(text: str, use_word_mapping: bool = True, *, fold_diacritics: bool = False) -> str:
    """
    Converts Tagalog/Filipino text to Baybayin script.

    Args:
        text: The Latin-alphabet text to convert
        use_word_mapping: Whether whole common words use their precomposed spelling
        fold_diacritics: Fold accented letters to ASCII before converting

    The BAYBAYIN_USE_WORD_MAPPING and BAYBAYIN_FOLD_DIACRITICS settings are not
    read here; they only supply the defaults of ``translate``.

    Returns:
        The converted text; characters with no Baybayin form are kept as is
    """
    return get_engine().to_baybayin(text, use_word_mapping, fold_diacritics=fold_diacritics)


def to_latin(text: str) -> str:
    """Converts Baybayin back to romanized text (approximation; case and e/o are lost)."""
    return get_engine().to_latin(text)


def is_valid_baybayin(text: str) -> bool:
    return validator.is_valid_baybayin(_require_text(text))


def get_diagnostics(original: str, converted: str) -> List[ConversionDiagnostic]:
    return validator.diagnostics(_require_text(original, "original"), _require_text(converted, "converted"))


def translate(
    text: str,
    direction: Union[Direction, str],
    use_word_mapping: Optional[bool] = None,
) -> TranslationResult:
    return get_engine().translate(text, direction, use_word_mapping)
