"""Configuration for the transliteration engine, read from the environment or a .env file."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class EngineConfig:
    use_word_mapping: bool = True
    fold_diacritics: bool = False
    log_level: str = "WARNING"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logger.warning(f"Ignoring unparseable value {raw!r} for {name}, using {default}")
    return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().upper()
    if value not in LOG_LEVELS:
        logger.warning(f"Ignoring unknown log level {raw!r} for {name}, using {default}")
        return default
    return value


def load_config() -> EngineConfig:
    """Load engine defaults from BAYBAYIN_* environment variables."""
    return EngineConfig(
        use_word_mapping=_env_flag("BAYBAYIN_USE_WORD_MAPPING", True),
        fold_diacritics=_env_flag("BAYBAYIN_FOLD_DIACRITICS", False),
        log_level=_env_log_level("BAYBAYIN_LOG_LEVEL", "WARNING"),
    )
