"""
Settings for the word scramble game, read from the environment.

Every field can be overridden with a ``WORD_SCRAMBLE_`` prefixed variable,
e.g. ``WORD_SCRAMBLE_LOCALE=en`` or ``WORD_SCRAMBLE_FALLBACK_ROOT=silkworm``,
or from a ``.env`` file in the working directory.
"""
from __future__ import annotations
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / 'data'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Game settings"""

    model_config = SettingsConfigDict(
        env_prefix='WORD_SCRAMBLE_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    start_words_path: Path = Field(default=DATA_DIR / 'start.txt', description="Newline-separated root words")
    dictionary_path: Path = Field(default=DATA_DIR / 'words.txt', description="Newline-separated real words")
    locale: str = Field(default='en', description="Locale of the spelling dictionary")
    fallback_root: str = Field(default='silkworm', description="Root word used when the word list is unavailable")
    min_word_length: int = Field(default=3, ge=3, description="Shortest acceptable guess")
    log_level: str = Field(default='INFO', description="Logging level")
    start_with_example: bool = Field(default=False, description="Open on the example session")

    @field_validator('locale', 'fallback_root', mode='before')
    @classmethod
    def normalize_word(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = 'INFO') -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])
    logging.getLogger('word_scramble').setLevel(log_level)
