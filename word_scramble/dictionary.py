from __future__ import annotations
import logging
import random
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Set, Tuple

from .config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en'


class WordScrambleError(Exception):
    """Base error for the word scramble game."""


class DictionaryUnavailable(WordScrambleError):
    """The dictionary cannot supply root words or answer a lookup right now."""


class DictionarySource(Protocol):
    def pick_random_root(self) -> str: ...

    def is_real_word(self, word: str, locale: str) -> bool: ...


def read_word_list(path: Path) -> List[str]:
    """Read a newline-separated word list, skipping blanks and ``#`` comments."""
    words: List[str] = []
    seen: Set[str] = set()
    with path.open('r', encoding='utf-8', errors='ignore') as f:
        for line in f:
            w = line.strip().lower()
            if not w or w.startswith('#'):
                continue
            if w in seen:
                continue
            seen.add(w)
            words.append(w)
    return words


def _load_list(path: Path, kind: str) -> List[str]:
    # unreadable lists count as empty; callers fall back from there
    if not path.exists():
        logger.warning("Word list not found (%s): %s", kind, path)
        return []
    try:
        words = read_word_list(path)
    except OSError as e:
        logger.warning("Could not read %s from %s: %s", kind, path, e)
        return []
    logger.info("Loaded %s %s from %s", len(words), kind, path)
    return words


class WordListDictionary:
    """
    In-memory dictionary: a list of candidate root words plus a set of
    known real words for one locale. Root words always count as real words.
    """

    def __init__(self, root_words: Iterable[str] = (), words: Iterable[str] = (),
                 locale: str = DEFAULT_LOCALE, rng: Optional[random.Random] = None):
        self._roots: Tuple[str, ...] = tuple(
            w.strip().lower() for w in root_words if w and w.strip()
        )
        self._words: Set[str] = {w.strip().lower() for w in words if w and w.strip()}
        self._words.update(self._roots)
        self.locale = locale.lower()
        self._rng = rng or random.Random()

    @classmethod
    def from_files(cls, start_path: Path, words_path: Path,
                   locale: str = DEFAULT_LOCALE) -> 'WordListDictionary':
        roots = _load_list(start_path, 'root words')
        words = _load_list(words_path, 'dictionary words')
        if not words:
            logger.warning("No dictionary words loaded; only root words are known")
        return cls(roots, words, locale=locale)

    @property
    def root_words(self) -> Tuple[str, ...]:
        return self._roots

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def pick_random_root(self) -> str:
        if not self._roots:
            raise DictionaryUnavailable("no root words loaded")
        return self._rng.choice(self._roots)

    def is_real_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        if not word:
            return False
        if locale.lower() != self.locale:
            logger.debug("No %r dictionary available (have %r)", locale, self.locale)
            return False
        return word.lower() in self._words


@lru_cache()
def load_default() -> WordListDictionary:
    settings = get_settings()
    return WordListDictionary.from_files(
        settings.start_words_path,
        settings.dictionary_path,
        locale=settings.locale,
    )
