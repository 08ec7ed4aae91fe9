from __future__ import annotations
import logging
from collections import Counter
from typing import List, Optional, Tuple

from .dictionary import DEFAULT_LOCALE, DictionarySource, DictionaryUnavailable, WordScrambleError
from .schemas import (
    ACCEPTED, DUPLICATE, EMPTY, IMPOSSIBLE_LETTERS, NOT_A_REAL_WORD, SAME_AS_ROOT, TOO_SHORT,
    SessionState, ValidationResult,
)

logger = logging.getLogger(__name__)

FALLBACK_ROOT = 'silkworm'
MIN_WORD_LENGTH = 3

EXAMPLE_ROOT = 'widowing'
EXAMPLE_GUESSES = (
    'ding', 'dong', 'dig', 'now', 'wow', 'god', 'gin', 'dog',
    'own', 'dow', 'down', 'wig', 'win', 'widow', 'wing', 'window',
)


class StartupError(WordScrambleError):
    """No root word could be chosen and there is no fallback to use."""


def normalize(raw: str) -> str:
    return raw.strip().lower()


def is_possible(word: str, root: str) -> bool:
    """True if ``word`` can be spelled from ``root``, each letter used at most as often as it appears."""
    return not Counter(word) - Counter(root.lower())


class GameSession:
    def __init__(self, root_word: str, source: Optional[DictionarySource] = None,
                 locale: str = DEFAULT_LOCALE,
                 min_length: int = MIN_WORD_LENGTH, fallback_root: Optional[str] = FALLBACK_ROOT):
        root = normalize(root_word or '')
        if not root:
            raise StartupError("root word must not be empty")
        self._root = root
        self._guesses: List[str] = []
        self.source = source
        self.locale = locale
        # never below three letters
        self.min_length = max(min_length, MIN_WORD_LENGTH)
        self.fallback_root = fallback_root

    @classmethod
    def start(cls, source: Optional[DictionarySource], fallback_root: Optional[str] = FALLBACK_ROOT,
              **kwargs) -> GameSession:
        session = cls(_choose_root(source, fallback_root), source=source,
                      fallback_root=fallback_root, **kwargs)
        logger.info("Started session with root word %r", session.root_word)
        return session

    @classmethod
    def example(cls, source: Optional[DictionarySource] = None, **kwargs) -> GameSession:
        return cls(EXAMPLE_ROOT, source=source, **kwargs).load_example()

    @property
    def root_word(self) -> str:
        return self._root

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._guesses)

    def score(self) -> int:
        return sum(len(w) for w in self._guesses)

    def is_original(self, word: str) -> bool:
        return word not in self._guesses

    def is_possible(self, word: str) -> bool:
        return is_possible(word, self._root)

    def is_real(self, word: str) -> bool:
        if self.source is None:
            logger.warning("No dictionary to check %r against", word)
            return False
        try:
            return bool(self.source.is_real_word(word, self.locale))
        except (DictionaryUnavailable, OSError) as e:
            logger.warning("Dictionary lookup for %r failed: %s", word, e)
            return False

    def check(self, raw: str) -> Tuple[ValidationResult, str]:
        """Validate ``raw`` against the current state without changing it."""
        word = normalize(raw)
        if not word:
            return EMPTY, word
        if word == self._root:
            return SAME_AS_ROOT, word
        if not self.is_original(word):
            return DUPLICATE, word
        if not self.is_possible(word):
            return IMPOSSIBLE_LETTERS, word
        if len(word) < self.min_length:
            return TOO_SHORT, word
        if not self.is_real(word):
            return NOT_A_REAL_WORD, word
        return ACCEPTED, word

    def submit(self, raw: str) -> ValidationResult:
        result, word = self.check(raw)
        if result == ACCEPTED:
            self._guesses.insert(0, word)
            logger.debug("Accepted %r (score %s)", word, self.score())
        return result

    def restart(self, source: Optional[DictionarySource] = None) -> GameSession:
        if source is not None:
            self.source = source
        self._guesses.clear()
        self._root = _choose_root(self.source, self.fallback_root)
        logger.info("Restarted session with root word %r", self._root)
        return self

    def load_example(self) -> GameSession:
        self._guesses.clear()
        self._root = EXAMPLE_ROOT
        self._guesses = list(EXAMPLE_GUESSES)
        logger.info("Loaded example session for %r", self._root)
        return self

    def to_state(self) -> SessionState:
        return SessionState(rootWord=self._root, guessList=list(self._guesses), score=self.score())


def _choose_root(source: Optional[DictionarySource], fallback_root: Optional[str]) -> str:
    root = ''
    if source is not None:
        try:
            root = normalize(source.pick_random_root() or '')
        except DictionaryUnavailable as e:
            logger.warning("Could not pick a root word: %s", e)
    if root:
        return root
    fallback = normalize(fallback_root or '')
    if not fallback:
        raise StartupError("no root words available and no fallback root word configured")
    logger.warning("Falling back to root word %r", fallback)
    return fallback
