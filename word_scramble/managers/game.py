from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

from ..dictionary import DictionarySource
from ..game_logic import GameSession
from ..schemas import (
    ACCEPTED, DUPLICATE, EMPTY, IMPOSSIBLE_LETTERS, NOT_A_REAL_WORD, SAME_AS_ROOT, TOO_SHORT,
    Alert, ControllerState, ValidationResult,
)

logger = logging.getLogger(__name__)

# title, message; {root} is filled in with the current root word
ALERT_TEXT: Dict[ValidationResult, Tuple[str, str]] = {
    SAME_AS_ROOT: ('Same as start word', 'Be more original'),
    DUPLICATE: ('Word used already', 'Be more original'),
    IMPOSSIBLE_LETTERS: ('Word not possible', "You can't spell that word from '{root}'!"),
    TOO_SHORT: ('Word too short', 'Words need more than two letters'),
    NOT_A_REAL_WORD: ('Word not recognized', "You can't just make them up, you know!"),
}


def alert_for(result: ValidationResult, root_word: str) -> Optional[Alert]:
    text = ALERT_TEXT.get(result)
    if text is None:
        return None
    title, message = text
    return Alert(title=title, message=message.format(root=root_word))


class GameController:
    """
    Screen-level state around one GameSession: the text being typed and the
    alert raised by the last rejected word.
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.pending: str = ''
        self.alert: Optional[Alert] = None
        self.last_result: Optional[ValidationResult] = None

    @classmethod
    def start(cls, source: Optional[DictionarySource], start_with_example: bool = False,
              **kwargs) -> GameController:
        if start_with_example:
            return cls(GameSession.example(source, **kwargs))
        return cls(GameSession.start(source, **kwargs))

    def type_text(self, text: str) -> None:
        self.pending = text

    def commit(self, text: Optional[str] = None) -> ValidationResult:
        if text is not None:
            self.pending = text
        result = self.session.submit(self.pending)
        self.last_result = result
        if result == ACCEPTED:
            self.pending = ''
        elif result != EMPTY:
            self.alert = alert_for(result, self.session.root_word)
            logger.debug("Rejected %r: %s", self.pending, result)
        return result

    def dismiss_alert(self) -> None:
        self.alert = None

    def new_word(self) -> None:
        self.pending = ''
        self.alert = None
        self.last_result = None
        self.session.restart()

    def load_example(self) -> None:
        self.pending = ''
        self.alert = None
        self.last_result = None
        self.session.load_example()

    def to_state(self) -> ControllerState:
        return ControllerState(
            session=self.session.to_state(),
            pending=self.pending,
            alert=self.alert,
            lastResult=self.last_result,
        )
