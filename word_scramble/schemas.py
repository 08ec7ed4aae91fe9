from __future__ import annotations
from pydantic import BaseModel, computed_field
from typing import List, Literal, Optional

ValidationResult = Literal[
    'accepted',
    'same-as-root',
    'duplicate',
    'impossible-letters',
    'not-a-real-word',
    'too-short',
    'empty',
]

ACCEPTED: ValidationResult = 'accepted'
SAME_AS_ROOT: ValidationResult = 'same-as-root'
DUPLICATE: ValidationResult = 'duplicate'
IMPOSSIBLE_LETTERS: ValidationResult = 'impossible-letters'
NOT_A_REAL_WORD: ValidationResult = 'not-a-real-word'
TOO_SHORT: ValidationResult = 'too-short'
EMPTY: ValidationResult = 'empty'

class GuessEntry(BaseModel):
    word: str

    @computed_field
    @property
    def letters(self) -> int:
        return len(self.word)

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.word}, {self.letters} letters"

class SessionState(BaseModel):
    rootWord: str
    guessList: List[str] = []
    score: int = 0

    def entries(self) -> List[GuessEntry]:
        return [GuessEntry(word=w) for w in self.guessList]

class Alert(BaseModel):
    title: str
    message: str

class ControllerState(BaseModel):
    session: SessionState
    pending: str = ''
    alert: Optional[Alert] = None
    lastResult: Optional[ValidationResult] = None
