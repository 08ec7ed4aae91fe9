import pytest
from unittest.mock import Mock

from word_scramble.dictionary import WordListDictionary
from word_scramble.game_logic import GameSession

WIDOWING_WORDS = [
    'ding', 'dong', 'dig', 'now', 'wow', 'god', 'gin', 'dog', 'own', 'down',
    'wig', 'win', 'widow', 'wing', 'window', 'gown', 'wind', 'owing', 'doing',
]


@pytest.fixture
def dictionary():
    return WordListDictionary(['widowing', 'silkworm'], WIDOWING_WORDS + ['silk', 'worm', 'milk'])


@pytest.fixture
def session(dictionary):
    return GameSession('widowing', source=dictionary)


@pytest.fixture
def mock_source():
    source = Mock()
    source.pick_random_root.return_value = 'silkworm'
    source.is_real_word.return_value = True
    return source
