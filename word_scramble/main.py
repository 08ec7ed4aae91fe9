from __future__ import annotations
import logging
import sys
from typing import Callable, Optional

from .config import Settings, get_settings, setup_logging
from .dictionary import WordListDictionary, load_default
from .game_logic import StartupError
from .managers.game import GameController
from .schemas import ControllerState

logger = logging.getLogger(__name__)

PROMPT = 'Enter your word: '
COMMANDS = {
    ':new': 'new root word',
    ':example': 'load the example game',
    ':quit': 'leave the game',
}


def render(state: ControllerState) -> str:
    session = state.session
    lines = [f"== {session.rootWord} =="]
    for entry in session.entries():
        lines.append(f"  ({entry.letters}) {entry.word}")
    lines.append(f"Score: {session.score}")
    return '\n'.join(lines)


def run(controller: GameController,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print) -> None:
    write(render(controller.to_state()))
    write('Commands: ' + ', '.join(f"{c} ({h})" for c, h in COMMANDS.items()))
    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            break
        command = line.strip().lower()
        if command == ':quit':
            break
        if command == ':new':
            controller.new_word()
        elif command == ':example':
            controller.load_example()
        else:
            controller.commit(line)
            if controller.alert:
                write(f"{controller.alert.title}: {controller.alert.message}")
                controller.dismiss_alert()
        write(render(controller.to_state()))


def main(settings: Optional[Settings] = None) -> int:
    use_default = settings is None
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if use_default:
        source = load_default()
    else:
        source = WordListDictionary.from_files(
            settings.start_words_path, settings.dictionary_path, locale=settings.locale)
    try:
        controller = GameController.start(
            source,
            start_with_example=settings.start_with_example,
            fallback_root=settings.fallback_root,
            locale=settings.locale,
            min_length=settings.min_word_length,
        )
    except StartupError as e:
        logger.error("Cannot start game: %s", e)
        return 1
    run(controller)
    return 0


if __name__ == '__main__':
    sys.exit(main())
