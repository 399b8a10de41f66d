"""Command line interface for the vocabulary flashcard session"""

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from .config.settings import settings
from .core.constants import ControlConstants
from .core.factory import create_word_presenter
from .core.interfaces import DisplayInterface
from .core.word_presenter import WordPresenter
from .exceptions import FlashcardError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Random vocabulary flashcards read aloud: word, then meaning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vocabcards                                   # Use the configured word list URL
  vocabcards https://example.org/words.json    # Fetch a word list over HTTP
  vocabcards words.json --no-speech            # Local file, no audio
  vocabcards words.json --meaning-lang fr-FR   # Speak meanings in French

Controls:
  s / start    show the first card
  n / next     show another random card
  r / replay   read the current card again (same as activating the image)
  q / quit     end the session
        """,
    )

    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help=f"Word list URL or JSON file (default: {settings.word_list.url})",
    )

    speech_group = parser.add_argument_group("speech options")
    speech_group.add_argument(
        "--no-speech", action="store_true", help="Show cards without reading them"
    )
    speech_group.add_argument(
        "--word-lang",
        default=settings.speech.word_language,
        help=f"Language tag for words (default: {settings.speech.word_language})",
    )
    speech_group.add_argument(
        "--meaning-lang",
        default=settings.speech.meaning_language,
        help=(
            "Language tag for meanings "
            f"(default: {settings.speech.meaning_language})"
        ),
    )
    speech_group.add_argument(
        "--rate",
        type=float,
        default=settings.speech.rate,
        help=f"Playback rate multiplier (default: {settings.speech.rate})",
    )

    session_group = parser.add_argument_group("session options")
    session_group.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed for the random card order (reproducible sessions)",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    return parser


def resolve_command(raw: str, available: tuple[str, ...]) -> str | None:
    """Map user input to a control name.

    An empty line triggers the first available control (Start, then Next).
    Returns None for unknown input.
    """
    token = raw.strip().lower()
    if not token:
        return available[0] if available else None
    return ControlConstants.ALIASES.get(token)


def run_session(
    presenter: WordPresenter,
    display: DisplayInterface,
    read_input: Callable[[str], str] = input,
) -> int:
    """Drive the presenter from user commands until quit or end of input"""
    while True:
        available = presenter.available_actions
        display.show_controls(available)
        try:
            raw = read_input("> ")
        except EOFError:
            break

        command = resolve_command(raw, available)
        if command == ControlConstants.QUIT:
            break
        if command is None:
            display.show_error(f"Unknown command: {raw.strip()}")
            continue
        if command not in available:
            display.show_error(f"'{command}' is not available right now")
            continue

        if command == ControlConstants.START:
            presenter.start()
        elif command == ControlConstants.NEXT:
            presenter.next()
        elif command == ControlConstants.REPLAY:
            presenter.replay_current()

    logger.debug("Session ended")
    return 0


def start_session_main(args: argparse.Namespace) -> int:
    """Load the word list and run an interactive session"""
    presenter = create_word_presenter(
        source=args.source,
        speech_enabled=False if args.no_speech else None,
        word_language=args.word_lang,
        meaning_language=args.meaning_lang,
        rate=args.rate,
        seed=args.seed,
    )
    display = presenter.display
    logger.info(f"Word list: {presenter.word_source.location}")
    logger.info(f"Speech: {'disabled' if args.no_speech else 'enabled'}")

    if not presenter.load():
        error = presenter.load_error
        display.show_error(error.message if error else "Could not load word list")
        return 1
    if presenter.vocabulary.is_empty:
        display.show_error("The word list is empty")
        return 1

    print(f"\n📚 {len(presenter.vocabulary)} words loaded")
    return run_session(presenter, display)


def main() -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args()

    log_level = "DEBUG" if (args.debug or args.verbose) else settings.logging.level
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None)

    try:
        logger.debug("🚀 Vocabulary flashcards started")
        sys.exit(start_session_main(args))
    except FlashcardError as e:
        logger.error(f"Application error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Session cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
