"""CLI tests covering argument parsing and the interactive session"""

import io
import json
from unittest.mock import MagicMock, patch

import pytest

from vocab_flashcards.cli import (
    create_parser,
    main,
    resolve_command,
    run_session,
    start_session_main,
)
from vocab_flashcards.core.display import ConsoleDisplay
from vocab_flashcards.core.speech_engine import SilentSpeechEngine
from vocab_flashcards.core.word_list_source import FileWordListSource
from vocab_flashcards.core.word_presenter import WordPresenter
from vocab_flashcards.exceptions import WordListLoadError
from vocab_flashcards.models.session import PresenterState


def scripted_input(*lines):
    """Fake ``input`` that replays lines, then signals end of input"""
    queue = list(lines)

    def read(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(
        json.dumps(
            {"words": [{"word": "cat", "meaning": "con mèo", "image": "cat.png"}]},
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


def make_presenter(path):
    display = ConsoleDisplay(stream=io.StringIO())
    presenter = WordPresenter(
        word_source=FileWordListSource(path),
        speech_engine=SilentSpeechEngine(),
        display=display,
        word_language="en-US",
        meaning_language="vi-VN",
        rate=1.0,
    )
    return presenter, display


class TestCLIArgumentParsing:
    """Argument parsing"""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.source is None
        assert args.no_speech is False
        assert args.word_lang == "en-US"
        assert args.meaning_lang == "vi-VN"
        assert args.rate == 1.0
        assert args.seed is None

    def test_source_and_speech_options(self):
        args = create_parser().parse_args(
            [
                "https://example.org/words.json",
                "--no-speech",
                "--word-lang",
                "en-GB",
                "--meaning-lang",
                "fr-FR",
                "--rate",
                "0.8",
                "--seed",
                "42",
            ]
        )

        assert args.source == "https://example.org/words.json"
        assert args.no_speech is True
        assert args.word_lang == "en-GB"
        assert args.meaning_lang == "fr-FR"
        assert args.rate == 0.8
        assert args.seed == 42

    def test_logging_options(self):
        args = create_parser().parse_args(["--debug", "-v", "--log-file", "x.log"])

        assert args.debug is True
        assert args.verbose is True
        assert str(args.log_file) == "x.log"


class TestResolveCommand:
    """Mapping user input to controls"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("s", "start"),
            ("START", "start"),
            ("n", "next"),
            (" next ", "next"),
            ("r", "replay"),
            ("image", "replay"),
            ("q", "quit"),
            ("exit", "quit"),
            ("hello", None),
        ],
    )
    def test_aliases(self, raw, expected):
        assert resolve_command(raw, ("next", "replay")) == expected

    def test_empty_line_triggers_first_available(self):
        assert resolve_command("", ("start",)) == "start"
        assert resolve_command("  ", ("next", "replay")) == "next"


class TestRunSession:
    """Interactive loop"""

    def test_start_next_replay_quit(self, words_file):
        presenter, display = make_presenter(words_file)
        presenter.load()
        presenter.speech_engine = MagicMock()

        code = run_session(presenter, display, scripted_input("s", "n", "r", "q"))

        assert code == 0
        assert presenter.state is PresenterState.ACTIVE
        assert display.word_text == "cat"
        # start, next and replay each speak word + meaning
        assert presenter.speech_engine.speak.call_count == 6

    def test_start_hidden_after_first_use(self, words_file):
        presenter, display = make_presenter(words_file)
        presenter.load()

        run_session(presenter, display, scripted_input("s", "s"))

        output = display.stream.getvalue()
        assert "'start' is not available right now" in output
        assert "[n] Next" in output

    def test_replay_unavailable_before_start(self, words_file):
        presenter, display = make_presenter(words_file)
        presenter.load()
        presenter.speech_engine = MagicMock()

        run_session(presenter, display, scripted_input("r"))

        presenter.speech_engine.speak.assert_not_called()
        assert "'replay' is not available right now" in display.stream.getvalue()

    def test_unknown_command(self, words_file):
        presenter, display = make_presenter(words_file)

        run_session(presenter, display, scripted_input("jump"))

        assert "Unknown command: jump" in display.stream.getvalue()

    def test_end_of_input_ends_session(self, words_file):
        presenter, display = make_presenter(words_file)

        assert run_session(presenter, display, scripted_input()) == 0

    def test_start_without_words_has_no_effect(self, tmp_path):
        presenter, display = make_presenter(tmp_path / "missing.json")
        presenter.load()

        run_session(presenter, display, scripted_input("s"))

        assert display.word_text is None
        assert presenter.state is PresenterState.IDLE


class TestStartSessionMain:
    """Loading and session startup"""

    def _args(self, source, **overrides):
        args = create_parser().parse_args([str(source), "--no-speech"])
        for key, value in overrides.items():
            setattr(args, key, value)
        return args

    @patch("vocab_flashcards.cli.run_session", return_value=0)
    def test_loads_and_runs(self, mock_run, words_file):
        assert start_session_main(self._args(words_file)) == 0

        presenter = mock_run.call_args[0][0]
        assert len(presenter.vocabulary) == 1
        assert isinstance(presenter.speech_engine, SilentSpeechEngine)

    @patch("vocab_flashcards.cli.run_session")
    def test_load_failure_is_reported(self, mock_run, tmp_path, capsys):
        code = start_session_main(self._args(tmp_path / "missing.json"))

        assert code == 1
        mock_run.assert_not_called()
        assert "file not found" in capsys.readouterr().out

    @patch("vocab_flashcards.cli.run_session")
    def test_empty_list_is_reported(self, mock_run, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text('{"words": []}', encoding="utf-8")

        assert start_session_main(self._args(path)) == 1
        mock_run.assert_not_called()
        assert "empty" in capsys.readouterr().out


class TestMain:
    """Entry point exit codes"""

    @patch("vocab_flashcards.cli.setup_logging")
    @patch("vocab_flashcards.cli.start_session_main", return_value=0)
    def test_normal_exit(self, mock_start, mock_logging):
        with patch("sys.argv", ["vocabcards", "words.json"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        mock_logging.assert_called_once_with("INFO", None)

    @patch("vocab_flashcards.cli.setup_logging")
    @patch("vocab_flashcards.cli.start_session_main")
    def test_application_error_exit(self, mock_start, mock_logging):
        mock_start.side_effect = WordListLoadError("words.json", "boom")
        with patch("sys.argv", ["vocabcards", "words.json"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1

    @patch("vocab_flashcards.cli.setup_logging")
    @patch("vocab_flashcards.cli.start_session_main")
    def test_keyboard_interrupt_exit(self, mock_start, mock_logging):
        mock_start.side_effect = KeyboardInterrupt
        with patch("sys.argv", ["vocabcards"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 130

    @patch("vocab_flashcards.cli.setup_logging")
    def test_debug_flag_sets_level(self, mock_logging):
        with patch("vocab_flashcards.cli.start_session_main", return_value=0):
            with patch("sys.argv", ["vocabcards", "--debug"]):
                with pytest.raises(SystemExit):
                    main()

        mock_logging.assert_called_once_with("DEBUG", None)

    @patch("vocab_flashcards.cli.setup_logging")
    def test_invalid_rate_rejected(self, mock_logging):
        with patch("sys.argv", ["vocabcards", "words.json", "--rate", "0"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
