"""Word presenter: random flashcards read aloud word-then-meaning"""

import logging
import random

from ..config.settings import settings
from ..exceptions import ConfigurationError, WordListLoadError
from ..logging_config import get_logger
from ..models.session import PresenterState, SessionState
from ..models.speech import Utterance
from ..models.vocabulary import VocabularyEntry, VocabularyList
from ..utils.error_handler import handle_errors
from .constants import ControlConstants, SpeechConstants
from .interfaces import (
    DisplayInterface,
    SpeechEngineInterface,
    WordListSourceInterface,
)

logger = get_logger(__name__)


class WordPresenter:
    """Owns one flashcard session.

    The word list is loaded once and is read-only afterwards. Each
    ``start``/``next`` picks an entry uniformly at random (repeats are
    possible), shows it and speaks the word, then the meaning.
    """

    def __init__(
        self,
        word_source: WordListSourceInterface,
        speech_engine: SpeechEngineInterface,
        display: DisplayInterface,
        word_language: str | None = None,
        meaning_language: str | None = None,
        rate: float | None = None,
        rng: random.Random | None = None,
    ):
        # Injected dependencies
        self.word_source = word_source
        self.speech_engine = speech_engine
        self.display = display

        # Speech configuration
        self.word_language = word_language or settings.speech.word_language
        self.meaning_language = meaning_language or settings.speech.meaning_language
        self.rate = rate if rate is not None else settings.speech.rate
        if not SpeechConstants.MIN_RATE < self.rate <= SpeechConstants.MAX_RATE:
            raise ConfigurationError(
                "speech.rate",
                self.rate,
                f"must be in ({SpeechConstants.MIN_RATE}, {SpeechConstants.MAX_RATE}]",
            )

        self._rng = rng or random.Random()
        self._vocabulary = VocabularyList()
        self._session = SessionState()
        self._state = PresenterState.IDLE
        self._load_error: WordListLoadError | None = None

    # ---- State ----
    @property
    def vocabulary(self) -> VocabularyList:
        return self._vocabulary

    @property
    def state(self) -> PresenterState:
        return self._state

    @property
    def current_index(self) -> int | None:
        return self._session.current_index

    @property
    def current_entry(self) -> VocabularyEntry | None:
        if not self._session.has_current:
            return None
        return self._vocabulary[self._session.current_index]

    @property
    def load_error(self) -> WordListLoadError | None:
        return self._load_error

    @property
    def available_actions(self) -> tuple[str, ...]:
        """Controls the user can trigger in the current state"""
        if self._state is PresenterState.IDLE:
            return (ControlConstants.START,)
        return (ControlConstants.NEXT, ControlConstants.REPLAY)

    # ---- Operations ----
    def load(self) -> bool:
        """Fetch the word list once.

        On failure the list stays empty, the error is logged and kept in
        ``load_error``; there is no retry. A successful load starts a new
        session: nothing is selected and only Start is offered.
        """
        try:
            vocabulary = self.word_source.fetch()
        except WordListLoadError as e:
            self._load_error = e
            logger.error(f"Could not load word list: {e.message}")
            if e.details:
                logger.debug(f"Load error details: {e.details}")
            return False

        self._vocabulary = vocabulary
        self._load_error = None
        self._session.reset()
        self._state = PresenterState.IDLE
        logger.info(f"Loaded {len(vocabulary)} words from {self.word_source.location}")
        if vocabulary.is_empty:
            logger.warning("Word list is empty; nothing to show")
        return True

    def select_random(self) -> VocabularyEntry | None:
        """Pick an entry uniformly at random; no-op on an empty list"""
        if self._vocabulary.is_empty:
            return None
        index = self._rng.randrange(len(self._vocabulary))
        self._session.current_index = index
        logger.debug(f"Selected index {index}")
        return self._vocabulary[index]

    def present(self, entry: VocabularyEntry) -> None:
        self.display.show_entry(entry)

    @handle_errors(
        default_return=False, log_level=logging.WARNING, operation_name="announce"
    )
    def announce(self, entry: VocabularyEntry) -> bool:
        """Speak the word, then the meaning once the word has finished.

        ``speak`` returns only when playback is complete, so the meaning is
        never requested while the word is still playing. A failed word
        utterance skips the meaning.
        """
        self.speech_engine.speak(Utterance(entry.word, self.word_language, self.rate))
        self.speech_engine.speak(
            Utterance(entry.meaning, self.meaning_language, self.rate)
        )
        return True

    def replay_current(self) -> bool:
        """Re-announce the current entry; no-op before the first selection"""
        entry = self.current_entry
        if entry is None:
            return False
        return self.announce(entry)

    def start(self) -> VocabularyEntry | None:
        """Select, show and speak an entry; no visible effect without words"""
        entry = self.select_random()
        if entry is None:
            logger.debug("Start ignored: no words loaded")
            return None
        self._state = PresenterState.ACTIVE
        self.present(entry)
        self.announce(entry)
        return entry

    def next(self) -> VocabularyEntry | None:
        return self.start()
