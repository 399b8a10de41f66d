"""Interface definitions for core components"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..models.speech import Utterance
from ..models.vocabulary import VocabularyEntry, VocabularyList


class WordListSourceInterface(ABC):
    """Interface for word list sources"""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human readable location of the word list"""
        pass

    @abstractmethod
    def fetch(self) -> VocabularyList:
        """Fetch and parse the word list.

        Raises:
            WordListLoadError: the document could not be retrieved
            WordListParseError: the document is not a valid word list
        """
        pass


class SpeechEngineInterface(ABC):
    """Interface for the text-to-speech subsystem"""

    @abstractmethod
    def speak(self, utterance: Utterance) -> None:
        """Vocalize an utterance, returning once playback has completed.

        Raises:
            SpeechError: the utterance could not be spoken
        """
        pass


class DisplayInterface(ABC):
    """Interface for the rendering surface"""

    @abstractmethod
    def show_entry(self, entry: VocabularyEntry) -> None:
        """Show image, word and meaning of an entry"""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Show an error line"""
        pass

    @abstractmethod
    def show_controls(self, actions: Iterable[str]) -> None:
        """Show the currently available controls"""
        pass
