"""Terminal rendering surface for flashcards"""

import sys
from collections.abc import Iterable
from typing import TextIO

from ..models.vocabulary import VocabularyEntry
from .constants import ControlConstants
from .interfaces import DisplayInterface


class ConsoleDisplay(DisplayInterface):
    """Prints the current card to a text stream.

    Keeps the last rendered image source, word and meaning so callers can
    inspect what is on screen.
    """

    def __init__(self, stream: TextIO | None = None, width: int = 60):
        self.stream = stream if stream is not None else sys.stdout
        self.width = width
        self.image_source: str | None = None
        self.word_text: str | None = None
        self.meaning_text: str | None = None

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def show_entry(self, entry: VocabularyEntry) -> None:
        self.image_source = entry.image_url
        self.word_text = entry.word
        self.meaning_text = entry.meaning

        self._write("\n" + "=" * self.width)
        self._write(f"🖼️  {entry.image_url}")
        self._write(f"📖 {entry.word}")
        self._write(f"💬 {entry.meaning}")
        self._write("=" * self.width)

    def show_error(self, message: str) -> None:
        self._write(f"❌ {message}")

    def show_controls(self, actions: Iterable[str]) -> None:
        labels = [
            ControlConstants.LABELS[a] for a in actions if a in ControlConstants.LABELS
        ]
        labels.append(ControlConstants.LABELS[ControlConstants.QUIT])
        self._write("   ".join(labels))
