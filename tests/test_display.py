"""Tests for the console rendering surface"""

import io

from vocab_flashcards.core.display import ConsoleDisplay
from vocab_flashcards.models.vocabulary import VocabularyEntry


class TestConsoleDisplay:
    def setup_method(self):
        self.stream = io.StringIO()
        self.display = ConsoleDisplay(stream=self.stream, width=20)

    def test_show_entry(self):
        entry = VocabularyEntry(word="cat", meaning="con mèo", image="cat.png")

        self.display.show_entry(entry)

        output = self.stream.getvalue()
        assert "cat.png" in output
        assert "cat" in output
        assert "con mèo" in output
        assert self.display.word_text == "cat"
        assert self.display.meaning_text == "con mèo"
        assert self.display.image_source == "cat.png"

    def test_nothing_shown_initially(self):
        assert self.display.word_text is None
        assert self.display.meaning_text is None
        assert self.display.image_source is None
        assert self.stream.getvalue() == ""

    def test_show_error(self):
        self.display.show_error("Could not load word list")
        assert "❌ Could not load word list" in self.stream.getvalue()

    def test_controls_for_idle_session(self):
        self.display.show_controls(("start",))

        output = self.stream.getvalue()
        assert "[s] Start" in output
        assert "[n] Next" not in output
        assert "[q] Quit" in output

    def test_controls_for_active_session(self):
        self.display.show_controls(("next", "replay"))

        output = self.stream.getvalue()
        assert "[s] Start" not in output
        assert "[n] Next" in output
        assert "[r] Replay (image)" in output
