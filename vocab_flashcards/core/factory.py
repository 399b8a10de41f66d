"""Factory functions for creating configured presenters"""

import random

from .container import DIContainer, setup_default_container
from .interfaces import (
    DisplayInterface,
    SpeechEngineInterface,
    WordListSourceInterface,
)
from .word_presenter import WordPresenter


class WordPresenterFactory:
    """Factory for creating WordPresenter instances"""

    @staticmethod
    def create_from_container(
        container: DIContainer,
        word_language: str | None = None,
        meaning_language: str | None = None,
        rate: float | None = None,
        seed: int | None = None,
    ) -> WordPresenter:
        """Create presenter from DI container"""
        required = (WordListSourceInterface, SpeechEngineInterface, DisplayInterface)
        missing = [i.__name__ for i in required if not container.has(i)]
        if missing:
            raise RuntimeError(
                f"Required dependencies not registered in the container: "
                f"{', '.join(missing)}"
            )

        return WordPresenter(
            word_source=container.get(WordListSourceInterface),
            speech_engine=container.get(SpeechEngineInterface),
            display=container.get(DisplayInterface),
            word_language=word_language,
            meaning_language=meaning_language,
            rate=rate,
            rng=random.Random(seed) if seed is not None else None,
        )


def create_word_presenter(
    source: str | None = None,
    speech_enabled: bool | None = None,
    word_language: str | None = None,
    meaning_language: str | None = None,
    rate: float | None = None,
    seed: int | None = None,
    container: DIContainer | None = None,
) -> WordPresenter:
    """Convenience function to create a word presenter"""
    if container is None:
        container = setup_default_container(source, speech_enabled)
    return WordPresenterFactory.create_from_container(
        container,
        word_language=word_language,
        meaning_language=meaning_language,
        rate=rate,
        seed=seed,
    )
