"""Dependency injection container for managing service dependencies"""

from collections.abc import Callable
from typing import Any, TypeVar

from .interfaces import (
    DisplayInterface,
    SpeechEngineInterface,
    WordListSourceInterface,
)

T = TypeVar("T")


class DIContainer:
    """Simple dependency injection container"""

    def __init__(self) -> None:
        self._services: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}

    def register_instance(self, interface: type[Any], instance: Any) -> None:
        """Register a specific instance for an interface"""
        self._services[interface] = instance

    def register_singleton(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Register a factory whose first result is reused"""
        self._services.pop(interface, None)
        self._factories[interface] = factory

    def get(self, interface: type[T]) -> T | None:
        """Get an instance of the requested interface"""
        if interface in self._services:
            return self._services[interface]

        if interface in self._factories:
            instance = self._factories.pop(interface)()
            self._services[interface] = instance
            return instance

        return None

    def has(self, interface: type[Any]) -> bool:
        """Check if the container can provide an instance of the interface"""
        return interface in self._services or interface in self._factories


def setup_default_container(
    source: str | None = None, speech_enabled: bool | None = None
) -> DIContainer:
    """Setup container with default implementations.

    Args:
        source: Word list URL or file path (defaults to the configured URL)
        speech_enabled: Use the real speech engine (defaults to settings)
    """
    from .display import ConsoleDisplay
    from .speech_engine import create_speech_engine
    from .word_list_source import create_word_list_source

    container = DIContainer()
    container.register_singleton(
        WordListSourceInterface, lambda: create_word_list_source(source)
    )
    container.register_singleton(
        SpeechEngineInterface, lambda: create_speech_engine(speech_enabled)
    )
    container.register_instance(DisplayInterface, ConsoleDisplay())
    return container
