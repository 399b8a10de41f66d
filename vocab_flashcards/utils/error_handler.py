"""Error handling utilities and decorators"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from ..exceptions import FlashcardError

T = TypeVar("T")


def handle_errors(
    default_return: Any = None,
    log_level: int = logging.ERROR,
    operation_name: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator that logs an error and returns ``default_return`` instead of raising.

    Args:
        default_return: Value to return when an error occurs
        log_level: Logging level for error messages
        operation_name: Custom operation name for logging (defaults to function name)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            op_name = operation_name or func.__name__
            logger = logging.getLogger(func.__module__)

            try:
                return func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, FlashcardError):
                    logger.log(log_level, f"{op_name} failed: {e.message}")
                    if e.details:
                        logger.debug(f"Error details for {op_name}: {e.details}")
                else:
                    logger.log(
                        log_level, f"Unexpected error in {op_name}: {e}", exc_info=True
                    )

                return cast(T, default_return)

        return wrapper

    return decorator
