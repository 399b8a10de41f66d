"""Logging setup for the flashcard session"""

import logging
import sys

ROOT_LOGGER = "vocab_flashcards"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure the ``vocab_flashcards`` logger tree.

    Log records go to stderr so they never interleave with the card
    rendering on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives the detailed format as well

    Returns:
        The configured namespace logger
    """
    level_upper = level.upper()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level_upper))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if level_upper == "DEBUG":
        console_fmt = logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)
    else:
        console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)
        )
        logger.addHandler(file_handler)

    # urllib3 retry chatter is only useful when debugging the fetch
    logging.getLogger("urllib3").setLevel(
        logging.DEBUG if level_upper == "DEBUG" else logging.WARNING
    )

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
