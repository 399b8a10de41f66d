"""Speech request models"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Utterance:
    """A single request to the speech subsystem"""

    text: str
    language: str
    rate: float = 1.0
