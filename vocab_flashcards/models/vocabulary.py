"""Pydantic models for the vocabulary word list"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class VocabularyEntry(BaseModel):
    """A single flashcard record"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word: StrictStr = Field(description="The word to learn")
    meaning: StrictStr = Field(description="Meaning in the learner's language")
    image_url: StrictStr = Field(
        alias="image", description="URL or path of the illustrating image"
    )


class VocabularyList(BaseModel):
    """Ordered, read-only sequence of vocabulary entries.

    Entries are identified by their position; duplicates are allowed.
    """

    model_config = ConfigDict(frozen=True)

    words: tuple[VocabularyEntry, ...] = Field(
        default=(), description="Entries in document order"
    )

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> VocabularyEntry:
        return self.words[index]

    def __iter__(self) -> Iterator[VocabularyEntry]:  # type: ignore[override]
        return iter(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words
