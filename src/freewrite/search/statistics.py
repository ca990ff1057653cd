"""Character and word counts for the statistics readout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentStatistics:
    characters: int
    words: int

    @property
    def message(self) -> str:
        return f"Characters: {self.characters}\nWords: {self.words}"


def compute_statistics(text: str) -> DocumentStatistics:
    # str.split() with no separator yields the maximal non-whitespace runs
    return DocumentStatistics(characters=len(text), words=len(text.split()))


__all__ = ["DocumentStatistics", "compute_statistics"]
