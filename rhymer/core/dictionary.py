"""In-memory pronunciation dictionary keyed by uppercase word."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .phonemes import Phonemes


def normalize_word(word: str) -> str:
    return word.strip().upper() if word else ""


class PronunciationDictionary:
    """Maps a word to the ordered pronunciation variants recorded for it.

    Instances are built once through :meth:`from_entries` and are read-only
    afterwards, so lookups need no locking.
    """

    def __init__(self, pronunciations: Dict[str, Tuple[Phonemes, ...]]) -> None:
        self._pronunciations = pronunciations

    @classmethod
    def from_entries(
        cls, entries: Iterable[Tuple[str, Sequence[str]]]
    ) -> "PronunciationDictionary":
        """Collect ``(word, phonemes)`` pairs, keeping variant order."""

        collected: Dict[str, List[Phonemes]] = {}
        for word, phonemes in entries:
            normalized = normalize_word(word)
            if not normalized:
                continue
            collected.setdefault(normalized, []).append(tuple(phonemes))

        return cls({word: tuple(variants) for word, variants in collected.items()})

    def pronounce(self, word: str) -> List[List[str]]:
        """Return every pronunciation of ``word``; ``[]`` when it is unknown."""

        stored = self._pronunciations.get(normalize_word(word), ())
        return [list(variant) for variant in stored]

    def variants(self, word: str) -> Tuple[Phonemes, ...]:
        """Return the stored variants without copying them."""

        return self._pronunciations.get(normalize_word(word), ())

    def words(self) -> Iterator[str]:
        return iter(self._pronunciations)

    def variant_count(self) -> int:
        return sum(len(variants) for variants in self._pronunciations.values())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._pronunciations

    def __len__(self) -> int:
        return len(self._pronunciations)


__all__ = ["PronunciationDictionary", "normalize_word"]
