"""Rhyme engine tying the dictionary, trie and comparator together."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from rhymer.config import RhymerSettings
from rhymer.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    start_span,
)

from .comparator import RhymeResult, match_variants
from .dictionary import PronunciationDictionary
from .loader import DictionaryLoadError, iter_cmudict_entries, load_dictionary_file
from .phonemes import Phonemes, full_tail_reduce, last_syllable_reduce
from .trie import RhymeTrie

_QUERY_COUNTER = create_counter(
    "rhymer_queries_total",
    "Rhyme engine queries served.",
    label_names=("operation",),
)
_BUILD_HISTOGRAM = create_histogram(
    "rhymer_index_build_seconds",
    "Time spent building the pronunciation dictionary and rhyme trie.",
)

_logger = get_logger(__name__).bind(component="rhyme_engine")


class RhymeEngine:
    """Answers rhyme questions over a fixed pronunciation dictionary.

    Build one with :meth:`from_entries` (or :meth:`from_settings`) and share
    it. Nothing is mutated after construction, so any number of threads may
    query the same instance without locking.
    """

    def __init__(
        self,
        dictionary: PronunciationDictionary,
        trie: RhymeTrie,
        *,
        strict: bool = False,
    ) -> None:
        self.dictionary = dictionary
        self.trie = trie
        self.strict = strict

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Tuple[str, Sequence[str]]],
        *,
        strict: bool = False,
    ) -> "RhymeEngine":
        """Build the dictionary and trie from ``(word, phonemes)`` pairs."""

        with start_span("rhymer.index.build") as span, _BUILD_HISTOGRAM.time():
            materialized = [(word, tuple(phonemes)) for word, phonemes in entries]
            dictionary = PronunciationDictionary.from_entries(materialized)

            trie = RhymeTrie()
            skipped = 0
            for word in dictionary.words():
                for variant in dictionary.variants(word):
                    if not trie.insert(word, variant):
                        skipped += 1

            stats = {
                "words": len(dictionary),
                "pronunciations": dictionary.variant_count(),
                "indexed": len(trie),
                "unindexed": skipped,
                "trie_nodes": trie.node_count,
            }
            add_span_attributes(span, stats)

        _logger.info("Rhyme engine ready", context=stats)
        return cls(dictionary, trie, strict=strict)

    @classmethod
    def from_settings(cls, settings: Optional[RhymerSettings] = None) -> "RhymeEngine":
        """Build an engine from a dictionary file or the bundled CMU feed."""

        settings = settings or RhymerSettings.from_env()
        source = str(settings.dict_path) if settings.dict_path else "pronouncing"
        _logger.info(
            "Building rhyme engine",
            context={"source": source, "strict": settings.strict_rhymes},
        )

        if settings.dict_path is None:
            return cls.from_entries(iter_cmudict_entries(), strict=settings.strict_rhymes)

        try:
            entries = load_dictionary_file(settings.dict_path)
        except DictionaryLoadError:
            _logger.error("Rhyme engine build aborted", context={"source": source})
            raise
        return cls.from_entries(entries, strict=settings.strict_rhymes)

    def _resolve_strict(self, strict: Optional[bool]) -> bool:
        return self.strict if strict is None else strict

    # Lookups ---------------------------------------------------------------
    def pronounce(self, word: str) -> List[List[str]]:
        """Return all pronunciations of ``word``, or ``[]`` if unknown."""

        _QUERY_COUNTER.labels(operation="pronounce").inc()
        return self.dictionary.pronounce(word)

    def rhymes_word(self, first: str, second: str) -> RhymeResult:
        """Do two words rhyme under any pair of their pronunciations?"""

        _QUERY_COUNTER.labels(operation="rhymes_word").inc()
        return match_variants(
            self.dictionary.variants(first),
            self.dictionary.variants(second),
        )

    def rhymes_phonetic(self, word: str, phonemes: Sequence[str]) -> RhymeResult:
        """Does any pronunciation of ``word`` rhyme with ``phonemes``?"""

        _QUERY_COUNTER.labels(operation="rhymes_phonetic").inc()
        return match_variants(self.dictionary.variants(word), [tuple(phonemes)])

    def find_rhymes(
        self,
        phonemes: Sequence[str],
        *,
        strict: Optional[bool] = None,
    ) -> Set[str]:
        """Return every known word ending in the rhyme key of ``phonemes``."""

        _QUERY_COUNTER.labels(operation="find_rhymes").inc()
        return self.trie.find(phonemes, strict=self._resolve_strict(strict))

    def find_rhymes_by_word(
        self,
        word: str,
        *,
        strict: Optional[bool] = None,
    ) -> Set[str]:
        """Rhymes of the first listed pronunciation of ``word``."""

        _QUERY_COUNTER.labels(operation="find_rhymes_by_word").inc()
        variants = self.dictionary.variants(word)
        if not variants:
            return set()
        return self.trie.find(variants[0], strict=self._resolve_strict(strict))

    # Reductions ------------------------------------------------------------
    @staticmethod
    def full_tail_reduce(phonemes: Sequence[str]) -> Phonemes:
        return full_tail_reduce(phonemes)

    @staticmethod
    def last_syllable_reduce(phonemes: Sequence[str]) -> Phonemes:
        return last_syllable_reduce(phonemes)


__all__ = ["RhymeEngine"]
