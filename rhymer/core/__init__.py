"""Core rhyme matching for rhymer: reductions, trie, comparator and engine."""

from .comparator import RhymeResult, match_variants, phonetic_rhyme, tails_match
from .dictionary import PronunciationDictionary
from .engine import RhymeEngine
from .loader import (
    DictionaryLoadError,
    iter_cmudict_entries,
    load_dictionary_file,
    parse_dictionary_lines,
)
from .phonemes import (
    full_tail_reduce,
    is_vowel_sound,
    last_syllable_reduce,
    vowel_offset,
)
from .trie import RhymeTrie, TrieNode

__all__ = [
    "DictionaryLoadError",
    "PronunciationDictionary",
    "RhymeEngine",
    "RhymeResult",
    "RhymeTrie",
    "TrieNode",
    "full_tail_reduce",
    "is_vowel_sound",
    "iter_cmudict_entries",
    "last_syllable_reduce",
    "load_dictionary_file",
    "match_variants",
    "parse_dictionary_lines",
    "phonetic_rhyme",
    "tails_match",
    "vowel_offset",
]
