"""Vowel classification and the reduction rules used for rhyme matching."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

VOWEL_INITIALS = frozenset("AEIOU")

Phonemes = Tuple[str, ...]


def is_vowel_sound(phoneme: str) -> bool:
    """Return ``True`` when ``phoneme`` starts with one of ``A E I O U``.

    The empty string is never a vowel. Callers that meet one should treat the
    whole sequence as malformed.
    """

    return bool(phoneme) and phoneme[0] in VOWEL_INITIALS


def vowel_offset(sequence: Sequence[str]) -> Optional[int]:
    """Return the index of the first vowel phoneme in ``sequence``.

    ``None`` is returned when there is no vowel, or when an empty phoneme is
    found before the first vowel.
    """

    for index, phoneme in enumerate(sequence):
        if not phoneme:
            return None
        if is_vowel_sound(phoneme):
            return index
    return None


def full_tail_reduce(sequence: Sequence[str]) -> Phonemes:
    """Reduce ``sequence`` to everything from its first vowel onwards.

    This is the rhyme key stored in the trie. ``["K", "AE", "K", "AE", "T"]``
    reduces to ``("AE", "K", "AE", "T")``. Sequences without a vowel, or with
    any empty phoneme, reduce to ``()``.
    """

    result: list[str] = []
    vowel_found = False
    for phoneme in sequence:
        if not phoneme:
            return ()
        if not vowel_found:
            if not is_vowel_sound(phoneme):
                continue
            vowel_found = True
        result.append(phoneme)
    return tuple(result)


def last_syllable_reduce(sequence: Sequence[str]) -> Phonemes:
    """Reduce ``sequence`` to the rime of its final syllable.

    Scans from the end: trailing consonants are kept, then the vowel run, and
    the scan stops at the first consonant preceding that run. So
    ``["K", "AE", "K", "AE", "T"]`` reduces to ``("AE", "T")``.
    """

    # An empty phoneme anywhere poisons the reduction, even before the rime.
    if not all(sequence):
        return ()

    collected: list[str] = []
    vowel_found = False
    for phoneme in reversed(sequence):
        if is_vowel_sound(phoneme):
            vowel_found = True
        elif vowel_found:
            break
        collected.append(phoneme)

    if not vowel_found:
        return ()
    collected.reverse()
    return tuple(collected)


__all__ = [
    "Phonemes",
    "VOWEL_INITIALS",
    "full_tail_reduce",
    "is_vowel_sound",
    "last_syllable_reduce",
    "vowel_offset",
]
