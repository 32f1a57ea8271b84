"""Pairwise rhyme comparison between phoneme sequences."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

from .phonemes import vowel_offset


class RhymeResult(IntEnum):
    """Tri-state verdict; compares equal to ``1``, ``0`` and ``-1``."""

    YES = 1
    NO = 0
    UNKNOWN = -1


def tails_match(longer: Sequence[str], shorter: Sequence[str]) -> bool:
    """Check that the tail of ``shorter`` ends ``longer``.

    The tail runs from the first vowel of ``shorter`` to its end and is
    compared right-aligned against ``longer``, so any leading consonants of
    ``shorter`` are ignored.
    """

    offset = vowel_offset(shorter)
    if offset is None:
        return False

    tail = list(shorter[offset:])
    if len(tail) > len(longer):
        return False
    return list(longer[len(longer) - len(tail):]) == tail


def phonetic_rhyme(first: Sequence[str], second: Sequence[str]) -> bool:
    """Return ``True`` when two pronunciations rhyme.

    The side with more phonemes from its first vowel onward is the longer
    one; on a tie ``first`` is used. Sequences without a vowel never rhyme.
    """

    first_offset = vowel_offset(first)
    second_offset = vowel_offset(second)
    if first_offset is None or second_offset is None:
        return False

    if len(first) - first_offset >= len(second) - second_offset:
        return tails_match(first, second)
    return tails_match(second, first)


def match_variants(
    left: Iterable[Sequence[str]],
    right: Iterable[Sequence[str]],
) -> RhymeResult:
    """Compare every left variant with every right variant.

    ``UNKNOWN`` when either side has no variants, ``YES`` as soon as one pair
    rhymes, ``NO`` otherwise.
    """

    left_variants = list(left)
    right_variants = list(right)
    if not left_variants or not right_variants:
        return RhymeResult.UNKNOWN

    for left_variant in left_variants:
        for right_variant in right_variants:
            if phonetic_rhyme(left_variant, right_variant):
                return RhymeResult.YES
    return RhymeResult.NO


__all__ = ["RhymeResult", "match_variants", "phonetic_rhyme", "tails_match"]
