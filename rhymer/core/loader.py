"""Sources of ``(word, phonemes)`` pairs used to build the rhyme engine."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

import pronouncing

from rhymer.utils.observability import get_logger

Entry = Tuple[str, Tuple[str, ...]]

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")
_STRESS_PATTERN = re.compile(r"[012]")

_logger = get_logger(__name__).bind(component="dictionary_loader")


class DictionaryLoadError(Exception):
    """Raised when a dictionary source is unreadable or malformed."""


def _strip_variant(word: str) -> str:
    return _WORD_VARIANT_PATTERN.sub("", word)


def strip_stress(phoneme: str) -> str:
    """Drop CMU stress digits, e.g. ``"AE1"`` becomes ``"AE"``."""

    return _STRESS_PATTERN.sub("", phoneme)


def parse_dictionary_lines(lines: Iterable[str], *, source: str = "<lines>") -> Iterator[Entry]:
    """Yield entries from lines shaped like ``CAT K AE T``.

    Blank lines and ``;;;`` comments are skipped and a trailing ``(2)``
    variant marker on the word is removed.
    """

    for line_number, line in enumerate(lines, start=1):
        entry = line.strip()
        if not entry or entry.startswith(";;;"):
            continue

        raw_word, *phones = entry.split()
        word = _strip_variant(raw_word)
        if not word or not phones:
            raise DictionaryLoadError(
                f"{source}:{line_number}: expected a word followed by phonemes, got {entry!r}"
            )
        yield word, tuple(phones)


def load_dictionary_file(path: Path | str) -> List[Entry]:
    """Read every entry of a dictionary file in the ``WORD PH PH ...`` format."""

    dict_path = Path(path)
    try:
        with dict_path.open("r", encoding="utf-8") as handle:
            entries = list(parse_dictionary_lines(handle, source=str(dict_path)))
    except (OSError, UnicodeDecodeError) as exc:
        _logger.error(
            "Dictionary file could not be read",
            context={"path": str(dict_path), "error": str(exc)},
        )
        raise DictionaryLoadError(f"cannot read dictionary {dict_path}: {exc}") from exc

    _logger.info(
        "Dictionary file loaded",
        context={"path": str(dict_path), "entries": len(entries)},
    )
    return entries


def iter_cmudict_entries() -> Iterator[Entry]:
    """Yield the CMU dictionary bundled with :mod:`pronouncing`, stress removed."""

    pronouncing.init_cmu()
    for word, phones in pronouncing.pronunciations:
        phonemes = tuple(strip_stress(phone) for phone in phones.split())
        if not word or not phonemes:
            continue
        yield word, phonemes


__all__ = [
    "DictionaryLoadError",
    "Entry",
    "iter_cmudict_entries",
    "load_dictionary_file",
    "parse_dictionary_lines",
    "strip_stress",
]
