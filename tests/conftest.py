import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhymer.core import RhymeEngine


SAMPLE_ENTRIES = [
    ("CAT", ["K", "AE", "T"]),
    ("BAT", ["B", "AE", "T"]),
    ("ACROBAT", ["AE", "K", "R", "AH", "B", "AE", "T"]),
    ("DOG", ["D", "AA", "G"]),
    ("AUNT", ["AE", "N", "T"]),
    ("AUNT", ["AO", "N", "T"]),
    ("RANT", ["R", "AE", "N", "T"]),
    ("WANT", ["W", "AO", "N", "T"]),
    ("DO", ["D", "UW"]),
    ("TO", ["T", "UW"]),
    ("TOOT", ["T", "UW", "T"]),
    ("OVER", ["OW", "V", "ER"]),
    ("CLOVER", ["K", "L", "OW", "V", "ER"]),
    ("EVER", ["EH", "V", "ER"]),
    ("MASTER", ["M", "AE", "S", "T", "ER"]),
    ("RASTER", ["R", "AE", "S", "T", "ER"]),
    ("HELLO", ["HH", "AH", "L", "OW"]),
    ("HELLO", ["HH", "EH", "L", "OW"]),
    ("CRUNK", ["K", "R", "AH", "NG", "K"]),
    ("DRUNK", ["D", "R", "AH", "NG", "K"]),
    ("CHIPMUNK", ["CH", "IH", "P", "M", "AH", "NG", "K"]),
    ("HMM", ["HH", "M"]),
]


@pytest.fixture
def sample_entries():
    return list(SAMPLE_ENTRIES)


@pytest.fixture
def engine(sample_entries):
    """Engine built from the small in-memory sample dictionary."""

    return RhymeEngine.from_entries(sample_entries)


@pytest.fixture
def dictionary_file(tmp_path, sample_entries):
    path = tmp_path / "reduxdict"
    lines = [f"{word} {' '.join(phonemes)}" for word, phonemes in sample_entries]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
