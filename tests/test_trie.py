from rhymer.core import RhymeTrie


def _build(entries):
    trie = RhymeTrie()
    for word, phonemes in entries:
        trie.insert(word, phonemes)
    return trie


def test_insert_stores_word_at_end_of_reversed_key():
    trie = RhymeTrie()

    assert trie.insert("CAT", ["K", "AE", "T"]) is True

    node = trie.root.children["T"].children["AE"]
    assert node.words == {"CAT"}
    assert trie.root.children["T"].words == set()
    assert len(trie) == 1
    assert trie.node_count == 3


def test_insert_skips_pronunciations_without_rhyme_key():
    trie = RhymeTrie()

    assert trie.insert("HMM", ["HH", "M"]) is False
    assert trie.insert("BROKEN", ["B", "", "OW"]) is False
    assert trie.root.children == {}
    assert len(trie) == 0


def test_find_returns_words_sharing_the_key():
    trie = _build([("CAT", ["K", "AE", "T"]), ("BAT", ["B", "AE", "T"]), ("DOG", ["D", "AA", "G"])])

    assert trie.find(["S", "AE", "T"]) == {"CAT", "BAT"}
    assert trie.find(["AE", "T"]) == {"CAT", "BAT"}


def test_find_includes_descendants_with_longer_keys():
    trie = _build(
        [
            ("CRUNK", ["K", "R", "AH", "NG", "K"]),
            ("CHIPMUNK", ["CH", "IH", "P", "M", "AH", "NG", "K"]),
            ("SINK", ["S", "IH", "NG", "K"]),
        ]
    )

    assert trie.find(["AH", "NG", "K"]) == {"CRUNK", "CHIPMUNK"}


def test_find_strict_only_returns_exact_keys():
    trie = _build(
        [
            ("CRUNK", ["K", "R", "AH", "NG", "K"]),
            ("CHIPMUNK", ["CH", "IH", "P", "M", "AH", "NG", "K"]),
        ]
    )

    assert trie.find(["AH", "NG", "K"], strict=True) == {"CRUNK"}
    assert trie.find(["M", "AH", "NG", "K"], strict=True) == {"CRUNK"}


def test_find_missing_path_or_no_vowel_is_empty():
    trie = _build([("CAT", ["K", "AE", "T"])])

    assert trie.find(["T", "K", "O"]) == set()
    assert trie.find(["T", "K"]) == set()
    assert trie.find([]) == set()
    assert trie.find(["IH", "T"]) == set()


def test_find_handles_deep_tries_without_recursion():
    trie = RhymeTrie()
    phonemes = ["AH"]
    for index in range(2000):
        phonemes = ["AH"] + phonemes
        trie.insert(f"WORD{index}", phonemes)

    found = trie.find(["AH"])

    assert len(found) == 2000


def test_find_returns_a_fresh_set():
    trie = _build([("CAT", ["K", "AE", "T"])])

    result = trie.find(["AE", "T"], strict=True)
    result.add("INTRUDER")

    assert trie.find(["AE", "T"], strict=True) == {"CAT"}
