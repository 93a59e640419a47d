from wordcover.masks import build_index, canonicalize, canonicalize_word, letter_mask, mask_letters, popcount


def test_letter_mask():
    assert letter_mask("abcde") == 0b11111
    assert letter_mask("edcba") == 0b11111
    assert letter_mask("z") == 1 << 25
    assert letter_mask("hello") is None
    assert letter_mask("ab1de") is None
    assert mask_letters(letter_mask("waltz")) == "altwz"


def test_canonicalize_word_accepts():
    word, mask = canonicalize_word("  FJORD \n")
    assert word == "fjord"
    assert popcount(mask) == 5
    assert canonicalize_word("Waltz") == ("waltz", letter_mask("waltz"))


def test_canonicalize_word_rejects():
    for raw in ["hello", "four", "toolong", "", "ab-de", "cafés", "ab de", "APPLE"]:
        assert canonicalize_word(raw) is None, raw


def test_build_index():
    index = build_index(["fghij", "abcde", "bcdea", "abcde", "xyz", "hello", "ABCDE"])
    abcde = letter_mask("abcde")
    fghij = letter_mask("fghij")

    assert index.candidates == [abcde, fghij]
    assert index.groups == {abcde: ["abcde", "bcdea"], fghij: ["fghij"]}
    assert index.words_read == 7
    assert index.five_letter_words == 6
    assert index.accepted_words == 5


def test_build_index_empty():
    index = build_index([])
    assert index.candidates == []
    assert index.groups == {}


def test_canonicalize():
    groups, candidates = canonicalize(["vibex", "nymph", "waltz", "nymph"])
    assert candidates == sorted(candidates)
    assert len(candidates) == len(set(candidates)) == 3
    assert all(popcount(mask) == 5 for mask in candidates)
    assert groups[letter_mask("nymph")] == ["nymph"]
