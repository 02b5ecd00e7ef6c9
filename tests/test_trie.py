import pytest

from dsakit.trie import Trie

WORDS = ["the", "a", "there", "their", "any"]


def test_example_lookups():
    trie = Trie(WORDS)
    assert trie.search("there")
    assert not trie.search("data")


def test_all_inserted_words_are_found():
    trie = Trie(WORDS)
    assert all(word in trie for word in WORDS)


def test_prefix_is_not_a_word():
    trie = Trie(WORDS)
    assert not trie.search("thei")
    assert not trie.search("an")


def test_insert_later():
    trie = Trie()
    assert "data" not in trie
    trie.insert("data")
    assert "data" in trie


def test_invalid_characters_raise():
    trie = Trie(WORDS)
    with pytest.raises(ValueError):
        trie.insert("Hello")
    with pytest.raises(ValueError):
        trie.search("a b")