import pytest

from cpkit.trie import Trie


@pytest.fixture
def trie():
    words = Trie()
    for word in ("apple", "app", "banana", "band"):
        words.insert(word)
    return words


@pytest.mark.parametrize("word", ["apple", "app", "banana", "band"])
def test_inserted_words_found(trie, word):
    assert trie.search(word) is True
    assert trie.starts_with(word) is True


@pytest.mark.parametrize("word", ["ap", "ban", "bananas", "cherry", ""])
def test_missing_words(trie, word):
    assert trie.search(word) is False


@pytest.mark.parametrize("prefix", ["", "a", "ap", "ban", "band"])
def test_prefixes_found(trie, prefix):
    assert trie.starts_with(prefix) is True


@pytest.mark.parametrize("prefix", ["c", "apples", "bana_", "bx"])
def test_prefixes_missing(trie, prefix):
    assert trie.starts_with(prefix) is False


def test_empty_word_can_be_inserted():
    words = Trie()
    assert words.search("") is False
    words.insert("")
    assert words.search("") is True


def test_insert_is_idempotent(trie):
    trie.insert("app")
    assert trie.search("app") is True
    assert trie.search("appl") is False