"""
Tests of the word trie and the gazetteer matching
"""

import pytest

from annotext.models.ner.gazetteer import Gazetteer, Trie
from annotext.models.tokenization.tokenizer import Tokenizer

pytestmark = [pytest.mark.travis]

def test_trie():
    trie = Trie()
    trie.add(["New", "York"], "LOCATION")
    trie.add(["New", "York", "Times"], "ORGANIZATION")
    trie.add(["New", "York"], "LOCATION")
    assert len(trie) == 2

    assert trie.search(["New", "York"]) == "LOCATION"
    assert trie.search(["New"]) is None
    assert trie.search(["Old", "York"]) is None
    assert trie.starts_with(["New"])
    assert not trie.starts_with(["York"])

    words = ["in", "New", "York", "Times", "Square"]
    assert list(trie.matches_at(words, 1)) == [(3, "LOCATION"), (4, "ORGANIZATION")]
    assert list(trie.matches_at(words, 0)) == []

def test_trie_empty_entry():
    with pytest.raises(ValueError):
        Trie().add([], "PERSON")

def test_longest_match():
    gazetteer = Gazetteer({'LOCATION': ['New York'], 'ORGANIZATION': ['New York Times']})
    assert gazetteer.find(["The", "New", "York", "Times", "reported"]) == [(1, 4, 'ORGANIZATION')]
    assert gazetteer.find(["I", "love", "New", "York"]) == [(2, 4, 'LOCATION')]

def test_leftmost_match():
    gazetteer = Gazetteer({'PERSON': ['Ann Lee'], 'LOCATION': ['Lee Park']})
    assert gazetteer.find(["Ann", "Lee", "Park"]) == [(0, 2, 'PERSON')]

def test_multiple_matches_sorted():
    gazetteer = Gazetteer({'LOCATION': ['Paris', 'London']})
    assert gazetteer.find(["London", "and", "Paris"]) == [(0, 1, 'LOCATION'), (2, 3, 'LOCATION')]

def test_case():
    gazetteer = Gazetteer({'ORGANIZATION': ['Apple']})
    # a lowercase word is not a name
    assert gazetteer.find(["I", "ate", "an", "apple"]) == []
    assert gazetteer.find(["APPLE", "rocks"]) == [(0, 1, 'ORGANIZATION')]
    assert gazetteer.find(["Apple", "rocks"]) == [(0, 1, 'ORGANIZATION')]

def test_exact_match_wins():
    gazetteer = Gazetteer({'ORGANIZATION': ['US'], 'PERSON': ['us']})
    assert gazetteer.find(["Us"]) == [(0, 1, 'PERSON')]
    assert gazetteer.find(["US"]) == [(0, 1, 'ORGANIZATION')]

def test_entries_use_tokenizer():
    entries = {'ORGANIZATION': ["Joe's Diner"]}
    words = ["Joe", "'s", "Diner"]
    assert Gazetteer(entries).find(words) == []
    assert Gazetteer(entries, tokenizer=Tokenizer()).find(words) == [(0, 3, 'ORGANIZATION')]

def test_entries_as_word_lists():
    gazetteer = Gazetteer({'PERSON': [["Mary", "Anne"]]})
    assert gazetteer.find(["Mary", "Anne", "smiled"]) == [(0, 2, 'PERSON')]
