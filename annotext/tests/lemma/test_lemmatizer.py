"""
Tests of the dictionary and rule based lemmatizer
"""

import pytest

from annotext.tests import *
from annotext.models.common.doc import Document
from annotext.models.lemma.lemmatizer import Lemmatizer, restore_stem

pytestmark = [pytest.mark.travis]

@pytest.fixture(scope="module")
def lemmatizer():
    return Lemmatizer()

@pytest.mark.parametrize("word, pos, lemma", [
    ("met", "VBD", "meet"),
    ("left", "VBD", "leave"),
    ("left", "JJ", "left"),
    ("running", "VBG", "run"),
    ("children", "NNS", "child"),
    ("me", "PRP", "i"),
    ("He", "PRP", "he"),
    ("The", "DT", "the"),
    ("'s", "VBZ", "be"),
    ("'s", "POS", "'s"),
])
def test_dictionary_lemmas(lemmatizer, word, pos, lemma):
    assert lemmatizer.lemmatize_word(word, pos) == lemma

@pytest.mark.parametrize("word, pos, lemma", [
    ("cats", "NNS", "cat"),
    ("studies", "NNS", "study"),
    ("boxes", "NNS", "box"),
    ("walked", "VBD", "walk"),
    ("smiled", "VBD", "smile"),
    ("stopped", "VBN", "stop"),
    ("hopping", "VBG", "hop"),
    ("sued", "VBD", "sue"),
    ("argued", "VBN", "argue"),
    ("happier", "JJR", "happy"),
])
def test_rule_lemmas(lemmatizer, word, pos, lemma):
    assert lemmatizer.lemmatize_word(word, pos) == lemma

def test_proper_nouns_keep_case(lemmatizer):
    assert lemmatizer.lemmatize_word("Smith", "NNP") == "Smith"
    assert lemmatizer.lemmatize_word("Dr.", "NNP") == "Dr."
    assert lemmatizer.lemmatize_word("Kennedys", "NNPS") == "Kennedy"

def test_punctuation_and_unknown(lemmatizer):
    assert lemmatizer.lemmatize_word(".", ".") == "."
    assert lemmatizer.lemmatize_word(NOVEL_PROPER_NOUN, "UNKNOWN") == NOVEL_PROPER_NOUN.lower()

def test_restore_stem():
    assert restore_stem("stopp") == "stop"
    assert restore_stem("smil") == "smile"
    assert restore_stem("lov") == "love"
    assert restore_stem("walk") == "walk"
    # doubled l and s stay
    assert restore_stem("fall") == "fall"
    assert restore_stem("pass") == "pass"

def test_empty_lemma():
    lemmatizer = Lemmatizer(exceptions={("blank", "NN"): ""}, word_lemmas={}, rules={}, base_forms=[])
    assert lemmatizer.lemmatize_word("blank", "NN") == "_"

def test_custom_rules():
    lemmatizer = Lemmatizer(exceptions={}, word_lemmas={}, rules={"NNS": [("en", "")]}, base_forms=["ox"])
    assert lemmatizer.lemmatize_word("oxen", "NNS") == "ox"
    assert lemmatizer.lemmatize_word("oxen", "NN") == "oxen"

def test_lemmatize_sentence(lemmatizer):
    doc = Document([[{"text": word} for word in EN_DOC_TOKENS[:6]]])
    sentence = doc.sentences[0]
    for token, tag in zip(sentence.tokens, EN_DOC_POS[:6]):
        token.pos = tag
    assert lemmatizer.lemmatize(sentence) == EN_DOC_LEMMAS[:6]
    assert [token.lemma for token in sentence.tokens] == EN_DOC_LEMMAS[:6]

def test_missing_pos(lemmatizer):
    doc = Document([[{"text": "cats"}, {"text": "sleep"}]])
    with pytest.raises(ValueError):
        lemmatizer.lemmatize(doc.sentences[0])
    # nothing was set
    assert [token.lemma for token in doc.sentences[0].tokens] == [None, None]
