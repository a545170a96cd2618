"""
Tests of the greedy dependency parser
"""

import pytest

from annotext.tests import *
from annotext.models.common.doc import Document, FRAGMENT
from annotext.models.common.exceptions import InvalidScorerOutput
from annotext.models.depparse.parser import DependencyParser, TransitionScorer, arc_label
from annotext.models.depparse.transitions import Shift, initial_state

pytestmark = [pytest.mark.travis]

class ConstantScorer(TransitionScorer):
    def __init__(self, score):
        self.score = score

    def score_transition(self, state, transition):
        return self.score

@pytest.fixture(scope="module")
def parser():
    return DependencyParser()

def test_en_doc(parser):
    tree = parser.parse_words(EN_DOC_TOKENS[:6], EN_DOC_POS[:6])
    assert tree.root == 2
    assert tree.arcs == {0: (1, "compound"), 1: (2, "nsubj"), 3: (4, "compound"), 4: (2, "obj"), 5: (2, "punct")}

    tree = parser.parse_words(EN_DOC_TOKENS[6:], EN_DOC_POS[6:])
    assert tree.root == 1
    assert tree.arcs == {0: (1, "nsubj"), 2: (1, "punct")}

def test_simple_sentence(parser):
    tree = parser.parse_words(["The", "cat", "sleeps"], ["DT", "NN", "VBZ"])
    assert tree.root == 2
    assert tree.arcs == {0: (1, "det"), 1: (2, "nsubj")}
    assert tree.children(2) == [1]
    assert tree.label_of(2) == "root"
    assert tree.head_of(2) is None

def test_one_word(parser):
    tree = parser.parse_words(["Hello"], ["UH"])
    assert tree.root == 0
    assert tree.arcs == {}

def test_empty(parser):
    tree = parser.parse_words([], [])
    assert tree.root is None
    assert tree.arcs == {}
    tree.validate()

def test_fragments(parser):
    tree = parser.parse_words(["Hello", "there", "world"], ["UH", "UH", "UH"])
    assert tree.root == 0
    assert tree.arcs == {1: (0, FRAGMENT), 2: (0, FRAGMENT)}

def test_no_positive_scores():
    parser = DependencyParser(ConstantScorer(0))
    tree = parser.parse_words(EN_DOC_TOKENS[:6], EN_DOC_POS[:6])
    assert tree.root == 0
    assert tree.arcs == {idx: (0, FRAGMENT) for idx in range(1, 6)}

@pytest.mark.parametrize("score", ["high", None, float("nan"), False])
def test_invalid_score(score):
    parser = DependencyParser(ConstantScorer(score))
    with pytest.raises(InvalidScorerOutput):
        parser.parse_words(["The", "cat", "sleeps"], ["DT", "NN", "VBZ"])

def test_not_a_scorer():
    with pytest.raises(ValueError):
        DependencyParser(scorer=42)

def test_next_transition_shifts(parser):
    state = initial_state(["The", "cat"], ["DT", "NN"])
    assert parser.next_transition(state) == Shift()

def test_arc_label():
    state = initial_state(["The", "cat", "sleeps"], ["DT", "NN", "VBZ"])
    assert arc_label(state, 1, 0) == "det"
    assert arc_label(state, 0, 1) is None
    assert arc_label(state, 2, 1) == "nsubj"

def test_parse_sentence(parser):
    doc = Document([[{"text": word} for word in EN_DOC_TOKENS[6:]]])
    sentence = doc.sentences[0]
    for token, tag in zip(sentence.tokens, EN_DOC_POS[6:]):
        token.pos = tag
    parser.parse(sentence)
    assert [token.head for token in sentence.tokens] == [2, 0, 2]
    assert [token.deprel for token in sentence.tokens] == ["nsubj", "root", "punct"]
    assert [(head.text, dep.text) for head, _, dep in sentence.dependencies] == [("left", "He"), ("ROOT", "left"), ("left", ".")]

def test_parse_needs_tags(parser):
    doc = Document([[{"text": "He"}, {"text": "left"}]])
    with pytest.raises(ValueError):
        parser.parse(doc.sentences[0])
