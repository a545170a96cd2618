"""
Basic tests of the data structures: Document, Sentence, Token, Span and DependencyTree
"""

import pytest

from annotext.tests import *
from annotext.models.common.doc import Document, DependencyTree, Token, TEXT, START_CHAR, END_CHAR, FRAGMENT
from annotext.models.tokenization.splitter import SentenceSplitter
from annotext.models.tokenization.tokenizer import Tokenizer

pytestmark = [pytest.mark.travis]

def build_doc(text=EN_DOC):
    tokens = Tokenizer().tokenize(text)
    return Document(SentenceSplitter().split(tokens, text), text=text)

def test_basic():
    doc = build_doc()
    assert doc.text == EN_DOC
    assert len(doc.sentences) == 2
    assert doc.num_tokens == len(EN_DOC_TOKENS)
    assert doc.get(TEXT) == EN_DOC_TOKENS
    assert doc.get(TEXT, as_sentences=True) == [EN_DOC_TOKENS[:6], EN_DOC_TOKENS[6:]]
    assert [sentence.index for sentence in doc.sentences] == [0, 1]
    assert [sentence.text for sentence in doc.sentences] == ["Dr. Smith met John Kerry.", "He left."]

def test_token_fields():
    doc = build_doc()
    token = doc.sentences[1].tokens[0]
    assert token.id == 1
    assert token.index == 0
    assert token.text == "He"
    assert token.start_char == 26
    assert token.end_char == 28
    assert token.sent is doc.sentences[1]
    assert token.pos is None
    assert token.head is None
    assert token.deprel is None
    assert doc.sentences[0].tokens[0].abbreviation

def test_whitespace():
    doc = build_doc()
    tokens = list(doc.iter_tokens())
    assert tokens[0].spaces_after == " "
    assert tokens[4].spaces_after == ""
    assert tokens[5].spaces_after == " "
    assert tokens[-1].spaces_after == ""
    assert tokens[4].adjacent_to(tokens[5])
    assert not tokens[5].adjacent_to(tokens[6])

def test_set_and_get():
    doc = build_doc()
    doc.set("pos", EN_DOC_POS)
    assert doc.get("pos") == EN_DOC_POS
    assert doc.get(["text", "pos"])[2] == ["met", "VBD"]

def test_set_once():
    doc = build_doc()
    token = doc.sentences[0].tokens[0]
    token.pos = "NNP"
    with pytest.raises(ValueError):
        token.pos = "NN"
    assert token.pos == "NNP"
    token.ner = "O"
    with pytest.raises(ValueError):
        token.ner = "PERSON"

def test_freeze():
    doc = build_doc()
    doc.freeze()
    assert doc.frozen
    assert all(sentence.frozen for sentence in doc.sentences)
    token = doc.sentences[0].tokens[0]
    assert token.frozen
    with pytest.raises(ValueError):
        token.pos = "NNP"
    with pytest.raises(ValueError):
        token.lemma = "dr."
    with pytest.raises(ValueError):
        doc.set_sentences([])
    with pytest.raises(ValueError):
        doc.sentences[0].dependency_tree = DependencyTree(6, 0, {idx: (0, FRAGMENT) for idx in range(1, 6)})

def test_token_needs_text():
    with pytest.raises(ValueError):
        Token(None, {TEXT: ""})

def test_build_ents():
    doc = build_doc("Mary met John Kerry, Bill and Paris.")
    labels = ["PERSON", "O", "PERSON", "PERSON", "O", "PERSON", "O", "LOCATION", "O"]
    assert len(labels) == doc.num_tokens
    doc.set("ner", labels)
    ents = doc.build_ents()
    assert [(ent.text, ent.type) for ent in ents] == [("Mary", "PERSON"), ("John Kerry", "PERSON"),
                                                      ("Bill", "PERSON"), ("Paris", "LOCATION")]
    assert doc.ents == doc.entities == ents
    assert ents[1].start_char == 9
    assert ents[1].end_char == 19
    assert ents[1].to_dict() == {"text": "John Kerry", "type": "PERSON", "start_char": 9, "end_char": 19}
    assert doc.sentences[0].ents == ents

def test_build_ents_label_change():
    doc = build_doc("Paris Hilton")
    doc.set("ner", ["LOCATION", "PERSON"])
    assert [(ent.text, ent.type) for ent in doc.build_ents()] == [("Paris", "LOCATION"), ("Hilton", "PERSON")]

def test_build_ents_not_adjacent():
    # tokens with the same label in different sentences never join
    doc = build_doc("Hello Kerry\n\nSmith left")
    assert len(doc.sentences) == 2
    doc.set("ner", ["O", "PERSON", "PERSON", "O"])
    assert [ent.text for ent in doc.build_ents()] == ["Kerry", "Smith"]

def test_build_ents_unset():
    doc = build_doc()
    assert doc.build_ents() == []

def test_tree():
    tree = DependencyTree(3, 2, {0: (1, "det"), 1: (2, "nsubj")})
    tree.validate()
    assert tree.head_of(0) == 1
    assert tree.label_of(1) == "nsubj"
    assert tree.label_of(2) == "root"
    assert tree.children(2) == [1]
    graph = tree.to_networkx()
    assert sorted(graph.edges()) == [(1, 0), (2, 1)]
    assert graph.edges[2, 1]["deprel"] == "nsubj"
    assert tree == DependencyTree(3, 2, {1: (2, "nsubj"), 0: (1, "det")})

@pytest.mark.parametrize("num_tokens, root, arcs", [
    (3, None, {0: (1, "det"), 1: (2, "nsubj")}),
    (3, 5, {0: (1, "det"), 1: (2, "nsubj")}),
    (3, 2, {0: (1, "det")}),
    (3, 2, {0: (1, "det"), 1: (2, "nsubj"), 2: (0, "dep")}),
    (3, 2, {0: (1, "det"), 1: (7, "nsubj")}),
    (4, 3, {0: (1, "det"), 1: (0, "nsubj"), 2: (3, "dep")}),
    (0, 0, {}),
])
def test_invalid_tree(num_tokens, root, arcs):
    with pytest.raises(ValueError):
        DependencyTree(num_tokens, root, arcs).validate()

def test_tree_size_must_match():
    doc = build_doc()
    with pytest.raises(ValueError):
        doc.sentences[1].dependency_tree = DependencyTree(2, 1, {0: (1, "nsubj")})

def test_conll():
    doc = build_doc()
    sentence = doc.sentences[1]
    for token, tag, lemma in zip(sentence.tokens, EN_DOC_POS[6:], EN_DOC_LEMMAS[6:]):
        token.pos = tag
        token.lemma = lemma
    sentence.dependency_tree = DependencyTree(3, 1, {0: (1, "nsubj"), 2: (1, "punct")})
    expected = "\n".join([
        "# sent_id = 1",
        "# text = He left.",
        "1\tHe\the\t_\tPRP\t_\t2\tnsubj\t_\tstart_char=26|end_char=28",
        "2\tleft\tleave\t_\tVBD\t_\t0\troot\t_\tstart_char=29|end_char=33|SpaceAfter=No",
        "3\t.\t.\t_\t.\t_\t2\tpunct\t_\tstart_char=33|end_char=34|SpaceAfter=No",
    ])
    assert "{:C}".format(sentence) == expected
    assert "{:c}".format(sentence) == "\n".join(expected.split("\n")[2:])

def test_to_dict():
    doc = build_doc("He left.")
    assert doc.to_dict() == [[{"id": 1, "text": "He", START_CHAR: 0, END_CHAR: 2},
                              {"id": 2, "text": "left", START_CHAR: 3, END_CHAR: 7},
                              {"id": 3, "text": ".", START_CHAR: 7, END_CHAR: 8}]]

def test_pretty_print():
    doc = build_doc("He left.")
    sentence = doc.sentences[0]
    sentence.dependency_tree = DependencyTree(3, 1, {0: (1, "nsubj"), 2: (1, "punct")})
    assert sentence.dependencies_string() == "('He', 2, 'nsubj')\n('left', 0, 'root')\n('.', 2, 'punct')"
    assert sentence.tokens_string().split("\n")[0] == "<Token id=1;text=He;head=2;deprel=nsubj;start_char=0;end_char=2>"
    sentence.tokens[0].ner = "PERSON"
    span = sentence.build_ents()[0]
    assert span.pretty_print() == "<Span text=He;type=PERSON;start_char=0;end_char=2>"
