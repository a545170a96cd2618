"""
Tests of building a Pipeline and running it over whole documents
"""

import json
import threading
import time

import pytest

import annotext
from annotext import Pipeline
from annotext.tests import *
from annotext.models.common.exceptions import (AnnotationCancelled, AnnotationError, ConfigError, DeadlineExceeded,
                                               InputError, StageFailure)
from annotext.models.pos.scorer import LexiconTagScorer, TagScorer
from annotext.pipeline.core import PipelineRequirementsException, add_dependents, main
from annotext.pipeline.processor import ProcessorRegisterException, register_processor
from annotext.resources.english import UNKNOWN_TAG

pytestmark = [pytest.mark.pipeline, pytest.mark.travis]

class BrokenScorer(TagScorer):
    """ Returns a list instead of a mapping for any word called Boom """
    def __init__(self):
        self.scorer = LexiconTagScorer()

    def score_candidates(self, words, index, prev_tag):
        if words[index] == "Boom":
            return ["NN"]
        return self.scorer.score_candidates(words, index, prev_tag)

class CrashingScorer(TagScorer):
    def score_candidates(self, words, index, prev_tag):
        raise RuntimeError("the scorer fell over")

class CancellingScorer(TagScorer):
    """ Cancels the request when it reaches a sentence starting with Stop; other sentences wait for that """
    def __init__(self, cancel_event):
        self.scorer = LexiconTagScorer()
        self.cancel_event = cancel_event
        self.started = set()

    def score_candidates(self, words, index, prev_tag):
        if index == 0:
            self.started.add(words[0])
            if words[0] == "Stop":
                self.cancel_event.set()
            else:
                self.cancel_event.wait(5)
        return self.scorer.score_candidates(words, index, prev_tag)

@pytest.fixture(scope="module")
def pipeline():
    return Pipeline()

def test_en_doc_conll(pipeline):
    doc = pipeline(EN_DOC)
    assert "{:C}".format(doc) == EN_DOC_CONLL

def test_en_doc_fields(pipeline):
    doc = pipeline(EN_DOC)
    assert doc.get("text") == EN_DOC_TOKENS
    assert doc.get("pos") == EN_DOC_POS
    assert doc.get("lemma") == EN_DOC_LEMMAS
    assert doc.get("ner") == EN_DOC_NER
    assert [(ent.text, ent.type) for ent in doc.ents] == [("Smith", "PERSON"), ("John Kerry", "PERSON")]
    assert [(ent.start_char, ent.end_char) for ent in doc.ents] == [(4, 9), (14, 24)]

def test_module_annotate():
    doc = annotext.annotate(EN_DOC)
    assert "{:C}".format(doc) == EN_DOC_CONLL

def test_process_aliases(pipeline):
    assert pipeline.process(EN_DOC).to_dict() == pipeline.annotate(EN_DOC).to_dict()
    docs = pipeline.bulk_process([EN_DOC, "He left."])
    assert len(docs) == 2
    assert docs[1].get("text") == ["He", "left", "."]

def test_idempotent(pipeline):
    first = pipeline(EN_MULTI_SENTENCE_DOC)
    second = pipeline(EN_MULTI_SENTENCE_DOC)
    assert first.to_dict() == second.to_dict()
    assert "{:C}".format(first) == "{:C}".format(second)

def test_workers_match_inline(pipeline):
    threaded = Pipeline(num_workers=4)
    assert "{:C}".format(threaded(EN_MULTI_SENTENCE_DOC)) == "{:C}".format(pipeline(EN_MULTI_SENTENCE_DOC))

def test_document_invariants(pipeline):
    doc = pipeline(EN_MULTI_SENTENCE_DOC)
    assert len(doc.sentences) == 4
    assert [sentence.index for sentence in doc.sentences] == list(range(4))

    tokens = list(doc.iter_tokens())
    for token in tokens:
        assert EN_MULTI_SENTENCE_DOC[token.start_char:token.end_char] == token.text
        assert token.pos is not None
        assert token.lemma is not None
        assert token.ner is not None
    for prev_token, next_token in zip(tokens[:-1], tokens[1:]):
        assert prev_token.end_char <= next_token.start_char
    assert "".join(token.text for token in tokens) == "".join(EN_MULTI_SENTENCE_DOC.split())

    for sentence in doc.sentences:
        sentence.dependency_tree.validate()
        assert [token.head for token in sentence.tokens].count(0) == 1

def test_numeric_entities(pipeline):
    doc = pipeline("The company paid $ 30 for 20 % of the shares in 2008.")
    assert [(ent.text, ent.type) for ent in doc.ents] == [("$ 30", "MONEY"), ("20 %", "PERCENT"), ("2008", "DATE")]

def test_unknown_word(pipeline):
    doc = pipeline("He met %s." % NOVEL_PROPER_NOUN)
    token = doc.sentences[0].tokens[2]
    assert token.text == NOVEL_PROPER_NOUN
    assert token.pos == "UNKNOWN"
    assert token.ner == "O"

def test_sentence_ending_in_no(pipeline):
    doc = pipeline("I said no. Then he left.")
    assert [sentence.words for sentence in doc.sentences] == [["I", "said", "no", "."], ["Then", "he", "left", "."]]
    assert UNKNOWN_TAG not in doc.get("pos")

def test_empty_text(pipeline):
    doc = pipeline("")
    assert doc.sentences == []
    assert doc.num_tokens == 0
    assert doc.ents == []
    assert pipeline("   \n ").sentences == []

def test_bytes_input(pipeline):
    doc = pipeline(EN_DOC.encode("utf-8"))
    assert doc.text == EN_DOC
    assert doc.get("text") == EN_DOC_TOKENS

@pytest.mark.parametrize("text", [b"\xff\xfe", 42, None, "bad \udc80 text"])
def test_invalid_input(pipeline, text):
    with pytest.raises(InputError):
        pipeline(text)

def test_max_length():
    # the limit applies to the request text, not to the names the recognizer knows
    pipeline = Pipeline(tokenize_max_length=10)
    doc = pipeline("He left.")
    assert doc.get("text") == ["He", "left", "."]
    with pytest.raises(InputError):
        pipeline(EN_DOC)

def test_frozen_result(pipeline):
    doc = pipeline(EN_DOC)
    assert doc.frozen
    token = doc.sentences[0].tokens[0]
    with pytest.raises(ValueError):
        token.pos = "NN"
    with pytest.raises(ValueError):
        token.ner = "PERSON"

def test_disable_ner():
    pipeline = Pipeline(disable="ner")
    doc = pipeline(EN_DOC)
    assert doc.get("ner") == [None] * len(EN_DOC_TOKENS)
    assert doc.get("pos") == EN_DOC_POS
    assert doc.get("lemma") == EN_DOC_LEMMAS
    assert doc.ents == []
    assert doc.sentences[0].tokens[4].head == 3

def test_disable_cascades():
    pipeline = Pipeline(disable=["pos"])
    assert [processor.name for processor in pipeline.loaded_processors] == ["tokenize", "split"]
    doc = pipeline(EN_DOC)
    assert doc.get("pos") == [None] * len(EN_DOC_TOKENS)
    assert len(doc.sentences) == 2

def test_add_dependents():
    assert add_dependents(["split"]) == {"split", "pos", "lemma", "ner", "parse"}
    assert add_dependents(["lemma"]) == {"lemma"}
    assert add_dependents([]) == set()

def test_processor_subset():
    pipeline = Pipeline(processors="tokenize,split,pos")
    assert [processor.name for processor in pipeline.document_processors] == ["tokenize", "split"]
    assert [processor.name for processor in pipeline.sentence_processors] == ["pos"]
    doc = pipeline(EN_DOC)
    assert doc.get("pos") == EN_DOC_POS
    assert doc.get("lemma") == [None] * len(EN_DOC_TOKENS)
    assert doc.sentences[0].dependency_tree is None
    assert "POSProcessor" in str(pipeline)

def test_missing_requirement():
    with pytest.raises(PipelineRequirementsException) as excinfo:
        Pipeline(processors="tokenize,pos")
    assert isinstance(excinfo.value, ConfigError)
    assert excinfo.value.processor_req_fails[0].missing_reqs == {"split"}

@pytest.mark.parametrize("kwargs", [
    {"processors": "tokenize,sentiment"},
    {"disable": "coref"},
    {"processors": ""},
    {"disable": "tokenize"},
    {"num_workers": 0},
    {"num_workers": -2},
    {"num_workers": "two"},
    {"num_workers": True},
    {"split_newline_is_sentence_break": "sometimes"},
    {"tagger": "not a scorer"},
])
def test_bad_config(kwargs):
    with pytest.raises(ConfigError):
        Pipeline(**kwargs)

def test_named_collaborators():
    pipeline = Pipeline(abbreviations=["Approx."])
    doc = pipeline(EN_DOC)
    assert doc.sentences[0].words == ["Dr", "."]

def test_prefixed_options():
    pipeline = Pipeline(processors="tokenize,split", split_newline_is_sentence_break="always")
    doc = pipeline("Hello there\nGeneral Kenobi")
    assert [sentence.words for sentence in doc.sentences] == [["Hello", "there"], ["General", "Kenobi"]]

def test_filter_config():
    config = {"pos_scorer": 1, "tokenize_max_length": 5, "verbose": True}
    assert Pipeline.filter_config("tokenize", config) == {"max_length": 5}
    assert Pipeline.filter_config("pos", config) == {"scorer": 1}
    assert Pipeline.filter_config("ner", config) == {}

def test_invalid_scorer_output():
    pipeline = Pipeline(tagger=BrokenScorer())
    with pytest.raises(StageFailure) as excinfo:
        pipeline("Fine here. Then Boom there.")
    assert excinfo.value.stage == "pos"
    assert excinfo.value.sentence_index == 1
    assert excinfo.value.token_index == 1

def test_invalid_scorer_output_threaded():
    pipeline = Pipeline(tagger=BrokenScorer(), num_workers=3)
    with pytest.raises(StageFailure) as excinfo:
        pipeline("Fine here. Boom there. Fine again. And again.")
    assert excinfo.value.stage == "pos"
    assert excinfo.value.sentence_index == 1
    assert excinfo.value.token_index == 0

def test_scorer_exception():
    pipeline = Pipeline(tagger=CrashingScorer())
    with pytest.raises(StageFailure) as excinfo:
        pipeline(EN_DOC)
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert isinstance(excinfo.value, AnnotationError)
    # the pipeline still works for the next request
    with pytest.raises(StageFailure):
        pipeline("He left.")

def test_cancelled(pipeline):
    cancel_event = threading.Event()
    cancel_event.set()
    with pytest.raises(AnnotationCancelled):
        pipeline(EN_DOC, cancel_event=cancel_event)

@pytest.mark.parametrize("num_workers", [1, 2])
def test_cancelled_midway(num_workers):
    cancel_event = threading.Event()
    scorer = CancellingScorer(cancel_event)
    pipeline = Pipeline(tagger=scorer, num_workers=num_workers)
    with pytest.raises(AnnotationCancelled):
        pipeline("Stop now. One here. Two here. Three here. Four here.", cancel_event=cancel_event)
    # sentences which had not started when the event was set are never annotated
    assert "Stop" in scorer.started
    assert not scorer.started & {"Two", "Three", "Four"}
    if num_workers == 1:
        assert scorer.started == {"Stop"}

def test_cancelled_last_sentence():
    # the event is set while the last sentence runs, so no later check would see it
    cancel_event = threading.Event()
    pipeline = Pipeline(tagger=CancellingScorer(cancel_event))
    with pytest.raises(AnnotationCancelled):
        pipeline("Stop now.", cancel_event=cancel_event)

def test_document_stage_failure(monkeypatch):
    pipeline = Pipeline(processors="tokenize,split")
    def broken_split(tokens, text=None):
        raise RuntimeError("the splitter fell over")
    monkeypatch.setattr(pipeline.processors["split"].model, "split", broken_split)
    with pytest.raises(StageFailure) as excinfo:
        pipeline(EN_DOC)
    assert excinfo.value.stage == "split"
    assert excinfo.value.sentence_index is None
    assert isinstance(excinfo.value.__cause__, RuntimeError)

def test_deadline(pipeline):
    with pytest.raises(DeadlineExceeded) as excinfo:
        pipeline(EN_DOC, deadline=time.monotonic() - 1)
    assert excinfo.value.stage == "tokenize"
    # a deadline in the future does not interfere
    doc = pipeline(EN_DOC, deadline=time.monotonic() + 60)
    assert doc.get("text") == EN_DOC_TOKENS

def test_register_non_processor():
    with pytest.raises(ProcessorRegisterException):
        @register_processor("lowercase")
        class NotAProcessor:
            pass

def test_main_conll(tmp_path, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text(EN_DOC, encoding="utf-8")
    main(["--input_file", str(input_file)])
    assert capsys.readouterr().out.strip() == EN_DOC_CONLL

def test_main_response(tmp_path, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text(EN_DOC, encoding="utf-8")
    main(["--input_file", str(input_file), "--format", "response", "--num_workers", "2"])
    assert json.loads(capsys.readouterr().out) == EN_DOC_RESPONSE
