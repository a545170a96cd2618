"""
Named entity recognizer built from a gazetteer, a span scorer and a few numeric patterns

Labels are assigned in three passes, each only touching tokens which are still O:
  1. known names from the gazetteer, longest match first
  2. runs of proper nouns, scored for each entity label by an EntityScorer
  3. numbers, which become MONEY, PERCENT, DATE or NUMBER depending on their neighbors
"""

import logging
import math
import re
from numbers import Real

from annotext.models.common.exceptions import InvalidScorerOutput
from annotext.models.ner.gazetteer import Gazetteer
from annotext.models.ner.scorer import EntityScorer, RuleEntityScorer
from annotext.resources import english

logger = logging.getLogger('annotext')

OUTSIDE = 'O'
MONEY = 'MONEY'
PERCENT = 'PERCENT'
DATE = 'DATE'
NUMBER = 'NUMBER'

NAME_TAGS = ('NNP', 'NNPS')
NUMBER_TAG = 'CD'
YEAR_RE = re.compile(r"^(1[0-9]|20)\d\d$")
DEFAULT_MIN_SCORE = 0.5

class NamedEntityRecognizer:
    def __init__(self, gazetteer=None, scorer=None, min_score=DEFAULT_MIN_SCORE, titles=None, tokenizer=None):
        """
        gazetteer: a Gazetteer, or a dict from label to a list of names
        scorer: an EntityScorer used for proper noun runs the gazetteer does not know
        min_score: the best label has to score at least this much, otherwise the run stays O
        """
        if gazetteer is None:
            gazetteer = english.GAZETTEER
        if not isinstance(gazetteer, Gazetteer):
            gazetteer = Gazetteer(gazetteer, tokenizer=tokenizer)
        self.gazetteer = gazetteer

        if scorer is None:
            scorer = RuleEntityScorer()
        if not isinstance(scorer, EntityScorer) and not callable(getattr(scorer, 'score_entity_span', None)):
            raise ValueError("NER scorer must provide score_entity_span, got %s" % type(scorer).__name__)
        self.scorer = scorer
        self.labels = tuple(getattr(scorer, 'labels', english.ENTITY_LABELS))
        self.min_score = min_score

        self.titles = frozenset(english.TITLES if titles is None else titles)
        self.date_words = english.MONTHS | english.WEEKDAYS
        self.currency_symbols = english.CURRENCY_SYMBOLS
        self.percent_words = english.PERCENT_WORDS

    def recognize_words(self, words, tags):
        """ Return one label per word """
        labels = [OUTSIDE] * len(words)
        for start, end, label in self.gazetteer.find(words):
            for idx in range(start, end):
                labels[idx] = label
        self.label_names(words, tags, labels)
        self.label_numbers(words, tags, labels)
        return labels

    def recognize(self, sentence):
        """ Set the ner field of every token in the sentence """
        tags = [token.pos for token in sentence.tokens]
        labels = self.recognize_words(sentence.words, tags)
        for token, label in zip(sentence.tokens, labels):
            token.ner = label
        return labels

    def is_name_like(self, word, tag):
        if word in self.date_words or word in self.currency_symbols:
            return False
        if not any(ch.isalpha() for ch in word):
            return False
        return tag in NAME_TAGS or (tag == english.UNKNOWN_TAG and word[0].isupper())

    def name_runs(self, words, tags, labels):
        """ Yield (start, end) for each maximal run of unlabeled name-like words, titles removed """
        idx = 0
        while idx < len(words):
            if labels[idx] != OUTSIDE or not self.is_name_like(words[idx], tags[idx]):
                idx += 1
                continue
            end = idx
            while end < len(words) and labels[end] == OUTSIDE and self.is_name_like(words[end], tags[end]):
                end += 1
            start = idx
            while start < end and words[start] in self.titles:
                start += 1
            if start < end:
                yield start, end
            idx = end

    def label_names(self, words, tags, labels):
        for start, end in list(self.name_runs(words, tags, labels)):
            best_label = None
            best_score = None
            for label in self.labels:
                score = self.scorer.score_entity_span(words, tags, start, end, label)
                if isinstance(score, bool) or not isinstance(score, Real) or math.isnan(score):
                    raise InvalidScorerOutput("Entity scorer returned an invalid score %r for %s" % (score, label), token_index=start)
                # strictly greater, so earlier labels win ties
                if best_score is None or score > best_score:
                    best_label, best_score = label, score
            if best_score is not None and best_score >= self.min_score:
                logger.debug("Labeling %s as %s (%.2f)", " ".join(words[start:end]), best_label, best_score)
                for idx in range(start, end):
                    labels[idx] = best_label

    def label_numbers(self, words, tags, labels):
        n = len(words)
        idx = 0
        while idx < n:
            if labels[idx] != OUTSIDE or tags[idx] != NUMBER_TAG:
                idx += 1
                continue
            start = idx
            end = idx + 1
            while end < n and labels[end] == OUTSIDE and tags[end] == NUMBER_TAG:
                end += 1

            if start > 0 and labels[start - 1] == OUTSIDE and words[start - 1] in self.currency_symbols:
                label = MONEY
                start -= 1
            elif end < n and labels[end] == OUTSIDE and words[end].lower() in self.percent_words:
                label = PERCENT
                end += 1
            elif start > 0 and labels[start - 1] == OUTSIDE and words[start - 1] in self.date_words:
                label = DATE
                start -= 1
            elif end < n and labels[end] == OUTSIDE and words[end] in self.date_words:
                label = DATE
                end += 1
            elif end - start == 1 and YEAR_RE.match(words[start]):
                label = DATE
            else:
                label = NUMBER
            for pos in range(start, end):
                labels[pos] = label
            idx = end

        # month and day names without a number
        for idx in range(n):
            if labels[idx] == OUTSIDE and words[idx] in self.date_words and tags[idx] in NAME_TAGS:
                labels[idx] = DATE
