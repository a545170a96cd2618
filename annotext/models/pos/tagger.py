"""
Greedy left to right part of speech tagger
"""

import logging
import math
from collections.abc import Mapping
from numbers import Real

from annotext.models.common.exceptions import InvalidScorerOutput
from annotext.models.pos.scorer import LexiconTagScorer, TagScorer
from annotext.resources.english import SENTENCE_START, UNKNOWN_TAG

logger = logging.getLogger('annotext')

class POSTagger:
    """
    Tags each word with the best scoring candidate given the previous tag

    Ties are broken by tag name, so the same sentence always gets the same tags
    """
    def __init__(self, scorer=None):
        if scorer is None:
            scorer = LexiconTagScorer()
        if not isinstance(scorer, TagScorer) and not callable(getattr(scorer, 'score_candidates', None)):
            raise ValueError("POS scorer must provide score_candidates, got %s" % type(scorer).__name__)
        self.scorer = scorer

    def tag_words(self, words):
        """ Return the list of tags for a list of words """
        tags = []
        prev_tag = SENTENCE_START
        for index in range(len(words)):
            scores = self.scorer.score_candidates(words, index, prev_tag)
            tag = self.choose(scores, index)
            tags.append(tag)
            prev_tag = tag
        return tags

    def tag(self, sentence):
        """ Set the pos field of every token in the sentence """
        tags = self.tag_words(sentence.words)
        for token, tag in zip(sentence.tokens, tags):
            token.pos = tag
        return tags

    @staticmethod
    def choose(scores, index):
        if not isinstance(scores, Mapping):
            raise InvalidScorerOutput("Tag scorer returned %s instead of a mapping" % type(scores).__name__, token_index=index)
        if len(scores) == 0:
            return UNKNOWN_TAG
        for tag, score in scores.items():
            if not isinstance(tag, str) or not tag:
                raise InvalidScorerOutput("Tag scorer returned an invalid tag %r" % (tag,), token_index=index)
            if isinstance(score, bool) or not isinstance(score, Real) or math.isnan(score):
                raise InvalidScorerOutput("Tag scorer returned an invalid score %r for %s" % (score, tag), token_index=index)
        return min(scores.items(), key=lambda x: (-x[1], x[0]))[0]
