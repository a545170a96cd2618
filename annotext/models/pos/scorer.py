"""
Scorers which propose part of speech tags for the tagger

A TagScorer sees the words of one sentence, the position being tagged and the
tag chosen for the previous word, and returns a mapping from candidate tags to
scores.  The tagger only compares scores, so they do not need to be normalized.
"""

from abc import ABC, abstractmethod
import logging
import re

import numpy as np

from annotext.resources import english

logger = logging.getLogger('annotext')

NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:[.,:/]\d+)*|\.\d+)$")
ORDINAL_RE = re.compile(r"^\d+(?:st|nd|rd|th)$", re.IGNORECASE)
DEFAULT_SMOOTHING = 0.01

class TagScorer(ABC):
    @abstractmethod
    def score_candidates(self, words, index, prev_tag):
        """
        Return a dict from tag to score for words[index]

        prev_tag is the tag chosen for words[index - 1], or SENTENCE_START at the start of a sentence.
        An empty dict means the scorer has no idea, and the word gets the UNKNOWN tag
        """


class LexiconTagScorer(TagScorer):
    """
    Scores each candidate tag as prior(tag | word) * P(tag | previous tag)

    Priors come from the lexicon, looking up the exact form first and then the
    lowercased form.  Words missing from the lexicon go through a guesser based
    on the shape of the word.  The transition probabilities are kept in a
    row-normalized numpy matrix, smoothed so that no transition is impossible.
    """
    def __init__(self, lexicon=None, transitions=None, suffix_rules=None, tagset=None, smoothing=DEFAULT_SMOOTHING):
        self.lexicon = dict(english.LEXICON if lexicon is None else lexicon)
        self.suffix_rules = list(english.SUFFIX_RULES if suffix_rules is None else suffix_rules)
        self.tagset = tuple(english.TAGSET if tagset is None else tagset)
        transitions = english.TAG_TRANSITIONS if transitions is None else transitions

        self.tag_index = {tag: idx for idx, tag in enumerate(self.tagset)}
        self.prev_index = {tag: idx for idx, tag in enumerate((english.SENTENCE_START,) + self.tagset)}
        self.transition_matrix = self.build_transition_matrix(transitions, smoothing)
        # used for a previous tag the matrix does not know about, such as UNKNOWN
        self.uniform = 1.0 / len(self.tagset)

    def build_transition_matrix(self, transitions, smoothing):
        matrix = np.full((len(self.prev_index), len(self.tag_index)), smoothing, dtype=np.float64)
        for prev_tag, row in transitions.items():
            if prev_tag not in self.prev_index:
                logger.debug("Skipping transitions from unknown tag %s", prev_tag)
                continue
            for tag, weight in row.items():
                if tag in self.tag_index:
                    matrix[self.prev_index[prev_tag], self.tag_index[tag]] += weight
        return matrix / matrix.sum(axis=1, keepdims=True)

    def transition(self, prev_tag, tag):
        if prev_tag not in self.prev_index or tag not in self.tag_index:
            return self.uniform
        return float(self.transition_matrix[self.prev_index[prev_tag], self.tag_index[tag]])

    def candidates(self, word):
        """ Prior distribution over tags for a word, empty if nothing is known about it """
        if word in self.lexicon:
            return self.lexicon[word]
        lower = word.lower()
        if lower in self.lexicon:
            return self.lexicon[lower]
        return self.guess(word)

    def guess(self, word):
        if word in english.PUNCTUATION_TAGS:
            return {english.PUNCTUATION_TAGS[word]: 1.0}
        if word in english.AMBIGUOUS_PUNCTUATION:
            return english.AMBIGUOUS_PUNCTUATION[word]
        if NUMBER_RE.match(word):
            return {'CD': 1.0}
        if ORDINAL_RE.match(word):
            return {'JJ': 1.0}
        if not any(ch.isalnum() for ch in word):
            return {'SYM': 1.0}
        letters = [ch for ch in word if ch.isalpha()]
        if len(letters) >= 2 and all(ch.isupper() for ch in letters):
            # acronyms such as NATO or U.S.A
            return {'NNP': 1.0}
        if any(ch.isdigit() for ch in word):
            return {'CD': 0.6, 'NN': 0.4}

        capitalized = word[0].isupper()
        if '-' in word:
            last_part = word.rsplit('-', 1)[1]
            guessed = self.guess_suffix(last_part, capitalized)
            if guessed:
                return guessed
            return english.HYPHENATED_TAGS[1 if capitalized else 0]
        return self.guess_suffix(word, capitalized)

    def guess_suffix(self, word, capitalized):
        lower = word.lower()
        for suffix, lower_tags, capitalized_tags in self.suffix_rules:
            if len(lower) < len(suffix) + 2 or not lower.endswith(suffix):
                continue
            tags = capitalized_tags if capitalized else lower_tags
            if tags is not None:
                return tags
        return {}

    def score_candidates(self, words, index, prev_tag):
        priors = self.candidates(words[index])
        return {tag: prior * self.transition(prev_tag, tag) for tag, prior in priors.items()}
