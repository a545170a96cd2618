"""
Scorers which rate how well a run of capitalized words fits an entity label
"""

from abc import ABC, abstractmethod

from annotext.resources import english

PERSON = 'PERSON'
LOCATION = 'LOCATION'
ORGANIZATION = 'ORGANIZATION'
MISC = 'MISC'

class EntityScorer(ABC):
    # labels this scorer knows how to rate, in tie breaking order
    labels = english.ENTITY_LABELS

    @abstractmethod
    def score_entity_span(self, words, tags, start, end, label):
        """
        Return a score in [0, 1] for words[start:end] being an entity of type label

        tags are the pos tags of the whole sentence
        """


class RuleEntityScorer(EntityScorer):
    """
    Adds up evidence from the words in and around the span

    titles in front of the span and known first names suggest a person,
    company suffixes an organization, and location words or a preceding
    locative preposition a location
    """
    def __init__(self, first_names=None, titles=None, organization_suffixes=None, location_words=None,
                 location_suffixes=None, location_prepositions=None, demonym_suffixes=None):
        self.first_names = frozenset(english.FIRST_NAMES if first_names is None else first_names)
        self.titles = frozenset(english.TITLES if titles is None else titles)
        self.organization_suffixes = frozenset(english.ORGANIZATION_SUFFIXES if organization_suffixes is None else organization_suffixes)
        self.location_words = frozenset(english.LOCATION_WORDS if location_words is None else location_words)
        self.location_suffixes = tuple(english.LOCATION_SUFFIXES if location_suffixes is None else location_suffixes)
        self.location_prepositions = frozenset(english.LOCATION_PREPOSITIONS if location_prepositions is None else location_prepositions)
        self.demonym_suffixes = tuple(english.DEMONYM_SUFFIXES if demonym_suffixes is None else demonym_suffixes)

    def score_entity_span(self, words, tags, start, end, label):
        span = words[start:end]
        prev_word = words[start - 1] if start > 0 else None
        if label == PERSON:
            score = self.score_person(span, tags[start:end], prev_word)
        elif label == LOCATION:
            score = self.score_location(span, prev_word)
        elif label == ORGANIZATION:
            score = self.score_organization(span)
        elif label == MISC:
            score = self.score_misc(span)
        else:
            score = 0.0
        return min(max(score, 0.0), 1.0)

    def score_person(self, span, tags, prev_word):
        score = 0.0
        if prev_word in self.titles:
            score += 0.6
        if span[0] in self.first_names:
            score += 0.5
        if 2 <= len(span) <= 3 and all(tag in ('NNP', 'NNPS') for tag in tags):
            score += 0.2
        if span[-1] in self.organization_suffixes or span[-1] in self.location_words:
            score -= 0.6
        return score

    def score_location(self, span, prev_word):
        score = 0.0
        if prev_word is not None and prev_word.lower() in self.location_prepositions:
            score += 0.4
        if span[-1] in self.location_words:
            score += 0.7
        if len(span[-1]) > 4 and span[-1].lower().endswith(self.location_suffixes):
            score += 0.3
        return score

    def score_organization(self, span):
        score = 0.0
        if len(span) > 1 and span[-1] in self.organization_suffixes:
            score += 0.8
        letters = [ch for ch in span[0] if ch.isalpha()]
        if len(span) == 1 and len(letters) >= 2 and all(ch.isupper() for ch in letters):
            # acronyms lean towards organizations, but not enough on their own
            score += 0.4
        return score

    def score_misc(self, span):
        if len(span) == 1 and len(span[0]) > 4 and span[0].lower().endswith(self.demonym_suffixes):
            return 0.3
        return 0.0
