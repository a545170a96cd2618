"""
Processor for performing lemmatization
"""

from annotext.models.lemma.lemmatizer import Lemmatizer
from annotext.pipeline._constants import *
from annotext.pipeline.processor import SentenceProcessor, register_processor

@register_processor(name=LEMMA)
class LemmaProcessor(SentenceProcessor):

    # set of processor requirements this processor fulfills
    PROVIDES_DEFAULT = set([LEMMA])
    # set of processor requirements for this processor
    # the rules are chosen by pos tag, so the tagger has to run first
    REQUIRES_DEFAULT = set([TOKENIZE, POS])

    def _set_up_model(self, config):
        self._model = Lemmatizer(exceptions=config.get('exceptions'),
                                 word_lemmas=config.get('word_lemmas'),
                                 rules=config.get('rules'),
                                 base_forms=config.get('base_forms'))

    def process_sentence(self, sentence):
        self._model.lemmatize(sentence)
