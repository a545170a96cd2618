"""
Processor for performing dependency parsing
"""

from annotext.models.depparse.parser import DependencyParser, RuleTransitionScorer
from annotext.pipeline._constants import *
from annotext.pipeline.processor import SentenceProcessor, register_processor

@register_processor(name=PARSE)
class ParseProcessor(SentenceProcessor):

    # set of processor requirements this processor fulfills
    PROVIDES_DEFAULT = set([PARSE])
    # set of processor requirements for this processor
    REQUIRES_DEFAULT = set([TOKENIZE, POS])

    def _set_up_model(self, config):
        scorer = config.get('scorer')
        if scorer is None:
            scorer = RuleTransitionScorer(label_weights=config.get('label_weights'))
        self._model = DependencyParser(scorer)

    def process_sentence(self, sentence):
        self._model.parse(sentence)
