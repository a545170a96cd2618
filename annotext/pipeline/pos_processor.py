"""
Processor for performing part-of-speech tagging
"""

from annotext.models.pos.scorer import DEFAULT_SMOOTHING, LexiconTagScorer
from annotext.models.pos.tagger import POSTagger
from annotext.pipeline._constants import *
from annotext.pipeline.processor import SentenceProcessor, register_processor

@register_processor(name=POS)
class POSProcessor(SentenceProcessor):

    # set of processor requirements this processor fulfills
    PROVIDES_DEFAULT = set([POS])
    # set of processor requirements for this processor
    REQUIRES_DEFAULT = set([TOKENIZE, SPLIT])

    def _set_up_model(self, config):
        scorer = config.get('scorer')
        if scorer is None:
            scorer = LexiconTagScorer(lexicon=config.get('lexicon'),
                                      transitions=config.get('transitions'),
                                      suffix_rules=config.get('suffix_rules'),
                                      smoothing=config.get('smoothing', DEFAULT_SMOOTHING))
        self._model = POSTagger(scorer)

    def process_sentence(self, sentence):
        self._model.tag(sentence)
