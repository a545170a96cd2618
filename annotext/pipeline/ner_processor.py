"""
Processor for performing named entity tagging
"""

import logging

from annotext.models.ner.recognizer import DEFAULT_MIN_SCORE, NamedEntityRecognizer
from annotext.models.tokenization.tokenizer import Tokenizer
from annotext.pipeline._constants import *
from annotext.pipeline.processor import SentenceProcessor, register_processor

logger = logging.getLogger('annotext')

@register_processor(name=NER)
class NERProcessor(SentenceProcessor):

    # set of processor requirements this processor fulfills
    PROVIDES_DEFAULT = set([NER])
    # set of processor requirements for this processor
    REQUIRES_DEFAULT = set([TOKENIZE, POS])

    def _set_up_model(self, config):
        # gazetteer names are tokenized the same way as the text they are matched against,
        # but the request length limit does not apply to them
        tokenizer = None
        if TOKENIZE in self.pipeline.processors:
            tokenize_config = self.pipeline.processors[TOKENIZE].config
            tokenizer = Tokenizer(abbreviations=tokenize_config.get('abbreviations'),
                                  clitics=tokenize_config.get('clitics'),
                                  max_length=None)
        self._model = NamedEntityRecognizer(gazetteer=config.get('gazetteer'),
                                            scorer=config.get('scorer'),
                                            min_score=config.get('min_score', DEFAULT_MIN_SCORE),
                                            tokenizer=tokenizer)

    def process_sentence(self, sentence):
        self._model.recognize(sentence)

    def process(self, doc):
        super().process(doc)
        doc.build_ents()
        return doc
