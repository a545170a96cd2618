"""
Processor for performing tokenization
"""

import logging

from annotext.models.tokenization.tokenizer import DEFAULT_MAX_LENGTH, Tokenizer
from annotext.pipeline._constants import *
from annotext.pipeline.processor import Processor, register_processor

logger = logging.getLogger('annotext')

@register_processor(name=TOKENIZE)
class TokenizeProcessor(Processor):

    # set of processor requirements this processor fulfills
    PROVIDES_DEFAULT = set([TOKENIZE])
    # set of processor requirements for this processor
    REQUIRES_DEFAULT = set([])

    def _set_up_model(self, config):
        self._model = Tokenizer(abbreviations=config.get('abbreviations'),
                                clitics=config.get('clitics'),
                                max_length=config.get('max_length', DEFAULT_MAX_LENGTH))

    def normalize(self, text):
        """ Check the raw input and return it as a str, raising InputError if it cannot be tokenized """
        return self._model.normalize(text)

    def process(self, doc):
        """
        Tokenize the text of the document

        All tokens go in one sentence; the split processor regroups them.
        An empty text gives a document without sentences
        """
        tokens = self._model.tokenize(doc.text)
        doc.set_sentences([tokens] if tokens else [])
        return doc
