"""
Processor for splitting a tokenized document into sentences
"""

from annotext.models.tokenization.splitter import NEWLINE_BREAK_TWO, SentenceSplitter
from annotext.pipeline._constants import *
from annotext.pipeline.processor import Processor, register_processor

@register_processor(name=SPLIT)
class SplitProcessor(Processor):

    # set of processor requirements this processor fulfills
    PROVIDES_DEFAULT = set([SPLIT])
    # set of processor requirements for this processor
    REQUIRES_DEFAULT = set([TOKENIZE])

    def _set_up_model(self, config):
        self._model = SentenceSplitter(newline_is_sentence_break=config.get('newline_is_sentence_break', NEWLINE_BREAK_TWO))

    def process(self, doc):
        tokens = list(doc.iter_tokens())
        doc.set_sentences(self._model.split(tokens, doc.text))
        return doc
