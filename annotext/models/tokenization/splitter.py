"""
Groups a token stream into sentences

A boundary goes after a token ending in terminal punctuation, unless the token
is an abbreviation, when the next token is absent or looks like the start of a
new sentence.  Closing quotes and brackets stick to the sentence they close.
While a quotation or bracket is open no boundary is placed, so that the
longer reading wins.  A straight " only opens a quotation when another one
follows it and it is not stuck to the end of a word, as in 5".
"""

import logging

from annotext.models.common.doc import TEXT, START_CHAR, END_CHAR, ABBREVIATION

logger = logging.getLogger('annotext')

TERMINATORS = ('.', '!', '?', '…')

OPENING_BRACKETS = {'(': ')', '[': ']', '{': '}'}
CLOSING_BRACKETS = {v: k for k, v in OPENING_BRACKETS.items()}
OPENING_QUOTES = {'“': '”', '‘': '’', '«': '»', '``': "''", '„': '“'}
CLOSING_QUOTES = set(OPENING_QUOTES.values())
# quotes which open and close with the same character
SYMMETRIC_QUOTES = ('"', "'")

NEWLINE_BREAK_NEVER = 'never'
NEWLINE_BREAK_TWO = 'two'
NEWLINE_BREAK_ALWAYS = 'always'
NEWLINE_BREAK_OPTIONS = (NEWLINE_BREAK_NEVER, NEWLINE_BREAK_TWO, NEWLINE_BREAK_ALWAYS)

class SentenceSplitter:
    def __init__(self, newline_is_sentence_break=NEWLINE_BREAK_TWO):
        if newline_is_sentence_break not in NEWLINE_BREAK_OPTIONS:
            raise ValueError("newline_is_sentence_break must be one of %s, got %s" % (NEWLINE_BREAK_OPTIONS, newline_is_sentence_break))
        self.newline_is_sentence_break = newline_is_sentence_break

    def split(self, tokens, text=None):
        """
        Split a list of tokens into a list of sentences, each a list of tokens in document order

        tokens can be Token objects or token dicts; text is the raw text, used for newline breaks
        """
        sentences = []
        current = []
        # stack of closers we expect to see for the currently open quotes / brackets
        open_stack = []
        # a straight quote with no partner later on cannot open a quotation
        last_quote = max((i for i, token in enumerate(tokens) if _text(token) == '"'), default=-1)
        idx = 0
        while idx < len(tokens):
            token = tokens[idx]
            word = _text(token)
            current.append(token)
            self._track_open(word, open_stack, allow_open=_opens_quotation(tokens, idx, last_quote))

            boundary = False
            if word.endswith(TERMINATORS) and not _is_abbreviation(token):
                # fold closing quotes and brackets into this sentence
                while idx + 1 < len(tokens) and self._is_closer(_text(tokens[idx + 1]), open_stack):
                    idx += 1
                    current.append(tokens[idx])
                    self._track_open(_text(tokens[idx]), open_stack)
                boundary = not open_stack and self._starts_sentence(tokens, idx + 1)
            if not boundary and text is not None and idx + 1 < len(tokens):
                boundary = self._newline_break(text, tokens[idx], tokens[idx + 1])
                if boundary:
                    # a paragraph break closes anything left open
                    open_stack = []
            if boundary:
                sentences.append(current)
                current = []
            idx += 1

        if current:
            # trailing tokens without a terminator still make up a sentence
            sentences.append(current)
        logger.debug("Split %d tokens into %d sentences", len(tokens), len(sentences))
        return sentences

    def _newline_break(self, text, token, next_token):
        if self.newline_is_sentence_break == NEWLINE_BREAK_NEVER:
            return False
        gap = text[_end_char(token):_start_char(next_token)]
        newlines = gap.count('\n')
        if self.newline_is_sentence_break == NEWLINE_BREAK_ALWAYS:
            return newlines >= 1
        return newlines >= 2

    @staticmethod
    def _is_closer(word, open_stack):
        if word in CLOSING_BRACKETS or word in CLOSING_QUOTES:
            return True
        # a symmetric quote right after a terminator closes a quotation if one is open
        return word in SYMMETRIC_QUOTES and bool(open_stack) and open_stack[-1] == word

    @staticmethod
    def _track_open(word, open_stack, allow_open=True):
        """
        Update the stack of open quotes and brackets after seeing word

        allow_open=False means a straight " is a mark such as inches rather than an opening quote
        """
        if word in OPENING_BRACKETS:
            open_stack.append(OPENING_BRACKETS[word])
        elif open_stack and open_stack[-1] == word:
            open_stack.pop()
        elif word in OPENING_QUOTES:
            open_stack.append(OPENING_QUOTES[word])
        elif word == '"' and allow_open:
            # single quotes double as apostrophes, so only " is tracked as a symmetric quote
            open_stack.append(word)
        elif word in CLOSING_BRACKETS and word in open_stack:
            # unbalanced closer: drop everything opened after its opener
            while open_stack and open_stack.pop() != word:
                pass

    @staticmethod
    def _starts_sentence(tokens, idx):
        """ The token at idx (possibly after an opening quote or bracket) can begin a sentence """
        if idx >= len(tokens):
            return True
        word = _text(tokens[idx])
        if word in OPENING_BRACKETS or word in OPENING_QUOTES or word in SYMMETRIC_QUOTES:
            if idx + 1 >= len(tokens):
                return False
            word = _text(tokens[idx + 1])
        return word[:1].isupper()


def _text(token):
    return token[TEXT] if isinstance(token, dict) else token.text

def _start_char(token):
    return token[START_CHAR] if isinstance(token, dict) else token.start_char

def _end_char(token):
    return token[END_CHAR] if isinstance(token, dict) else token.end_char

def _is_abbreviation(token):
    return token.get(ABBREVIATION, False) if isinstance(token, dict) else token.abbreviation

def _opens_quotation(tokens, idx, last_quote):
    if idx >= last_quote:
        return False
    if idx > 0:
        prev = tokens[idx - 1]
        # attached to the end of a word or number: 5" or the closing half of word"
        if _end_char(prev) == _start_char(tokens[idx]) and _text(prev)[-1:].isalnum():
            return False
    return True
