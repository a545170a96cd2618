"""
Rule based tokenizer

Scans the text left to right, classifying each character as part of a word,
whitespace, punctuation or a quote.  A token boundary is placed whenever the
class changes, except for known abbreviations (kept whole) and contractions
(split into a base and a clitic).
"""

import logging
import re

from annotext.models.common.doc import TEXT, START_CHAR, END_CHAR, ABBREVIATION
from annotext.models.common.exceptions import InputError
from annotext.resources.english import ABBREVIATIONS, CLITICS

logger = logging.getLogger('annotext')

WORD = 'word'
SPACE = 'space'
PUNCT = 'punct'
QUOTE = 'quote'

QUOTE_CHARS = set('"\'`‘’‚‛“”„‟«»')
APOSTROPHES = ("'", '’')

# single letters separated by periods: U.S.A., e.g.
ACRONYM_RE = re.compile(r"(?:[^\W\d_]\.){2,}")

DEFAULT_MAX_LENGTH = 1000000

def char_class(ch):
    if ch.isalnum():
        return WORD
    if ch.isspace():
        return SPACE
    if ch in QUOTE_CHARS:
        return QUOTE
    return PUNCT

def normalize_input(text, max_length=DEFAULT_MAX_LENGTH):
    """
    Turn the raw input into a str, raising InputError for anything the tokenizer cannot handle

    bytes are decoded as UTF-8.  Strings which cannot be encoded (lone surrogates) are rejected
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode('utf-8')
        except UnicodeDecodeError as e:
            raise InputError("Input is not valid UTF-8: %s" % e) from e
    if not isinstance(text, str):
        raise InputError("Input should be a str or UTF-8 bytes, got %s" % type(text).__name__)
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InputError("Input contains characters which cannot be encoded: %s" % e) from e
    if max_length is not None and len(text) > max_length:
        raise InputError("Input is %d characters long, longer than the maximum of %d" % (len(text), max_length))
    return text


class Tokenizer:
    """
    Splits text into token entries carrying the surface text and character offsets

    abbreviations: a collection of strings kept as a single token.  Entries are matched with their
      case, except entries starting with a lowercase letter (e.g., etc.), which match any case
    clitics: affixes split off the end of a word, such as n't or 's
    """

    def __init__(self, abbreviations=None, clitics=None, max_length=DEFAULT_MAX_LENGTH):
        if abbreviations is None:
            abbreviations = ABBREVIATIONS
        if clitics is None:
            clitics = CLITICS
        self.abbreviations = frozenset(abbreviations)
        # capitalized entries keep their case so that "No." does not match the word "no."
        self.caseless_abbreviations = frozenset(x.lower() for x in self.abbreviations if x[:1].islower())
        # try the longest abbreviations first
        self._abbreviation_lengths = sorted(set(len(x) for x in self.abbreviations), reverse=True)
        self.clitics = tuple(sorted(set(x.lower() for x in clitics), key=lambda x: (-len(x), x)))
        self.max_length = max_length

    def normalize(self, text):
        return normalize_input(text, self.max_length)

    def tokenize(self, text):
        """
        Tokenize the text, returning a list of dicts with TEXT, START_CHAR, END_CHAR and ABBREVIATION
        """
        text = self.normalize(text)
        tokens = []
        position = 0
        length = len(text)
        while position < length:
            ch = text[position]
            cls = char_class(ch)
            if cls == SPACE:
                position += 1
                continue

            end = self._match_abbreviation(text, position)
            if end is not None:
                tokens.append(self._entry(text, position, end, abbreviation=True))
                position = end
                continue

            if cls == WORD:
                end = self._scan_word(text, position)
                for start, stop in self._split_clitic(text, position, end):
                    tokens.append(self._entry(text, start, stop))
            else:
                # runs of the same punctuation character stay together: ... -- !!
                end = position + 1
                while end < length and text[end] == ch:
                    end += 1
                tokens.append(self._entry(text, position, end))
            position = end
        logger.debug("Tokenized %d characters into %d tokens", length, len(tokens))
        return tokens

    @staticmethod
    def _entry(text, start, end, abbreviation=False):
        return {TEXT: text[start:end], START_CHAR: start, END_CHAR: end, ABBREVIATION: abbreviation}

    def _is_abbreviation(self, piece):
        return piece in self.abbreviations or piece.lower() in self.caseless_abbreviations

    def _match_abbreviation(self, text, position):
        """ Return the end offset of an abbreviation starting at position, or None """
        if position > 0 and text[position - 1].isalnum():
            return None
        candidates = []
        for abbrev_len in self._abbreviation_lengths:
            end = position + abbrev_len
            if end <= len(text) and self._is_abbreviation(text[position:end]):
                candidates.append(end)
                break
        match = ACRONYM_RE.match(text, position)
        if match:
            candidates.append(match.end())
        for end in sorted(candidates, reverse=True):
            # an abbreviation cannot stop in the middle of a word: "Prof" is not a match in "Professor"
            if end < len(text) and text[end - 1].isalnum() and text[end].isalnum():
                continue
            return end
        return None

    @staticmethod
    def _scan_word(text, position):
        """
        Consume a run of letters and digits, along with connectors that sit between two word characters
        """
        length = len(text)
        end = position
        while end < length:
            ch = text[end]
            if ch.isalnum():
                end += 1
                continue
            if end + 1 >= length or end == position or not text[end + 1].isalnum():
                break
            prev_ch = text[end - 1]
            next_ch = text[end + 1]
            if ch == '-' and prev_ch.isalnum():
                end += 1
            elif ch in '.,' and prev_ch.isdigit() and next_ch.isdigit():
                end += 1
            elif ch in APOSTROPHES and prev_ch.isalnum():
                end += 1
            else:
                break
        return end

    def _split_clitic(self, text, start, end):
        """
        Split a word ending in a known clitic into (base, clitic) offsets

        don't -> do n't, John's -> John 's
        """
        word = text[start:end].lower().replace('’', "'")
        for clitic in self.clitics:
            if len(word) > len(clitic) and word.endswith(clitic):
                split = end - len(clitic)
                # the base must end in a word character, otherwise the clitic is not a suffix
                if text[split - 1].isalnum():
                    return [(start, split), (split, end)]
        return [(start, end)]
