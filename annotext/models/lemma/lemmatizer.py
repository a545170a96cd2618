"""
Dictionary and rule based lemmatizer

Looks the word up in a (word, pos) dictionary first, then in a word only
dictionary, then strips a suffix according to the rules for the pos tag.
Anything left over is its own lemma.
"""

import logging

from annotext.resources import english

logger = logging.getLogger('annotext')

PROPER_NOUN_TAGS = ('NNP', 'NNPS')
EMPTY_LEMMA = '_'
VOWELS = 'aeiouy'
# suffixes whose removal can leave a stem missing its final e or with a doubled consonant
STEM_SUFFIXES = ('ed', 'ing', 'er', 'est')
# stem endings which (almost) never end an English base form without an e
E_ENDINGS = ('v', 'c', 'u', 'bl', 'iz', 'dg', 'rg', 'ys')
UNDOUBLED = 'lsfz'

def is_consonant(ch):
    return ch.isalpha() and ch not in VOWELS

def count_vowel_groups(word):
    groups = 0
    prev_vowel = False
    for ch in word:
        vowel = ch in VOWELS
        if vowel and not prev_vowel:
            groups += 1
        prev_vowel = vowel
    return groups

def restore_stem(stem):
    """
    Repair a stem left behind by stripping ed/ing/er/est

    stopp -> stop, smil -> smile, lov -> love, walk -> walk
    """
    if len(stem) >= 3 and stem[-1] == stem[-2] and is_consonant(stem[-1]) and stem[-1] not in UNDOUBLED:
        return stem[:-1]
    if stem.endswith(E_ENDINGS):
        return stem + 'e'
    # a short consonant-vowel-consonant stem: hop, shap
    if (len(stem) >= 3 and count_vowel_groups(stem) == 1 and
        is_consonant(stem[-1]) and stem[-1] not in 'wxy' and
        stem[-2] in VOWELS and is_consonant(stem[-3])):
        return stem + 'e'
    return stem

def default_base_forms(lexicon):
    """ Lowercased words which the lexicon lists with a base form tag """
    base_tags = {'VB', 'VBP', 'NN', 'NNP', 'JJ', 'RB'}
    return frozenset(word.lower() for word, tags in lexicon.items() if base_tags & set(tags))


class Lemmatizer:
    def __init__(self, exceptions=None, word_lemmas=None, rules=None, base_forms=None):
        """
        exceptions: dict from (lowercased word, pos) to lemma
        word_lemmas: dict from lowercased word to lemma, used for any pos
        rules: dict from pos tag to a list of (suffix, replacement) pairs
        base_forms: known lemmas, used to choose between the rule candidates
        """
        self.exceptions = dict(english.LEMMA_EXCEPTIONS if exceptions is None else exceptions)
        self.word_lemmas = dict(english.WORD_LEMMAS if word_lemmas is None else word_lemmas)
        self.rules = {pos: list(pos_rules) for pos, pos_rules in (english.LEMMA_RULES if rules is None else rules).items()}
        if base_forms is None:
            base_forms = default_base_forms(english.LEXICON)
        self.base_forms = frozenset(base_forms) | frozenset(self.exceptions.values()) | frozenset(self.word_lemmas.values())

    def lemmatize_word(self, word, pos):
        """ Return the lemma of one word given its pos tag """
        proper = pos in PROPER_NOUN_TAGS
        lower = word.lower()
        if (lower, pos) in self.exceptions:
            lemma = self.exceptions[(lower, pos)]
        elif not proper and lower in self.word_lemmas:
            lemma = self.word_lemmas[lower]
        else:
            lemma = self.apply_rules(word if proper else lower, pos)
        if not proper:
            lemma = lemma.lower()
        return lemma if lemma else EMPTY_LEMMA

    def apply_rules(self, word, pos):
        candidates = []
        for suffix, replacement in self.rules.get(pos, ()):
            # keep at least two characters of stem
            if len(word) >= len(suffix) + 2 and word.lower().endswith(suffix):
                candidates.append((word[:-len(suffix)] + replacement, suffix, replacement))
        if not candidates:
            return word
        for candidate, _, _ in candidates:
            if candidate.lower() in self.base_forms:
                return candidate
        candidate, suffix, replacement = candidates[0]
        if suffix in STEM_SUFFIXES and replacement == '':
            return restore_stem(candidate)
        return candidate

    def lemmatize(self, sentence):
        """
        Set the lemma of every token in the sentence

        Every token needs a pos tag already, so the tagger has to run first
        """
        for token in sentence.tokens:
            if token.pos is None:
                raise ValueError("Token %d (%s) has no pos tag; the lemmatizer needs the tagger to run first" % (token.index, token.text))
        lemmas = [self.lemmatize_word(token.text, token.pos) for token in sentence.tokens]
        for token, lemma in zip(sentence.tokens, lemmas):
            token.lemma = lemma
        return lemmas
