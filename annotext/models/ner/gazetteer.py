"""
A trie over token sequences, used to find known entity names in a sentence
"""

import logging

from annotext.models.common.doc import TEXT

logger = logging.getLogger('annotext')

END = "_end"

class Trie:
    """
    A simple Trie whose edges are words rather than letters.

    Each complete entry stores the label it was added with
    """
    def __init__(self):
        self.root = {}
        self.size = 0

    def add(self, words, label):
        if len(words) == 0:
            raise ValueError("Cannot add an empty entry to the trie")
        current = self.root
        for word in words:
            current = current.setdefault(word, {})
        if END not in current:
            self.size += 1
        current[END] = label

    def search(self, words):
        """ Return the label stored for exactly this sequence of words, or None """
        current = self.root
        for word in words:
            if word not in current:
                return None
            current = current[word]
        return current.get(END)

    def starts_with(self, prefix):
        current = self.root
        for word in prefix:
            if word not in current:
                return False
            current = current[word]
        return True

    def matches_at(self, words, start):
        """ Yield (end, label) for every entry which matches words starting at start """
        current = self.root
        for end in range(start, len(words)):
            if words[end] not in current:
                return
            current = current[words[end]]
            if END in current:
                yield end + 1, current[END]

    def __len__(self):
        return self.size


class Gazetteer:
    """
    Known entity names, matched case-sensitively and then ignoring case

    entries: dict from label to a list of names, where each name is either a
    string (split with the tokenizer, or on whitespace) or a list of words
    """
    def __init__(self, entries, tokenizer=None):
        self.exact = Trie()
        self.caseless = Trie()
        for label, names in entries.items():
            for name in names:
                if isinstance(name, str):
                    words = [x[TEXT] for x in tokenizer.tokenize(name)] if tokenizer is not None else name.split()
                else:
                    words = list(name)
                self.exact.add(words, label)
                self.caseless.add([word.lower() for word in words], label)
        logger.debug("Loaded %d gazetteer entries", len(self.exact))

    def find_all(self, words):
        """
        Return every (start, end, label) match in the list of words

        An exact match is preferred over a lowercase match of the same span.
        A lowercase match has to start with a capitalized word, so apple is not Apple
        """
        lowered = [word.lower() for word in words]
        matches = {}
        for start in range(len(words)):
            if words[start][:1].isupper():
                for end, label in self.caseless.matches_at(lowered, start):
                    matches[(start, end)] = label
            for end, label in self.exact.matches_at(words, start):
                matches[(start, end)] = label
        return [(start, end, label) for (start, end), label in matches.items()]

    def find(self, words):
        """
        Return non-overlapping matches, longest first, leftmost among equally long matches

        The result is sorted by start position
        """
        candidates = sorted(self.find_all(words), key=lambda x: (-(x[1] - x[0]), x[0]))
        taken = [False] * len(words)
        accepted = []
        for start, end, label in candidates:
            if any(taken[start:end]):
                continue
            for idx in range(start, end):
                taken[idx] = True
            accepted.append((start, end, label))
        return sorted(accepted)
