""" Module defining constants """

# string constants for processor names
TOKENIZE = 'tokenize'
SPLIT = 'split'
POS = 'pos'
LEMMA = 'lemma'
NER = 'ner'
PARSE = 'parse'
