"""
Shared sample texts for the annotext tests

Use with
  from annotext.tests import *
"""

EN_DOC = "Dr. Smith met John Kerry. He left."

EN_DOC_TOKENS = ["Dr.", "Smith", "met", "John", "Kerry", ".", "He", "left", "."]

EN_DOC_POS = ["NNP", "NNP", "VBD", "NNP", "NNP", ".", "PRP", "VBD", "."]

EN_DOC_LEMMAS = ["Dr.", "Smith", "meet", "John", "Kerry", ".", "he", "leave", "."]

EN_DOC_NER = ["O", "PERSON", "O", "PERSON", "PERSON", "O", "O", "O", "O"]

EN_DOC_CONLL = """
# sent_id = 0
# text = Dr. Smith met John Kerry.
1\tDr.\tDr.\t_\tNNP\t_\t2\tcompound\t_\tstart_char=0|end_char=3|ner=O
2\tSmith\tSmith\t_\tNNP\t_\t3\tnsubj\t_\tstart_char=4|end_char=9|ner=PERSON
3\tmet\tmeet\t_\tVBD\t_\t0\troot\t_\tstart_char=10|end_char=13|ner=O
4\tJohn\tJohn\t_\tNNP\t_\t5\tcompound\t_\tstart_char=14|end_char=18|ner=PERSON
5\tKerry\tKerry\t_\tNNP\t_\t3\tobj\t_\tstart_char=19|end_char=24|ner=PERSON|SpaceAfter=No
6\t.\t.\t_\t.\t_\t3\tpunct\t_\tstart_char=24|end_char=25|ner=O

# sent_id = 1
# text = He left.
1\tHe\the\t_\tPRP\t_\t2\tnsubj\t_\tstart_char=26|end_char=28|ner=O
2\tleft\tleave\t_\tVBD\t_\t0\troot\t_\tstart_char=29|end_char=33|ner=O|SpaceAfter=No
3\t.\t.\t_\t.\t_\t2\tpunct\t_\tstart_char=33|end_char=34|ner=O|SpaceAfter=No
""".strip()

EN_DOC_RESPONSE = {
    "tokens": EN_DOC_TOKENS,
    "posTags": EN_DOC_POS,
    "namedEntities": ["Dr. (O)", "Smith (PERSON)", "met (O)", "John (PERSON)", "Kerry (PERSON)", ". (O)",
                      "He (O)", "left (O)", ". (O)"],
}

EN_MULTI_SENTENCE_DOC = ("Barack Obama was born in Hawaii. He was elected president in 2008. "
                         "Mary visited Paris on May 5. The company paid $ 30 for 20 % of the shares.")

NOVEL_PROPER_NOUN = "Zorblax"
