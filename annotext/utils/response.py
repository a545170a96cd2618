"""
Projects an annotated Document into the flat response of the annotation endpoint

    {"tokens": [...], "posTags": [...], "namedEntities": ["John (PERSON)", ...]}

Lists run across all sentences in document order.  Tokens without an entity
label, including every token when NER did not run, are reported as O.
"""

TOKENS = 'tokens'
POS_TAGS = 'posTags'
NAMED_ENTITIES = 'namedEntities'

OUTSIDE = 'O'

def to_response(doc):
    tokens = []
    pos_tags = []
    named_entities = []
    for token in doc.iter_tokens():
        tokens.append(token.text)
        pos_tags.append(token.pos)
        label = token.ner if token.ner is not None else OUTSIDE
        named_entities.append("%s (%s)" % (token.text, label))
    return {TOKENS: tokens, POS_TAGS: pos_tags, NAMED_ENTITIES: named_entities}
