"""
Reference English resources for the rule based annotators

Everything here is plain data.  Annotators copy what they need at
construction time, so a pipeline can be given its own tables through
the config without touching these.
"""

UNKNOWN_TAG = 'UNKNOWN'
SENTENCE_START = '<S>'

# Penn Treebank tag set, in the order used for tie breaking and for the transition matrix
TAGSET = (
    'CC', 'CD', 'DT', 'EX', 'FW', 'IN', 'JJ', 'JJR', 'JJS', 'LS', 'MD',
    'NN', 'NNS', 'NNP', 'NNPS', 'PDT', 'POS', 'PRP', 'PRP$', 'RB', 'RBR',
    'RBS', 'RP', 'SYM', 'TO', 'UH', 'VB', 'VBD', 'VBG', 'VBN', 'VBP', 'VBZ',
    'WDT', 'WP', 'WP$', 'WRB',
    '.', ',', ':', '``', "''", '-LRB-', '-RRB-', '$', '#',
)

ABBREVIATIONS = (
    'Dr.', 'Mr.', 'Mrs.', 'Ms.', 'Prof.', 'Sr.', 'Jr.', 'St.', 'Mt.', 'Gen.', 'Gov.', 'Sen.', 'Rep.',
    'Rev.', 'Capt.', 'Col.', 'Lt.', 'Sgt.',
    'Inc.', 'Corp.', 'Ltd.', 'Co.', 'Bros.',
    'U.S.', 'U.K.', 'U.N.', 'e.g.', 'i.e.', 'etc.', 'vs.', 'cf.', 'approx.', 'No.',
    'a.m.', 'p.m.',
    'Jan.', 'Feb.', 'Mar.', 'Apr.', 'Jun.', 'Jul.', 'Aug.', 'Sep.', 'Sept.', 'Oct.', 'Nov.', 'Dec.',
)

CLITICS = ("n't", "'s", "'re", "'ve", "'ll", "'d", "'m")

PUNCTUATION_TAGS = {
    '.': '.', '!': '.', '?': '.', '…': ':',
    ',': ',',
    ';': ':', ':': ':', '-': ':', '--': ':', '...': ':', '—': ':', '–': ':',
    '(': '-LRB-', '[': '-LRB-', '{': '-LRB-',
    ')': '-RRB-', ']': '-RRB-', '}': '-RRB-',
    '``': '``', '“': '``', '‘': '``', '«': '``',
    "''": "''", '”': "''", '’': "''", '»': "''",
    '$': '$', '€': '$', '£': '$', '#': '#',
    '&': 'CC', '%': 'NN',
}

# a straight double quote is opening or closing depending on its context
AMBIGUOUS_PUNCTUATION = {
    '"': {'``': 0.5, "''": 0.5},
    "'": {"''": 0.6, 'POS': 0.4},
}

def _entries(tags, *words):
    return {word: dict(tags) for word in words}

LEXICON = {}
# closed classes
LEXICON.update(_entries({'DT': 1.0}, 'the', 'a', 'an', 'these', 'those', 'every', 'each', 'another', 'either', 'neither'))
LEXICON.update({
    'this': {'DT': 0.9, 'RB': 0.1},
    'that': {'IN': 0.45, 'DT': 0.35, 'WDT': 0.2},
    'some': {'DT': 0.9, 'RB': 0.1},
    'any': {'DT': 0.9, 'RB': 0.1},
    'no': {'DT': 0.8, 'UH': 0.2},
    'all': {'DT': 0.7, 'PDT': 0.3},
    'both': {'DT': 0.6, 'CC': 0.4},
    'such': {'JJ': 0.6, 'PDT': 0.4},
})
LEXICON.update(_entries({'PRP': 1.0}, 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'us', 'them',
                        'myself', 'yourself', 'himself', 'herself', 'itself', 'ourselves', 'themselves'))
LEXICON.update(_entries({'PRP$': 1.0}, 'my', 'your', 'its', 'our', 'their'))
LEXICON.update({
    'her': {'PRP$': 0.55, 'PRP': 0.45},
    'his': {'PRP$': 0.9, 'PRP': 0.1},
    'who': {'WP': 1.0},
    'whom': {'WP': 1.0},
    'what': {'WP': 0.8, 'WDT': 0.2},
    'whose': {'WP$': 1.0},
    'which': {'WDT': 1.0},
    'when': {'WRB': 1.0},
    'where': {'WRB': 1.0},
    'why': {'WRB': 1.0},
    'how': {'WRB': 1.0},
    'there': {'EX': 0.6, 'RB': 0.4},
    'to': {'TO': 1.0},
})
LEXICON.update(_entries({'IN': 1.0}, 'of', 'in', 'on', 'at', 'by', 'for', 'with', 'from', 'into', 'onto', 'during',
                        'without', 'against', 'among', 'between', 'through', 'because', 'although', 'though',
                        'while', 'if', 'whether', 'than', 'upon', 'within', 'toward', 'towards', 'across',
                        'behind', 'beside', 'despite', 'per', 'via', 'unless'))
LEXICON.update({
    'about': {'IN': 0.8, 'RB': 0.2},
    'over': {'IN': 0.8, 'RP': 0.1, 'RB': 0.1},
    'after': {'IN': 0.9, 'RB': 0.1},
    'before': {'IN': 0.8, 'RB': 0.2},
    'under': {'IN': 0.9, 'JJ': 0.1},
    'since': {'IN': 0.9, 'RB': 0.1},
    'until': {'IN': 1.0},
    'as': {'IN': 0.85, 'RB': 0.15},
    'like': {'IN': 0.5, 'VBP': 0.3, 'VB': 0.2},
    'near': {'IN': 0.7, 'JJ': 0.2, 'RB': 0.1},
    'around': {'IN': 0.6, 'RB': 0.3, 'RP': 0.1},
    'up': {'RP': 0.5, 'IN': 0.3, 'RB': 0.2},
    'down': {'RP': 0.4, 'IN': 0.3, 'RB': 0.3},
    'out': {'RP': 0.5, 'IN': 0.2, 'RB': 0.3},
    'off': {'RP': 0.5, 'IN': 0.3, 'RB': 0.2},
})
LEXICON.update(_entries({'CC': 1.0}, 'and', 'or', 'but', 'nor'))
LEXICON.update({
    'yet': {'RB': 0.6, 'CC': 0.4},
    'so': {'RB': 0.6, 'IN': 0.25, 'CC': 0.15},
})
LEXICON.update(_entries({'MD': 1.0}, 'can', 'could', 'would', 'shall', 'should', 'might', 'must', "'ll", 'ca', 'wo'))
LEXICON.update({
    'will': {'MD': 0.95, 'NN': 0.05},
    'may': {'MD': 1.0},
    "'d": {'MD': 0.6, 'VBD': 0.4},
})
# auxiliaries and the clitics split off by the tokenizer
LEXICON.update({
    'be': {'VB': 1.0},
    'is': {'VBZ': 1.0},
    'am': {'VBP': 1.0},
    'are': {'VBP': 1.0},
    "'re": {'VBP': 1.0},
    "'m": {'VBP': 1.0},
    "'ve": {'VBP': 1.0},
    "'s": {'POS': 0.5, 'VBZ': 0.5},
    'was': {'VBD': 1.0},
    'were': {'VBD': 1.0},
    'been': {'VBN': 1.0},
    'being': {'VBG': 1.0},
    'have': {'VBP': 0.6, 'VB': 0.4},
    'has': {'VBZ': 1.0},
    'had': {'VBD': 0.6, 'VBN': 0.4},
    'having': {'VBG': 1.0},
    'do': {'VBP': 0.6, 'VB': 0.4},
    'does': {'VBZ': 1.0},
    'did': {'VBD': 1.0},
    'done': {'VBN': 1.0},
    'doing': {'VBG': 1.0},
    "n't": {'RB': 1.0},
    'not': {'RB': 1.0},
})
LEXICON.update(_entries({'RB': 1.0}, 'very', 'also', 'just', 'only', 'never', 'always', 'often', 'now', 'then',
                        'here', 'still', 'already', 'even', 'too', 'quite', 'really', 'almost', 'soon', 'again',
                        'ago', 'ever', 'perhaps', 'away', 'together', 'rather', 'instead', 'however', 'sometimes',
                        'usually', 'later', 'once'))
LEXICON.update({
    'well': {'RB': 0.6, 'UH': 0.2, 'JJ': 0.2},
    'yesterday': {'NN': 0.5, 'RB': 0.5},
    'today': {'NN': 0.6, 'RB': 0.4},
    'tomorrow': {'NN': 0.6, 'RB': 0.4},
    'back': {'RB': 0.6, 'NN': 0.2, 'JJ': 0.2},
    'home': {'NN': 0.6, 'RB': 0.4},
    'more': {'JJR': 0.5, 'RBR': 0.5},
    'most': {'JJS': 0.5, 'RBS': 0.5},
    'less': {'JJR': 0.5, 'RBR': 0.5},
    'least': {'JJS': 0.5, 'RBS': 0.5},
    'yes': {'UH': 1.0},
    'oh': {'UH': 1.0},
    'hello': {'UH': 1.0},
    'please': {'UH': 0.6, 'VB': 0.4},
    'thanks': {'NNS': 0.5, 'UH': 0.5},
})
LEXICON.update(_entries({'CD': 1.0}, 'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine', 'ten',
                        'eleven', 'twelve', 'twenty', 'thirty', 'fifty', 'hundred', 'thousand', 'million', 'billion'))

# open class verbs: base, past, past participle, third person, gerund
LEXICON.update({
    'meet': {'VB': 0.6, 'VBP': 0.4}, 'met': {'VBD': 0.6, 'VBN': 0.4}, 'meets': {'VBZ': 1.0}, 'meeting': {'NN': 0.5, 'VBG': 0.5},
    'leave': {'VB': 0.6, 'VBP': 0.3, 'NN': 0.1}, 'left': {'VBD': 0.5, 'VBN': 0.3, 'JJ': 0.2}, 'leaves': {'VBZ': 0.6, 'NNS': 0.4},
    'go': {'VB': 0.6, 'VBP': 0.4}, 'went': {'VBD': 1.0}, 'gone': {'VBN': 1.0}, 'goes': {'VBZ': 1.0}, 'going': {'VBG': 1.0},
    'say': {'VB': 0.6, 'VBP': 0.4}, 'said': {'VBD': 0.7, 'VBN': 0.3}, 'says': {'VBZ': 1.0},
    'make': {'VB': 0.6, 'VBP': 0.4}, 'made': {'VBD': 0.5, 'VBN': 0.5}, 'makes': {'VBZ': 1.0},
    'take': {'VB': 0.6, 'VBP': 0.4}, 'took': {'VBD': 1.0}, 'taken': {'VBN': 1.0},
    'get': {'VB': 0.6, 'VBP': 0.4}, 'got': {'VBD': 0.6, 'VBN': 0.4},
    'come': {'VB': 0.5, 'VBP': 0.3, 'VBN': 0.2}, 'came': {'VBD': 1.0},
    'see': {'VB': 0.6, 'VBP': 0.4}, 'saw': {'VBD': 0.9, 'NN': 0.1}, 'seen': {'VBN': 1.0},
    'know': {'VB': 0.5, 'VBP': 0.5}, 'knew': {'VBD': 1.0}, 'known': {'VBN': 1.0},
    'think': {'VB': 0.5, 'VBP': 0.5}, 'thought': {'VBD': 0.5, 'VBN': 0.3, 'NN': 0.2},
    'give': {'VB': 0.6, 'VBP': 0.4}, 'gave': {'VBD': 1.0}, 'given': {'VBN': 1.0},
    'find': {'VB': 0.6, 'VBP': 0.4}, 'found': {'VBD': 0.6, 'VBN': 0.4},
    'tell': {'VB': 0.6, 'VBP': 0.4}, 'told': {'VBD': 0.6, 'VBN': 0.4},
    'become': {'VB': 0.5, 'VBP': 0.3, 'VBN': 0.2}, 'became': {'VBD': 1.0},
    'feel': {'VB': 0.6, 'VBP': 0.4}, 'felt': {'VBD': 0.6, 'VBN': 0.4},
    'bring': {'VB': 0.6, 'VBP': 0.4}, 'brought': {'VBD': 0.6, 'VBN': 0.4},
    'begin': {'VB': 0.6, 'VBP': 0.4}, 'began': {'VBD': 1.0}, 'begun': {'VBN': 1.0},
    'keep': {'VB': 0.6, 'VBP': 0.4}, 'kept': {'VBD': 0.6, 'VBN': 0.4},
    'hold': {'VB': 0.6, 'VBP': 0.4}, 'held': {'VBD': 0.6, 'VBN': 0.4},
    'write': {'VB': 0.6, 'VBP': 0.4}, 'wrote': {'VBD': 1.0}, 'written': {'VBN': 1.0},
    'run': {'VB': 0.4, 'VBP': 0.3, 'NN': 0.3}, 'ran': {'VBD': 1.0},
    'read': {'VB': 0.4, 'VBP': 0.2, 'VBD': 0.2, 'VBN': 0.2},
    'buy': {'VB': 0.6, 'VBP': 0.4}, 'bought': {'VBD': 0.6, 'VBN': 0.4},
    'sell': {'VB': 0.6, 'VBP': 0.4}, 'sold': {'VBD': 0.6, 'VBN': 0.4},
    'speak': {'VB': 0.6, 'VBP': 0.4}, 'spoke': {'VBD': 1.0}, 'spoken': {'VBN': 1.0},
    'eat': {'VB': 0.6, 'VBP': 0.4}, 'ate': {'VBD': 1.0}, 'eaten': {'VBN': 1.0},
    'lead': {'VB': 0.5, 'VBP': 0.3, 'NN': 0.2}, 'led': {'VBD': 0.6, 'VBN': 0.4},
    'live': {'VB': 0.4, 'VBP': 0.4, 'JJ': 0.2}, 'lives': {'VBZ': 0.6, 'NNS': 0.4},
    'work': {'NN': 0.5, 'VB': 0.3, 'VBP': 0.2}, 'works': {'VBZ': 0.6, 'NNS': 0.4},
    'want': {'VB': 0.5, 'VBP': 0.5}, 'wants': {'VBZ': 1.0},
    'need': {'VB': 0.4, 'VBP': 0.4, 'NN': 0.2},
    'use': {'VB': 0.5, 'NN': 0.3, 'VBP': 0.2},
    'visit': {'VB': 0.5, 'NN': 0.3, 'VBP': 0.2},
    'call': {'VB': 0.5, 'NN': 0.3, 'VBP': 0.2},
    'win': {'VB': 0.6, 'VBP': 0.4}, 'won': {'VBD': 0.6, 'VBN': 0.4},
    'lose': {'VB': 0.6, 'VBP': 0.4}, 'lost': {'VBD': 0.5, 'VBN': 0.4, 'JJ': 0.1},
    'pay': {'VB': 0.5, 'VBP': 0.3, 'NN': 0.2}, 'paid': {'VBD': 0.5, 'VBN': 0.5},
    'send': {'VB': 0.6, 'VBP': 0.4}, 'sent': {'VBD': 0.5, 'VBN': 0.5},
    'build': {'VB': 0.6, 'VBP': 0.4}, 'built': {'VBD': 0.5, 'VBN': 0.5},
    'put': {'VB': 0.4, 'VBD': 0.3, 'VBN': 0.3},
    'let': {'VB': 0.5, 'VBD': 0.3, 'VBN': 0.2},
    'sit': {'VB': 0.6, 'VBP': 0.4}, 'sat': {'VBD': 1.0},
    'fly': {'VB': 0.5, 'VBP': 0.3, 'NN': 0.2}, 'flew': {'VBD': 1.0}, 'flown': {'VBN': 1.0},
    'drive': {'VB': 0.5, 'VBP': 0.3, 'NN': 0.2}, 'drove': {'VBD': 1.0}, 'driven': {'VBN': 1.0},
    'fall': {'VB': 0.4, 'VBP': 0.3, 'NN': 0.3}, 'fell': {'VBD': 1.0}, 'fallen': {'VBN': 1.0},
    'grow': {'VB': 0.6, 'VBP': 0.4}, 'grew': {'VBD': 1.0}, 'grown': {'VBN': 1.0},
    'teach': {'VB': 0.6, 'VBP': 0.4}, 'taught': {'VBD': 0.5, 'VBN': 0.5},
    'catch': {'VB': 0.6, 'VBP': 0.4}, 'caught': {'VBD': 0.5, 'VBN': 0.5},
    'enjoy': {'VB': 0.6, 'VBP': 0.4}, 'enjoys': {'VBZ': 1.0},
    'announce': {'VB': 0.6, 'VBP': 0.4},
    'stand': {'VB': 0.6, 'VBP': 0.4}, 'stood': {'VBD': 0.6, 'VBN': 0.4},
    'show': {'VB': 0.5, 'VBP': 0.2, 'NN': 0.3}, 'shown': {'VBN': 1.0},
    'try': {'VB': 0.6, 'VBP': 0.4},
    'ask': {'VB': 0.6, 'VBP': 0.4},
    'help': {'VB': 0.5, 'NN': 0.3, 'VBP': 0.2},
    'love': {'VB': 0.4, 'NN': 0.4, 'VBP': 0.2},
})
# open class nouns
LEXICON.update(_entries({'NN': 1.0}, 'time', 'year', 'way', 'day', 'man', 'woman', 'child', 'world', 'life', 'hand',
                        'part', 'place', 'case', 'week', 'company', 'system', 'program', 'question', 'government',
                        'number', 'night', 'point', 'water', 'room', 'mother', 'area', 'money', 'story', 'fact',
                        'month', 'lot', 'study', 'book', 'eye', 'job', 'word', 'business', 'issue', 'side', 'kind',
                        'head', 'house', 'service', 'friend', 'father', 'power', 'hour', 'game', 'line', 'end',
                        'member', 'law', 'car', 'city', 'community', 'name', 'president', 'team', 'minute', 'idea',
                        'kid', 'body', 'information', 'school', 'face', 'level', 'office', 'door', 'health', 'person',
                        'art', 'war', 'history', 'party', 'result', 'morning', 'reason', 'research', 'girl', 'boy',
                        'moment', 'air', 'teacher', 'education', 'dog', 'cat', 'food', 'pizza', 'beach', 'senator',
                        'country', 'report', 'university', 'sentence', 'test', 'park', 'telescope', 'street',
                        'river', 'table', 'market', 'music', 'movie', 'weather', 'tree'))
LEXICON.update({
    'people': {'NNS': 1.0}, 'men': {'NNS': 1.0}, 'women': {'NNS': 1.0}, 'children': {'NNS': 1.0},
    'years': {'NNS': 1.0}, 'days': {'NNS': 1.0}, 'others': {'NNS': 1.0},
    'state': {'NN': 0.8, 'VB': 0.2}, 'change': {'NN': 0.6, 'VB': 0.4}, 'right': {'NN': 0.4, 'JJ': 0.4, 'RB': 0.2},
    'apple': {'NN': 1.0}, 'favorite': {'JJ': 0.8, 'NN': 0.2},
})
# open class adjectives
LEXICON.update(_entries({'JJ': 1.0}, 'good', 'new', 'long', 'great', 'little', 'own', 'other', 'old', 'big',
                        'high', 'different', 'small', 'large', 'next', 'early', 'young', 'important', 'few',
                        'public', 'bad', 'same', 'able', 'major', 'happy', 'red', 'blue', 'green', 'nice', 'ready',
                        'sure', 'free', 'full', 'real', 'clear', 'true', 'whole', 'recent', 'strong', 'possible',
                        'political', 'local', 'social', 'national', 'quick', 'brown', 'lazy', 'beautiful', 'fine'))
LEXICON.update({
    'first': {'JJ': 0.7, 'RB': 0.3},
    'last': {'JJ': 0.8, 'RB': 0.1, 'VB': 0.1},
    'late': {'JJ': 0.6, 'RB': 0.4},
    'hard': {'JJ': 0.6, 'RB': 0.4},
    'better': {'JJR': 0.7, 'RBR': 0.3},
    'best': {'JJS': 0.8, 'RBS': 0.2},
    'worse': {'JJR': 0.7, 'RBR': 0.3},
    'worst': {'JJS': 1.0},
    'fast': {'RB': 0.5, 'JJ': 0.5},
})
# titles and proper nouns, stored with their case so that "Apple" and "apple" differ
LEXICON.update(_entries({'NNP': 1.0}, 'dr.', 'mr.', 'mrs.', 'ms.', 'prof.', 'sen.', 'gov.', 'gen.', 'rep.', 'rev.',
                        'st.', 'mt.', 'jr.', 'sr.', 'capt.', 'col.', 'lt.', 'sgt.', 'inc.', 'corp.', 'ltd.', 'co.',
                        'bros.'))
LEXICON.update(_entries({'NNP': 1.0}, 'Jan.', 'Feb.', 'Mar.', 'Apr.', 'Jun.', 'Jul.', 'Aug.', 'Sep.', 'Sept.', 'Oct.',
                        'Nov.', 'Dec.'))
# the remaining abbreviations the tokenizer keeps whole
LEXICON.update({
    'no.': {'NN': 1.0},
    'a.m.': {'RB': 1.0},
    'p.m.': {'RB': 1.0},
    'e.g.': {'FW': 1.0},
    'i.e.': {'FW': 1.0},
    'etc.': {'FW': 1.0},
    'vs.': {'IN': 1.0},
    'cf.': {'VB': 1.0},
    'approx.': {'RB': 1.0},
})
LEXICON.update(_entries({'NNP': 1.0}, 'John', 'Mary', 'Smith', 'Kerry', 'Joe', 'James', 'Robert', 'Michael',
                        'William', 'David', 'Richard', 'Joseph', 'Thomas', 'Charles', 'Barack', 'Obama', 'Biden',
                        'Hillary', 'Clinton', 'George', 'Sarah', 'Emma', 'Anna', 'Paris', 'London', 'California',
                        'France', 'America', 'Washington', 'Boston', 'Chicago', 'Texas', 'China', 'Germany',
                        'Europe', 'Africa', 'Japan', 'Canada', 'Stanford', 'Google', 'Microsoft', 'IBM', 'NASA',
                        'FBI', 'Congress', 'Senate', 'U.S.', 'U.K.', 'U.N.',
                        'January', 'February', 'March', 'April', 'June', 'July', 'August', 'September',
                        'October', 'November', 'December', 'Monday', 'Tuesday', 'Wednesday', 'Thursday',
                        'Friday', 'Saturday', 'Sunday'))
LEXICON.update({
    'May': {'NNP': 0.6, 'MD': 0.4},
    'Apple': {'NNP': 1.0},
    'New': {'NNP': 0.7, 'JJ': 0.3},
    'York': {'NNP': 1.0},
    'University': {'NNP': 1.0},
    'American': {'JJ': 0.6, 'NNP': 0.4},
    'English': {'JJ': 0.5, 'NNP': 0.5},
    'French': {'JJ': 0.5, 'NNP': 0.5},
})

# unnormalized weights of P(tag | previous tag).  Pairs which are not listed get a small floor
TAG_TRANSITIONS = {
    SENTENCE_START: {'DT': 3, 'NNP': 3, 'PRP': 3, 'IN': 1.5, 'RB': 1, 'NN': 1, 'JJ': 1, 'WRB': 0.5, 'WP': 0.5,
                     'VB': 0.5, 'CC': 0.3, '``': 0.5, 'EX': 0.3, 'CD': 0.3, 'UH': 0.3, 'NNS': 0.5, 'VBG': 0.3},
    'DT': {'NN': 5, 'JJ': 3, 'NNS': 2, 'NNP': 1, 'CD': 0.5, 'JJS': 0.5, 'RB': 0.2, 'VBG': 0.2, 'VBZ': 0.2, 'VBD': 0.2},
    'PDT': {'DT': 5, 'PRP$': 1},
    'JJ': {'NN': 5, 'NNS': 3, 'JJ': 1, ',': 0.5, 'CC': 0.5, 'IN': 0.5, '.': 0.5, 'TO': 0.3, 'NNP': 0.3},
    'JJR': {'IN': 2, 'NN': 2, 'NNS': 1, '.': 1},
    'JJS': {'NN': 3, 'NNS': 2, 'IN': 1, '.': 0.5},
    'NN': {'IN': 3, '.': 2, ',': 1.5, 'VBZ': 1.5, 'VBD': 1.5, 'NN': 1.5, 'CC': 1, 'MD': 0.5, 'WDT': 0.3,
           'VBP': 0.3, 'POS': 0.5, 'TO': 0.5, 'RB': 0.3, 'NNS': 0.3},
    'NNS': {'IN': 3, '.': 2, 'VBP': 2, 'VBD': 1.5, ',': 1.5, 'CC': 1, 'MD': 0.5, 'TO': 0.5, 'RB': 0.3, 'WDT': 0.3},
    'NNP': {'NNP': 4, 'VBD': 2, 'VBZ': 1.5, ',': 1.5, '.': 1.5, 'IN': 1, 'POS': 1, 'CC': 0.7, 'MD': 0.4,
            'NN': 0.3, 'CD': 0.3, 'NNPS': 0.3},
    'NNPS': {'VBP': 2, 'VBD': 2, 'IN': 1, ',': 1, '.': 1, 'NNP': 0.5, 'POS': 0.5},
    'PRP': {'VBD': 4, 'VBZ': 3, 'VBP': 3, 'MD': 2, 'RB': 1, '.': 0.3, 'IN': 0.3, 'TO': 0.3, ',': 0.3},
    'PRP$': {'NN': 5, 'NNS': 3, 'JJ': 2, 'NNP': 0.5},
    'VB': {'DT': 3, 'PRP': 1.5, 'IN': 1.5, 'RB': 1, 'TO': 1, 'JJ': 1, 'NN': 1, 'NNS': 0.8, 'NNP': 0.8, 'PRP$': 1,
           'RP': 0.5, 'VBN': 0.5, '.': 0.5},
    'VBD': {'DT': 3, 'IN': 2, 'NNP': 1.5, 'PRP': 1, 'RB': 1.5, 'VBN': 1, 'JJ': 1, '.': 1, 'TO': 1, 'PRP$': 1,
            'NN': 0.5, 'NNS': 0.5, 'RP': 0.5, 'VBG': 0.5, 'CD': 0.3},
    'VBZ': {'DT': 3, 'VBN': 2, 'RB': 1.5, 'JJ': 1.5, 'IN': 1.5, 'VBG': 1.5, 'NN': 0.5, 'NNP': 0.5, 'TO': 0.8,
            'PRP$': 0.7, '.': 0.3},
    'VBP': {'DT': 3, 'VBN': 2, 'RB': 1.5, 'JJ': 1.5, 'IN': 1.5, 'VBG': 1.5, 'NN': 0.5, 'NNS': 0.5, 'TO': 0.8,
            'PRP$': 0.7, 'PRP': 0.5, '.': 0.3},
    'VBN': {'IN': 3, 'TO': 1, 'DT': 1, '.': 1, 'RB': 0.7, 'NN': 0.5, 'NNP': 0.5, ',': 0.5, 'VBN': 0.3},
    'VBG': {'DT': 3, 'IN': 1.5, 'NN': 1, 'NNS': 1, 'TO': 1, 'PRP': 0.5, '.': 0.5, 'JJ': 0.5, 'RB': 0.5, 'PRP$': 0.5},
    'MD': {'VB': 8, 'RB': 2},
    'TO': {'VB': 6, 'DT': 1.5, 'NNP': 1, 'CD': 0.5, 'NN': 0.5, 'PRP': 0.5, 'JJ': 0.3, 'PRP$': 0.5},
    'IN': {'DT': 4, 'NNP': 2.5, 'NN': 1.5, 'NNS': 1.5, 'PRP': 1, 'JJ': 1, 'CD': 1, 'PRP$': 1.5, 'VBG': 0.5,
           'RB': 0.3, '$': 0.3, 'PDT': 0.2},
    'RB': {'VBD': 1, 'VB': 1, 'JJ': 1.5, 'RB': 0.5, '.': 1, ',': 0.7, 'VBN': 1, 'IN': 1, 'DT': 0.7, 'VBZ': 0.5,
           'VBP': 0.5, 'VBG': 0.5},
    'RBR': {'JJ': 2, 'IN': 1, 'RB': 0.5, '.': 0.5},
    'RBS': {'JJ': 3, 'RB': 0.5},
    'RP': {'DT': 3, 'IN': 1, '.': 1, 'PRP$': 1, 'NN': 0.5},
    'CC': {'DT': 2, 'NN': 1, 'NNP': 2, 'JJ': 1, 'VB': 0.8, 'VBD': 1, 'PRP': 1, 'NNS': 1, 'RB': 0.5, 'CD': 0.3},
    'CD': {'NN': 2, 'NNS': 3, '.': 1, 'IN': 1, ',': 1, 'CD': 0.5, 'NNP': 0.5, 'TO': 0.3, 'JJ': 0.3, 'NNPS': 0.2},
    ',': {'CC': 2, 'DT': 1.5, 'NNP': 1.5, 'PRP': 1, 'IN': 1, 'RB': 1, 'VBD': 0.5, 'JJ': 0.5, 'NN': 0.5,
          'WDT': 0.5, 'WP': 0.5, 'VBG': 0.5, 'CD': 0.5, "''": 0.5},
    '.': {"''": 1, '-RRB-': 0.5},
    ':': {'DT': 1, 'NN': 1, 'NNP': 1, 'PRP': 1, 'CD': 0.5, 'JJ': 0.5},
    'WDT': {'VBZ': 2, 'VBD': 2, 'VBP': 1, 'MD': 1, 'PRP': 1, 'DT': 0.5, 'NNP': 0.5},
    'WP': {'VBZ': 2, 'VBD': 2, 'VBP': 1, 'MD': 1, 'PRP': 1, 'DT': 0.5, 'NNP': 0.5},
    'WP$': {'NN': 3, 'NNS': 2},
    'WRB': {'PRP': 2, 'VBZ': 1, 'VBD': 1, 'VBP': 1, 'JJ': 1, 'MD': 1, 'RB': 0.5, 'DT': 0.5},
    'EX': {'VBZ': 5, 'VBD': 3, 'VBP': 2, 'MD': 1},
    'POS': {'NN': 4, 'JJ': 2, 'NNS': 2, 'NNP': 1.5},
    '$': {'CD': 10},
    '``': {'DT': 1, 'PRP': 1, 'NNP': 1, 'NN': 0.5, 'RB': 0.5, 'VB': 0.5, 'IN': 0.5, 'JJ': 0.3, 'UH': 0.3},
    "''": {'PRP': 1, 'VBD': 1, ',': 0.5, '.': 0.5, 'CC': 0.5},
    '-LRB-': {'NNP': 1, 'DT': 1, 'CD': 1, 'NN': 1, 'PRP': 0.5},
    '-RRB-': {'.': 1, ',': 1, 'VBD': 0.5, 'IN': 0.5},
    'UH': {',': 2, '.': 2},
}

# suffix -> (distribution for lowercase words, distribution for capitalized words)
# None means the suffix says nothing about words of that shape
SUFFIX_RULES = [
    ('ing', {'VBG': 0.7, 'NN': 0.25, 'JJ': 0.05}, {'VBG': 0.4, 'NNP': 0.4, 'NN': 0.2}),
    ('ed', {'VBD': 0.5, 'VBN': 0.4, 'JJ': 0.1}, {'VBD': 0.4, 'VBN': 0.3, 'NNP': 0.3}),
    ('ly', {'RB': 0.9, 'JJ': 0.1}, {'RB': 0.6, 'NNP': 0.4}),
    ('tions', {'NNS': 1.0}, {'NNPS': 0.5, 'NNS': 0.5}),
    ('sions', {'NNS': 1.0}, {'NNPS': 0.5, 'NNS': 0.5}),
    ('ments', {'NNS': 1.0}, {'NNPS': 0.5, 'NNS': 0.5}),
    ('ities', {'NNS': 1.0}, {'NNPS': 0.5, 'NNS': 0.5}),
    ('tion', {'NN': 0.95, 'NNP': 0.05}, {'NNP': 0.6, 'NN': 0.4}),
    ('sion', {'NN': 0.95, 'NNP': 0.05}, {'NNP': 0.6, 'NN': 0.4}),
    ('ment', {'NN': 0.95, 'NNP': 0.05}, {'NNP': 0.6, 'NN': 0.4}),
    ('ness', {'NN': 1.0}, {'NNP': 0.5, 'NN': 0.5}),
    ('ity', {'NN': 1.0}, {'NNP': 0.5, 'NN': 0.5}),
    ('ance', {'NN': 1.0}, {'NNP': 0.5, 'NN': 0.5}),
    ('ence', {'NN': 1.0}, {'NNP': 0.5, 'NN': 0.5}),
    ('ship', {'NN': 1.0}, {'NNP': 0.5, 'NN': 0.5}),
    ('ism', {'NN': 1.0}, {'NNP': 0.5, 'NN': 0.5}),
    ('ists', {'NNS': 1.0}, {'NNPS': 0.4, 'NNS': 0.6}),
    ('ers', {'NNS': 0.9, 'VBZ': 0.1}, {'NNPS': 0.4, 'NNS': 0.6}),
    ('ors', {'NNS': 1.0}, {'NNPS': 0.4, 'NNS': 0.6}),
    ('ist', {'NN': 1.0}, {'NNP': 0.7, 'NN': 0.3}),
    ('er', {'NN': 0.8, 'JJR': 0.2}, {'NNP': 0.7, 'NN': 0.3}),
    ('or', {'NN': 1.0}, {'NNP': 0.7, 'NN': 0.3}),
    ('able', {'JJ': 1.0}, {'JJ': 0.5, 'NNP': 0.5}),
    ('ible', {'JJ': 1.0}, {'JJ': 0.5, 'NNP': 0.5}),
    ('ous', {'JJ': 1.0}, {'JJ': 0.5, 'NNP': 0.5}),
    ('ful', {'JJ': 1.0}, {'JJ': 0.5, 'NNP': 0.5}),
    ('ive', {'JJ': 0.9, 'NN': 0.1}, {'JJ': 0.5, 'NNP': 0.5}),
    ('less', {'JJ': 1.0}, {'JJ': 0.5, 'NNP': 0.5}),
    ('ical', {'JJ': 1.0}, {'JJ': 0.5, 'NNP': 0.5}),
    ('al', {'JJ': 0.8, 'NN': 0.2}, {'JJ': 0.4, 'NNP': 0.6}),
    ('ic', {'JJ': 0.9, 'NN': 0.1}, {'JJ': 0.5, 'NNP': 0.5}),
    ('ish', {'JJ': 1.0}, {'JJ': 0.6, 'NNP': 0.4}),
    ('est', {'JJS': 1.0}, None),
    ('izes', {'VBZ': 1.0}, None),
    ('ises', {'VBZ': 1.0}, None),
    ('ifies', {'VBZ': 1.0}, None),
    ('ize', {'VB': 0.6, 'VBP': 0.4}, None),
    ('ise', {'VB': 0.6, 'VBP': 0.4}, None),
    ('ify', {'VB': 0.6, 'VBP': 0.4}, None),
    ('ate', {'VB': 0.4, 'VBP': 0.3, 'NN': 0.2, 'JJ': 0.1}, None),
    # capitalized place and family name endings
    ('ville', None, {'NNP': 1.0}),
    ('burgh', None, {'NNP': 1.0}),
    ('burg', None, {'NNP': 1.0}),
    ('berg', None, {'NNP': 1.0}),
    ('ford', None, {'NNP': 1.0}),
    ('land', None, {'NNP': 1.0}),
    ('shire', None, {'NNP': 1.0}),
    ('stan', None, {'NNP': 1.0}),
    ('ton', None, {'NNP': 1.0}),
    ('son', None, {'NNP': 1.0}),
    ('sen', None, {'NNP': 1.0}),
    ('stein', None, {'NNP': 1.0}),
    ('ski', None, {'NNP': 1.0}),
    ('ez', None, {'NNP': 1.0}),
    ('ia', None, {'NNP': 1.0}),
    ('ss', {'NN': 1.0}, {'NNP': 0.7, 'NN': 0.3}),
    ('us', {'NN': 0.8, 'JJ': 0.2}, {'NNP': 0.7, 'NN': 0.3}),
    ('s', {'NNS': 0.7, 'VBZ': 0.3}, {'NNP': 0.5, 'NNPS': 0.3, 'NNS': 0.2}),
]

# hyphenated words which no suffix rule covers
HYPHENATED_TAGS = ({'JJ': 0.6, 'NN': 0.4}, {'NNP': 1.0})

# (word, pos) -> lemma for irregular forms
LEMMA_EXCEPTIONS = {}
_IRREGULAR_VERBS = {
    'be': ('is', 'am', 'are', "'re", "'m", 'was', 'were', 'been', 'being'),
    'have': ('has', 'had', 'having', "'ve"),
    'do': ('does', 'did', 'done', 'doing'),
    'meet': ('met',), 'leave': ('left', 'leaves'), 'go': ('went', 'gone', 'goes'), 'say': ('said', 'says'),
    'make': ('made', 'making'), 'take': ('took', 'taken', 'taking'), 'get': ('got', 'gotten', 'getting'),
    'come': ('came', 'coming'), 'see': ('saw', 'seen', 'sees'), 'know': ('knew', 'known'),
    'think': ('thought',), 'give': ('gave', 'given', 'giving'), 'find': ('found',), 'tell': ('told',),
    'become': ('became', 'becoming'), 'feel': ('felt',), 'bring': ('brought',), 'begin': ('began', 'begun'),
    'keep': ('kept',), 'hold': ('held',), 'write': ('wrote', 'written', 'writing'), 'stand': ('stood',),
    'run': ('ran', 'running'), 'buy': ('bought',), 'sell': ('sold',), 'speak': ('spoke', 'spoken'),
    'eat': ('ate', 'eaten'), 'lead': ('led',), 'win': ('won', 'winning'), 'lose': ('lost', 'losing'),
    'pay': ('paid',), 'send': ('sent',), 'build': ('built',), 'sit': ('sat', 'sitting'),
    'fly': ('flew', 'flown', 'flies'), 'drive': ('drove', 'driven', 'driving'), 'fall': ('fell', 'fallen'),
    'grow': ('grew', 'grown'), 'teach': ('taught',), 'catch': ('caught',), 'live': ('lived', 'living', 'lives'),
    'use': ('used', 'using'), 'like': ('liked', 'liking'), 'love': ('loved', 'loving'),
    'will': ("'ll", 'wo'), 'can': ('ca',), 'would': ("'d",), 'not': ("n't",),
}
for _lemma, _forms in _IRREGULAR_VERBS.items():
    for _form in _forms:
        for _tag in ('VB', 'VBD', 'VBG', 'VBN', 'VBP', 'VBZ', 'MD', 'RB'):
            LEMMA_EXCEPTIONS[(_form, _tag)] = _lemma
# the clitic 's as a verb is nearly always is
LEMMA_EXCEPTIONS[("'s", 'VBZ')] = 'be'

# word -> lemma regardless of tag
WORD_LEMMAS = {
    'men': 'man', 'women': 'woman', 'children': 'child', 'people': 'person', 'feet': 'foot', 'teeth': 'tooth',
    'mice': 'mouse', 'geese': 'goose', 'lives': 'life', 'wives': 'wife', 'knives': 'knife', 'leaves': 'leaf',
    'better': 'good', 'best': 'good', 'worse': 'bad', 'worst': 'bad',
    'me': 'i', 'him': 'he', 'us': 'we', 'them': 'they',
    'an': 'a',
}

# pos tag -> (suffix, replacement) rules, most specific first
LEMMA_RULES = {
    'NNS': [('ies', 'y'), ('ches', 'ch'), ('shes', 'sh'), ('sses', 'ss'), ('xes', 'x'), ('zes', 'z'),
            ('ves', 'f'), ('s', '')],
    'NNPS': [('ies', 'y'), ('s', '')],
    'VBZ': [('ies', 'y'), ('ches', 'ch'), ('shes', 'sh'), ('sses', 'ss'), ('xes', 'x'), ('zes', 'z'),
            ('oes', 'o'), ('s', '')],
    'VBD': [('ied', 'y'), ('ed', ''), ('ed', 'e')],
    'VBN': [('ied', 'y'), ('ed', ''), ('ed', 'e')],
    'VBG': [('ying', 'ie'), ('ing', ''), ('ing', 'e')],
    'JJR': [('ier', 'y'), ('er', ''), ('er', 'e')],
    'JJS': [('iest', 'y'), ('est', ''), ('est', 'e')],
    'RBR': [('ier', 'y'), ('er', '')],
    'RBS': [('iest', 'y'), ('est', '')],
}

# entity labels produced by the recognizer, in tie breaking order
ENTITY_LABELS = ('PERSON', 'LOCATION', 'ORGANIZATION', 'MISC')

GAZETTEER = {
    'PERSON': ['John Kerry', 'Barack Obama', 'Joe Biden', 'Hillary Clinton', 'George Washington',
               'Bill Gates', 'Steve Jobs', 'Albert Einstein'],
    'LOCATION': ['Paris', 'London', 'California', 'France', 'America', 'Washington', 'Boston', 'Chicago',
                 'Texas', 'China', 'Germany', 'Europe', 'Africa', 'Japan', 'Canada', 'New York',
                 'New York City', 'United States', 'U.S.', 'U.K.', 'Los Angeles', 'San Francisco'],
    'ORGANIZATION': ['Stanford University', 'Google', 'Microsoft', 'Apple', 'IBM', 'NASA', 'FBI',
                     'United Nations', 'U.N.', 'Congress', 'Senate', 'The New York Times'],
    'MISC': ['American', 'French', 'English', 'German', 'Chinese', 'Japanese', 'Olympics'],
}

FIRST_NAMES = frozenset(['John', 'Mary', 'Joe', 'James', 'Robert', 'Michael', 'William', 'David', 'Richard',
                         'Joseph', 'Thomas', 'Charles', 'Barack', 'Hillary', 'George', 'Sarah', 'Emma', 'Anna'])

TITLES = frozenset(['Dr.', 'Mr.', 'Mrs.', 'Ms.', 'Prof.', 'Sen.', 'Gov.', 'Gen.', 'Rep.', 'Rev.', 'Capt.',
                    'Col.', 'Lt.', 'Sgt.', 'President', 'Senator', 'Governor', 'Professor'])

ORGANIZATION_SUFFIXES = frozenset(['Inc.', 'Corp.', 'Ltd.', 'Co.', 'Company', 'Corporation', 'University',
                                   'College', 'Institute', 'Bank', 'Association', 'Foundation', 'Group',
                                   'Agency', 'Department', 'Committee', 'Party', 'Times'])

LOCATION_WORDS = frozenset(['City', 'County', 'River', 'Lake', 'Mountain', 'Mountains', 'Island', 'Islands',
                            'Street', 'Avenue', 'Road', 'Park', 'Valley', 'Bay', 'Ocean', 'Sea', 'State'])

LOCATION_SUFFIXES = ('ville', 'burg', 'burgh', 'ton', 'ford', 'land', 'shire', 'stan', 'ia')

LOCATION_PREPOSITIONS = frozenset(['in', 'at', 'from', 'to', 'near', 'into', 'across'])

MONTHS = frozenset(['January', 'February', 'March', 'April', 'May', 'June', 'July', 'August', 'September',
                    'October', 'November', 'December', 'Jan.', 'Feb.', 'Mar.', 'Apr.', 'Jun.', 'Jul.',
                    'Aug.', 'Sep.', 'Sept.', 'Oct.', 'Nov.', 'Dec.'])

CURRENCY_SYMBOLS = frozenset(['$', '€', '£', '¥'])

PERCENT_WORDS = frozenset(['%', 'percent', 'pct'])

# words that may act as an auxiliary verb in front of another verb
AUXILIARIES = frozenset(['be', 'is', 'am', 'are', 'was', 'were', 'been', 'being', 'have', 'has', 'had', 'having',
                         'do', 'does', 'did', "'s", "'re", "'ve", "'m", "'d", "'ll"])

SUBORDINATORS = frozenset(['because', 'although', 'though', 'if', 'while', 'since', 'whether', 'that',
                           'unless', 'until', 'after', 'before', 'as', 'when', 'where'])

WEEKDAYS = frozenset(['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday'])

DEMONYM_SUFFIXES = ('an', 'ese', 'ish', 'ic', 'i')
