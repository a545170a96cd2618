"""
A greedy arc-standard dependency parser driven by pos tag rules

arc_label proposes a relation for a (head, dependent) pair of stack items
based on their tags and the arcs built so far.  A TransitionScorer rates the
proposed arcs; the parser applies the best one, otherwise shifts, and
attaches whatever is left on the stack to the first item as a fragment.
"""

from abc import ABC, abstractmethod
import logging
import math
from numbers import Real

from annotext.models.common.doc import DependencyTree, FRAGMENT
from annotext.models.common.exceptions import InvalidScorerOutput
from annotext.models.depparse.transitions import ArcTransition, LeftArc, RightArc, Shift, initial_state
from annotext.resources.english import AUXILIARIES, SUBORDINATORS, UNKNOWN_TAG

logger = logging.getLogger('annotext')

NOUN_TAGS = ('NN', 'NNS', 'NNP', 'NNPS', UNKNOWN_TAG, '$', 'SYM', 'FW')
VERB_TAGS = ('VB', 'VBD', 'VBG', 'VBN', 'VBP', 'VBZ')
ADJ_TAGS = ('JJ', 'JJR', 'JJS')
ADV_TAGS = ('RB', 'RBR', 'RBS', 'WRB')
DET_TAGS = ('DT', 'PDT', 'WDT')
PRONOUN_TAGS = ('PRP', 'WP')
OPEN_PUNCT_TAGS = ('``', '-LRB-')
CLOSE_PUNCT_TAGS = ("''", '-RRB-', '.', ',', ':')
PUNCT_TAGS = OPEN_PUNCT_TAGS + CLOSE_PUNCT_TAGS

LABEL_WEIGHTS = {
    'det': 1.0,
    'nmod:poss': 1.0,
    'case': 1.0,
    'aux': 1.0,
    'mark': 0.9,
    'expl': 0.9,
    'amod': 0.9,
    'nummod': 0.9,
    'cc': 0.9,
    'compound': 0.8,
    'compound:prt': 0.8,
    'nsubj': 0.8,
    'obj': 0.7,
    'obl': 0.7,
    'conj': 0.7,
    'nmod': 0.6,
    'advmod': 0.6,
    'xcomp': 0.6,
    'acl:relcl': 0.6,
    'ccomp': 0.5,
    'punct': 0.5,
}
DEFAULT_LABEL_WEIGHT = 0.5

def is_noun(tag):
    return tag in NOUN_TAGS

def is_nominal(tag):
    return tag in NOUN_TAGS or tag in PRONOUN_TAGS or tag == 'CD'

def is_verb(tag):
    return tag in VERB_TAGS

def is_adj(tag):
    return tag in ADJ_TAGS

def child_tags(state, head, label):
    return [state.tags[dep] for dep, arc_head, arc_label in state.arcs if arc_head == head and arc_label == label]

def arc_label(state, head, dep):
    """
    The relation dep would have if attached to head, or None if the tags do not allow it
    """
    h_tag = state.tags[head]
    d_tag = state.tags[dep]
    d_word = state.words[dep].lower()
    if dep < head:
        return left_label(state, head, dep, h_tag, d_tag, d_word)
    return right_label(state, head, dep, h_tag, d_tag, d_word)

def left_label(state, head, dep, h_tag, d_tag, d_word):
    if h_tag in PUNCT_TAGS:
        return None
    if d_tag in OPEN_PUNCT_TAGS:
        return 'punct'
    if d_tag == 'CC':
        return 'cc'
    if is_noun(h_tag):
        if d_tag in DET_TAGS:
            return 'det'
        if d_tag in ('PRP$', 'WP$'):
            return 'nmod:poss'
        if is_adj(d_tag):
            return 'amod'
        if d_tag == 'CD':
            return 'nummod'
        if is_noun(d_tag):
            if 'POS' in child_tags(state, dep, 'case'):
                return 'nmod:poss'
            if head == dep + 1:
                return 'compound'
            return None
        if d_tag in ('IN', 'TO'):
            return 'case'
        return None
    if is_adj(h_tag):
        if d_tag in ADV_TAGS:
            return 'advmod'
        return None
    if is_verb(h_tag):
        if d_tag == 'MD':
            return 'aux'
        if is_verb(d_tag) and d_word in AUXILIARIES:
            return 'aux'
        if d_tag == 'TO' and h_tag == 'VB':
            return 'mark'
        if d_tag in ADV_TAGS:
            return 'advmod'
        if d_tag == 'IN' and d_word in SUBORDINATORS:
            return 'mark'
        if d_tag == 'EX':
            return 'expl'
        if (is_nominal(d_tag) or d_tag == 'WDT') and not state.has_child(head, 'nsubj') and not state.has_child(dep, 'case'):
            return 'nsubj'
        return None
    if h_tag in ('PRP', 'CD') and d_tag in DET_TAGS:
        return 'det'
    return None

def right_label(state, head, dep, h_tag, d_tag, d_word):
    if h_tag in PUNCT_TAGS:
        return None
    if d_tag in CLOSE_PUNCT_TAGS:
        return 'punct'
    if d_tag in ('IN', 'CC'):
        # a preposition or conjunction normally waits for the word it introduces
        if not state.empty_word_queue() and state.tags[state.word_position] not in PUNCT_TAGS:
            return None
    if is_verb(h_tag):
        if is_nominal(d_tag):
            return 'obl' if state.has_child(dep, 'case') else 'obj'
        if is_adj(d_tag):
            return 'xcomp'
        if d_tag in ADV_TAGS:
            return 'advmod'
        if d_tag == 'RP':
            return 'compound:prt'
        if d_tag == 'IN':
            return 'advmod'
        if is_verb(d_tag):
            if state.has_child(dep, 'cc'):
                return 'conj'
            if 'TO' in child_tags(state, dep, 'mark'):
                return 'xcomp'
            return 'ccomp'
        return None
    if is_noun(h_tag) or h_tag in PRONOUN_TAGS:
        if d_tag == 'POS' and is_noun(h_tag):
            return 'case'
        if is_nominal(d_tag) or is_adj(d_tag):
            if state.has_child(dep, 'cc'):
                return 'conj'
            if is_nominal(d_tag) and state.has_child(dep, 'case'):
                return 'nmod'
        if d_tag == 'CD' and dep == head + 1:
            return 'nummod'
        if is_verb(d_tag) and any(tag in ('WDT', 'WP') for tag in child_tags(state, dep, 'nsubj')):
            return 'acl:relcl'
        return None
    if is_adj(h_tag):
        if is_nominal(d_tag) and state.has_child(dep, 'case'):
            return 'obl'
        if is_adj(d_tag) and state.has_child(dep, 'cc'):
            return 'conj'
        if is_verb(d_tag) and 'TO' in child_tags(state, dep, 'mark'):
            return 'xcomp'
        return None
    if h_tag == 'CD' and d_tag == 'CD':
        return 'compound'
    return None


class TransitionScorer(ABC):
    @abstractmethod
    def score_transition(self, state, transition):
        """
        Return a number rating the transition in this state.  Arcs need a positive score to be applied
        """


class RuleTransitionScorer(TransitionScorer):
    """
    Scores an arc by how specific its relation is, so that det or aux beats a vaguer ccomp
    """
    def __init__(self, label_weights=None, default_weight=DEFAULT_LABEL_WEIGHT):
        self.label_weights = dict(LABEL_WEIGHTS if label_weights is None else label_weights)
        self.default_weight = default_weight

    def score_transition(self, state, transition):
        if isinstance(transition, ArcTransition):
            return self.label_weights.get(transition.label, self.default_weight)
        return 0.0


class DependencyParser:
    def __init__(self, scorer=None):
        if scorer is None:
            scorer = RuleTransitionScorer()
        if not isinstance(scorer, TransitionScorer) and not callable(getattr(scorer, 'score_transition', None)):
            raise ValueError("Parser scorer must provide score_transition, got %s" % type(scorer).__name__)
        self.scorer = scorer

    @staticmethod
    def candidate_transitions(state):
        """
        Arc transitions which the tag rules allow for the top two stack items

        A right arc is held back while the next word could still take the stack
        top as a left dependent, unless it could take the second item as well
        """
        if state.stack_size() < 2:
            return []
        s0 = state.top(0)
        s1 = state.top(1)
        candidates = []
        label = arc_label(state, s0, s1)
        if label is not None:
            candidates.append(LeftArc(label))
        label = arc_label(state, s1, s0)
        if label is not None:
            front = state.buffer_front()
            if front is None or arc_label(state, front, s0) is None or arc_label(state, front, s1) is not None:
                candidates.append(RightArc(label))
        return candidates

    def next_transition(self, state):
        """ The best legal arc with a positive score, otherwise Shift, otherwise None """
        scored = []
        for transition in self.candidate_transitions(state):
            if not transition.is_legal(state):
                continue
            score = self.scorer.score_transition(state, transition)
            if isinstance(score, bool) or not isinstance(score, Real) or math.isnan(score):
                raise InvalidScorerOutput("Transition scorer returned an invalid score %r for %s" % (score, transition),
                                          token_index=state.top(0))
            if score > 0:
                scored.append((score, transition))
        if scored:
            # highest score first, then LeftArc before RightArc
            return min(scored, key=lambda x: (-x[0], x[1]))[1]
        shift = Shift()
        if shift.is_legal(state):
            return shift
        return None

    def parse_words(self, words, tags):
        """ Build a DependencyTree for a list of words and their pos tags """
        state = initial_state(words, tags)
        if len(words) == 0:
            return DependencyTree(0, None, {})

        # every step pops the stack or shifts, so 2n steps is an upper bound
        for _ in range(2 * len(words)):
            transition = self.next_transition(state)
            if transition is None:
                break
            state = transition.apply(state)
        else:
            raise AssertionError("Parser did not finish after %d steps: %s" % (2 * len(words), state))

        root = state.stack[0]
        arcs = {dep: (head, label) for dep, head, label in state.arcs}
        for leftover in state.stack[1:]:
            arcs[leftover] = (root, FRAGMENT)
        if len(state.stack) > 1:
            logger.debug("Attached %d fragments to %s", len(state.stack) - 1, words[root])
        tree = DependencyTree(len(words), root, arcs)
        tree.validate()
        return tree

    def parse(self, sentence):
        """ Parse the sentence and attach the resulting tree to it """
        tags = [token.pos for token in sentence.tokens]
        if any(tag is None for tag in tags):
            raise ValueError("The parser needs every token to have a pos tag")
        tree = self.parse_words(sentence.words, tags)
        sentence.dependency_tree = tree
        return tree
