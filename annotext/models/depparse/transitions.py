"""
Defines the transitions of an arc-standard dependency parser

Also defines a State which holds the stack, the position in the word
buffer and the arcs built so far for one sentence.
"""

from abc import ABC, abstractmethod
from collections import namedtuple
import functools
import logging

logger = logging.getLogger('annotext')

class State(namedtuple('State', ['words', 'tags', 'stack', 'word_position', 'arcs'])):
    """
    Represents a partially completed transition parse

    words and tags are the whole sentence and never change.
    stack is a tuple of token indices, the last element being the top.
    word_position is the index of the first word not yet shifted,
      cheaper than manipulating the buffer itself
    arcs is a tuple of (dependent, head, label) in the order they were built
    """
    def sentence_length(self):
        return len(self.words)

    def empty_word_queue(self):
        return self.word_position >= len(self.words)

    def buffer_front(self):
        """ Index of the next word to shift, or None once everything is shifted """
        if self.empty_word_queue():
            return None
        return self.word_position

    def stack_size(self):
        return len(self.stack)

    def top(self, depth=0):
        """ The token index depth items below the top of the stack """
        return self.stack[-1 - depth]

    def head_of(self, index):
        for dep, head, _ in self.arcs:
            if dep == index:
                return head
        return None

    def children(self, head):
        return sorted(dep for dep, arc_head, _ in self.arcs if arc_head == head)

    def has_child(self, head, label):
        return any(arc_head == head and arc_label == label for _, arc_head, arc_label in self.arcs)

    def finished(self):
        return self.empty_word_queue() and len(self.stack) <= 1

    def __str__(self):
        return "State(stack:%s buffer:%s arcs:%s)" % ([self.words[x] for x in self.stack],
                                                     self.words[self.word_position:],
                                                     [(self.words[d], self.words[h], l) for d, h, l in self.arcs])

def initial_state(words, tags):
    if len(words) != len(tags):
        raise ValueError("Got %d words but %d tags" % (len(words), len(tags)))
    return State(words=tuple(words), tags=tuple(tags), stack=(), word_position=0, arcs=())

@functools.total_ordering
class Transition(ABC):
    """
    A step of the parser.  Transitions never modify a State, they return a new one
    """
    # order used to break ties between equally scored transitions
    priority = 0

    @abstractmethod
    def apply(self, state):
        """
        return a new State transformed via this transition
        """

    @abstractmethod
    def is_legal(self, state):
        """
        assess whether or not this transition is legal in this state
        """

    @abstractmethod
    def short_name(self):
        """
        A short name to identify this transition
        """

    def __lt__(self, other):
        if self == other:
            return False
        if self.priority != other.priority:
            return self.priority < other.priority
        return str(self) < str(other)

class Shift(Transition):
    priority = 2

    def apply(self, state):
        """
        push the front of the word buffer onto the stack
        """
        if not self.is_legal(state):
            raise ValueError("Cannot shift with an empty buffer")
        return state._replace(stack=state.stack + (state.word_position,),
                              word_position=state.word_position + 1)

    def is_legal(self, state):
        return not state.empty_word_queue()

    def short_name(self):
        return "Shift"

    def __repr__(self):
        return "Shift"

    def __eq__(self, other):
        return isinstance(other, Shift)

    def __hash__(self):
        return hash("Shift")

class ArcTransition(Transition):
    """
    Connects the top two items of the stack and pops the dependent
    """
    def __init__(self, label):
        self.label = label

    @abstractmethod
    def head_and_dependent(self, state):
        """ Return (head, dependent) among the top two stack items """

    def is_legal(self, state):
        return state.stack_size() >= 2

    def apply(self, state):
        if not self.is_legal(state):
            raise ValueError("%s needs two items on the stack" % self)
        head, dep = self.head_and_dependent(state)
        stack = tuple(x for x in state.stack if x != dep)
        return state._replace(stack=stack, arcs=state.arcs + ((dep, head, self.label),))

    def __repr__(self):
        return "%s(%s)" % (self.short_name(), self.label)

    def __eq__(self, other):
        if self is other:
            return True
        return type(self) is type(other) and self.label == other.label

    def __hash__(self):
        return hash((self.short_name(), self.label))

class LeftArc(ArcTransition):
    """
    The second item on the stack becomes a dependent of the top item
    """
    priority = 0

    def head_and_dependent(self, state):
        return state.top(0), state.top(1)

    def short_name(self):
        return "LeftArc"

class RightArc(ArcTransition):
    """
    The top item on the stack becomes a dependent of the second item
    """
    priority = 1

    def head_and_dependent(self, state):
        return state.top(1), state.top(0)

    def short_name(self):
        return "RightArc"
