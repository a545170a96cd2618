"""
Basic data structures
"""

import io
import json

import networkx as nx

from annotext.models.common.annotation_object import AnnotationObject, _readonly_setter

ID = 'id'
TEXT = 'text'
LEMMA = 'lemma'
POS = 'pos'
HEAD = 'head'
DEPREL = 'deprel'
MISC = 'misc'
NER = 'ner'
START_CHAR = 'start_char'
END_CHAR = 'end_char'
ABBREVIATION = 'abbreviation'
TYPE = 'type'

# the relation used to attach a disconnected subtree to the first subtree of a sentence
FRAGMENT = 'fragment'
ROOT = 'root'

# field indices when converting the document to conll
# pos tags are treebank specific, so they go in the XPOS column
CONLL_FIELDS = ['id', 'form', 'lemma', 'upos', 'xpos', 'feats', 'head', 'deprel', 'deps', 'misc']
FIELD_NUM = len(CONLL_FIELDS)

class Document(AnnotationObject):
    """ A document class that stores the raw text and carries a list of sentences.
    """

    def __init__(self, sentences, text=None):
        """ Construct a document given a list of sentences in the form of lists of token dicts.

        Args:
            sentences: a list of sentences, each being a list of token entries (dicts with at least TEXT)
            text: the raw text of the document.
        """
        self._sentences = []
        self._text = text
        self._num_tokens = 0
        self._ents = []

        self.set_sentences([[entry if isinstance(entry, Token) else Token(None, entry) for entry in sentence]
                            for sentence in sentences])

    def mark_whitespace(self):
        if self._text is None:
            return
        tokens = list(self.iter_tokens())
        for prev_token, next_token in zip(tokens[:-1], tokens[1:]):
            whitespace = self._text[prev_token.end_char:next_token.start_char]
            prev_token.spaces_after = whitespace
            next_token.spaces_before = whitespace
        if len(tokens) > 0:
            tokens[0].spaces_before = self._text[:tokens[0].start_char]
            tokens[-1].spaces_after = self._text[tokens[-1].end_char:]

    @property
    def text(self):
        """ Access the raw text for this document. """
        return self._text

    @property
    def sentences(self):
        """ Access the list of sentences for this document. """
        return self._sentences

    @property
    def num_tokens(self):
        """ Access the number of tokens for this document. """
        return self._num_tokens

    @property
    def ents(self):
        """ Access the list of entities in this document. """
        return self._ents

    @property
    def entities(self):
        """ Access the list of entities. This is just an alias of `ents`. """
        return self._ents

    def set_sentences(self, token_groups):
        """
        Replace the sentences of this document with the given groups of Tokens

        Tokens are renumbered within their new sentence.  The groups must keep
        document order, which is how the splitter hands them over
        """
        if self._frozen:
            _readonly_setter(self, 'sentences')
        self._sentences = []
        for sent_idx, tokens in enumerate(token_groups):
            sentence = Sentence(tokens, doc=self)
            sentence.index = sent_idx
            self._sentences.append(sentence)
        self._num_tokens = sum(len(sentence.tokens) for sentence in self._sentences)
        self.mark_whitespace()

    def get(self, fields, as_sentences=False):
        """ Get fields from a list of field names.
        If only one field name (string or singleton list) is provided,
        return a list of that field; if more than one, return a list of list.

        Args:
            fields: name of the fields as a list or a single string
            as_sentences: if True, return the fields as a list of sentences; otherwise as a whole list

        Returns:
            All requested fields.
        """
        if isinstance(fields, str):
            fields = [fields]
        assert isinstance(fields, list), "Must provide field names as a list."
        assert len(fields) >= 1, "Must have at least one field."

        results = []
        for sentence in self.sentences:
            cursent = []
            for token in sentence.tokens:
                if len(fields) == 1:
                    cursent += [getattr(token, fields[0])]
                else:
                    cursent += [[getattr(token, field) for field in fields]]

            # decide whether append the results as a sentence or a whole list
            if as_sentences:
                results.append(cursent)
            else:
                results += cursent
        return results

    def set(self, fields, contents):
        """Set fields based on contents. If only one field (string or
        singleton list) is provided, then a list of content will be
        expected; otherwise a list of list of contents will be expected.

        Args:
            fields: name of the fields as a list or a single string
            contents: field values to set; total length should be equal to number of tokens
        """
        if isinstance(fields, str):
            fields = [fields]
        assert isinstance(fields, (tuple, list)), "Must provide field names as a list."
        assert isinstance(contents, (tuple, list)), "Must provide contents as a list (one item per line)."
        assert len(fields) >= 1, "Must have at least one field."
        assert self.num_tokens == len(contents), "Contents must have the same length as the document."

        cidx = 0
        for sentence in self.sentences:
            for token in sentence.tokens:
                if len(fields) == 1:
                    setattr(token, fields[0], contents[cidx])
                else:
                    for field, content in zip(fields, contents[cidx]):
                        setattr(token, field, content)
                cidx += 1

    def build_ents(self):
        """ Build the list of entities by iterating over all tokens. Return all entities as a list. """
        self._ents = []
        for s in self.sentences:
            self._ents += s.build_ents()
        return self._ents

    def iter_tokens(self):
        """ An iterator that returns all of the tokens in this Document. """
        for s in self.sentences:
            yield from s.tokens

    def freeze(self):
        """ Freeze the document, its sentences, tokens and trees.  Done by the pipeline before returning it """
        for sentence in self.sentences:
            sentence.freeze()
        super().freeze()

    def to_dict(self):
        """ Dumps the whole document into a list of list of dictionary for each token in each sentence in the doc.
        """
        return [sentence.to_dict() for sentence in self.sentences]

    def __repr__(self):
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def __format__(self, spec):
        if spec == 'c':
            return "\n\n".join("{:c}".format(s) for s in self.sentences)
        elif spec == 'C':
            return "\n\n".join("{:C}".format(s) for s in self.sentences)
        else:
            return str(self)


class DependencyTree(AnnotationObject):
    """
    A dependency tree over the tokens of one sentence.

    Token positions are 0-based indices into the sentence.  Every index except
    the root has exactly one (head, label) arc.  An empty sentence has no root.
    """

    def __init__(self, num_tokens, root, arcs):
        self._num_tokens = num_tokens
        self._root = root
        self._arcs = dict(arcs)

    @property
    def num_tokens(self):
        return self._num_tokens

    @property
    def root(self):
        """ Index of the root token, or None for an empty sentence """
        return self._root

    @property
    def arcs(self):
        """ A copy of the dependent -> (head, label) mapping """
        return dict(self._arcs)

    def head_of(self, index):
        """ Head index of a token, None for the root """
        if index == self._root:
            return None
        return self._arcs[index][0]

    def label_of(self, index):
        if index == self._root:
            return ROOT
        return self._arcs[index][1]

    def children(self, index):
        """ Dependents of a token, in sentence order """
        return sorted(dep for dep, (head, _) in self._arcs.items() if head == index)

    def to_networkx(self):
        """ Build a networkx DiGraph with edges from each head to its dependent """
        graph = nx.DiGraph()
        graph.add_nodes_from(range(self._num_tokens))
        for dep, (head, label) in self._arcs.items():
            graph.add_edge(head, dep, deprel=label)
        return graph

    def validate(self):
        """
        Check that the arcs form a single tree rooted at self.root

        Raises ValueError describing the first problem found
        """
        if self._num_tokens == 0:
            if self._root is not None or self._arcs:
                raise ValueError("An empty sentence cannot have a root or arcs")
            return
        if self._root is None or not 0 <= self._root < self._num_tokens:
            raise ValueError("Root index %s is not a token of a %d token sentence" % (self._root, self._num_tokens))
        if self._root in self._arcs:
            raise ValueError("Root token %d has a head" % self._root)
        expected = set(range(self._num_tokens)) - {self._root}
        if set(self._arcs.keys()) != expected:
            missing = sorted(expected - set(self._arcs.keys()))
            raise ValueError("Tokens without a head: %s" % missing)
        for dep, (head, _) in self._arcs.items():
            if not 0 <= head < self._num_tokens:
                raise ValueError("Token %d has head %s outside the sentence" % (dep, head))
        graph = self.to_networkx()
        if not nx.is_arborescence(graph):
            raise ValueError("Dependency arcs contain a cycle or a disconnected piece")

    def __repr__(self):
        return "<DependencyTree root=%s arcs=%s>" % (self._root, sorted(self._arcs.items()))

    def __eq__(self, other):
        if not isinstance(other, DependencyTree):
            return False
        return (self._num_tokens, self._root, self._arcs) == (other._num_tokens, other._root, other._arcs)

    def __hash__(self):
        return hash((self._num_tokens, self._root, tuple(sorted(self._arcs.items()))))


class Sentence(AnnotationObject):
    """ A sentence class that stores attributes of a sentence and carries a list of tokens.
    """

    def __init__(self, tokens, doc=None):
        """ Construct a sentence given a list of Tokens or token dicts.

        Tokens are renumbered from 1 and their sentence back-pointer is set to this sentence
        """
        self._tokens = []
        self._text = None
        self._index = None
        self._ents = []
        self._doc = doc
        self._dependency_tree = None
        self._dependencies = []

        for token_idx, token in enumerate(tokens):
            if not isinstance(token, Token):
                token = Token(self, token)
            token._id = token_idx + 1
            token._sent = self
            self._tokens.append(token)

        if self._tokens and doc is not None and doc.text is not None:
            self._text = doc.text[self._tokens[0].start_char:self._tokens[-1].end_char]
        elif self._tokens:
            self._text = " ".join(token.text for token in self._tokens)

    @property
    def index(self):
        """
        Access the index of this sentence within the doc.
        """
        return self._index

    @index.setter
    def index(self, value):
        """ Set the sentence's index value. """
        self._index = value

    @property
    def doc(self):
        """ Access the parent doc of this sentence. """
        return self._doc

    @property
    def text(self):
        """ Access the raw text for this sentence. """
        return self._text

    @property
    def tokens(self):
        """ Access the list of tokens for this sentence. """
        return self._tokens

    @property
    def words(self):
        """ The surface forms of the tokens """
        return [token.text for token in self._tokens]

    @property
    def dependency_tree(self):
        """ Access the DependencyTree built by the parser, None if the parser has not run """
        return self._dependency_tree

    @dependency_tree.setter
    def dependency_tree(self, value):
        """ Attach a DependencyTree.  Can only be done once """
        if value is not None and value.num_tokens != len(self._tokens):
            raise ValueError("Dependency tree covers %d tokens but the sentence has %d" % (value.num_tokens, len(self._tokens)))
        self._set_once('dependency_tree', value)
        self.build_dependencies()

    @property
    def dependencies(self):
        """ Access list of dependencies for this sentence. """
        return self._dependencies

    @property
    def ents(self):
        """ Access the list of entities in this sentence. """
        return self._ents

    @property
    def entities(self):
        """ Access the list of entities. This is just an alias of `ents`. """
        return self._ents

    def build_ents(self):
        """
        Build the list of entities by grouping tokens which share a non-O label.

        Two tokens belong to the same entity only if they are adjacent and
        nothing but whitespace separates them in the raw text
        """
        self._ents = []
        current = []
        for token in self.tokens:
            label = token.ner
            if label is None or label == 'O':
                if current:
                    self._ents.append(Span(tokens=current, type=current[0].ner, doc=self.doc, sent=self))
                current = []
                continue
            if current and (current[-1].ner != label or not current[-1].adjacent_to(token)):
                self._ents.append(Span(tokens=current, type=current[0].ner, doc=self.doc, sent=self))
                current = []
            current.append(token)
        if current:
            self._ents.append(Span(tokens=current, type=current[0].ner, doc=self.doc, sent=self))
        return self._ents

    def build_dependencies(self):
        """ Build the dependency list for this sentence. Each dependency entry is
        a tuple of (head, deprel, token), where head is a fake ROOT token for the root.
        """
        self._dependencies = []
        if self._dependency_tree is None:
            return
        for token in self.tokens:
            if token.head == 0:
                head = Token(self, {ID: 0, TEXT: ROOT.upper()})
            else:
                head = self.tokens[token.head - 1]
            self._dependencies.append((head, token.deprel, token))

    def freeze(self):
        for token in self.tokens:
            token.freeze()
        if self._dependency_tree is not None:
            self._dependency_tree.freeze()
        super().freeze()

    def print_dependencies(self, file=None):
        """ Print the dependencies for this sentence. """
        for dep_edge in self.dependencies:
            print((dep_edge[2].text, dep_edge[0].id, dep_edge[1]), file=file)

    def dependencies_string(self):
        """ Dump the dependencies for this sentence into string. """
        dep_string = io.StringIO()
        self.print_dependencies(file=dep_string)
        return dep_string.getvalue().strip()

    def print_tokens(self, file=None):
        """ Print the tokens for this sentence. """
        for tok in self.tokens:
            print(tok.pretty_print(), file=file)

    def tokens_string(self):
        """ Dump the tokens for this sentence into string. """
        toks_string = io.StringIO()
        self.print_tokens(file=toks_string)
        return toks_string.getvalue().strip()

    def to_dict(self):
        """ Dumps the sentence into a list of dictionary for each token in the sentence.
        """
        return [token.to_dict() for token in self.tokens]

    def __repr__(self):
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def __format__(self, spec):
        if spec != 'c' and spec != 'C':
            return str(self)

        pieces = [token.to_conll_text() for token in self.tokens]
        if spec == 'c':
            return "\n".join(pieces)
        comments = ["# sent_id = %d" % self.index if self.index is not None else None,
                    "# text = " + ' '.join(self.text.split()) if self.text else None]
        comments = [x for x in comments if x]
        return "\n".join(comments + pieces)


class Token(AnnotationObject):
    """ A token class that stores the surface form, offsets and annotations of one unit of the raw text.
    """

    def __init__(self, sentence, token_entry):
        """
        Construct a token given a dictionary format token entry.
        """
        self._id = token_entry.get(ID)
        self._text = token_entry.get(TEXT)
        if not self._text:
            raise ValueError('text not included for the token')
        self._start_char = token_entry.get(START_CHAR, None)
        self._end_char = token_entry.get(END_CHAR, None)
        self._abbreviation = token_entry.get(ABBREVIATION, False)
        self._pos = None
        self._lemma = None
        self._ner = None
        self._sent = sentence
        self._spaces_before = ""
        self._spaces_after = " "

    @property
    def id(self):
        """ Access the 1-based index of this token within its sentence. """
        return self._id

    @property
    def index(self):
        """ The 0-based index of this token within its sentence """
        return self._id - 1

    @property
    def text(self):
        """ Access the text of this token. Example: 'The' """
        return self._text

    @property
    def start_char(self):
        """ Access the start character index for this token in the raw text. """
        return self._start_char

    @property
    def end_char(self):
        """ Access the end character index for this token in the raw text. """
        return self._end_char

    @property
    def abbreviation(self):
        """ True if the tokenizer kept this token whole because it is a known abbreviation """
        return self._abbreviation

    @property
    def pos(self):
        """ Access the part-of-speech tag of this token. Example: 'NNP' """
        return self._pos

    @pos.setter
    def pos(self, value):
        self._set_once('pos', value)

    @property
    def lemma(self):
        """ Access the lemma of this token. """
        return self._lemma

    @lemma.setter
    def lemma(self, value):
        self._set_once('lemma', value)

    @property
    def ner(self):
        """ Access the NER tag of this token. Example: 'PERSON', 'O' outside of an entity """
        return self._ner

    @ner.setter
    def ner(self, value):
        self._set_once('ner', value)

    @property
    def head(self):
        """ 1-based index of the head token, 0 for the root, None if the sentence was not parsed """
        tree = self._sent.dependency_tree if self._sent is not None else None
        if tree is None:
            return None
        head = tree.head_of(self.index)
        return 0 if head is None else head + 1

    @property
    def deprel(self):
        """ Relation to the head token, 'root' for the root """
        tree = self._sent.dependency_tree if self._sent is not None else None
        if tree is None:
            return None
        return tree.label_of(self.index)

    @property
    def spaces_before(self):
        """ SpacesBefore for the token. Translated from the MISC fields """
        return self._spaces_before

    @spaces_before.setter
    def spaces_before(self, value):
        self._spaces_before = value

    @property
    def spaces_after(self):
        """ SpaceAfter for the token. Translated from the MISC field """
        return self._spaces_after

    @spaces_after.setter
    def spaces_after(self, value):
        self._spaces_after = value

    @property
    def sent(self):
        """ Access the pointer to the sentence that this token belongs to. """
        return self._sent

    def adjacent_to(self, other):
        """ True if other directly follows this token with only whitespace in between """
        if other.sent is not self.sent or other.id != self.id + 1:
            return False
        return self.spaces_after.strip() == ""

    def __repr__(self):
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def to_dict(self, fields=[ID, TEXT, LEMMA, POS, HEAD, DEPREL, NER, START_CHAR, END_CHAR]):
        """ Dumps the token into a dictionary, skipping fields which have no value """
        token_dict = {}
        for field in fields:
            value = getattr(self, field)
            if value is not None:
                token_dict[field] = value
        return token_dict

    def to_conll_text(self):
        misc = []
        if self.start_char is not None and self.end_char is not None:
            misc.append("start_char=%d" % self.start_char)
            misc.append("end_char=%d" % self.end_char)
        if self.ner is not None:
            misc.append("ner=%s" % self.ner)
        if self.spaces_after == "":
            misc.append("SpaceAfter=No")
        fields = [str(self.id), self.text, self.lemma, None, self.pos, None,
                  None if self.head is None else str(self.head), self.deprel, None,
                  "|".join(misc) if misc else None]
        return "\t".join('_' if field is None else field for field in fields)

    def pretty_print(self):
        """ Print this token with its annotations on one line. """
        token_dict = self.to_dict()
        feature_str = ";".join(["{}={}".format(k, v) for k, v in token_dict.items()])
        return f"<{self.__class__.__name__} {feature_str}>"


class Span(AnnotationObject):
    """ A span class that stores attributes of a textual span. A span can be typed.
    A range of objects (e.g., entity mentions) can be represented as spans.
    """

    def __init__(self, tokens, type, doc=None, sent=None):
        """ Construct a span given a list of tokens and a type.
        """
        assert isinstance(tokens, list), 'Tokens must be provided as a list to construct a span.'
        assert len(tokens) > 0, "Tokens of a span cannot be an empty list."
        self._tokens = tokens
        self._type = type
        self._doc = doc
        self._sent = sent if sent is not None else tokens[0].sent
        # load start and end char offsets from tokens
        self._start_char = tokens[0].start_char
        self._end_char = tokens[-1].end_char
        if doc is not None and doc.text is not None:
            self._text = doc.text[self._start_char:self._end_char]
        else:
            self._text = "".join(token.text + token.spaces_after for token in tokens[:-1]) + tokens[-1].text

    @property
    def doc(self):
        """ Access the parent doc of this span. """
        return self._doc

    @property
    def text(self):
        """ Access the text of this span. Example: 'John Kerry'"""
        return self._text

    @property
    def tokens(self):
        """ Access reference to a list of tokens that correspond to this span. """
        return self._tokens

    @property
    def type(self):
        """ Access the type of this span. Example: 'PERSON'"""
        return self._type

    @property
    def start_char(self):
        """ Access the start character offset of this span. """
        return self._start_char

    @property
    def end_char(self):
        """ Access the end character offset of this span. """
        return self._end_char

    @property
    def sent(self):
        """ Access the pointer to the sentence that this span belongs to. """
        return self._sent

    def to_dict(self):
        """ Dumps the span into a dictionary. """
        attrs = ['text', 'type', 'start_char', 'end_char']
        span_dict = dict([(attr_name, getattr(self, attr_name)) for attr_name in attrs])
        return span_dict

    def __repr__(self):
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def pretty_print(self):
        """ Print the span in one line. """
        span_dict = self.to_dict()
        feature_str = ";".join(["{}={}".format(k,v) for k,v in span_dict.items()])
        return f"<{self.__class__.__name__} {feature_str}>"
