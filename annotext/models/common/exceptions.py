"""
Errors raised while building a pipeline or annotating a document

The idea being, the caller can catch AnnotationError for anything the
pipeline rejects, or one of the subclasses to report a more useful resolution
"""

class AnnotationError(Exception):
    """ Base class for every error surfaced by Pipeline.annotate """


class InputError(AnnotationError, ValueError):
    """ The input text is not something the tokenizer can accept """


class ConfigError(AnnotationError, ValueError):
    """ The requested set of stages or options cannot form a valid pipeline """


class StageFailure(AnnotationError):
    """
    An annotator (or one of its scoring collaborators) raised or returned an invalid structure

    stage is the name of the failing processor, sentence_index and token_index
    locate the failure when known.  The original exception is chained as __cause__
    """

    def __init__(self, stage, sentence_index=None, token_index=None, reason=None):
        self.stage = stage
        self.sentence_index = sentence_index
        self.token_index = token_index
        self.reason = reason
        super().__init__(self.build_message())

    def build_message(self):
        location = []
        if self.sentence_index is not None:
            location.append("sentence %d" % self.sentence_index)
        if self.token_index is not None:
            location.append("token %d" % self.token_index)
        message = "Stage '%s' failed" % self.stage
        if location:
            message += " at " + ", ".join(location)
        if self.reason:
            message += ": " + str(self.reason)
        return message


class AnnotationCancelled(AnnotationError):
    """ The caller cancelled the request before all sentences were annotated """


class DeadlineExceeded(AnnotationError):
    """ The caller supplied deadline passed between two pipeline stages """

    def __init__(self, stage):
        self.stage = stage
        super().__init__("Deadline exceeded before stage '%s'" % stage)


class InvalidScorerOutput(ValueError):
    """
    A scoring collaborator returned something other than the documented structure

    Annotators raise this with the offending token index; the processor turns it into a StageFailure
    """

    def __init__(self, msg, token_index=None):
        super().__init__(msg)
        self.token_index = token_index
