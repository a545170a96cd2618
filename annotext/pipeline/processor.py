"""
Base classes for processors
"""

from abc import ABC, abstractmethod
import logging

from annotext.models.common.exceptions import AnnotationError, ConfigError, InvalidScorerOutput, StageFailure
from annotext.pipeline.registry import NAME_TO_PROCESSOR_CLASS, PIPELINE_NAMES

logger = logging.getLogger('annotext')

class ProcessorRequirementsException(ConfigError):
    """ Exception indicating a processor's requirements will not be met """

    def __init__(self, processors_list, err_processor, provided_reqs):
        self._err_processor = err_processor
        # mark the broken processor as inactive, drop resources
        self.err_processor.mark_inactive()
        self._processors_list = processors_list
        self._provided_reqs = provided_reqs
        self.build_message()
        super().__init__(self.message)

    @property
    def err_processor(self):
        """ The processor that raised the exception """
        return self._err_processor

    @property
    def processor_type(self):
        return type(self.err_processor).__name__

    @property
    def processors_list(self):
        return self._processors_list

    @property
    def provided_reqs(self):
        return self._provided_reqs

    @property
    def missing_reqs(self):
        return self.err_processor.requires - self.provided_reqs

    def build_message(self):
        self.message = (f"---\nPipeline Requirements Error!\n"
                        f"\tProcessor: {self.processor_type}\n"
                        f"\tPipeline processors list: {','.join(self.processors_list)}\n"
                        f"\tProcessor Requirements: {self.err_processor.requires}\n"
                        f"\t\t- fulfilled: {self.err_processor.requires.intersection(self.provided_reqs)}\n"
                        f"\t\t- missing: {self.missing_reqs}\n"
                        f"\nThe processors list provided for this pipeline is invalid.  Please make sure all "
                        f"prerequisites are met for every processor.\n\n")

    def __str__(self):
        return self.message


class Processor(ABC):
    """ Base class for all processors """

    def __init__(self, config, pipeline):
        # overall config for the processor
        self._config = config
        # pipeline building this processor (presently processors are only meant to exist in one pipeline)
        self._pipeline = pipeline
        self._model = None
        # set up what annotations are required based on config
        self._set_up_requires()
        # set up what annotations are provided based on config
        self._set_up_provides()
        # given pipeline constructing this processor, check if requirements are met, throw exception if not
        self._check_requirements()
        self._set_up_model(config)

    def __str__(self):
        """
        Simple description of the processor: name(model)
        """
        name = self.__class__.__name__
        if self._model is None:
            return name
        return "{}({})".format(name, type(self._model).__name__)

    @abstractmethod
    def _set_up_model(self, config):
        """ Build the annotator this processor runs from its config """

    @abstractmethod
    def process(self, doc):
        """ Process a Document.  This is the main method of a processor. """
        pass

    def _set_up_provides(self):
        """ Set up what processor requirements this processor fulfills.  Default is to use a class defined list. """
        self._provides = self.__class__.PROVIDES_DEFAULT

    def _set_up_requires(self):
        """ Set up requirements for this processor.  Default is to use a class defined list. """
        self._requires = self.__class__.REQUIRES_DEFAULT

    def mark_inactive(self):
        """ Drop the annotator if keeping this processor around for reasons other than running it. """
        self._model = None

    @property
    def name(self):
        """ The stage name this processor was registered under """
        return list(self.__class__.PROVIDES_DEFAULT)[0]

    @property
    def config(self):
        """ Configurations for the processor """
        return self._config

    @property
    def pipeline(self):
        """ The pipeline that this processor belongs to """
        return self._pipeline

    @property
    def model(self):
        """ The annotator doing the actual work """
        return self._model

    @property
    def provides(self):
        return self._provides

    @property
    def requires(self):
        return self._requires

    def _check_requirements(self):
        """ Given a list of fulfilled requirements, check if all of this processor's requirements are met or not. """
        provided_reqs = set.union(*[processor.provides for processor in self.pipeline.loaded_processors]+[set([])])
        if self.requires - provided_reqs:
            load_names = [item[0] for item in self.pipeline.load_list]
            raise ProcessorRequirementsException(load_names, self, provided_reqs)


class SentenceProcessor(Processor):
    """
    Base class for the processors which annotate one sentence at a time (pos, lemma, ner, parse)

    The pipeline may run process_sentence for different sentences on different threads,
    so the annotator must not change once it is built
    """

    @abstractmethod
    def process_sentence(self, sentence):
        pass

    def run_sentence(self, sentence):
        """
        Annotate one sentence, turning any failure of the annotator into a StageFailure
        """
        try:
            self.process_sentence(sentence)
        except AnnotationError:
            raise
        except InvalidScorerOutput as e:
            raise StageFailure(self.name, sentence.index, e.token_index, reason=e) from e
        except Exception as e:
            raise StageFailure(self.name, sentence.index, reason=e) from e
        return sentence

    def process(self, doc):
        for sentence in doc.sentences:
            self.run_sentence(sentence)
        return doc


class ProcessorRegisterException(Exception):
    """ Exception indicating processor or processor registration failure """

    def __init__(self, processor_class, expected_parent):
        self._processor_class = processor_class
        self._expected_parent = expected_parent
        self.build_message()

    def build_message(self):
        self.message = f"Failed to register '{self._processor_class}'. It must be a subclass of '{self._expected_parent}'."

    def __str__(self):
        return self.message

def register_processor(name):
    def wrapper(Cls):
        if not isinstance(Cls, type) or not issubclass(Cls, Processor):
            raise ProcessorRegisterException(Cls, Processor)

        NAME_TO_PROCESSOR_CLASS[name] = Cls
        if name not in PIPELINE_NAMES:
            PIPELINE_NAMES.append(name)
        return Cls
    return wrapper
