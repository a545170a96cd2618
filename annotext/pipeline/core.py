"""
Pipeline that runs tokenize,split,pos,lemma,ner,parse
"""

import argparse
from concurrent.futures import ThreadPoolExecutor, as_completed
import io
import json
import logging
import time

from annotext.pipeline._constants import *
from annotext.models.common.doc import Document
from annotext.models.common.exceptions import AnnotationCancelled, AnnotationError, ConfigError, DeadlineExceeded, StageFailure
from annotext.pipeline.processor import ProcessorRequirementsException, SentenceProcessor
from annotext.pipeline.registry import NAME_TO_PROCESSOR_CLASS, PIPELINE_NAMES
from annotext.pipeline.tokenize_processor import TokenizeProcessor
from annotext.pipeline.split_processor import SplitProcessor
from annotext.pipeline.pos_processor import POSProcessor
from annotext.pipeline.lemma_processor import LemmaProcessor
from annotext.pipeline.ner_processor import NERProcessor
from annotext.pipeline.parse_processor import ParseProcessor
from annotext.resources.common import set_logging_level
from annotext.utils.get_tqdm import get_tqdm
from annotext.utils.helper_func import make_table, split_names
from annotext.utils.response import to_response

logger = logging.getLogger('annotext')

tqdm = get_tqdm()

class PipelineRequirementsException(ConfigError):
    """
    Exception indicating one or more requirements failures while attempting to build a pipeline.
    Contains a ProcessorRequirementsException list.
    """

    def __init__(self, processor_req_fails):
        self._processor_req_fails = processor_req_fails
        self.build_message()
        super().__init__(self.message)

    @property
    def processor_req_fails(self):
        return self._processor_req_fails

    def build_message(self):
        err_msg = io.StringIO()
        print(*[req_fail.message for req_fail in self.processor_req_fails], sep='\n', file=err_msg)
        self.message = '\n\n' + err_msg.getvalue()

    def __str__(self):
        return self.message

def add_dependents(disabled):
    """
    Given a set of disabled stages, add every stage which needs one of them, directly or not
    """
    disabled = set(disabled)
    changed = True
    while changed:
        changed = False
        for name in PIPELINE_NAMES:
            if name not in disabled and NAME_TO_PROCESSOR_CLASS[name].REQUIRES_DEFAULT & disabled:
                disabled.add(name)
                changed = True
    return disabled

def check_interrupt(stage, deadline, cancel_event):
    if cancel_event is not None and cancel_event.is_set():
        raise AnnotationCancelled("Annotation was cancelled before stage '%s'" % stage)
    if deadline is not None and time.monotonic() >= deadline:
        raise DeadlineExceeded(stage)

class Pipeline:

    def __init__(self,
                 processors=None,
                 disable=None,
                 abbreviations=None,
                 tagger=None,
                 ner_model=None,
                 parser_model=None,
                 num_workers=1,
                 logging_level=None,
                 verbose=None,
                 tqdm=False,
                 **kwargs):
        # set global logging level
        set_logging_level(logging_level, verbose)

        if isinstance(num_workers, bool) or not isinstance(num_workers, int) or num_workers < 1:
            raise ConfigError("num_workers must be a positive integer, got %r" % (num_workers,))
        self.num_workers = num_workers
        self.tqdm = tqdm

        requested = split_names(processors)
        if requested is None:
            requested = list(PIPELINE_NAMES)
        disabled = split_names(disable) or []
        unknown = [name for name in requested + disabled if name not in NAME_TO_PROCESSOR_CLASS]
        if unknown:
            raise ConfigError("Unknown processors: %s.  Known processors are: %s" % (",".join(unknown), ",".join(PIPELINE_NAMES)))
        disabled = add_dependents(disabled)
        self.load_list = [(name, NAME_TO_PROCESSOR_CLASS[name].__name__) for name in PIPELINE_NAMES
                          if name in requested and name not in disabled]
        if len(self.load_list) == 0:
            raise ConfigError("No processors to load.  Requested: %s  Disabled: %s" % (",".join(requested), ",".join(sorted(disabled))))
        load_table = make_table(['Processor', 'Class'], self.load_list)
        logger.info(f'Loading these processors:\n{load_table}')

        # the named collaborators are shorthand for the <processor>_<option> form
        self.config = dict(kwargs)
        for key, value in ((f'{TOKENIZE}_abbreviations', abbreviations),
                           (f'{POS}_scorer', tagger),
                           (f'{NER}_scorer', ner_model),
                           (f'{PARSE}_scorer', parser_model)):
            if value is not None:
                self.config[key] = value

        # set up processors
        self.processors = {}
        pipeline_reqs_exceptions = []
        for processor_name, _ in self.load_list:
            curr_processor_config = self.filter_config(processor_name, self.config)
            logger.debug('Loading %s with settings: %s', processor_name, sorted(curr_processor_config.keys()))
            try:
                # try to build processor, throw an exception if there is a requirements issue
                self.processors[processor_name] = NAME_TO_PROCESSOR_CLASS[processor_name](config=curr_processor_config,
                                                                                          pipeline=self)
            except ProcessorRequirementsException as e:
                # if there was a requirements issue, add it to list which will be printed at end
                pipeline_reqs_exceptions.append(e)
                # add the broken processor to the loaded processors for the sake of analyzing the validity of the
                # entire proposed pipeline, but at this point the pipeline will not be built successfully
                self.processors[processor_name] = e.err_processor
            except ConfigError:
                raise
            except (TypeError, ValueError) as e:
                raise ConfigError("Could not build processor %s: %s" % (processor_name, e)) from e

        # if there are any processor exceptions, throw an exception to indicate pipeline build failure
        if pipeline_reqs_exceptions:
            raise PipelineRequirementsException(pipeline_reqs_exceptions)

        logger.info("Done loading processors!")

    @staticmethod
    def filter_config(prefix, config_dict):
        filtered_dict = {}
        for key in config_dict.keys():
            pieces = key.split('_', 1)  # split tokenize_max_length to tokenize+max_length
            if len(pieces) == 1:
                continue
            k, v = pieces
            if k == prefix:
                filtered_dict[v] = config_dict[key]
        return filtered_dict

    @property
    def loaded_processors(self):
        """
        Return all currently loaded processors in execution order.
        :return: list of Processor instances
        """
        return [self.processors[processor_name] for processor_name in PIPELINE_NAMES if self.processors.get(processor_name)]

    @property
    def document_processors(self):
        """ Processors which work on the whole document at once (tokenize, split) """
        return [processor for processor in self.loaded_processors if not isinstance(processor, SentenceProcessor)]

    @property
    def sentence_processors(self):
        """ Processors which annotate one sentence at a time, in the order they run on each sentence """
        return [processor for processor in self.loaded_processors if isinstance(processor, SentenceProcessor)]

    def annotate(self, text, deadline=None, cancel_event=None):
        """
        Run the pipeline on a text and return a frozen Document

        text: a str, or bytes in UTF-8
        deadline: a time.monotonic() value after which the request is abandoned with DeadlineExceeded
        cancel_event: a threading.Event; once set, the request is abandoned with AnnotationCancelled

        Any error aborts the whole request; a partially annotated document is never returned
        """
        text = self.processors[TOKENIZE].normalize(text)
        start_time = time.monotonic()
        doc = Document([], text=text)

        for processor in self.document_processors:
            check_interrupt(processor.name, deadline, cancel_event)
            try:
                doc = processor.process(doc)
            except AnnotationError:
                raise
            except Exception as e:
                raise StageFailure(processor.name, reason=e) from e

        sentence_processors = self.sentence_processors
        if sentence_processors:
            self._process_sentences(doc, sentence_processors, deadline, cancel_event)
            # sentences already running when the request was cancelled finish, but the result is dropped
            if cancel_event is not None and cancel_event.is_set():
                raise AnnotationCancelled("Annotation was cancelled while annotating sentences")
        if NER in self.processors:
            doc.build_ents()
        doc.freeze()
        logger.debug("Annotated %d characters into %d sentences and %d tokens in %.3fs",
                     len(text), len(doc.sentences), doc.num_tokens, time.monotonic() - start_time)
        return doc

    def _process_sentences(self, doc, processors, deadline, cancel_event):
        """
        Run every sentence processor over each sentence, one task per sentence

        Sentences stay in document order no matter which task finishes first.
        If several tasks fail, the error of the earliest sentence is raised
        """
        first_stage = processors[0].name

        def annotate_sentence(sentence):
            check_interrupt(first_stage, deadline, cancel_event)
            for processor in processors:
                processor.run_sentence(sentence)
            return sentence.index

        sentences = doc.sentences
        if self.num_workers == 1 or len(sentences) <= 1:
            for sentence in tqdm(sentences, disable=not self.tqdm):
                annotate_sentence(sentence)
            return

        failed = False
        with ThreadPoolExecutor(max_workers=self.num_workers) as executor:
            futures = [executor.submit(annotate_sentence, sentence) for sentence in sentences]
            for future in tqdm(as_completed(futures), total=len(futures), disable=not self.tqdm):
                if future.exception() is not None:
                    failed = True
                    # tasks which have not started are dropped, running ones are allowed to finish
                    for pending in futures:
                        pending.cancel()
                    break
        if failed:
            errors = [future.exception() for future in futures
                      if not future.cancelled() and future.exception() is not None]
            raise errors[0]

    def process(self, text, deadline=None, cancel_event=None):
        return self.annotate(text, deadline=deadline, cancel_event=cancel_event)

    def bulk_process(self, texts, deadline=None, cancel_event=None):
        """
        Annotate a list of texts, returning one Document per text
        """
        return [self.annotate(text, deadline=deadline, cancel_event=cancel_event) for text in texts]

    def __str__(self):
        """
        Assemble the processors in order to make a simple description of the pipeline
        """
        processors = ["%s=%s" % (x, str(self.processors[x])) for x in PIPELINE_NAMES if x in self.processors]
        return "<Pipeline: %s>" % ", ".join(processors)

    def __call__(self, text, deadline=None, cancel_event=None):
        return self.annotate(text, deadline=deadline, cancel_event=cancel_event)

def annotate(text, deadline=None, cancel_event=None, **options):
    """
    Build a Pipeline from options and annotate one text with it
    """
    return Pipeline(**options).annotate(text, deadline=deadline, cancel_event=cancel_event)

def format_document(doc, output_format):
    if output_format == 'conll':
        return "{:C}".format(doc)
    if output_format == 'json':
        return json.dumps(doc.to_dict(), indent=2, ensure_ascii=False)
    if output_format == 'response':
        return json.dumps(to_response(doc), indent=2, ensure_ascii=False)
    raise ValueError("Unknown output format %s" % output_format)

def main(args=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--input_file', type=str, required=True, help='Input file to read')
    parser.add_argument('--processors', type=str, default=",".join(PIPELINE_NAMES), help='Processors to use')
    parser.add_argument('--format', type=str, default='conll', choices=['conll', 'json', 'response'], help='How to print the annotated document')
    parser.add_argument('--num_workers', type=int, default=1, help='Number of threads annotating sentences')
    args = parser.parse_args(args)

    with open(args.input_file, encoding="utf-8") as fin:
        text = fin.read()

    pipe = Pipeline(processors=args.processors, num_workers=args.num_workers)
    doc = pipe(text)

    print(format_document(doc, args.format))


if __name__ == '__main__':
    main()
