# these two get filled by register_processor
NAME_TO_PROCESSOR_CLASS = dict()
PIPELINE_NAMES = []
