"""
Common utilities for the annotext resources
"""

import logging

logger = logging.getLogger('annotext')

ALL_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'WARN', 'ERROR', 'CRITICAL', 'FATAL']

def set_logging_level(logging_level, verbose):
    # Check verbose for easy logging control
    if verbose == False:
        logging_level = 'ERROR'
    elif verbose == True:
        logging_level = 'INFO'

    if logging_level is None:
        # default logging level of INFO is set in annotext.__init__
        # but the user may have set it via the logging API
        if logger.level == 0:
            logger.setLevel('INFO')
        return logger.level

    logging_level = logging_level.upper()
    if logging_level not in ALL_LEVELS:
        raise ValueError(
            f"Unrecognized logging level for pipeline: "
            f"{logging_level}. Must be one of {', '.join(ALL_LEVELS)}."
        )
    logger.setLevel(logging_level)
    return logger.level
