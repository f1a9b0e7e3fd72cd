# -*- coding: utf-8 -*-

import logging
import sys


def setup_logger(logger_name='',
                 logger_level=logging.INFO,
                 logger_path=None):

    # set level for logger
    logger = logging.getLogger(logger_name)
    logger.setLevel(logger_level)
    # drop handlers of the last setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stream handler
    ch = logging.StreamHandler(stream=sys.stdout)
    register_handler(logger, ch, logger_level)

    if logger_path is not None:
        fh = logging.FileHandler(logger_path)
        register_handler(logger, fh, logger_level)

    return logger


def register_handler(logger, handler, logger_level):
    formatter = logging.Formatter(
        "%(asctime)s %(name)s %(levelname)s: %(message)s")
    # set level for all handlers
    handler.setLevel(logger_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
