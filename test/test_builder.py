# -*- coding: utf-8 -*-

import logging

import pytest

from boxenc.builder import matcher_builder
from boxenc.builder import similarity_calc_builder
from boxenc.core.errors import ConfigurationError
from boxenc.core.matchers.argmax_matcher import ArgmaxMatcher
from boxenc.core.matchers.bipartite_matcher import BipartiteMatcher
from boxenc.core.similarity_calc.iou_similarity_calc import IoUSimilarityCalc
from boxenc.core.utils.logger import setup_logger


def test_matcher_builder():
    assert isinstance(
        matcher_builder.build({'type': 'bipartite'}), BipartiteMatcher)
    assert isinstance(matcher_builder.build({'type': 'argmax'}), ArgmaxMatcher)
    with pytest.raises(ConfigurationError):
        matcher_builder.build({'type': 'hungarian'})


def test_similarity_calc_builder():
    assert isinstance(
        similarity_calc_builder.build({'type': 'iou'}), IoUSimilarityCalc)
    with pytest.raises(ValueError):
        similarity_calc_builder.build({'type': 'center'})


def test_setup_logger(tmp_path):
    log_path = str(tmp_path / 'log.txt')
    logger = setup_logger('boxenc.test', logging.INFO, log_path)
    logger.info('encoder is ready')
    logger.debug('not written')

    # a second setup replaces the handlers
    logger = setup_logger('boxenc.test', logging.INFO, log_path)
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()

    with open(log_path) as f:
        content = f.read()
    assert 'boxenc.test INFO: encoder is ready' in content
    assert 'not written' not in content
