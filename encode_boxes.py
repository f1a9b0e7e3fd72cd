# -*- coding: utf-8 -*-
"""
Encode gt boxes of a sample against anchors, for checking configs offline

    python encode_boxes.py --config encoder.json --input sample.json
"""

import argparse
import copy
import json
import logging
import sys

from boxenc.builder import encoder_builder
from boxenc.configs.encoder_config import encoder_config as default_config
from boxenc.configs.encoder_config import prior_box_config as default_prior_box_config
from boxenc.core.prior_box import PriorBox
from boxenc.core.utils.logger import setup_logger


def parse_args(argv=None):
    """
    Parse input arguments
    """
    parser = argparse.ArgumentParser(
        description='Encode gt boxes against anchors')
    parser.add_argument(
        '--config', dest='config', help='config file(.json)', type=str)
    parser.add_argument(
        '--input',
        dest='input',
        help='sample file(.json) with boxes and labels',
        required=True,
        type=str)
    parser.add_argument(
        '--output',
        dest='output',
        help='where to save encoded result, print it if not given',
        default=None,
        type=str)
    parser.add_argument(
        '--criteria',
        dest='criteria',
        help='overrides criteria in config',
        default=None,
        type=float)
    parser.add_argument(
        '--log_path', dest='log_path', help='log file', default=None, type=str)
    parser.add_argument(
        '--verbose',
        dest='verbose',
        help='print match statistics',
        action='store_true')
    return parser.parse_args(argv)


def load_config(config_path=None):
    encoder_config = copy.deepcopy(default_config)
    if config_path is not None:
        with open(config_path) as f:
            encoder_config.update(json.load(f))

    if 'anchors' not in encoder_config:
        prior_box = PriorBox(
            encoder_config.get('prior_box_config', default_prior_box_config))
        encoder_config['anchors'] = prior_box.flat()
    return encoder_config


def main(argv=None):
    args = parse_args(argv)
    logger_level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger('boxenc', logger_level, args.log_path)

    encoder_config = load_config(args.config)
    if args.criteria is not None:
        encoder_config['criteria'] = args.criteria
    encoder = encoder_builder.build(encoder_config, logger=logger)

    with open(args.input) as f:
        sample = json.load(f)
    boxes, labels = encoder.encode(sample['boxes'], sample['labels'])

    result = {'boxes': boxes.tolist(), 'labels': labels.tolist()}
    if args.output is None:
        json.dump(result, sys.stdout)
        sys.stdout.write('\n')
    else:
        with open(args.output, 'w') as f:
            json.dump(result, f)
        logger.info('save encoded result: {}'.format(args.output))
    return result


if __name__ == '__main__':
    main()
