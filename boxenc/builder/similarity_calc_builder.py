# -*- coding: utf-8 -*-

from boxenc.core.errors import ConfigurationError
from boxenc.core.similarity_calc.iou_similarity_calc import IoUSimilarityCalc


def build(similarity_calc_config):
    similarity_calc_type = similarity_calc_config['type']
    if similarity_calc_type == 'iou':
        return IoUSimilarityCalc()
    else:
        raise ConfigurationError('unsupported type of similarity_calc!')
