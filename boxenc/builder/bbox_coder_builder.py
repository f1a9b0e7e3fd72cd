# -*- coding: utf-8 -*-

from boxenc.core.errors import ConfigurationError
from boxenc.core.bbox_coders.corner_coder import CornerCoder
from boxenc.core.bbox_coders.center_coder import CenterCoder


def build(coder_config):
    coder_type = coder_config['type']
    if coder_type == 'corner':
        return CornerCoder(coder_config)
    elif coder_type == 'center':
        return CenterCoder(coder_config)
    else:
        raise ConfigurationError('unknown type of bbox coder')
