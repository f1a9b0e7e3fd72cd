# -*- coding: utf-8 -*-

from boxenc.core.errors import ConfigurationError
from boxenc.core.box_encoder import CpuBoxEncoder


def build(encoder_config, logger=None):
    backend = encoder_config.get('backend', 'cpu')
    if backend == 'cpu':
        return CpuBoxEncoder(encoder_config, logger=logger)
    elif backend == 'gpu':
        raise ConfigurationError('gpu backend of box encoder is not supported')
    else:
        raise ConfigurationError('unknown backend {}!'.format(backend))
