# -*- coding: utf-8 -*-

from boxenc.core.errors import ConfigurationError
from boxenc.core.matchers.bipartite_matcher import BipartiteMatcher
from boxenc.core.matchers.argmax_matcher import ArgmaxMatcher


def build(matcher_config):
    matcher_type = matcher_config['type']
    if matcher_type == 'bipartite':
        return BipartiteMatcher(matcher_config)
    elif matcher_type == 'argmax':
        return ArgmaxMatcher(matcher_config)
    else:
        raise ConfigurationError(
            "unknown matcher type {}!".format(matcher_type))
