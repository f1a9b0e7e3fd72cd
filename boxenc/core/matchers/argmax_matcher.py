# -*- coding: utf-8 -*-

from boxenc.core.matcher import Matcher
from boxenc.core.utils import tensor_utils


class ArgmaxMatcher(Matcher):
    def __init__(self, matcher_config):
        super().__init__()

    def match(self, match_quality_matrix, thresh):
        """
        For each anchor, find the gt idx that has max overlaps with it,
        means matched when the overlap is not less than thresh
        """
        assignments = self._unmatched(match_quality_matrix)
        if match_quality_matrix.numel() == 0:
            return assignments

        max_overlaps, argmax_overlaps = tensor_utils.first_argmax(
            match_quality_matrix, dim=1)
        matched = max_overlaps >= thresh
        assignments[matched] = argmax_overlaps[matched]
        return assignments
