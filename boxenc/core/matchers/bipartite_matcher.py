#!/usr/bin/env python
# encoding: utf-8

import torch

from boxenc.core.matcher import Matcher
from boxenc.core.utils import tensor_utils


class BipartiteMatcher(Matcher):
    def __init__(self, matcher_config):
        super().__init__()

    def match(self, match_quality_matrix, thresh):
        """
        Match each anchor with gt_boxes, if no any gt box matches
        with the anchor, assign match idx of it with -1.
        And make sure all gt boxes can be matched

        1. each gt box takes the anchor that has max overlaps with it,
        no matter what thresh is
        2. ties are broken by the lowest anchor index
        3. other anchors match the gt box which has max overlaps with them
        only when the overlaps is not less than thresh
        4. bindings of 1 are never overwritten by 3

        Args:
            match_quality_matrix: shape(N,M), usually IoU overlaps is used
        """
        overlaps = match_quality_matrix
        assignments = self._unmatched(overlaps)
        if overlaps.numel() == 0:
            return assignments

        #################################
        # match all anchors
        ################################
        # shape(N,)
        max_overlaps, argmax_overlaps = tensor_utils.first_argmax(
            overlaps, dim=1)
        matched = max_overlaps >= thresh
        assignments[matched] = argmax_overlaps[matched]

        ##################################
        # make sure all gt has been matched
        #################################
        forced, gt_assignments = self._force_match_gts(overlaps)
        assignments[forced] = gt_assignments[forced]

        return assignments

    def _force_match_gts(self, overlaps):
        """
        Bind the best anchor of each gt box, when several gt boxes
        choose the same anchor the one with higher overlaps keeps it
        Returns:
            forced: shape(N,) bool
            gt_assignments: shape(N,)
        """
        N, M = overlaps.shape
        # shape(M,)
        gt_max_overlaps, argmax_gt_overlaps = tensor_utils.first_argmax(
            overlaps, dim=0)

        # -1 is lower than any IoU, so zero overlaps gt boxes survive too
        assignments_overlaps = torch.full_like(overlaps, -1)
        col_inds = torch.arange(M, device=overlaps.device)
        assignments_overlaps[argmax_gt_overlaps, col_inds] = gt_max_overlaps

        # shape(N,)
        max_assignments_overlaps, gt_assignments = tensor_utils.first_argmax(
            assignments_overlaps, dim=1)
        forced = max_assignments_overlaps >= 0
        return forced, gt_assignments
