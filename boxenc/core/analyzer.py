# -*- coding: utf-8 -*-

import torch


class MatchAnalyzer(object):
    def analyze(self, match, num_gt, assigned_overlaps=None):
        """
        analyze result from match, calculate recall of gt boxes
        note that -1 means it is not matched
        Args:
            match: tensor(N,)
            assigned_overlaps: tensor(N,), overlaps of each anchor
            with its assigned gt box
        Returns:
            stat: dict
        """
        num_anchors = match.numel()
        matched_anchors = match[match > -1]

        gt_mask = torch.zeros(num_gt, dtype=torch.long)
        gt_mask[matched_anchors.cpu()] = 1
        matched = gt_mask.sum().item()
        recall = matched / num_gt if num_gt else 1.0

        stat = {
            'num_anchors': num_anchors,
            'num_matched_anchors': matched_anchors.numel(),
            'num_gt': num_gt,
            'matched': matched,
            'recall': recall,
            'mean_overlaps': 0.0
        }
        if assigned_overlaps is not None and matched_anchors.numel():
            stat['mean_overlaps'] = assigned_overlaps[match > -1].mean().item()
        return stat
