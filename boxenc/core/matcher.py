# -*- coding: utf-8 -*-

from abc import ABC, abstractmethod
import torch


class Matcher(ABC):
    """
    Matchers keep no per-sample information on the instance, so a single
    matcher can be shared by all workers of the pipeline.
    """

    @abstractmethod
    def match(self, match_quality_matrix, thresh):
        """
        Args:
            match_quality_matrix: shape(num_anchors, num_gts)
        Returns:
            assignments: shape(num_anchors,), -1 means unmatched
        """
        pass

    def match_batch(self, match_quality_matrix_batch, thresh):
        """
        batch version of match function
        Args:
            match_quality_matrix_batch: shape(N,num_anchors,num_gts) or
            list of shape(num_anchors,num_gts_i)
        Returns:
            assignments: shape(N,num_anchors)
        """
        assignments = []
        for match_quality_matrix in match_quality_matrix_batch:
            assignments.append(self.match(match_quality_matrix, thresh))

        # shape(N,num_anchors)
        return torch.stack(assignments)

    @staticmethod
    def _unmatched(match_quality_matrix):
        return torch.full(
            (match_quality_matrix.shape[0], ),
            -1,
            dtype=torch.long,
            device=match_quality_matrix.device)
