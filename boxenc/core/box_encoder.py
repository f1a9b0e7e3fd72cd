#!/usr/bin/env python
# encoding: utf-8

from abc import ABC, abstractmethod
import logging

import torch

from boxenc.builder import bbox_coder_builder
from boxenc.builder import matcher_builder
from boxenc.builder import similarity_calc_builder
from boxenc.core.analyzer import MatchAnalyzer
from boxenc.core.anchor_set import AnchorSet
from boxenc.core.errors import ConfigurationError
from boxenc.core.utils import format_checker
from boxenc.core.utils import tensor_utils

# label of anchors without matched gt box
BACKGROUND_LABEL = 0


class BoxEncoder(ABC):
    """
    Encode gt boxes and labels of a sample to fixed size targets,
    one slot for each anchor.

    Only the anchor set is shared between calls and it is never modified,
    so the same encoder can be used by many workers at the same time.
    Subclasses only decide where the tensors live.
    """

    backend = None

    def __init__(self, encoder_config, logger=None):
        if logger is None:
            logger = logging.getLogger(__name__)
        self.logger = logger

        for key in ('criteria', 'anchors'):
            if key not in encoder_config:
                raise ConfigurationError(
                    '{} is missing in encoder config'.format(key))

        criteria = encoder_config['criteria']
        if not format_checker.check_if_in_interval(criteria, [0, 1]):
            raise ConfigurationError(
                'Expected criteria in [0, 1], actual value = {}'.format(
                    criteria))
        self.criteria = float(criteria)

        self.anchor_set = AnchorSet.from_flat(encoder_config['anchors'])
        self._anchors = self._to_backend(self.anchor_set.boxes)

        # some compositions
        self.similarity_calc = similarity_calc_builder.build(
            encoder_config.get('similarity_calc_config', {'type': 'iou'}))
        self.matcher = matcher_builder.build(
            encoder_config.get('matcher_config', {'type': 'bipartite'}))
        self.bbox_coder = bbox_coder_builder.build(
            encoder_config.get('coder_config', {'type': 'corner'}))
        self.analyzer = MatchAnalyzer()

        self.logger.info(
            'build {} box encoder with {} anchors, criteria: {}'.format(
                self.backend, self.num_anchors, self.criteria))

    @property
    def num_anchors(self):
        return self.anchor_set.num_anchors

    @abstractmethod
    def _to_backend(self, tensor):
        pass

    @abstractmethod
    def _from_backend(self, tensor):
        pass

    def encode(self, gt_boxes, gt_labels, out_boxes=None, out_labels=None):
        """
        Args:
            gt_boxes: shape(M,4), M may be zero
            gt_labels: shape(M,)
            out_boxes: optional float tensor of shape(N,4) to write into
            out_labels: optional long tensor of shape(N,) to write into
        Returns:
            boxes: shape(N,4)
            labels: shape(N,), zero means background
        """
        gt_boxes, gt_labels = self._read_gt(gt_boxes, gt_labels)

        # shape(N,M)
        match_quality_matrix = self.similarity_calc.compare(self._anchors,
                                                            gt_boxes)
        # shape(N,)
        match = self.matcher.match(match_quality_matrix, self.criteria)

        boxes, labels = self._encode_match(match, match_quality_matrix,
                                           gt_boxes, gt_labels)
        return self._write_output(boxes, labels, out_boxes, out_labels)

    def encode_batch(self, gt_boxes_batch, gt_labels_batch):
        """
        Args:
            gt_boxes_batch: list of shape(M_i,4)
            gt_labels_batch: list of shape(M_i,)
        Returns:
            boxes: shape(batch_size,N,4)
            labels: shape(batch_size,N)
        """
        if len(gt_boxes_batch) != len(gt_labels_batch):
            raise TypeError(
                'num of boxes({}) and labels({}) in batch are not equal'.format(
                    len(gt_boxes_batch), len(gt_labels_batch)))

        samples = [
            self._read_gt(gt_boxes, gt_labels)
            for gt_boxes, gt_labels in zip(gt_boxes_batch, gt_labels_batch)
        ]
        if not samples:
            return (torch.zeros((0, self.num_anchors, 4)),
                    torch.zeros((0, self.num_anchors), dtype=torch.long))

        match_quality_matrix_batch = [
            self.similarity_calc.compare(self._anchors, gt_boxes)
            for gt_boxes, _ in samples
        ]
        # shape(batch_size,N)
        match_batch = self.matcher.match_batch(match_quality_matrix_batch,
                                               self.criteria)

        boxes_batch = []
        labels_batch = []
        for match, match_quality_matrix, (gt_boxes, gt_labels) in zip(
                match_batch, match_quality_matrix_batch, samples):
            boxes, labels = self._encode_match(match, match_quality_matrix,
                                               gt_boxes, gt_labels)
            boxes_batch.append(self._from_backend(boxes))
            labels_batch.append(self._from_backend(labels))

        return torch.stack(boxes_batch), torch.stack(labels_batch)

    def _read_gt(self, gt_boxes, gt_labels):
        gt_boxes = tensor_utils.to_tensor(gt_boxes, torch.float32)
        gt_labels = tensor_utils.to_tensor(gt_labels, torch.long)
        # no gt boxes at all, e.g. an empty list
        if gt_boxes.numel() == 0 and gt_boxes.dim() == 1:
            gt_boxes = gt_boxes.view(0, 4)

        format_checker.check_box_2d_format(gt_boxes)
        format_checker.check_labels_format(gt_labels, gt_boxes.shape[0])
        return self._to_backend(gt_boxes), self._to_backend(gt_labels)

    def _encode_match(self, match, match_quality_matrix, gt_boxes, gt_labels):
        """
        Background anchors keep their own coordinates and get zero label
        """
        matched = match > -1

        assigned_boxes = self._anchors.clone()
        assigned_boxes[matched] = gt_boxes[match[matched]]

        labels = torch.full_like(match, BACKGROUND_LABEL)
        labels[matched] = gt_labels[match[matched]]

        if self.logger.isEnabledFor(logging.DEBUG):
            self._log_stat(match, match_quality_matrix, gt_boxes.shape[0])

        boxes = self.bbox_coder.encode(self._anchors, assigned_boxes)
        return boxes, labels

    def _log_stat(self, match, match_quality_matrix, num_gt):
        assigned_overlaps = None
        if num_gt:
            num = match.numel()
            row = torch.arange(0, num, device=match.device)
            assigned_overlaps = match_quality_matrix[row, match.clamp(min=0)]
        stat = self.analyzer.analyze(match, num_gt, assigned_overlaps)
        self.logger.debug(
            'matched_anchors/matched_gt/all_gt/average recall({}/{}/{}/{:.3f}), mean overlaps: {:.3f}'.
            format(stat['num_matched_anchors'], stat['matched'],
                   stat['num_gt'], stat['recall'], stat['mean_overlaps']))

    def _write_output(self, boxes, labels, out_boxes, out_labels):
        boxes = self._from_backend(boxes)
        labels = self._from_backend(labels)

        if out_boxes is not None:
            format_checker.check_tensor(out_boxes)
            format_checker.check_tensor_shape(out_boxes, [self.num_anchors, 4])
            format_checker.check_tensor_type(out_boxes, 'float')
            out_boxes.copy_(boxes)
            boxes = out_boxes
        if out_labels is not None:
            format_checker.check_tensor(out_labels)
            format_checker.check_tensor_shape(out_labels, [self.num_anchors])
            format_checker.check_tensor_type(out_labels, 'long')
            out_labels.copy_(labels)
            labels = out_labels
        return boxes, labels


class CpuBoxEncoder(BoxEncoder):
    backend = 'cpu'

    def _to_backend(self, tensor):
        return tensor.cpu()

    def _from_backend(self, tensor):
        return tensor
