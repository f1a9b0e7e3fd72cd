# -*- coding: utf-8 -*-

import torch

from boxenc.core.utils import format_checker


class IoUSimilarityCalc(object):
    def compare(self, anchors, gt_boxes):
        """
        anchors: (N, 4) tensor of float
        gt_boxes: (K, 4) tensor of float

        overlaps: (N, K) tensor of IoU between anchors and gt_boxes
        """
        format_checker.check_anchor_2d_format(anchors)
        format_checker.check_box_2d_format(gt_boxes)
        N = anchors.size(0)
        K = gt_boxes.size(0)

        boxes = anchors.reshape(N, 1, 4).expand(N, K, 4)
        query_boxes = gt_boxes.reshape(1, K, 4).expand(N, K, 4)
        return self._overlaps(boxes, query_boxes)

    def compare_batch(self, anchors, gt_boxes):
        """
        anchors: (N, 4) tensor of float
        gt_boxes: (b, K, 4) tensor of float, padded

        overlaps: (b, N, K) tensor of IoU between anchors and gt_boxes
        """
        format_checker.check_anchor_2d_format(anchors)
        format_checker.check_tensor_shape(gt_boxes, [None, None, 4])
        batch_size = gt_boxes.size(0)
        K = gt_boxes.size(1)

        if anchors.dim() == 2:
            N = anchors.size(0)
            anchors = anchors.reshape(1, N, 4).expand(batch_size, N, 4)
        else:
            N = anchors.size(1)

        boxes = anchors.reshape(batch_size, N, 1, 4).expand(
            batch_size, N, K, 4)
        query_boxes = gt_boxes.reshape(batch_size, 1, K, 4).expand(batch_size,
                                                                N, K, 4)
        return self._overlaps(boxes, query_boxes)

    def _overlaps(self, boxes, query_boxes):
        """
        boxes and query_boxes are already expanded to the same shape(..., 4)
        """
        boxes_area = (boxes[..., 2] - boxes[..., 0]) * (
            boxes[..., 3] - boxes[..., 1])
        query_boxes_area = (query_boxes[..., 2] - query_boxes[..., 0]) * (
            query_boxes[..., 3] - query_boxes[..., 1])

        iw = (torch.min(boxes[..., 2], query_boxes[..., 2]) -
              torch.max(boxes[..., 0], query_boxes[..., 0]))
        iw[iw < 0] = 0

        ih = (torch.min(boxes[..., 3], query_boxes[..., 3]) -
              torch.max(boxes[..., 1], query_boxes[..., 1]))
        ih[ih < 0] = 0

        inter = iw * ih
        ua = boxes_area + query_boxes_area - inter

        # degenerate boxes have no union, their IoU is zero
        overlaps = torch.zeros_like(inter)
        valid = ua > 0
        overlaps[valid] = inter[valid] / ua[valid]
        return overlaps
