# -*- coding: utf-8 -*-
import torch

from boxenc.core.errors import ConfigurationError

# degenerate boxes would make log(w_g / w_a) undefined
EPS = 1e-6


class CenterCoder(object):
    def __init__(self, coder_config):
        self.variances = torch.tensor(
            coder_config.get('variances', [0.1, 0.1, 0.2, 0.2]),
            dtype=torch.float32)
        if self.variances.numel() != 4:
            raise ConfigurationError(
                'variances should have 4 elements not {}'.format(
                    self.variances.numel()))

    @staticmethod
    def _center_form(boxes):
        widths = (boxes[..., 2] - boxes[..., 0]).clamp(min=EPS)
        heights = (boxes[..., 3] - boxes[..., 1]).clamp(min=EPS)
        ctr_x = boxes[..., 0] + 0.5 * widths
        ctr_y = boxes[..., 1] + 0.5 * heights
        return ctr_x, ctr_y, widths, heights

    def encode(self, anchors, assigned_boxes):
        """
        Args:
            anchors: shape(N,4) or (batch_size,N,4)
            assigned_boxes: shape(N,4) or (batch_size,N,4)
        Returns:
            targets: offsets of assigned_boxes relative to anchors
        """
        if anchors.dim() not in (2, 3):
            raise ValueError('anchors input dimension is not correct.')
        anchors = anchors.expand_as(assigned_boxes)
        ex_ctr_x, ex_ctr_y, ex_widths, ex_heights = self._center_form(anchors)
        gt_ctr_x, gt_ctr_y, gt_widths, gt_heights = self._center_form(
            assigned_boxes)

        targets_dx = (gt_ctr_x - ex_ctr_x) / ex_widths
        targets_dy = (gt_ctr_y - ex_ctr_y) / ex_heights
        targets_dw = torch.log(gt_widths / ex_widths)
        targets_dh = torch.log(gt_heights / ex_heights)

        targets = torch.stack(
            (targets_dx, targets_dy, targets_dw, targets_dh), dim=-1)
        return targets / self.variances.type_as(targets)

    def decode(self, deltas, anchors):
        """
        Args:
            deltas: shape(N,4) or (batch_size,N,4)
            anchors: shape(N,4) or (batch_size,N,4)
        """
        if anchors.dim() not in (2, 3):
            raise ValueError('anchors input dimension is not correct.')
        anchors = anchors.expand_as(deltas)
        deltas = deltas * self.variances.type_as(deltas)
        ctr_x, ctr_y, widths, heights = self._center_form(anchors)

        pred_ctr_x = deltas[..., 0] * widths + ctr_x
        pred_ctr_y = deltas[..., 1] * heights + ctr_y
        pred_w = torch.exp(deltas[..., 2]) * widths
        pred_h = torch.exp(deltas[..., 3]) * heights

        # (x1, y1, x2, y2)
        return torch.stack(
            (pred_ctr_x - 0.5 * pred_w, pred_ctr_y - 0.5 * pred_h,
             pred_ctr_x + 0.5 * pred_w, pred_ctr_y + 0.5 * pred_h),
            dim=-1)
