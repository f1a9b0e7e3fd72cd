# -*- coding: utf-8 -*-

import torch

from boxenc.core.errors import ConfigurationError
from boxenc.core.utils import format_checker
from boxenc.core.utils import tensor_utils

# (left, top, right, bottom)
BOX_SIZE = 4


class AnchorSet(object):
    """
    Ordered reference boxes, the row index is the identity of the anchor
    and output slot i always corresponds to anchor i.
    The tensor is never modified after construction, only copies of it
    are handed out.
    """

    def __init__(self, boxes):
        format_checker.check_box_2d_format(boxes)
        self._boxes = boxes.to(torch.float32).clone()

    @classmethod
    def from_flat(cls, anchors):
        """
        Args:
            anchors: flat sequence of floats, stride of 4
        """
        flat = tensor_utils.to_tensor(anchors, torch.float32).view(-1)
        if flat.numel() % BOX_SIZE != 0:
            raise ConfigurationError(
                'Anchors size must be divisible by {}, actual value = {}'.
                format(BOX_SIZE, flat.numel()))
        return cls(flat.view(-1, BOX_SIZE))

    @classmethod
    def from_tensor(cls, boxes):
        boxes = tensor_utils.to_tensor(boxes, torch.float32)
        try:
            format_checker.check_anchor_2d_format(boxes)
            format_checker.check_box_2d_format(boxes)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e
        return cls(boxes)

    @property
    def num_anchors(self):
        return self._boxes.shape[0]

    def __len__(self):
        return self.num_anchors

    @property
    def boxes(self):
        return self._boxes.clone()

    def flat(self):
        return self._boxes.view(-1).tolist()

    def __repr__(self):
        return '{}(num_anchors={})'.format(self.__class__.__name__,
                                           self.num_anchors)
