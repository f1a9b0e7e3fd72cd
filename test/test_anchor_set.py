# -*- coding: utf-8 -*-

import numpy as np
import pytest
import torch

from boxenc.core.anchor_set import AnchorSet
from boxenc.core.errors import ConfigurationError


def test_from_flat_keeps_order():
    flat = [0, 0, 1, 1, 0, 0, 0.5, 0.5, 0.2, 0.3, 0.4, 0.6]
    anchor_set = AnchorSet.from_flat(flat)

    assert anchor_set.num_anchors == 3
    assert len(anchor_set) == 3
    expect = torch.tensor(flat, dtype=torch.float32).view(3, 4)
    assert torch.equal(anchor_set.boxes, expect)
    assert anchor_set.flat() == pytest.approx(flat)


def test_from_flat_not_divisible_by_4():
    with pytest.raises(ConfigurationError):
        AnchorSet.from_flat([0, 0, 1, 1, 0, 0, 1])


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        AnchorSet.from_flat([0.1] * 5)


def test_empty_anchors():
    anchor_set = AnchorSet.from_flat([])
    assert anchor_set.num_anchors == 0
    assert anchor_set.boxes.shape == (0, 4)


def test_from_tensor():
    boxes = np.array([[0, 0, 1, 1], [0, 0, 0.5, 0.5]], dtype=np.float64)
    anchor_set = AnchorSet.from_tensor(boxes)
    assert anchor_set.num_anchors == 2
    assert anchor_set.boxes.dtype == torch.float32

    with pytest.raises(ConfigurationError):
        AnchorSet.from_tensor(torch.zeros(2, 5))
    with pytest.raises(ConfigurationError):
        AnchorSet.from_tensor(torch.zeros(1, 2, 4))


def test_boxes_are_copies():
    anchor_set = AnchorSet.from_flat([0, 0, 1, 1])
    boxes = anchor_set.boxes
    boxes.zero_()
    assert anchor_set.flat() == [0, 0, 1, 1]
