# -*- coding: utf-8 -*-
"""
There are a few formats in the encoder.
just list all following here

* anchor format
    shape: (N, 4) (left, top, right, bottom), normalized to [0, 1]

* gt boxes format
    shape: (M, 4) (left, top, right, bottom), M may be zero

* gt labels format
    shape: (M,) integer class ids, 0 is reserved for background

* batch format
    shape: (batch_size, M, 4), padded to the same M
"""
import numpy as np
import torch


def check_anchor_2d_format(anchors):
    if not (anchors.shape[-1] == 4):
        raise TypeError(
            'unknown anchors format due to the num of last dim must be 4 not {}'.
            format(anchors.shape[-1]))
    if len(anchors.shape) == 2:
        pass
    elif len(anchors.shape) == 3:
        # including batch dims
        pass
    else:
        raise TypeError(
            'anchors shape is wrong, length of shape is {}, but expect it is 2 or 3'.
            format(len(anchors.shape)))


def check_box_2d_format(boxes):
    if not (len(boxes.shape) == 2):
        raise TypeError('boxes should have 2 dims not {}'.format(
            len(boxes.shape)))
    if not (boxes.shape[-1] == 4):
        raise TypeError(
            'unknown boxes format due to the num of last dim must be 4 not {}'.
            format(boxes.shape[-1]))


def check_labels_format(labels, num_boxes):
    if not (len(labels.shape) == 1):
        raise TypeError('labels should have 1 dim not {}'.format(
            len(labels.shape)))
    if not (labels.shape[0] == num_boxes):
        raise TypeError(
            'num of labels should be equal to num of boxes({}) not {}'.format(
                num_boxes, labels.shape[0]))


def check_if_in_interval(tensor,
                         interval,
                         including_left=True,
                         including_right=True):
    assert interval[0] < interval[1], 'the interval is wrong'
    if including_left:
        cond_left = tensor >= interval[0]
    else:
        cond_left = tensor > interval[0]

    if including_right:
        cond_right = tensor <= interval[1]
    else:
        cond_right = tensor < interval[1]

    cond = cond_left & cond_right
    if isinstance(cond, (np.ndarray, torch.Tensor)):
        return bool(cond.all())
    return bool(cond)


def check_tensor_dims(tensor, num_dims):
    if not (len(tensor.shape) == num_dims):
        raise TypeError('tensor should have {} dims not {}'.format(
            num_dims, len(tensor.shape)))


def check_tensor(tensor):
    if not isinstance(tensor, torch.Tensor):
        raise TypeError('expect torch.Tensor not {}'.format(type(tensor)))


def check_tensor_shape(tensor, shape):
    """
    Note that None dim is ignored
    """
    check_tensor_dims(tensor, len(shape))
    for dim_ind, dim in enumerate(shape):
        if dim is not None and tensor.shape[dim_ind] != dim:
            raise TypeError('expect shape {} but got {}'.format(
                tuple(shape), tuple(tensor.shape)))


def check_tensor_type(tensor, tensor_type_name):
    tensor_type_map = {
        'float': torch.float32,
        'long': torch.int64,
        'int': torch.int32,
        'double': torch.double
    }
    tensor_type = tensor_type_map[tensor_type_name]
    if tensor.dtype is not tensor_type:
        raise TypeError('expect dtype {} not {}'.format(tensor_type,
                                                        tensor.dtype))
