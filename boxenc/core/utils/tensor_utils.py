# -*- coding: utf-8 -*-

import numpy as np
import torch


def to_tensor(data, dtype):
    """
    Accept tensor, ndarray or (nested) list, return a tensor of dtype
    """
    if isinstance(data, torch.Tensor):
        return data.to(dtype)
    if isinstance(data, np.ndarray):
        # negative strides, e.g. flipped views, are not supported by from_numpy
        return torch.from_numpy(np.ascontiguousarray(data)).to(dtype)
    return torch.tensor(data, dtype=dtype)


def first_argmax(tensor, dim):
    """
    Like torch.max along dim, but the index of the first maximal value
    is always returned when there are ties
    Args:
        tensor: shape(N,M)
    Returns:
        max_values, argmax: reduced along dim
    """
    max_values, _ = torch.max(tensor, dim=dim, keepdim=True)
    size = tensor.shape[dim]

    index_shape = [1] * tensor.dim()
    index_shape[dim] = size
    index = torch.arange(
        size, device=tensor.device).view(index_shape).expand_as(tensor)

    # non-maximal entries are pushed past the last index
    candidates = torch.where(tensor == max_values, index,
                             torch.full_like(index, size))
    argmax, _ = torch.min(candidates, dim=dim)
    return max_values.squeeze(dim), argmax
