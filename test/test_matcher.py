# -*- coding: utf-8 -*-

import torch

from boxenc.core.matchers.argmax_matcher import ArgmaxMatcher
from boxenc.core.matchers.bipartite_matcher import BipartiteMatcher
from boxenc.core.utils import tensor_utils

bipartite_matcher = BipartiteMatcher({'type': 'bipartite'})
argmax_matcher = ArgmaxMatcher({'type': 'argmax'})


def test_first_argmax_ties():
    tensor = torch.tensor([[0.2, 0.5, 0.5], [0.7, 0.1, 0.7]])
    max_values, argmax = tensor_utils.first_argmax(tensor, dim=1)
    assert torch.equal(max_values, torch.tensor([0.5, 0.7]))
    assert argmax.tolist() == [1, 0]

    max_values, argmax = tensor_utils.first_argmax(tensor, dim=0)
    assert argmax.tolist() == [1, 0, 1]


def test_threshold_match():
    # shape(num_anchors, num_gts)
    overlaps = torch.tensor([[0.6, 0.1], [0.25, 0.2], [0.1, 0.8], [0.2, 0.25]])
    match = argmax_matcher.match(overlaps, 0.5)
    assert match.tolist() == [0, -1, 1, -1]

    # the threshold is inclusive
    match = argmax_matcher.match(overlaps, 0.25)
    assert match.tolist() == [0, 0, 1, 1]


def test_force_match_below_threshold():
    overlaps = torch.tensor([[0.16]])
    assert bipartite_matcher.match(overlaps, 0.9).tolist() == [0]
    assert argmax_matcher.match(overlaps, 0.9).tolist() == [-1]


def test_force_match_is_not_overwritten():
    # anchor 1 prefers gt 0 by threshold, but it is the best anchor of gt 1
    overlaps = torch.tensor([[0.9, 0.0], [0.8, 0.3], [0.1, 0.2]])
    match = bipartite_matcher.match(overlaps, 0.5)
    assert match.tolist() == [0, 1, -1]


def test_force_match_ties_take_lowest_anchor():
    overlaps = torch.tensor([[0.1], [0.4], [0.4], [0.2]])
    match = bipartite_matcher.match(overlaps, 0.9)
    assert match.tolist() == [-1, 0, -1, -1]


def test_threshold_ties_take_lowest_gt():
    overlaps = torch.tensor([[0.9, 0.1, 0.0], [0.6, 0.6, 0.1], [0., 0.9, 0.],
                             [0., 0., 0.9]])
    match = bipartite_matcher.match(overlaps, 0.5)
    assert match.tolist() == [0, 0, 1, 2]


def test_gts_share_best_anchor():
    # both gt boxes like anchor 0 best, the one with higher overlaps keeps it
    overlaps = torch.tensor([[0.4, 0.7], [0.3, 0.1]])
    match = bipartite_matcher.match(overlaps, 0.5)
    assert match.tolist() == [1, -1]

    # equal overlaps, the lower gt index keeps it
    overlaps = torch.tensor([[0.5, 0.5], [0.1, 0.1]])
    match = bipartite_matcher.match(overlaps, 0.9)
    assert match.tolist() == [0, -1]


def test_zero_overlaps_gt_is_forced():
    overlaps = torch.tensor([[0.0, 0.0], [0.8, 0.0], [0.1, 0.0]])
    match = bipartite_matcher.match(overlaps, 0.5)
    # gt 1 has no overlaps with anything, the lowest anchor is forced to it
    assert match.tolist() == [1, 0, -1]


def test_all_gts_are_covered():
    generator = torch.Generator().manual_seed(0)
    for _ in range(20):
        overlaps = torch.rand(30, 4, generator=generator)
        _, best_anchors = tensor_utils.first_argmax(overlaps, dim=0)
        if len(set(best_anchors.tolist())) < 4:
            continue
        for thresh in [0., 0.5, 1.]:
            match = bipartite_matcher.match(overlaps, thresh)
            assert set(match[match > -1].tolist()) == set(range(4))
            for gt_ind, anchor_ind in enumerate(best_anchors.tolist()):
                assert match[anchor_ind].item() == gt_ind


def test_raising_threshold_only_removes_matches():
    generator = torch.Generator().manual_seed(1)
    overlaps = torch.rand(50, 5, generator=generator)
    last_match = bipartite_matcher.match(overlaps, 0.)
    for thresh in [0.2, 0.4, 0.6, 0.8, 1.]:
        match = bipartite_matcher.match(overlaps, thresh)
        still_matched = match > -1
        assert (last_match[still_matched] == match[still_matched]).all()
        assert still_matched.sum() <= (last_match > -1).sum()
        last_match = match


def test_empty_inputs():
    assert bipartite_matcher.match(torch.zeros(3, 0), 0.5).tolist() == [-1] * 3
    assert bipartite_matcher.match(torch.zeros(0, 2), 0.5).numel() == 0
    assert argmax_matcher.match(torch.zeros(3, 0), 0.5).tolist() == [-1] * 3


def test_match_batch():
    overlaps_batch = [
        torch.tensor([[0.9, 0.1], [0.2, 0.3]]),
        torch.zeros(2, 0),
        torch.tensor([[0.1], [0.6]]),
    ]
    match = bipartite_matcher.match_batch(overlaps_batch, 0.5)
    assert match.shape == (3, 2)
    assert match.tolist() == [[0, 1], [-1, -1], [-1, 0]]
