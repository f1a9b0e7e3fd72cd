# -*- coding: utf-8 -*-

encoder_config = {
    'criteria': 0.5,
    'backend': 'cpu',
    'similarity_calc_config': {
        'type': 'iou'
    },
    'matcher_config': {
        'type': 'bipartite'
    },
    'coder_config': {
        'type': 'corner',
        'variances': [0.1, 0.1, 0.2, 0.2]
    },
}

# used to generate anchors when no flat anchors are given
prior_box_config = {
    'feature_maps': [[8, 8], [4, 4], [2, 2], [1, 1]],
    'min_sizes': [0.1, 0.3, 0.5, 0.7],
    'max_sizes': [0.3, 0.5, 0.7, 0.9],
    'aspect_ratios': [2., 0.5],
    'clip': True
}
