from math import sqrt as sqrt
from itertools import product as product
import torch

from boxenc.core.errors import ConfigurationError


class PriorBox(object):
    """Compute default anchors in normalized (left, top, right, bottom)
    form for each source feature map.
    """

    def __init__(self, cfg):
        super(PriorBox, self).__init__()
        self.feature_maps = cfg['feature_maps']
        self.min_sizes = cfg['min_sizes']
        self.max_sizes = cfg['max_sizes']
        self.aspect_ratios = cfg.get('aspect_ratios', [])
        self.clip = cfg.get('clip', True)
        # number of priors for feature map location
        self.num_priors = 2 + len(self.aspect_ratios)

        if not (len(self.feature_maps) == len(self.min_sizes) == len(
                self.max_sizes)):
            raise ConfigurationError(
                'feature_maps, min_sizes and max_sizes should have the same length'
            )

    def forward(self):
        mean = []
        for k, f in enumerate(self.feature_maps):
            for i, j in product(range(f[0]), range(f[1])):
                # unit center x,y
                cx = (j + 0.5) / f[1]
                cy = (i + 0.5) / f[0]

                # aspect_ratio: 1
                # rel size: min_size
                s_k = self.min_sizes[k]
                mean += [cx, cy, s_k, s_k]

                # aspect_ratio: 1
                # rel size: sqrt(s_k * s_(k+1))
                s_k_prime = sqrt(s_k * (self.max_sizes[k]))
                mean += [cx, cy, s_k_prime, s_k_prime]

                # rest of aspect ratios
                for ar in self.aspect_ratios:
                    mean += [cx, cy, s_k / sqrt(ar), s_k * sqrt(ar)]
        # back to torch land
        mean = torch.tensor(mean, dtype=torch.float32).view(-1, 4)

        # xywh convert xyxy
        xmin = mean[:, 0] - 0.5 * mean[:, 2]
        xmax = mean[:, 0] + 0.5 * mean[:, 2]
        ymin = mean[:, 1] - 0.5 * mean[:, 3]
        ymax = mean[:, 1] + 0.5 * mean[:, 3]
        output = torch.stack([xmin, ymin, xmax, ymax], dim=-1)

        if self.clip:
            output.clamp_(max=1, min=0)
        return output

    def flat(self):
        return self.forward().view(-1).tolist()
