# -*- coding: utf-8 -*-


class CornerCoder(object):
    """
    Keep boxes as raw (left, top, right, bottom), offsets against anchors
    are left to the model
    """

    def __init__(self, coder_config):
        pass

    def encode(self, anchors, assigned_boxes):
        return assigned_boxes.clone()

    def decode(self, deltas, anchors):
        return deltas.clone()
