# -*- coding: utf-8 -*-
"""
Anchor box encoder for preparing object detection training targets.
"""

__version__ = '0.1.0'
