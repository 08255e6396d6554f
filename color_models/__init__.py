# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Immutable colour value types.  Conversions compose through linear sRGB and
CIE XYZ:

    Srgb <-> LinearSrgb <-> CieXyz <-> CieLab <-> CieLch
"""

from .base import Color, Lab, Rgb
from .srgb import Srgb
from .linear_srgb import LinearSrgb
from .cie_xyz import CieXyz
from .cie_lab import CieLab
from .cie_lch import CieLch

__all__ = [
    "Color",
    "Rgb",
    "Lab",
    "Srgb",
    "LinearSrgb",
    "CieXyz",
    "CieLab",
    "CieLch",
]
