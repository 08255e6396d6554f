# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie_lch.py — Cylindrical form of CIELAB.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from prisma_colorengine import lch_to_lab

from .cie_lab import CieLab
from .linear_srgb import LinearSrgb


@final
@dataclass(slots=True, frozen=True)
class CieLch:
    """CIELAB in polar form: lightness, chroma and hue angle in degrees."""
    L: float
    C: float
    h: float

    def to_linear_srgb(self) -> LinearSrgb:
        return self.to_cie_lab().to_linear_srgb()

    def to_cie_lab(self) -> CieLab:
        L, a, b = lch_to_lab(float(self.L), float(self.C), float(self.h))
        return CieLab(L=L, a=a, b=b)
