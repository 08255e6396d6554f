# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie_xyz.py — CIE 1931 XYZ tristimulus values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from prisma_colorengine import M_XYZ_TO_LINEAR_SRGB, transform3

from .linear_srgb import LinearSrgb

if TYPE_CHECKING:
    from .cie_lab import CieLab


@final
@dataclass(slots=True, frozen=True)
class CieXyz:
    """
    A colour in the CIE 1931 XYZ space, relative to the D65 white (Y = 1).

    Values are not normalized to [0, 1] and may be negative.
    """
    x: float
    y: float
    z: float

    def to_linear_srgb(self) -> LinearSrgb:
        """Converts to linear sRGB with the inverse primaries matrix."""
        r, g, b = transform3(M_XYZ_TO_LINEAR_SRGB, float(self.x), float(self.y), float(self.z))
        return LinearSrgb(r=r, g=g, b=b)

    def to_cie_lab(self) -> CieLab:
        """
        Converts to CIE L*a*b* (D65).

        See :meth:`color_models.cie_lab.CieLab.from_xyz`.
        """
        from .cie_lab import CieLab

        return CieLab.from_xyz(self)
