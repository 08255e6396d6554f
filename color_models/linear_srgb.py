# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: linear_srgb.py — Linear-light sRGB, the hub between device RGB and
tristimulus space.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from prisma_colorengine import M_LINEAR_SRGB_TO_XYZ, srgb_oetf, transform3

from .srgb import Srgb

if TYPE_CHECKING:
    from .cie_xyz import CieXyz


@final
@dataclass(slots=True, frozen=True)
class LinearSrgb:
    """
    sRGB primaries with the transfer curve removed (linear light).

    Values are unbounded; negative or >1 channels describe colours outside
    the sRGB gamut.
    """
    r: float
    g: float
    b: float

    def to_linear_srgb(self) -> LinearSrgb:
        return self

    def to_srgb(self) -> Srgb:
        """Applies the sRGB OETF.  Channels are not clipped."""
        return Srgb(
            r=srgb_oetf(float(self.r)),
            g=srgb_oetf(float(self.g)),
            b=srgb_oetf(float(self.b)),
        )

    def to_cie_xyz(self) -> CieXyz:
        """Projects onto CIE 1931 XYZ (D65 relative) via the sRGB primaries."""
        from .cie_xyz import CieXyz

        x, y, z = transform3(M_LINEAR_SRGB_TO_XYZ, float(self.r), float(self.g), float(self.b))
        return CieXyz(x=x, y=y, z=z)
