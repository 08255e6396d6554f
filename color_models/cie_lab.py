# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie_lab.py — CIE 1976 L*a*b* (CIELAB).

This implementation uses a white point of D65, like sRGB.  It does not
implement CIELAB D50.

Forward (XYZ -> Lab):
    f(t) = cbrt(t)                   if t > 216/24389
         = t / (108/841) + 4/29      otherwise
    L = 116 f(Y/Yn) - 16
    a = 500 (f(X/Xn) - f(Y/Yn))
    b = 200 (f(Y/Yn) - f(Z/Zn))

Inverse (Lab -> XYZ):
    f_inv(t) = t^3                       if t > 6/29
             = (108/841) (t - 4/29)      otherwise
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from prisma_colorengine import lab_f, lab_f_inv, lab_to_lch
from prisma_illuminants import Illuminants

from .cie_xyz import CieXyz
from .linear_srgb import LinearSrgb

if TYPE_CHECKING:
    from .cie_lch import CieLch


@final
@dataclass(slots=True, frozen=True)
class CieLab:
    """
    A colour in the CIE L*a*b* uniform colour space (D65).

    Attributes:
        L : float
            Lightness, nominally [0, 100].
        a, b : float
            Signed green-red and blue-yellow chrominance.
    """
    L: float
    a: float
    b: float

    def to_linear_srgb(self) -> LinearSrgb:
        return self.to_cie_xyz().to_linear_srgb()

    def to_cie_xyz(self) -> CieXyz:
        """Converts this colour to CIE 1931 XYZ."""
        white = Illuminants.D65
        lp = (self.L + 16.0) / 116.0

        return CieXyz(
            x=white.x * lab_f_inv(lp + self.a / 500.0),
            y=white.y * lab_f_inv(lp),
            z=white.z * lab_f_inv(lp - self.b / 200.0),
        )

    def to_cie_lch(self) -> CieLch:
        """Converts to cylindrical CIELCh (hue in degrees)."""
        from .cie_lch import CieLch

        L, C, h = lab_to_lch(float(self.L), float(self.a), float(self.b))
        return CieLch(L=L, C=C, h=h)

    @classmethod
    def from_xyz(cls, xyz: CieXyz) -> CieLab:
        """
        Converts a CIE 1931 XYZ colour to CIE L*a*b*.

        Negative or NaN ratios against the white point never raise; they take
        the linear branch of f and propagate arithmetically.
        """
        white = Illuminants.D65
        fx = lab_f(xyz.x / white.x)
        fy = lab_f(xyz.y / white.y)
        fz = lab_f(xyz.z / white.z)

        return cls(
            L=116.0 * fy - 16.0,
            a=500.0 * (fx - fy),
            b=200.0 * (fy - fz),
        )
