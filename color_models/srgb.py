# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: srgb.py — Gamma-encoded sRGB colours and 8-bit packing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from prisma_colorengine import pack_rgb8, srgb_eotf

if TYPE_CHECKING:
    from .linear_srgb import LinearSrgb


@final
@dataclass(slots=True, frozen=True)
class Srgb:
    """
    A colour in the standard sRGB space (IEC 61966-2-1), gamma encoded.

    Channels are nominally in [0, 1] but are stored as given: out-of-range
    and NaN values are representable and can be detected with
    ``is_in_gamut()``.

    Attributes:
        r, g, b : float
            Gamma-encoded channel values.
    """
    r: float
    g: float
    b: float

    # --- Constructors for quantized values ---

    @classmethod
    def from_normalized(cls, r: float, g: float, b: float) -> Srgb:
        """Same as ``Srgb(r, g, b)``; no clamping or validation."""
        return cls(r, g, b)

    @classmethod
    def from_int8(cls, r: int, g: int, b: int) -> Srgb:
        """
        Builds a colour from 8-bit channels.

        Each channel is divided by 255.0.  The range is not checked, so
        integers outside [0, 255] give channels outside [0, 1].
        """
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_packed24(cls, color: int) -> Srgb:
        """Builds a colour from a packed 0xRRGGBB integer (e.g. 0xFA00FA)."""
        return cls.from_int8(
            (color >> 16) & 0xFF,
            (color >> 8) & 0xFF,
            color & 0xFF,
        )

    # --- Quantized output ---

    def to_packed24(self) -> int:
        """
        Packs this colour into a 0xRRGGBB integer.

        Channels are rounded to the nearest step of 1/255 (ties upwards) and
        masked to 8 bits.  Out-of-range channels wrap rather than clamp:
        2.0 becomes 254 and -1.0 becomes 1.
        """
        return int(pack_rgb8(float(self.r), float(self.g), float(self.b)))

    def to_hex(self) -> str:
        """Returns the lowercase ``#rrggbb`` hex code of ``to_packed24()``."""
        return f"#{self.to_packed24():06x}"

    def is_in_gamut(self) -> bool:
        """True if no channel is NaN and every channel lies in [0, 1]."""
        channels = (self.r, self.g, self.b)
        return (not any(math.isnan(c) for c in channels)
                and all(0.0 <= c <= 1.0 for c in channels))

    # --- Conversions ---

    def to_linear_srgb(self) -> LinearSrgb:
        """Decodes the sRGB transfer curve."""
        from .linear_srgb import LinearSrgb

        return LinearSrgb(
            r=srgb_eotf(float(self.r)),
            g=srgb_eotf(float(self.g)),
            b=srgb_eotf(float(self.b)),
        )
