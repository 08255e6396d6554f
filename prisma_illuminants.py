# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Standard illuminants (reference white points).

The table is a set of literal constants.  Values are relative tristimulus
triples normalised to Y = 1.0 and are never recomputed at runtime, so every
transform that references a white point sees exactly the same bits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Tuple, final

import numpy as np

__all__ = ["Illuminant", "Illuminants"]


@final
@dataclass(slots=True, frozen=True)
class Illuminant:
    """Tristimulus values of a reference white under the CIE 1931 2° observer."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        """Fresh (3,) float64 array, safe to mutate."""
        return np.array(self.as_tuple(), dtype=np.float64)


class Illuminants:
    """Read-only namespace of standard white points."""

    # D65: average daylight (approx 6504K).
    # Derived from the sRGB chromaticity x=0.3127, y=0.3290 with Y=1:
    #   X = x / y, Z = (1 - x - y) / y
    D65: Final[Illuminant] = Illuminant(
        x=0.9504559270516716,
        y=1.0,
        z=1.0890577507598784,
    )

    def __init__(self) -> None:
        raise TypeError("Illuminants is a constant namespace and cannot be instantiated.")
