# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: base.py — Capability contracts shared by the colour value types.

The contracts are structural.  Concrete spaces (Srgb, LinearSrgb, CieXyz,
CieLab, CieLch) are final, unrelated dataclasses that satisfy them by shape,
so ``isinstance(Srgb(0, 0, 0), Rgb)`` holds without any inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .linear_srgb import LinearSrgb


@runtime_checkable
class Color(Protocol):
    """Anything that can be brought into linear sRGB, the common hub."""

    def to_linear_srgb(self) -> LinearSrgb: ...


@runtime_checkable
class Rgb(Color, Protocol):
    """Colour expressed as red, green and blue channels."""

    r: float
    g: float
    b: float


@runtime_checkable
class Lab(Color, Protocol):
    """
    Colour expressed as lightness plus two opponent chrominance axes.

    ``L`` is nominally [0, 100]; ``a`` (green-red) and ``b`` (blue-yellow)
    are signed.
    """

    L: float
    a: float
    b: float
