# -*- coding: utf-8 -*-
"""
Prisma: Exact colour transforms between sRGB, CIE XYZ and CIELAB.
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Engine
=============
Exact rational constants, Numba-compiled transfer kernels and a batch API
for sRGB <-> linear sRGB <-> CIE XYZ <-> CIELAB (D65).

The module has two layers:

1. Scalar kernels (``srgb_eotf``, ``lab_f``, ``quantize8`` ...).  These are
   compiled with ``fastmath=False`` and are the single implementation of every
   curve.  The immutable value types in :mod:`color_models` call them
   directly, and the strict batch kernels loop over them, so a scalar
   conversion and a batch conversion of the same triple agree.
2. ``ColorSpaceEngine``: shape-safe batch transforms over ``(N, 3)`` arrays.

Numerical notes:
    - The CIELAB breakpoints are written as exact rationals
      (6/29, 216/24389, 108/841, 4/29) so both branches of the piecewise
      curves meet at the breakpoint to within one ulp.
    - The forward CIELAB curve uses ``np.cbrt`` (sign preserving), never
      ``t ** (1/3)``.
    - Integer packing wraps through ``& 0xFF``; it never clamps.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
"""

import functools
import logging
import numpy as np
import numpy.typing as npt
from numba import njit, prange
from typing import Tuple, Final, TypeAlias, Callable, Any

from prisma_illuminants import Illuminants

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "LAB_DELTA",
    "LAB_EPSILON",
    "LAB_SLOPE",
    "LAB_OFFSET",
    "SRGB_PRIMARIES_XY",
    "RAD2DEG",
    "DEG2RAD",

    # --- Matrices ---
    "M_LINEAR_SRGB_TO_XYZ",
    "M_XYZ_TO_LINEAR_SRGB",
    "rgb_to_xyz_matrix",

    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Scalar kernels ---
    "srgb_eotf",
    "srgb_oetf",
    "lab_f",
    "lab_f_inv",
    "quantize8",
    "pack_rgb8",
    "transform3",
    "lab_to_lch",
    "lch_to_lab",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "ColorSpaceEngine",
]

logger = logging.getLogger(__name__)

# --- Type Aliases ---
# float32 and integer inputs are copied to float64 by ``handle_shapes``.
ArrayFloat: TypeAlias = npt.NDArray[np.floating]

# --- Exact Rational Math Constants ---
# Defined by CIE 1976 for the Lab transformation.
# delta = 6/29 is the threshold where f_inv switches from cubic to linear.
LAB_DELTA: Final[float]   = 6.0 / 29.0
# delta^3, the threshold where f switches from cube root to linear.
LAB_EPSILON: Final[float] = 216.0 / 24389.0
# 3 * delta^2, slope of the linear segment of f_inv.
LAB_SLOPE: Final[float]   = 108.0 / 841.0
# 4/29 = 16/116, offset of the linear segment.
LAB_OFFSET: Final[float]  = 4.0 / 29.0

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

# --- sRGB Primaries (IEC 61966-2-1) ---
# CIE 1931 xy chromaticities of the red, green and blue primaries.
SRGB_PRIMARIES_XY: Final[Tuple[Tuple[float, float], ...]] = (
    (0.64, 0.33),
    (0.30, 0.60),
    (0.15, 0.06),
)


def rgb_to_xyz_matrix(primaries_xy: Tuple[Tuple[float, float], ...],
                      white: ArrayFloat) -> ArrayFloat:
    """
    Builds the linear RGB -> XYZ matrix for a set of primaries.

    Each primary's XYZ at Y = 1 forms a column of P.  The columns are then
    scaled by S = P^-1 @ white so that RGB (1, 1, 1) maps onto the white.

    Args:
        primaries_xy: ((xr, yr), (xg, yg), (xb, yb)) chromaticities.
        white: Reference white XYZ, shape (3,).

    Returns:
        3x3 matrix for column vectors (XYZ = M @ RGB).
    """
    xy = np.asarray(primaries_xy, dtype=np.float64)
    x, y = xy[:, 0], xy[:, 1]
    P = np.stack([x / y, np.ones(3), (1.0 - x - y) / y], axis=0)
    S = np.linalg.solve(P, np.asarray(white, dtype=np.float64))
    return P * S


# --- Linear sRGB <-> XYZ Matrices ---
# Derived once from the primaries and the literal D65 constant, so linear
# white lands on Illuminants.D65 to machine precision.
M_LINEAR_SRGB_TO_XYZ: Final[ArrayFloat] = rgb_to_xyz_matrix(
    SRGB_PRIMARIES_XY, Illuminants.D65.as_array()
)
M_XYZ_TO_LINEAR_SRGB: Final[ArrayFloat] = np.linalg.inv(M_LINEAR_SRGB_TO_XYZ)

_D65: Final[ArrayFloat] = Illuminants.D65.as_array()


# --- Runtime Configuration ---
# When True (default), batch transforms use fastmath=False kernels that
# preserve IEEE 754 semantics (inf / NaN propagation, no FP reassociation).
# Fast mode trades that for throughput on large, known-finite batches.
#
# Toggle at runtime via:
#     import prisma_colorengine as ce
#     ce.set_strict_ieee(False)  # fast mode
#     ce.set_strict_ieee(True)   # back to strict mode (default)
_STRICT_IEEE: bool = True

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between strict (default) and fast IEEE 754 batch kernels.

    Scalar value types are unaffected; they always use the strict kernels.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)
    logger.debug("Batch kernels switched to %s mode", "strict" if _STRICT_IEEE else "fast")

def is_strict_ieee() -> bool:
    """Returns True if batch transforms use the strict IEEE kernels."""
    return _STRICT_IEEE


# =============================================================================
# 1. ROBUST DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to contiguous (N, 3) float64.

    Args:
        func: The function to decorate.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns the first row of the result
        - If input is (N, 3), returns the full result
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr_in = np.ascontiguousarray(np.atleast_2d(arr), dtype=np.float64)

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(f"Expected shape (N, 3) or (3,), got {np.shape(arr)}")

        res = func(arr_in, *args, **kwargs)

        if np.ndim(arr) == 1:
            return res[0]
        return res
    return wrapper


# =============================================================================
# 2. SCALAR KERNELS (strict IEEE, shared with the value types)
# =============================================================================

@njit(cache=True)
def srgb_eotf(v: float) -> float:
    """
    sRGB EOTF (decoding): gamma-encoded channel -> linear light.

    Standard: IEC 61966-2-1
    """
    if v >= 0.04045:
        return ((v + 0.055) / 1.055) ** 2.4
    return v / 12.92

@njit(cache=True)
def srgb_oetf(v: float) -> float:
    """
    sRGB OETF (encoding): linear light -> gamma-encoded channel.

    Standard: IEC 61966-2-1
    """
    if v >= 0.0031308:
        return 1.055 * v ** (1.0 / 2.4) - 0.055
    return 12.92 * v

@njit(cache=True)
def lab_f(v: float) -> float:
    """
    Forward CIELAB companding f(t).

    Cube root above delta^3, linear segment below.  Negative and NaN inputs
    fall through to the linear segment.
    """
    if v > LAB_EPSILON:
        return np.cbrt(v)
    return v / LAB_SLOPE + LAB_OFFSET

@njit(cache=True)
def lab_f_inv(v: float) -> float:
    """Inverse CIELAB companding f^-1(t): cube above delta, linear below."""
    if v > LAB_DELTA:
        return v * v * v
    return LAB_SLOPE * (v - LAB_OFFSET)

@njit(cache=True)
def quantize8(v: float) -> int:
    """
    Quantizes a normalized channel to 8 bits.

    round(v * 255) with ties towards +inf, then ``& 0xFF``.  Out-of-range
    values wrap (2.0 -> 254, -1.0 -> 1).  NaN maps to 0, and results beyond
    the signed 32-bit range saturate before masking.
    """
    if np.isnan(v):
        return 0
    scaled = v * 255.0
    if scaled >= 2147483647.0:
        n = 2147483647
    elif scaled <= -2147483648.0:
        n = -2147483648
    else:
        fl = np.floor(scaled)
        n = int(fl)
        if scaled - fl >= 0.5:
            n += 1
    return n & 0xFF

@njit(cache=True)
def pack_rgb8(r: float, g: float, b: float) -> int:
    """Packs three normalized channels into a 24-bit 0xRRGGBB integer."""
    return (quantize8(r) << 16) | (quantize8(g) << 8) | quantize8(b)

@njit(cache=True)
def transform3(m: ArrayFloat, c0: float, c1: float, c2: float) -> Tuple[float, float, float]:
    """Applies a 3x3 matrix to a column vector."""
    return (
        m[0, 0] * c0 + m[0, 1] * c1 + m[0, 2] * c2,
        m[1, 0] * c0 + m[1, 1] * c1 + m[1, 2] * c2,
        m[2, 0] * c0 + m[2, 1] * c1 + m[2, 2] * c2,
    )

@njit(cache=True)
def lab_to_lch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """CIELAB -> CIELCh, hue in degrees [0, 360)."""
    C = np.hypot(a, b)
    h_deg = np.arctan2(b, a) * RAD2DEG
    if h_deg < 0.0:
        h_deg += 360.0
    return (L, C, h_deg)

@njit(cache=True)
def lch_to_lab(L: float, C: float, h_deg: float) -> Tuple[float, float, float]:
    """CIELCh -> CIELAB."""
    h_rad = h_deg * DEG2RAD
    return (L, C * np.cos(h_rad), C * np.sin(h_rad))


# =============================================================================
# 3. BATCH KERNELS
# =============================================================================
# Strict kernels loop over the scalar kernels above.  Fast kernels inline the
# same formulas so that fastmath=True actually applies to them.

@njit(cache=True)
def _srgb_to_linear_strict(srgb: ArrayFloat) -> ArrayFloat:
    """sRGB EOTF over a contiguous array — strict IEEE 754 variant."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()
    for i in range(srgb.size):
        out_flat[i] = srgb_eotf(srgb_flat[i])
    return out

@njit(cache=True, fastmath=True)
def _srgb_to_linear_fast(srgb: ArrayFloat) -> ArrayFloat:
    """sRGB EOTF over a contiguous array — fastmath variant."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()
    for i in range(srgb.size):
        v = srgb_flat[i]
        if v >= 0.04045:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
        else:
            out_flat[i] = v / 12.92
    return out

@njit(cache=True)
def _linear_to_srgb_strict(linear: ArrayFloat) -> ArrayFloat:
    """sRGB OETF over a contiguous array — strict IEEE 754 variant."""
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()
    for i in range(linear.size):
        out_flat[i] = srgb_oetf(linear_flat[i])
    return out

@njit(cache=True, fastmath=True)
def _linear_to_srgb_fast(linear: ArrayFloat) -> ArrayFloat:
    """sRGB OETF over a contiguous array — fastmath variant."""
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()
    for i in range(linear.size):
        v = linear_flat[i]
        if v >= 0.0031308:
            out_flat[i] = 1.055 * v ** (1.0 / 2.4) - 0.055
        else:
            out_flat[i] = 12.92 * v
    return out

@njit(cache=True)
def _apply_matrix_strict(rows: ArrayFloat, m: ArrayFloat) -> ArrayFloat:
    """Row-wise ``m @ row`` — strict IEEE 754 variant."""
    n = rows.shape[0]
    out = np.empty_like(rows)
    for i in range(n):
        out[i, 0], out[i, 1], out[i, 2] = transform3(m, rows[i, 0], rows[i, 1], rows[i, 2])
    return out

@njit(cache=True, fastmath=True, parallel=True)
def _apply_matrix_fast(rows: ArrayFloat, m: ArrayFloat) -> ArrayFloat:
    """Row-wise ``m @ row`` — fastmath, parallel variant."""
    n = rows.shape[0]
    out = np.empty_like(rows)
    for i in prange(n):
        c0, c1, c2 = rows[i, 0], rows[i, 1], rows[i, 2]
        out[i, 0] = m[0, 0] * c0 + m[0, 1] * c1 + m[0, 2] * c2
        out[i, 1] = m[1, 0] * c0 + m[1, 1] * c1 + m[1, 2] * c2
        out[i, 2] = m[2, 0] * c0 + m[2, 1] * c1 + m[2, 2] * c2
    return out

@njit(cache=True)
def _xyz_to_lab_strict(xyz: ArrayFloat, white: ArrayFloat) -> ArrayFloat:
    """XYZ -> CIELAB rows — strict IEEE 754 variant."""
    n = xyz.shape[0]
    out = np.empty_like(xyz)
    for i in range(n):
        fx = lab_f(xyz[i, 0] / white[0])
        fy = lab_f(xyz[i, 1] / white[1])
        fz = lab_f(xyz[i, 2] / white[2])
        out[i, 0] = 116.0 * fy - 16.0
        out[i, 1] = 500.0 * (fx - fy)
        out[i, 2] = 200.0 * (fy - fz)
    return out

@njit(cache=True, fastmath=True)
def _xyz_to_lab_fast(xyz: ArrayFloat, white: ArrayFloat) -> ArrayFloat:
    """XYZ -> CIELAB rows — fastmath variant."""
    n = xyz.shape[0]
    out = np.empty_like(xyz)
    f = np.empty(3, dtype=np.float64)
    for i in range(n):
        for c in range(3):
            v = xyz[i, c] / white[c]
            if v > LAB_EPSILON:
                f[c] = np.cbrt(v)
            else:
                f[c] = v / LAB_SLOPE + LAB_OFFSET
        out[i, 0] = 116.0 * f[1] - 16.0
        out[i, 1] = 500.0 * (f[0] - f[1])
        out[i, 2] = 200.0 * (f[1] - f[2])
    return out

@njit(cache=True)
def _lab_to_xyz_strict(lab: ArrayFloat, white: ArrayFloat) -> ArrayFloat:
    """CIELAB -> XYZ rows — strict IEEE 754 variant."""
    n = lab.shape[0]
    out = np.empty_like(lab)
    for i in range(n):
        lp = (lab[i, 0] + 16.0) / 116.0
        out[i, 0] = white[0] * lab_f_inv(lp + lab[i, 1] / 500.0)
        out[i, 1] = white[1] * lab_f_inv(lp)
        out[i, 2] = white[2] * lab_f_inv(lp - lab[i, 2] / 200.0)
    return out

@njit(cache=True, fastmath=True)
def _lab_to_xyz_fast(lab: ArrayFloat, white: ArrayFloat) -> ArrayFloat:
    """CIELAB -> XYZ rows — fastmath variant."""
    n = lab.shape[0]
    out = np.empty_like(lab)
    t = np.empty(3, dtype=np.float64)
    for i in range(n):
        lp = (lab[i, 0] + 16.0) / 116.0
        t[0] = lp + lab[i, 1] / 500.0
        t[1] = lp
        t[2] = lp - lab[i, 2] / 200.0
        for c in range(3):
            v = t[c]
            if v > LAB_DELTA:
                out[i, c] = white[c] * (v * v * v)
            else:
                out[i, c] = white[c] * (LAB_SLOPE * (v - LAB_OFFSET))
    return out

@njit(cache=True)
def _lab_to_lch_kernel(lab: ArrayFloat) -> ArrayFloat:
    """
    Low-level kernel for Lab -> LCh conversion.
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lab.shape[0]
    lch = np.empty_like(lab)
    for i in range(n):
        lch[i, 0], lch[i, 1], lch[i, 2] = lab_to_lch(lab[i, 0], lab[i, 1], lab[i, 2])
    return lch

@njit(cache=True)
def _lch_to_lab_kernel(lch: ArrayFloat) -> ArrayFloat:
    """
    Low-level kernel for LCh -> Lab conversion.
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lch.shape[0]
    lab = np.empty_like(lch)
    for i in range(n):
        lab[i, 0], lab[i, 1], lab[i, 2] = lch_to_lab(lch[i, 0], lch[i, 1], lch[i, 2])
    return lab

@njit(cache=True)
def _in_gamut_kernel(rgb: ArrayFloat) -> np.ndarray:
    """Row-wise gamut test.  Always strict: fastmath would fold away NaN checks."""
    n = rgb.shape[0]
    out = np.empty(n, dtype=np.bool_)
    for i in range(n):
        ok = True
        for c in range(3):
            v = rgb[i, c]
            if np.isnan(v) or v < 0.0 or v > 1.0:
                ok = False
        out[i] = ok
    return out

@njit(cache=True)
def _pack_rgb8_kernel(rgb: ArrayFloat) -> np.ndarray:
    """Row-wise 24-bit packing."""
    n = rgb.shape[0]
    out = np.empty(n, dtype=np.int64)
    for i in range(n):
        out[i] = pack_rgb8(rgb[i, 0], rgb[i, 1], rgb[i, 2])
    return out


# --- Kernel dispatchers ---
# These thin wrappers check the global _STRICT_IEEE flag and delegate
# to the appropriate compiled variant.

def _srgb_to_linear(srgb: ArrayFloat) -> ArrayFloat:
    """Dispatch sRGB EOTF to strict or fast kernel."""
    if _STRICT_IEEE:
        return _srgb_to_linear_strict(srgb)
    return _srgb_to_linear_fast(srgb)

def _linear_to_srgb(linear: ArrayFloat) -> ArrayFloat:
    """Dispatch sRGB OETF to strict or fast kernel."""
    if _STRICT_IEEE:
        return _linear_to_srgb_strict(linear)
    return _linear_to_srgb_fast(linear)

def _apply_matrix(rows: ArrayFloat, m: ArrayFloat) -> ArrayFloat:
    """Dispatch the 3x3 row transform to strict or fast kernel."""
    if _STRICT_IEEE:
        return _apply_matrix_strict(rows, m)
    return _apply_matrix_fast(rows, m)

def _xyz_to_lab(xyz: ArrayFloat) -> ArrayFloat:
    """Dispatch XYZ -> Lab to strict or fast kernel."""
    if _STRICT_IEEE:
        return _xyz_to_lab_strict(xyz, _D65)
    return _xyz_to_lab_fast(xyz, _D65)

def _lab_to_xyz(lab: ArrayFloat) -> ArrayFloat:
    """Dispatch Lab -> XYZ to strict or fast kernel."""
    if _STRICT_IEEE:
        return _lab_to_xyz_strict(lab, _D65)
    return _lab_to_xyz_fast(lab, _D65)


# =============================================================================
# 4. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for batch colour space transformations.

    Core transforms provide both a public ``@handle_shapes`` decorated API
    and an internal ``_raw`` fast-path that assumes pre-validated (N, 3)
    float64 input.  Convenience pipelines (e.g. ``srgb_to_lab``) call the
    ``_raw`` variants to avoid redundant shape checks at each stage.

    CIELAB is fixed to the D65 white point; there is no D50 variant.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3) float64)
    # =====================================================================

    @staticmethod
    def _srgb_to_xyz_raw(rgb_array: ArrayFloat) -> ArrayFloat:
        """Raw sRGB → XYZ.  *rgb_array* must be (N, 3) float64."""
        linear = _srgb_to_linear(rgb_array)
        return _apply_matrix(linear, M_LINEAR_SRGB_TO_XYZ)

    @staticmethod
    def _xyz_to_srgb_raw(xyz_array: ArrayFloat) -> ArrayFloat:
        """Raw XYZ → sRGB.  *xyz_array* must be (N, 3) float64."""
        linear = _apply_matrix(xyz_array, M_XYZ_TO_LINEAR_SRGB)
        return _linear_to_srgb(linear)

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def srgb_to_linear(rgb_array: ArrayFloat) -> ArrayFloat:
        """
        Decodes gamma-encoded sRGB to linear sRGB.

        No clipping is applied; values outside [0, 1] pass through the curve.

        Args:
            rgb_array: Input sRGB data, shape (N, 3) or (3,).

        Returns:
            Linear sRGB.
        """
        return _srgb_to_linear(rgb_array)

    @staticmethod
    @handle_shapes
    def linear_to_srgb(linear_array: ArrayFloat) -> ArrayFloat:
        """
        Encodes linear sRGB with the sRGB OETF.

        Args:
            linear_array: Input linear sRGB, shape (N, 3) or (3,).

        Returns:
            Gamma-encoded sRGB, unclipped.
        """
        return _linear_to_srgb(linear_array)

    @staticmethod
    @handle_shapes
    def linear_srgb_to_xyz(linear_array: ArrayFloat) -> ArrayFloat:
        """Converts linear sRGB to CIE XYZ (D65 relative)."""
        return _apply_matrix(linear_array, M_LINEAR_SRGB_TO_XYZ)

    @staticmethod
    @handle_shapes
    def xyz_to_linear_srgb(xyz_array: ArrayFloat) -> ArrayFloat:
        """Converts CIE XYZ (D65 relative) to linear sRGB."""
        return _apply_matrix(xyz_array, M_XYZ_TO_LINEAR_SRGB)

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ to CIELAB (L*a*b*) against D65.

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).

        Returns:
            Lab coordinates.
        """
        return _xyz_to_lab(xyz_array)

    @staticmethod
    @handle_shapes
    def lab_to_xyz(lab_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELAB (D65) to XYZ.

        Args:
            lab_array: Input Lab data, shape (N, 3) or (3,).

        Returns:
            XYZ coordinates.
        """
        return _lab_to_xyz(lab_array)

    @staticmethod
    @handle_shapes
    def lab_to_lch(lab_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELAB to CIELCh (Cylindrical representation).

        Returns:
            LCh coordinates (Lightness, Chroma, Hue in degrees).
        """
        return _lab_to_lch_kernel(lab_array)

    @staticmethod
    @handle_shapes
    def lch_to_lab(lch_array: ArrayFloat) -> ArrayFloat:
        """Converts CIELCh to CIELAB."""
        return _lch_to_lab_kernel(lch_array)

    @staticmethod
    @handle_shapes
    def srgb_to_lab(rgb_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion sRGB -> CIELAB."""
        xyz = ColorSpaceEngine._srgb_to_xyz_raw(rgb_array)
        return _xyz_to_lab(xyz)

    @staticmethod
    @handle_shapes
    def lab_to_srgb(lab_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion CIELAB -> sRGB (unclipped)."""
        xyz = _lab_to_xyz(lab_array)
        return ColorSpaceEngine._xyz_to_srgb_raw(xyz)

    @staticmethod
    @handle_shapes
    def in_gamut(rgb_array: ArrayFloat) -> np.ndarray:
        """
        Row-wise sRGB gamut test.

        Returns:
            Bool array of shape (N,), or a single bool for (3,) input.
            A row is in gamut when no channel is NaN and all lie in [0, 1].
        """
        return _in_gamut_kernel(rgb_array)

    @staticmethod
    @handle_shapes
    def pack_rgb8(rgb_array: ArrayFloat) -> np.ndarray:
        """
        Packs sRGB rows into 24-bit 0xRRGGBB integers.

        Uses the same wrapping quantizer as ``Srgb.to_packed24``.

        Returns:
            int64 array of shape (N,), or a single int for (3,) input.
        """
        return _pack_rgb8_kernel(rgb_array)

    @staticmethod
    def unpack_rgb8(packed: Any) -> ArrayFloat:
        """
        Unpacks 24-bit 0xRRGGBB integers into normalized sRGB rows.

        Args:
            packed: Integer or integer array of shape (N,).

        Returns:
            sRGB of shape (N, 3), or (3,) for a scalar input.
        """
        arr = np.asarray(packed, dtype=np.int64)
        if arr.ndim > 1:
            raise ValueError(f"Expected a scalar or shape (N,), got {arr.shape}")
        flat = np.atleast_1d(arr)
        out = np.empty((flat.shape[0], 3), dtype=np.float64)
        out[:, 0] = (flat >> 16) & 0xFF
        out[:, 1] = (flat >> 8) & 0xFF
        out[:, 2] = flat & 0xFF
        out /= 255.0
        if arr.ndim == 0:
            return out[0]
        return out
