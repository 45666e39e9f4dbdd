# -*- coding: utf-8 -*-
"""
Tincture: Device-independent color spaces and chromatic adaptation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_converter.py — Color space conversion and white-point adaptation.

Layout:
  1.  Exact rational CIE constants and the strict-IEEE runtime toggle.
  2.  Numba-compiled CIELAB transfer kernels (fast and strict variants).
  3.  Errors and warnings raised by the converter.
  4.  Pure conversion functions, grouped by conversion pair.  Each one
      works against an explicit reference white; none of them adapt.
  5.  ColorConverter, an immutable orchestrator that routes any supported
      color through XYZ and applies chromatic adaptation whenever the
      source and destination whites differ.

Every XYZ value that is not tagged with a white point (CieXyz, CieXyy,
Lms) is taken to be relative to ``ColorConverter.white_point``.
"""

from __future__ import annotations

import sys
import warnings
from typing import Any, Callable, Dict, Final, Optional, Tuple, Type, Union

import numpy as np
from numba import njit

from tincture_adaptation import (
    AdaptationMethod,
    ChromaticAdaptation,
    LmsAdaptationMatrix,
    VonKriesChromaticAdaptation,
)
from tincture_illuminants import Illuminants
from tincture_spaces import (
    CieLab,
    CieLch,
    CieLuv,
    CieXyy,
    CieXyz,
    HunterLab,
    Lms,
    PerceptualColor,
)
from tincture_tristimulus import ArrayFloat, ColorVector

__all__ = [
    # --- Constants ---
    "LAB_EPSILON",
    "LAB_KAPPA",

    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Errors ---
    "MissingArgumentError",
    "AdaptationNotConfiguredError",
    "WhitePointMismatchWarning",

    # --- Pair conversions ---
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
    "xyz_to_luv",
    "luv_to_xyz",
    "xyz_to_xyy",
    "xyy_to_xyz",
    "xyz_to_hunter_lab",
    "hunter_lab_to_xyz",
    "xyz_to_lms",
    "lms_to_xyz",

    # --- Classes ---
    "ColorConverter",
]


# =============================================================================
# 1. CONSTANTS & RUNTIME CONFIGURATION
# =============================================================================

# Defined by CIE 1976 for the Lab transformation.
# delta = 6/29 is the threshold where the function switches from cubic to linear.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA  # ~0.008856
LAB_KAPPA: Final[float] = (116.0 * 29.0 * 29.0) / (3.0 * 6.0 * 6.0)  # ~903.296

# Hunter Lab scale factors for illuminant C, from which Ka/Kb of other
# whites are derived.
_HUNTER_KA_C: Final[float] = 175.0
_HUNTER_KB_C: Final[float] = 70.0

# When True, the Numba kernels use fastmath=False variants that preserve
# strict IEEE 754 semantics (inf / NaN propagation, no FP reassociation).
_STRICT_IEEE: bool = False


def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)


def is_strict_ieee() -> bool:
    """Whether the strict IEEE 754 kernels are active."""
    return _STRICT_IEEE


# =============================================================================
# 2. CIELAB TRANSFER KERNELS (Numba)
# =============================================================================
# NOTE: fastmath=True allows reassociation and relaxed IEEE compliance.

@njit(cache=True, fastmath=True)
def _xyz_to_lab_f(t: ArrayFloat) -> ArrayFloat:
    """
    Non-linear transfer function f(t) for CIELAB.

    Cube root above LAB_EPSILON, linear segment below it so the slope at
    zero stays finite.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0 / 3.0)
        else:
            out_flat[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out


@njit(cache=True, fastmath=True)
def _lab_to_xyz_f_inv(t: ArrayFloat) -> ArrayFloat:
    """
    Inverse of f(t).

    Uses the multiplication form (116*t - 16)/k to minimize division error
    near the delta threshold.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > _LAB_DELTA:
            out_flat[i] = v * v * v
        else:
            out_flat[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out


@njit(cache=True, fastmath=False)
def _xyz_to_lab_f_strict(t: ArrayFloat) -> ArrayFloat:
    """Lab f(t), strict IEEE 754 variant."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0 / 3.0)
        else:
            out_flat[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out


@njit(cache=True, fastmath=False)
def _lab_to_xyz_f_inv_strict(t: ArrayFloat) -> ArrayFloat:
    """Lab f_inv(t), strict IEEE 754 variant."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > _LAB_DELTA:
            out_flat[i] = v * v * v
        else:
            out_flat[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out


def _lab_f(t: ArrayFloat) -> ArrayFloat:
    """Dispatch Lab f(t) to fast or strict kernel."""
    t = np.ascontiguousarray(t, dtype=np.float64)
    if _STRICT_IEEE:
        return _xyz_to_lab_f_strict(t)
    return _xyz_to_lab_f(t)


def _lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    """Dispatch Lab f_inv(t) to fast or strict kernel."""
    t = np.ascontiguousarray(t, dtype=np.float64)
    if _STRICT_IEEE:
        return _lab_to_xyz_f_inv_strict(t)
    return _lab_to_xyz_f_inv(t)


# =============================================================================
# 3. ERRORS & WARNINGS
# =============================================================================

class MissingArgumentError(ValueError):
    """A required argument was None."""


class AdaptationNotConfiguredError(RuntimeError):
    """Chromatic adaptation was requested from a converter built without a method."""


class WhitePointMismatchWarning(UserWarning):
    """A conversion crossed white points while adaptation was disabled."""


def _not_none(value: Any, name: str) -> None:
    if value is None:
        raise MissingArgumentError(f"{name} must not be None.")


def _require_type(value: Any, expected: Type[Any], name: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"{name} must be {expected.__name__}, got {type(value).__name__}"
        )


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside this module, for ``warnings.warn``."""
    frame = sys._getframe(1)
    level = 1
    while frame is not None and frame.f_globals.get("__name__") == __name__:
        frame = frame.f_back
        level += 1
    return level


def _warn_white_mismatch(source_white: CieXyz, dest_white: CieXyz) -> None:
    warnings.warn(
        f"Converting from white point {source_white} to {dest_white} "
        "without chromatic adaptation; the result is not adapted.",
        WhitePointMismatchWarning,
        stacklevel=_caller_stacklevel(),
    )


# =============================================================================
# 4. PAIR CONVERSIONS
# =============================================================================

# --- CieXyz <-> CieLab ---

def xyz_to_lab(color: CieXyz, white_point: CieXyz) -> CieLab:
    """XYZ -> L*a*b* relative to ``white_point`` (no adaptation)."""
    f = _lab_f(color.vector / white_point.vector)
    l = 116.0 * f[1] - 16.0  # noqa: E741
    a = 500.0 * (f[0] - f[1])
    b = 200.0 * (f[1] - f[2])
    return CieLab(float(l), float(a), float(b), white_point)


def lab_to_xyz(color: CieLab) -> CieXyz:
    """L*a*b* -> XYZ relative to the color's own white."""
    fy = (color.l + 16.0) / 116.0
    fx = color.a / 500.0 + fy
    fz = fy - color.b / 200.0
    xyz = _lab_f_inv(np.array([fx, fy, fz])) * color.white_point.vector
    return CieXyz.from_vector(xyz)


# --- CieLab <-> CieLch ---

def lab_to_lch(color: CieLab) -> CieLch:
    """Cartesian a*, b* -> chroma and hue angle in degrees, [0, 360)."""
    c = float(np.hypot(color.a, color.b))
    h = float(np.degrees(np.arctan2(color.b, color.a)))
    if h < 0.0:
        h += 360.0
    if h >= 360.0:
        h -= 360.0
    return CieLch(color.l, c, h, color.white_point)


def lch_to_lab(color: CieLch) -> CieLab:
    """Polar -> cartesian."""
    rad = np.radians(color.h)
    a = color.c * float(np.cos(rad))
    b = color.c * float(np.sin(rad))
    return CieLab(color.l, a, b, color.white_point)


# --- CieXyz <-> CieLuv ---

def _uv_prime(xyz: ArrayFloat) -> Tuple[float, float]:
    """
    CIE 1976 u', v' chromaticity.  Zero denominators (black) map to 0.

        u' = 4X / (X + 15Y + 3Z)
        v' = 9Y / (X + 15Y + 3Z)
    """
    x, y, z = xyz.tolist()
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0.0:
        return 0.0, 0.0
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv(color: CieXyz, white_point: CieXyz) -> CieLuv:
    """XYZ -> L*u*v* relative to ``white_point`` (no adaptation)."""
    up, vp = _uv_prime(color.vector)
    upr, vpr = _uv_prime(white_point.vector)

    with np.errstate(divide="ignore", invalid="ignore"):
        yr = np.float64(color.y) / np.float64(white_point.y)
    l = float(116.0 * _lab_f(np.array([yr]))[0] - 16.0)  # noqa: E741

    u = 13.0 * l * (up - upr)
    v = 13.0 * l * (vp - vpr)
    return CieLuv(l, u, v, white_point)


def luv_to_xyz(color: CieLuv) -> CieXyz:
    """L*u*v* -> XYZ relative to the color's own white.  L == 0 is black."""
    l, u, v = color.vector.tolist()  # noqa: E741
    if l == 0.0:
        return CieXyz(0.0, 0.0, 0.0)

    white = color.white_point
    u0, v0 = _uv_prime(white.vector)
    y = float(_lab_f_inv(np.array([(l + 16.0) / 116.0]))[0]) * white.y

    with np.errstate(divide="ignore", invalid="ignore"):
        l64 = np.float64(l)
        a = (52.0 * l64 / (u + 13.0 * l64 * u0) - 1.0) / 3.0
        b = -5.0 * y
        c = -1.0 / 3.0
        d = y * (39.0 * l64 / (v + 13.0 * l64 * v0) - 5.0)
        x = (d - b) / (a - c)
        z = x * a + b

    xyz = np.array([x, y, z], dtype=np.float64)
    return CieXyz.from_vector(np.where(np.isnan(xyz), 0.0, xyz))


# --- CieXyz <-> CieXyy ---

def xyz_to_xyy(color: CieXyz) -> CieXyy:
    """XYZ -> xyY.  A zero sum (black) yields chromaticity (0, 0)."""
    x, y, z = color.vector.tolist()
    total = x + y + z
    if total == 0.0:
        return CieXyy(0.0, 0.0, y)
    return CieXyy(x / total, y / total, y)


def xyy_to_xyz(color: CieXyy) -> CieXyz:
    """xyY -> XYZ.  y == 0 yields (0, Y, 0)."""
    x, y, yl = color.vector.tolist()
    if y == 0.0:
        return CieXyz(0.0, yl, 0.0)
    factor = yl / y
    return CieXyz(x * factor, yl, (1.0 - x - y) * factor)


# --- CieXyz <-> HunterLab ---

def _hunter_k(white_point: CieXyz) -> Tuple[float, float]:
    """Ka and Kb coefficients for a reference white (XYZ scaled to Y = 1)."""
    if white_point == Illuminants.C:
        return _HUNTER_KA_C, _HUNTER_KB_C
    ka = 100.0 * (_HUNTER_KA_C / 198.04) * (white_point.x + white_point.y)
    kb = 100.0 * (_HUNTER_KB_C / 218.11) * (white_point.y + white_point.z)
    return ka, kb


def xyz_to_hunter_lab(color: CieXyz, white_point: CieXyz) -> HunterLab:
    """XYZ -> Hunter Lab relative to ``white_point`` (no adaptation)."""
    ka, kb = _hunter_k(white_point)
    xr, yr, zr = (color.vector / white_point.vector).tolist()

    with np.errstate(invalid="ignore"):
        sqrt_yr = float(np.sqrt(yr))
    l = 100.0 * sqrt_yr  # noqa: E741
    if sqrt_yr == 0.0:
        return HunterLab(l, 0.0, 0.0, white_point)
    a = ka * ((xr - yr) / sqrt_yr)
    b = kb * ((yr - zr) / sqrt_yr)
    return HunterLab(l, a, b, white_point)


def hunter_lab_to_xyz(color: HunterLab) -> CieXyz:
    """Hunter Lab -> XYZ relative to the color's own white."""
    white = color.white_point
    ka, kb = _hunter_k(white)
    l, a, b = color.vector.tolist()  # noqa: E741

    yr = (l / 100.0) ** 2
    sqrt_yr = abs(l) / 100.0
    x = ((a / ka) * sqrt_yr + yr) * white.x
    y = yr * white.y
    z = ((b / kb) * sqrt_yr - yr) * -white.z
    return CieXyz(x, y, z)


# --- CieXyz <-> Lms ---

def xyz_to_lms(color: CieXyz, matrix: ArrayFloat = LmsAdaptationMatrix.BRADFORD) -> Lms:
    """XYZ -> cone response using the given XYZ -> LMS matrix."""
    return Lms.from_vector(np.dot(matrix, color.vector))


def lms_to_xyz(color: Lms, inverse_matrix: ArrayFloat) -> CieXyz:
    """Cone response -> XYZ.  ``inverse_matrix`` is the LMS -> XYZ matrix."""
    return CieXyz.from_vector(np.dot(inverse_matrix, color.vector))


# =============================================================================
# 5. COLOR CONVERTER
# =============================================================================

AdaptationLike = Union[ChromaticAdaptation, AdaptationMethod, str, None]


def _resolve_adaptation(value: AdaptationLike) -> Optional[ChromaticAdaptation]:
    if value is None:
        return None
    if isinstance(value, (AdaptationMethod, str)):
        return VonKriesChromaticAdaptation.from_method(value)
    if isinstance(value, ChromaticAdaptation):
        return value
    raise TypeError(
        f"chromatic_adaptation: unsupported type {type(value).__name__}"
    )


def _resolve_white(value: Optional[CieXyz], default: CieXyz, name: str) -> CieXyz:
    if value is None:
        return default
    _require_type(value, CieXyz, name)
    return value


class ColorConverter:
    """
    Converts between color spaces, adapting reference whites on the way.

    The converter is configured once and immutable afterwards, so a single
    instance can be shared between threads.

    Args:
        white_point: White that plain XYZ (and xyY, LMS) values are relative
            to.  Defaults to D65.
        chromatic_adaptation: A ChromaticAdaptation, an AdaptationMethod or
            its string value.  ``None`` disables adaptation; ``adapt*``
            then raise AdaptationNotConfiguredError and conversions across
            differing whites emit WhitePointMismatchWarning.
        lab_white_point: Target white of ``to_cie_lab``.  Defaults to D50.
        lch_white_point: Target white of ``to_cie_lch``.  Defaults to D50.
        luv_white_point: Target white of ``to_cie_luv``.  Defaults to D65.
        hunter_lab_white_point: Target white of ``to_hunter_lab``.
            Defaults to C.
        lms_adaptation_matrix: XYZ -> LMS matrix for ``to_lms``.  Defaults
            to Bradford.
    """

    DEFAULT_WHITE_POINT: Final[CieXyz] = Illuminants.D65

    __slots__ = (
        "_white_point",
        "_chromatic_adaptation",
        "_lab_white_point",
        "_lch_white_point",
        "_luv_white_point",
        "_hunter_lab_white_point",
        "_lms_matrix",
        "_lms_matrix_inv",
    )

    def __init__(
        self,
        white_point: Optional[CieXyz] = None,
        chromatic_adaptation: AdaptationLike = None,
        *,
        lab_white_point: Optional[CieXyz] = None,
        lch_white_point: Optional[CieXyz] = None,
        luv_white_point: Optional[CieXyz] = None,
        hunter_lab_white_point: Optional[CieXyz] = None,
        lms_adaptation_matrix: Optional[ArrayFloat] = None,
    ) -> None:
        _set = object.__setattr__
        _set(self, "_white_point", _resolve_white(
            white_point, self.DEFAULT_WHITE_POINT, "white_point"))
        _set(self, "_chromatic_adaptation", _resolve_adaptation(chromatic_adaptation))
        _set(self, "_lab_white_point", _resolve_white(
            lab_white_point, CieLab.DEFAULT_WHITE_POINT, "lab_white_point"))
        _set(self, "_lch_white_point", _resolve_white(
            lch_white_point, CieLch.DEFAULT_WHITE_POINT, "lch_white_point"))
        _set(self, "_luv_white_point", _resolve_white(
            luv_white_point, CieLuv.DEFAULT_WHITE_POINT, "luv_white_point"))
        _set(self, "_hunter_lab_white_point", _resolve_white(
            hunter_lab_white_point, HunterLab.DEFAULT_WHITE_POINT, "hunter_lab_white_point"))

        if lms_adaptation_matrix is None:
            lms_adaptation_matrix = LmsAdaptationMatrix.BRADFORD
        lms = np.array(lms_adaptation_matrix, dtype=np.float64)
        if lms.shape != (3, 3):
            raise ValueError(f"lms_adaptation_matrix must be 3x3, got shape {lms.shape}")
        try:
            lms_inv = np.linalg.inv(lms)
        except np.linalg.LinAlgError as exc:
            raise ValueError("lms_adaptation_matrix is singular.") from exc
        lms.flags.writeable = False
        lms_inv.flags.writeable = False
        _set(self, "_lms_matrix", lms)
        _set(self, "_lms_matrix_inv", lms_inv)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Configuration (read-only) ---

    @property
    def white_point(self) -> CieXyz:
        """Target white of XYZ results and the adaptation destination of ``adapt``."""
        return self._white_point

    @property
    def chromatic_adaptation(self) -> Optional[ChromaticAdaptation]:
        return self._chromatic_adaptation

    @property
    def is_chromatic_adaptation_performed(self) -> bool:
        """False when the converter was built without an adaptation method."""
        return self._chromatic_adaptation is not None

    @property
    def lab_white_point(self) -> CieXyz:
        return self._lab_white_point

    @property
    def lch_white_point(self) -> CieXyz:
        return self._lch_white_point

    @property
    def luv_white_point(self) -> CieXyz:
        return self._luv_white_point

    @property
    def hunter_lab_white_point(self) -> CieXyz:
        return self._hunter_lab_white_point

    @property
    def lms_adaptation_matrix(self) -> ArrayFloat:
        return self._lms_matrix

    # --- Internal routing ---

    def _require_adaptation(self) -> ChromaticAdaptation:
        if self._chromatic_adaptation is None:
            raise AdaptationNotConfiguredError(
                "Cannot perform chromatic adaptation, provide a chromatic "
                "adaptation method and white point."
            )
        return self._chromatic_adaptation

    def _adapt_xyz(self, color: CieXyz, source_white: CieXyz, dest_white: CieXyz) -> CieXyz:
        if source_white == dest_white:
            return color
        if self._chromatic_adaptation is None:
            _warn_white_mismatch(source_white, dest_white)
            return color
        return self._chromatic_adaptation.transform(color, source_white, dest_white)

    def _xyz_and_white(self, color: ColorVector) -> Tuple[CieXyz, CieXyz]:
        """Unadapted XYZ of ``color`` plus the white it is relative to."""
        if isinstance(color, CieXyz):
            return color, self._white_point
        if isinstance(color, CieXyy):
            return xyy_to_xyz(color), self._white_point
        if isinstance(color, Lms):
            return lms_to_xyz(color, self._lms_matrix_inv), self._white_point
        if isinstance(color, CieLch):
            color = lch_to_lab(color)
        if isinstance(color, CieLab):
            return lab_to_xyz(color), color.white_point
        if isinstance(color, CieLuv):
            return luv_to_xyz(color), color.white_point
        if isinstance(color, HunterLab):
            return hunter_lab_to_xyz(color), color.white_point
        raise TypeError(f"Unsupported color type: {type(color).__name__}")

    def _perceptual_on(
        self,
        color: ColorVector,
        target_type: Type[PerceptualColor],
        target_white: CieXyz,
        from_xyz: Callable[[CieXyz, CieXyz], Any],
    ) -> Any:
        """
        Express ``color`` as ``target_type`` on ``target_white``.

        A color already of ``target_type`` is returned untouched when it is
        on the target white.  With adaptation disabled it is returned
        untouched on its own white, with a WhitePointMismatchWarning.
        """
        if isinstance(color, target_type):
            if color.white_point == target_white:
                return color
            if self._chromatic_adaptation is None:
                _warn_white_mismatch(color.white_point, target_white)
                return color
        xyz, source_white = self._xyz_and_white(color)
        return from_xyz(self._adapt_xyz(xyz, source_white, target_white), target_white)

    def _lab_on(self, color: ColorVector, target_white: CieXyz) -> CieLab:
        if isinstance(color, CieLch):
            color = lch_to_lab(color)
        return self._perceptual_on(color, CieLab, target_white, xyz_to_lab)

    # --- Adaptation ---

    def adapt(self, color: CieXyz, source_white_point: CieXyz) -> CieXyz:
        """
        Performs chromatic adaptation of given XYZ color.

        Target white point is ``self.white_point``.

        Raises:
            MissingArgumentError: If either argument is None.
            TypeError: If either argument is not CieXyz.
            AdaptationNotConfiguredError: If no adaptation method is set.
        """
        _not_none(color, "color")
        _not_none(source_white_point, "source_white_point")
        _require_type(color, CieXyz, "color")
        _require_type(source_white_point, CieXyz, "source_white_point")
        adaptation = self._require_adaptation()
        return adaptation.transform(color, source_white_point, self._white_point)

    def adapt_lab(self, color: CieLab) -> CieLab:
        """Re-express a CieLab on ``lab_white_point``."""
        _not_none(color, "color")
        _require_type(color, CieLab, "color")
        self._require_adaptation()
        return self._lab_on(color, self._lab_white_point)

    def adapt_lch(self, color: CieLch) -> CieLch:
        """Re-express a CieLch on ``lch_white_point``."""
        _not_none(color, "color")
        _require_type(color, CieLch, "color")
        self._require_adaptation()
        if color.white_point == self._lch_white_point:
            return color
        return lab_to_lch(self._lab_on(color, self._lch_white_point))

    def adapt_luv(self, color: CieLuv) -> CieLuv:
        """Re-express a CieLuv on ``luv_white_point``."""
        _not_none(color, "color")
        _require_type(color, CieLuv, "color")
        self._require_adaptation()
        return self._perceptual_on(color, CieLuv, self._luv_white_point, xyz_to_luv)

    def adapt_hunter_lab(self, color: HunterLab) -> HunterLab:
        """Re-express a HunterLab on ``hunter_lab_white_point``."""
        _not_none(color, "color")
        _require_type(color, HunterLab, "color")
        self._require_adaptation()
        return self._perceptual_on(
            color, HunterLab, self._hunter_lab_white_point, xyz_to_hunter_lab)

    # --- Conversions ---

    def to_cie_xyz(self, color: ColorVector) -> CieXyz:
        """Any supported color -> XYZ relative to ``white_point``."""
        _not_none(color, "color")
        xyz, source_white = self._xyz_and_white(color)
        return self._adapt_xyz(xyz, source_white, self._white_point)

    def to_cie_lab(self, color: ColorVector) -> CieLab:
        """Any supported color -> CieLab on ``lab_white_point``."""
        _not_none(color, "color")
        return self._lab_on(color, self._lab_white_point)

    def to_cie_lch(self, color: ColorVector) -> CieLch:
        """Any supported color -> CieLch on ``lch_white_point``."""
        _not_none(color, "color")
        if isinstance(color, CieLch):
            if color.white_point == self._lch_white_point:
                return color
            if self._chromatic_adaptation is None:
                _warn_white_mismatch(color.white_point, self._lch_white_point)
                return color
        return lab_to_lch(self._lab_on(color, self._lch_white_point))

    def to_cie_luv(self, color: ColorVector) -> CieLuv:
        """Any supported color -> CieLuv on ``luv_white_point``."""
        _not_none(color, "color")
        return self._perceptual_on(color, CieLuv, self._luv_white_point, xyz_to_luv)

    def to_hunter_lab(self, color: ColorVector) -> HunterLab:
        """Any supported color -> HunterLab on ``hunter_lab_white_point``."""
        _not_none(color, "color")
        return self._perceptual_on(
            color, HunterLab, self._hunter_lab_white_point, xyz_to_hunter_lab)

    def to_cie_xyy(self, color: ColorVector) -> CieXyy:
        """Any supported color -> xyY relative to ``white_point``."""
        _not_none(color, "color")
        if isinstance(color, CieXyy):
            return color
        return xyz_to_xyy(self.to_cie_xyz(color))

    def to_lms(self, color: ColorVector) -> Lms:
        """Any supported color -> cone response via ``lms_adaptation_matrix``."""
        _not_none(color, "color")
        if isinstance(color, Lms):
            return color
        return xyz_to_lms(self.to_cie_xyz(color), self._lms_matrix)

    def convert(self, color: ColorVector, target_type: Type[ColorVector]) -> Any:
        """
        Generic entry point: ``convert(lab, CieLuv)`` == ``to_cie_luv(lab)``.

        Raises:
            TypeError: If ``target_type`` is not a supported color space.
        """
        method = _CONVERSIONS.get(target_type)
        if method is None:
            raise TypeError(f"Unsupported target color type: {target_type!r}")
        return method(self, color)

    def __repr__(self) -> str:
        return (
            f"ColorConverter(white_point={self._white_point!r}, "
            f"chromatic_adaptation={self._chromatic_adaptation!r})"
        )


_CONVERSIONS: Final[Dict[type, Callable[[ColorConverter, ColorVector], Any]]] = {
    CieXyz: ColorConverter.to_cie_xyz,
    CieLab: ColorConverter.to_cie_lab,
    CieLch: ColorConverter.to_cie_lch,
    CieLuv: ColorConverter.to_cie_luv,
    HunterLab: ColorConverter.to_hunter_lab,
    CieXyy: ColorConverter.to_cie_xyy,
    Lms: ColorConverter.to_lms,
}
