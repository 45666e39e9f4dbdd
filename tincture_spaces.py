# -*- coding: utf-8 -*-
"""
Tincture: Device-independent color spaces and chromatic adaptation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_spaces.py — Immutable color space value types.

Perceptual spaces (CieLab, CieLch, CieLuv, HunterLab) are defined relative
to a reference white and carry it as first-class data.  CieXyy and Lms are
plain coordinate triples like CieXyz.

Equality contract for perceptual spaces:
    ``==`` and ``hash`` look at the three coordinates only.  Two CieLab
    values with identical L, a, b but different reference whites compare
    equal even though they denote different absolute colors.  Use
    ``same_color_as`` when the white point must take part in the check.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Tuple

from tincture_illuminants import Illuminants
from tincture_tristimulus import (
    CieXyz,
    ColorVector,
    VectorLike,
    as_vector,
)

__all__ = [
    "CieXyz",
    "PerceptualColor",
    "CieLab",
    "CieLch",
    "CieLuv",
    "HunterLab",
    "CieXyy",
    "Lms",
]


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  White-point carrying base
# ═══════════════════════════════════════════════════════════════════════════════
class PerceptualColor(ColorVector):
    """
    Color value defined relative to a reference white.

    ``white_point=None`` selects ``DEFAULT_WHITE_POINT`` of the concrete
    class.  The white point is excluded from equality and hashing.
    """

    __slots__ = ("_white_point",)

    DEFAULT_WHITE_POINT: ClassVar[CieXyz] = Illuminants.D50

    def __init__(
        self,
        c0: float,
        c1: float,
        c2: float,
        white_point: Optional[CieXyz] = None,
    ) -> None:
        super().__init__(c0, c1, c2)
        if white_point is None:
            white_point = self.DEFAULT_WHITE_POINT
        elif not isinstance(white_point, CieXyz):
            raise TypeError(
                f"white_point must be CieXyz, got {type(white_point).__name__}"
            )
        object.__setattr__(self, "_white_point", white_point)

    @classmethod
    def from_vector(cls, vector: VectorLike, white_point: Optional[CieXyz] = None) -> Any:
        """Build from any 3-element sequence or array."""
        c0, c1, c2 = as_vector(vector).tolist()
        return cls(c0, c1, c2, white_point)

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (*self._vector.tolist(), self._white_point))

    @property
    def white_point(self) -> CieXyz:
        """Reference white this color is expressed against."""
        return self._white_point

    def same_color_as(self, other: PerceptualColor) -> bool:
        """Exact equality on coordinates *and* reference white."""
        return self == other and self._white_point == other._white_point

    def __repr__(self) -> str:
        args = ", ".join(
            f"{axis.lower()}={v!r}" for axis, v in zip(self._AXES, self._vector.tolist())
        )
        return f"{type(self).__name__}({args}, white_point={self._white_point!r})"


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  CIE L*a*b* and its polar form
# ═══════════════════════════════════════════════════════════════════════════════
class CieLab(PerceptualColor):
    """
    CIE L*a*b* 1976.

    L is nominally 0 (black) to 100 (diffuse white) but is not clamped;
    specular highlights and intermediate results may exceed it.  a and b
    are unbounded, conventionally within about [-100, 100].
    """

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("L", "A", "B")
    DEFAULT_WHITE_POINT: ClassVar[CieXyz] = Illuminants.D50

    @property
    def l(self) -> float:  # noqa: E743
        """Lightness."""
        return float(self._vector[0])

    @property
    def a(self) -> float:
        """Green (negative) to magenta (positive)."""
        return float(self._vector[1])

    @property
    def b(self) -> float:
        """Blue (negative) to yellow (positive)."""
        return float(self._vector[2])


class CieLch(PerceptualColor):
    """CIE LCh(ab): cylindrical representation of CieLab, hue in degrees."""

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("L", "C", "H")
    DEFAULT_WHITE_POINT: ClassVar[CieXyz] = Illuminants.D50

    @property
    def l(self) -> float:  # noqa: E743
        return float(self._vector[0])

    @property
    def c(self) -> float:
        """Chroma."""
        return float(self._vector[1])

    @property
    def h(self) -> float:
        """Hue angle in degrees, [0, 360) when produced by a conversion."""
        return float(self._vector[2])


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  CIE L*u*v* and Hunter Lab
# ═══════════════════════════════════════════════════════════════════════════════
class CieLuv(PerceptualColor):
    """CIE L*u*v* 1976, defaulting to the D65 white."""

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("L", "U", "V")
    DEFAULT_WHITE_POINT: ClassVar[CieXyz] = Illuminants.D65

    @property
    def l(self) -> float:  # noqa: E743
        return float(self._vector[0])

    @property
    def u(self) -> float:
        return float(self._vector[1])

    @property
    def v(self) -> float:
        return float(self._vector[2])


class HunterLab(PerceptualColor):
    """Hunter 1948 L, a, b.  Defaults to illuminant C like the original scale."""

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("L", "A", "B")
    DEFAULT_WHITE_POINT: ClassVar[CieXyz] = Illuminants.C

    @property
    def l(self) -> float:  # noqa: E743
        return float(self._vector[0])

    @property
    def a(self) -> float:
        return float(self._vector[1])

    @property
    def b(self) -> float:
        return float(self._vector[2])


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  White-point free spaces
# ═══════════════════════════════════════════════════════════════════════════════
class CieXyy(ColorVector):
    """CIE xyY: chromaticity (x, y) plus luminance Y."""

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("X", "Y", "Yl")

    def __init__(self, x: float, y: float, yl: float) -> None:
        super().__init__(x, y, yl)

    @classmethod
    def from_vector(cls, vector: VectorLike) -> CieXyy:
        x, y, yl = as_vector(vector).tolist()
        return cls(x, y, yl)

    @property
    def x(self) -> float:
        """Chromaticity x."""
        return float(self._vector[0])

    @property
    def y(self) -> float:
        """Chromaticity y."""
        return float(self._vector[1])

    @property
    def yl(self) -> float:
        """Luminance Y."""
        return float(self._vector[2])


class Lms(ColorVector):
    """Long, medium, short cone responses."""

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("L", "M", "S")

    def __init__(self, l: float, m: float, s: float) -> None:  # noqa: E741
        super().__init__(l, m, s)

    @classmethod
    def from_vector(cls, vector: VectorLike) -> Lms:
        l, m, s = as_vector(vector).tolist()  # noqa: E741
        return cls(l, m, s)

    @property
    def l(self) -> float:  # noqa: E743
        return float(self._vector[0])

    @property
    def m(self) -> float:
        return float(self._vector[1])

    @property
    def s(self) -> float:
        return float(self._vector[2])


CieLab.EMPTY = CieLab(0.0, 0.0, 0.0)
CieLch.EMPTY = CieLch(0.0, 0.0, 0.0)
CieLuv.EMPTY = CieLuv(0.0, 0.0, 0.0)
HunterLab.EMPTY = HunterLab(0.0, 0.0, 0.0)
CieXyy.EMPTY = CieXyy(0.0, 0.0, 0.0)
Lms.EMPTY = Lms(0.0, 0.0, 0.0)
