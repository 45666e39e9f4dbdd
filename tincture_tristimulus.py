# -*- coding: utf-8 -*-
"""
Tincture: Device-independent color spaces and chromatic adaptation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_tristimulus.py — Immutable color vector base and CIE XYZ.

Every color value in Tincture is a thin, immutable wrapper around a
read-only float64 numpy array of length 3.  The shared behaviour
(equality, tolerance checks, hashing, the fixed textual form) lives in
ColorVector; concrete spaces only declare their axis labels and accessors.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, ClassVar, Final, Sequence, Tuple, TypeAlias, Union

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "ArrayFloat",
    "ColorVector",
    "CieXyz",
    "as_vector",
    "format_component",
]

ArrayFloat: TypeAlias = NDArray[np.floating]
VectorLike: TypeAlias = Union[ArrayFloat, Sequence[float]]

# Wide enough for two decimals on any finite float64.
_DECIMAL_CONTEXT: Final[Context] = Context(prec=400)
_HUNDREDTHS: Final[Decimal] = Decimal("0.01")


def format_component(value: float) -> str:
    """
    Format a coordinate with at most two decimals, dropping trailing zeros.

    Halves round away from zero: 50.0 -> "50", 0.125 -> "0.13",
    -0.001 -> "0".
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    rounded = Decimal(value).quantize(
        _HUNDREDTHS, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    if rounded.is_zero():
        return "0"
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def as_vector(vector: VectorLike) -> ArrayFloat:
    """Copy *vector* into a fresh read-only float64 array of shape (3,)."""
    arr = np.array(vector, dtype=np.float64).reshape(-1)
    if arr.shape[0] != 3:
        raise ValueError(f"Expected 3 components, got {arr.shape[0]}")
    arr.flags.writeable = False
    return arr


class ColorVector:
    """
    Base class for immutable three-component color values.

    Subclasses set ``_AXES`` to the labels used by ``__str__``.  Equality
    and hashing only consider the coordinate triple; subclasses that carry
    extra data (a reference white) inherit this on purpose.
    """

    __slots__ = ("_vector",)

    _AXES: ClassVar[Tuple[str, str, str]] = ("X", "Y", "Z")
    EMPTY: ClassVar[Any]

    def __init__(self, c0: float, c1: float, c2: float) -> None:
        object.__setattr__(self, "_vector", as_vector((c0, c1, c2)))

    # --- Immutability ---

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), tuple(self._vector.tolist()))

    # --- Accessors ---

    @property
    def vector(self) -> ArrayFloat:
        """Read-only float64 array of the three coordinates."""
        return self._vector

    @property
    def is_empty(self) -> bool:
        """True if every coordinate is zero."""
        return not bool(self._vector.any())

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._vector, other._vector))  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(tuple(self._vector.tolist()))

    def almost_equals(self, other: ColorVector, precision: float) -> bool:
        """
        Componentwise tolerance check.

        True only if the absolute difference on *each* axis is at most
        ``precision``.  This is a sup-norm bound, not a Euclidean distance.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        diff = np.abs(self._vector - other._vector)
        return bool(np.all(diff <= precision))

    # --- Text ---

    def __str__(self) -> str:
        name = type(self).__name__
        if self.is_empty:
            return f"{name} [Empty]"
        parts = ", ".join(
            f"{axis}={format_component(v)}"
            for axis, v in zip(self._AXES, self._vector.tolist())
        )
        return f"{name} [ {parts}]"

    def __repr__(self) -> str:
        args = ", ".join(
            f"{axis.lower()}={v!r}" for axis, v in zip(self._AXES, self._vector.tolist())
        )
        return f"{type(self).__name__}({args})"


class CieXyz(ColorVector):
    """
    CIE 1931 XYZ tristimulus value.

    Device independent by construction; carries no reference white.
    Illuminants are expressed as CieXyz with Y normalised to 1.0.
    """

    __slots__ = ()

    _AXES: ClassVar[Tuple[str, str, str]] = ("X", "Y", "Z")

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z)

    @classmethod
    def from_vector(cls, vector: VectorLike) -> CieXyz:
        """Build from any 3-element sequence or array."""
        x, y, z = as_vector(vector).tolist()
        return cls(x, y, z)

    @property
    def x(self) -> float:
        """X component (mix of cone responses, roughly red)."""
        return float(self._vector[0])

    @property
    def y(self) -> float:
        """Y component (luminance)."""
        return float(self._vector[1])

    @property
    def z(self) -> float:
        """Z component (quasi-equal to blue stimulation)."""
        return float(self._vector[2])


CieXyz.EMPTY = CieXyz(0.0, 0.0, 0.0)
