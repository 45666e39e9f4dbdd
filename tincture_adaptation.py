# -*- coding: utf-8 -*-
"""
Tincture: Device-independent color spaces and chromatic adaptation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_adaptation.py — Chromatic adaptation transforms (CAT).

A chromatic adaptation re-expresses an XYZ value measured under one
reference white as the corresponding color under another.  All algorithms
here are linear von Kries-type transforms:

    XYZ --M--> LMS --diag(dst_lms / src_lms)--> LMS' --M^-1--> XYZ'

and differ only in the cone-response matrix M.  The composite 3x3 matrix
is cached per (M, source white, destination white).

Cone matrices are stored as published (column-vector form).  Composite
matrices are built pre-transposed, so ``np.dot(xyz, composite)`` applies
them to a row vector or an (N, 3) batch.
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import (
    Any,
    Callable,
    Final,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

import numpy as np

from tincture_tristimulus import ArrayFloat, CieXyz

__all__ = [
    "ChromaticAdaptation",
    "LmsAdaptationMatrix",
    "AdaptationMethod",
    "VonKriesChromaticAdaptation",
    "handle_shapes",
]


def _frozen_matrix(rows: Any) -> ArrayFloat:
    m = np.array(rows, dtype=np.float64)
    m.flags.writeable = False
    return m


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Cone response matrices
# ═══════════════════════════════════════════════════════════════════════════════
class LmsAdaptationMatrix:
    """XYZ -> LMS matrices (column-vector form, as published)."""

    # Hunt-Pointer-Estevez, normalised to equal-energy illuminant E
    VON_KRIES_HPE_ADJUSTED: Final[ArrayFloat] = _frozen_matrix([
        [ 0.40024,  0.70760, -0.08081],
        [-0.22630,  1.16532,  0.04570],
        [ 0.00000,  0.00000,  0.91822],
    ])

    # Hunt-Pointer-Estevez, normalised to D65
    VON_KRIES_HPE: Final[ArrayFloat] = _frozen_matrix([
        [ 0.38970,  0.68900, -0.07870],
        [-0.22980,  1.18340,  0.04640],
        [ 0.00000,  0.00000,  1.00000],
    ])

    # Plain XYZ scaling; the weakest CAT, mainly a baseline
    XYZ_SCALING: Final[ArrayFloat] = _frozen_matrix(np.eye(3))

    BRADFORD: Final[ArrayFloat] = _frozen_matrix([
        [ 0.89510,  0.26640, -0.16140],
        [-0.75020,  1.71350,  0.03670],
        [ 0.03890, -0.06850,  1.02960],
    ])

    # Spectrally sharpened Bradford
    BRADFORD_SHARP: Final[ArrayFloat] = _frozen_matrix([
        [ 1.26940, -0.09880, -0.17060],
        [-0.83640,  1.80060,  0.03570],
        [ 0.02970, -0.03150,  1.00180],
    ])

    CMCCAT2000: Final[ArrayFloat] = _frozen_matrix([
        [ 0.79820,  0.33890, -0.13710],
        [-0.59180,  1.55120,  0.04060],
        [ 0.00080,  0.23900,  0.97530],
    ])

    # CIECAM02
    CAT02: Final[ArrayFloat] = _frozen_matrix([
        [ 0.73280,  0.42960, -0.16240],
        [-0.70360,  1.69750,  0.00610],
        [ 0.00300,  0.01360,  0.98340],
    ])


class AdaptationMethod(str, Enum):
    """Known cone-response matrices, selectable by name."""

    VON_KRIES_HPE_ADJUSTED = "von_kries_hpe_adjusted"
    VON_KRIES_HPE = "von_kries_hpe"
    XYZ_SCALING = "xyz_scaling"
    BRADFORD = "bradford"
    BRADFORD_SHARP = "bradford_sharp"
    CMCCAT2000 = "cmccat2000"
    CAT02 = "cat02"

    @property
    def matrix(self) -> ArrayFloat:
        """The XYZ -> LMS matrix for this method."""
        return getattr(LmsAdaptationMatrix, self.name)


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Strategy protocol
# ═══════════════════════════════════════════════════════════════════════════════
@runtime_checkable
class ChromaticAdaptation(Protocol):
    """
    Minimal interface a chromatic adaptation algorithm must satisfy.

    transform(color, source_white, dest_white) -> CieXyz

    Implementations must return ``color`` unchanged when the two whites
    are equal.
    """
    def transform(
        self, color: CieXyz, source_white: CieXyz, dest_white: CieXyz
    ) -> CieXyz: ...


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Helpers
# ═══════════════════════════════════════════════════════════════════════════════
def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize a method's array input to (N, 3).

    - If input is (3,), returns (3,)
    - If input is (N, 3), returns (N, 3)
    """
    @functools.wraps(func)
    def wrapper(owner: Any, arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr = np.asarray(arr, dtype=np.float64)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.shape[-1] != 3:
            raise ValueError(f"Expected last dimension size 3, got {arr_in.shape[-1]}")

        res = func(owner, arr_in, *args, **kwargs)

        if arr.ndim == 1:
            return res[0]
        return res
    return wrapper


def _to_hashable(obj: Union[ArrayFloat, CieXyz]) -> Tuple[float, ...]:
    """Helper to ensure inputs are hashable tuples for caching."""
    if isinstance(obj, CieXyz):
        return tuple(obj.vector.tolist())
    return tuple(np.asarray(obj, dtype=np.float64).ravel().tolist())


@functools.lru_cache(maxsize=64)
def _get_cached_von_kries_matrix(
    lms_tuple: Tuple[float, ...],
    src_white_tuple: Tuple[float, ...],
    dst_white_tuple: Tuple[float, ...],
) -> ArrayFloat:
    """
    Cached worker for the composite von Kries matrix.

    Derivation:
    M_composite = M_inv * Gain * M
    Since we operate on row vectors: M_comp = M.T @ Gain @ M_inv.T
    """
    m = np.array(lms_tuple, dtype=np.float64).reshape(3, 3)
    m_t = m.T
    m_inv_t = np.linalg.inv(m).T

    src = np.array(src_white_tuple, dtype=np.float64)
    dst = np.array(dst_white_tuple, dtype=np.float64)

    # 1. White points -> cone responses
    src_lms = np.dot(src, m_t)
    dst_lms = np.dot(dst, m_t)

    # 2. Von Kries gains; guard extremely dark source whites
    src_lms = np.where(np.abs(src_lms) < 1e-12, 1e-12, src_lms)
    gain = np.diag(dst_lms / src_lms)

    # 3. Composite for row vectors
    composite = m_t @ gain @ m_inv_t
    composite.flags.writeable = False
    return composite


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  Von Kries implementation
# ═══════════════════════════════════════════════════════════════════════════════
class VonKriesChromaticAdaptation:
    """
    Linear von Kries adaptation with a selectable cone-response matrix.

    Defaults to Bradford, the de facto standard for ICC workflows.
    """

    __slots__ = ("_matrix", "_matrix_key")

    def __init__(self, matrix: Union[ArrayFloat, None] = None) -> None:
        if matrix is None:
            matrix = LmsAdaptationMatrix.BRADFORD
        m = np.array(matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError(f"Adaptation matrix must be 3x3, got shape {m.shape}")
        if not np.all(np.isfinite(m)):
            raise ValueError("Adaptation matrix contains non-finite values.")
        try:
            np.linalg.inv(m)
        except np.linalg.LinAlgError as exc:
            raise ValueError("Adaptation matrix is singular.") from exc
        m.flags.writeable = False
        self._matrix = m
        self._matrix_key = tuple(m.ravel().tolist())

    @classmethod
    def from_method(cls, method: Union[AdaptationMethod, str]) -> VonKriesChromaticAdaptation:
        """
        Build from an AdaptationMethod member or its string value.

        Raises:
            ValueError: If the name does not match a known method.
        """
        if not isinstance(method, AdaptationMethod):
            try:
                method = AdaptationMethod(str(method).lower())
            except ValueError:
                known = ", ".join(m.value for m in AdaptationMethod)
                raise ValueError(
                    f"Unknown adaptation method {method!r}. Known: {known}"
                ) from None
        return cls(method.matrix)

    @property
    def matrix(self) -> ArrayFloat:
        """XYZ -> LMS matrix in use (read-only)."""
        return self._matrix

    def transform_matrix(self, source_white: CieXyz, dest_white: CieXyz) -> ArrayFloat:
        """
        Composite adaptation matrix between two whites.

        Returns:
            Read-only 3x3 matrix for row-vector multiplication.
        """
        return _get_cached_von_kries_matrix(
            self._matrix_key, _to_hashable(source_white), _to_hashable(dest_white)
        )

    def transform(self, color: CieXyz, source_white: CieXyz, dest_white: CieXyz) -> CieXyz:
        """
        Adapt a single XYZ color from ``source_white`` to ``dest_white``.

        Equal whites short-circuit and return ``color`` itself, so the
        no-op path introduces no floating point drift.
        """
        if source_white == dest_white:
            return color
        m = self.transform_matrix(source_white, dest_white)
        return CieXyz.from_vector(np.dot(color.vector, m))

    @handle_shapes
    def transform_array(
        self, xyz: ArrayFloat, source_white: CieXyz, dest_white: CieXyz
    ) -> ArrayFloat:
        """
        Adapt a (3,) or (N, 3) XYZ array.

        No clipping is applied; negative results are legitimate
        out-of-gamut values.
        """
        if source_white == dest_white:
            return xyz.copy()
        return np.dot(xyz, self.transform_matrix(source_white, dest_white))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VonKriesChromaticAdaptation):
            return NotImplemented
        return self._matrix_key == other._matrix_key

    def __hash__(self) -> int:
        return hash(self._matrix_key)

    def __repr__(self) -> str:
        for method in AdaptationMethod:
            if np.array_equal(method.matrix, self._matrix):
                return f"VonKriesChromaticAdaptation({method.name})"
        return f"VonKriesChromaticAdaptation(matrix={self._matrix.tolist()!r})"
