# -*- coding: utf-8 -*-
"""
Tincture: Device-independent color spaces and chromatic adaptation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_illuminants.py — Standard reference whites.

Tristimulus values of the CIE standard illuminants for the 1931 2°
observer, normalised to Y = 1.0.  Values follow Lindbloom's tables, which
are also what ICC profiles use for D50.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, List, Mapping

from tincture_tristimulus import CieXyz

__all__ = [
    "Illuminants",
    "ILLUMINANTS",
    "get_illuminant",
    "list_illuminants",
]


class Illuminants:
    """Namespace of standard illuminant white points."""

    # Incandescent / tungsten
    A: Final[CieXyz] = CieXyz(1.09850, 1.0, 0.35585)
    # Direct sunlight at noon (obsolete)
    B: Final[CieXyz] = CieXyz(0.99072, 1.0, 0.85223)
    # Average / north sky daylight (obsolete)
    C: Final[CieXyz] = CieXyz(0.98074, 1.0, 1.18232)
    # Horizon light, ICC profile PCS
    D50: Final[CieXyz] = CieXyz(0.96422, 1.0, 0.82521)
    # Mid-morning / mid-afternoon daylight
    D55: Final[CieXyz] = CieXyz(0.95682, 1.0, 0.92149)
    # Noon daylight: television, sRGB color space
    D65: Final[CieXyz] = CieXyz(0.95047, 1.0, 1.08883)
    # North sky daylight
    D75: Final[CieXyz] = CieXyz(0.94972, 1.0, 1.22638)
    # Equal energy
    E: Final[CieXyz] = CieXyz(1.0, 1.0, 1.0)
    # Cool white fluorescent
    F2: Final[CieXyz] = CieXyz(0.99186, 1.0, 0.67393)
    # D65 simulator, daylight simulator
    F7: Final[CieXyz] = CieXyz(0.95041, 1.0, 1.08747)
    # Philips TL84, Ultralume 40
    F11: Final[CieXyz] = CieXyz(1.00962, 1.0, 0.64350)


ILLUMINANTS: Final[Mapping[str, CieXyz]] = MappingProxyType({
    name: value
    for name, value in vars(Illuminants).items()
    if isinstance(value, CieXyz)
})


def get_illuminant(name: str) -> CieXyz:
    """
    Look up an illuminant by name (case-insensitive).

    Raises:
        KeyError: If no illuminant of that name exists.
    """
    key = name.strip().upper()
    if key not in ILLUMINANTS:
        raise KeyError(f"Illuminant {name!r} not found. Known: {', '.join(list_illuminants())}")
    return ILLUMINANTS[key]


def list_illuminants() -> List[str]:
    """Names of all registered illuminants, sorted."""
    return sorted(ILLUMINANTS)
