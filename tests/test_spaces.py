"""
Tests for the immutable color value types.

Covers equality, tolerance checks, hashing, text form and immutability for
CieXyz and the spaces in tincture_spaces.
"""

import copy
import pickle

import numpy as np
import pytest

from tincture_illuminants import Illuminants
from tincture_spaces import CieLab, CieLch, CieLuv, CieXyy, CieXyz, HunterLab, Lms
from tincture_tristimulus import format_component


ALL_TYPES = [CieXyz, CieLab, CieLch, CieLuv, HunterLab, CieXyy, Lms]


class TestStringFormat:
    """The textual form is a compatibility surface."""

    def test_lab_drops_trailing_zeros(self):
        assert str(CieLab(50, 10, -20)) == "CieLab [ L=50, A=10, B=-20]"

    def test_lab_empty(self):
        assert str(CieLab(0, 0, 0)) == "CieLab [Empty]"
        assert str(CieLab.EMPTY) == "CieLab [Empty]"

    def test_two_decimals_max(self):
        assert str(CieXyz(0.12345, 1.0, 0.5)) == "CieXyz [ X=0.12, Y=1, Z=0.5]"

    def test_halves_round_away_from_zero(self):
        assert str(CieLab(50.125, -0.125, 0.005)) == "CieLab [ L=50.13, A=-0.13, B=0.01]"

    @pytest.mark.parametrize("cls, expected", [
        (CieXyz, "CieXyz [ X=1, Y=2, Z=3]"),
        (CieLch, "CieLch [ L=1, C=2, H=3]"),
        (CieLuv, "CieLuv [ L=1, U=2, V=3]"),
        (HunterLab, "HunterLab [ L=1, A=2, B=3]"),
        (CieXyy, "CieXyy [ X=1, Y=2, Yl=3]"),
        (Lms, "Lms [ L=1, M=2, S=3]"),
    ])
    def test_axis_labels(self, cls, expected):
        assert str(cls(1, 2, 3)) == expected

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_empty_for_every_type(self, cls):
        assert str(cls(0, 0, 0)) == f"{cls.__name__} [Empty]"

    @pytest.mark.parametrize("value, expected", [
        (50.0, "50"),
        (100.0, "100"),
        (0.5, "0.5"),
        (-20.0, "-20"),
        (12.3456, "12.35"),
        (-0.001, "0"),
        (0.0, "0"),
        (0.125, "0.13"),
        (-0.125, "-0.13"),
        (2.5, "2.5"),
    ])
    def test_format_component(self, value, expected):
        assert format_component(value) == expected

    def test_repr_includes_white_point(self):
        text = repr(CieLab(50, 10, -20))
        assert text.startswith("CieLab(l=50.0, a=10.0, b=-20.0")
        assert "white_point=CieXyz(" in text


class TestEquality:
    """Exact equality on the coordinate triple."""

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_reflexive_symmetric_transitive(self, cls):
        a = cls(1.5, -2.0, 3.25)
        b = cls(1.5, -2.0, 3.25)
        c = cls(1.5, -2.0, 3.25)

        assert a == a
        assert (a == b) == (b == a)
        assert a == b and b == c and a == c

    def test_inequality(self):
        assert CieXyz(0.1, 0.2, 0.3) != CieXyz(0.1, 0.2, 0.30001)

    def test_different_types_never_equal(self):
        assert CieLab(1, 2, 3) != HunterLab(1, 2, 3)
        assert CieXyz(1, 2, 3) != CieXyy(1, 2, 3)
        assert CieXyz(1, 2, 3) != (1, 2, 3)

    def test_hash_consistent_with_equality(self):
        a = CieXyz(0.25, 0.5, 0.75)
        b = CieXyz(0.25, 0.5, 0.75)

        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_white_point_ignored_by_equality(self):
        """Known contract: the reference white takes no part in == or hash."""
        d50 = CieLab(50, 10, -20)
        d65 = CieLab(50, 10, -20, Illuminants.D65)

        assert d50 == d65
        assert hash(d50) == hash(d65)

    def test_same_color_as_compares_white_point(self):
        d50 = CieLab(50, 10, -20)
        d65 = CieLab(50, 10, -20, Illuminants.D65)

        assert not d50.same_color_as(d65)
        assert d50.same_color_as(CieLab(50, 10, -20, Illuminants.D50))


class TestAlmostEquals:
    """Per-axis (sup-norm) tolerance."""

    def test_per_axis_bound(self):
        a = CieXyz(0, 0, 0)
        b = CieXyz(1, 0, 0)

        assert not a.almost_equals(b, 0.5)
        assert a.almost_equals(b, 1.0)

    def test_not_euclidean(self):
        """Each axis is within 0.6 even though the vector distance is ~1.04."""
        a = CieLab(0, 0, 0)
        b = CieLab(0.6, 0.6, 0.6)

        assert a.almost_equals(b, 0.6)

    @pytest.mark.parametrize("other", [
        CieXyz(0.1, 0.2, 0.3),
        CieXyz(0.1, 0.2, 0.3000001),
        CieXyz(-0.1, 0.2, 0.3),
    ])
    def test_zero_precision_matches_equality(self, other):
        a = CieXyz(0.1, 0.2, 0.3)

        assert a.almost_equals(other, 0) == (a == other)

    def test_type_mismatch_raises(self):
        with pytest.raises(TypeError):
            CieLab(1, 2, 3).almost_equals(CieLuv(1, 2, 3), 1.0)


class TestConstruction:
    """Constructors, defaults and accessors."""

    def test_xyz_accessors(self):
        c = CieXyz(0.1, 0.2, 0.3)

        assert (c.x, c.y, c.z) == (0.1, 0.2, 0.3)
        np.testing.assert_array_equal(c.vector, [0.1, 0.2, 0.3])
        assert c.vector.dtype == np.float64

    def test_lab_accessors(self):
        c = CieLab(50, 10, -20)

        assert (c.l, c.a, c.b) == (50.0, 10.0, -20.0)

    def test_other_accessors(self):
        assert (CieLch(1, 2, 3).l, CieLch(1, 2, 3).c, CieLch(1, 2, 3).h) == (1, 2, 3)
        assert (CieLuv(1, 2, 3).u, CieLuv(1, 2, 3).v) == (2, 3)
        assert (CieXyy(1, 2, 3).x, CieXyy(1, 2, 3).y, CieXyy(1, 2, 3).yl) == (1, 2, 3)
        assert (Lms(1, 2, 3).l, Lms(1, 2, 3).m, Lms(1, 2, 3).s) == (1, 2, 3)

    @pytest.mark.parametrize("cls, white", [
        (CieLab, Illuminants.D50),
        (CieLch, Illuminants.D50),
        (CieLuv, Illuminants.D65),
        (HunterLab, Illuminants.C),
    ])
    def test_default_white_points(self, cls, white):
        assert cls(1, 2, 3).white_point is white
        assert cls(1, 2, 3, None).white_point is white

    def test_explicit_white_point(self):
        assert CieLab(1, 2, 3, Illuminants.D65).white_point is Illuminants.D65

    def test_white_point_must_be_xyz(self):
        with pytest.raises(TypeError):
            CieLab(1, 2, 3, (0.95, 1.0, 1.09))

    def test_lightness_not_clamped(self):
        """Specular highlights exceed 100; nothing is validated."""
        assert CieLab(150, -300, 300).l == 150

    def test_from_vector(self):
        assert CieXyz.from_vector(np.array([0.1, 0.2, 0.3])) == CieXyz(0.1, 0.2, 0.3)
        lab = CieLab.from_vector([50, 10, -20], Illuminants.D65)
        assert lab == CieLab(50, 10, -20)
        assert lab.white_point is Illuminants.D65

    def test_from_vector_wrong_size(self):
        with pytest.raises(ValueError):
            CieXyz.from_vector([1.0, 2.0])

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_is_empty(self, cls):
        assert cls(0, 0, 0).is_empty
        assert cls.EMPTY.is_empty
        assert not cls(0, 0, 1e-9).is_empty

    def test_is_empty_on_subclass(self):
        class WarmLab(CieLab):
            pass

        zero = WarmLab(0, 0, 0)

        assert zero.is_empty
        assert str(zero) == "WarmLab [Empty]"
        assert not WarmLab(1, 0, 0).is_empty


class TestImmutability:
    """Values cannot be changed after construction."""

    def test_attribute_assignment_rejected(self):
        c = CieLab(50, 10, -20)
        with pytest.raises(AttributeError):
            c.l = 10
        with pytest.raises(AttributeError):
            c._vector = np.zeros(3)
        with pytest.raises(AttributeError):
            del c._white_point

    def test_vector_is_read_only(self):
        c = CieXyz(0.1, 0.2, 0.3)
        with pytest.raises(ValueError):
            c.vector[0] = 1.0

    def test_source_array_is_copied(self):
        src = np.array([0.1, 0.2, 0.3])
        c = CieXyz.from_vector(src)
        src[0] = 9.0

        assert c.x == 0.1

    def test_pickle_round_trip(self):
        lab = CieLab(50, 10, -20, Illuminants.D65)
        restored = pickle.loads(pickle.dumps(lab))

        assert restored.same_color_as(lab)

    def test_copy(self):
        xyz = CieXyz(0.1, 0.2, 0.3)
        luv = CieLuv(1, 2, 3, Illuminants.A)

        assert copy.copy(xyz) == xyz
        assert copy.deepcopy(luv).same_color_as(luv)
