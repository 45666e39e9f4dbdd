"""
Tests for chromatic adaptation strategies.
"""

import numpy as np
import pytest

from tincture_adaptation import (
    AdaptationMethod,
    ChromaticAdaptation,
    LmsAdaptationMatrix,
    VonKriesChromaticAdaptation,
)
from tincture_illuminants import Illuminants
from tincture_spaces import CieXyz


SAMPLES = [
    CieXyz(0.4124564, 0.2126729, 0.0193339),
    CieXyz(0.2, 0.3, 0.4),
    CieXyz(0.05, 0.02, 0.9),
    CieXyz(0.0, 0.0, 0.0),
]

WHITE_PAIRS = [
    (Illuminants.D65, Illuminants.D50),
    (Illuminants.A, Illuminants.D65),
    (Illuminants.F11, Illuminants.E),
]


@pytest.fixture(params=list(AdaptationMethod), ids=lambda m: m.value)
def adaptation(request):
    """One strategy per known cone matrix."""
    return VonKriesChromaticAdaptation.from_method(request.param)


class TestVonKriesLaws:
    """Identity and approximate invertibility."""

    @pytest.mark.parametrize("color", SAMPLES)
    def test_identity_is_exact(self, adaptation, color):
        result = adaptation.transform(color, Illuminants.D50, Illuminants.D50)

        assert result == color
        assert result is color

    def test_identity_with_equal_but_distinct_whites(self, adaptation):
        white = CieXyz(0.96422, 1.0, 0.82521)
        color = CieXyz(0.3, 0.4, 0.5)

        assert adaptation.transform(color, white, Illuminants.D50) is color

    @pytest.mark.parametrize("color", SAMPLES)
    @pytest.mark.parametrize("source, dest", WHITE_PAIRS)
    def test_round_trip(self, adaptation, color, source, dest):
        there = adaptation.transform(color, source, dest)
        back = adaptation.transform(there, dest, source)

        assert back.almost_equals(color, 1e-3)

    @pytest.mark.parametrize("source, dest", WHITE_PAIRS)
    def test_white_maps_to_white(self, adaptation, source, dest):
        assert adaptation.transform(source, source, dest).almost_equals(dest, 1e-6)

    def test_deterministic(self):
        cat = VonKriesChromaticAdaptation()
        color = CieXyz(0.2, 0.3, 0.4)

        first = cat.transform(color, Illuminants.D65, Illuminants.D50)
        second = cat.transform(color, Illuminants.D65, Illuminants.D50)

        assert first == second


class TestVonKriesMatrices:
    """Composite matrices and algorithm selection."""

    def test_bradford_d65_to_d50_matches_reference(self):
        """Published Bradford D65 -> D50 matrix (column-vector form)."""
        expected = np.array([
            [ 1.0478112,  0.0228866, -0.0501270],
            [ 0.0295424,  0.9904844, -0.0170491],
            [-0.0092345,  0.0150436,  0.7521316],
        ])
        m = VonKriesChromaticAdaptation().transform_matrix(Illuminants.D65, Illuminants.D50)

        np.testing.assert_allclose(m.T, expected, atol=1e-4)

    def test_transform_matrix_is_cached_and_read_only(self):
        cat = VonKriesChromaticAdaptation()
        m1 = cat.transform_matrix(Illuminants.D65, Illuminants.D50)
        m2 = cat.transform_matrix(Illuminants.D65, Illuminants.D50)

        assert m1 is m2
        with pytest.raises(ValueError):
            m1[0, 0] = 0.0

    def test_xyz_scaling_is_componentwise_ratio(self):
        cat = VonKriesChromaticAdaptation(LmsAdaptationMatrix.XYZ_SCALING)
        color = CieXyz(0.2, 0.3, 0.4)
        result = cat.transform(color, Illuminants.D65, Illuminants.D50)

        expected = color.vector * Illuminants.D50.vector / Illuminants.D65.vector
        np.testing.assert_allclose(result.vector, expected, rtol=1e-12)

    def test_default_is_bradford(self):
        np.testing.assert_array_equal(
            VonKriesChromaticAdaptation().matrix, LmsAdaptationMatrix.BRADFORD)
        assert VonKriesChromaticAdaptation() == VonKriesChromaticAdaptation.from_method("bradford")

    @pytest.mark.parametrize("name", ["bradford", "BRADFORD", AdaptationMethod.BRADFORD])
    def test_from_method_accepts_names(self, name):
        cat = VonKriesChromaticAdaptation.from_method(name)

        np.testing.assert_array_equal(cat.matrix, LmsAdaptationMatrix.BRADFORD)

    def test_from_method_unknown(self):
        with pytest.raises(ValueError, match="Unknown adaptation method"):
            VonKriesChromaticAdaptation.from_method("sharp-ish")

    def test_enum_matrix(self):
        assert AdaptationMethod.CAT02.matrix is LmsAdaptationMatrix.CAT02

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            VonKriesChromaticAdaptation(np.eye(2))

    def test_rejects_singular_matrix(self):
        with pytest.raises(ValueError, match="singular"):
            VonKriesChromaticAdaptation(np.zeros((3, 3)))

    def test_rejects_non_finite_matrix(self):
        m = np.eye(3)
        m[0, 0] = np.nan
        with pytest.raises(ValueError):
            VonKriesChromaticAdaptation(m)

    def test_satisfies_protocol(self):
        assert isinstance(VonKriesChromaticAdaptation(), ChromaticAdaptation)

    def test_repr_names_method(self):
        assert repr(VonKriesChromaticAdaptation()) == "VonKriesChromaticAdaptation(BRADFORD)"


class TestTransformArray:
    """Batch adaptation of (3,) and (N, 3) arrays."""

    def test_batch_matches_single(self):
        cat = VonKriesChromaticAdaptation()
        batch = np.array([c.vector for c in SAMPLES])

        result = cat.transform_array(batch, Illuminants.D65, Illuminants.D50)

        assert result.shape == (len(SAMPLES), 3)
        for row, color in zip(result, SAMPLES):
            single = cat.transform(color, Illuminants.D65, Illuminants.D50)
            np.testing.assert_allclose(row, single.vector, atol=1e-12)

    def test_single_vector_shape_preserved(self):
        cat = VonKriesChromaticAdaptation()
        result = cat.transform_array([0.2, 0.3, 0.4], Illuminants.D65, Illuminants.D50)

        assert result.shape == (3,)

    def test_identity_returns_copy(self):
        cat = VonKriesChromaticAdaptation()
        batch = np.array([[0.2, 0.3, 0.4]])

        result = cat.transform_array(batch, Illuminants.D65, Illuminants.D65)

        np.testing.assert_array_equal(result, batch)
        assert result is not batch

    def test_bad_shape(self):
        with pytest.raises(ValueError, match="last dimension"):
            VonKriesChromaticAdaptation().transform_array(
                np.zeros((4, 2)), Illuminants.D65, Illuminants.D50)
