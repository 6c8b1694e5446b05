"""Tests for cross-section parameters and the geometry reducer."""

import math

import pytest

from edge_cpwg.exceptions import ValidationError
from edge_cpwg.physics import CPWGParameters, reduce_geometry


class TestReduceGeometry:
    """Tests for reduce_geometry()."""

    def test_edge_distances(self, example_params):
        """a, b, c are measured from the pair's centre line."""
        geometry = reduce_geometry(example_params)

        assert geometry.a == pytest.approx(0.1)
        assert geometry.b == pytest.approx(0.51)
        assert geometry.c == pytest.approx(0.71)
        assert 0 < geometry.a < geometry.b < geometry.c

    def test_moduli(self, example_params):
        geometry = reduce_geometry(example_params)

        r = 0.1 / 0.51
        k1 = 0.51 / 0.71
        assert geometry.r == pytest.approx(r)
        assert geometry.k1 == pytest.approx(k1)
        assert geometry.delta == pytest.approx(math.sqrt((1 - r**2) / (1 - (k1 * r) ** 2)))

    def test_moduli_in_unit_interval(self, example_params):
        geometry = reduce_geometry(example_params)
        for value in (geometry.r, geometry.k1, geometry.delta):
            assert 0 < value < 1

    def test_zero_strip_width_is_degenerate(self):
        """S = 0 collapses a onto b: r = 1 and delta = 0, no exception."""
        geometry = reduce_geometry(CPWGParameters(0.2, 0.0, 0.2, 0.035, 1.6, 4.5))

        assert geometry.a == geometry.b
        assert geometry.r == 1.0
        assert geometry.delta == 0.0

    def test_wide_ground_gap(self):
        """As W grows, k1 -> 0 and delta -> sqrt(1 - r^2)."""
        geometry = reduce_geometry(CPWGParameters(0.2, 0.41, 1e4, 0.035, 1.6, 4.5))

        assert geometry.k1 < 1e-4
        assert geometry.delta == pytest.approx(math.sqrt(1 - geometry.r**2), rel=1e-6)

    def test_zero_dimensions_give_nan(self):
        """0/0 in r propagates as NaN rather than raising."""
        geometry = reduce_geometry(CPWGParameters(0.0, 0.0, 0.2, 0.035, 1.6, 4.5))
        assert math.isnan(geometry.r)
        assert math.isnan(geometry.delta)

    def test_thickness_has_no_effect(self, example_params):
        """The conductor thickness is carried but not part of the model."""
        thick = CPWGParameters(0.2, 0.41, 0.2, 0.5, 1.593, 4.5)
        assert reduce_geometry(thick) == reduce_geometry(example_params)


class TestCPWGParametersValidation:
    """Tests for CPWGParameters.validate() and check()."""

    def test_valid_parameters(self, example_params):
        assert example_params.validate() == []
        example_params.check()

    def test_non_positive_lengths(self):
        params = CPWGParameters(0.2, 0.0, -0.1, 0.035, 1.6, 4.5)
        errors = params.validate()

        assert len(errors) == 2
        assert any("strip_width" in e for e in errors)
        assert any("ground_gap" in e for e in errors)

    def test_epsilon_below_one(self):
        errors = CPWGParameters(0.2, 0.41, 0.2, 0.035, 1.6, 0.5).validate()
        assert errors == ["epsilon_r must be >= 1, got 0.5"]

    def test_zero_thickness_allowed(self):
        assert CPWGParameters(0.2, 0.41, 0.2, 0.0, 1.6, 4.5).validate() == []

    def test_nan_rejected(self):
        errors = CPWGParameters(0.2, 0.41, 0.2, 0.035, math.nan, 4.5).validate()
        assert len(errors) == 1
        assert "substrate_height" in errors[0]

    def test_check_raises_with_all_errors(self):
        params = CPWGParameters(0.0, 0.0, 0.0, -1.0, 0.0, 0.0)

        with pytest.raises(ValidationError) as exc_info:
            params.check()

        err = exc_info.value
        assert len(err.errors) == 6
        assert "Validation failed with 6 error(s)" in str(err)
        assert "Suggestions:" in str(err)
        assert err.context["epsilon_r"] == 0.0

    def test_as_dict(self, example_params):
        data = example_params.as_dict()
        assert data == {
            "pair_gap": 0.2,
            "strip_width": 0.41,
            "ground_gap": 0.2,
            "thickness": 0.035,
            "substrate_height": 1.593,
            "epsilon_r": 4.5,
        }
