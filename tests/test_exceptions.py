"""Tests for edge_cpwg.exceptions module."""

import pytest

from edge_cpwg import EdgeCpwgError, ValidationError
from edge_cpwg.config import ConfigError
from edge_cpwg.physics import CPWGParameters


class TestEdgeCpwgError:
    """Tests for the base exception class."""

    def test_basic_message(self):
        err = EdgeCpwgError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}
        assert err.suggestions == []

    def test_with_context(self):
        err = EdgeCpwgError("Bad geometry", context={"strip_width": 0.0, "ground_gap": 0.2})
        msg = str(err)
        assert "Bad geometry" in msg
        assert "Context:" in msg
        assert "strip_width: 0.0" in msg
        assert "ground_gap: 0.2" in msg

    def test_with_suggestions(self):
        err = EdgeCpwgError("Bad geometry", suggestions=["Use positive lengths", "Check units"])
        msg = str(err)
        assert "Suggestions:" in msg
        assert "  - Use positive lengths" in msg
        assert "  - Check units" in msg

    def test_context_before_suggestions(self):
        err = EdgeCpwgError("Failed", context={"h": 0}, suggestions=["Set h"])
        msg = str(err)
        assert msg.index("Context:") < msg.index("Suggestions:")

    def test_can_be_raised(self):
        with pytest.raises(EdgeCpwgError, match="oops"):
            raise EdgeCpwgError("oops")


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_lists_all_errors(self):
        err = ValidationError(["first problem", "second problem"])
        msg = str(err)
        assert "Validation failed with 2 error(s):" in msg
        assert "  1. first problem" in msg
        assert "  2. second problem" in msg
        assert err.errors == ["first problem", "second problem"]

    def test_is_base_error(self):
        assert isinstance(ValidationError(["x"]), EdgeCpwgError)

    def test_from_parameters(self):
        """check() collects every problem, with inputs as context."""
        params = CPWGParameters(
            pair_gap=-0.2,
            strip_width=0.0,
            ground_gap=0.2,
            thickness=0.035,
            substrate_height=1.593,
            epsilon_r=0.5,
        )
        with pytest.raises(ValidationError) as exc_info:
            params.check()

        err = exc_info.value
        assert len(err.errors) == 3
        assert err.context["strip_width"] == 0.0
        assert "Suggestions:" in str(err)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_is_base_error(self):
        err = ConfigError("Invalid TOML", suggestions=["Fix it"])
        assert isinstance(err, EdgeCpwgError)
        assert "Fix it" in str(err)
