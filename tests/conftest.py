"""Pytest fixtures for edge-cpwg tests."""

import pytest

from edge_cpwg.physics import CPWGParameters


@pytest.fixture
def example_params() -> CPWGParameters:
    """Documented example geometry on 1.6mm FR4."""
    return CPWGParameters(
        pair_gap=0.2,
        strip_width=0.41,
        ground_gap=0.2,
        thickness=0.035,
        substrate_height=1.593,
        epsilon_r=4.5,
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of every test."""
    monkeypatch.setattr("edge_cpwg.config.USER_CONFIG_PATH", tmp_path / "user" / "config.toml")
    monkeypatch.chdir(tmp_path)
    return tmp_path
