"""Tests for verbose logging control."""

import logging

from edge_cpwg.log import set_verbose, verbose_logging
from edge_cpwg.physics import calculate

_logger = logging.getLogger("edge_cpwg")


def _stream_handlers():
    return [h for h in _logger.handlers if not isinstance(h, logging.NullHandler)]


class TestSetVerbose:
    """Tests for set_verbose()."""

    def test_quiet_by_default(self, example_params, capsys):
        calculate(example_params)
        assert capsys.readouterr().err == ""

    def test_verbose_traces_to_stderr(self, example_params, capsys):
        set_verbose(True)
        try:
            calculate(example_params)
        finally:
            set_verbose(False)

        err = capsys.readouterr().err
        assert "[DEBUG] reduced geometry" in err
        assert "[DEBUG] backing moduli" in err

    def test_repeated_enable_keeps_one_handler(self):
        set_verbose(True)
        set_verbose(True)
        try:
            assert len(_stream_handlers()) == 1
        finally:
            set_verbose(False)

    def test_disable_removes_handler(self):
        set_verbose(True)
        set_verbose(False)
        assert _stream_handlers() == []
        assert any(isinstance(h, logging.NullHandler) for h in _logger.handlers)


class TestVerboseLogging:
    """Tests for the verbose_logging() context manager."""

    def test_restores_quiet_state(self, example_params, capsys):
        with verbose_logging(True):
            calculate(example_params)
        calculate(example_params)

        err = capsys.readouterr().err
        assert err.count("reduced geometry") == 1
        assert _stream_handlers() == []

    def test_disabled(self, example_params, capsys):
        with verbose_logging(False):
            calculate(example_params)
        assert capsys.readouterr().err == ""
