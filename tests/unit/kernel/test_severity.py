"""Unit tests for the severity scale."""

from __future__ import annotations

import logging

import pytest

from vpe_logging.kernel.severity import Severity, threshold_for


class TestSeverityOrdering:
    def test_strict_order(self) -> None:
        assert Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR < Severity.FATAL

    def test_info_threshold_admits_info_and_above(self) -> None:
        threshold = Severity.INFO
        admitted = [s for s in Severity if s >= threshold]
        assert admitted == [Severity.INFO, Severity.WARN, Severity.ERROR, Severity.FATAL]

    def test_labels(self) -> None:
        assert [s.label for s in Severity] == ["DEBUG", "INFO", "WARN", "ERROR", "FATAL"]


class TestSeverityMappings:
    def test_stdlib_levels(self) -> None:
        assert Severity.DEBUG.stdlib_level == logging.DEBUG
        assert Severity.WARN.stdlib_level == logging.WARNING
        assert Severity.FATAL.stdlib_level == logging.CRITICAL

    def test_error_stream_routing(self) -> None:
        assert not Severity.DEBUG.is_error_stream
        assert not Severity.INFO.is_error_stream
        assert Severity.WARN.is_error_stream
        assert Severity.ERROR.is_error_stream
        assert Severity.FATAL.is_error_stream


class TestSeverityParse:
    def test_passthrough(self) -> None:
        assert Severity.parse(Severity.ERROR) is Severity.ERROR

    def test_from_rank(self) -> None:
        assert Severity.parse(30) is Severity.WARN

    def test_case_insensitive_name(self) -> None:
        assert Severity.parse(" debug ") is Severity.DEBUG

    def test_stdlib_aliases(self) -> None:
        assert Severity.parse("warning") is Severity.WARN
        assert Severity.parse("CRITICAL") is Severity.FATAL

    @pytest.mark.parametrize("value", ["verbose", 15, True, 1.5])
    def test_rejects_unknown(self, value: object) -> None:
        with pytest.raises(ValueError):
            Severity.parse(value)  # type: ignore[arg-type]


class TestThresholdFor:
    def test_verbose_is_debug(self) -> None:
        assert threshold_for(True) is Severity.DEBUG

    def test_default_is_info(self) -> None:
        assert threshold_for(False) is Severity.INFO
