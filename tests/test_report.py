"""Plain-text report files."""

import builtins

import pytest

from gate_aco import ReportWriter
from gate_aco import report as report_module


def test_creates_the_four_reports(tmp_path):
    with ReportWriter(tmp_path / "out") as report:
        report.start_trial(0)
        report.log_improvement(3.0, 0.5, 2)
    for name in ("conv_report", "conv_report_iter", "final_report", "results_report"):
        assert (tmp_path / "out" / name).exists()
    assert "2" in (tmp_path / "out" / "conv_report_iter").read_text()
    assert report.report.closed


def test_failed_open_closes_earlier_files(tmp_path, monkeypatch):
    opened = []

    def failing_open(path, mode="r"):
        if len(opened) == 2:
            raise OSError("disk full")
        handle = builtins.open(path, mode)
        opened.append(handle)
        return handle

    monkeypatch.setattr(report_module, "open", failing_open, raising=False)
    with pytest.raises(OSError):
        ReportWriter(tmp_path)
    assert len(opened) == 2
    assert all(handle.closed for handle in opened)
