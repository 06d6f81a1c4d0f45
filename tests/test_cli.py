"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from souksoft import __version__
from souksoft.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def unix_host(clean_settings, monkeypatch, tmp_path):
    """Pin the backend and keep receipt files inside the test directory."""
    monkeypatch.setenv("SOUKSOFT_HOST_FAMILY", "unix")
    monkeypatch.setenv("SOUKSOFT_TEMP_DIR", str(tmp_path))


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_greet(runner):
    result = runner.invoke(main, ["greet", "Amina"])

    assert result.exit_code == 0
    assert result.output.strip() == "Hello, Amina! You've been greeted from Python!"


class TestPrinters:
    """Tests for `souksoft printers`."""

    def test_lists_printers(self, runner, fake_run):
        fake_run.respond("lpstat", stdout="Thermal_80 accepting\nOffice-Laser accepting\n")

        result = runner.invoke(main, ["printers"])

        assert result.exit_code == 0
        assert "Thermal_80" in result.output
        assert "Office-Laser" in result.output

    def test_marks_configured_default(self, runner, fake_run, monkeypatch):
        monkeypatch.setenv("SOUKSOFT_DEFAULT_PRINTER", "Office-Laser")
        fake_run.respond("lpstat", stdout="Thermal_80 accepting\nOffice-Laser accepting\n")

        result = runner.invoke(main, ["printers"])

        assert "* Office-Laser" in result.output
        assert "  Thermal_80" in result.output

    def test_no_printers(self, runner, fake_run):
        fake_run.respond("lpstat", stdout="")

        result = runner.invoke(main, ["printers"])

        assert result.exit_code == 0
        assert "No printers found." in result.output

    def test_error_exits_1(self, runner, fake_run):
        fake_run.respond("lpstat", returncode=1, stderr="lpstat: scheduler not running")

        result = runner.invoke(main, ["printers"])

        assert result.exit_code == 1
        assert "scheduler not running" in result.output


class TestPrint:
    """Tests for `souksoft print`."""

    def test_prints_file(self, runner, fake_run, tmp_path):
        receipt = tmp_path / "receipt.html"
        receipt.write_text("<b>Receipt</b>", encoding="utf-8")
        fake_run.respond("lp")

        result = runner.invoke(main, ["print", str(receipt), "-w", "58", "-p", "Thermal_80"])

        assert result.exit_code == 0, result.output
        cmd = fake_run.calls[0]
        assert cmd[:5] == ["lp", "-t", "SoukSoft Receipt 58mm", "-d", "Thermal_80"]
        assert fake_run.seen_files[cmd[-1]] == "<b>Receipt</b>"
        assert "Receipt sent to Thermal_80" in result.output

    def test_reads_stdin_and_uses_configured_printer(self, runner, fake_run, monkeypatch):
        monkeypatch.setenv("SOUKSOFT_DEFAULT_PRINTER", "Office-Laser")
        fake_run.respond("lp")

        result = runner.invoke(main, ["print", "-"], input="<b>Receipt</b>")

        assert result.exit_code == 0, result.output
        assert fake_run.calls[0][:5] == ["lp", "-t", "SoukSoft Receipt 80mm", "-d", "Office-Laser"]

    def test_failure_exits_1(self, runner, fake_run):
        result = runner.invoke(main, ["print", "-"], input="<b>Receipt</b>")

        assert result.exit_code == 1
        assert "lp error: " in result.output

    def test_empty_receipt_rejected(self, runner, fake_run):
        result = runner.invoke(main, ["print", "-"], input="")

        assert result.exit_code == 1
        assert "invalid receipt" in result.output
        assert fake_run.calls == []

    def test_rejects_zero_width(self, runner, fake_run):
        result = runner.invoke(main, ["print", "-", "-w", "0"], input="<b>x</b>")

        assert result.exit_code == 2
        assert fake_run.calls == []


def test_info(runner):
    result = runner.invoke(main, ["info"])

    assert result.exit_code == 0
    assert "Backend: unix (CupsPrinter)" in result.output
    assert "Paper width: 80mm" in result.output


def test_serve_runs_uvicorn(runner):
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(main, ["serve", "--port", "9999"])

    assert result.exit_code == 0, result.output
    _, kwargs = mock_run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9999
