"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from souksoft.config import get_settings


class FakeProc:
    """Stand-in for subprocess.CompletedProcess."""

    def __init__(self, returncode=0, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class FakeRun:
    """Replacement for subprocess.run keyed on the executable name.

    Executables without a registered response behave as if they were not
    installed (FileNotFoundError), like a bare PATH would.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.seen_files: dict[str, str] = {}
        self._responses: dict[str, object] = {}

    def respond(self, executable: str, returncode=0, stdout="", stderr="", raises=None):
        self._responses[executable] = raises or FakeProc(returncode, stdout, stderr)

    @property
    def executables(self) -> list[str]:
        return [cmd[0] for cmd in self.calls]

    def __call__(self, cmd, **kwargs):
        cmd = list(cmd)
        self.calls.append(cmd)

        # Remember what a print tool would have read from disk
        last = Path(cmd[-1])
        if last.suffix == ".html" and last.exists():
            self.seen_files[str(last)] = last.read_bytes().decode("utf-8")

        response = self._responses.get(cmd[0])
        if response is None:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    """Patch subprocess.run with a recording fake."""
    runner = FakeRun()
    monkeypatch.setattr("subprocess.run", runner)
    return runner


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from SOUKSOFT_* variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("SOUKSOFT_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
