"""Shared test fixtures for the envlogger test suite."""

import io

import pytest

from envlogger import diagnostics as _diag_mod


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without ENVLOG settings and outside any .envlog.json."""
    monkeypatch.delenv("ENVLOG", raising=False)
    monkeypatch.delenv("ENVLOG_STRATEGY", raising=False)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture(autouse=True)
def _reset_diagnostics():
    """Reset the Diagnostics singleton between tests."""
    old = _diag_mod._diagnostics
    _diag_mod._diagnostics = None
    yield
    _diag_mod._diagnostics = old


@pytest.fixture
def diag_buf():
    """Route diagnostics into a StringIO buffer at default verbosity."""
    buf = io.StringIO()
    _diag_mod.init_diagnostics(verbosity=0, file=buf)
    return buf


# ---------------------------------------------------------------------------
# Drains
# ---------------------------------------------------------------------------
class RecordingDrain:
    """Drain that keeps every record it is given."""

    def __init__(self, result="ok"):
        self.records = []
        self.result = result

    def log(self, record):
        self.records.append(record)
        return self.result


class FailingDrain:
    """Drain whose log() always raises."""

    def __init__(self, exc):
        self.exc = exc

    def log(self, record):
        raise self.exc


@pytest.fixture
def drain():
    """A RecordingDrain."""
    return RecordingDrain()
