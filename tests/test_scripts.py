"""Run the demo scripts end to end in a subprocess."""

import subprocess
import sys
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _run(script, *args):
    return subprocess.run(
        [sys.executable, str(SCRIPTS_DIR / script), *args],
        capture_output=True, text=True, timeout=60,
    )


@pytest.mark.slow
class TestDemoLogging:

    def test_default_errors_only(self):
        result = _run("demo_logging.py")
        assert result.returncode == 0
        assert "Engines exploded" in result.stderr
        assert "Engines smoking" not in result.stderr

    def test_vvvv_shows_trace(self):
        result = _run("demo_logging.py", "-vvvv")
        assert "TRACE engine: Engine subsection is 300 degrees" in result.stderr

    def test_host_messages_come_first(self):
        result = _run("demo_logging.py", "-vvv")
        assert result.stderr.splitlines()[0] == "ERROR engine: Engines exploded"

    def test_quiet(self):
        result = _run("demo_logging.py", "-q")
        assert result.returncode == 0
        assert result.stderr == ""

    def test_conflict(self):
        result = _run("demo_logging.py", "-v", "-q")
        assert result.returncode == 2


@pytest.mark.slow
class TestDemoLoguru:

    def test_flag_after_subcommand(self):
        result = _run("demo_loguru.py", "run", "-vv")
        assert "Engines exist" in result.stderr
        assert "Engine temperature" not in result.stderr

    def test_quiet_before_subcommand(self):
        result = _run("demo_loguru.py", "-q", "run")
        assert result.returncode == 0
        assert result.stderr == ""
