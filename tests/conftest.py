"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

MST = timezone(timedelta(hours=-7), "MST")
VANCOUVER = ZoneInfo("America/Vancouver")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reference():
    """Monday 2006-01-02 15:04:05 at a fixed UTC-7 offset."""
    return datetime(2006, 1, 2, 15, 4, 5, tzinfo=MST)


@pytest.fixture
def dst_reference():
    """The same wall-clock reference in a zone that observes DST."""
    return datetime(2006, 1, 2, 15, 4, 5, tzinfo=VANCOUVER)


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
[defaults]
format = "%Y-%m-%d %H:%M:%S"
zones = "UTC"

[aliases]
standup = "tomorrow at 9:30am"
payday = "last day of the month at noon"
'''
    config_file = temp_dir / "when.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def isolated_home(temp_dir, monkeypatch):
    """Point the home directory at an empty temp dir and chdir into it."""
    home = temp_dir / "home"
    work = temp_dir / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    return work
