"""Shared fixtures for the nconfig test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from nconfig.store import ConfigStore


@pytest.fixture
def store() -> ConfigStore:
    """An empty store with default options."""
    return ConfigStore()


@pytest.fixture
def sectioned_store() -> ConfigStore:
    """A store holding the graphics/audio example keys."""
    s = ConfigStore()
    s.set("graphics.width", 1920)
    s.set("graphics.height", 1080)
    s.set("audio.volume", 75)
    s.set("audio.enabled", True)
    return s


@pytest.fixture
def sample_conf(tmp_path: Path) -> Path:
    """A config file exercising comments, sections and malformed lines."""
    path = tmp_path / "sample.conf"
    path.write_text(
        textwrap.dedent("""\
            # comment line, ignored
            top = level

            [section_name]
            key = value
            another_key = 1, 2, 3
            no separator here
              # indented comment

            [other_section]
            flag = true
            equation = a=b=c
        """)
    )
    return path
