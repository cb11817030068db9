"""Shared pytest fixtures for ulink-setup tests."""

import io

import pytest
from click.testing import CliRunner
from rich.console import Console


@pytest.fixture
def cli_runner():
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def home(tmp_path):
    """Provide an empty home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def skill_source(tmp_path):
    """Create a skill bundle with SKILL.md and a nested supporting file."""
    skill_dir = tmp_path / "bundle" / "setup-ulink"
    skill_dir.mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("""---
name: setup-ulink
description: Test onboarding skill
---

# Setup ULink
""")
    references = skill_dir / "references"
    references.mkdir()
    (references / "deep-links.md").write_text("# Deep links\n")
    return skill_dir


@pytest.fixture
def terminal_console(monkeypatch):
    """Provide a console that records ANSI output as a real terminal would."""
    monkeypatch.setenv("TERM", "xterm-256color")
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=True,
        color_system="standard",
        width=80,
        soft_wrap=True,
    )
    return console
