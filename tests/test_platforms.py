"""Tests for platform implementations and the platform registry.

This module tests:
- Registry: order, ids, lookup
- CursorPlatform / AntigravityPlatform: paths, detection, setup writes
- ClaudeCodePlatform: detection, plugin install, manual fallback
"""

import json
import subprocess
from pathlib import Path
from unittest.mock import call, patch

import pytest

from ulink_setup.config import MCP_ENTRY
from ulink_setup.exceptions import UnknownPlatformError
from ulink_setup.platforms import (
    AntigravityPlatform,
    ClaudeCodePlatform,
    CursorPlatform,
    Platform,
    get_platform,
    get_platforms,
)
from ulink_setup.platforms.claude_code import MARKETPLACE_ADD, PLUGIN_INSTALL


# =============================================================================
# Registry
# =============================================================================


class TestRegistry:
    """Tests for get_platforms() and get_platform()."""

    def test_order(self, home):
        registry = get_platforms(home)
        assert list(registry.keys()) == ["claude-code", "cursor", "antigravity"]

    def test_all_implement_interface(self, home):
        for platform_id, platform in get_platforms(home).items():
            assert isinstance(platform, Platform)
            assert platform.id == platform_id
            assert platform.name

    def test_home_passed_through(self, home, skill_source):
        registry = get_platforms(home, skill_source)
        assert all(p.home == home for p in registry.values())
        assert all(p.skill_source == skill_source for p in registry.values())

    def test_get_platform(self, home):
        registry = get_platforms(home)
        assert isinstance(get_platform(registry, "cursor"), CursorPlatform)

    def test_get_unknown_platform(self, home):
        registry = get_platforms(home)
        with pytest.raises(UnknownPlatformError) as exc_info:
            get_platform(registry, "vim")
        assert "vim" in str(exc_info.value)
        assert exc_info.value.supported == ["claude-code", "cursor", "antigravity"]


# =============================================================================
# MCP + skill platforms
# =============================================================================


class TestCursorPlatform:
    """Tests for CursorPlatform."""

    def test_paths(self, home):
        platform = CursorPlatform(home)
        assert platform.name == "Cursor"
        assert platform.config_path == home / ".cursor" / "mcp.json"
        assert platform.skill_dir == home / ".cursor" / "skills" / "setup-ulink"

    def test_detect_by_directory(self, home):
        (home / ".cursor").mkdir()
        with patch("ulink_setup.platforms.base.command_exists") as mock_exists:
            assert CursorPlatform(home).detect() is True
        mock_exists.assert_not_called()

    def test_detect_by_command(self, home):
        with patch("ulink_setup.platforms.base.command_exists", return_value=True) as mock_exists:
            assert CursorPlatform(home).detect() is True
        mock_exists.assert_called_once_with("cursor")

    def test_not_detected(self, home):
        with patch("ulink_setup.platforms.base.command_exists", return_value=False):
            assert CursorPlatform(home).detect() is False

    def test_setup_writes_config_and_skill(self, home, skill_source):
        platform = CursorPlatform(home, skill_source)

        platform.setup()

        config = json.loads(platform.config_path.read_text())
        assert config["mcpServers"]["ulink"] == MCP_ENTRY
        assert (platform.skill_dir / "SKILL.md").exists()

    def test_setup_without_skill_source(self, home, tmp_path):
        platform = CursorPlatform(home, tmp_path / "missing")

        platform.setup()

        assert platform.config_path.exists()
        assert not platform.skill_dir.exists()

    def test_next_steps(self, home):
        steps = CursorPlatform(home).next_steps()
        assert steps[0] == "Restart Cursor"
        assert "setup ulink" in steps[1]


class TestAntigravityPlatform:
    """Tests for AntigravityPlatform."""

    def test_paths(self, home):
        platform = AntigravityPlatform(home)
        base = home / ".gemini" / "antigravity"
        assert platform.name == "Antigravity"
        assert platform.config_path == base / "mcp_config.json"
        assert platform.skill_dir == base / "skills" / "setup-ulink"

    def test_detect_by_directory(self, home):
        (home / ".gemini" / "antigravity").mkdir(parents=True)
        assert AntigravityPlatform(home).detect() is True

    def test_gemini_dir_alone_not_detected(self, home):
        (home / ".gemini").mkdir()
        with patch("ulink_setup.platforms.base.command_exists", return_value=False) as mock_exists:
            assert AntigravityPlatform(home).detect() is False
        mock_exists.assert_called_once_with("antigravity")

    def test_setup_preserves_existing_servers(self, home, skill_source):
        platform = AntigravityPlatform(home, skill_source)
        platform.config_path.parent.mkdir(parents=True)
        platform.config_path.write_text(json.dumps({
            "mcpServers": {"other": {"command": "x", "args": []}},
        }))

        platform.setup()

        servers = json.loads(platform.config_path.read_text())["mcpServers"]
        assert servers["other"] == {"command": "x", "args": []}
        assert servers["ulink"] == MCP_ENTRY


# =============================================================================
# Claude Code
# =============================================================================


class TestClaudeCodePlatform:
    """Tests for ClaudeCodePlatform."""

    def test_no_config_paths(self, home):
        platform = ClaudeCodePlatform(home)
        assert platform.config_path is None
        assert platform.skill_dir is None

    def test_detect(self, home):
        with patch("ulink_setup.platforms.claude_code.command_exists", return_value=True) as mock_exists:
            assert ClaudeCodePlatform(home).detect() is True
        mock_exists.assert_called_once_with("claude")

    def test_setup_runs_plugin_commands(self, home, capsys):
        with patch("ulink_setup.platforms.claude_code.subprocess.run") as mock_run:
            ClaudeCodePlatform(home).setup()

        assert mock_run.call_args_list == [
            call(["claude", "plugin", "marketplace", "add", "FlywheelStudio/ulink-ai-setup"], check=True),
            call(["claude", "plugin", "install", "ulink-onboarding@ulink"], check=True),
        ]
        assert "Plugin installed" in capsys.readouterr().out

    def test_marketplace_already_added(self, home, capsys):
        """A failing marketplace add is ignored and install still runs."""
        def fake_run(argv, check):
            if argv == MARKETPLACE_ADD:
                raise subprocess.CalledProcessError(1, argv)

        with patch("ulink_setup.platforms.claude_code.subprocess.run", side_effect=fake_run) as mock_run:
            ClaudeCodePlatform(home).setup()

        assert mock_run.call_count == 2
        out = capsys.readouterr().out
        assert "Plugin installed" in out
        assert "manually" not in out

    def test_install_failure_prints_fallback(self, home, capsys):
        def fake_run(argv, check):
            if argv == PLUGIN_INSTALL:
                raise subprocess.CalledProcessError(2, argv)

        with patch("ulink_setup.platforms.claude_code.subprocess.run", side_effect=fake_run):
            ClaudeCodePlatform(home).setup()

        out = capsys.readouterr().out
        assert "Failed to install plugin automatically" in out
        assert "claude plugin marketplace add FlywheelStudio/ulink-ai-setup" in out
        assert "claude plugin install ulink-onboarding@ulink" in out
        assert "Plugin installed" not in out

    def test_claude_missing_prints_fallback(self, home, capsys):
        with patch("ulink_setup.platforms.claude_code.subprocess.run",
                   side_effect=FileNotFoundError("claude")):
            ClaudeCodePlatform(home).setup()

        assert "install it manually" in capsys.readouterr().out

    def test_failure_reason_printed_literally(self, home, capsys):
        """Error text with square brackets is not treated as console markup."""
        with patch("ulink_setup.platforms.claude_code.subprocess.run",
                   side_effect=OSError("[Errno 2] not found: [bold]claude")):
            ClaudeCodePlatform(home).setup()

        out = capsys.readouterr().out
        assert "[Errno 2] not found: [bold]claude" in out
        assert "install it manually" in out

    def test_setup_writes_nothing(self, home):
        with patch("ulink_setup.platforms.claude_code.subprocess.run"):
            ClaudeCodePlatform(home).setup()
        assert list(home.iterdir()) == []

    def test_next_steps(self, home):
        assert ClaudeCodePlatform(home).next_steps() == [
            "Restart Claude Code",
            "Run /setup-ulink in your project",
        ]
