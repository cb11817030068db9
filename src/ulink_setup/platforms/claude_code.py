"""Claude Code platform implementation.

Claude Code ships its own plugin manager, so setup delegates to
`claude plugin ...` instead of writing config files. The plugin bundles
both the MCP server and the onboarding skill.
"""

from __future__ import annotations

import subprocess

from rich.markup import escape

import ulink_setup.config as config
from ulink_setup import ui
from ulink_setup.exceptions import PluginInstallError
from ulink_setup.utils import command_exists

from .base import Platform

MARKETPLACE_ADD = ["claude", "plugin", "marketplace", "add", config.PLUGIN_MARKETPLACE]
PLUGIN_INSTALL = ["claude", "plugin", "install", config.PLUGIN_NAME]


def _run(argv: list[str]) -> None:
    """Run a claude subcommand with the terminal attached."""
    try:
        subprocess.run(argv, check=True)
    except subprocess.CalledProcessError as e:
        raise PluginInstallError(ClaudeCodePlatform.name, argv, f"exit code {e.returncode}") from e
    except OSError as e:
        raise PluginInstallError(ClaudeCodePlatform.name, argv, str(e)) from e


class ClaudeCodePlatform(Platform):
    """Target for Claude Code, installed through its plugin marketplace."""

    id = "claude-code"
    name = "Claude Code"

    def detect(self) -> bool:
        return command_exists("claude")

    def setup(self) -> None:
        ui.info("Installing ULink plugin (includes MCP server + onboarding skill)...")
        try:
            ui.info("Adding marketplace...")
            try:
                _run(MARKETPLACE_ADD)
            except PluginInstallError:
                # Marketplace may already be added
                pass

            ui.info("Installing plugin...")
            _run(PLUGIN_INSTALL)
            ui.success("Plugin installed (MCP server + onboarding skill).")
        except PluginInstallError as e:
            ui.warning(escape(str(e)))
            ui.info("Failed to install plugin automatically. You can install it manually:")
            ui.command(MARKETPLACE_ADD)
            ui.command(PLUGIN_INSTALL)

    def next_steps(self) -> list[str]:
        return [
            f"Restart {self.name}",
            f"Run /{config.SKILL_NAME} in your project",
        ]
