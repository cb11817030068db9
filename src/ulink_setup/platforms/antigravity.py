"""Antigravity platform implementation."""

from __future__ import annotations

from .base import McpSkillPlatform


class AntigravityPlatform(McpSkillPlatform):
    """Antigravity: ~/.gemini/antigravity/mcp_config.json plus its skills/."""

    id = "antigravity"
    name = "Antigravity"
    BASE_DIR = (".gemini", "antigravity")
    CONFIG_FILE = "mcp_config.json"
    COMMAND = "antigravity"
