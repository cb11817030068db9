"""Cursor platform implementation."""

from __future__ import annotations

from .base import McpSkillPlatform


class CursorPlatform(McpSkillPlatform):
    """Cursor: ~/.cursor/mcp.json plus ~/.cursor/skills/."""

    id = "cursor"
    name = "Cursor"
    BASE_DIR = (".cursor",)
    CONFIG_FILE = "mcp.json"
    COMMAND = "cursor"
