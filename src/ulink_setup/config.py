"""
config:
    Configuration and paths for the ulink-setup installer
"""

from pathlib import Path
import os

# MCP server entry written into each tool's config
MCP_SERVER_NAME = "ulink"
MCP_PACKAGE = "@ulinkly/mcp-server@0.1.11"
MCP_SERVERS_KEY = "mcpServers"
MCP_ENTRY = {
    "command": "npx",
    "args": ["-y", MCP_PACKAGE],
}

# Only these names are ever passed to the command lookup utility
ALLOWED_COMMANDS = frozenset({
    "ulink",
    "node",
    "npx",
    "npm",
    "flutter",
    "xcodebuild",
    "keytool",
    "curl",
    "claude",
    "cursor",
    "antigravity",
})

# Skill bundle shipped with the package
SKILL_NAME = "setup-ulink"
SKILL_FILE = "SKILL.md"
SKILL_SOURCE = Path(
    os.environ.get("ULINK_SKILL_SOURCE", Path(__file__).parent / "skills" / SKILL_NAME)
)

# Claude Code plugin marketplace
PLUGIN_MARKETPLACE = "FlywheelStudio/ulink-ai-setup"
PLUGIN_NAME = "ulink-onboarding@ulink"


def get_home() -> Path:
    """Home directory the installer writes under."""
    return Path(os.environ.get("ULINK_SETUP_HOME", Path.home()))
