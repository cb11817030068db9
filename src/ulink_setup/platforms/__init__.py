"""
platforms:
    Supported AI coding assistants for ulink-setup.

This module provides:
- Platform ABC defining the detect/setup contract
- Concrete implementations for each supported assistant
- get_platforms() to build the ordered registry at startup
"""

from pathlib import Path

import ulink_setup.config as config
from ulink_setup.exceptions import UnknownPlatformError

# Base classes
from ulink_setup.platforms.base import McpSkillPlatform, Platform

# Concrete platform implementations
from ulink_setup.platforms.antigravity import AntigravityPlatform
from ulink_setup.platforms.claude_code import ClaudeCodePlatform
from ulink_setup.platforms.cursor import CursorPlatform

# =============================================================================
# Platform Registry
# =============================================================================

# Registry order is the order platforms are listed and set up in
PLATFORM_CLASSES: list[type[Platform]] = [
    ClaudeCodePlatform,
    CursorPlatform,
    AntigravityPlatform,
]


def get_platforms(
    home: Path,
    skill_source: Path = config.SKILL_SOURCE,
) -> dict[str, Platform]:
    """Instantiate every registered platform, keyed by id."""
    return {cls.id: cls(home, skill_source) for cls in PLATFORM_CLASSES}


def get_platform(registry: dict[str, Platform], platform_id: str) -> Platform:
    """Get a platform by id.

    Raises:
        UnknownPlatformError: If the platform is not supported.
    """
    if platform_id not in registry:
        raise UnknownPlatformError(platform_id, list(registry.keys()))
    return registry[platform_id]


__all__ = [
    "Platform",
    "McpSkillPlatform",
    "ClaudeCodePlatform",
    "CursorPlatform",
    "AntigravityPlatform",
    "PLATFORM_CLASSES",
    "get_platforms",
    "get_platform",
]
