"""
base:
    ABC and shared base class for supported AI coding assistants.

This module provides:
- Platform ABC defining the detect/setup contract every platform implements
- McpSkillPlatform for tools configured with an MCP config file plus a
  copy of the skill bundle
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import ulink_setup.config as config
from ulink_setup.core.installer import copy_skill, write_mcp_config
from ulink_setup.utils import command_exists


# =============================================================================
# Platform ABC
# =============================================================================


class Platform(ABC):
    """Abstract base class defining the interface for a platform."""

    id: str
    name: str

    def __init__(self, home: Path, skill_source: Path = config.SKILL_SOURCE):
        self.home = home
        self.skill_source = skill_source

    @property
    def config_path(self) -> Path | None:
        """MCP config file written by setup(), or None if not applicable."""
        return None

    @property
    def skill_dir(self) -> Path | None:
        """Skill destination written by setup(), or None if not applicable."""
        return None

    @abstractmethod
    def detect(self) -> bool:
        """Return True if the tool appears to be installed."""
        ...

    @abstractmethod
    def setup(self) -> None:
        """Configure the tool for ULink."""
        ...

    def next_steps(self) -> list[str]:
        """Steps shown to the user after setup completes."""
        return [
            f"Restart {self.name}",
            'Ask the agent: "setup ulink" in your project',
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"


# =============================================================================
# McpSkillPlatform - MCP config + skill copy
# =============================================================================


class McpSkillPlatform(Platform):
    """Base for tools that read an MCP config file and a skills directory.

    Subclasses must define:
    - BASE_DIR: tool directory relative to home (e.g. (".cursor",))
    - CONFIG_FILE: MCP config filename inside BASE_DIR
    - COMMAND: executable name used as a fallback for detection
    """

    BASE_DIR: tuple[str, ...] = ()
    CONFIG_FILE: str = "mcp.json"
    COMMAND: str = ""

    @property
    def base_dir(self) -> Path:
        return self.home.joinpath(*self.BASE_DIR)

    @property
    def config_path(self) -> Path:
        return self.base_dir / self.CONFIG_FILE

    @property
    def skill_dir(self) -> Path:
        return self.base_dir / "skills" / config.SKILL_NAME

    def detect(self) -> bool:
        return self.base_dir.exists() or command_exists(self.COMMAND)

    def setup(self) -> None:
        write_mcp_config(self.config_path, self.home)
        copy_skill(self.skill_dir, self.skill_source, self.home)
