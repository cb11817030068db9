"""
Installer primitives used by the platform setup steps.

This module provides:
- write_mcp_config: merge the ULink MCP server entry into a JSON config file
- copy_skill: copy the bundled skill directory into a tool's skills area
"""

from __future__ import annotations

import copy
import errno
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

import ulink_setup.config as config
from ulink_setup import ui
from ulink_setup.utils import redact_home


# =============================================================================
# MCP config
# =============================================================================


def _load_config(config_path: Path, home: Path | None) -> dict[str, Any]:
    """Load a JSON config, starting fresh when it is missing or unparseable."""
    try:
        raw = config_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        return {config.MCP_SERVERS_KEY: {}}
    except UnicodeDecodeError:
        raw = None

    try:
        existing = json.loads(raw) if raw is not None else None
    except json.JSONDecodeError:
        existing = None

    if not isinstance(existing, dict):
        ui.warning(
            f"could not parse {ui.path(redact_home(config_path, home))}, starting fresh"
        )
        return {config.MCP_SERVERS_KEY: {}}

    if not isinstance(existing.get(config.MCP_SERVERS_KEY), dict):
        existing[config.MCP_SERVERS_KEY] = {}
    return existing


def _write_json(dest_path: Path, data: dict[str, Any]) -> None:
    """Replace dest_path in full with pretty-printed JSON.

    A symlinked dest_path is written through to its target. An existing
    file the user cannot write raises PermissionError instead of being
    replaced.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    target = dest_path.resolve()
    if target.exists() and not os.access(target, os.W_OK):
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(dest_path))

    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        # mkstemp creates 0600; keep the existing file's mode
        if target.exists():
            shutil.copymode(target, tmp_name)
        else:
            os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def write_mcp_config(config_path: Path, home: Path | None = None) -> None:
    """Merge the ULink MCP server entry into a JSON config file.

    Other top-level keys and other servers are preserved. An existing ulink
    entry is overwritten with the pinned entry. Safe to call repeatedly.

    Args:
        config_path: Path to the tool's MCP config (e.g. ~/.cursor/mcp.json)
        home: Home directory used to shorten paths in output

    Raises:
        OSError: If the directory or file cannot be written
    """
    existing_config = _load_config(config_path, home)
    servers = existing_config[config.MCP_SERVERS_KEY]

    if config.MCP_SERVER_NAME in servers:
        ui.info("MCP server already configured, updating...")

    servers[config.MCP_SERVER_NAME] = copy.deepcopy(config.MCP_ENTRY)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    _write_json(config_path, existing_config)
    ui.success(f"MCP config written to {ui.path(redact_home(config_path, home))}")


# =============================================================================
# Skill bundle
# =============================================================================


def copy_skill(dest_dir: Path, skill_source: Path, home: Path | None = None) -> None:
    """Copy the skill bundle into dest_dir, overwriting conflicting files.

    Does nothing (beyond a warning) when skill_source is missing.

    Raises:
        OSError: If the destination cannot be created or written
    """
    if not skill_source.exists():
        ui.warning("skill source not found, skipping skill install")
        return

    dest_dir.mkdir(parents=True, exist_ok=True)
    shutil.copytree(skill_source, dest_dir, dirs_exist_ok=True)
    ui.success(f"Skill installed to {ui.path(redact_home(dest_dir, home))}")
