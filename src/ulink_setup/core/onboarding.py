"""
Onboarding orchestration.

Detects installed tools, lets the user choose which to configure, then runs
each selected platform's setup step in registry order and prints a summary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import ulink_setup.config as config
from ulink_setup import frontmatter as fm
from ulink_setup import ui
from ulink_setup.platforms import Platform, get_platform
from ulink_setup.selector import SelectableItem, checkbox

Selector = Callable[[str, list[SelectableItem]], list[int]]


def print_banner(skill_source: Optional[Path] = None) -> None:
    ui.blank()
    ui.header("ULink AI Setup")
    ui.info("==============")
    ui.blank()
    ui.info("This will configure the ULink MCP server and onboarding")
    ui.info("skill for your AI coding assistant.")
    if skill_source is not None:
        description = fm.get_description(skill_source / config.SKILL_FILE)
        if description:
            ui.blank()
            ui.kv(config.SKILL_NAME, description)
    ui.blank()


def detect_platforms(registry: dict[str, Platform]) -> list[str]:
    """Run each platform's detection once, returning detected ids in registry order."""
    return [platform_id for platform_id, platform in registry.items() if platform.detect()]


def build_items(
    registry: dict[str, Platform],
    detected: list[str],
) -> list[SelectableItem]:
    """One checklist row per platform; detected platforms start checked."""
    items = []
    for platform_id, platform in registry.items():
        is_detected = platform_id in detected
        label = platform.name + (" [dim](detected)[/dim]" if is_detected else "")
        items.append(SelectableItem(label=label, checked=is_detected))
    return items


def print_summary(platforms: list[Platform]) -> None:
    ui.header("Done! Next steps:")
    ui.rule()
    ui.blank()
    for platform in platforms:
        ui.next_steps(platform.name, platform.next_steps())

    ui.info("The AI will walk you through the rest:")
    ui.info("detecting your app, connecting to ULink, and")
    ui.info("configuring deep links automatically.")
    ui.blank()


def setup_platforms(platforms: list[Platform]) -> None:
    """Run setup for each platform sequentially.

    Filesystem errors propagate and stop the run; subprocess failures are
    handled inside the platform that delegates to an external installer.
    """
    for platform in platforms:
        ui.header(f"Setting up {platform.name}...")
        ui.rule()
        platform.setup()
        ui.blank()


def run_onboarding(
    registry: dict[str, Platform],
    select: Selector = checkbox,
    skill_source: Optional[Path] = None,
    preselected: Optional[list[str]] = None,
) -> list[str]:
    """Run the full onboarding flow.

    Args:
        registry: Platforms keyed by id, in display/setup order
        select: Interactive selector returning checked indices
        skill_source: Bundled skill, used for the banner description
        preselected: Platform ids to set up without prompting

    Returns:
        Ids of the platforms that were set up (empty if none selected)

    Raises:
        UnknownPlatformError: If preselected names an unknown platform
        OSError: If a config or skill write fails
    """
    print_banner(skill_source)

    ids = list(registry.keys())
    if preselected is not None:
        wanted = {get_platform(registry, platform_id).id for platform_id in preselected}
        selected = [platform_id for platform_id in ids if platform_id in wanted]
    else:
        detected = detect_platforms(registry)
        items = build_items(registry, detected)
        title = (
            "Select which tools to set up:"
            if detected
            else "No AI tools detected. Select which to set up:"
        )
        selected = [ids[i] for i in sorted(select(title, items))]

    if not selected:
        ui.blank()
        ui.info("No tools selected. Exiting.")
        ui.blank()
        return []

    ui.blank()
    platforms = [registry[platform_id] for platform_id in selected]
    setup_platforms(platforms)
    print_summary(platforms)
    return selected
