"""
main:
    Main CLI entry point for ulink-setup
"""

import sys

import click

from ulink_setup import __version__, ui
from ulink_setup.config import SKILL_SOURCE, get_home
from ulink_setup.core.onboarding import run_onboarding
from ulink_setup.exceptions import SetupError
from ulink_setup.platforms import PLATFORM_CLASSES, get_platforms


@click.command(name="ulink-setup")
@click.option("-v", "--version", is_flag=True, help="Show version")
@click.option(
    "-p", "--platform", "platforms",
    multiple=True,
    metavar="ID",
    help=(
        "Set up a platform without prompting (repeatable). One of: "
        + ", ".join(cls.id for cls in PLATFORM_CLASSES)
    ),
)
def main(version: bool, platforms: tuple[str, ...]):
    """
    ulink-setup - Configure AI coding assistants for ULink

    Detects Claude Code, Cursor and Antigravity, lets you pick which to
    configure, and installs the ULink MCP server and onboarding skill.

    \b
    Examples:
        ulink-setup                         # Interactive selection
        ulink-setup -p cursor -p claude-code
    """
    if version:
        ui.console.print(f"ulink-setup {__version__}")
        return

    if not platforms and not sys.stdin.isatty():
        ui.error("Interactive selection needs a terminal")
        ui.hint("Pass --platform <id> to choose tools without prompting")
        raise SystemExit(1)

    registry = get_platforms(get_home(), SKILL_SOURCE)
    try:
        run_onboarding(
            registry,
            skill_source=SKILL_SOURCE,
            preselected=list(platforms) if platforms else None,
        )
    except (SetupError, OSError) as e:
        ui.error(f"Setup failed: {e}", prefix=False)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
