"""
Frontmatter parsing for the bundled skill using python-frontmatter.

Only reads metadata; the skill bundle itself is copied verbatim.
"""

from pathlib import Path
from typing import Optional

import frontmatter


def parse_file(file_path: Path) -> tuple[dict, str]:
    """
    Parse YAML frontmatter from a markdown file.

    Args:
        file_path: Path to the markdown file

    Returns:
        Tuple of (frontmatter dict, body content)
    """
    try:
        post = frontmatter.load(file_path)
        return dict(post.metadata), post.content
    except Exception:
        # Unreadable or malformed frontmatter: no metadata, raw content
        try:
            return {}, file_path.read_text(encoding="utf-8")
        except OSError:
            return {}, ""


def get_description(file_path: Path) -> Optional[str]:
    """
    Get the description field from a file's frontmatter.

    Returns:
        Description string or None if missing or unreadable
    """
    if not file_path.exists():
        return None
    metadata, _ = parse_file(file_path)
    description = metadata.get("description")
    return str(description).strip() if description else None
