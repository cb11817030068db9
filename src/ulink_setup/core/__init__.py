"""
Core installer logic for ulink-setup.
"""

from ulink_setup.core.installer import copy_skill, write_mcp_config

__all__ = [
    "copy_skill",
    "write_mcp_config",
]
