"""
ulink_setup:
    Configure AI coding assistants for ULink
"""

__version__ = "0.1.11"
