"""
exceptions:
    Custom exception hierarchy for ulink-setup.

All installer-specific exceptions inherit from SetupError, so the CLI layer
can catch them with a single except clause and turn them into a failure
message and a non-zero exit code.

Filesystem errors (permissions, disk full) are not wrapped: they propagate
as OSError and are handled at the same CLI boundary.
"""

from typing import Optional


class SetupError(Exception):
    """Base exception for all ulink-setup errors."""

    pass


# =============================================================================
# Platform-related exceptions
# =============================================================================


class PluginInstallError(SetupError):
    """Raised when a host tool's own plugin installer fails."""

    def __init__(
        self,
        platform_name: str,
        command: list[str],
        reason: Optional[str] = None,
    ):
        self.platform_name = platform_name
        self.command = command
        self.reason = reason

        parts = [f"Failed to run '{' '.join(command)}' for {platform_name}"]
        if reason:
            parts.append(f"reason: {reason}")
        super().__init__(" - ".join(parts))


# =============================================================================
# Configuration exceptions
# =============================================================================


class ConfigurationError(SetupError):
    """Raised when there's a configuration problem."""

    pass


class UnknownPlatformError(ConfigurationError):
    """Raised when an unknown platform id is requested."""

    def __init__(self, platform_id: str, supported: list[str]):
        self.platform_id = platform_id
        self.supported = supported
        message = f"Unknown platform: {platform_id}. Supported: {supported}"
        super().__init__(message)
