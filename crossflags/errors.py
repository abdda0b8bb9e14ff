"""
Custom exception types used across crossflags.

Defining explicit error classes makes it easier for the CLI to
distinguish between user-facing failures and unexpected bugs.
"""

from __future__ import annotations

from typing import Optional, Sequence


class CrossFlagsError(Exception):
    """Base class for all crossflags specific errors."""


class FlagError(CrossFlagsError):
    """Raised when a flag value cannot be accepted."""


class FlagAlreadySetError(FlagError):
    """Raised when a multi-value flag is given again after holding several values."""

    def __init__(self) -> None:
        super().__init__("flag already set")


class MalformedEnvEntryError(FlagError):
    """Raised when an env list entry is not KEY=VALUE or KEY=."""

    MESSAGE = "env var must be defined as KEY=VALUE or KEY="

    def __init__(self, entry: str) -> None:
        self.entry = entry
        super().__init__(f"{self.MESSAGE} (got {entry!r})")


class FlagRegistrationError(CrossFlagsError):
    """Raised when an option is declared twice on the same registry."""


class DefaultResolutionError(CrossFlagsError):
    """Raised when a default flag value cannot be determined."""


class UnsupportedArchError(CrossFlagsError):
    """Raised when an architecture is not supported by the target OS."""

    def __init__(self, target: str, arch: str, supported: Optional[Sequence[str]] = None) -> None:
        self.target = target
        self.arch = arch
        self.supported = list(supported or [])
        message = f"arch {arch!r} is not supported for {target}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)
