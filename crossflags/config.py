"""
Configuration model for crossflags.

The CLI builds these dataclasses once from the parsed command line and
hands them to the build logic; they are frozen so nothing downstream
rewrites the user's choices.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CommonFlags:
    """
    Flags shared between all build commands.

    env holds KEY=VALUE entries and tags the additional build tags, both
    in the order they were given.
    """

    app_id: str
    cache_dir: str
    docker_image: str = ""
    env: List[str] = field(default_factory=list)
    icon: str = ""
    ldflags: str = ""
    tags: List[str] = field(default_factory=list)
    no_cache: bool = False
    no_strip_debug: bool = False
    output: str = ""
    root_dir: str = ""
    silent: bool = False
    debug: bool = False
    pull: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TargetFlags:
    """Flags for one target OS: the common ones plus the architectures to build."""

    target: str
    target_arch: List[str]
    common: CommonFlags

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "target_arch": list(self.target_arch),
            **self.common.to_dict(),
        }
