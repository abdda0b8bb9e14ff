"""
Target operating systems and their architectures.

The -arch flag only collects strings; this module checks them against
what each target OS can be built for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .errors import CrossFlagsError, UnsupportedArchError

ALL_ARCH = "*"


@dataclass(frozen=True)
class Target:
    name: str
    architectures: Tuple[str, ...]
    default_arch: str


SUPPORTED_TARGETS: Dict[str, Target] = {
    "linux": Target("linux", ("amd64", "386", "arm", "arm64"), "amd64"),
    "windows": Target("windows", ("amd64", "386", "arm64"), "amd64"),
    "freebsd": Target("freebsd", ("amd64", "arm64"), "amd64"),
    "darwin": Target("darwin", ("amd64", "arm64"), "amd64"),
}


def get_target(name: str) -> Target:
    try:
        return SUPPORTED_TARGETS[name]
    except KeyError:
        raise CrossFlagsError(
            f"unsupported target OS {name!r} (supported: {', '.join(SUPPORTED_TARGETS)})"
        ) from None


def resolve_target_arch(target: Target, values: Sequence[str]) -> List[str]:
    """
    Turn the raw -arch values into the architectures to build, in order.

    "*" selects every architecture the target supports. Repeated entries
    are built once.
    """

    resolved: List[str] = []
    for arch in values:
        if arch == ALL_ARCH:
            return list(target.architectures)
        if arch not in target.architectures:
            raise UnsupportedArchError(target.name, arch, target.architectures)
        if arch not in resolved:
            resolved.append(arch)
    return resolved
