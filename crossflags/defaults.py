"""
Default values for the shared flags.

Defaults depend on the host: the current directory names the output,
the icon is looked up in the project root and the cache lives in the
user's cache directory. Any failure here aborts flag setup as a whole.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import DefaultResolutionError

LOG = logging.getLogger(__name__)

CACHE_DIR_NAME = "crossflags"
DEFAULT_ICON_NAME = "Icon.png"


@dataclass(frozen=True)
class Defaults:
    """Host-derived default values used when declaring the shared flags."""

    output: str
    work_dir: str
    cache_dir: str
    icon: str


def default_work_dir() -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        raise DefaultResolutionError(f"cannot get the path for current directory: {exc}") from exc


def default_output(work_dir: Optional[str] = None) -> str:
    """Name the output after the directory the command runs in."""

    if work_dir is None:
        work_dir = default_work_dir()
    return Path(work_dir).name


def user_cache_dir() -> str:
    """
    Return the per-user cache directory of the host.

    Linux and BSD use $XDG_CACHE_HOME, falling back to $HOME/.cache;
    macOS uses $HOME/Library/Caches and Windows uses %LocalAppData%.
    """

    if sys.platform.startswith("win"):
        local_app_data = os.environ.get("LocalAppData")
        if not local_app_data:
            raise DefaultResolutionError("cannot determine the user cache directory: %LocalAppData% is not defined")
        return local_app_data

    if sys.platform == "darwin":
        home = os.environ.get("HOME")
        if not home:
            raise DefaultResolutionError("cannot determine the user cache directory: $HOME is not defined")
        return str(Path(home) / "Library" / "Caches")

    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        if not os.path.isabs(xdg_cache):
            raise DefaultResolutionError("cannot determine the user cache directory: path in $XDG_CACHE_HOME is relative")
        return xdg_cache

    home = os.environ.get("HOME")
    if not home:
        raise DefaultResolutionError("cannot determine the user cache directory: neither $XDG_CACHE_HOME nor $HOME are defined")
    return str(Path(home) / ".cache")


def default_cache_dir() -> str:
    return str(Path(user_cache_dir()) / CACHE_DIR_NAME)


def default_icon(work_dir: Optional[str] = None) -> str:
    if work_dir is None:
        work_dir = default_work_dir()
    return str(Path(work_dir) / DEFAULT_ICON_NAME)


def resolve_defaults() -> Defaults:
    """Resolve every default at once; nothing is returned if any step fails."""

    work_dir = default_work_dir()
    defaults = Defaults(
        output=default_output(work_dir),
        work_dir=work_dir,
        cache_dir=default_cache_dir(),
        icon=default_icon(work_dir),
    )
    LOG.debug("resolved defaults: %s", defaults)
    return defaults
