"""
Declaration of the flags shared by every build command.
"""

from __future__ import annotations

import argparse
from typing import Optional

from .config import CommonFlags
from .defaults import Defaults, resolve_defaults
from .list_flag import ListFlagValue, env_flag, tags_flag, target_arch_flag
from .registry import FlagRegistry
from .targets import ALL_ARCH, Target


def new_common_flags(registry: FlagRegistry, defaults: Optional[Defaults] = None) -> None:
    """
    Declare all the shared options on ``registry``.

    Defaults are resolved first; if that fails nothing is registered.
    """

    if defaults is None:
        defaults = resolve_defaults()

    registry.register_string("app-id", "app_id", defaults.output, "Application ID used for distribution")
    registry.register_string("cache", "cache_dir", defaults.cache_dir, "Directory used to share/cache sources and dependencies")
    registry.register_bool("no-cache", "no_cache", "Do not use the go build cache")
    registry.register_list(
        "env",
        "env",
        env_flag(),
        "List of additional env variables specified as KEY=VALUE and separated by comma",
    )
    registry.register_string("icon", "icon", defaults.icon, "Application icon used for distribution")
    registry.register_string("image", "docker_image", "", "Custom docker image to use for build")
    registry.register_string("ldflags", "ldflags", "", "Additional flags to pass to the external linker")
    registry.register_list("tags", "tags", tags_flag(), "List of additional build tags separated by comma")
    registry.register_bool("no-strip-debug", "no_strip_debug", "Do not strip debug information from binaries")
    registry.register_string("output", "output", defaults.output, "Named output file")
    registry.register_string("dir", "root_dir", defaults.work_dir, "App root directory")
    registry.register_bool("silent", "silent", "Silent mode")
    registry.register_bool("debug", "debug", "Debug mode")
    registry.register_bool("pull", "pull", "Attempt to pull a newer version of the docker image")


def register_target_arch(registry: FlagRegistry, target: Target) -> ListFlagValue:
    value = target_arch_flag(default=[target.default_arch])
    registry.register_list(
        "arch",
        "target_arch",
        value,
        "List of target architecture to build separated by comma. "
        f"Supported arch: {','.join(target.architectures)} ({ALL_ARCH} for all)",
    )
    return value


def common_flags_from_namespace(namespace: argparse.Namespace) -> CommonFlags:
    return CommonFlags(
        app_id=namespace.app_id,
        cache_dir=namespace.cache_dir,
        docker_image=namespace.docker_image,
        env=namespace.env.values,
        icon=namespace.icon,
        ldflags=namespace.ldflags,
        tags=namespace.tags.values,
        no_cache=namespace.no_cache,
        no_strip_debug=namespace.no_strip_debug,
        output=namespace.output,
        root_dir=namespace.root_dir,
        silent=namespace.silent,
        debug=namespace.debug,
        pull=namespace.pull,
    )
