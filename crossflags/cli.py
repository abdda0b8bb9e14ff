"""
Command-line interface for crossflags.

The first argument names the target OS; the remaining arguments are
parsed into the flags for that target and printed as JSON for the build
logic to consume.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import List, Optional

from .config import TargetFlags
from .errors import CrossFlagsError
from .flags import common_flags_from_namespace, new_common_flags, register_target_arch
from .logging_utils import configure_logging
from .registry import FlagRegistry
from .targets import SUPPORTED_TARGETS, get_target, resolve_target_arch

LOG = logging.getLogger(__name__)

PROG = "crossflags"


def usage() -> str:
    return (
        f"usage: {PROG} <target> [options]\n"
        f"\n"
        f"Supported targets: {', '.join(SUPPORTED_TARGETS)}\n"
        f"Run '{PROG} <target> -help' for the target options.\n"
    )


def parse_target_flags(target_name: str, argv: List[str]) -> TargetFlags:
    """
    Build a fresh registry for ``target_name`` and parse ``argv`` with it.

    Raises CrossFlagsError when defaults cannot be resolved or an
    architecture is not supported; argparse errors exit with status 2.
    """

    target = get_target(target_name)
    registry = FlagRegistry(
        prog=f"{PROG} {target.name}",
        description=f"Build the application for {target.name}.",
    )
    new_common_flags(registry)
    register_target_arch(registry, target)

    namespace = registry.parse(argv)
    common = common_flags_from_namespace(namespace)

    return TargetFlags(
        target=target.name,
        target_arch=resolve_target_arch(target, list(namespace.target_arch)),
        common=common,
    )


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        sys.stderr.write(usage())
        return 2
    if argv[0] in ("-h", "-help", "--help"):
        sys.stdout.write(usage())
        return 0

    target_name, rest = argv[0], list(argv[1:])

    try:
        flags = parse_target_flags(target_name, rest)
        configure_logging(debug=flags.common.debug, silent=flags.common.silent)
        LOG.info("building %s for %s", flags.target, ", ".join(flags.target_arch))
        print(json.dumps(flags.to_dict(), indent=2))
    except KeyboardInterrupt:
        return 130
    except CrossFlagsError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
