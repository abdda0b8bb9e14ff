"""
crossflags: command-line configuration parsing for cross-compilation
builds.

The package declares the flags shared by every build command, the
comma-separated list flags (env assignments, target architectures and
build tags) and the default values those flags start from.
"""
