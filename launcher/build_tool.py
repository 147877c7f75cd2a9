"""
Command construction for the external build tool.

Builds argv lists only; nothing here starts a process. The tool is cargo by
default, but any command line with the same subcommands can be configured
through BUILD_TOOL (for example a wrapper script or `cross`).
"""

import shlex
import sys
from pathlib import Path
from typing import List, Optional

from launcher.variants import LaunchVariant

# Built-in profiles whose artifacts do not live under a directory of their own name
PROFILE_DIRS = {
    "dev": "debug",
    "test": "debug",
    "release": "release",
    "bench": "release",
}


def tool_command(build_tool: str) -> List[str]:
    """Split the configured build tool into argv, e.g. "cargo +nightly"."""
    argv = shlex.split(build_tool)
    if not argv:
        raise ValueError("Build tool command is empty")
    return argv


def _profile_args(profile: Optional[str], variant: LaunchVariant) -> List[str]:
    if variant.release_only:
        return ["--release"]
    return ["--profile", profile]


def run_command(example: str, profile: Optional[str], variant: LaunchVariant, build_tool: str) -> List[str]:
    """argv that builds the example and runs it in a single tool invocation."""
    return tool_command(build_tool) + ["run"] + _profile_args(profile, variant) + ["--example", example]


def build_command(example: str, profile: Optional[str], variant: LaunchVariant, build_tool: str) -> List[str]:
    """argv that only builds the example."""
    return tool_command(build_tool) + ["build"] + _profile_args(profile, variant) + ["--example", example]


def profile_dir(profile: str) -> str:
    """Name of the directory under the target dir that holds a profile's artifacts."""
    return PROFILE_DIRS.get(profile, profile)


def example_binary(example: str, profile: str, target_dir: Path) -> Path:
    """
    Path of a compiled example, e.g. target/dev-raytrace/examples/cornell_box.

    Args:
        example: Example name
        profile: Profile the example was built with
        target_dir: Build artifact root

    Returns:
        Path to the executable
    """
    name = f"{example}.exe" if sys.platform == "win32" else example
    return Path(target_dir) / profile_dir(profile) / "examples" / name
