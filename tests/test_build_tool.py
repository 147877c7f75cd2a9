"""Tests for build tool command construction."""

import sys
from pathlib import Path

import pytest
from launcher.build_tool import (
    build_command,
    example_binary,
    profile_dir,
    run_command,
    tool_command,
)
from launcher.variants import BUILD_RUN, RELEASE, RUN


def test_run_command_uses_profile():
    cmd = run_command("ch01", "dev-raytrace", RUN, "cargo")
    assert cmd == ["cargo", "run", "--profile", "dev-raytrace", "--example", "ch01"]


def test_release_variant_ignores_profile():
    """Test release-only variant always builds with --release."""
    cmd = run_command("ch01", "dev-raytrace", RELEASE, "cargo")
    assert cmd == ["cargo", "run", "--release", "--example", "ch01"]
    assert "--profile" not in cmd


def test_build_command():
    cmd = build_command("earth", "release", BUILD_RUN, "cargo")
    assert cmd == ["cargo", "build", "--profile", "release", "--example", "earth"]


def test_tool_command_splits_arguments():
    assert tool_command("cargo +nightly") == ["cargo", "+nightly"]
    assert tool_command("'/opt/my tools/cargo'") == ["/opt/my tools/cargo"]


def test_empty_tool_command_rejected():
    with pytest.raises(ValueError):
        tool_command("   ")


@pytest.mark.parametrize("profile,expected", [
    ("dev", "debug"),
    ("test", "debug"),
    ("release", "release"),
    ("bench", "release"),
    ("dev-raytrace", "dev-raytrace"),
])
def test_profile_dir(profile, expected):
    assert profile_dir(profile) == expected


def test_example_binary_path():
    path = example_binary("cornell_box", "dev", Path("target"))
    name = "cornell_box.exe" if sys.platform == "win32" else "cornell_box"
    assert path == Path("target") / "debug" / "examples" / name
