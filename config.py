"""
Configuration settings for the example render launcher.
Contains paths, build tool settings, and logging parameters.

Every setting can be overridden from the environment or a .env file
in the working directory (see .env.example).
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ------------------------------------------------------------
# File paths (directories, not individual files)
# ------------------------------------------------------------
OUTPUT_DIR = os.getenv("LAUNCHER_OUTPUT_DIR", "output")  # Must already exist, never created
PROJECT_DIR = os.getenv("LAUNCHER_PROJECT_DIR", ".")     # Working directory of the build tool
EXAMPLES_DIR = os.getenv("LAUNCHER_EXAMPLES_DIR", "examples")  # Relative to PROJECT_DIR
TARGET_DIR = os.getenv("CARGO_TARGET_DIR", "target")     # Relative to PROJECT_DIR

# ------------------------------------------------------------
# Build tool settings
# ------------------------------------------------------------
BUILD_TOOL = os.getenv("LAUNCHER_BUILD_TOOL", "cargo")
DEFAULT_PROFILE = os.getenv("LAUNCHER_PROFILE", "dev-raytrace")

# Options: "run", "release", or "build-run"
# - run: build and run under DEFAULT_PROFILE, text PPM output
# - release: build and run with release optimizations, text PPM output
# - build-run: build first, then execute the compiled example, binary PNG output
DEFAULT_VARIANT = os.getenv("LAUNCHER_VARIANT", "run")

# Open the finished image with Pillow and log its format and size
INSPECT_OUTPUT = os.getenv("LAUNCHER_INSPECT_OUTPUT", "True").lower() in ("true", "1")

# ------------------------------------------------------------
# Logging
# ------------------------------------------------------------
LOG_DIR = os.getenv("LAUNCHER_LOG_DIR", "data/logs")
LOG_LEVEL = os.getenv("LAUNCHER_LOG_LEVEL", "INFO")
