"""
Launcher: build one example, run it, and persist its standard output.

A single synchronous sequence per invocation:
1. Capture the timestamp and derive output/<example>-<timestamp>.<ext>
2. (build-run variant) Build the example; stop on a failed build
3. Open the output file, run the example, write its captured stdout

Exit codes of the build tool and of the example are passed through unchanged.
No retries, no timeouts.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel

from config import (
    BUILD_TOOL,
    DEFAULT_PROFILE,
    INSPECT_OUTPUT,
    OUTPUT_DIR,
    PROJECT_DIR,
    TARGET_DIR,
)
from launcher.build_tool import build_command, example_binary, run_command
from launcher.errors import MissingExampleError
from launcher.image_info import describe_image
from launcher.output import epoch_seconds, open_output, output_path, write_output
from launcher.variants import LaunchVariant, RUN
from utils.logger import setup_logger

logger = setup_logger(__name__)


class LaunchResult(BaseModel):
    """Outcome of one launch.

    Fields:
        example: Example that was launched
        variant: Variant name
        profile: Profile the example was built with ("release" for release-only)
        timestamp: Epoch seconds captured at invocation
        path: Output file, or None when the build step failed before it was opened
        bytes_written: Size of the captured stream
        returncode: Exit code of the failing step, or of the example run
    """
    example: str
    variant: str
    profile: str
    timestamp: int
    path: Optional[Path] = None
    bytes_written: int = 0
    returncode: int


class Launcher:
    """Builds and runs examples with the configured build tool."""

    def __init__(
        self,
        variant: LaunchVariant = RUN,
        output_dir: Union[str, Path] = OUTPUT_DIR,
        project_dir: Union[str, Path] = PROJECT_DIR,
        build_tool: str = BUILD_TOOL,
        target_dir: Union[str, Path] = TARGET_DIR,
        inspect: bool = INSPECT_OUTPUT,
    ):
        self.variant = variant
        self.output_dir = Path(output_dir)
        self.project_dir = Path(project_dir)
        self.build_tool = build_tool
        self.target_dir = self.project_dir / target_dir
        self.inspect = inspect

    def _resolve_profile(self, profile: Optional[str]) -> str:
        if self.variant.release_only:
            if profile:
                logger.warning(f"Variant '{self.variant.name}' always builds release; ignoring profile '{profile}'")
            return "release"
        return profile or DEFAULT_PROFILE

    def _build(self, example: str, profile: str) -> int:
        cmd = build_command(example, profile, self.variant, self.build_tool)
        logger.info(f"Building: {' '.join(cmd)}")
        result = subprocess.run(cmd, cwd=self.project_dir)
        if result.returncode != 0:
            logger.error(f"Build of '{example}' failed with exit code {result.returncode}")
        return result.returncode

    def _run_argv(self, example: str, profile: str) -> List[str]:
        if self.variant.separate_build:
            # Absolute: the run executes with cwd=project_dir
            return [str(example_binary(example, profile, self.target_dir).absolute())]
        return run_command(example, profile, self.variant, self.build_tool)

    def launch(self, example: str, profile: Optional[str] = None) -> LaunchResult:
        """
        Build and run an example, writing its stdout to a timestamped file.

        Args:
            example: Example name, as understood by the build tool
            profile: Build profile; DEFAULT_PROFILE when omitted, ignored by
                release-only variants

        Returns:
            LaunchResult carrying the exit code to pass on

        Raises:
            MissingExampleError: example is empty; nothing was built or run
            OSError: the output file could not be opened or written
        """
        if not example:
            raise MissingExampleError("An example name is required")

        profile = self._resolve_profile(profile)
        timestamp = epoch_seconds()
        path = output_path(example, timestamp, self.variant.extension, self.output_dir)
        logger.info(f"Launching '{example}' (variant={self.variant.name}, profile={profile}) -> {path}")

        if self.variant.separate_build:
            returncode = self._build(example, profile)
            if returncode != 0:
                return LaunchResult(
                    example=example,
                    variant=self.variant.name,
                    profile=profile,
                    timestamp=timestamp,
                    returncode=returncode,
                )

        cmd = self._run_argv(example, profile)
        with open_output(path, self.variant.binary) as handle:
            logger.info(f"Running: {' '.join(cmd)}")
            result = subprocess.run(cmd, cwd=self.project_dir, stdout=subprocess.PIPE)
            bytes_written = write_output(handle, result.stdout, self.variant.binary)

        if result.returncode != 0:
            logger.error(f"'{example}' exited with code {result.returncode}; wrote {bytes_written} bytes to {path}")
        else:
            logger.info(f"Wrote {bytes_written} bytes to {path}")
            if self.inspect:
                info = describe_image(path)
                if info:
                    logger.info(f"{path.name}: {info.format} {info.width}x{info.height} ({info.mode})")

        return LaunchResult(
            example=example,
            variant=self.variant.name,
            profile=profile,
            timestamp=timestamp,
            path=path,
            bytes_written=bytes_written,
            returncode=result.returncode,
        )
