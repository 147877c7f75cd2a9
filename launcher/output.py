"""
Output file naming and writing.

Files are named <output_dir>/<example>-<epoch-seconds>.<ext>. The output
directory is expected to exist; it is never created here.
"""

import time
from pathlib import Path
from typing import IO, Union

from utils.logger import setup_logger

logger = setup_logger(__name__)


def epoch_seconds() -> int:
    """Whole seconds since 1970-01-01T00:00:00Z."""
    return int(time.time())


def output_path(example: str, timestamp: int, extension: str, output_dir: Union[str, Path]) -> Path:
    """Build the output file path for one invocation."""
    return Path(output_dir) / f"{example}-{timestamp}.{extension}"


def open_output(path: Path, binary: bool) -> IO:
    """
    Open the output file for writing.

    Text files are UTF-8 with newline translation disabled and surrogateescape
    errors, so every captured byte and line ending reaches the disk unchanged. A missing parent directory raises
    FileNotFoundError.
    """
    if path.exists():
        logger.warning(f"Overwriting existing output file: {path}")
    if binary:
        return open(path, "wb")
    return open(path, "w", encoding="utf-8", errors="surrogateescape", newline="")


def write_output(handle: IO, data: bytes, binary: bool) -> int:
    """
    Write a captured stream to an open output file.

    Args:
        handle: File returned by open_output
        data: Captured standard output of the example
        binary: Write raw bytes instead of decoded text

    Returns:
        Number of bytes captured
    """
    if binary:
        handle.write(data)
    else:
        handle.write(data.decode("utf-8", "surrogateescape"))
    return len(data)
