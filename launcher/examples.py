"""
Example discovery.

Follows cargo's auto-discovery rules: every examples/<name>.rs is an example,
and so is every examples/<name>/ directory containing a main.rs. Directories
without a main.rs (shared modules such as examples/common/) are skipped.
"""

from pathlib import Path
from typing import List, Union

from utils.logger import setup_logger

logger = setup_logger(__name__)


def discover_examples(project_dir: Union[str, Path], examples_dir: Union[str, Path] = "examples") -> List[str]:
    """
    List the example names available in a project.

    Args:
        project_dir: Project root
        examples_dir: Example sources, relative to project_dir

    Returns:
        Sorted example names; empty if the directory does not exist
    """
    root = Path(project_dir) / examples_dir
    if not root.is_dir():
        logger.debug(f"No examples directory at {root}")
        return []

    names = set()
    for entry in root.iterdir():
        if entry.is_file() and entry.suffix == ".rs":
            names.add(entry.stem)
        elif entry.is_dir() and (entry / "main.rs").is_file():
            names.add(entry.name)

    logger.debug(f"Found {len(names)} examples in {root}")
    return sorted(names)
