"""Read-only inspection of rendered output files with Pillow."""

from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel

from utils.logger import setup_logger

logger = setup_logger(__name__)


class ImageInfo(BaseModel):
    """What Pillow sees in an output file."""
    format: Optional[str] = None
    width: int
    height: int
    mode: str


def describe_image(path: Path) -> Optional[ImageInfo]:
    """
    Identify an image file without modifying it.

    :param path: File to open.
    :return: ImageInfo, or None if Pillow cannot decode the file.
    """
    try:
        with Image.open(path) as img:
            info = ImageInfo(format=img.format, width=img.width, height=img.height, mode=img.mode)
    except UnidentifiedImageError as e:
        logger.warning(f"Could not decode {path} as an image: {e}")
        return None

    logger.debug(f"{path}: {info.format} {info.width}x{info.height} {info.mode}")
    return info
