"""
Script variants supported by the launcher.

Each variant fixes the output extension, how the captured stream is encoded,
and whether the example is built and run in one tool invocation or built
first and then executed directly.
"""

from typing import Dict

from pydantic import BaseModel

from launcher.errors import UnknownVariantError


class LaunchVariant(BaseModel):
    """One way of building and running an example.

    Fields:
        name: Variant name used on the command line
        extension: Output file extension, without the dot
        binary: Write the captured stream as raw bytes instead of UTF-8 text
        release_only: Always build optimized; any profile is ignored
        separate_build: Build with the tool, then execute the compiled example
    """
    name: str
    extension: str
    binary: bool = False
    release_only: bool = False
    separate_build: bool = False


RUN = LaunchVariant(name="run", extension="ppm")
RELEASE = LaunchVariant(name="release", extension="ppm", release_only=True)
BUILD_RUN = LaunchVariant(name="build-run", extension="png", binary=True, separate_build=True)

VARIANTS: Dict[str, LaunchVariant] = {v.name: v for v in (RUN, RELEASE, BUILD_RUN)}


def get_variant(name: str) -> LaunchVariant:
    """Look up a variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownVariantError(name, VARIANTS) from None
