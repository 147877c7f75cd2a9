"""
Launcher package.
Builds and runs example programs and stores their output as timestamped images.
"""
from .errors import LauncherError, MissingExampleError, UnknownVariantError
from .examples import discover_examples
from .runner import Launcher, LaunchResult
from .variants import VARIANTS, LaunchVariant, get_variant

__all__ = [
    "Launcher",
    "LaunchResult",
    "LaunchVariant",
    "VARIANTS",
    "get_variant",
    "discover_examples",
    "LauncherError",
    "MissingExampleError",
    "UnknownVariantError",
]
