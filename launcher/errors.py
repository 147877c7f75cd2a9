"""Errors raised by the launcher itself.

Failures of the build tool or the example are not represented here: they
surface as the tool's own exit code, or as the OSError the file system raised.
"""


class LauncherError(Exception):
    """Base class for errors owned by the launcher."""


class MissingExampleError(LauncherError, ValueError):
    """No example name was given."""


class UnknownVariantError(LauncherError):
    """The requested script variant does not exist."""

    def __init__(self, name: str, known):
        self.name = name
        self.known = sorted(known)
        super().__init__(f"Unknown variant '{name}' (expected one of: {', '.join(self.known)})")
