"""Exceptions raised by simple-mermaid."""

from __future__ import annotations

from pathlib import Path


class SimpleMermaidError(Exception):
    """Base class for all simple-mermaid errors."""


class ConfigurationError(SimpleMermaidError, ValueError):
    """The modifier keywords do not form a valid combination."""


class ResourceError(SimpleMermaidError, OSError):
    """A diagram file could not be read or decoded.

    ``errno`` is taken from the underlying OS error when there is one, and
    ``filename`` holds the resolved path as a string.
    """

    def __init__(self, message: str, path: str | Path, errno: int | None = None) -> None:
        super().__init__(errno, message, str(path))
        self.path = Path(path)

    def __str__(self) -> str:
        return self.strerror

    def __reduce__(self):
        return type(self), (self.strerror, self.path, self.errno)
