"""Read diagram files relative to the code that references them."""

from __future__ import annotations

import inspect
import logging
from pathlib import Path

from simple_mermaid.errors import ResourceError

_logger = logging.getLogger(__name__)


def caller_directory(depth: int = 1) -> Path:
    """Return the directory of the source file ``depth`` frames above the caller.

    ``depth=1`` is the direct caller of the function that calls this one.
    Frames without a real file (REPL, ``python -c``, exec'd strings) fall back to
    the current working directory.
    """
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return Path.cwd()
    try:
        filename = frame.f_code.co_filename
    finally:
        del frame
    if not filename or filename.startswith("<"):
        return Path.cwd()
    return Path(filename).resolve().parent


def resolve_path(path: str | Path, base: str | Path | None = None) -> Path:
    """Resolve ``path`` against ``base``.

    A ``base`` that is not an existing directory is taken to be a file, and its
    parent directory is used.
    """
    target = Path(path)
    if target.is_absolute():
        return target
    if base is None:
        return Path.cwd() / target
    base = Path(base)
    if not base.is_dir():
        base = base.parent
    return base / target


def load_source(path: str | Path, base: str | Path | None = None) -> str:
    """Read a diagram file as UTF-8 text.

    Raises:
        ResourceError: If the file is missing, unreadable or not valid UTF-8.
    """
    target = resolve_path(path, base)
    try:
        text = target.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise ResourceError(f"cannot decode '{target}' as UTF-8: {e}", target) from e
    except OSError as e:
        raise ResourceError(f"cannot read '{target}': {e.strerror or e}", target, e.errno) from e
    _logger.debug("loaded %d characters from %s", len(text), target)
    return text
