"""High-level API: render a diagram file or attach it to a docstring."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from simple_mermaid.config import resolve
from simple_mermaid.loader import caller_directory, load_source
from simple_mermaid.template import render

T = TypeVar("T")


def mermaid(path: str | Path, *modifiers: str, base: str | Path | None = None) -> str:
    """Render a Mermaid file into an embeddable HTML block.

    Args:
        path: Diagram file. Relative paths resolve against ``base``, or against the
            directory of the calling source file when ``base`` is None.
        *modifiers: Up to one alignment (``left``, ``right``, ``center``) and one
            frame style (``framed``, ``transparent``), in any order.
        base: Directory (or file whose directory) relative paths resolve against.

    Returns:
        The ``<pre class="mermaid">`` block followed by the bootstrap script.

    Raises:
        ConfigurationError: If the modifiers are invalid. Checked before the file is read.
        ResourceError: If the file cannot be read.
    """
    config = resolve(modifiers)
    if base is None:
        base = caller_directory(1)
    return render(config, load_source(path, base))


def diagram(path: str | Path, *modifiers: str, base: str | Path | None = None) -> Callable[[T], T]:
    """Decorator appending a rendered diagram to the decorated object's docstring.

    Modifiers are validated immediately; the file is resolved relative to the
    module applying the decorator unless ``base`` is given.

        @diagram("flow.mmd", "left", "framed")
        def handler():
            \"\"\"Handle a request.\"\"\"
    """
    config = resolve(modifiers)
    if base is None:
        base = caller_directory(1)

    def decorate(obj: T) -> T:
        block = render(config, load_source(path, base))
        doc = obj.__doc__
        obj.__doc__ = f"{doc}\n\n{block}" if doc else block
        return obj

    return decorate
