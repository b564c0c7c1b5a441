"""simple-mermaid: embed Mermaid diagram files in generated documentation."""

from simple_mermaid.api import diagram, mermaid
from simple_mermaid.config import RenderConfig, resolve
from simple_mermaid.errors import ConfigurationError, ResourceError, SimpleMermaidError
from simple_mermaid.loader import load_source
from simple_mermaid.template import BOOTSTRAP, render
from simple_mermaid.types import Alignment, FrameStyle

__all__ = [
    "BOOTSTRAP",
    "Alignment",
    "ConfigurationError",
    "FrameStyle",
    "RenderConfig",
    "ResourceError",
    "SimpleMermaidError",
    "diagram",
    "load_source",
    "mermaid",
    "render",
    "resolve",
]
