"""HTML template for an embedded Mermaid diagram block."""

from __future__ import annotations

from simple_mermaid.config import RenderConfig
from simple_mermaid.types import FrameStyle

MERMAID_URL = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.esm.min.mjs"
THEME_STORAGE_KEY = "rustdoc-theme"
DARK_THEMES = ("dark", "ayu")

_DARK_CHECK = " || ".join(f'doc_theme === "{t}"' for t in DARK_THEMES)

_BACKGROUNDS: dict[FrameStyle, str] = {
    FrameStyle.FRAMED: "",
    FrameStyle.TRANSPARENT: "background: transparent;",
}

# Loads mermaid in the viewer and picks its dark theme to match the page.
BOOTSTRAP = (
    '<script type="module">'
    f'import mermaid from "{MERMAID_URL}";'
    f'var doc_theme = localStorage.getItem("{THEME_STORAGE_KEY}");'
    f"if ({_DARK_CHECK}) "
    'mermaid.initialize({theme: "dark"});'
    "</script>"
)


def container_style(config: RenderConfig) -> str:
    """Return the inline CSS for the <pre> container."""
    return f"text-align:{config.alignment.value};{_BACKGROUNDS[config.style]}"


def render(config: RenderConfig, source: str) -> str:
    """Wrap diagram source in a styled mermaid block followed by the bootstrap script.

    The source is inserted verbatim; it is neither escaped nor inspected.
    """
    return f'<pre class="mermaid" style="{container_style(config)}">\n{source}\n</pre>{BOOTSTRAP}'
