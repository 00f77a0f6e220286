"""
Rendering Context

Responsibilities:
- Dedents entry text and renders prose through the markdown renderer
- Highlights each column's code (named grammar or auto-detected)
- Composes the per-entry two-column grid
- Lays out the composed entries as an HTML page

Owns: Markup generation, collaborator fallbacks, page output
Never: Modifies the content model
"""

from sidebyside.contexts.rendering.composer import RenderedColumn, RenderedEntry, ViewComposer
from sidebyside.contexts.rendering.highlighter import PygmentsHighlighter, SyntaxHighlighter
from sidebyside.contexts.rendering.markdown_renderer import (
    MarkdownRenderer,
    MistuneMarkdownRenderer,
)
from sidebyside.contexts.rendering.page import (
    PageRenderResult,
    render_comparison_page,
    render_page,
)

__all__ = [
    # Collaborator interfaces and defaults
    "MarkdownRenderer",
    "MistuneMarkdownRenderer",
    "SyntaxHighlighter",
    "PygmentsHighlighter",
    # Composition
    "ViewComposer",
    "RenderedEntry",
    "RenderedColumn",
    # Page output
    "render_page",
    "render_comparison_page",
    "PageRenderResult",
]
