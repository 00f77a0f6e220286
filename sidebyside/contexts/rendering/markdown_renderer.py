"""
Markdown Rendering

Converts normalized prose into HTML. The composer depends only on the
MarkdownRenderer protocol; MistuneMarkdownRenderer is the default implementation.
"""

from typing import Iterable, Protocol

import mistune

DEFAULT_PLUGINS = ("strikethrough", "table")


class MarkdownRenderer(Protocol):
    """Anything that turns markdown text into HTML markup."""

    def render(self, text: str) -> str: ...


class MistuneMarkdownRenderer:
    """
    Markdown renderer backed by mistune.

    Raw HTML in the prose is escaped rather than passed through, so arbitrary
    text always renders as literal paragraphs.
    """

    def __init__(self, plugins: Iterable[str] = DEFAULT_PLUGINS, escape: bool = True):
        self.plugins = list(plugins)
        self._markdown = mistune.create_markdown(escape=escape, plugins=self.plugins)

    def render(self, text: str) -> str:
        """
        Render markdown text to HTML.

        Args:
            text: Normalized markdown text

        Returns:
            HTML markup ("" for blank input)
        """
        if not text or not text.strip():
            return ""
        return self._markdown(text)
