"""
Syntax Highlighting

Converts normalized code into highlighted HTML. The composer depends only on
the SyntaxHighlighter protocol; PygmentsHighlighter is the default implementation.

Two entry points exist because the two columns are not symmetric: the home
framework's grammar is known when the content is written, while the other
column is highlighted from a guess to avoid forcing the wrong grammar onto it.
"""

import os
from typing import Protocol

from dotenv import load_dotenv
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from sidebyside.contexts.rendering.logger import _log_debug, _log_warning

load_dotenv()
PYGMENTS_STYLE = os.getenv("PYGMENTS_STYLE", "default")

DEFAULT_CSS_CLASS = "highlight"


class SyntaxHighlighter(Protocol):
    """Anything that turns code into highlighted HTML markup."""

    def highlight_with_language(self, code: str, language: str) -> str: ...

    def highlight_auto_detect(self, code: str) -> str: ...


class PygmentsHighlighter:
    """
    Syntax highlighter backed by Pygments.

    Unknown grammar names and failed guesses fall back to the plain-text
    lexer, so both entry points are total over arbitrary text.
    """

    def __init__(self, style: str = None, css_class: str = DEFAULT_CSS_CLASS):
        style = style or PYGMENTS_STYLE
        try:
            self.formatter = HtmlFormatter(style=style, cssclass=css_class)
        except ClassNotFound:
            _log_warning(f"Unknown Pygments style '{style}', using 'default'")
            style = "default"
            self.formatter = HtmlFormatter(style=style, cssclass=css_class)
        self.style = style
        self.css_class = css_class

    def _lexer_for_language(self, language: str) -> Lexer:
        try:
            return get_lexer_by_name(language)
        except ClassNotFound:
            _log_debug(f"No lexer named '{language}', highlighting as plain text")
            return TextLexer()

    def _guess_lexer(self, code: str) -> Lexer:
        try:
            return guess_lexer(code)
        except ClassNotFound:
            return TextLexer()

    def highlight_with_language(self, code: str, language: str) -> str:
        """Highlight code with the named grammar (plain text if unknown)."""
        return highlight(code, self._lexer_for_language(language), self.formatter)

    def highlight_auto_detect(self, code: str) -> str:
        """Highlight code with whichever grammar Pygments guesses for it."""
        lexer = self._guess_lexer(code)
        _log_debug(f"Guessed lexer: {lexer.name}")
        return highlight(code, lexer, self.formatter)

    def stylesheet(self) -> str:
        """CSS rules for the formatter's style, scoped to the CSS class."""
        return self.formatter.get_style_defs(f".{self.css_class}")
