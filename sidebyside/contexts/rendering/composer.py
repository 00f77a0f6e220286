"""
View Composer

Turns a ContentModel into rendered records, one per entry, each holding the
description markup and a fixed two-column grid of code and notes cells.

Every text field is dedented with normalize_indentation before it reaches a
collaborator. A collaborator that raises never costs the page an entry: the
failing cell is replaced with escaped literal text and the entry is flagged
as degraded.
"""

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from markupsafe import escape

from sidebyside.contexts.content.data_structure import (
    ComparisonEntry,
    ContentModel,
    Framework,
    Variant,
)
from sidebyside.contexts.rendering.highlighter import PygmentsHighlighter, SyntaxHighlighter
from sidebyside.contexts.rendering.logger import _log_debug, _log_warning
from sidebyside.contexts.rendering.markdown_renderer import (
    MarkdownRenderer,
    MistuneMarkdownRenderer,
)
from sidebyside.utils.text_processing import is_blank, normalize_indentation, slugify


@dataclass(frozen=True)
class RenderedColumn:
    """
    One column of a rendered entry.

    Attributes:
        framework_key: Variant key of the column
        label: Column heading
        code_html: Highlighted code markup
        notes_html: Rendered notes markup, or None when the variant has no notes
    """

    framework_key: str
    label: str
    code_html: str
    notes_html: Optional[str] = None


@dataclass(frozen=True)
class RenderedEntry:
    """
    Rendered form of one ComparisonEntry.

    Attributes:
        title: Entry heading
        anchor: URL fragment for the entry, unique within the page
        description_html: Rendered description markup
        columns: Exactly two columns, left then right
        degraded: True when any cell fell back to literal text
    """

    title: str
    anchor: str
    description_html: str
    columns: Tuple[RenderedColumn, RenderedColumn]
    degraded: bool = False

    @property
    def code_cells(self) -> Tuple[str, str]:
        return tuple(column.code_html for column in self.columns)

    @property
    def notes_cells(self) -> Tuple[Optional[str], Optional[str]]:
        return tuple(column.notes_html for column in self.columns)


def _literal_code(code: str) -> str:
    return f"<pre><code>{escape(code)}</code></pre>"


def _literal_prose(text: str) -> str:
    return f"<p>{escape(text)}</p>" if text else ""


class ViewComposer:
    """Composes rendered entries from a content model."""

    def __init__(
        self,
        markdown_renderer: MarkdownRenderer = None,
        highlighter: SyntaxHighlighter = None,
    ):
        self.markdown_renderer = markdown_renderer or MistuneMarkdownRenderer()
        self.highlighter = highlighter or PygmentsHighlighter()

    def _render_markdown(self, raw: str, title: str, where: str) -> Tuple[str, bool]:
        """Normalize and render prose. Returns (markup, degraded)."""
        text = normalize_indentation(raw)
        try:
            return self.markdown_renderer.render(text), False
        except Exception as e:
            _log_warning(f"'{title}': markdown rendering of {where} failed ({e!r}), using plain text")
            return _literal_prose(text), True

    def _render_code(self, variant: Variant, framework: Framework, title: str) -> Tuple[str, bool]:
        """Normalize and highlight a variant's code. Returns (markup, degraded)."""
        code = normalize_indentation(variant.code)
        language = variant.resolve_language(framework)
        try:
            if language is None:
                return self.highlighter.highlight_auto_detect(code), False
            return self.highlighter.highlight_with_language(code, language), False
        except Exception as e:
            _log_warning(
                f"'{title}': highlighting {framework.key} code failed ({e!r}), using plain text"
            )
            return _literal_code(code), True

    def compose_entry(
        self,
        entry: ComparisonEntry,
        frameworks: Tuple[Framework, Framework],
        anchor: str = None,
    ) -> RenderedEntry:
        """
        Render one entry into its description and two-column grid.

        Args:
            entry: Entry to render
            frameworks: Column definitions, left then right
            anchor: URL fragment (defaults to a slug of the title)

        Returns:
            RenderedEntry with exactly two columns
        """
        degraded = False

        description_html, failed = self._render_markdown(entry.description, entry.title, "description")
        degraded = degraded or failed

        columns = []
        for framework, variant in entry.iter_variants(frameworks):
            if variant is None:
                _log_warning(f"'{entry.title}': no variant for {framework.key}, leaving the cell empty")
                degraded = True
                columns.append(
                    RenderedColumn(
                        framework_key=framework.key,
                        label=framework.label,
                        code_html=_literal_code(""),
                    )
                )
                continue

            code_html, failed = self._render_code(variant, framework, entry.title)
            degraded = degraded or failed

            notes_html = None
            if not is_blank(variant.notes):
                notes_html, failed = self._render_markdown(
                    variant.notes, entry.title, f"{framework.key} notes"
                )
                degraded = degraded or failed

            columns.append(
                RenderedColumn(
                    framework_key=framework.key,
                    label=framework.label,
                    code_html=code_html,
                    notes_html=notes_html,
                )
            )

        _log_debug(f"Composed '{entry.title}'{' (degraded)' if degraded else ''}")

        return RenderedEntry(
            title=entry.title,
            anchor=anchor or slugify(entry.title),
            description_html=description_html,
            columns=tuple(columns),
            degraded=degraded,
        )

    def compose(self, model: ContentModel) -> List[RenderedEntry]:
        """
        Render every entry of the model, preserving model order.

        Anchors are slugs of the titles; titles that slug to the same value get
        -2, -3, ... suffixes.
        """
        used: Set[str] = set()
        rendered = []
        for entry in model.entries:
            base = slugify(entry.title)
            anchor = base
            suffix = 1
            while anchor in used:
                suffix += 1
                anchor = f"{base}-{suffix}"
            used.add(anchor)
            rendered.append(self.compose_entry(entry, model.frameworks, anchor=anchor))
        return rendered
