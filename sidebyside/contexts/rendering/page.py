"""
Page Rendering Module

Lays out composed entries as a standalone HTML page and orchestrates a full
render pass (load content, compose, write page) with session logging.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from sidebyside.contexts.content.data_structure import ContentModel
from sidebyside.contexts.content.exceptions import InvalidContentEntry, InvalidContentFile
from sidebyside.contexts.content.loader import CONTENT_PATH, load_content
from sidebyside.contexts.rendering.composer import RenderedEntry, ViewComposer
from sidebyside.contexts.rendering.highlighter import PygmentsHighlighter
from sidebyside.contexts.rendering.logger import (
    _log_info,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from sidebyside.contexts.rendering.template_registry import TemplateRegistry
from sidebyside.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/pages"))

PAGE_TEMPLATE = "page"


@dataclass
class PageRenderResult:
    """
    Result of a full page render.

    Attributes:
        success: Whether the page was written
        output_path: Path of the written HTML page (None if failed)
        entry_count: Number of rendered entries
        degraded_titles: Titles of entries that fell back to literal text
        error: Error message when the content failed validation
        time_s: Wall time of the render
        log_dir: Session log directory
    """

    success: bool
    output_path: Optional[Path] = None
    entry_count: int = 0
    degraded_titles: List[str] = field(default_factory=list)
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def render_page(
    model: ContentModel,
    entries: Sequence[RenderedEntry],
    stylesheet: str = "",
    template_registry: TemplateRegistry = None,
) -> str:
    """
    Lay out composed entries as an HTML document.

    Args:
        model: Content model the entries were composed from (page metadata)
        entries: Output of ViewComposer.compose()
        stylesheet: CSS for the highlighted code
        template_registry: Registry to load the page template from

    Returns:
        Complete HTML document
    """
    registry = template_registry or TemplateRegistry()
    template = registry.get_template(PAGE_TEMPLATE)
    return template.render(
        title=model.title,
        frameworks=model.frameworks,
        entries=entries,
        stylesheet=stylesheet,
    )


def render_comparison_page(
    content_path: Path = None,
    output_path: Path = None,
    style: str = None,
    log_dir: Path = None,
    verbose: bool = False,
) -> PageRenderResult:
    """
    Load a content file, compose every entry and write the HTML page.

    Sets up a rendering log session under LOGS_PATH. Content validation
    failures are reported in the result rather than raised.

    Args:
        content_path: Content file (defaults to SIDEBYSIDE_CONTENT_PATH)
        output_path: HTML file to write (defaults to RESULTS_PATH/<content stem>.html)
        style: Pygments style name (defaults to PYGMENTS_STYLE)
        log_dir: Session log directory (defaults to LOGS_PATH/render_<timestamp>)
        verbose: Echo DEBUG messages to the console

    Returns:
        PageRenderResult
    """
    content_path = Path(content_path) if content_path else CONTENT_PATH
    if output_path is None:
        output_path = RESULTS_PATH / f"{content_path.stem}.html"
    output_path = Path(output_path)

    if log_dir is None:
        log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, content_path=content_path, style=style, verbose=verbose)
    log_render_start(content_path.stem, content_path, log_dir)

    start = time.time()
    try:
        model = load_content(content_path)
    except (InvalidContentEntry, InvalidContentFile) as e:
        result = PageRenderResult(
            success=False, error=str(e), time_s=time.time() - start, log_dir=log_dir
        )
        log_render_result(content_path.stem, result, result.time_s)
        return result

    highlighter = PygmentsHighlighter(style=style)
    composer = ViewComposer(highlighter=highlighter)
    entries = composer.compose(model)

    html = render_page(model, entries, stylesheet=highlighter.stylesheet())
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    _log_info(f"Wrote {len(html)} characters")

    result = PageRenderResult(
        success=True,
        output_path=output_path,
        entry_count=len(entries),
        degraded_titles=[entry.title for entry in entries if entry.degraded],
        time_s=time.time() - start,
        log_dir=log_dir,
    )
    log_render_result(model.title, result, result.time_s)
    return result
