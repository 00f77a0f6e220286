"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from sidebyside.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path,
    content_path: Path = None,
    style: str = None,
    verbose: bool = False,
) -> Path:
    """
    Setup logger for rendering context.

    The provenance header records the content file and Pygments style of the run.

    Args:
        log_dir: Directory for this rendering session
        content_path: Content file being rendered
        style: Requested Pygments style (defaults to PYGMENTS_STYLE)
        verbose: Echo DEBUG messages to the console as well

    Returns:
        Path to log file

    Example:
        from sidebyside.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting render...")
    """
    return _setup_logger(
        "render",
        log_dir,
        provenance={
            "Content": content_path,
            "Pygments style": style or os.getenv("PYGMENTS_STYLE", "default"),
        },
        verbose=verbose,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(page_title: str, content_path: Path, log_dir: Path) -> None:
    """Log start of a page render with context."""
    _log_info(f"Starting render: {page_title}")
    _log_info(f"Logging to {log_dir}")
    _log_debug(f"  Content: {content_path}")


def log_render_result(
    page_title: str,
    result,  # PageRenderResult
    elapsed_time: float,
) -> None:
    """
    Log page render result.

    Args:
        page_title: Title of the rendered page
        result: PageRenderResult from render_comparison_page()
        elapsed_time: Time taken to render
    """
    if result.success:
        _log_success(f"{page_title}: {result.entry_count} entries rendered ({elapsed_time:.2f}s)")
        if result.degraded_titles:
            _log_warning(f"{len(result.degraded_titles)} entries rendered with fallbacks")
            for title in result.degraded_titles:
                _log_debug(f"  Degraded: {title}")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to render {page_title} ({elapsed_time:.2f}s)")
        if result.error:
            # Multi-line validation messages keep their formatting
            logger.opt(raw=True).error(f"{result.error}\n")
