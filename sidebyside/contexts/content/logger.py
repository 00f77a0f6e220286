"""
Content context logger.

Provides logging interface for content context with automatic [content] prefix.
Content is loaded inside a rendering session, so these messages land in that
session's log.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[content]"


# Wrapper functions with automatic [content] prefix


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [content] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [content] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_result(content_path: Path, model, elapsed_time: float) -> None:
    """
    Log a successful content load.

    Args:
        content_path: File the model was loaded from
        model: ContentModel returned by load_content()
        elapsed_time: Time taken
    """
    _log_success(f"Loaded {len(model)} entries from {content_path.name} ({elapsed_time:.2f}s)")
    columns = ", ".join(
        f"{fw.label} ({fw.language or 'auto'})" for fw in model.frameworks
    )
    _log_debug(f"  Columns: {columns}")
