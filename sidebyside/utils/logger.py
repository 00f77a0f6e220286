"""
Session logger setup shared by the contexts.

Every render or validation run gets one log directory: a DEBUG log file
inside it and a console echo on stdout. The file opens with a provenance
header recording which content file was rendered and with which renderer
libraries, so an old page can be traced back to the run that produced it.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger

import sidebyside

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Libraries whose output ends up in the page
RENDERER_DISTRIBUTIONS = ("mistune", "Pygments", "Jinja2")


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "not installed"


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Mapping[str, object]] = None,
    verbose: bool = False,
) -> Path:
    """
    Start a logging session for a context.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "render")
        log_dir: Directory for this session
        provenance: Run-specific header lines (content file, style, ...)
        verbose: Echo DEBUG messages to the console; otherwise INFO and above

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "render",
            Path("outs/logs/render_20261018_123456"),
            provenance={"Content": "comparisons.yaml", "Pygments style": "monokai"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.level("WARNING", color="<yellow>")
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else "INFO",
        colorize=True,
    )

    log_provenance(provenance)

    return log_file


def log_provenance(provenance: Optional[Mapping[str, object]] = None) -> None:
    """Log the command line, interpreter, renderer versions and run-specific fields."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"sidebyside: {sidebyside.__version__}")
    logger.info(
        "Renderers: "
        + ", ".join(f"{name} {_distribution_version(name)}" for name in RENDERER_DISTRIBUTIONS)
    )

    for key, value in (provenance or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
