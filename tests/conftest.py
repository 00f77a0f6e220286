import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Render sessions replace loguru's sinks; restore a plain stderr sink afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
