"""
Content Context

Responsibilities:
- Defines the comparison page structure (entries, variants, framework columns)
- Loads YAML content files and validates them at load time
- Ships the bundled comparison content

Owns: ContentModel representation, content validation
Never: Renders markup or normalizes text
"""

from sidebyside.contexts.content.data_structure import (
    AUTO_DETECT,
    ComparisonEntry,
    ContentModel,
    Framework,
    Variant,
)
from sidebyside.contexts.content.exceptions import InvalidContentEntry, InvalidContentFile
from sidebyside.contexts.content.loader import build_content_model, load_content

__all__ = [
    # Data structure classes
    "AUTO_DETECT",
    "ComparisonEntry",
    "ContentModel",
    "Framework",
    "Variant",
    # Loading
    "build_content_model",
    "load_content",
    # Errors
    "InvalidContentEntry",
    "InvalidContentFile",
]
