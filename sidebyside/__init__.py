"""
SIDEBYSIDE - Side-by-side comparisons of framework idioms

Renders a curated comparison of equivalent code idioms across two frameworks
from a declarative YAML content file.

Architecture:
- Content Context: Comparison content model, loading and validation
- Rendering Context: Dedenting, markdown, syntax highlighting and page layout
"""

__version__ = "0.1.0"
