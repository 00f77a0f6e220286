"""
Text processing utilities for normalizing author-written text blocks.

Content files embed code and prose as indented multi-line strings. The
helpers here turn them back into flush-left text before rendering.
"""

import re
from typing import List


def _leading_whitespace(line: str) -> str:
    """Return the run of whitespace characters at the start of line."""
    return line[: len(line) - len(line.lstrip())]


def _common_prefix(prefixes: List[str]) -> str:
    """Longest literal prefix shared by every string in prefixes."""
    if not prefixes:
        return ""

    shortest = min(prefixes, key=len)
    for i, char in enumerate(shortest):
        if any(prefix[i] != char for prefix in prefixes):
            return shortest[:i]
    return shortest


def normalize_indentation(text: str) -> str:
    """
    Strip the common leading whitespace of a text block and trim boundary blank lines.

    The common prefix is computed over lines that contain something other than
    whitespace, comparing characters literally (tabs are never expanded). Mixed
    tab/space indentation therefore under-strips rather than failing.
    Whitespace-only lines are reduced to empty when they are shorter than the
    prefix. Blank lines at the start and end of the block are dropped; interior
    blank lines are kept as they are.

    The operation is total and idempotent.

    Args:
        text: Raw text as written in the content file

    Returns:
        Dedented text without leading or trailing blank lines

    Example:
        >>> normalize_indentation("\\n    foo\\n\\n      bar\\n  ")
        'foo\\n\\n  bar'
        >>> normalize_indentation("   \\n\\t\\n")
        ''
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    # CRLF input comes out with plain "\n" line endings
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]

    prefix = _common_prefix(
        [_leading_whitespace(line) for line in lines if line.strip()]
    )

    stripped = []
    for line in lines:
        if line.startswith(prefix):
            stripped.append(line[len(prefix):])
        elif not line.strip():
            # Blank line shorter than (or not matching) the prefix
            stripped.append("")
        else:
            stripped.append(line)

    start = 0
    end = len(stripped)
    while start < end and not stripped[start].strip():
        start += 1
    while end > start and not stripped[end - 1].strip():
        end -= 1

    return "\n".join(stripped[start:end])


def is_blank(text: str) -> bool:
    """True when text is None or holds only whitespace."""
    return text is None or not str(text).strip()


def slugify(text: str) -> str:
    """
    Convert a heading into a URL fragment.

    Example:
        >>> slugify("State & Props")
        'state-props'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "section"
