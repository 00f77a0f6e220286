"""
Content Loader

Reads a YAML content file into a validated, read-only ContentModel.

Validation happens once, at load time. A malformed entry rejects the whole
file with InvalidContentEntry naming the entry's index and title, so the
rendering context never sees a partially valid model.
"""

import os
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from sidebyside.contexts.content.data_structure import (
    AUTO_DETECT,
    ComparisonEntry,
    ContentModel,
    Framework,
    Variant,
)
from sidebyside.contexts.content.exceptions import InvalidContentEntry, InvalidContentFile
from sidebyside.contexts.content.logger import _log_debug, _log_info, log_load_result

load_dotenv()
BUNDLED_CONTENT_PATH = Path(__file__).parent / "data" / "comparisons.yaml"
CONTENT_PATH = Path(os.getenv("SIDEBYSIDE_CONTENT_PATH", str(BUNDLED_CONTENT_PATH)))

DEFAULT_FRAMEWORK_KEYS = ("A", "B")


def _parse_language(value: Any) -> Optional[str]:
    """Map a content-file language value to a grammar name (None = auto-detect)."""
    if value is None or value == AUTO_DETECT:
        return None
    return str(value)


def _build_frameworks(data: Dict[str, Any], home_language: str, path: Optional[Path]) -> tuple:
    """
    Build the two comparison columns.

    Without an explicit 'frameworks' list the columns default to keys A and B,
    with A highlighted in the home language and B auto-detected.
    """
    raw = data.get("frameworks")
    if raw is None:
        return (
            Framework(key=DEFAULT_FRAMEWORK_KEYS[0], label=DEFAULT_FRAMEWORK_KEYS[0], language=home_language),
            Framework(key=DEFAULT_FRAMEWORK_KEYS[1], label=DEFAULT_FRAMEWORK_KEYS[1], language=None),
        )

    if not isinstance(raw, list) or len(raw) != 2:
        raise InvalidContentFile("'frameworks' must list exactly two frameworks", path)

    frameworks = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("key"):
            raise InvalidContentFile("Each framework needs a 'key'", path)
        key = str(item["key"])
        frameworks.append(
            Framework(
                key=key,
                label=str(item.get("label") or key),
                language=_parse_language(item.get("language")),
            )
        )

    if frameworks[0].key == frameworks[1].key:
        raise InvalidContentFile(f"Duplicate framework key '{frameworks[0].key}'", path)

    return tuple(frameworks)


def _build_variant(raw: Any, index: int, title: str, key: str) -> Variant:
    """Validate and build one variant of an entry."""
    if not isinstance(raw, dict):
        raise InvalidContentEntry(
            f"Variant '{key}' must be a mapping", title=title, index=index, field=f"variants.{key}"
        )

    code = raw.get("code")
    if code is None:
        raise InvalidContentEntry(
            f"Variant '{key}' is missing required 'code'",
            title=title,
            index=index,
            field=f"variants.{key}.code",
        )
    if not isinstance(code, str):
        raise InvalidContentEntry(
            f"Variant '{key}' code must be a string",
            title=title,
            index=index,
            field=f"variants.{key}.code",
        )

    for optional in ("notes", "language"):
        value = raw.get(optional)
        if value is not None and not isinstance(value, str):
            raise InvalidContentEntry(
                f"Variant '{key}' {optional} must be a string",
                title=title,
                index=index,
                field=f"variants.{key}.{optional}",
            )

    return Variant(code=code, notes=raw.get("notes"), language=raw.get("language"))


def build_entry(raw: Any, index: int, framework_keys: tuple) -> ComparisonEntry:
    """
    Validate one raw entry and build a ComparisonEntry.

    Args:
        raw: Entry mapping as read from the content file
        index: Position of the entry (used in error messages)
        framework_keys: The two variant keys every entry must provide

    Returns:
        ComparisonEntry with variants ordered by framework_keys

    Raises:
        InvalidContentEntry: If the entry is malformed
    """
    if not isinstance(raw, dict):
        raise InvalidContentEntry("Entry must be a mapping", index=index)

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise InvalidContentEntry("Entry is missing a title", index=index, field="title")
    title = title.strip()

    description = raw.get("description", "")
    if description is None:
        description = ""
    if not isinstance(description, str):
        raise InvalidContentEntry(
            "Description must be a string", title=title, index=index, field="description"
        )

    variants = raw.get("variants")
    if not isinstance(variants, dict):
        raise InvalidContentEntry(
            "Entry must define 'variants' as a mapping", title=title, index=index, field="variants"
        )

    if set(variants) != set(framework_keys):
        raise InvalidContentEntry(
            f"Variants must be exactly {list(framework_keys)}, got {list(variants)}",
            title=title,
            index=index,
            field="variants",
        )

    ordered = {key: _build_variant(variants[key], index, title, key) for key in framework_keys}

    return ComparisonEntry(title=title, description=description, variants=ordered)


def build_content_model(data: Dict[str, Any], path: Optional[Path] = None) -> ContentModel:
    """
    Build a validated ContentModel from plain containers.

    Args:
        data: Parsed content document
        path: Source file, for error messages only

    Returns:
        Read-only ContentModel

    Raises:
        InvalidContentFile: If the document structure is malformed
        InvalidContentEntry: If any entry is malformed
    """
    if not isinstance(data, dict):
        raise InvalidContentFile("Content document must be a mapping", path)

    raw_entries = data.get("entries")
    if not isinstance(raw_entries, list):
        raise InvalidContentFile("Content document must contain an 'entries' list", path)

    home_language = str(data.get("home_language") or "text")
    frameworks = _build_frameworks(data, home_language, path)
    framework_keys = tuple(fw.key for fw in frameworks)

    entries: List[ComparisonEntry] = []
    seen_titles: Dict[str, int] = {}
    for index, raw in enumerate(raw_entries):
        entry = build_entry(raw, index, framework_keys)
        if entry.title in seen_titles:
            raise InvalidContentEntry(
                f"Duplicate title (first used by entry #{seen_titles[entry.title]})",
                title=entry.title,
                index=index,
                field="title",
            )
        seen_titles[entry.title] = index
        entries.append(entry)

    return ContentModel(
        title=str(data.get("title") or "Side by side"),
        home_language=home_language,
        frameworks=frameworks,
        entries=tuple(entries),
        version=str(data.get("version", "1")),
    )


def load_content(content_path: Path = None) -> ContentModel:
    """
    Load and validate a YAML content file.

    Args:
        content_path: Path to content file (defaults to SIDEBYSIDE_CONTENT_PATH,
                      falling back to the bundled comparisons)

    Returns:
        Read-only ContentModel

    Raises:
        InvalidContentFile: If the file is missing, unparseable or malformed
        InvalidContentEntry: If any entry is malformed
    """
    if content_path is None:
        content_path = CONTENT_PATH
    content_path = Path(content_path)

    if not content_path.exists():
        raise InvalidContentFile("Content file not found", content_path)

    start = time.time()
    _log_info(f"Loading content from {content_path}")

    try:
        with open(content_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidContentFile(f"Could not parse content file: {e}", content_path) from e

    model = build_content_model(data, content_path)
    _log_debug(f"  Version: {model.version}")
    log_load_result(content_path, model, time.time() - start)
    return model
