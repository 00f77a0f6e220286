"""
Comparison Content Structure

Defines the structured representation of a side-by-side comparison page.
This structure is the interface between the content and rendering contexts.

Content owns:
- Loading YAML content files into ContentModel instances
- Validating entries at load time

Rendering reads ContentModel instances and never modifies them.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from sidebyside.contexts.content.exceptions import InvalidContentEntry

# Content files spell auto-detection as a language name
AUTO_DETECT = "auto"


@dataclass(frozen=True)
class Framework:
    """
    One column of the comparison.

    Attributes:
        key: Variant key used in entries (e.g., "react")
        label: Display name used as the column heading
        language: Grammar name for highlighting, or None to auto-detect
    """

    key: str
    label: str
    language: Optional[str] = None

    @property
    def auto_detect(self) -> bool:
        return self.language is None


@dataclass(frozen=True)
class Variant:
    """
    One framework's rendition of a compared idiom.

    Attributes:
        code: Code fragment as written in the content file (not yet dedented)
        notes: Optional markdown commentary specific to this variant
        language: Per-variant highlighting override. A grammar name, "auto",
                  or None to inherit the framework's mode.
    """

    code: str
    notes: Optional[str] = None
    language: Optional[str] = None

    def resolve_language(self, framework: Framework) -> Optional[str]:
        """
        Highlighting grammar for this variant in the given column.

        Returns:
            Grammar name, or None when the code should be auto-detected
        """
        if self.language is None:
            return framework.language
        if self.language == AUTO_DETECT:
            return None
        return self.language


@dataclass(frozen=True)
class ComparisonEntry:
    """
    One topic compared across both frameworks.

    Variants are held in a read-only mapping whose iteration order is the
    column order (left, right). An entry always has exactly two variants.
    """

    title: str
    description: str
    variants: Mapping[str, Variant]

    def __post_init__(self):
        if len(self.variants) != 2:
            raise InvalidContentEntry(
                f"Entry must have exactly two variants, got {list(self.variants)}",
                title=self.title,
                field="variants",
            )
        if not isinstance(self.variants, MappingProxyType):
            object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))

    def iter_variants(
        self, frameworks: Tuple[Framework, ...]
    ) -> Iterator[Tuple[Framework, Optional[Variant]]]:
        """
        Yield (framework, variant) pairs in column order.

        The variant is None when the entry has no variant under that
        framework's key.
        """
        for framework in frameworks:
            yield framework, self.variants.get(framework.key)


@dataclass(frozen=True)
class ContentModel:
    """
    Complete comparison page: metadata plus the ordered entries.

    Constructed once by the loader and shared read-only by every render pass.
    """

    title: str
    home_language: str
    frameworks: Tuple[Framework, Framework]
    entries: Tuple[ComparisonEntry, ...]
    version: str = "1"

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ComparisonEntry]:
        return iter(self.entries)

    @property
    def titles(self) -> Tuple[str, ...]:
        return tuple(entry.title for entry in self.entries)

    @property
    def framework_keys(self) -> Tuple[str, ...]:
        return tuple(framework.key for framework in self.frameworks)
