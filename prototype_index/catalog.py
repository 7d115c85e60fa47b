"""
Display metadata for known prototypes, with fallbacks for everything else.
"""

import json
import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from prototype_index.models import PrototypeCard, PrototypeMeta, SiteConfig


DEFAULT_ICON = "📁"
DEFAULT_DESCRIPTION = "View this prototype deployment."

KNOWN_PROTOTYPES: Mapping[str, PrototypeMeta] = MappingProxyType({
    "main": PrototypeMeta(
        name="Main Prototype",
        icon="🎨",
        description=(
            "The primary UX AI storyboard prototype with navigation, "
            "layout components, and design system."
        ),
    ),
    "test-prototype-1": PrototypeMeta(
        name="Test Prototype 1",
        icon="🧪",
        description="Experimental prototype branch for testing new component ideas.",
    ),
})

_WORD_START = re.compile(r"\b.")


def humanize_slug(slug: str) -> str:
    """
    Turn a slug into a display name.

    Dashes become spaces and the first character after each word boundary is
    upper-cased. The remaining characters keep their case.

    Args:
        slug: Prototype slug, e.g. "test-prototype-1".

    Returns:
        Display name, e.g. "Test Prototype 1".
    """
    return _WORD_START.sub(lambda m: m.group(0).upper(), slug.replace("-", " "))


class PrototypeCatalog:
    """Immutable slug -> metadata lookup with per-field fallbacks."""

    def __init__(self, entries: Optional[Mapping[str, PrototypeMeta]] = None):
        """
        Initialize the catalog.

        Args:
            entries: Metadata per slug (default: the built-in entries).
        """
        if entries is None:
            entries = KNOWN_PROTOTYPES
        self.entries: Mapping[str, PrototypeMeta] = MappingProxyType(dict(entries))

    def __contains__(self, slug: str) -> bool:
        return slug in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def _meta(self, slug: str) -> PrototypeMeta:
        return self.entries.get(slug) or PrototypeMeta()

    def display_name(self, slug: str) -> str:
        return self._meta(slug).name or humanize_slug(slug)

    def icon(self, slug: str) -> str:
        return self._meta(slug).icon or DEFAULT_ICON

    def description(self, slug: str) -> str:
        return self._meta(slug).description or DEFAULT_DESCRIPTION

    def resolve(self, slug: str, config: SiteConfig) -> PrototypeCard:
        """Resolve every display field of a slug into a card."""
        return PrototypeCard(
            slug=slug,
            name=self.display_name(slug),
            icon=self.icon(slug),
            description=self.description(slug),
            url=config.prototype_url(slug),
        )

    def merged(self, overrides: Mapping[str, PrototypeMeta]) -> "PrototypeCatalog":
        """Return a new catalog where `overrides` replace entries per slug."""
        entries: Dict[str, PrototypeMeta] = dict(self.entries)
        entries.update(overrides)
        return PrototypeCatalog(entries)

    @classmethod
    def from_json(
        cls,
        path: Union[str, Path],
        base: Optional["PrototypeCatalog"] = None
    ) -> "PrototypeCatalog":
        """
        Load metadata overrides from a JSON file.

        The file holds one object keyed by slug, each value an object with
        optional "name", "icon" and "description" keys. Entries are layered
        over `base` (default: the built-in catalog).

        Args:
            path: Path to the JSON file.
            base: Catalog to layer the file over.

        Returns:
            Merged PrototypeCatalog.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a JSON object of metadata objects.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Metadata file not found: {path}")

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Metadata file must contain a JSON object: {path}")

        overrides = {}
        for slug, value in data.items():
            if not isinstance(value, dict):
                raise ValueError(f"Metadata for {slug!r} must be an object")
            overrides[slug] = PrototypeMeta(**value)

        if base is None:
            base = cls()
        return base.merged(overrides)
