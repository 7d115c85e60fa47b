"""
Data models and settings for the prototype index generator.
"""

import os
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


# Base URL where prototypes are hosted (prototype repo's GitHub Pages)
PROTOTYPES_BASE_URL = "https://karimlo.github.io/prototype"

# Confluence page URLs
DOCUMENTATION_URL = "https://karimlounes.atlassian.net/wiki/spaces/SD/pages/491523/Documentation"
ABOUT_ME_URL = "https://karimlounes.atlassian.net/wiki/spaces/SD/pages/786433/About+Me"

SITE_TITLE = "My UX AI"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PageVariant(str, Enum):
    """Landing page flavours."""
    RICH = "rich"
    PLAIN = "plain"

    @classmethod
    def parse(cls, value: str) -> "PageVariant":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown page variant: {value!r} (expected one of: {choices})")


class SiteConfig(BaseModel):
    """Fixed site settings interpolated into the page."""
    base_url: str = PROTOTYPES_BASE_URL
    documentation_url: str = DOCUMENTATION_URL
    about_url: str = ABOUT_ME_URL
    site_title: str = SITE_TITLE
    variant: PageVariant = PageVariant.RICH

    def prototype_url(self, slug: str) -> str:
        """Hosted location of a prototype deployment."""
        return f"{self.base_url.rstrip('/')}/{slug}/"

    @classmethod
    def from_env(cls) -> "SiteConfig":
        """
        Build settings from PROTOTYPE_INDEX_* environment variables.

        Unset variables keep the built-in defaults.

        Raises:
            ValueError: If PROTOTYPE_INDEX_VARIANT names an unknown variant.
        """
        return cls(
            base_url=os.getenv("PROTOTYPE_INDEX_BASE_URL", PROTOTYPES_BASE_URL),
            documentation_url=os.getenv("PROTOTYPE_INDEX_DOCS_URL", DOCUMENTATION_URL),
            about_url=os.getenv("PROTOTYPE_INDEX_ABOUT_URL", ABOUT_ME_URL),
            site_title=os.getenv("PROTOTYPE_INDEX_SITE_TITLE", SITE_TITLE),
            variant=PageVariant.parse(os.getenv("PROTOTYPE_INDEX_VARIANT", PageVariant.RICH.value)),
        )


class PrototypeMeta(BaseModel):
    """Display metadata for a known prototype. Missing fields use fallbacks."""
    name: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class PrototypeCard(BaseModel):
    """Fully resolved card for one slug."""
    slug: str
    name: str
    icon: str
    description: str
    url: str


class GeneratedPage(BaseModel):
    """A rendered landing page and where it was written."""
    output_path: Optional[Path] = None
    requested_path: Optional[str] = None  # output path exactly as the caller gave it
    html_content: str
    slugs: List[str] = Field(default_factory=list)
    variant: PageVariant = PageVariant.RICH
    generation_timestamp: datetime = Field(default_factory=utc_now)

    class Config:
        arbitrary_types_allowed = True

    @property
    def prototype_count(self) -> int:
        return len(self.slugs)

    def confirmation_message(self) -> str:
        """One-line summary printed after a successful write."""
        shown = self.requested_path if self.requested_path is not None else self.output_path
        return f"Generated index page with {self.prototype_count} prototype(s) at {shown}"
