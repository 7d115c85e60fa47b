"""
Renders the prototype landing page from a list of slugs.
"""

import html
from datetime import datetime, timezone
from typing import Callable, List, Optional

from prototype_index.catalog import PrototypeCatalog
from prototype_index.models import PageVariant, PrototypeCard, SiteConfig, utc_now
from prototype_index.rendering.templates import (
    GRID_TEMPLATE,
    PLAIN_CARD_TEMPLATE,
    PLAIN_EMPTY_STATE,
    PLAIN_PAGE_TEMPLATE,
    RICH_CARD_TEMPLATE,
    RICH_EMPTY_STATE,
    RICH_PAGE_TEMPLATE,
)


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"

COUNT_VERBS = {
    PageVariant.RICH: "available",
    PageVariant.PLAIN: "deployed",
}


def count_label(count: int, verb: str) -> str:
    """'1 prototype <verb>' or 'N prototypes <verb>'."""
    noun = "prototype" if count == 1 else "prototypes"
    return f"{count} {noun} {verb}"


def prepare_slugs(slugs) -> List[str]:
    """Drop falsy entries and sort the rest. Duplicates are kept."""
    return sorted(slug for slug in slugs if slug)


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp in UTC. Naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class PageRenderer:
    """Turns slugs into a complete, self-contained HTML document."""

    def __init__(
        self,
        config: Optional[SiteConfig] = None,
        catalog: Optional[PrototypeCatalog] = None,
        now: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the renderer.

        Args:
            config: Site settings (default: built-in constants).
            catalog: Display metadata lookup (default: built-in catalog).
            now: Clock used for the plain variant's timestamp.
        """
        self.config = config or SiteConfig()
        self.catalog = catalog if catalog is not None else PrototypeCatalog()
        self.now = now or utc_now

    @property
    def variant(self) -> PageVariant:
        return self.config.variant

    def resolve_cards(self, slugs: List[str]) -> List[PrototypeCard]:
        """
        Resolve display fields for each slug.

        The plain variant skips the catalog and uses the raw slug everywhere.
        """
        if self.variant == PageVariant.PLAIN:
            return [
                PrototypeCard(
                    slug=slug,
                    name=slug,
                    icon="",
                    description="",
                    url=self.config.prototype_url(slug),
                )
                for slug in slugs
            ]
        return [self.catalog.resolve(slug, self.config) for slug in slugs]

    def render_card(self, card: PrototypeCard) -> str:
        url = html.escape(card.url, quote=True)
        if self.variant == PageVariant.PLAIN:
            return PLAIN_CARD_TEMPLATE.format(url=url, slug=html.escape(card.slug))
        return RICH_CARD_TEMPLATE.format(
            url=url,
            icon=html.escape(card.icon),
            name=html.escape(card.name),
            description=html.escape(card.description),
        )

    def render_listing(self, cards: List[PrototypeCard]) -> str:
        """Card grid, or the empty-state block when there is nothing to show."""
        if not cards:
            return PLAIN_EMPTY_STATE if self.variant == PageVariant.PLAIN else RICH_EMPTY_STATE
        return GRID_TEMPLATE.format(cards="\n".join(self.render_card(card) for card in cards))

    def render(self, slugs: List[str], generated_at: Optional[datetime] = None) -> str:
        """
        Render the full page.

        Args:
            slugs: Prototype slugs, already filtered and sorted.
            generated_at: Timestamp shown by the plain variant (default: now).

        Returns:
            HTML document as a string.
        """
        return self.render_cards(self.resolve_cards(slugs), generated_at)

    def render_cards(
        self,
        cards: List[PrototypeCard],
        generated_at: Optional[datetime] = None
    ) -> str:
        count_line = count_label(len(cards), COUNT_VERBS[self.variant])
        site_title = html.escape(self.config.site_title)

        if self.variant == PageVariant.PLAIN:
            return PLAIN_PAGE_TEMPLATE.format(
                site_title=site_title,
                count_line=count_line,
                listing=self.render_listing(cards),
                timestamp=format_timestamp(generated_at or self.now()),
            )

        return RICH_PAGE_TEMPLATE.format(
            site_title=site_title,
            documentation_url=html.escape(self.config.documentation_url, quote=True),
            about_url=html.escape(self.config.about_url, quote=True),
            count_line=count_line,
            listing=self.render_listing(cards),
        )
