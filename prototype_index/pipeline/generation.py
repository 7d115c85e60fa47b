"""
Index page generation pipeline: slugs in, landing page on disk.
"""

import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from prototype_index.catalog import PrototypeCatalog
from prototype_index.io.page_writer import PageWriter
from prototype_index.models import GeneratedPage, SiteConfig, utc_now
from prototype_index.rendering.page_renderer import PageRenderer, prepare_slugs
from prototype_index.utils.build_logger import get_logger


class MissingOutputPathError(ValueError):
    """Raised when no output path is given."""

    def __init__(self, message: str = "An output path is required (usage: <output-path> [slug ...])"):
        super().__init__(message)


class IndexGenerator:
    """Generates the prototype landing page."""

    def __init__(
        self,
        config: Optional[SiteConfig] = None,
        catalog: Optional[PrototypeCatalog] = None,
        writer: Optional[PageWriter] = None,
        now: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the generator.

        Args:
            config: Site settings (default: built-in constants).
            catalog: Display metadata lookup (default: built-in catalog).
            writer: PageWriter instance (creates one if not provided).
            now: Clock for the generation timestamp.
        """
        self.config = config or SiteConfig()
        self.now = now or utc_now
        self.renderer = PageRenderer(self.config, catalog, self.now)
        self.writer = writer or PageWriter()
        self.logger = get_logger()

    def build(
        self,
        slugs: Iterable[Optional[str]],
        build_id: Optional[str] = None
    ) -> GeneratedPage:
        """
        Render the page in memory without writing it.

        Args:
            slugs: Prototype slugs in any order; falsy entries are dropped.
            build_id: Build ID for card-level logging.

        Returns:
            GeneratedPage with no output path set.
        """
        prepared = prepare_slugs(slugs)
        generated_at = self.now()

        cards = self.renderer.resolve_cards(prepared)
        if build_id:
            for card in cards:
                self.logger.log_card(build_id, card)

        return GeneratedPage(
            html_content=self.renderer.render_cards(cards, generated_at),
            slugs=prepared,
            variant=self.config.variant,
            generation_timestamp=generated_at,
        )

    def generate_and_save(
        self,
        output_path: Union[str, Path, None],
        slugs: Iterable[Optional[str]]
    ) -> GeneratedPage:
        """
        Render the page and write it to `output_path`.

        Args:
            output_path: Target file; parent directories are created.
            slugs: Prototype slugs in any order; falsy entries are dropped.

        Returns:
            GeneratedPage with the output path set.

        Raises:
            MissingOutputPathError: If `output_path` is empty.
            OSError: If the directory or file cannot be written.
        """
        if not output_path or not str(output_path).strip():
            raise MissingOutputPathError()

        requested_path = str(output_path)
        output_path = Path(output_path)
        slugs = list(slugs)
        start_time = time.time()
        build_id = self.logger.log_build_start(
            output_path, [s for s in slugs if s], self.config.variant.value
        )

        try:
            page = self.build(slugs, build_id=build_id)
            self.writer.save_html(output_path, page.html_content)
        except Exception as e:
            self.logger.log_build_error(build_id, output_path, e)
            raise

        page.output_path = output_path
        page.requested_path = requested_path
        self.logger.log_build_complete(
            build_id,
            output_path,
            page.slugs,
            page.variant.value,
            bytes_written=len(page.html_content.encode(self.writer.encoding)),
            start_time=start_time,
        )
        return page


def generate(
    output_path: Union[str, Path, None],
    slugs: Iterable[Optional[str]],
    config: Optional[SiteConfig] = None,
    catalog: Optional[PrototypeCatalog] = None,
    now: Optional[Callable[[], datetime]] = None
) -> GeneratedPage:
    """
    Write the landing page for `slugs` to `output_path` and report it.

    Prints a one-line confirmation to stdout on success. Filesystem errors
    propagate unchanged.

    Args:
        output_path: Target HTML file.
        slugs: Prototype slugs.
        config: Site settings (default: built-in constants).
        catalog: Display metadata lookup (default: built-in catalog).
        now: Clock for the plain variant's timestamp.

    Returns:
        The GeneratedPage that was written.
    """
    generator = IndexGenerator(config=config, catalog=catalog, now=now)
    page = generator.generate_and_save(output_path, slugs)
    print(page.confirmation_message())
    return page
