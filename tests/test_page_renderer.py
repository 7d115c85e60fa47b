"""
Tests for page rendering.
"""

from datetime import datetime, timezone

import pytest
from bs4 import BeautifulSoup

from prototype_index.catalog import PrototypeCatalog
from prototype_index.models import PageVariant, PrototypeMeta, SiteConfig
from prototype_index.rendering.page_renderer import (
    PageRenderer,
    count_label,
    format_timestamp,
    prepare_slugs,
)


BASE_URL = "https://karimlo.github.io/prototype"
FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def parse(html_content):
    return BeautifulSoup(html_content, "html.parser")


@pytest.fixture
def rich_renderer():
    return PageRenderer()


@pytest.fixture
def plain_renderer():
    return PageRenderer(SiteConfig(variant=PageVariant.PLAIN), now=lambda: FIXED_TIME)


def test_prepare_slugs_filters_and_sorts():
    assert prepare_slugs(["test-prototype-1", "", None, "main"]) == ["main", "test-prototype-1"]


def test_prepare_slugs_is_case_sensitive_and_keeps_duplicates():
    assert prepare_slugs(["beta", "alpha", "Alpha", "beta"]) == ["Alpha", "alpha", "beta", "beta"]


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, "0 prototypes available"),
        (1, "1 prototype available"),
        (2, "2 prototypes available"),
        (11, "11 prototypes available"),
    ],
)
def test_count_label(count, expected):
    assert count_label(count, "available") == expected


def test_format_timestamp():
    assert format_timestamp(FIXED_TIME) == "2026-01-02 03:04:05 UTC"
    assert format_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02 03:04:05 UTC"


def test_rich_cards_in_sorted_order(rich_renderer):
    """Test one card per slug, sorted, each linking to its deployment."""
    soup = parse(rich_renderer.render(prepare_slugs(["test-prototype-1", "main"])))

    cards = soup.select("a.prototype-card")
    assert [card["href"] for card in cards] == [
        f"{BASE_URL}/main/",
        f"{BASE_URL}/test-prototype-1/",
    ]
    assert [card.select_one(".card-title").get_text() for card in cards] == [
        "Main Prototype",
        "Test Prototype 1",
    ]
    for card in cards:
        assert card["target"] == "_blank"
        assert card["rel"] == ["noopener", "noreferrer"]

    assert soup.select_one(".prototypes-count").get_text() == "2 prototypes available"
    assert soup.select_one(".empty") is None


def test_rich_card_uses_catalog_metadata(rich_renderer):
    soup = parse(rich_renderer.render(["main", "zz-unknown-thing"]))

    main_card, unknown_card = soup.select("a.prototype-card")
    assert main_card.select_one(".card-icon").get_text() == "🎨"
    assert "storyboard prototype" in main_card.select_one(".card-description").get_text()

    assert unknown_card.select_one(".card-title").get_text() == "Zz Unknown Thing"
    assert unknown_card.select_one(".card-icon").get_text() == "📁"
    assert unknown_card.select_one(".card-description").get_text() == "View this prototype deployment."


def test_rich_single_prototype_is_singular(rich_renderer):
    soup = parse(rich_renderer.render(["main"]))
    assert soup.select_one(".prototypes-count").get_text() == "1 prototype available"


def test_rich_empty_state(rich_renderer):
    soup = parse(rich_renderer.render([]))

    assert soup.select_one(".prototypes-count").get_text() == "0 prototypes available"
    assert "No prototypes deployed yet" in soup.select_one(".empty").get_text()
    assert soup.select_one(".prototypes-grid") is None
    assert soup.select("a.prototype-card") == []


def test_rich_navigation_chrome(rich_renderer):
    soup = parse(rich_renderer.render(["main"]))
    config = SiteConfig()

    links = {a.get_text(strip=True).rstrip("↗").strip(): a["href"] for a in soup.select("a.nav-link")}
    assert links == {
        "Prototypes": "/",
        "Documentation": config.documentation_url,
        "About Me": config.about_url,
    }
    assert soup.select_one("a.nav-brand").get_text() == "My UX AI"
    assert soup.title.get_text() == "My UX AI"


def test_rich_menu_toggle_is_wired_once(rich_renderer):
    html_content = rich_renderer.render(["main"])
    soup = parse(html_content)

    button = soup.select_one("button.nav-toggle")
    assert button is not None
    assert not button.has_attr("onclick")
    scripts = soup.find_all("script")
    assert len(scripts) == 1
    assert html_content.count("classList.toggle('menu-open')") == 1


def test_rich_output_has_inline_style_only(rich_renderer):
    soup = parse(rich_renderer.render(["main"]))
    assert soup.find("link", rel="stylesheet") is None
    assert ".prototype-card" in soup.style.string


def test_rich_output_is_deterministic(rich_renderer):
    assert rich_renderer.render(["main", "b"]) == PageRenderer().render(["main", "b"])


def test_plain_uses_raw_slugs(plain_renderer):
    soup = parse(plain_renderer.render(prepare_slugs(["test-prototype-1", "main"])))

    cards = soup.select("a.prototype-card")
    assert [card.select_one(".card-title").get_text() for card in cards] == ["main", "test-prototype-1"]
    assert [card["href"] for card in cards] == [f"{BASE_URL}/main/", f"{BASE_URL}/test-prototype-1/"]
    assert soup.select_one(".card-icon") is None
    assert soup.select_one(".prototypes-count").get_text() == "2 prototypes deployed"


def test_plain_embeds_timestamp_and_no_script(plain_renderer):
    soup = parse(plain_renderer.render(["main"]))

    assert soup.select_one(".last-updated").get_text() == "Last updated: 2026-01-02 03:04:05 UTC"
    assert soup.select_one(".prototypes-count").get_text() == "1 prototype deployed"
    assert soup.find("script") is None
    assert soup.select_one("nav") is None


def test_plain_empty_state(plain_renderer):
    soup = parse(plain_renderer.render([]))

    assert soup.select_one(".prototypes-count").get_text() == "0 prototypes deployed"
    assert soup.select_one(".empty").get_text() == "No prototypes deployed yet."


def test_plain_runs_differ_only_in_timestamp():
    config = SiteConfig(variant=PageVariant.PLAIN)
    later = datetime(2026, 5, 6, 7, 8, 9, tzinfo=timezone.utc)

    first = PageRenderer(config, now=lambda: FIXED_TIME).render(["main"])
    second = PageRenderer(config, now=lambda: later).render(["main"])

    assert first != second
    assert first.replace("2026-01-02 03:04:05 UTC", "2026-05-06 07:08:09 UTC") == second


def test_generated_at_overrides_clock(plain_renderer):
    moment = datetime(2030, 12, 31, 23, 59, 0, tzinfo=timezone.utc)
    assert "Last updated: 2030-12-31 23:59:00 UTC" in plain_renderer.render(["main"], generated_at=moment)


def test_markup_in_metadata_is_escaped():
    catalog = PrototypeCatalog({"x": PrototypeMeta(name="<b>Bold</b>", description="A & B")})
    html_content = PageRenderer(catalog=catalog).render(["x"])

    assert "&lt;b&gt;Bold&lt;/b&gt;" in html_content
    assert "A &amp; B" in html_content
    assert "<b>Bold</b>" not in html_content


def test_custom_base_url():
    renderer = PageRenderer(SiteConfig(base_url="https://example.org/protos"))
    soup = parse(renderer.render(["main"]))
    assert soup.select_one("a.prototype-card")["href"] == "https://example.org/protos/main/"
