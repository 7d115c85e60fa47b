"""
Tests for page writer.
"""

import pytest

from prototype_index.io.page_writer import PageWriter


def test_save_html_creates_parent_directories(tmp_path):
    writer = PageWriter()
    target = tmp_path / "site" / "nested" / "index.html"

    saved = writer.save_html(target, "<p>hi</p>")

    assert saved == target
    assert target.read_text(encoding="utf-8") == "<p>hi</p>"


def test_save_html_overwrites(tmp_path):
    writer = PageWriter()
    target = tmp_path / "index.html"
    target.write_text("old content that is longer", encoding="utf-8")

    writer.save_html(target, "new")

    assert target.read_text(encoding="utf-8") == "new"


def test_save_html_preserves_glyphs_and_newlines(tmp_path):
    writer = PageWriter()
    target = tmp_path / "index.html"

    writer.save_html(target, "🎨\n🧪\n")

    assert target.read_bytes() == "🎨\n🧪\n".encode("utf-8")


def test_save_html_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(OSError):
        PageWriter().save_html(blocker / "index.html", "<p></p>")
