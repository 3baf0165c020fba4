"""
Tests for slide filenames, the date-partitioned image folders and grouping.
"""

import os
import re

import pytest

from slidestudio.exceptions import SlideStorageError
from slidestudio.slide_store import (
    derive_slide_filename,
    group_slide_files,
    list_slide_files,
    parse_slide_number,
    sanitize_title,
    save_slide_image,
)


def test_filename_from_slide_prompt():
    name = derive_slide_filename("Slide 3: Revenue Growth")
    assert name.startswith("slide-3-revenue-growth-")
    assert name.endswith(".png")
    assert re.fullmatch(r"slide-3-revenue-growth-[0-9a-f]{6}\.png", name)


def test_filename_strips_punctuation():
    name = derive_slide_filename("Slide 12: Q3 Results (+45%) & Outlook!\nVisual: bars")
    assert name.startswith("slide-12-q3-results-45-outlook-")


def test_filename_skips_markdown_decoration():
    assert derive_slide_filename("#### Slide 1: The Hook\nVisual: line").startswith("slide-1-the-hook-")


def test_filename_without_slide_marker():
    assert derive_slide_filename("A bold opening statement").startswith("slide-x-a-bold-opening-statement-")


def test_filename_falls_back_to_random_id():
    name = derive_slide_filename("!!!")
    assert re.fullmatch(r"slide-x-[0-9a-f]{8}\.png", name)
    assert parse_slide_number(name) is None


def test_filenames_are_unique():
    assert derive_slide_filename("Slide 1: Same") != derive_slide_filename("Slide 1: Same")


def test_sanitize_truncates_to_forty_characters():
    slug = sanitize_title("An Extremely Long Title That Keeps Going Well Past The Limit")
    assert len(slug) == 40
    assert slug == "an-extremely-long-title-that-keeps-going"


def test_save_creates_date_folder(storage):
    url = save_slide_image(b"\x89PNG data", "slide-1-a-abc123.png", "2026-02-01")

    assert url == "/generated-slides/2026-02-01/slide-1-a-abc123.png"
    path = storage / "public" / "generated-slides" / "2026-02-01" / "slide-1-a-abc123.png"
    assert path.read_bytes() == b"\x89PNG data"


def test_save_failure_raises_storage_error(storage):
    blocker = storage / "public"
    blocker.write_text("not a directory")

    with pytest.raises(SlideStorageError):
        save_slide_image(b"data", "slide-1-a.png", "2026-02-01")


def _make_folder(root, date, names):
    folder = root / "public" / "generated-slides" / date
    folder.mkdir(parents=True)
    for name in names:
        (folder / name).write_bytes(b"png")


def test_list_without_slides_root(storage):
    assert list_slide_files() == ([], "")


def test_list_prefers_configured_date(storage):
    _make_folder(storage, "2026-01-06", ["slide-1-a.png"])
    _make_folder(storage, "2026-03-01", ["slide-2-b.png"])

    assert list_slide_files() == (["slide-1-a.png"], "/generated-slides/2026-01-06")


def test_list_uses_latest_folder_and_only_png(storage, monkeypatch):
    from slidestudio.config import settings
    monkeypatch.setattr(settings, "PREFERRED_SLIDE_DATE", "")
    _make_folder(storage, "2026-01-05", ["slide-1-old.png"])
    _make_folder(storage, "2026-02-10", ["slide-2-b.png", "notes.txt", "slide-1-a.png"])

    files, base_path = list_slide_files()

    assert base_path == "/generated-slides/2026-02-10"
    assert files == ["slide-1-a.png", "slide-2-b.png"]


def test_slide_number_parsing():
    assert parse_slide_number("slide-7-vision-abc123.png") == 7
    assert parse_slide_number("SLIDE-7-vision.png") == 7
    assert parse_slide_number("slide-x--slide-4-hook-abc.png") == 4
    assert parse_slide_number("deck-slide-2.png") == 2
    assert parse_slide_number("myslide-2.png") is None
    assert parse_slide_number("slide-x-title.png") is None


def test_grouping_keeps_listing_order():
    groups = group_slide_files(["slide-1-a-x.png", "slide-1-b-y.png", "slide-2-c-z.png", "cover.png"])

    assert dict(groups) == {1: ["slide-1-a-x.png", "slide-1-b-y.png"], 2: ["slide-2-c-z.png"]}
    assert len(groups[1]) == 2
    assert len(groups[2]) == 1
