"""Tests for billsync.reconcile.slug."""

import re

import pytest

from billsync.models.cms import NormalizedNumbers
from billsync.reconcile.slug import build_item_slug, slugify


class TestSlugify:
    def test_basic_title(self):
        assert slugify("An Act Relating to Education!!") == "an-act-relating-to-education"

    def test_collapses_whitespace_and_hyphens(self):
        assert slugify("  Health -- care   and  --  safety ") == "health-care-and-safety"

    def test_entirely_symbols(self):
        assert slugify("!!! ???") == ""
        assert slugify(None) == ""

    @pytest.mark.parametrize("title", [
        "A" * 200,
        "word " * 40,
        "Omnibus; appropriations, taxes, education, health & human services, public safety provisions",
    ])
    def test_length_and_charset(self, title):
        slug = slugify(title)

        assert len(slug) <= 80
        assert re.fullmatch(r"[a-z0-9-]*", slug)
        assert not slug.startswith("-") and not slug.endswith("-")


class TestBuildItemSlug:
    def test_year_numbers_and_title(self):
        numbers = NormalizedNumbers(house="HF1099", senate="SF1000")
        assert build_item_slug("2024", numbers, "Paid Leave!") == "2024--hf1099-sf1000--paid-leave"

    def test_single_number(self):
        numbers = NormalizedNumbers(senate="SF7")
        assert build_item_slug("2025", numbers, "Water") == "2025--sf7--water"

    def test_requires_year_and_title(self):
        numbers = NormalizedNumbers(house="HF1")
        assert build_item_slug("", numbers, "Title") is None
        assert build_item_slug("2024", numbers, "") is None
        assert build_item_slug("2024", numbers, "!!!") is None
