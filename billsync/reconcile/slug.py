"""URL slug helpers."""
import re
from typing import Optional

from billsync.config.constants import SLUG_MAX_LENGTH
from billsync.models.cms import NormalizedNumbers

_DISALLOWED_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-{2,}")


def slugify(text: Optional[str], max_length: int = SLUG_MAX_LENGTH) -> str:
    """
    Turn a title into a URL-safe slug.

    Examples:
        >>> slugify("An Act Relating to Education!!")
        "an-act-relating-to-education"
        >>> slugify("!!!")
        ""
    """
    value = (text or "").lower()
    value = _DISALLOWED_RE.sub("", value)
    value = _WHITESPACE_RE.sub("-", value)
    value = _HYPHENS_RE.sub("-", value)
    value = value.strip("-")
    return value[:max_length].rstrip("-")


def build_item_slug(
    legislative_year: Optional[str],
    numbers: NormalizedNumbers,
    title: Optional[str],
) -> Optional[str]:
    """
    Build the CMS item slug: "<year>--<hf123-sf456>--<title-slug>".

    Returns None unless both the year and a title are available.
    """
    year_slug = slugify(legislative_year)
    title_slug = slugify(title)
    if not year_slug or not title_slug:
        return None

    identifiers = "-".join(n.lower() for n in (numbers.house, numbers.senate) if n)
    parts = [p for p in (year_slug, identifiers, title_slug) if p]
    return "--".join(parts)
