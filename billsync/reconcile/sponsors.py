"""
Sponsor list rendering.

Chief authors (and joint authors, when enabled) are shown as
"Rep. Jane Doe (D)" lines; co-authors are left out.
"""
import html
import re
from typing import Iterable, List, Optional, Tuple

from billsync.config.constants import (
    FEDERAL_JURISDICTION,
    ROLE_ID_REPRESENTATIVE,
    ROLE_ID_SENATOR,
    SPONSOR_TYPE_JOINT,
    SPONSOR_TYPE_PRIMARY,
)
from billsync.models.legislation import Sponsor, SponsorRank

REP_PREFIX = "Rep."
SEN_PREFIX = "Sen."

# MN districts: "12A" / "HD-012A" are House seats, "12" / "SD-012" are Senate seats
_HOUSE_DISTRICT_RE = re.compile(r"^(?:HD)?[-\s]*\d+[A-Z]$")
_SENATE_DISTRICT_RE = re.compile(r"^(?:SD)?[-\s]*\d+$")


# ============================================================================
# Ranking
# ============================================================================

def sponsor_rank(sponsor: Sponsor, include_joint: bool = True) -> SponsorRank:
    """
    Rank a sponsor by type. Unknown and co-sponsor types are excluded.

    The numeric type id wins; the type text is only consulted when LegiScan
    left the id out.
    """
    type_id = sponsor.sponsor_type_id
    type_text = (sponsor.sponsor_type or "").strip().lower()

    if type_id == SPONSOR_TYPE_PRIMARY:
        return SponsorRank.PRIMARY
    if type_id == SPONSOR_TYPE_JOINT:
        return SponsorRank.JOINT if include_joint else SponsorRank.EXCLUDED
    if type_id is not None:
        return SponsorRank.EXCLUDED

    if type_text.startswith(("primary", "chief")):
        return SponsorRank.PRIMARY
    if type_text.startswith("joint"):
        return SponsorRank.JOINT if include_joint else SponsorRank.EXCLUDED
    return SponsorRank.EXCLUDED


def _dedupe_key(sponsor: Sponsor) -> Tuple[str, str, str, str]:
    type_key = str(sponsor.sponsor_type_id or sponsor.sponsor_type or "").lower()
    return (
        sponsor.name.lower(),
        type_key,
        (sponsor.party or "").lower(),
        (sponsor.district or "").lower(),
    )


def rank_sponsors(sponsors: Iterable[Sponsor], include_joint: bool = True) -> List[Sponsor]:
    """
    Drop excluded sponsors, sort by (rank, name), and dedupe.

    Duplicates share name, type, party, and district; the first one kept wins.
    """
    ranked = [
        (sponsor_rank(s, include_joint), s)
        for s in sponsors
        if s.name
    ]
    ranked = [(rank, s) for rank, s in ranked if rank != SponsorRank.EXCLUDED]
    ranked.sort(key=lambda pair: (pair[0], pair[1].name))

    seen = set()
    result = []
    for _, sponsor in ranked:
        key = _dedupe_key(sponsor)
        if key in seen:
            continue
        seen.add(key)
        result.append(sponsor)
    return result


# ============================================================================
# Prefix
# ============================================================================

def _prefix_from_text(text: Optional[str]) -> str:
    value = (text or "").strip().lower()
    if value == "h" or value.startswith(("rep", "house")):
        return REP_PREFIX
    if value == "s" or value.startswith("sen"):
        return SEN_PREFIX
    return ""


def _prefix_from_district(district: Optional[str]) -> str:
    value = (district or "").strip().upper()
    if _HOUSE_DISTRICT_RE.match(value):
        return REP_PREFIX
    if _SENATE_DISTRICT_RE.match(value):
        return SEN_PREFIX
    return ""


def sponsor_prefix(sponsor: Sponsor, jurisdiction: str) -> str:
    """
    Work out "Rep." or "Sen." for a sponsor.

    Tried in order: role id, role text, chamber/type text, and for state
    bills only, the district code. Returns "" if nothing matches.
    """
    if sponsor.role_id == ROLE_ID_REPRESENTATIVE:
        return REP_PREFIX
    if sponsor.role_id == ROLE_ID_SENATOR:
        return SEN_PREFIX

    for text in (sponsor.role, sponsor.chamber):
        prefix = _prefix_from_text(text)
        if prefix:
            return prefix

    if jurisdiction.upper() != FEDERAL_JURISDICTION:
        return _prefix_from_district(sponsor.district)

    return ""


# ============================================================================
# Rendering
# ============================================================================

def format_sponsor(sponsor: Sponsor, jurisdiction: str) -> str:
    """
    Format one sponsor line (unescaped).

    Examples:
        >>> format_sponsor(Sponsor(name="Jane Doe", party="D", role_id=1), "MN")
        "Rep. Jane Doe (D)"
    """
    parts = []
    prefix = sponsor_prefix(sponsor, jurisdiction)
    if prefix:
        parts.append(prefix)
    parts.append(sponsor.name)
    party = (sponsor.party or "").strip()
    if party:
        parts.append(f"({party})")
    return " ".join(parts)


def render_sponsors(
    sponsors: Iterable[Sponsor],
    jurisdiction: str,
    include_joint: bool = True,
) -> str:
    """Render the sponsor list as HTML lines joined by <br>."""
    lines = [
        html.escape(format_sponsor(s, jurisdiction))
        for s in rank_sponsors(sponsors, include_joint)
    ]
    return "<br>".join(lines)
