"""Curated top-level domains used to warm the NS cache."""

from __future__ import annotations

from collections.abc import Iterable

TIER1_TLDS: tuple[str, ...] = tuple("com cn de net org uk ru nl".split())
"""Global mega-TLDs."""

TIER2_TLDS: tuple[str, ...] = tuple(
    """
    br xyz info top it fr au in us pl ir eu es ca io ai
    me site shop online biz app
    """.split()
)
"""Major country-code TLDs and strategic generic TLDs."""

DEFAULT_CURATED_TLDS: tuple[str, ...] = TIER1_TLDS + TIER2_TLDS


def load_tld_list(custom_tlds: Iterable[str] | None) -> list[str]:
    """Return ``custom_tlds`` if it has entries, otherwise the curated list."""
    custom = list(custom_tlds or ())
    return custom if custom else list(DEFAULT_CURATED_TLDS)