"""Helpers for inspecting the authority section of DNS responses."""

from __future__ import annotations

import dns.message
import dns.rdatatype
from dns.rdtypes.ANY.SOA import SOA

DEFAULT_NEGATIVE_CACHE_TTL = 60
"""TTL for negative answers when the SOA minimum is missing or zero."""


def _soa_records(response: dns.message.Message):
    for rrset in response.authority:
        if rrset.rdtype == dns.rdatatype.SOA:
            yield from rrset


def extract_soa_from_authority(response: dns.message.Message) -> tuple[SOA | None, int]:
    """Return the first SOA in the authority section and its negative TTL.

    The TTL is the SOA minimum, or DEFAULT_NEGATIVE_CACHE_TTL when that is
    zero. Without an SOA the result is ``(None, 0)``.
    """
    for soa in _soa_records(response):
        return soa, soa.minimum or DEFAULT_NEGATIVE_CACHE_TTL
    return None, 0


def has_soa_in_authority(response: dns.message.Message) -> bool:
    """Tell whether the authority section holds an SOA record."""
    return any(True for _ in _soa_records(response))