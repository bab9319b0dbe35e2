"""Zone hierarchy helpers for domain names."""

from __future__ import annotations


def zone_list(domain: str) -> list[str]:
    """Return the zones ``domain`` belongs to, most specific first.

    A fully-qualified name such as ``"www.example.com."`` yields every
    ancestor down to the empty string. A name with no dot at all is
    returned on its own, since there is no parent to walk up to.
    """
    zones = [domain]
    while domain:
        _, dot, rest = domain.partition(".")
        if not dot:
            break
        domain = rest
        zones.append(domain)
    return zones