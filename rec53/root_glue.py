"""Root name server glue, with a replaceable override."""

from __future__ import annotations

import copy

import dns.message
import dns.name
import dns.opcode
import dns.rdataclass
import dns.rdatatype
import dns.rrset

ROOT_SERVERS: tuple[tuple[str, str], ...] = (
    ("a.root-servers.net.", "198.41.0.4"),
    ("b.root-servers.net.", "199.9.14.201"),
    ("c.root-servers.net.", "192.33.4.12"),
    ("d.root-servers.net.", "199.7.91.13"),
    ("e.root-servers.net.", "192.203.230.10"),
    ("f.root-servers.net.", "192.5.5.241"),
    ("g.root-servers.net.", "192.112.36.4"),
    ("h.root-servers.net.", "198.97.190.53"),
    ("i.root-servers.net.", "192.36.148.17"),
    ("j.root-servers.net.", "192.58.128.30"),
    ("k.root-servers.net.", "193.0.14.129"),
    ("l.root-servers.net.", "199.7.83.42"),
    ("m.root-servers.net.", "202.12.27.33"),
)

# Holds at most one message: the active override, if any.
_overrides: list[dns.message.Message] = []


def set_root_glue(message: dns.message.Message) -> None:
    """Replace the root glue with a deep copy of ``message``."""
    _overrides[:] = [copy.deepcopy(message)]


def reset_root_glue() -> None:
    """Drop any override so the built-in root servers are used again."""
    _overrides.clear()


def _build_default() -> dns.message.Message:
    message = dns.message.Message()
    message.set_opcode(dns.opcode.UPDATE)
    message.question.append(
        dns.rrset.RRset(dns.name.root, dns.rdataclass.IN, dns.rdatatype.SOA)
    )
    message.authority.append(
        dns.rrset.from_text_list(
            ".", 0, dns.rdataclass.IN, dns.rdatatype.NS, [name for name, _ in ROOT_SERVERS]
        )
    )
    for name, address in ROOT_SERVERS:
        message.additional.append(
            dns.rrset.from_text(name, 0, dns.rdataclass.IN, dns.rdatatype.A, address)
        )
    return message


def get_root_glue() -> dns.message.Message:
    """Return a fresh message holding root NS records and their A glue."""
    if _overrides:
        return copy.deepcopy(_overrides[0])
    return _build_default()