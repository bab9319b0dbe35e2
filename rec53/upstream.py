"""Upstream query helpers: port and timeout settings, referral parsing and a
Happy Eyeballs race between two name servers."""

from __future__ import annotations

import copy
import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

import dns.exception
import dns.flags
import dns.message
import dns.query
import dns.rdataclass
import dns.rdatatype
import dns.rrset

log = logging.getLogger(__name__)

DEFAULT_PORT = 53
DEFAULT_UPSTREAM_TIMEOUT = 1.5
"""Default per-query timeout in seconds."""
MIN_UPSTREAM_TIMEOUT = 0.1
NS_IP_CACHE_TTL = 300
"""TTL given to A records built for resolved name server addresses."""

_QUERY_ERRORS = (dns.exception.DNSException, OSError)

_settings: dict[str, float | int] = {"timeout": DEFAULT_UPSTREAM_TIMEOUT}


class UpstreamError(Exception):
    """Raised when no upstream server produced a usable answer."""


@dataclass
class HappyEyeballsResult:
    """Outcome of a successful upstream exchange."""

    addr: str
    response: dns.message.Message
    rtt: float


def set_iter_port(port: int | str) -> None:
    """Send upstream queries to ``port`` instead of 53."""
    _settings["port"] = int(port)


def reset_iter_port() -> None:
    """Send upstream queries to port 53 again."""
    _settings.pop("port", None)


def get_iter_port() -> int:
    """Return the port used for upstream queries."""
    return int(_settings.get("port", DEFAULT_PORT))


def set_upstream_timeout(seconds: float) -> None:
    """Set the per-query timeout; values below 0.1 s are ignored."""
    if seconds < MIN_UPSTREAM_TIMEOUT:
        return
    _settings["timeout"] = seconds


def get_upstream_timeout() -> float:
    """Return the per-query timeout in seconds."""
    return float(_settings["timeout"])


def ip_list_from_response(response: dns.message.Message) -> list[str]:
    """Return the IPv4 addresses of the A records in the additional section."""
    return [
        rdata.address
        for rrset in response.additional
        if rrset.rdtype == dns.rdatatype.A
        for rdata in rrset
    ]


def ns_names_from_response(response: dns.message.Message) -> list[str]:
    """Return the name server names of the NS records in the authority section."""
    return [
        rdata.target.to_text()
        for rrset in response.authority
        if rrset.rdtype == dns.rdatatype.NS
        for rdata in rrset
    ]


def build_ns_ip_message(ns_name: str, ips: Iterable[str]) -> dns.message.Message:
    """Build a response holding A records for ``ns_name``, ready for caching."""
    message = dns.message.make_query(ns_name, dns.rdatatype.A)
    message.flags |= dns.flags.QR
    addresses = list(ips)
    if addresses:
        message.answer.append(
            dns.rrset.from_text_list(
                ns_name, NS_IP_CACHE_TTL, dns.rdataclass.IN, dns.rdatatype.A, addresses
            )
        )
    return message


def _exchange(query: dns.message.Message, addr: str, port: int) -> HappyEyeballsResult:
    start = time.monotonic()
    response = dns.query.udp(query, addr, timeout=get_upstream_timeout(), port=port)
    return HappyEyeballsResult(addr=addr, response=response, rtt=time.monotonic() - start)


def _report(on_failure: Callable[[str], None] | None, addr: str) -> None:
    if on_failure is not None:
        on_failure(addr)


def query_happy_eyeballs(
    query: dns.message.Message,
    best_addr: str,
    second_addr: str | None,
    port: int | str,
    on_failure: Callable[[str], None] | None = None,
) -> HappyEyeballsResult:
    """Send ``query`` to both addresses at once and return the first answer.

    Without ``second_addr`` only ``best_addr`` is asked. Every address that
    fails is passed to ``on_failure``. Raises UpstreamError when no address
    answers.
    """
    port = int(port)
    if not second_addr:
        log.debug("sending query to %s:%s (no second IP)", best_addr, port)
        try:
            return _exchange(query, best_addr, port)
        except _QUERY_ERRORS as exc:
            log.debug("query to %s failed: %s", best_addr, exc)
            _report(on_failure, best_addr)
            raise UpstreamError(f"query to {best_addr} failed: {exc}") from exc

    executor = ThreadPoolExecutor(max_workers=2)
    try:
        futures = {
            executor.submit(_exchange, copy.deepcopy(query), addr, port): addr
            for addr in (best_addr, second_addr)
        }
        first_error: BaseException | None = None
        for attempt, future in enumerate(as_completed(futures), start=1):
            addr = futures[future]
            try:
                result = future.result()
            except _QUERY_ERRORS as exc:
                log.debug("happy eyeballs: %s failed: %s", addr, exc)
                _report(on_failure, addr)
                if first_error is None:
                    first_error = exc
                continue
            log.debug("happy eyeballs: winner is %s (attempt %d)", addr, attempt)
            return result
        raise UpstreamError(f"all upstream IPs failed: {first_error}") from first_error
    finally:
        executor.shutdown(wait=False)