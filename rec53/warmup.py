"""Warm the resolver's NS cache for the root zone and popular TLDs."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from rec53.tlds import DEFAULT_CURATED_TLDS

log = logging.getLogger(__name__)

MAX_WARMUP_CONCURRENCY = 8

DEFAULT_TLDS: tuple[str, ...] = DEFAULT_CURATED_TLDS
"""Kept as an alias of the curated TLD list."""

QueryNS = Callable[[str, float], bool]
"""Resolve the NS records of a domain before a monotonic deadline; report success."""


def calc_optimal_concurrency() -> int:
    """Return min(2 * CPU count, 8): warmup queries are I/O bound."""
    cpus = os.cpu_count() or 1
    return min(cpus * 2, MAX_WARMUP_CONCURRENCY)


@dataclass
class WarmupConfig:
    """Settings for NS warmup at startup.

    ``timeout`` bounds each query and ``duration`` the whole run, both in seconds.
    """

    enabled: bool = True
    timeout: float = 5.0
    duration: float = 5.0
    concurrency: int = field(default_factory=calc_optimal_concurrency)
    tlds: list[str] = field(default_factory=lambda: list(DEFAULT_TLDS))


DEFAULT_WARMUP_CONFIG = WarmupConfig()


@dataclass
class WarmupStats:
    """Counts and elapsed seconds of one warmup run."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    duration: float = 0.0


def _fqdn(name: str) -> str:
    return name if name.endswith(".") else name + "."


def warmup_domains(tlds: Iterable[str]) -> list[str]:
    """Return the root followed by every TLD as a fully-qualified name."""
    return ["."] + [_fqdn(tld) for tld in tlds]


def warmup_ns_records(
    config: WarmupConfig,
    query_ns: QueryNS,
    deadline: float | None = None,
) -> WarmupStats:
    """Query NS records for the root and the configured TLDs concurrently.

    ``deadline`` is an absolute ``time.monotonic()`` value; when omitted the
    run is bounded by ``config.duration`` from now. Domains that cannot get a
    worker slot before the deadline are counted as failures, as are queries
    that return false or raise.
    """
    if config.concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {config.concurrency}")

    start = time.monotonic()
    if deadline is None:
        deadline = start + config.duration

    domains = warmup_domains(config.tlds)
    stats = WarmupStats(total=len(domains))
    lock = threading.Lock()
    slots = threading.BoundedSemaphore(config.concurrency)

    def record(success: bool) -> None:
        with lock:
            if success:
                stats.succeeded += 1
            else:
                stats.failed += 1

    def run(domain: str) -> None:
        try:
            query_deadline = min(time.monotonic() + config.timeout, deadline)
            try:
                ok = bool(query_ns(domain, query_deadline))
            except Exception as exc:  # a single domain must not stop the warmup
                log.debug("warmup query for %s raised (non-fatal): %s", domain, exc)
                ok = False
            if not ok:
                log.debug("warmup query for %s failed", domain)
            record(ok)
        finally:
            slots.release()

    with ThreadPoolExecutor(max_workers=config.concurrency) as executor:
        for domain in domains:
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not slots.acquire(timeout=remaining):
                record(False)
                continue
            executor.submit(run, domain)

    stats.duration = time.monotonic() - start
    log.info(
        "NS warmup completed: %d/%d succeeded, %d failed in %.1fs",
        stats.succeeded, stats.total, stats.failed, stats.duration,
    )
    return stats