# rec53

Pieces of an iterative DNS resolver, built on `dnspython`.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## What is inside

### `rec53.zones`

`zone_list(domain)` lists the zones that a fully qualified name belongs to,
from most to least specific. For example, `"www.example.com."` gives
`["www.example.com.", "example.com.", "com.", ""]`. A name with no dot
comes back on its own.

### `rec53.root_glue`

This module holds the built-in root hints: 13 root NS records (`a` to
`m.root-servers.net.`) and their IPv4 glue. The list is also available as
`ROOT_SERVERS`.

- `get_root_glue()` returns a fresh `dns.message.Message`. The NS records
  are in its authority section and the A records in its additional section.
- `set_root_glue(message)` replaces the hints with a deep copy of your own
  message. Later calls to `get_root_glue()` return copies of that message.
- `reset_root_glue()` brings back the built-in list.

### `rec53.tlds`

- `DEFAULT_CURATED_TLDS` holds 30 TLDs. It is made up of `TIER1_TLDS` (8)
  followed by `TIER2_TLDS` (22).
- `load_tld_list(custom_tlds)` returns your list as a new list if it has
  entries. Otherwise it returns the curated default.

### `rec53.records`

These functions look at the authority section of a response.

- `extract_soa_from_authority(response)` returns the first SOA and its
  negative-cache TTL. The TTL is the SOA minimum, or
  `DEFAULT_NEGATIVE_CACHE_TTL` (60) when the minimum is 0. When there is no
  SOA it returns `(None, 0)`.
- `has_soa_in_authority(response)` tells you whether any SOA is present.

### `rec53.upstream`

- `query_happy_eyeballs(query, best_addr, second_addr, port, on_failure=None)`
  sends the query over UDP to both addresses at once and returns the first
  answer as a `HappyEyeballsResult`, with fields `addr`, `response` and
  `rtt` (in seconds).
  - If `second_addr` is empty, only `best_addr` is asked.
  - Each address that fails is passed to `on_failure`.
  - If no address answers, it raises `UpstreamError`.
- `ip_list_from_response(response)` returns the A-record addresses in the
  additional section.
- `ns_names_from_response(response)` returns the NS target names in the
  authority section.
- `build_ns_ip_message(ns_name, ips)` builds a response that holds A records
  for `ns_name`, each with a TTL of 300, ready for caching.
- The upstream port is set with `set_iter_port(port)` and cleared with
  `reset_iter_port()`. `get_iter_port()` reads it and returns an `int`; the
  default is 53.
- The per-query timeout is set with `set_upstream_timeout(seconds)` and read
  with `get_upstream_timeout()`. The default is 1.5 s, and values below
  0.1 s are ignored.

### `rec53.warmup`

This module primes NS records for the root zone and the TLDs in a
`WarmupConfig`.

`WarmupConfig` has these fields:

- `enabled`
- `timeout`: per query, in seconds
- `duration`: for the whole run, in seconds
- `concurrency`: defaults to `calc_optimal_concurrency()`, which is twice
  the CPU count and at most 8
- `tlds`: defaults to the curated list

`DEFAULT_WARMUP_CONFIG` is an instance with all the defaults.

`warmup_domains(tlds)` returns `"."` followed by each TLD as a fully
qualified name.

`warmup_ns_records(config, query_ns, deadline=None)` calls
`query_ns(domain, query_deadline)` for every domain, at most
`config.concurrency` calls at a time.

- `deadline` is a `time.monotonic()` value. When it is left out, the run is
  bounded by `config.duration` from the moment of the call.
- A domain counts as failed when `query_ns` returns false or raises, and
  also when no worker slot frees up before the deadline.
- It returns `WarmupStats` with `total`, `succeeded`, `failed` and
  `duration` (in seconds).
- A concurrency below 1 raises `ValueError`.

## Example

```python
import dns.message
from rec53.root_glue import get_root_glue
from rec53.upstream import ip_list_from_response, query_happy_eyeballs

glue = get_root_glue()
addrs = ip_list_from_response(glue)
query = dns.message.make_query("com.", "NS")
result = query_happy_eyeballs(query, addrs[0], addrs[1], 53, on_failure=print)
print(result.addr, result.rtt, result.response.authority)
```

## What it does not do

This package is a set of building blocks, not a running resolver:

- There is no DNS server and no command to start one.
- There is no answer cache.
- There is no resolution state machine that follows referrals from the root
  down.
- There is no store that tracks upstream server quality.

Because of this, `warmup_ns_records` does no resolving itself. You supply
`query_ns`. In the same way, `query_happy_eyeballs` only reports failures
through `on_failure` and leaves any record-keeping to you.

## Tests

```
pytest
```