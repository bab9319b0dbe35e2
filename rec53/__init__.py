"""Building blocks for an iterative DNS resolver: zone lists, root hints,
curated TLDs, authority-section helpers, upstream queries and NS warmup."""

__version__ = "0.1.0"
__all__ = ["zones", "root_glue", "tlds", "records", "upstream", "warmup"]