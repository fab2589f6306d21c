"""Integer file deduplication, a write-latency benchmark and a shell that times them."""

__version__ = "0.1.0"
__all__ = ["dedup", "io_lat_write", "shell"]