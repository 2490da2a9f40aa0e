"""Human-readable byte sizes using binary (1024-based) units."""

from __future__ import annotations

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


def format_size(num_bytes: int) -> str:
    """Return ``num_bytes`` as ``"N B"`` or a two-decimal KB/MB/GB label.

    The largest unit whose threshold ``num_bytes`` reaches wins, so
    ``1023`` is ``"1023 B"`` and ``1024`` is ``"1.00 KB"``.
    """
    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative: {num_bytes}")
    if num_bytes >= GB:
        return f"{num_bytes / GB:.2f} GB"
    if num_bytes >= MB:
        return f"{num_bytes / MB:.2f} MB"
    if num_bytes >= KB:
        return f"{num_bytes / KB:.2f} KB"
    return f"{num_bytes} B"


__all__ = ["KB", "MB", "GB", "format_size"]
