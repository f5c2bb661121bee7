from __future__ import annotations


def per_minute(count: int, elapsed_s: float) -> float:
    minutes = max(elapsed_s / 60.0, 1e-9)
    return count / minutes


def rate(count: int, elapsed_s: float | None) -> float | None:
    """Per-minute rate, or None until the clock has started."""
    if elapsed_s is None:
        return None
    return per_minute(count, elapsed_s)
