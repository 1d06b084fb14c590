# byteme/common/strings/sizes.py
from __future__ import annotations

import math

_UNITS = ("KiB", "MiB", "GiB", "TiB")


def format_bytes(n: int | float) -> str:
    """
    Human-readable size with binary units.

    Values under 1024 are shown in bytes. Larger values are scaled up to TiB;
    four-digit integer parts drop the decimal, a fraction of at least 0.1 gets
    one decimal ("1.5 MiB"), anything smaller is shown as a whole number.
    """
    if n < 1024:
        return f"{int(n)} B"

    value = float(n)
    unit = -1
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1

    whole = math.floor(value)
    if whole >= 1000:
        return f"{whole} {_UNITS[unit]}"
    if value - whole >= 0.1:
        return f"{value:.1f} {_UNITS[unit]}"
    return f"{whole} {_UNITS[unit]}"
