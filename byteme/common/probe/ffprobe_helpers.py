# byteme/common/probe/ffprobe_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Iterable, List, Optional


def build_ffprobe_cmd(
    input_path: str | Path,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "error",
    extra_args: Iterable[str] | None = None,
) -> List[str]:
    """
    Build an ffprobe command that describes the container and its streams as JSON.
    """
    base = [
        ffprobe_bin,
        "-v", log_level,
        "-show_streams",
        "-show_format",
        "-print_format", "json",
    ]
    if extra_args:
        base += list(extra_args)
    return base + ["--", str(input_path)]  # stop option parsing for names like "-clip.mp4"


def build_frame_size_cmd(
    input_path: str | Path,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "error",
    entry: str = "packet=size",
) -> List[str]:
    """
    Build an ffprobe command that prints one packet size per line for the
    first video stream, without section headers or keys.
    """
    return [
        ffprobe_bin,
        "-v", log_level,
        "-select_streams", "v:0",
        "-show_entries", entry,
        "-of", "csv=p=0",
        "--",
        str(input_path),
    ]


# ---- tolerant field coercions -------------------------------------------------
def maybe_float(x: Any) -> Optional[float]:
    if x is None or isinstance(x, bool):
        return None
    try:
        return float(x)
    except (TypeError, ValueError):
        return None


def maybe_uint(x: Any) -> Optional[int]:
    """Non-negative int from an int or numeric string; anything else is None."""
    if x is None or isinstance(x, bool):
        return None
    try:
        n = int(x) if isinstance(x, int) else int(float(str(x)))
    except (TypeError, ValueError, OverflowError):
        return None
    return n if n >= 0 else None


def maybe_str(x: Any) -> Optional[str]:
    if x is None:
        return None
    return str(x)


def get_tag(obj: dict | None, key: str) -> Optional[str]:
    if not obj:
        return None
    tags = obj.get("tags") or {}
    if not isinstance(tags, dict):
        return None
    return maybe_str(tags.get(key))
