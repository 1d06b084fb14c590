# byteme/domain/entities/bitrate.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class BitrateFrame:
    frame_num: int      # zero-based, dense
    packet_size: int    # bytes


@dataclass(frozen=True)
class BitrateData:
    """Per-frame packet sizes of one video, in probe emission (time) order."""
    id: str
    frames: Tuple[BitrateFrame, ...] = field(default_factory=tuple)

