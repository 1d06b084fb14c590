# byteme/services/mappers/streams.py
from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Optional

from byteme.common.probe.ffprobe_helpers import get_tag, maybe_float, maybe_str, maybe_uint
from byteme.domain.entities.streams import (
    UNKNOWN_CODEC,
    AudioStream,
    StreamDescription,
    SubtitleStream,
    VideoStream,
)
from byteme.domain.enums.stream_kind import StreamKind


def _codec(rec: Mapping[str, Any]) -> str:
    return maybe_str(rec.get("codec_name")) or UNKNOWN_CODEC


def to_stream_description(rec: Mapping[str, Any]) -> Optional[StreamDescription]:
    """
    Map one raw probe stream record. Returns None for stream types the UI
    cannot show (data, attachment, ...); that is not an error.
    """
    codec_type = rec.get("codec_type")
    if codec_type == StreamKind.video:
        return VideoStream(
            codec=_codec(rec),
            width=maybe_uint(rec.get("width")),
            height=maybe_uint(rec.get("height")),
            bit_rate=maybe_str(rec.get("bit_rate")),
            frame_rate=maybe_str(rec.get("r_frame_rate")),
        )
    if codec_type == StreamKind.audio:
        return AudioStream(
            codec=_codec(rec),
            sample_rate=maybe_str(rec.get("sample_rate")),
            channels=maybe_uint(rec.get("channels")),
            bit_rate=maybe_str(rec.get("bit_rate")),
        )
    if codec_type == StreamKind.subtitle:
        return SubtitleStream(
            codec=_codec(rec),
            language=get_tag(dict(rec), "language"),
        )
    return None


def to_stream_descriptions(records: Iterable[Mapping[str, Any]]) -> List[StreamDescription]:
    """Map raw records in probe order, dropping unrepresentable ones."""
    out: List[StreamDescription] = []
    for rec in records:
        desc = to_stream_description(rec)
        if desc is not None:
            out.append(desc)
    return out


def parse_duration(raw: Optional[str]) -> Optional[float]:
    """Container duration in seconds; unparsable or non-finite values become None."""
    val = maybe_float(raw)
    if val is None or not math.isfinite(val):
        return None
    return val
