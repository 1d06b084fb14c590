# byteme/domain/entities/streams.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from byteme.domain.enums.stream_kind import StreamKind

UNKNOWN_CODEC = "unknown"


@dataclass(frozen=True)
class VideoStream:
    """
    A video stream as reported by the probe. Only the codec label is ever
    synthesized ("unknown"); every other field is None when the probe did
    not report it.
    """
    kind: ClassVar[StreamKind] = StreamKind.video

    codec: str = UNKNOWN_CODEC
    width: Optional[int] = None
    height: Optional[int] = None
    bit_rate: Optional[str] = None     # container units, kept verbatim
    frame_rate: Optional[str] = None   # rational, e.g. "30000/1001"


@dataclass(frozen=True)
class AudioStream:
    kind: ClassVar[StreamKind] = StreamKind.audio

    codec: str = UNKNOWN_CODEC
    sample_rate: Optional[str] = None
    channels: Optional[int] = None
    bit_rate: Optional[str] = None


@dataclass(frozen=True)
class SubtitleStream:
    kind: ClassVar[StreamKind] = StreamKind.subtitle

    codec: str = UNKNOWN_CODEC
    language: Optional[str] = None


StreamDescription = Union[VideoStream, AudioStream, SubtitleStream]
