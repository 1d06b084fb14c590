# byteme/services/mappers/wire.py
from __future__ import annotations

from typing import Iterable, List, assert_never

from byteme.domain.entities.analysis import FileAnalysisError, FileAnalysisResult
from byteme.domain.entities.bitrate import BitrateData
from byteme.domain.entities.candidacy import (
    CandidacyError,
    CandidacyLoading,
    CandidacySuccess,
    FileCandidacy,
    FileCandidate,
)
from byteme.domain.entities.streams import AudioStream, StreamDescription, SubtitleStream, VideoStream
from byteme.services.schemas.analysis import (
    AudioStreamRead,
    FileAnalysisErrorRead,
    FileAnalysisRead,
    SubtitleStreamRead,
    VideoStreamRead,
)
from byteme.services.schemas.bitrate import BitrateDataRead, BitrateFrameRead
from byteme.services.schemas.candidacy import (
    CandidacyErrorRead,
    CandidacyLoadingRead,
    CandidacySuccessRead,
    FileCandidateRead,
)


def to_stream_read(s: StreamDescription) -> VideoStreamRead | AudioStreamRead | SubtitleStreamRead:
    if isinstance(s, VideoStream):
        return VideoStreamRead(
            codec=s.codec, width=s.width, height=s.height, bit_rate=s.bit_rate, frame_rate=s.frame_rate,
        )
    if isinstance(s, AudioStream):
        return AudioStreamRead(
            codec=s.codec, sample_rate=s.sample_rate, channels=s.channels, bit_rate=s.bit_rate,
        )
    if isinstance(s, SubtitleStream):
        return SubtitleStreamRead(codec=s.codec, language=s.language)
    assert_never(s)


def to_analysis_read(res: FileAnalysisResult) -> FileAnalysisRead:
    return FileAnalysisRead(
        path=res.path,
        filename=res.filename,
        media_type=res.media_type,
        duration=res.duration,
        size=res.size,
        streams=[to_stream_read(s) for s in res.streams],
        format_name=res.format_name,
    )


def to_analysis_reads(results: Iterable[FileAnalysisResult]) -> List[FileAnalysisRead]:
    return [to_analysis_read(r) for r in results]


def to_error_read(err: FileAnalysisError) -> FileAnalysisErrorRead:
    return FileAnalysisErrorRead(filename=err.filename, reason=err.reason, error_type=err.kind)


def to_candidacy_read(c: FileCandidacy) -> CandidacySuccessRead | CandidacyErrorRead | CandidacyLoadingRead:
    if isinstance(c, CandidacySuccess):
        return CandidacySuccessRead(media_type=c.media_type)
    if isinstance(c, CandidacyError):
        return CandidacyErrorRead(reason=c.reason)
    if isinstance(c, CandidacyLoading):
        return CandidacyLoadingRead()
    assert_never(c)


def to_candidate_reads(cands: Iterable[FileCandidate]) -> List[FileCandidateRead]:
    return [
        FileCandidateRead(path=c.path, filename=c.filename, candidacy=to_candidacy_read(c.candidacy))
        for c in cands
    ]


def to_bitrate_read(data: BitrateData) -> BitrateDataRead:
    return BitrateDataRead(
        id=data.id,
        frames=[BitrateFrameRead(frame_num=f.frame_num, packet_size=f.packet_size) for f in data.frames],
    )
