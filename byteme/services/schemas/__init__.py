from byteme.services.schemas.analysis import (
    VideoStreamRead,
    AudioStreamRead,
    SubtitleStreamRead,
    StreamRead,
    FileAnalysisRead,
    FileAnalysisErrorRead,
)
from byteme.services.schemas.candidacy import (
    CandidacySuccessRead,
    CandidacyErrorRead,
    CandidacyLoadingRead,
    CandidacyRead,
    FileCandidateRead,
)
from byteme.services.schemas.bitrate import (
    BitrateFrameRead,
    BitrateDataRead,
)
from byteme.services.schemas.commands import (
    CommandOk,
    CommandError,
    CommandResult,
)
__all__ = [
    "VideoStreamRead",
    "AudioStreamRead",
    "SubtitleStreamRead",
    "StreamRead",
    "FileAnalysisRead",
    "FileAnalysisErrorRead",
    "CandidacySuccessRead",
    "CandidacyErrorRead",
    "CandidacyLoadingRead",
    "CandidacyRead",
    "FileCandidateRead",
    "BitrateFrameRead",
    "BitrateDataRead",
    "CommandOk",
    "CommandError",
    "CommandResult",
]
