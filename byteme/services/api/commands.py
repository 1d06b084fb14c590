# byteme/services/api/commands.py
"""
Entry points the desktop shell invokes. Each returns a wire envelope
(`CommandOk` / `CommandError`) instead of raising for per-file failures, so
the bridge can serialize the answer as-is with `.model_dump()`.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from byteme.common.logging import get_logger
from byteme.domain.entities.analysis import FileAnalysisError
from byteme.services.analysis.service import AnalysisService
from byteme.services.bitrate.service import BitrateError, BitrateExtractor
from byteme.services.mappers.wire import (
    to_analysis_reads,
    to_bitrate_read,
    to_candidate_reads,
    to_error_read,
)
from byteme.services.schemas import (
    BitrateDataRead,
    CommandError,
    CommandOk,
    FileAnalysisErrorRead,
    FileAnalysisRead,
    FileCandidateRead,
)

logger = get_logger(__name__)


def has_streams(
    paths: Sequence[str],
    *,
    service: Optional[AnalysisService] = None,
) -> CommandOk[List[FileAnalysisRead]] | CommandError[FileAnalysisErrorRead]:
    """All-or-nothing analysis: every path must be a probe-able media file."""
    svc = service or AnalysisService()
    try:
        results = svc.analyze_files(paths)
    except FileAnalysisError as ex:
        logger.info("has_streams rejected batch of %d: %s", len(paths), ex)
        return CommandError[FileAnalysisErrorRead](error=to_error_read(ex))
    return CommandOk[List[FileAnalysisRead]](data=to_analysis_reads(results))


def classify_paths(
    paths: Sequence[str],
    *,
    service: Optional[AnalysisService] = None,
) -> CommandOk[List[FileCandidateRead]]:
    """Per-path verdicts for a file drop; never fails as a whole."""
    svc = service or AnalysisService()
    return CommandOk[List[FileCandidateRead]](data=to_candidate_reads(svc.classify_files(paths)))


def get_bitrate(
    path: str,
    *,
    extractor: Optional[BitrateExtractor] = None,
) -> CommandOk[BitrateDataRead] | CommandError[str]:
    ext = extractor or BitrateExtractor()
    try:
        data = ext.extract(path)
    except BitrateError as ex:
        logger.info("get_bitrate failed for %s: %s", path, ex)
        return CommandError[str](error=str(ex))
    return CommandOk[BitrateDataRead](data=to_bitrate_read(data))
