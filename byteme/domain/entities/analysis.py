# byteme/domain/entities/analysis.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from byteme.common.settings import get_settings
from byteme.common.strings.filenames import compress_filename
from byteme.domain.entities.streams import StreamDescription
from byteme.domain.enums.file_error_kind import FileErrorKind
from byteme.domain.enums.media_category import MediaCategory


@dataclass(frozen=True)
class FileAnalysisResult:
    """Everything known about one successfully analyzed media file."""
    path: str
    filename: str
    media_type: MediaCategory
    duration: Optional[float] = None
    size: int = 0
    streams: Tuple[StreamDescription, ...] = field(default_factory=tuple)
    format_name: Optional[str] = None  # container format as the probe names it

    def display_name(self, limit: Optional[int] = None) -> str:
        if limit is None:
            limit = get_settings().naming.filename_limit
        return compress_filename(self.filename, limit)


@dataclass(frozen=True)
class FileAnalysisError(Exception):
    """
    Why one input path could not be analyzed. Raised by the per-file pipeline;
    `filename` is None only when no final path component could be derived.
    """
    reason: str
    kind: FileErrorKind
    filename: Optional[str] = None

    def __str__(self) -> str:
        who = self.filename if self.filename is not None else "<unnamed>"
        return f"{who}: {self.reason} [{self.kind}]"
