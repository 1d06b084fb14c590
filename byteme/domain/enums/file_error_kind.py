from __future__ import annotations
from enum import StrEnum

class FileErrorKind(StrEnum):
    not_found = "not_found"
    not_file = "not_file"
    not_media = "not_media"
    analysis_failed = "analysis_failed"
    timed_out = "timed_out"
