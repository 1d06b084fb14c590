# byteme/domain/entities/candidacy.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from byteme.domain.enums.media_category import MediaCategory


@dataclass(frozen=True)
class CandidacySuccess:
    media_type: MediaCategory


@dataclass(frozen=True)
class CandidacyError:
    reason: str


@dataclass(frozen=True)
class CandidacyLoading:
    """Placeholder the UI shows before analysis finishes; never produced here."""


FileCandidacy = Union[CandidacySuccess, CandidacyError, CandidacyLoading]


@dataclass(frozen=True)
class FileCandidate:
    """One row of a tolerant batch: the input path and how it fared."""
    path: str
    filename: Optional[str]
    candidacy: FileCandidacy
