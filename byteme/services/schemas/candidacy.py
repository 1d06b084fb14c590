# byteme/services/schemas/candidacy.py
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from byteme.domain.enums.media_category import MediaCategory


class CandidacySuccessRead(BaseModel):
    status: Literal["success"] = "success"
    media_type: MediaCategory


class CandidacyErrorRead(BaseModel):
    status: Literal["error"] = "error"
    reason: str


class CandidacyLoadingRead(BaseModel):
    status: Literal["loading"] = "loading"


CandidacyRead = Annotated[
    Union[CandidacySuccessRead, CandidacyErrorRead, CandidacyLoadingRead],
    Field(discriminator="status"),
]


class FileCandidateRead(BaseModel):
    path: str
    filename: Optional[str] = None
    candidacy: CandidacyRead
