# byteme/services/schemas/analysis.py
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from byteme.domain.enums.file_error_kind import FileErrorKind
from byteme.domain.enums.media_category import MediaCategory


# ---------- Streams (discriminated on `type`) ----------
class VideoStreamRead(BaseModel):
    type: Literal["video"] = "video"
    codec: str = Field(..., examples=["h264"])
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    bit_rate: Optional[str] = Field(None, examples=["4500000"])
    frame_rate: Optional[str] = Field(None, examples=["30000/1001"])


class AudioStreamRead(BaseModel):
    type: Literal["audio"] = "audio"
    codec: str = Field(..., examples=["aac"])
    sample_rate: Optional[str] = Field(None, examples=["48000"])
    channels: Optional[int] = Field(None, ge=0)
    bit_rate: Optional[str] = None


class SubtitleStreamRead(BaseModel):
    type: Literal["subtitle"] = "subtitle"
    codec: str = Field(..., examples=["subrip"])
    language: Optional[str] = Field(None, examples=["eng"])


StreamRead = Annotated[
    Union[VideoStreamRead, AudioStreamRead, SubtitleStreamRead],
    Field(discriminator="type"),
]


# ---------- Files ----------
class FileAnalysisRead(BaseModel):
    path: str
    filename: str
    media_type: MediaCategory
    duration: Optional[float] = None
    size: int = Field(0, ge=0)
    streams: List[StreamRead] = Field(default_factory=list)
    format_name: Optional[str] = Field(None, examples=["mov,mp4,m4a,3gp,3g2,mj2"])

    model_config = ConfigDict(use_enum_values=False)


class FileAnalysisErrorRead(BaseModel):
    filename: Optional[str] = None
    reason: str
    error_type: FileErrorKind
