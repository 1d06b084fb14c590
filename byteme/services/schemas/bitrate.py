# byteme/services/schemas/bitrate.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class BitrateFrameRead(BaseModel):
    frame_num: int = Field(..., ge=0)
    packet_size: int = Field(..., ge=0)


class BitrateDataRead(BaseModel):
    id: str = Field(..., examples=["clip.mp4"])
    frames: List[BitrateFrameRead] = Field(default_factory=list)
