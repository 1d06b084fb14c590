# byteme/domain/enums/media_category.py
from __future__ import annotations

from enum import StrEnum


class MediaCategory(StrEnum):
    Audio = "Audio"
    Video = "Video"
    Image = "Image"
    Document = "Document"
    Executable = "Executable"
    Archive = "Archive"
    Library = "Library"
    Unknown = "Unknown"

    @property
    def is_media(self) -> bool:
        return self in MEDIA_CATEGORIES


MEDIA_CATEGORIES = frozenset({MediaCategory.Audio, MediaCategory.Video, MediaCategory.Image})
