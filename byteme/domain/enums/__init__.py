from byteme.domain.enums.media_category import MediaCategory, MEDIA_CATEGORIES
from byteme.domain.enums.stream_kind import StreamKind
from byteme.domain.enums.file_error_kind import FileErrorKind
__all__ = [
    "MediaCategory",
    "MEDIA_CATEGORIES",
    "StreamKind",
    "FileErrorKind",
]
