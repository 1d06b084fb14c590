# byteme/domain/policies/media_tables.py
"""
Static lookup tables behind content classification.

SIGNATURE_TABLE maps the MIME code reported by binary signature sniffing to a
MediaCategory; many specific codes collapse into each category. Codes cover
the names used by common sniffers (some formats are reported under more than
one name, e.g. "audio/m4a" and "audio/mp4").

EXTENSION_TABLE maps a lowercase extension (no dot) to a MediaCategory and is
only consulted when sniffing finds nothing.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from byteme.domain.enums.media_category import MediaCategory


def _group(category: MediaCategory, keys: Iterable[str]) -> Dict[str, MediaCategory]:
    return {k: category for k in keys}


_AUDIO_CODES = (
    "audio/mpeg", "audio/mp3", "audio/m4a", "audio/mp4", "audio/ogg", "audio/x-flac",
    "audio/x-wav", "audio/amr", "audio/aac", "audio/x-aiff", "audio/x-dsf",
    "audio/x-ape", "audio/midi",
)
_VIDEO_CODES = (
    "video/mp4", "video/x-m4v", "video/x-matroska", "video/webm", "video/quicktime",
    "video/x-msvideo", "video/x-ms-wmv", "video/mpeg", "video/x-flv", "video/3gpp",
)
_IMAGE_CODES = (
    "image/jpeg", "image/png", "image/apng", "image/gif", "image/webp", "image/x-canon-cr2",
    "image/tiff", "image/bmp", "image/heif", "image/heic", "image/avif", "image/jpx",
    "image/jxl", "image/vnd.ms-photo", "image/vnd.adobe.photoshop",
    "image/vnd.microsoft.icon", "image/x-icon", "image/openraster", "image/vnd.djvu",
)
_DOCUMENT_CODES = (
    "application/pdf",
    "application/rtf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/vnd.oasis.opendocument.text",
    "application/vnd.oasis.opendocument.spreadsheet",
    "application/vnd.oasis.opendocument.presentation",
)
_ARCHIVE_CODES = (
    "application/zip", "application/x-tar", "application/vnd.rar",
    "application/x-rar-compressed", "application/gzip", "application/x-bzip2",
    "application/vnd.bzip3", "application/x-7z-compressed", "application/x-xz",
    "application/x-shockwave-flash", "application/octet-stream", "application/postscript",
    "application/vnd.sqlite3", "application/x-sqlite3", "application/x-nintendo-nes-rom",
    "application/x-google-chrome-extension", "application/vnd.ms-cab-compressed",
    "application/vnd.debian.binary-package", "application/x-deb", "application/x-unix-archive",
    "application/x-compress", "application/x-lzip", "application/x-rpm", "application/dicom",
    "application/zstd", "application/x-lz4", "application/x-ole-storage", "application/x-cpio",
    "application/x-par2", "application/epub+zip", "application/x-mobipocket-ebook",
    "application/x-brotli",
)
_EXECUTABLE_CODES = (
    "application/vnd.microsoft.portable-executable", "application/x-msdownload",
    "application/x-executable", "application/llvm", "application/x-mach-binary",
    "application/java", "application/vnd.android.dex", "application/vnd.android.dey",
    "application/x-x509-ca-cert", "application/wasm",
)

SIGNATURE_TABLE: Mapping[str, MediaCategory] = MappingProxyType({
    **_group(MediaCategory.Audio, _AUDIO_CODES),
    **_group(MediaCategory.Video, _VIDEO_CODES),
    **_group(MediaCategory.Image, _IMAGE_CODES),
    **_group(MediaCategory.Document, _DOCUMENT_CODES),
    **_group(MediaCategory.Archive, _ARCHIVE_CODES),
    **_group(MediaCategory.Executable, _EXECUTABLE_CODES),
})


EXTENSION_TABLE: Mapping[str, MediaCategory] = MappingProxyType({
    **_group(MediaCategory.Audio, (
        "mp3", "wav", "flac", "ogg", "m4a", "aac", "wma", "mid", "amr", "aiff", "dsf", "ape",
    )),
    **_group(MediaCategory.Video, (
        "mp4", "mkv", "webm", "mov", "avi", "wmv", "mpg", "flv", "m4v",
    )),
    **_group(MediaCategory.Image, (
        "gif", "png", "jpg", "jpeg", "bmp", "tiff", "webp", "cr2", "heif", "avif",
        "jxr", "psd", "ico", "ora", "djvu",
    )),
    **_group(MediaCategory.Document, (
        "txt", "md", "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods",
        "odp", "rtf",
    )),
    **_group(MediaCategory.Archive, (
        "zip", "rar", "7z", "tar", "gz", "bz2", "bz3", "xz", "swf", "sqlite", "nes", "crx",
        "cab", "deb", "ar", "z", "lz", "rpm", "dcm", "zst", "lz4", "cpio", "par2", "epub",
        "mobi",
    )),
    **_group(MediaCategory.Executable, (
        "exe", "dll", "msi", "dmg", "pkg", "app", "elf", "bc", "mach", "class", "dex",
        "dey", "der", "obj",
    )),
    **_group(MediaCategory.Library, ("so", "dylib")),
})
