# byteme/common/strings/filenames.py
from __future__ import annotations

from typing import Tuple

ELLIPSIS = "..."
MAX_EXTENSION_LEN = 5  # including the dot


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split `name` into (stem, extension) for display purposes.

    The last dot counts as an extension separator only when it is neither the
    first nor the last character and the suffix (dot included) is at most
    five characters with no further dot. Otherwise the whole string is the
    stem and the extension is "".

        >>> split_extension("clip.mp4")
        ('clip', '.mp4')
        >>> split_extension("file.verylongextension")
        ('file.verylongextension', '')
        >>> split_extension(".hidden")
        ('.hidden', '')
    """
    pos = name.rfind(".")
    if pos <= 0 or pos >= len(name) - 1:
        return name, ""
    ext = name[pos:]
    if len(ext) > MAX_EXTENSION_LEN or "." in ext[1:]:
        return name, ""
    return name[:pos], ext


def truncate_middle(s: str, limit: int) -> str:
    """
    Shorten `s` to at most `limit` characters keeping both ends visible.

    Below five characters there is no room for a meaningful ellipsis, so the
    head is kept verbatim. Otherwise three characters go to "..." and the rest
    is split between head and tail, biased towards the tail once the budget
    allows it (tails carry sequence numbers and "_final" style markers).
    """
    if limit <= 0:
        return ""
    if len(s) <= limit:
        return s
    if limit < 5:
        return s[:limit]

    room = limit - len(ELLIPSIS)
    if room <= 4:
        head = 1
    elif room <= 6:
        head = room // 2
    else:
        head = 3
    tail = room - head

    return f"{s[:head]}{ELLIPSIS}{s[len(s) - tail:]}"


def compress_filename(name: str, limit: int) -> str:
    """
    Fit a filename into `limit` characters for display.

    Names that already fit are returned unchanged. Otherwise a short
    extension is kept verbatim and only the stem is shortened; if the
    extension alone would eat the whole budget the full name is shortened
    as one blob instead.

        >>> compress_filename("very_long_video_file_name.mp4", 18)
        'ver...ile_name.mp4'
        >>> compress_filename("43509374693.TS.mp4", 15)
        '435...93.TS.mp4'
        >>> compress_filename("file.verylongextension", 15)
        'fil...extension'
    """
    if limit <= 0 or not name:
        return ""
    if len(name) <= limit:
        return name

    stem, ext = split_extension(name)
    if len(ext) >= limit:
        return truncate_middle(name, limit)

    return truncate_middle(stem, limit - len(ext)) + ext
