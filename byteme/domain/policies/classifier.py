# byteme/domain/policies/classifier.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from byteme.common.logging import get_logger
from byteme.common.settings import get_settings
from byteme.domain.enums.media_category import MediaCategory
from byteme.domain.policies.media_tables import EXTENSION_TABLE, SIGNATURE_TABLE
from byteme.domain.ports.sniffer import SignatureSnifferPort

logger = get_logger(__name__)


def is_media(category: MediaCategory) -> bool:
    """True exactly for Audio, Video and Image; gates stream probing."""
    return MediaCategory(category).is_media


def category_for_extension(path: Path | str) -> MediaCategory:
    ext = Path(path).suffix.lstrip(".").lower()
    if not ext:
        return MediaCategory.Unknown
    return EXTENSION_TABLE.get(ext, MediaCategory.Unknown)


class ContentClassifier:
    """
    Two-stage classifier: binary signature first, extension second.

    The signature wins whenever the sniffer recognizes the header, even if
    the code has no table entry (then the answer is Unknown). Only when
    nothing is recognized (unreadable file, empty or too-short header,
    unknown magic) does the extension decide.
    """

    def __init__(self, sniffer: SignatureSnifferPort, *, sniff_bytes: Optional[int] = None) -> None:
        self.sniffer = sniffer
        self.sniff_bytes = int(sniff_bytes if sniff_bytes is not None else get_settings().classifier.sniff_bytes)

    def classify(self, path: Path | str) -> MediaCategory:
        p = Path(path)
        code = self.sniff(p)
        if code is not None:
            return SIGNATURE_TABLE.get(code, MediaCategory.Unknown)
        return category_for_extension(p)

    def sniff(self, path: Path) -> Optional[str]:
        header = self._read_header(path)
        if not header:
            return None
        return self.sniffer.sniff(header)

    def _read_header(self, path: Path) -> bytes:
        try:
            with path.open("rb") as f:
                return f.read(self.sniff_bytes)
        except OSError as ex:
            logger.debug("cannot read header of %s: %s", path, ex)
            return b""

