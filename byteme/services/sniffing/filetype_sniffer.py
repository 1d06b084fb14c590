# byteme/services/sniffing/filetype_sniffer.py
from __future__ import annotations

from typing import Optional

import filetype

from byteme.domain.ports.sniffer import SignatureSnifferPort


class FiletypeSniffer(SignatureSnifferPort):
    """
    Infrastructure adapter implementing SignatureSnifferPort with the `filetype`
    package (pure-Python magic-number matching, no libmagic needed).
    """

    def sniff(self, header: bytes) -> Optional[str]:
        if not header:
            return None
        return filetype.guess_mime(bytearray(header))
