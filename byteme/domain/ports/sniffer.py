from __future__ import annotations
from typing import Optional, Protocol

class SignatureSnifferPort(Protocol):
    # identifying code (a MIME string) for a header buffer, or None if unrecognized
    def sniff(self, header: bytes) -> Optional[str]: ...
