from __future__ import annotations
from pathlib import Path
from typing import List, Protocol
from byteme.domain.entities.probe import ContainerInfo

class MediaProbePort(Protocol):
    def probe(self, path: Path) -> ContainerInfo: ...

    # raw stdout lines of a frame-dump run; noise lines included
    def frame_sizes(self, path: Path) -> List[str]: ...
