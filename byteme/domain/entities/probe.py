# byteme/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ContainerInfo:
    """
    Raw, framework-free result of probing a container (e.g., ffprobe -show_streams).
    Stream records are kept as the tool reported them; mapping them into typed
    stream descriptions is the mapper's job.
    """
    streams: List[Dict[str, Any]] = field(default_factory=list)
    duration: Optional[str] = None      # container-level, seconds as a string
    format_name: Optional[str] = None
