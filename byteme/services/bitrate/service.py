# byteme/services/bitrate/service.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from byteme.common.logging import get_logger
from byteme.domain.entities.bitrate import BitrateData, BitrateFrame
from byteme.domain.ports.probe import MediaProbePort
from byteme.services.probe.ffprobe_adapter import (
    FFprobeAdapter,
    FFprobeError,
    FFprobeLaunchError,
    FFprobeTimeoutError,
)

logger = get_logger(__name__)


class BitrateError(RuntimeError):
    """Base for everything that stops a bitrate extraction."""


class SourceMissingError(BitrateError):
    pass


class ProbeLaunchError(BitrateError):
    pass


class ProbeExitError(BitrateError):
    pass


class ProbeTimeoutError(BitrateError):
    pass


class NoFrameDataError(BitrateError):
    pass


def parse_packet_sizes(lines: Iterable[str]) -> List[BitrateFrame]:
    """
    One packet size per line. Lines that are not a non-negative integer are
    tool noise and are skipped; frame numbers count only accepted lines, so
    they stay dense.
    """
    frames: List[BitrateFrame] = []
    for line in lines:
        text = line.strip()
        try:
            size = int(text)
        except ValueError:
            continue
        if size < 0:
            continue
        frames.append(BitrateFrame(frame_num=len(frames), packet_size=size))
    return frames


class BitrateExtractor:
    """Per-frame packet sizes of the first video stream of one file."""

    def __init__(self, prober: Optional[Callable[[], MediaProbePort]] = None) -> None:
        self.prober: Callable[[], MediaProbePort] = prober or (lambda: FFprobeAdapter())

    def extract(self, path: str | Path) -> BitrateData:
        path = str(path)
        p = Path(path)
        try:
            exists = bool(path) and p.exists()
        except OSError as ex:
            raise SourceMissingError(f"File does not exist or is not accessible: {path} ({ex.strerror or ex})") from ex
        if not exists:
            raise SourceMissingError(f"File does not exist: {path}")

        try:
            lines = self.prober().frame_sizes(p)
        except FFprobeTimeoutError as ex:
            raise ProbeTimeoutError(f"ffprobe timed out reading frames of {p.name}: {ex}") from ex
        except FFprobeLaunchError as ex:
            raise ProbeLaunchError(f"Failed to run ffprobe: {ex}") from ex
        except FFprobeError as ex:
            raise ProbeExitError(f"ffprobe failed on {p.name}: {ex}") from ex

        frames = parse_packet_sizes(lines)
        if not frames:
            raise NoFrameDataError(f"No frame data found in {p.name}")

        logger.debug("extracted %d frame size(s) from %s", len(frames), path)
        return BitrateData(id=p.name or path, frames=tuple(frames))
