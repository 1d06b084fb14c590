# byteme/services/probe/ffprobe_adapter.py
from __future__ import annotations

import json
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from byteme.common.logging import get_logger
from byteme.common.probe.ffprobe_helpers import build_ffprobe_cmd, build_frame_size_cmd, maybe_str
from byteme.common.settings import get_settings
from byteme.domain.entities.probe import ContainerInfo
from byteme.domain.ports.probe import MediaProbePort

logger = get_logger(__name__)


@dataclass(frozen=True)
class FFprobeError(RuntimeError):
    """Adapter-level error for probe failures; carries the tool's diagnostics."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        detail = (self.stderr or "").strip()
        return f"{self.message}: {detail}" if detail else self.message


@dataclass(frozen=True)
class FFprobeLaunchError(FFprobeError):
    """ffprobe could not be started at all (missing binary, OS error)."""


@dataclass(frozen=True)
class FFprobeTimeoutError(FFprobeError):
    """ffprobe did not finish within the configured bound and was killed."""


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    One subprocess per call, waited on with a timeout; no retries, since a
    failing probe points at a bad file rather than a transient fault.
    Safe for use from WorkerPool (I/O-bound).
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings().ffprobe
        candidate = ffprobe_bin or cfg.bin
        if not candidate or candidate == "ffprobe":
            # resolve absolute path for nicer errors
            resolved = shutil.which(candidate or "ffprobe")
            if not resolved:
                raise FFprobeLaunchError("ffprobe not found on PATH; set FFPROBE__BIN or install ffmpeg")
            candidate = resolved

        self.ffprobe_bin = candidate
        self.timeout_sec = int(timeout_sec or cfg.timeout_sec)
        self.log_level = cfg.log_level
        self.frame_size_entry = cfg.frame_size_entry

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> ContainerInfo:
        cmd = build_ffprobe_cmd(path, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level)
        proc = self._run(cmd)

        try:
            data = json.loads(proc.stdout or "{}")
        except json.JSONDecodeError as e:
            raise FFprobeError("ffprobe produced invalid JSON", stderr=proc.stderr or str(e)) from e
        if not isinstance(data, dict):
            raise FFprobeError("ffprobe produced unexpected JSON", stderr=proc.stdout)

        return self._parse_ffprobe_json(data)

    def frame_sizes(self, path: Path) -> List[str]:
        cmd = build_frame_size_cmd(
            path, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level, entry=self.frame_size_entry,
        )
        proc = self._run(cmd)
        return (proc.stdout or "").splitlines()

    # ---- Subprocess -----------------------------------------------------------
    def _run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout_sec,
                check=False,  # rc handled manually to attach stderr
            )
        except subprocess.TimeoutExpired as e:
            # subprocess.run kills the child before re-raising
            logger.warning("ffprobe timed out after %ss: %s", self.timeout_sec, cmd[-1])
            raise FFprobeTimeoutError(f"ffprobe timed out after {self.timeout_sec}s") from e
        except OSError as e:
            raise FFprobeLaunchError("Failed to execute ffprobe", stderr=str(e)) from e

        if proc.returncode != 0:
            logger.warning("ffprobe exited with %s for %s: %s", proc.returncode, cmd[-1], (proc.stderr or "").strip())
            raise FFprobeError(
                f"ffprobe returned non-zero exit code {proc.returncode}",
                stderr=proc.stderr,
                rc=proc.returncode,
            )
        return proc

    # ---- Parsing helpers ------------------------------------------------------
    @staticmethod
    def _parse_ffprobe_json(data: dict) -> ContainerInfo:
        fmt = data.get("format") or {}
        if not isinstance(fmt, dict):
            fmt = {}
        streams = [s for s in (data.get("streams") or []) if isinstance(s, dict)]
        return ContainerInfo(
            streams=streams,
            duration=maybe_str(fmt.get("duration")),
            format_name=maybe_str(fmt.get("format_name")),
        )
