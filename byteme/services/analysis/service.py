# byteme/services/analysis/service.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional, TypeVar

from byteme.common.concurrency.worker_pool import WorkerPool
from byteme.common.logging import get_logger
from byteme.common.settings import get_settings
from byteme.domain.entities.analysis import FileAnalysisError, FileAnalysisResult
from byteme.domain.entities.candidacy import CandidacyError, CandidacySuccess, FileCandidate
from byteme.domain.enums.file_error_kind import FileErrorKind
from byteme.domain.policies.classifier import ContentClassifier, is_media
from byteme.domain.ports.probe import MediaProbePort
from byteme.services.mappers.streams import parse_duration, to_stream_descriptions
from byteme.services.probe.ffprobe_adapter import FFprobeAdapter, FFprobeError, FFprobeTimeoutError
from byteme.services.sniffing.classification import default_classifier

logger = get_logger(__name__)

R = TypeVar("R")


def filename_of(path: str) -> Optional[str]:
    """Final path component, or None when there is none ("", "/", "..")."""
    if not path:
        return None
    name = Path(path).name
    if name in ("", ".", ".."):
        return None
    return name


class AnalysisService:
    """
    Batch orchestrator over dropped paths.

    Both entry points share one per-file pipeline (`analyze_one`):
    existence -> regular file -> size -> classify -> probe if media.

    - `analyze_files` is strict: the first failing path (in input order)
      raises its FileAnalysisError and nothing else is returned.
    - `classify_files` is tolerant: every path yields one FileCandidate,
      in input order, whatever happens to its siblings.
    """

    def __init__(
        self,
        *,
        classifier: Optional[ContentClassifier] = None,
        prober: Optional[Callable[[], MediaProbePort]] = None,
        workers: Optional[int] = None,
    ) -> None:
        self.cfg = get_settings()
        self.classifier = classifier or default_classifier()
        # prober is a factory returning a MediaProbePort instance (e.g., lambda: FFprobeAdapter())
        self.prober: Callable[[], MediaProbePort] = prober or (lambda: FFprobeAdapter())
        self.workers = max(1, int(workers or self.cfg.concurrency.probe_workers))

    # ---- per-file pipeline ---------------------------------------------------
    def analyze_one(self, path: str) -> FileAnalysisResult:
        path = str(path)
        filename = filename_of(path)
        p = Path(path)

        try:
            exists = bool(path) and p.exists()
            is_file = exists and p.is_file()
        except OSError as ex:
            # ENAMETOOLONG, EACCES and friends: the path cannot be inspected
            raise FileAnalysisError(
                f"File does not exist or is not accessible: {ex.strerror or ex}", FileErrorKind.not_found, filename
            ) from ex
        if not exists:
            raise FileAnalysisError("File does not exist", FileErrorKind.not_found, filename)
        if not is_file:
            raise FileAnalysisError("Not a file (directory or other)", FileErrorKind.not_file, filename)

        try:
            size = p.stat().st_size
        except OSError:
            size = 0

        media_type = self.classifier.classify(p)
        if not is_media(media_type):
            raise FileAnalysisError(
                f"Not a media file (detected as {media_type})", FileErrorKind.not_media, filename
            )

        try:
            info = self.prober().probe(p)
        except FFprobeTimeoutError as ex:
            raise FileAnalysisError(
                f"Timed out analyzing media file: {ex}", FileErrorKind.timed_out, filename
            ) from ex
        except FFprobeError as ex:
            raise FileAnalysisError(
                f"Could not analyze media file: {ex}", FileErrorKind.analysis_failed, filename
            ) from ex

        return FileAnalysisResult(
            path=path,
            filename=filename or path,
            media_type=media_type,
            duration=parse_duration(info.duration),
            size=size,
            streams=tuple(to_stream_descriptions(info.streams)),
            format_name=info.format_name,
        )

    def candidate_for(self, path: str) -> FileCandidate:
        path = str(path)
        try:
            res = self.analyze_one(path)
        except FileAnalysisError as ex:
            logger.info("skipping %s: %s", path, ex)
            return FileCandidate(path=path, filename=ex.filename, candidacy=CandidacyError(ex.reason))
        return FileCandidate(path=path, filename=res.filename, candidacy=CandidacySuccess(res.media_type))

    # ---- batch entry points --------------------------------------------------
    def analyze_files(self, paths: Iterable[str]) -> List[FileAnalysisResult]:
        items = [str(p) for p in paths]
        results = self._run(self.analyze_one, items, fail_fast=True)
        logger.debug("analyzed %d file(s)", len(results))
        return results

    def classify_files(self, paths: Iterable[str]) -> List[FileCandidate]:
        items = [str(p) for p in paths]
        out = self._run(self.candidate_for, items, fail_fast=False)
        failed = sum(1 for c in out if isinstance(c.candidacy, CandidacyError))
        logger.debug("classified %d path(s), %d failed", len(out), failed)
        return out

    def _run(self, fn: Callable[[str], R], items: List[str], *, fail_fast: bool) -> List[R]:
        if self.workers <= 1 or len(items) <= 1:
            return [fn(item) for item in items]
        with WorkerPool(
            name="probe",
            max_workers=min(self.workers, len(items)),
            max_queue=self.cfg.concurrency.thread_queue_maxsize,
        ) as pool:
            return pool.map(fn, items, fail_fast=fail_fast)
