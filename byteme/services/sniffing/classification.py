# byteme/services/sniffing/classification.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from byteme.domain.enums.media_category import MediaCategory
from byteme.domain.policies.classifier import ContentClassifier
from byteme.services.sniffing.filetype_sniffer import FiletypeSniffer


def default_classifier(*, sniff_bytes: Optional[int] = None) -> ContentClassifier:
    """ContentClassifier wired to the `filetype` adapter and current settings."""
    return ContentClassifier(FiletypeSniffer(), sniff_bytes=sniff_bytes)


def classify(path: Path | str) -> MediaCategory:
    """Classify one path with a freshly built default classifier."""
    return default_classifier().classify(path)
