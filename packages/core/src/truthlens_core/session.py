from __future__ import annotations

import logging
import threading

from .fusion import fuse_results
from .types import AnalysisResult, MultimodalResult

logger = logging.getLogger(__name__)

SessionSnapshot = tuple[tuple[AnalysisResult, ...], MultimodalResult | None]


class AnalysisSession:
    """Ordered per-session result history plus its current fusion verdict.

    The result list and the fusion value are always swapped together, so a
    reader never sees a fusion computed over a different list.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: tuple[AnalysisResult, ...] = ()
        self._fusion: MultimodalResult | None = None

    def append(self, result: AnalysisResult) -> MultimodalResult:
        with self._lock:
            results = (*self._results, result)
            fusion = fuse_results(results)
            self._results = results
            self._fusion = fusion
        logger.debug("Appended %s result (%d total)", result.modality, len(results))
        return fusion

    def clear(self) -> None:
        with self._lock:
            self._results = ()
            self._fusion = None
        logger.debug("Cleared analysis session")

    def current(self) -> SessionSnapshot:
        with self._lock:
            return self._results, self._fusion

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
