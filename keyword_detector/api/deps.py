"""
Build the detector and its listener for the API (used in lifespan).
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional, Tuple

from keyword_detector.detector import (
    DetectorConfig,
    Feature,
    HistogramSnapshot,
    KeywordDetector,
)

logger = logging.getLogger(__name__)


class HistogramBoard:
    """
    Listener that keeps the latest delivered snapshot per feature.

    Snapshots read before the most recent reset are dropped, so a delivery
    that races a reset cannot bring back pre-reset counts.
    """

    def __init__(self) -> None:
        self._snapshots: Dict[Feature, HistogramSnapshot] = {}
        self._lock = threading.Lock()

    def on_search_received(self, detector: KeywordDetector, num_searches_processed: int) -> None:
        pass

    def on_histogram_update(
        self,
        detector: KeywordDetector,
        feature: Feature,
        histogram: HistogramSnapshot,
    ) -> None:
        with self._lock:
            generation = getattr(histogram, "generation", None)
            if generation is not None and generation != detector.reset_generation(feature):
                logger.debug("Dropping stale %s snapshot from generation %s", feature, generation)
                return
            self._snapshots[feature] = histogram

    def latest(self, feature: Feature) -> Optional[HistogramSnapshot]:
        with self._lock:
            return self._snapshots.get(feature)

    def reset(self, detector: KeywordDetector) -> None:
        """Reset detector histograms and drop cached snapshots as one step."""
        with self._lock:
            detector.reset()
            self._snapshots.clear()


def build_detector(
    config: Optional[DetectorConfig] = None,
) -> Tuple[KeywordDetector, HistogramBoard, ThreadPoolExecutor]:
    """
    Create the thread pool, detector and board.
    Returns (detector, board, executor); the caller owns executor shutdown.
    """
    config = config or DetectorConfig.from_env()
    executor = ThreadPoolExecutor(max_workers=config.workers, thread_name_prefix=config.thread_name)
    detector = KeywordDetector(dispatcher=executor, config=config)
    board = HistogramBoard()
    detector.set_keyword_detector_listener(board)
    return detector, board, executor
