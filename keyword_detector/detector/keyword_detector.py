"""
Keyword detector: per-feature token histograms fed by search queries.

Two paths:
- ingestion (cheap, synchronous): add_search_terms tokenizes, filters stop
  words, bumps histogram counts and notifies the listener on the caller's thread
- reporting (expensive, asynchronous): request_histogram_update snapshots a
  histogram on a dispatcher or a one-shot thread and hands it to the listener
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Tuple

from .config import DetectorConfig
from .features import Feature
from .histogram import Histogram
from .listener import KeywordDetectorListener, TaskDispatcher
from .stopwords import iter_keywords, tokenize

logger = logging.getLogger(__name__)


class KeywordDetector:
    """
    Counts non-stop-word tokens per Feature and reports sorted histograms.

    If dispatcher is given, reporting tasks are submitted to it; otherwise
    every request_histogram_update starts its own daemon thread.
    """

    def __init__(
        self,
        dispatcher: Optional[TaskDispatcher] = None,
        config: Optional[DetectorConfig] = None,
    ) -> None:
        self.config = config or DetectorConfig()
        self._dispatcher = dispatcher
        self._histograms: Dict[Feature, Histogram] = {f: Histogram() for f in Feature}
        self._listener: Optional[KeywordDetectorListener] = None
        self._num_searches_processed = 0
        self._counter_lock = threading.Lock()

    @property
    def features(self) -> Tuple[Feature, ...]:
        return tuple(self._histograms)

    @property
    def num_searches_processed(self) -> int:
        return self._num_searches_processed

    def set_keyword_detector_listener(self, listener: Optional[KeywordDetectorListener]) -> None:
        """Replace the current listener. None removes it."""
        self._listener = listener

    def _histogram_for(self, feature: Any) -> Optional[Histogram]:
        try:
            return self._histograms.get(feature)
        except TypeError:
            # unhashable input can never name a feature
            return None

    def reset_generation(self, feature: Feature) -> Optional[int]:
        """Number of resets the feature's histogram has seen, None if untracked."""
        histogram = self._histogram_for(feature)
        if histogram is None:
            return None
        return histogram.generation

    def add_search_terms(self, feature: Feature, text: Optional[str]) -> int:
        """
        Count the keywords in text against feature.

        Returns the processed-search total produced by this call, or the
        current total when text held no tokens.
        """
        tokens = tokenize(text)
        if not tokens:
            return self._num_searches_processed

        histogram = self._histogram_for(feature)
        if histogram is None:
            logger.debug("No histogram for feature %r, skipping token counts", feature)
        else:
            for token in iter_keywords(tokens):
                histogram.update(token)

        with self._counter_lock:
            self._num_searches_processed += 1
            processed = self._num_searches_processed

        listener = self._listener
        if listener is not None:
            listener.on_search_received(self, processed)
        return processed

    def request_histogram_update(self, feature: Feature) -> None:
        """Schedule delivery of a histogram snapshot to the listener."""
        histogram = self._histogram_for(feature)
        if histogram is None:
            logger.debug("No histogram for feature %r, ignoring update request", feature)
            return

        limit = self.config.snapshot_limit

        def deliver() -> None:
            listener = self._listener
            if listener is None:
                return
            listener.on_histogram_update(self, feature, histogram.snapshot(limit))

        if self._dispatcher is not None:
            self._dispatcher.submit(deliver)
        else:
            logger.debug("No dispatcher configured, starting %s thread", self.config.thread_name)
            threading.Thread(target=deliver, name=self.config.thread_name, daemon=True).start()

    def reset(self) -> None:
        """Clear all histograms. The processed counter and listener are kept."""
        for histogram in self._histograms.values():
            histogram.reset()
