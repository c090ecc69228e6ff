"""
Replay a file of search queries through a KeywordDetector and print the
resulting keyword histogram.

Usage:
  python -m scripts.replay_queries queries.txt
  python -m scripts.replay_queries queries.txt --feature file_extension --top 10
"""

from __future__ import annotations

import argparse
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Tuple

from keyword_detector.detector import (
    DetectorConfig,
    Feature,
    HistogramSnapshot,
    KeywordDetector,
)

logger = logging.getLogger(__name__)

_WAIT_SECONDS = 10.0


class _SnapshotCollector:
    def __init__(self, feature: Feature) -> None:
        self.feature = feature
        self.snapshot = HistogramSnapshot()
        self.done = threading.Event()

    def on_search_received(self, detector: KeywordDetector, num_searches_processed: int) -> None:
        if num_searches_processed % 1000 == 0:
            logger.info("Processed %s searches", num_searches_processed)

    def on_histogram_update(
        self,
        detector: KeywordDetector,
        feature: Feature,
        histogram: HistogramSnapshot,
    ) -> None:
        if feature != self.feature:
            return
        self.snapshot = histogram
        self.done.set()


def replay(
    lines: Iterable[str],
    feature: Feature = Feature.FILE_NAME,
    top: Optional[int] = None,
) -> Tuple[int, HistogramSnapshot]:
    """
    Feed every line as one search and return
    (num_searches_processed, top histogram entries).
    """
    collector = _SnapshotCollector(feature)
    with ThreadPoolExecutor(max_workers=1) as executor:
        detector = KeywordDetector(dispatcher=executor, config=DetectorConfig(snapshot_limit=top))
        detector.set_keyword_detector_listener(collector)
        for line in lines:
            detector.add_search_terms(feature, line)
        detector.request_histogram_update(feature)
        if not collector.done.wait(_WAIT_SECONDS):
            raise TimeoutError("histogram snapshot was not delivered")
    return detector.num_searches_processed, collector.snapshot


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Replay search queries and print the keyword histogram.",
    )
    parser.add_argument(
        "queries",
        type=Path,
        help="Text file with one search query per line",
    )
    parser.add_argument(
        "--feature",
        type=str,
        choices=[f.value for f in Feature],
        default=Feature.FILE_NAME.value,
        help="Feature the queries are counted against (default: file_name)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=20,
        help="Number of histogram rows to print (0 for all)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.queries.exists():
        raise FileNotFoundError(f"queries file not found: {args.queries}")
    with args.queries.open(encoding="utf-8") as f:
        processed, snapshot = replay(f, feature=Feature(args.feature), top=args.top or None)

    logger.info("Replayed %s searches, %s distinct keywords shown", processed, len(snapshot))
    for token, count in snapshot:
        print(f"{count}\t{token}")


if __name__ == "__main__":
    main()
