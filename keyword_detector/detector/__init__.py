"""
Keyword detection over search queries.

- Feature categories and stop-word filtering
- Thread-safe per-feature histograms
- KeywordDetector with synchronous ingestion and asynchronous reporting
"""

from .config import DetectorConfig
from .features import Feature
from .histogram import Histogram, HistogramSnapshot
from .keyword_detector import KeywordDetector
from .listener import KeywordDetectorListener, TaskDispatcher
from .stopwords import STOPWORDS, iter_keywords, tokenize

__all__ = [
    "DetectorConfig",
    "Feature",
    "Histogram",
    "HistogramSnapshot",
    "KeywordDetector",
    "KeywordDetectorListener",
    "STOPWORDS",
    "TaskDispatcher",
    "iter_keywords",
    "tokenize",
]
