"""
Collaborator protocols consumed by KeywordDetector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

from .features import Feature
from .histogram import HistogramSnapshot

if TYPE_CHECKING:
    from .keyword_detector import KeywordDetector


@runtime_checkable
class KeywordDetectorListener(Protocol):
    """
    Receives detector notifications.

    on_search_received runs on the thread that called add_search_terms,
    so it should return quickly. on_histogram_update runs on a worker
    thread and gets a snapshot list it is free to keep or mutate.
    """

    def on_search_received(self, detector: "KeywordDetector", num_searches_processed: int) -> None:
        ...

    def on_histogram_update(
        self,
        detector: "KeywordDetector",
        feature: Feature,
        histogram: HistogramSnapshot,
    ) -> None:
        ...


@runtime_checkable
class TaskDispatcher(Protocol):
    """
    Anything that runs a callable later, e.g. concurrent.futures.Executor.
    """

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
        ...
