"""
API routes: search term ingestion, histogram refresh and readout, health.
"""

from __future__ import annotations

from typing import Tuple

from fastapi import APIRouter, Request, status

from keyword_detector.detector import Feature, KeywordDetector

from .deps import HistogramBoard
from .models import (
    HealthResponse,
    HistogramEntry,
    HistogramResponse,
    RefreshResponse,
    SearchTermsRequest,
    SearchTermsResponse,
)

router = APIRouter(prefix="/api", tags=["api"])


def _get_state(request: Request) -> Tuple[KeywordDetector, HistogramBoard]:
    return request.app.state.detector, request.app.state.board


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check."""
    detector, _ = _get_state(request)
    return HealthResponse(status="ok", searches_processed=detector.num_searches_processed)


@router.post("/search-terms", response_model=SearchTermsResponse)
def add_search_terms(request: Request, body: SearchTermsRequest) -> SearchTermsResponse:
    """Count the query's keywords against the given feature."""
    detector, _ = _get_state(request)
    processed = detector.add_search_terms(body.feature, body.text)
    return SearchTermsResponse(searches_processed=processed)


@router.post(
    "/histograms/{feature}/refresh",
    response_model=RefreshResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def refresh_histogram(request: Request, feature: Feature) -> RefreshResponse:
    """Schedule an asynchronous snapshot; read it back with GET."""
    detector, _ = _get_state(request)
    detector.request_histogram_update(feature)
    return RefreshResponse(feature=feature, scheduled=True)


@router.get("/histograms/{feature}", response_model=HistogramResponse)
def get_histogram(request: Request, feature: Feature) -> HistogramResponse:
    """Latest snapshot delivered for feature, if any."""
    _, board = _get_state(request)
    snapshot = board.latest(feature)
    if snapshot is None:
        return HistogramResponse(feature=feature, entries=[], delivered=False)
    entries = [HistogramEntry(token=token, count=count) for token, count in snapshot]
    return HistogramResponse(feature=feature, entries=entries, delivered=True)


@router.delete("/histograms")
def reset_histograms(request: Request) -> dict:
    """Clear all histograms and cached snapshots."""
    detector, board = _get_state(request)
    board.reset(detector)
    return {"ok": True}
