"""
Request and response models for the keyword detector API.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from keyword_detector.detector import Feature


class SearchTermsRequest(BaseModel):
    """Request body for POST /api/search-terms."""

    feature: Feature
    text: str = Field(..., description="Raw search query; blank text is ignored")


class SearchTermsResponse(BaseModel):
    """Response for POST /api/search-terms."""

    searches_processed: int


class HistogramEntry(BaseModel):
    """Single token count."""

    token: str
    count: int


class HistogramResponse(BaseModel):
    """Response for GET /api/histograms/{feature}."""

    feature: Feature
    entries: List[HistogramEntry] = Field(default_factory=list)
    delivered: bool = False


class RefreshResponse(BaseModel):
    """Response for POST /api/histograms/{feature}/refresh."""

    feature: Feature
    scheduled: bool = True


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
    searches_processed: int = 0
