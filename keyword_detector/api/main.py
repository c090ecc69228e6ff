"""
FastAPI application for the keyword detector.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import build_detector
from .routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build detector and thread pool on startup; shut the pool down on exit."""
    detector, board, executor = build_detector()
    app.state.detector = detector
    app.state.board = board
    logger.info("Keyword detector ready (%s workers)", detector.config.workers)
    yield
    executor.shutdown(wait=True)
    logger.info("Keyword detector stopped after %s searches", detector.num_searches_processed)


app = FastAPI(
    title="Keyword Detector API",
    description="Search keyword histograms per file name, extension and source",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(router)
