"""
Commit Chart Service for CommitMoji.

Serves the commit messages document as a static asset and renders the
commit category chart from it:
- GET /health
- GET /commitMessages.json
- GET /counts
- GET /chart.png
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, Response
from pydantic import BaseModel, Field

from config.settings import configure_logging, settings
from services.commit_chart.renderer import CommitChartRenderer, register_chart_components

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register chart components once, then build the shared renderer."""
    register_chart_components(settings.chart.font_family)
    app.state.renderer = CommitChartRenderer()
    logger.info("Commit chart service initialized successfully")
    yield
    logger.info("Commit chart service stopped")


app = FastAPI(
    title="Commit Chart Service",
    description="Commit category bar chart with glyph overlays",
    version=settings.version,
    lifespan=lifespan,
)


class CountsResponse(BaseModel):
    """Response model for per-category counts."""
    counts: Dict[str, int]
    empty: bool = Field(..., description="True when the document could not be loaded")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "commit_chart",
        "timestamp": datetime.now(timezone.utc),
    }


@app.get("/commitMessages.json")
async def get_commit_messages():
    """Serve the commit messages document written by the extractor."""
    path = Path(settings.extractor.output_file)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Commit messages document not found")
    return FileResponse(path, media_type="application/json")


@app.get("/counts", response_model=CountsResponse)
async def get_counts(request: Request):
    """Per-category commit counts."""
    dataset = await request.app.state.renderer.load_dataset()
    return CountsResponse(
        counts=dict(zip(dataset.labels, dataset.data)),
        empty=dataset.is_empty,
    )


@app.get("/chart.png")
async def get_chart(request: Request):
    """Render the commit category chart as PNG."""
    renderer = request.app.state.renderer
    dataset = await renderer.load_dataset()
    try:
        content = await asyncio.to_thread(renderer.render_png, dataset)
    except Exception as e:
        logger.error(f"Error rendering commit chart: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    return Response(content=content, media_type="image/png")
