"""
Journey Graph - HTTP API
Stateless endpoints: every request rebuilds the tree from the journeys it
carries and returns one projection of it. Nothing is stored between calls.
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from .core import (
    settings,
    setup_logging,
    get_logger,
    set_request_context,
    clear_request_context,
    log_execution_time,
    JourneyGraphError,
    PayloadTooLargeError,
)
from .journeys import (
    JourneyGraphBuilder,
    extract_paths,
    leaf_nodes,
    calculate_statistics,
    export_for_visualization,
    render_as_text,
    from_detected_journeys,
)
from .models import GraphData, Journey

# Setup structured logging
setup_logging(
    level=settings.log_level,
    format=settings.log_format
)
logger = get_logger(__name__)


app = FastAPI(
    title=settings.app_name,
    description="Build a journey tree from detected user journeys and project it for UIs, graph renderers and logs",
    version=settings.app_version,
    debug=settings.debug,
)


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID") or uuid.uuid4().hex
    set_request_context(request_id=uuid.uuid4().hex[:12], correlation_id=correlation_id)
    try:
        response = await call_next(request)
    finally:
        clear_request_context()
    response.headers["X-Correlation-ID"] = correlation_id
    return response


@app.exception_handler(JourneyGraphError)
async def journey_graph_error_handler(request: Request, exc: JourneyGraphError):
    logger.warning(
        f"Request rejected: {exc.message}",
        path=request.url.path,
        error_code=exc.code.value,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ============================================================
# Request models
# ============================================================


class GraphRequest(BaseModel):
    journeys: List[Journey] = Field(default_factory=list)
    current_url: Optional[str] = None


class DetectedGraphRequest(BaseModel):
    """Journeys exactly as the detection endpoint reports them."""
    journeys: List[Dict[str, Any]] = Field(default_factory=list)
    current_url: Optional[str] = None


@log_execution_time()
def _build_tree(journeys: List[Journey], current_url: Optional[str]) -> GraphData:
    return JourneyGraphBuilder(current_url).build(journeys)


def _build(journeys: List[Journey], current_url: Optional[str]) -> GraphData:
    if len(journeys) > settings.max_journeys_per_request:
        raise PayloadTooLargeError(len(journeys), settings.max_journeys_per_request)
    return _build_tree(journeys, current_url)


def _summary(graph: GraphData) -> Dict[str, Any]:
    return {
        "graph": graph.to_dict(),
        "statistics": calculate_statistics(graph).to_dict(),
    }


# ============================================================
# Endpoints
# ============================================================


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.post("/graph")
def build_journey_graph(request: GraphRequest):
    """Build the journey tree and return its nodes, paths and statistics."""
    graph = _build(request.journeys, request.current_url)
    return _summary(graph)


@app.post("/graph/detected")
def build_graph_from_detected(request: DetectedGraphRequest):
    """Build the journey tree from raw journey detection results."""
    journeys = from_detected_journeys(request.journeys)
    graph = _build(journeys, request.current_url)
    return _summary(graph)


@app.post("/graph/paths")
def get_journey_paths(request: GraphRequest):
    """List every root-to-leaf path and the leaf it ends at."""
    graph = _build(request.journeys, request.current_url)
    return {
        "paths": [path.to_dict() for path in extract_paths(graph)],
        "leaf_ids": [node.id for node in leaf_nodes(graph)],
    }


@app.post("/graph/statistics")
def get_journey_statistics(request: GraphRequest):
    """Summary metrics of the journey tree."""
    graph = _build(request.journeys, request.current_url)
    return calculate_statistics(graph).to_dict()


@app.post("/graph/export")
def export_journey_graph(request: GraphRequest):
    """Node and edge lists for graph visualization libraries."""
    graph = _build(request.journeys, request.current_url)
    return export_for_visualization(graph).to_dict()


@app.post("/graph/text", response_class=PlainTextResponse)
def render_journey_graph(request: GraphRequest):
    """ASCII tree of the journey graph."""
    graph = _build(request.journeys, request.current_url)
    return PlainTextResponse(render_as_text(graph))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
