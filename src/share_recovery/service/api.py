"""
HTTP front end for secret reconstruction.

Run with: uvicorn share_recovery.service.api:app --host 0.0.0.0 --port 8000
"""

import logging
from typing import Any, Dict, List, Literal

from fastapi import Body, FastAPI, HTTPException, Query, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel

from ..crypto import reconstruct, select_shares
from ..decoder import decode_document, format_secret
from ..errors import ShareRecoveryError
from ..utils.metrics import Timer
from ..utils.prometheus_metrics import PrometheusMetrics

logger = logging.getLogger(__name__)


class ReconstructResponse(BaseModel):
    """Response model for a reconstructed secret."""

    secret: str
    threshold: int
    shares_used: List[str]


metrics = PrometheusMetrics()

app = FastAPI(
    title="Share Recovery",
    description="Reconstructs secrets from threshold share documents",
    version="1.0.0",
)


@app.post("/reconstruct")
def reconstruct_secret(
    document: Dict[str, Any] = Body(...),
    on_invalid_share: Literal["abort", "skip"] = Query("abort"),
) -> ReconstructResponse:
    """Reconstruct the secret held by a share document."""
    try:
        with Timer(metrics, "reconstruction_seconds"):
            problem = decode_document(document, on_invalid_share=on_invalid_share)
            secret = reconstruct(problem)
    except ShareRecoveryError as exc:
        metrics.emit_counter("reconstructions_total", status="failure")
        logger.warning(f"Rejected document: {exc.kind}: {exc}")
        raise HTTPException(status_code=422, detail={"error": exc.kind, "message": str(exc)}) from exc
    metrics.emit_counter("reconstructions_total", status="success")
    selected = select_shares(problem.shares, problem.threshold)
    return ReconstructResponse(
        secret=format_secret(secret),
        threshold=problem.threshold,
        shares_used=[str(share.x) for share in selected],
    )


@app.get("/metrics")
def export_metrics() -> Response:
    """Prometheus scrape endpoint."""
    return Response(content=generate_latest(metrics.registry), media_type=CONTENT_TYPE_LATEST)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
