import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, Response

from tinylink.api.deps import get_registry, get_settings
from tinylink.core.config import Settings
from tinylink.db.registry import Registry
from tinylink.services import metrics

router = APIRouter(tags=["health"])

@router.get("/")
def service_info(settings: Settings = Depends(get_settings)):
    return {
        "service": settings.PROJECT_NAME,
        "status": "running",
        "version": settings.VERSION,
        "endpoints": {
            "shorten": "POST /shorten",
            "redirect": "GET /:shortCode",
            "stats": "GET /stats/:shortCode",
            "health": "GET /health",
            "metrics": "GET /metrics",
        },
    }

# simple liveness
@router.get("/health")
def health(request: Request, registry: Registry = Depends(get_registry), settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "uptime": round(time.monotonic() - request.app.state.started_at, 3),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "links": registry.count(),
    }

@router.get("/metrics")
def prometheus_metrics():
    body, content_type = metrics.render()
    return Response(content=body, media_type=content_type)
