from typing import Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from tinylink.api.deps import get_code_generator, get_registry, get_settings
from tinylink.api.errors import error_response
from tinylink.core.config import Settings
from tinylink.core.errors import ServiceError
from tinylink.db.registry import Registry
from tinylink.schemas import URLCreateRequest, URLInfoResponse, URLStatsResponse
from tinylink.services.shortener import URLService

router = APIRouter()

@router.post("/shorten", response_model=URLInfoResponse, status_code=status.HTTP_201_CREATED, tags=["urls"])
def shorten_url_endpoint(
    url_request: URLCreateRequest,
    registry: Registry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
    generate: Callable[[], str] = Depends(get_code_generator),
):
    result = URLService.create_short_url(
        registry,
        url_request.original_url,
        generate=generate,
        max_attempts=settings.MAX_GENERATION_ATTEMPTS,
    )
    if isinstance(result, ServiceError):
        return error_response(result)

    return URLInfoResponse(
        original_url=result.original_url,
        short_url=settings.short_url(result.short_code),
        short_code=result.short_code,
        created_at=result.created_at,
    )

@router.get("/stats/{short_code}", response_model=URLStatsResponse, tags=["urls"])
def get_url_statistics_endpoint(
    short_code: str,
    registry: Registry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    result = URLService.get_url_stats(registry, short_code)
    if isinstance(result, ServiceError):
        return error_response(result)

    return URLStatsResponse(
        short_code=result.short_code,
        original_url=result.original_url,
        clicks=result.click_count,
        created_at=result.created_at,
        short_url=settings.short_url(result.short_code),
    )

@router.get("/{short_code}", tags=["redirect"])
def redirect_to_url_endpoint(short_code: str, registry: Registry = Depends(get_registry)):
    """
    Access the shortened URL and get redirected to the original long URL.
    """
    result = URLService.resolve(registry, short_code)
    if isinstance(result, ServiceError):
        return error_response(result)

    return RedirectResponse(url=result.original_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
