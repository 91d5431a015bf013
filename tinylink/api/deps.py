from typing import Callable

from fastapi import Request

from tinylink.core.config import Settings
from tinylink.db.registry import Registry


def get_registry(request: Request) -> Registry:
    """
    FastAPI dependency: the registry owned by the running application.
    Usage: registry: Registry = Depends(get_registry)
    """
    return request.app.state.registry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_code_generator(request: Request) -> Callable[[], str]:
    return request.app.state.code_generator
