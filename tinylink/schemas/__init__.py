# re-export common schemas for simpler imports
from .url import URLCreateRequest, URLInfoResponse, URLStatsResponse

__all__ = [
    "URLCreateRequest",
    "URLInfoResponse",
    "URLStatsResponse",
]
