from datetime import datetime
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(HttpUrl)


# Request DTOs
class URLCreateRequest(BaseModel):
    # original_url is the Python field, 'url' is the JSON key. Kept as the
    # submitted string so redirects go exactly where the client asked.
    original_url: Optional[str] = Field(default=None, alias="url", validate_default=True)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('original_url')
    def validate_url(cls, v):
        if v is None or not v.strip():
            raise ValueError('URL is required')

        # urlsplit and HttpUrl quietly strip these, so check the raw string
        if v != v.strip() or any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7f for c in v):
            raise ValueError('Please provide a valid HTTP or HTTPS URL')

        # Length check
        if len(v) > MAX_URL_LENGTH:
            raise ValueError(f'URL must not exceed {MAX_URL_LENGTH} characters')

        # Only allow http/https
        if urlsplit(v).scheme.lower() not in ('http', 'https'):
            raise ValueError('Please provide a valid HTTP or HTTPS URL')

        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise ValueError('Please provide a valid HTTP or HTTPS URL')

        return v


# Response DTOs
class URLInfoResponse(BaseModel):
    original_url: str
    short_url: str
    short_code: str
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class URLStatsResponse(URLInfoResponse):
    clicks: int = 0
