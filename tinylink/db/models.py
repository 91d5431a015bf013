from dataclasses import dataclass, field
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ShortLink:
    short_code: str
    original_url: str
    created_at: datetime = field(default_factory=utcnow)
    click_count: int = 0
