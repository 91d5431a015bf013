import logging
from typing import Callable, Optional, Union

from tinylink.core.config import settings as default_settings
from tinylink.core.errors import ErrorKind, ServiceError, not_found, validation_error
from tinylink.db.models import ShortLink
from tinylink.db.registry import Registry
from tinylink.services import metrics
from tinylink.utils.encoding import SHORT_CODE_LENGTH, generate_short_code, is_alphanumeric

logger = logging.getLogger(__name__)

LinkResult = Union[ShortLink, ServiceError]


class URLService:

    @staticmethod
    def validate_short_code(short_code: str, length: int = SHORT_CODE_LENGTH) -> Optional[ServiceError]:
        if not short_code:
            return validation_error("Short code is required")
        if not is_alphanumeric(short_code):
            return validation_error("Short code must contain only letters and numbers")
        if len(short_code) != length:
            return validation_error(f"Short code must be exactly {length} characters")
        return None

    @staticmethod
    def create_short_url(
        registry: Registry,
        original_url: str,
        generate: Callable[[], str] = generate_short_code,
        max_attempts: Optional[int] = None,
    ) -> LinkResult:
        if max_attempts is None:
            max_attempts = default_settings.MAX_GENERATION_ATTEMPTS
        for attempt in range(max_attempts):
            short_code = generate()
            link = registry.save_if_absent(short_code, original_url)
            if link is not None:
                metrics.URLS_CREATED.inc()
                logger.info("Shortened %s... to %s", original_url[:50], short_code)
                return link
            metrics.GENERATION_COLLISIONS.inc()
            logger.warning("Short code collision on attempt %d/%d", attempt + 1, max_attempts)

        logger.error("Failed to generate unique short code after %d attempts", max_attempts)
        return ServiceError(
            ErrorKind.GENERATION_EXHAUSTED,
            f"Could not allocate a unique short code after {max_attempts} attempts",
        )

    @staticmethod
    def resolve(registry: Registry, short_code: str) -> LinkResult:
        error = URLService.validate_short_code(short_code)
        if error:
            return error
        link = registry.increment_clicks(short_code)
        if link is None:
            logger.warning("Redirect 404: Short code not found: %s", short_code)
            return not_found()
        metrics.URL_REDIRECTS.inc()
        logger.info("Redirecting %s -> %s", short_code, link.original_url[:50])
        return link

    @staticmethod
    def get_url_stats(registry: Registry, short_code: str) -> LinkResult:
        error = URLService.validate_short_code(short_code)
        if error:
            return error
        link = registry.get(short_code)
        if link is None:
            logger.warning("Stats 404: Short code not found: %s", short_code)
            return not_found()
        return link
