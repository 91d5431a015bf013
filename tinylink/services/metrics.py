from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

# Dedicated registry so the exposition only carries this service's collectors
# plus the runtime ones below.
registry = CollectorRegistry()
ProcessCollector(registry=registry)
PlatformCollector(registry=registry)
GCCollector(registry=registry)

HTTP_REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "Duration of HTTP requests in seconds",
    ["method", "route", "status_code"],
    registry=registry,
)
URLS_CREATED = Counter(
    "urls_created_total",
    "Total number of URLs shortened",
    registry=registry,
)
URL_REDIRECTS = Counter(
    "url_redirects_total",
    "Total number of redirects performed",
    registry=registry,
)
GENERATION_COLLISIONS = Counter(
    "url_generation_collisions_total",
    "Short code collisions hit while creating links",
    registry=registry,
)


def observe_request(method: str, route: str, status_code: int, duration: float):
    HTTP_REQUEST_DURATION.labels(method, route, str(status_code)).observe(duration)


def render():
    return generate_latest(registry), CONTENT_TYPE_LATEST
