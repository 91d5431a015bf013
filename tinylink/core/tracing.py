import uuid

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"
UNMATCHED_ROUTE = "<unmatched>"


def resolve_request_id(request: Request) -> str:
    # Reuse the caller's id so logs can be correlated across services
    return request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())


def get_request_id(request: Request):
    return getattr(request.state, "request_id", None)


def route_template(request: Request) -> str:
    """Matched route path (e.g. /stats/{short_code}), never the raw URL."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE
