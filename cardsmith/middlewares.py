import uuid

from fastapi import Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from cardsmith.core.logging import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def log_request(method: str, path: str, status_code: int) -> None:
    """Simple request logging"""
    logger.info("%s %s -> %d", method, path, status_code)


def log_error(error: str, method: str, path: str) -> None:
    """Simple error logging"""
    logger.error("Error in %s %s: %s", method, path, error)


async def request_context(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """Tag every log line of a request with its id and echo the id back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
        log_request(request.method, request.url.path, response.status_code)
    except Exception as e:
        log_error(str(e), request.method, request.url.path)
        raise
    finally:
        request_id_var.reset(token)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
