from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging
import uuid

logger = logging.getLogger(__name__)

class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        response = await call_next(request)
        logger.info("%s %s -> %d [%s]", request.method, request.url.path, response.status_code, req_id)
        response.headers["X-Request-ID"] = req_id
        return response
