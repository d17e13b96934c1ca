import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)


def query_variant(request: Request) -> Optional[str]:
    """
    Name the weather query variant a request asks for.

    Returns:
        "city", "coordinates", "mixed" when both are given, or None
        when the request carries no weather query
    """
    params = request.query_params
    has_city = "city" in params
    has_coordinates = "lat" in params or "lon" in params
    if has_city and has_coordinates:
        return "mixed"
    if has_city:
        return "city"
    if has_coordinates:
        return "coordinates"
    return None


class RequestTrackerMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id and timing headers and logs which
    weather query variant it carried, so upstream failures (502) can be
    told apart from bad input (422) in the request log.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = f"req_{uuid.uuid4().hex[:8]}_{int(time.time() * 1000)}"
        request.state.request_id = request_id
        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_variant": query_variant(request),
        }

        start_time = time.time()
        logger.debug("Incoming request", extra=context)

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {e}",
                extra={**context, "process_time": process_time, "error": str(e)},
            )
            return Response(
                content="Internal server error",
                status_code=500,
                headers={
                    "X-Process-Time": f"{process_time:.3f}",
                    "X-Request-ID": request_id,
                },
            )

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        response.headers["X-Request-ID"] = request_id

        extra = {
            **context,
            "status_code": response.status_code,
            "process_time": process_time,
        }
        if response.status_code == 502:
            logger.warning("Weather lookup failed upstream", extra=extra)
        else:
            logger.debug("Request completed", extra=extra)
        return response
