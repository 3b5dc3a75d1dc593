"""
Root status endpoint.
Returns the fixed service status for any request method.
"""
from starlette.responses import JSONResponse
from starlette.routing import Route

from status_service.models import StatusResponse


def build_status() -> StatusResponse:
    return StatusResponse()


class StatusEndpoint:
    """ASGI endpoint, so the route is registered without a method list."""

    async def __call__(self, scope, receive, send):
        response = JSONResponse(build_status().model_dump())
        await response(scope, receive, send)


status_route = Route("/", endpoint=StatusEndpoint(), name="status")
