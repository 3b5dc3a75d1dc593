import time
from fastapi import FastAPI, Request

from .api import routes
from .config import VERSION, get_app_config
from .logging_config import log_api_access

app = FastAPI(
    title="Status Service",
    version=VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    routes=routes,
)

_app_config = get_app_config()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, response.status_code, process_time)
        return response
    except Exception as e:
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, 500, process_time, error=str(e))
        _app_config.logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
        raise
