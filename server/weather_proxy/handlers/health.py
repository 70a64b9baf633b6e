"""Health endpoint for container probes."""

from starlette.requests import Request
from starlette.responses import JSONResponse


async def health(request: Request):
    return JSONResponse({"status": "ok"})
