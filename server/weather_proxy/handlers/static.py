"""Static index page handler."""

import logging

from starlette.requests import Request
from starlette.responses import FileResponse, PlainTextResponse

logger = logging.getLogger(__name__)


async def serve_home(request: Request):
    """Serve the index page, or a plain 404 if it is missing."""
    path = request.app.state.settings.index_path
    if not path.is_file():
        logger.warning("Index page not found at %s", path)
        return PlainTextResponse("404 page not found", status_code=404)
    return FileResponse(path)
