# server/errors.py
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

from bugview.errors import BugviewError
from bugview.logger import get_logger, request_logger

log = get_logger("bugview.http")


def add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BugviewError)
    async def bugview_error_handler(request: Request, exc: BugviewError):
        # Only the fixed public message goes out; the detail was logged by the service
        return HTMLResponse(content=exc.public_message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        request_logger(request, log).exception("unhandled exception: %s", type(exc).__name__)
        return HTMLResponse(content="", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
