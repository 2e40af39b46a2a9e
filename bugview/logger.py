# bugview/logger.py
from __future__ import annotations

import logging
from typing import Any, MutableMapping

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Returns a named logger. The console handler lives on the top-level
    logger (e.g. "bugview") and is attached once; children propagate to it.
    """
    top = logging.getLogger(name.split(".")[0])

    if not top.handlers:
        top.setLevel(logging.INFO)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(FORMAT))
        top.addHandler(console_handler)

    return logging.getLogger(name)


def set_level(level: int | str, name: str = "bugview") -> None:
    get_logger(name).setLevel(level.upper() if isinstance(level, str) else level)


class RequestLogAdapter(logging.LoggerAdapter):
    """Appends the request context as key=value pairs to every message."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]):
        ctx = " ".join(f"{k}={v}" for k, v in self.extra.items() if v is not None)
        kwargs.setdefault("extra", {}).update(self.extra)
        if ctx:
            msg = f"{msg} [{ctx}]"
        return msg, kwargs


def request_logger(request, logger: logging.Logger | None = None, **fields: Any) -> RequestLogAdapter:
    """Build a RequestLogAdapter from a Starlette request plus extra fields."""
    client = request.client
    ctx: dict[str, Any] = {
        "remoteAddress": client.host if client else None,
        "remotePort": client.port if client else None,
        "userAgent": request.headers.get("user-agent"),
        "referrer": request.headers.get("referer") or request.headers.get("referrer"),
        "forwardedFor": request.headers.get("x-forwarded-for"),
    }
    ctx.update(fields)
    return RequestLogAdapter(logger or get_logger("bugview.http"), ctx)
