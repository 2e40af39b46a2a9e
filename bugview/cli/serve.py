# bugview/cli/serve.py
from __future__ import annotations
import sys, argparse

import uvicorn
from pydantic import ValidationError

from bugview.logger import get_logger, set_level

log = get_logger("bugview")


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="bugview-serve")
    p.add_argument("--host", default=None, help="Bind address (default: settings.host)")
    p.add_argument("--port", type=int, default=None, help="Listen port (default: settings.port)")
    args = p.parse_args(argv)

    from server.settings import Settings
    try:
        settings = Settings()
    except ValidationError as e:
        log.error("configuration validation failed: %s", e)
        return 1

    set_level(settings.log_level)

    from server.app import create_app
    app = create_app(settings)

    host = args.host or settings.host
    port = args.port or settings.port
    log.info("http listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
