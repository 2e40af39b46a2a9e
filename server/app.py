# server/app.py
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from bugview import __version__
from bugview.jira import JiraClient
from bugview.logger import get_logger
from bugview.service import BugviewService
from bugview.utils.templating import PageTemplates
from server.errors import add_exception_handlers
from server.routers import bugview
from server.settings import Settings

log = get_logger("bugview")


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[JiraClient] = None,
    templates: Optional[PageTemplates] = None,
) -> FastAPI:
    """
    Build the gateway. Settings, the Jira client and the templates are
    created once here and shared read-only by every request.

    Also usable as a uvicorn factory: `uvicorn server.app:create_app --factory`.
    """
    settings = settings or Settings()
    client = client or JiraClient.from_settings(settings)
    templates = templates or PageTemplates(settings.templates_dir)

    app = FastAPI(title="Bugview", version=__version__, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.bugview = BugviewService(client=client, templates=templates, label=settings.label)

    add_exception_handlers(app)
    app.include_router(bugview.router)

    log.info("bugview ready (jira=%s%s, label=%s)", settings.url.base, settings.url.path, settings.label)
    return app
