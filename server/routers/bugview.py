from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from bugview.logger import request_logger
from bugview.service import BugviewService

router = APIRouter(prefix="/bugview", tags=["bugview"])


def _service(request: Request) -> BugviewService:
    return request.app.state.bugview


# Plain `def` routes: FastAPI runs them in its thread pool, so a request
# waiting on Jira never holds up the others.
@router.get("")
def bugview_root(request: Request):
    return RedirectResponse(url=f"{request.url.path}/index.html", status_code=302)


@router.get("/index.html", response_class=HTMLResponse)
def issue_index(request: Request):
    log = request_logger(request, issue_index=True)
    return HTMLResponse(_service(request).index_page(log))


@router.get("/{key}", response_class=HTMLResponse)
def issue(request: Request, key: str):
    log = request_logger(request, issue=key)
    return HTMLResponse(_service(request).issue_page(key, log))
