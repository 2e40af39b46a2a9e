# bugview/service.py
"""
The two pages the gateway serves.

BugviewService turns an issue key (or nothing, for the index) into a
finished HTML document, or raises one of the errors in bugview.errors.
It holds no per-request state, so one instance serves every request.
"""
from __future__ import annotations

import re

from bugview.compose import Log, compose_issue
from bugview.errors import AuthorizationError, FormatError, KeyValidationError, NotFoundError, UpstreamError
from bugview.jira import JiraClient
from bugview.logger import get_logger
from bugview.models import Issue, SearchResult
from bugview.policy import is_public
from bugview.utils.templating import PageTemplates

ISSUE_KEY_RE = re.compile(r"^[A-Z]+-[0-9]+$")


def valid_key(key: str | None) -> bool:
    return bool(key) and ISSUE_KEY_RE.fullmatch(key) is not None


class BugviewService:
    def __init__(self, client: JiraClient, templates: PageTemplates, label: str):
        self.client = client
        self.templates = templates
        self.label = label
        self.log = get_logger("bugview.service")

    def issue_page(self, key: str | None, log: Log | None = None) -> str:
        log = log or self.log

        if not valid_key(key):
            log.error('invalid "key" provided: %r', key)
            raise KeyValidationError(f"invalid issue key: {key!r}")

        try:
            payload = self.client.get_issue(key)
        except NotFoundError:
            log.error("could not find issue %s", key)
            raise
        except UpstreamError as e:
            log.error("error communicating with JIRA: %s", e)
            raise

        try:
            issue = Issue.parse_payload(payload)
        except FormatError as e:
            log.error("%s", e)
            raise

        if not is_public(issue, self.label):
            log.error("request for non-public issue %s", key)
            raise AuthorizationError(f"issue {key} lacks label {self.label!r}")

        log.info("serving issue %s", key)
        return self.templates.render_issue(issue, compose_issue(issue, log))

    def index_page(self, log: Log | None = None) -> str:
        log = log or self.log

        try:
            payload = self.client.search_by_label(self.label)
        except (NotFoundError, UpstreamError) as e:
            log.error("error communicating with JIRA: %s", e)
            raise UpstreamError(str(e)) from e

        try:
            result = SearchResult.parse_payload(payload)
        except FormatError as e:
            log.error("%s", e)
            raise

        log.info("serving issue index (%d issues)", len(result.issues))
        return self.templates.render_index(result.issues)
