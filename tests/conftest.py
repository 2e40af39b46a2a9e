# tests/conftest.py
from __future__ import annotations

import copy
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from bugview.errors import NotFoundError, UpstreamError
from server.app import create_app
from server.settings import Settings

LABEL = "public"

ISSUE_PAYLOAD: Dict[str, Any] = {
    "key": "ABC-1",
    "fields": {
        "summary": "Widget explodes on <start>",
        "labels": ["public", "widgets"],
        "resolution": {"name": "Fixed", "description": "A fix for this issue is checked in."},
        "resolutiondate": "2014-01-15T10:20:30.000+0000",
        "fixVersions": [
            {"name": "1.2.0", "releaseDate": "2014-02"},
            {"name": "1.3.0"},
        ],
        "description": "It explodes.\n{code:java}\nif (a < b) { boom(); }\n{code}\nThanks.",
        "comment": {
            "total": 2,
            "maxResults": 2,
            "comments": [
                {
                    "author": {"displayName": "Alice"},
                    "created": "2014-01-10T08:00:00.000+0000",
                    "updated": "2014-01-10T08:00:00.000+0000",
                    "body": "First!",
                },
                {
                    "author": {"displayName": "Bob"},
                    "created": "2014-01-11T09:30:00.000-0500",
                    "updated": "2014-01-12T09:30:00.000-0500",
                    "body": "Second & last.",
                },
            ],
        },
    },
}

SEARCH_PAYLOAD: Dict[str, Any] = {
    "issues": [
        {"key": "ABC-2", "fields": {"summary": "Second in line"}},
        {"key": "ABC-1", "fields": {"summary": "Widget explodes on <start>"}},
    ],
}


class FakeJira:
    """Stands in for JiraClient; records every call it receives."""

    def __init__(self, issues: Dict[str, Any] | None = None, search: Any = None, error: Exception | None = None):
        self.issues = issues if issues is not None else {}
        self.search = search
        self.error = error
        self.calls: List[tuple] = []

    def get_issue(self, key: str) -> Dict[str, Any]:
        self.calls.append(("get_issue", key))
        if self.error is not None:
            raise self.error
        if key not in self.issues:
            raise NotFoundError(f"no issue {key}")
        return self.issues[key]

    def search_by_label(self, label: str) -> Dict[str, Any]:
        self.calls.append(("search_by_label", label))
        if self.error is not None:
            raise self.error
        if self.search is None:
            raise UpstreamError("search unavailable")
        return self.search


@pytest.fixture
def issue_payload() -> Dict[str, Any]:
    return copy.deepcopy(ISSUE_PAYLOAD)


@pytest.fixture
def search_payload() -> Dict[str, Any]:
    return copy.deepcopy(SEARCH_PAYLOAD)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        username="bugview",
        password="secret",
        url={"base": "https://jira.example.com", "path": "/rest/api/2"},
        label=LABEL,
        port=8080,
    )


@pytest.fixture
def jira(issue_payload, search_payload) -> FakeJira:
    return FakeJira(issues={"ABC-1": issue_payload}, search=search_payload)


@pytest.fixture
def client(settings, jira):
    app = create_app(settings, client=jira)
    with TestClient(app) as test_client:
        yield test_client
