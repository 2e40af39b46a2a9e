# bugview/jira.py
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from bugview.errors import NotFoundError, UpstreamError

"""
Read-only Jira REST client for the gateway.

Configured from Settings (see server/settings.py):
  url.base   e.g. https://jira.example.com
  url.path   e.g. /rest/api/2
  username / password for basic auth

Every failure surfaces as NotFoundError (HTTP 404 from Jira) or
UpstreamError (anything else). There are no retries.
"""

DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "BugviewPublicAccess"


class JiraClient:
    def __init__(
        self,
        base_url: str,
        api_path: str,
        username: str,
        password: str,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_path = "/" + api_path.strip("/")
        self.timeout = (connect_timeout, read_timeout)

        self.sess = session or requests.Session()
        self.sess.auth = (username, password)
        self.sess.headers.update({"Accept": "application/json", "User-Agent": user_agent})

    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None) -> "JiraClient":
        return cls(
            base_url=settings.url.base,
            api_path=settings.url.path,
            username=settings.username,
            password=settings.password,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            user_agent=settings.user_agent,
            session=session,
        )

    # ---- Public API ----
    def get_issue(self, key: str) -> Dict[str, Any]:
        return self._get(f"/issue/{key}")

    def search_by_label(self, label: str) -> Dict[str, Any]:
        params = {"jql": f'labels = "{label}"', "fields": "summary"}
        return self._get("/search", params=params)

    # ---- Helpers ----
    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.api_path}{path}"

    def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        url = self._url(path)
        try:
            r = self.sess.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise UpstreamError(f"timed out talking to Jira: {url}") from e
        except requests.RequestException as e:
            raise UpstreamError(f"error communicating with Jira: {e}") from e

        if r.status_code == 404:
            raise NotFoundError(f"Jira has no such resource: {url}")
        _raise_for_status_with_details(r)

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError(f"Jira returned a non-JSON body for {url}") from e
        if not isinstance(data, dict):
            raise UpstreamError(f"Jira returned {type(data).__name__}, expected an object, for {url}")
        return data


def _raise_for_status_with_details(r: requests.Response) -> None:
    try:
        r.raise_for_status()
    except requests.HTTPError as e:
        try:
            j = r.json()
            # common Jira error fields
            msg = j
            if isinstance(j, dict):
                msg = j.get("errorMessages") or j.get("errors") or j.get("message") or j
            detail = f" | details: {msg}"
        except ValueError:
            detail = f" | body: {r.text[:300]}"
        raise UpstreamError(f"{e}{detail}") from e
