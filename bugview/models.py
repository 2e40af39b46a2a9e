# bugview/models.py
"""
Shapes of the Jira documents the gateway reads.

Only the fields that end up on a page are modelled; anything else Jira
sends is ignored. Required fields are the ones the handlers cannot work
without: a missing one is a FormatError, not a crash.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from bugview.errors import FormatError


class JiraModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def null_is_absent(cls, data: Any) -> Any:
        # Jira sends null for unset fields; optional ones fall back to their defaults
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Resolution(JiraModel):
    name: str = ""
    description: str = ""


class FixVersion(JiraModel):
    name: str = ""
    release_date: Optional[str] = Field(default=None, alias="releaseDate")


class CommentAuthor(JiraModel):
    display_name: str = Field(default="", alias="displayName")


class Comment(JiraModel):
    author: CommentAuthor = Field(default_factory=CommentAuthor)
    created: str
    updated: Optional[str] = None
    body: str = ""


class CommentPage(JiraModel):
    total: int = 0
    max_results: int = Field(default=0, alias="maxResults")
    comments: List[Comment] = Field(default_factory=list)


class IssueFields(JiraModel):
    summary: str
    labels: List[str]
    resolution: Optional[Resolution] = None
    resolution_date: Optional[str] = Field(default=None, alias="resolutiondate")
    fix_versions: List[FixVersion] = Field(default_factory=list, alias="fixVersions")
    description: Optional[str] = None
    comment: Optional[CommentPage] = None


class Issue(JiraModel):
    key: str
    fields: IssueFields

    @classmethod
    def parse_payload(cls, data: Any) -> "Issue":
        return _parse(cls, data, "issue")


class IssueSummaryFields(JiraModel):
    summary: str


class IssueSummary(JiraModel):
    key: str
    fields: IssueSummaryFields


class SearchResult(JiraModel):
    issues: List[IssueSummary] = Field(default_factory=list)

    @classmethod
    def parse_payload(cls, data: Any) -> "SearchResult":
        return _parse(cls, data, "search result")


def _parse(model, data: Any, what: str):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise FormatError(f"Jira {what} did not have expected format: {missing}") from e
