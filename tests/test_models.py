# tests/test_models.py
import pytest

from bugview.errors import FormatError
from bugview.models import Issue, SearchResult


def test_parse_full_issue(issue_payload):
    issue = Issue.parse_payload(issue_payload)
    assert issue.key == "ABC-1"
    assert issue.fields.labels == ["public", "widgets"]
    assert issue.fields.resolution.name == "Fixed"
    assert issue.fields.resolution_date == "2014-01-15T10:20:30.000+0000"
    assert [fv.release_date for fv in issue.fields.fix_versions] == ["2014-02", None]
    assert issue.fields.comment.max_results == 2
    assert issue.fields.comment.comments[1].author.display_name == "Bob"


def test_unknown_fields_are_ignored(issue_payload):
    issue_payload["fields"]["customfield_10000"] = {"anything": 1}
    issue_payload["expand"] = "renderedFields"
    assert Issue.parse_payload(issue_payload).key == "ABC-1"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {},
        {"key": "ABC-1"},
        {"key": "ABC-1", "fields": {"summary": "s"}},
        {"key": "ABC-1", "fields": {"labels": ["public"]}},
        {"fields": {"summary": "s", "labels": []}},
        {"key": "ABC-1", "fields": {"summary": "s", "labels": "public"}},
    ],
)
def test_missing_required_fields_are_format_errors(payload):
    with pytest.raises(FormatError):
        Issue.parse_payload(payload)


def test_search_result(search_payload):
    result = SearchResult.parse_payload(search_payload)
    assert [i.key for i in result.issues] == ["ABC-2", "ABC-1"]


def test_search_result_without_summary_is_format_error():
    with pytest.raises(FormatError):
        SearchResult.parse_payload({"issues": [{"key": "ABC-1", "fields": {}}]})


def test_null_optional_fields_take_defaults(issue_payload):
    fields = issue_payload["fields"]
    fields["fixVersions"] = None
    fields["description"] = None
    fields["resolution"]["description"] = None
    fields["comment"]["comments"][0]["author"] = None
    fields["comment"]["comments"][0]["body"] = None
    fields["comment"]["comments"][1]["author"]["displayName"] = None

    issue = Issue.parse_payload(issue_payload)
    assert issue.fields.fix_versions == []
    assert issue.fields.description is None
    assert issue.fields.resolution.description == ""
    assert issue.fields.comment.comments[0].author.display_name == ""
    assert issue.fields.comment.comments[0].body == ""
    assert issue.fields.comment.comments[1].author.display_name == ""


@pytest.mark.parametrize("field", ["summary", "labels"])
def test_null_required_field_is_format_error(issue_payload, field):
    issue_payload["fields"][field] = None
    with pytest.raises(FormatError):
        Issue.parse_payload(issue_payload)
