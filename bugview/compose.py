# bugview/compose.py
"""
Builds the HTML fragment for one issue page.

Sections are written in a fixed order into one buffer: heading,
resolution, fix versions, description, comments. An optional section only
appears when Jira sent the field.
"""
from __future__ import annotations

import io
import logging
import re
from datetime import datetime, timezone
from typing import Optional, Union

from markupsafe import escape

from bugview import markup
from bugview.logger import get_logger
from bugview.models import Comment, CommentPage, Issue

module_log = get_logger("bugview.compose")

Log = Union[logging.Logger, logging.LoggerAdapter]

COMMENT_SHADES = ("#EEEEEE", "#DDDDDD")

# Jira writes offsets without a colon: 2014-01-15T10:20:30.000+0000
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def iso_timestamp(value: Optional[str]) -> str:
    """
    Normalise a Jira timestamp to UTC ISO-8601 with a Z designator,
    e.g. "2014-01-15T10:20:30.000Z". Naive values are taken as UTC.
    Anything unparseable is returned unchanged.
    """
    if not value:
        return ""
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    raw = _COMPACT_OFFSET.sub(r"\1:\2", raw)
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return value
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def compose_issue(issue: Issue, log: Optional[Log] = None) -> str:
    out = io.StringIO()
    _heading(out, issue)
    _resolution(out, issue)
    _fix_versions(out, issue)
    _description(out, issue)
    _comments(out, issue, log or module_log)
    return out.getvalue()


def _heading(out: io.StringIO, issue: Issue) -> None:
    out.write(f"<h1>{escape(issue.key)}: {escape(issue.fields.summary)}</h1>\n")


def _resolution(out: io.StringIO, issue: Issue) -> None:
    res = issue.fields.resolution
    if res is None:
        return
    out.write("<h2>Resolution</h2>\n")
    out.write(f"<p><b>{escape(res.name)}:</b> {escape(res.description)}<br>\n")
    if issue.fields.resolution_date:
        out.write(f"(Resolution Date: {escape(iso_timestamp(issue.fields.resolution_date))})")
    out.write("</p>\n")


def _fix_versions(out: io.StringIO, issue: Issue) -> None:
    versions = issue.fields.fix_versions
    if not versions:
        return
    out.write("<h2>Fix Versions</h2>\n")
    for fv in versions:
        # releaseDate is shown verbatim; Jira allows partial or missing dates
        out.write(f"<p><b>{escape(fv.name)}</b> (Release Date: {escape(fv.release_date or '')})</p>\n")


def _description(out: io.StringIO, issue: Issue) -> None:
    if not issue.fields.description:
        return
    out.write("<h2>Description</h2>\n")
    out.write("<div>")
    out.write(markup.render(issue.fields.description))
    out.write("</div>\n")


def _comments(out: io.StringIO, issue: Issue, log: Log) -> None:
    page: Optional[CommentPage] = issue.fields.comment
    if page is None:
        return
    out.write("<h2>Comments</h2>\n")

    if page.max_results != page.total:
        # render what we got; no second fetch
        log.warning(
            "comment maxResults and total not equal for issue %s (total=%d, maxResults=%d)",
            issue.key, page.total, page.max_results,
            extra={"issue": issue.key, "total": page.total, "max_results": page.max_results},
        )

    for i, com in enumerate(page.comments):
        _comment(out, com, COMMENT_SHADES[i % 2])


def _comment(out: io.StringIO, com: Comment, shade: str) -> None:
    out.write(f'<div style="background-color: {shade};">\n')
    out.write("<b>")
    out.write(f"Comment by {escape(com.author.display_name)}<br>\n")
    out.write(f"Created at {escape(iso_timestamp(com.created))}<br>\n")
    if com.updated and com.updated != com.created:
        out.write(f"Updated at {escape(iso_timestamp(com.updated))}<br>\n")
    out.write("</b>")
    out.write(markup.render(com.body))
    out.write("</div><br>\n")
