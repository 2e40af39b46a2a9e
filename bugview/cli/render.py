# bugview/cli/render.py
"""
Offline preview of an issue page.

  bugview-render --file issue.json [--label public] > page.html
  bugview-render PROJ-123 > page.html      # live fetch, needs configuration
"""
from __future__ import annotations
import json, sys, argparse

from pydantic import ValidationError

from bugview.compose import compose_issue
from bugview.errors import BugviewError, FormatError
from bugview.models import Issue
from bugview.policy import is_public
from bugview.utils.templating import PageTemplates


def _load_file(path: str) -> Issue:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FormatError(f"cannot read {path}: {e}") from e
    return Issue.parse_payload(data)


def _fetch(key: str) -> tuple[Issue, str]:
    from server.settings import Settings
    from bugview.jira import JiraClient

    settings = Settings()
    client = JiraClient.from_settings(settings)
    return Issue.parse_payload(client.get_issue(key)), settings.label


def main(argv=None, out=None) -> int:
    out = out or sys.stdout
    p = argparse.ArgumentParser(prog="bugview-render")
    p.add_argument("key", nargs="?", help="Jira issue key to fetch live, e.g. PROJ-123")
    p.add_argument("--file", help="Render a stored Jira issue JSON document instead of fetching")
    p.add_argument("--label", default=None, help="Refuse to render unless the issue has this label")
    p.add_argument("--templates-dir", default=None, help="Directory holding issue.html / index.html")
    args = p.parse_args(argv)

    if bool(args.key) == bool(args.file):
        print("Give exactly one of KEY or --file", file=sys.stderr)
        return 2

    try:
        if args.file:
            issue, label = _load_file(args.file), args.label
        else:
            issue, fetched_label = _fetch(args.key)
            label = args.label or fetched_label
    except ValidationError as e:
        print(f"! configuration validation failed: {e}", file=sys.stderr)
        return 1
    except BugviewError as e:
        print(f"! {e}", file=sys.stderr)
        return 2

    if label and not is_public(issue, label):
        print(f"! {issue.key} is not public (missing label {label!r})", file=sys.stderr)
        return 3

    templates = PageTemplates(args.templates_dir)
    out.write(templates.render_issue(issue, compose_issue(issue)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
