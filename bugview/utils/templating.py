# bugview/utils/templating.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from bugview.models import Issue, IssueSummary

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class PageTemplates:
    """
    The outer HTML documents. Both templates are loaded when this is
    constructed, so a missing or broken file stops the process at startup.
    """

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory or TEMPLATES_DIR)
        self.env = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.issue = self.env.get_template("issue.html")
        self.index = self.env.get_template("index.html")

    def render_issue(self, issue: Issue, content: str) -> str:
        # content is already escaped by the composer
        return self.issue.render(issue=issue, content=Markup(content))

    def render_index(self, issues: Iterable[IssueSummary]) -> str:
        return self.index.render(issues=list(issues))
