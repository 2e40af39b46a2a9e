# bugview/policy.py
from __future__ import annotations

from bugview.models import Issue


def is_public(issue: Issue, required_label: str) -> bool:
    """True iff the issue carries required_label (exact, case-sensitive)."""
    return required_label in issue.fields.labels
