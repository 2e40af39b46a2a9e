# bugview/markup.py
"""
Jira wiki markup -> HTML, just enough for descriptions and comments.

Only {code} and {noformat} fences are understood. Every other line is
escaped and shown as-is. A fence with no closing marker leaves the <pre>
open, which browsers close at the end of the enclosing element.
"""
from __future__ import annotations

import re

from markupsafe import escape

FENCE_MARKERS = ("{noformat", "{code")

PRE_OPEN = (
    '<pre style="border: 2px solid black;'
    "font-family: Menlo, Courier, Lucida Console, Monospace;"
    'background-color: #eeeeee;">\n'
)
PRE_CLOSE = "</pre>\n"

_LINE_SPLIT = re.compile(r"\r?\n")


def is_fence(line: str) -> bool:
    return line.startswith(FENCE_MARKERS)


def render(text: str) -> str:
    if not text:
        return ""

    out: list[str] = []
    in_block = False
    for line in _LINE_SPLIT.split(text):
        if is_fence(line):
            out.append(PRE_CLOSE if in_block else PRE_OPEN)
            in_block = not in_block
        elif in_block:
            out.append(f"{escape(line)}\n")
        else:
            out.append(f"{escape(line)}<br>\n")
    return "".join(out)
