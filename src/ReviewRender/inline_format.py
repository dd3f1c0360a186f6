from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import List

from .model import FormattedText

# Order matters: strong before em, code spans last.
_SUBSTITUTIONS = (
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"__(.*?)__"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"_(.*?)_"), r"<em>\1</em>"),
    (re.compile(r"`([^`]+?)`"), r"<code>\1</code>"),
)

_TAG_RE = re.compile(r"<(/?)(strong|em|code)>")


@dataclass
class InlineRun:
    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False


def format_inline(line: str) -> FormattedText:
    """Escape a single line and mark up emphasis and code spans.

    Each substitution runs once over the output of the previous one, so text
    inside a code span has already been through the emphasis rules. Delimiters
    without a partner are left untouched.
    """
    text = html.escape(line, quote=False)
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


def inline_runs(text: FormattedText) -> List[InlineRun]:
    """Split formatted text into styled runs for non-HTML renderers."""
    runs: List[InlineRun] = []
    depth = {"strong": 0, "em": 0, "code": 0}
    pos = 0
    for match in _TAG_RE.finditer(text):
        _append_run(runs, text[pos : match.start()], depth)
        closing, tag = match.group(1), match.group(2)
        if closing:
            depth[tag] = max(0, depth[tag] - 1)
        else:
            depth[tag] += 1
        pos = match.end()
    _append_run(runs, text[pos:], depth)
    return runs


def strip_inline(text: FormattedText) -> str:
    """Drop inline markup and return the plain text."""
    return html.unescape(_TAG_RE.sub("", text))


def _append_run(runs: List[InlineRun], chunk: str, depth: dict[str, int]) -> None:
    if not chunk:
        return
    runs.append(
        InlineRun(
            text=html.unescape(chunk),
            bold=depth["strong"] > 0,
            italic=depth["em"] > 0,
            code=depth["code"] > 0,
        )
    )
