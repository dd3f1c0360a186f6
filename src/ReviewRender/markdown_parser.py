from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

from .inline_format import format_inline
from .model import (
    Block,
    CodeBlock,
    FormattedText,
    Heading,
    HorizontalRule,
    ListBlock,
    Paragraph,
)

FENCE = "```"
HEADING_MARK = "#"
MAX_HEADING_LEVEL = 6

_UNORDERED_ITEM = re.compile(r"\s*[-*]\s+(.*)")
_ORDERED_ITEM = re.compile(r"\s*[0-9]+\.\s+(.*)")
_RULE = re.compile(r"-{3,}|\*{3,}|_{3,}")


@dataclass
class ParserState:
    blocks: List[Block] = field(default_factory=list)
    in_code_block: bool = False
    code_buffer: List[str] = field(default_factory=list)
    code_language: str = ""
    list_ordered: bool | None = None
    list_items: List[FormattedText] = field(default_factory=list)

    def flush_list(self) -> None:
        if self.list_items and self.list_ordered is not None:
            self.blocks.append(ListBlock(items=tuple(self.list_items), ordered=self.list_ordered))
        self.list_items = []
        self.list_ordered = None

    def open_code_block(self, language: str) -> None:
        self.in_code_block = True
        self.code_language = language
        self.code_buffer = []

    def close_code_block(self) -> None:
        self.blocks.append(CodeBlock(language=self.code_language, raw_lines=tuple(self.code_buffer)))
        self.in_code_block = False
        self.code_language = ""
        self.code_buffer = []

    def add_list_item(self, text: str, ordered: bool) -> None:
        if self.list_ordered is not ordered:
            self.flush_list()
            self.list_ordered = ordered
        self.list_items.append(format_inline(text))


def parse_markdown(text: str, max_heading_level: int = MAX_HEADING_LEVEL) -> list[Block]:
    """Convert generated response text into an ordered list of blocks.

    Every line is classified on its own, in this order: fence, heading,
    unordered item, ordered item, rule, blank, paragraph. Lines inside a
    fence are kept verbatim. A fence left open at the end of the input still
    yields its code block.
    """
    state = ParserState()
    lines = _split_lines(text)
    for line in lines:
        _consume_line(state, line, max_heading_level)

    state.flush_list()
    if state.in_code_block:
        logging.debug("Unterminated code fence, keeping %d buffered lines", len(state.code_buffer))
        state.close_code_block()

    logging.debug("Parsed %d lines into %d blocks", len(lines), len(state.blocks))
    return state.blocks


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _consume_line(state: ParserState, line: str, max_heading_level: int) -> None:
    if line.startswith(FENCE):
        state.flush_list()
        if state.in_code_block:
            state.close_code_block()
        else:
            state.open_code_block(line[len(FENCE) :].strip().lower())
        return

    if state.in_code_block:
        state.code_buffer.append(line)
        return

    if line.startswith(HEADING_MARK):
        state.flush_list()
        level = len(line) - len(line.lstrip(HEADING_MARK))
        content = line[level:].strip()
        state.blocks.append(Heading(level=min(level, max_heading_level), text=format_inline(content)))
        return

    match = _UNORDERED_ITEM.match(line)
    if match:
        state.add_list_item(match.group(1), ordered=False)
        return

    match = _ORDERED_ITEM.match(line)
    if match:
        state.add_list_item(match.group(1), ordered=True)
        return

    if _RULE.fullmatch(line):
        state.flush_list()
        state.blocks.append(HorizontalRule())
        return

    state.flush_list()
    if not line.strip():
        return
    state.blocks.append(Paragraph(text=format_inline(line)))
