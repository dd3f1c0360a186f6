from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

FormattedText = str


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Heading(Block):
    level: int
    text: FormattedText


@dataclass(frozen=True)
class Paragraph(Block):
    text: FormattedText


@dataclass(frozen=True)
class ListBlock(Block):
    items: Tuple[FormattedText, ...]
    ordered: bool


@dataclass(frozen=True)
class CodeBlock(Block):
    language: str
    raw_lines: Tuple[str, ...]

    @property
    def code(self) -> str:
        """Raw code text, exactly as it appeared between the fences."""
        return "\n".join(self.raw_lines)


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""
