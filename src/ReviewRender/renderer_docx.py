from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH

from . import docx_format
from .config import RenderConfig
from .inline_format import inline_runs, strip_inline
from .model import Block, CodeBlock, FormattedText, Heading, HorizontalRule, ListBlock, Paragraph

# Characters outside the XML 1.0 range; lxml refuses them in text nodes.
_XML_INVALID = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def render_document(
    blocks: Iterable[Block],
    output_path: str | Path,
    title: str | None = None,
    config: RenderConfig | None = None,
) -> None:
    output_path = Path(output_path)
    config = config or RenderConfig()
    blocks = list(blocks)
    docx = DocxDocument()
    docx.core_properties.title = _xml_safe(title or _first_heading_text(blocks))

    if title:
        paragraph = docx.add_paragraph(_xml_safe(title))
        docx_format.apply_heading_format(paragraph, level=1, config=config)
        for run in paragraph.runs:
            run.font.name = config.body_font

    for block in blocks:
        _dispatch_block(docx, block, config)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logging.debug("Wrote %d blocks to %s", len(blocks), output_path)


def _dispatch_block(docx: DocxDocument, block: Block, config: RenderConfig) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block, config)
    elif isinstance(block, Paragraph):
        paragraph = docx.add_paragraph()
        _add_inline_runs(paragraph, block.text, config)
        docx_format.apply_body_paragraph_format(paragraph)
    elif isinstance(block, ListBlock):
        _render_list(docx, block, config)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, config)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(docx, config)


def _render_heading(docx: DocxDocument, heading: Heading, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    _add_inline_runs(paragraph, heading.text, config)
    docx_format.apply_heading_format(paragraph, level=heading.level, config=config)


def _render_list(docx: DocxDocument, block: ListBlock, config: RenderConfig) -> None:
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        prefix = f"{idx}. " if block.ordered else "– "
        docx_format.set_run_font(paragraph.add_run(prefix), config)
        _add_inline_runs(paragraph, item, config)
        docx_format.apply_list_item_format(paragraph)


def _render_code_block(docx: DocxDocument, block: CodeBlock, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(_xml_safe(block.code))
    docx_format.set_run_font(run, config, code=True)
    docx_format.apply_code_format(paragraph)


def _render_horizontal_rule(docx: DocxDocument, config: RenderConfig) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run("-" * 20)
    docx_format.set_run_font(run, config)
    docx_format.apply_body_paragraph_format(paragraph)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


def _first_heading_text(blocks: list[Block]) -> str:
    for block in blocks:
        if isinstance(block, Heading):
            return strip_inline(block.text)
    return ""


def _add_inline_runs(paragraph, text: FormattedText, config: RenderConfig) -> None:
    for inline in inline_runs(text):
        run = paragraph.add_run(_xml_safe(inline.text))
        docx_format.set_run_font(run, config, bold=inline.bold, italic=inline.italic, code=inline.code)


def _xml_safe(text: str) -> str:
    return _XML_INVALID.sub("", text)
