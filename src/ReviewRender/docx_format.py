from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from .config import RenderConfig

HEADING_SIZES_PT = {1: 20, 2: 16, 3: 14, 4: 12, 5: 12, 6: 12}
SPACE_AFTER_PT = 6
LIST_INDENT_CM = 0.75
CODE_INDENT_CM = 0.5


def set_run_font(run, config: RenderConfig, bold: bool = False, italic: bool = False, code: bool = False) -> None:
    run.font.name = config.code_font if code else config.body_font
    run.font.size = Pt(config.font_size_pt)
    run.bold = bold
    run.italic = italic


def apply_body_paragraph_format(paragraph) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(SPACE_AFTER_PT)
    paragraph.paragraph_format.first_line_indent = Cm(0)


def apply_heading_format(paragraph, level: int, config: RenderConfig) -> None:
    """Bold, left aligned, sized by heading level."""
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(SPACE_AFTER_PT * 2 if level <= 2 else SPACE_AFTER_PT)
    paragraph.paragraph_format.space_after = Pt(SPACE_AFTER_PT)
    paragraph.paragraph_format.keep_with_next = True
    for run in paragraph.runs:
        run.bold = True
        run.font.size = Pt(HEADING_SIZES_PT.get(level, config.font_size_pt))


def apply_list_item_format(paragraph) -> None:
    apply_body_paragraph_format(paragraph)
    paragraph.paragraph_format.left_indent = Cm(LIST_INDENT_CM)
    paragraph.paragraph_format.space_after = Pt(0)


def apply_code_format(paragraph) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.left_indent = Cm(CODE_INDENT_CM)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(SPACE_AFTER_PT)
