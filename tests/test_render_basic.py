from pathlib import Path

from docx import Document as DocxReader

from ReviewRender import markdown_parser
from ReviewRender.config import RenderConfig
from ReviewRender.model import CodeBlock, Heading, HorizontalRule, ListBlock, Paragraph
from ReviewRender.renderer_docx import render_document


def test_render_creates_docx(tmp_path: Path):
    blocks = [
        Heading(level=1, text="Review"),
        Paragraph(text="Plain paragraph for the test."),
        HorizontalRule(),
    ]
    output_file = tmp_path / "nested" / "report.docx"
    render_document(blocks, output_file)
    assert output_file.exists()
    assert output_file.stat().st_size > 0


def test_render_blocks_to_paragraphs(tmp_path: Path):
    text = "# Findings\nUse **strong** and `code`.\n- first\n- second\n1. step\n```python\nx = 1\ny = 2\n```"
    out = tmp_path / "review.docx"
    render_document(markdown_parser.parse_markdown(text), out, title="Code Review")
    reader = DocxReader(out)
    texts = [p.text for p in reader.paragraphs]
    assert texts == [
        "Code Review",
        "Findings",
        "Use strong and code.",
        "– first",
        "– second",
        "1. step",
        "x = 1\ny = 2",
    ]


def test_inline_styles_become_runs(tmp_path: Path):
    config = RenderConfig(code_font="Courier New")
    out = tmp_path / "inline.docx"
    render_document([Paragraph(text="a <strong>b</strong> <em>c</em> <code>d</code>")], out, config=config)
    runs = DocxReader(out).paragraphs[0].runs
    assert [run.text for run in runs] == ["a ", "b", " ", "c", " ", "d"]
    assert runs[1].bold
    assert runs[3].italic
    assert runs[5].font.name == "Courier New"


def test_heading_is_bold(tmp_path: Path):
    out = tmp_path / "heading.docx"
    render_document([Heading(level=2, text="Risks"), ListBlock(items=("one",), ordered=True)], out)
    paragraphs = DocxReader(out).paragraphs
    assert all(run.bold for run in paragraphs[0].runs)
    assert paragraphs[1].text == "1. one"


def test_code_block_font(tmp_path: Path):
    out = tmp_path / "code.docx"
    render_document([CodeBlock(language="", raw_lines=("echo hi",))], out)
    run = DocxReader(out).paragraphs[0].runs[0]
    assert run.text == "echo hi"
    assert run.font.name == RenderConfig().code_font


def test_document_title_property(tmp_path: Path):
    out = tmp_path / "titled.docx"
    render_document([Paragraph(text="intro"), Heading(level=1, text="Fix <code>a &lt; b</code>")], out)
    assert DocxReader(out).core_properties.title == "Fix a < b"

    out = tmp_path / "explicit.docx"
    render_document([Heading(level=1, text="Ignored")], out, title="Pipeline Review")
    assert DocxReader(out).core_properties.title == "Pipeline Review"


def test_control_characters_are_dropped_from_docx(tmp_path: Path):
    blocks = markdown_parser.parse_markdown("```\n\x1b[31mred\x1b[0m\n```\nform\x0cfeed")
    out = tmp_path / "ansi.docx"
    render_document(blocks, out, title="Build\x00 log")
    reader = DocxReader(out)
    assert [p.text for p in reader.paragraphs] == ["Build log", "[31mred[0m", "formfeed"]
    assert blocks[0] == CodeBlock(language="", raw_lines=("\x1b[31mred\x1b[0m",))
