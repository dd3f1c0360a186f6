from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_docx, renderer_html
from .config import load_config
from .utils import configure_logging, read_response, resolve_output_path

SUFFIXES = {"html": ".html", "docx": ".docx"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ReviewRender",
        description="Render a generated code-review response as HTML or DOCX.",
    )
    parser.add_argument("input", type=str, help="Path to the response text file")
    parser.add_argument("-o", "--output", type=str, help="Output file or directory")
    parser.add_argument("--format", choices=sorted(SUFFIXES), default="html", help="Output format")
    parser.add_argument("--title", type=str, help="Title shown above the rendered response")
    parser.add_argument("--config", type=str, help="YAML file with render settings")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, SUFFIXES[args.format])
    config = load_config(args.config)
    title = args.title or config.page_title

    logging.info("Reading %s", input_path)
    text = read_response(input_path)
    logging.debug("Response length: %d chars", len(text))

    logging.info("Parsing response...")
    blocks = markdown_parser.parse_markdown(text, max_heading_level=config.max_heading_level)

    logging.info("Rendering %s to %s", args.format.upper(), output_path)
    if args.format == "docx":
        renderer_docx.render_document(blocks, output_path=output_path, title=title, config=config)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(renderer_html.render_html(blocks, title=title, config=config), encoding="utf-8")

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
