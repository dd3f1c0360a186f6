from __future__ import annotations

import html
from typing import Iterable, List

from .config import RenderConfig
from .model import Block, CodeBlock, Heading, HorizontalRule, ListBlock, Paragraph

COPY_SCRIPT = """\
document.querySelectorAll('.code-block').forEach(function (wrapper) {
  const button = wrapper.querySelector('.copy-button');
  const code = wrapper.querySelector('code');
  button.addEventListener('click', async function () {
    const original = button.textContent;
    try {
      await navigator.clipboard.writeText(code.textContent);
      button.textContent = 'Copied!';
    } catch (err) {
      console.error('Failed to copy code: ', err);
      button.textContent = 'Error!';
    }
    setTimeout(function () { button.textContent = original; }, %(reset_ms)d);
  });
});
"""


def render_html(blocks: Iterable[Block], title: str | None = None, config: RenderConfig | None = None) -> str:
    """Render parsed blocks to HTML.

    Without a title the result is a bare fragment; with one it is a complete
    page carrying the copy-button script.
    """
    config = config or RenderConfig()
    parts: List[str] = [_dispatch_block(block) for block in blocks]
    body = "\n".join(part for part in parts if part)
    if title is None:
        return body
    return _wrap_page(body, title, config)


def _dispatch_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{block.text}</h{block.level}>"
    elif isinstance(block, Paragraph):
        return f"<p>{block.text}</p>"
    elif isinstance(block, ListBlock):
        return _render_list(block)
    elif isinstance(block, CodeBlock):
        return _render_code_block(block)
    elif isinstance(block, HorizontalRule):
        return "<hr>"
    return ""


def _render_list(block: ListBlock) -> str:
    tag = "ol" if block.ordered else "ul"
    items = "".join(f"<li>{item}</li>" for item in block.items)
    return f"<{tag}>{items}</{tag}>"


def _render_code_block(block: CodeBlock) -> str:
    language = html.escape(block.language)
    label = f"Code block type {language}" if language else "Code block"
    code_class = f' class="language-{language}"' if language else ""
    return (
        f'<div class="code-block" role="group" aria-label="{label}">'
        f"<pre><code{code_class}>{html.escape(block.code, quote=False)}</code></pre>"
        '<button type="button" class="copy-button" aria-label="Copy code to clipboard">Copy</button>'
        "</div>"
    )


def _wrap_page(body: str, title: str, config: RenderConfig) -> str:
    escaped_title = html.escape(title)
    script = COPY_SCRIPT % {"reset_ms": int(config.copy_reset_seconds * 1000)}
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escaped_title}</title>\n"
        "</head>\n"
        "<body>\n"
        '<section role="dialog" aria-labelledby="results-title">\n'
        f'<h3 id="results-title">{escaped_title}</h3>\n'
        f'<div class="results-content">\n{body}\n</div>\n'
        "</section>\n"
        f"<script>\n{script}</script>\n"
        "</body>\n"
        "</html>\n"
    )
