from ReviewRender.inline_format import InlineRun, format_inline, inline_runs, strip_inline


def test_strong_and_em_delimiters():
    assert format_inline("**a** and __b__") == "<strong>a</strong> and <strong>b</strong>"
    assert format_inline("*a* and _b_") == "<em>a</em> and <em>b</em>"


def test_shortest_match_wins():
    assert format_inline("*a* b *c*") == "<em>a</em> b <em>c</em>"
    assert format_inline("**x** y **z**") == "<strong>x</strong> y <strong>z</strong>"


def test_code_span():
    assert format_inline("run `make test` now") == "run <code>make test</code> now"


def test_code_span_applied_after_emphasis():
    assert format_inline("`a*b*c`") == "<code>a<em>b</em>c</code>"


def test_unbalanced_delimiters_stay_literal():
    assert format_inline("2 * 3 = 6") == "2 * 3 = 6"
    assert format_inline("`unclosed") == "`unclosed"
    assert format_inline("``") == "``"


def test_raw_html_is_escaped_before_markup():
    assert format_inline("a < b & **c**") == "a &lt; b &amp; <strong>c</strong>"
    assert format_inline("`<script>`") == "<code>&lt;script&gt;</code>"
    assert format_inline('say "hi"') == 'say "hi"'


def test_inline_runs():
    runs = inline_runs(format_inline("a **b** `c &` *d*"))
    assert runs == [
        InlineRun("a "),
        InlineRun("b", bold=True),
        InlineRun(" "),
        InlineRun("c &", code=True),
        InlineRun(" "),
        InlineRun("d", italic=True),
    ]


def test_inline_runs_nested():
    runs = inline_runs("<strong>x <em>y</em></strong>")
    assert runs == [InlineRun("x ", bold=True), InlineRun("y", bold=True, italic=True)]


def test_strip_inline():
    assert strip_inline(format_inline("Fix **this** in `a < b`")) == "Fix this in a < b"
