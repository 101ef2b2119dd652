"""Convert the limited HTML used in problem statements into prompt text."""

import re

# Order matters: entities are decoded after tags are gone, ``&amp;`` last
# among the escapes so ``&amp;lt;`` stays ``&lt;``.
_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"<pre>"), "\n```\n"),
    (re.compile(r"</pre>"), "\n```\n"),
    (re.compile(r"<code>"), "`"),
    (re.compile(r"</code>"), "`"),
    (re.compile(r"<strong>"), "**"),
    (re.compile(r"</strong>"), "**"),
    (re.compile(r"<em>"), "*"),
    (re.compile(r"</em>"), "*"),
    (re.compile(r"<sup>"), "^"),
    (re.compile(r"</sup>"), ""),
    (re.compile(r"<sub>"), "_"),
    (re.compile(r"</sub>"), ""),
    (re.compile(r"<li>"), "• "),
    (re.compile(r"</li>"), "\n"),
    (re.compile(r"<ul>"), "\n"),
    (re.compile(r"</ul>"), ""),
    (re.compile(r"<ol>"), "\n"),
    (re.compile(r"</ol>"), ""),
    (re.compile(r"<p>"), "\n"),
    (re.compile(r"</p>"), "\n"),
    (re.compile(r"<br\s*/?>"), "\n"),
    (re.compile(r"<[^>]+>"), ""),
    (re.compile(r"&nbsp;"), " "),
    (re.compile(r"&lt;"), "<"),
    (re.compile(r"&gt;"), ">"),
    (re.compile(r"&amp;"), "&"),
    (re.compile(r"&quot;"), '"'),
    (re.compile(r"&#39;"), "'"),
    (re.compile(r"\n{3,}"), "\n\n"),
]


def html_to_text(html: str | None) -> str:
    """
    Best-effort HTML to plain text.

    ``<pre>`` becomes a fenced block, ``<strong>``/``<em>`` become Markdown
    emphasis, list items get bullets and paragraphs get blank lines. Any
    other tag is dropped. Malformed markup may leak through.
    """
    if not html:
        return ""

    text = html
    for pattern, replacement in _REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text.strip()
