"""
Highlighter
Splits valid JSON text into classified spans for display. The text is
HTML-escaped first, so every span carries display-safe text and the spans
concatenate back to the escaped input exactly.
"""

from typing import Iterator, List

from .config import MAX_DEPTH, MAX_INPUT_SIZE
from .models import Span, SpanClass
from .parser import NUMBER_RE, validate
from .scanner import STRUCTURAL_CHARS, WHITESPACE_CHARS, string_end

HTML_ESCAPES = {"<": "&lt;", ">": "&gt;", "&": "&amp;"}
KEYWORDS = (("true", SpanClass.BOOLEAN), ("false", SpanClass.BOOLEAN), ("null", SpanClass.NULL))


def escape_html(text: str) -> str:
    return "".join(HTML_ESCAPES.get(c, c) for c in text)


def _tokens(text: str) -> Iterator[Span]:
    i, n = 0, len(text)
    while i < n:
        c = text[i]

        if c == '"':
            end = string_end(text, i)
            j = end + 1
            while j < n and text[j] in WHITESPACE_CHARS:
                j += 1
            cls = SpanClass.KEY if j < n and text[j] == ":" else SpanClass.STRING
            yield Span(text=text[i:end + 1], kind=cls)
            i = end + 1
            continue

        if c in STRUCTURAL_CHARS:
            yield Span(text=c, kind=SpanClass.PUNCTUATION)
            i += 1
            continue

        if c in WHITESPACE_CHARS:
            # Each newline is its own span so renderers can break lines on it
            if c == "\n":
                yield Span(text=c, kind=SpanClass.WHITESPACE)
                i += 1
                continue
            j = i
            while j < n and text[j] in WHITESPACE_CHARS and text[j] != "\n":
                j += 1
            yield Span(text=text[i:j], kind=SpanClass.WHITESPACE)
            i = j
            continue

        for word, cls in KEYWORDS:
            if text.startswith(word, i):
                yield Span(text=word, kind=cls)
                i += len(word)
                break
        else:
            m = NUMBER_RE.match(text, i)
            if m is None:
                raise ValueError(f"Cannot classify {c!r} at offset {i}")
            yield Span(text=m.group(), kind=SpanClass.NUMBER)
            i = m.end()


def highlight(text: str, max_depth: int = MAX_DEPTH, max_input_size: int = MAX_INPUT_SIZE) -> List[Span]:
    """
    Classify valid JSON text into spans.

    Args:
        text: Valid JSON, usually formatter or minifier output

    Returns:
        Spans covering the HTML-escaped text with no gaps or overlaps

    Raises:
        JSONSyntaxError: If the text is not valid JSON
    """
    validate(text, max_depth=max_depth, max_input_size=max_input_size)
    return list(_tokens(escape_html(text)))


def to_html(spans: List[Span]) -> str:
    """Render spans as <span class="json-..."> markup, newlines as <br>."""
    parts: List[str] = []
    for span in spans:
        if span.kind is SpanClass.WHITESPACE:
            parts.append("<br>" if span.is_line_break else "&nbsp;" * len(span.text))
        else:
            body = span.text.replace(" ", "&nbsp;")
            parts.append(f'<span class="json-{span.kind.value}">{body}</span>')
    return "".join(parts)
