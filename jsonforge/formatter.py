"""
Formatter / Minifier
Serializes parsed values back to canonical JSON text.

Numbers are rendered in a canonical minimal form, so the source spelling of a
number is not preserved: 1.0 -> 1, 1.50 -> 1.5, 1E3 -> 1000.
"""

import logging
import math
import re
from typing import List, Union

from .config import DEFAULT_INDENT, MAX_DEPTH, MAX_INPUT_SIZE, parse_indent
from .models import JSONValue, MinifyResult
from .parser import parse

logger = logging.getLogger(__name__)

_ESCAPE_RE = re.compile(r'["\\\x00-\x1f\ud800-\udfff]')
_ESCAPE_MAP = {'"': '\\"', "\\": "\\\\", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def encode_string(s: str) -> str:
    """Quote a string, escaping quotes, backslashes, control characters and lone surrogates."""
    def _replace(m):
        c = m.group()
        return _ESCAPE_MAP.get(c) or f"\\u{ord(c):04x}"
    return '"' + _ESCAPE_RE.sub(_replace, s) + '"'


def encode_number(value: Union[int, float]) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"{value!r} is not representable in JSON")
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _encode(value: JSONValue, unit: str, level: int, out: List[str]) -> None:
    # bool before int: bool is an int subclass
    if value is None:
        out.append("null")
    elif value is True:
        out.append("true")
    elif value is False:
        out.append("false")
    elif isinstance(value, (int, float)):
        out.append(encode_number(value))
    elif isinstance(value, str):
        out.append(encode_string(value))
    elif isinstance(value, dict):
        if not value:
            out.append("{}")
            return
        inner = "\n" + unit * (level + 1) if unit else ""
        out.append("{")
        for n, (key, item) in enumerate(value.items()):
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            if n:
                out.append(",")
            out.append(inner)
            out.append(encode_string(key))
            out.append(": " if unit else ":")
            _encode(item, unit, level + 1, out)
        out.append("\n" + unit * level if unit else "")
        out.append("}")
    elif isinstance(value, (list, tuple)):
        if not value:
            out.append("[]")
            return
        inner = "\n" + unit * (level + 1) if unit else ""
        out.append("[")
        for n, item in enumerate(value):
            if n:
                out.append(",")
            out.append(inner)
            _encode(item, unit, level + 1, out)
        out.append("\n" + unit * level if unit else "")
        out.append("]")
    else:
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_value(value: JSONValue, indent=DEFAULT_INDENT) -> str:
    """
    Serialize a value with one indent unit per nesting level.

    Args:
        value: Parsed JSON value
        indent: 1-8 (spaces) or "tab"

    Returns:
        Pretty-printed JSON; empty containers render as {} / []
    """
    out: List[str] = []
    _encode(value, parse_indent(indent), 0, out)
    return "".join(out)


def minify(value: JSONValue) -> str:
    """Serialize a value with no whitespace between tokens."""
    out: List[str] = []
    _encode(value, "", 0, out)
    return "".join(out)


def format_text(text: str, indent=DEFAULT_INDENT, max_depth: int = MAX_DEPTH,
                max_input_size: int = MAX_INPUT_SIZE) -> str:
    """Parse raw text and pretty-print it. Raises JSONSyntaxError on invalid input."""
    value = parse(text.strip(), max_depth=max_depth, max_input_size=max_input_size)
    return format_value(value, indent)


def minify_text(text: str, max_depth: int = MAX_DEPTH, max_input_size: int = MAX_INPUT_SIZE) -> MinifyResult:
    """Parse raw text and minify it, reporting the size reduction."""
    source = text.strip()
    minified = minify(parse(source, max_depth=max_depth, max_input_size=max_input_size))
    logger.debug("Minified %d -> %d characters", len(source), len(minified))
    return MinifyResult(text=minified, original_length=len(source), minified_length=len(minified))
