"""JSON validation, formatting, repair, statistics and highlighting."""

from .errors import JSONSyntaxError, describe
from .fixer import FIX_RULES, FixRule, fix, fix_and_format
from .formatter import format_text, format_value, minify, minify_text
from .highlighter import highlight, to_html
from .models import ErrorKind, ParseError, Span, SpanClass, StatsResult
from .parser import check, parse, validate
from .stats import format_bytes, stats

__all__ = [
    "ErrorKind",
    "FIX_RULES",
    "FixRule",
    "JSONSyntaxError",
    "ParseError",
    "Span",
    "SpanClass",
    "StatsResult",
    "check",
    "describe",
    "fix",
    "fix_and_format",
    "format_bytes",
    "format_text",
    "format_value",
    "highlight",
    "minify",
    "minify_text",
    "parse",
    "stats",
    "to_html",
    "validate",
]
