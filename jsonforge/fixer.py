"""
JSON Fixer Module
Repairs common hand-written JSON mistakes with an ordered, one-shot pipeline:
- Remove trailing commas before } or ]
- Quote bare object keys

The rules are textual patterns, not scanner-driven, so text inside string
values that looks like a trailing comma or a bare key is rewritten too.
Nothing is retried: if the rewritten text still fails to parse, the input is
reported as unfixable.
"""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_INDENT, MAX_DEPTH, MAX_INPUT_SIZE
from .errors import JSONSyntaxError
from .formatter import format_value
from .models import ErrorKind
from .parser import check_limits, parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixRule:
    name: str
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# Order matters: keys are quoted after trailing commas are gone
FIX_RULES: Tuple[FixRule, ...] = (
    FixRule("trailing-comma", re.compile(r",\s*([}\]])"), r"\1"),
    FixRule("quote-keys", re.compile(r"([{,]\s*)([A-Za-z0-9_]+)(\s*:)"), r'\1"\2"\3'),
)


def apply_rules(text: str) -> str:
    """Run every rule once, in order."""
    for rule in FIX_RULES:
        fixed = rule.apply(text)
        if fixed != text:
            logger.debug("Fix rule %r rewrote the input", rule.name)
        text = fixed
    return text


def _repair(text: str, max_depth: int, max_input_size: int):
    source = text.strip()
    check_limits(source, max_depth, max_input_size)
    fixed = apply_rules(source)
    try:
        value = parse(fixed, max_depth=max_depth, max_input_size=max_input_size)
    except JSONSyntaxError as e:
        error = e.error.model_copy(update={
            "kind": ErrorKind.UNFIXABLE,
            "message": f"Unable to automatically fix the JSON: {e.error.message}",
        })
        raise JSONSyntaxError(error) from e
    return fixed, value


def fix(text: str, max_depth: int = MAX_DEPTH, max_input_size: int = MAX_INPUT_SIZE) -> str:
    """
    Attempt to repair invalid JSON.

    Args:
        text: Potentially malformed JSON text

    Returns:
        The rewritten text, which is guaranteed to parse

    Raises:
        JSONSyntaxError: Kind Unfixable, positioned in the rewritten text,
            if the pipeline did not produce valid JSON
    """
    fixed, _ = _repair(text, max_depth, max_input_size)
    return fixed


def fix_and_format(text: str, indent=DEFAULT_INDENT, max_depth: int = MAX_DEPTH,
                   max_input_size: int = MAX_INPUT_SIZE) -> str:
    """Repair the text and pretty-print the result."""
    _, value = _repair(text, max_depth, max_input_size)
    return format_value(value, indent)
