"""
Parser / Validator
Recursive-descent RFC 8259 parser that builds native Python values and
reports the first violation as a JSONSyntaxError with position details.
Trailing commas and unquoted keys are rejected here; repairing them is the
fixer's job.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .config import MAX_DEPTH, MAX_DEPTH_LIMIT, MAX_INPUT_SIZE
from .errors import JSONSyntaxError
from .models import ErrorKind, JSONValue, ParseError
from .scanner import WHITESPACE_CHARS, string_end

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?", re.ASCII)
# Everything that could be part of a number token, to catch "01", "1." and "1e"
_NUMBER_RUN_RE = re.compile(r"[-+0-9.eE]+")
_PLAIN_RE = re.compile(r'[^"\\\x00-\x1f]+')
_HEX4_RE = re.compile(r"[0-9a-fA-F]{4}")

ESCAPES = {'"': '"', "\\": "\\", "/": "/", "b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
LITERALS = (("true", True), ("false", False), ("null", None))
DIGITS = "0123456789"


class Parser:
    def __init__(self, text: str, max_depth: int = MAX_DEPTH):
        self.text = text
        self.n = len(text)
        self.i = 0
        self.max_depth = max_depth

    def parse(self) -> JSONValue:
        self._skip_ws()
        if self.i >= self.n:
            raise self._err(ErrorKind.UNEXPECTED_END, "No JSON data to parse", offset=0)
        value = self._parse_value(0)
        self._skip_ws()
        if self.i < self.n:
            raise self._err(ErrorKind.UNEXPECTED_TOKEN,
                            f"Unexpected non-whitespace character {self.text[self.i]!r} after JSON")
        return value

    #
    # Helpers
    #

    def _peek(self) -> str:
        return self.text[self.i] if self.i < self.n else ""

    def _skip_ws(self) -> None:
        while self.i < self.n and self.text[self.i] in WHITESPACE_CHARS:
            self.i += 1

    def _err(self, kind: ErrorKind, message: str, offset: Optional[int] = None) -> JSONSyntaxError:
        return JSONSyntaxError.at(self.text, self.i if offset is None else offset, kind, message)

    def _unexpected(self, expected: str) -> JSONSyntaxError:
        c = self._peek()
        if not c:
            return self._err(ErrorKind.UNEXPECTED_END, f"Unexpected end of JSON input, expected {expected}")
        return self._err(ErrorKind.UNEXPECTED_TOKEN, f"Unexpected token {c!r}, expected {expected}")

    #
    # Grammar
    #

    def _parse_value(self, depth: int) -> JSONValue:
        c = self._peek()
        if c == "{":
            return self._parse_object(depth + 1)
        if c == "[":
            return self._parse_array(depth + 1)
        if c == '"':
            return self._parse_string()
        if c and (c == "-" or c in DIGITS):
            return self._parse_number()
        for word, value in LITERALS:
            if self.text.startswith(word, self.i):
                self.i += len(word)
                return value
            if self.n - self.i < len(word) and word.startswith(self.text[self.i:]):
                raise self._err(ErrorKind.UNEXPECTED_END, "Unexpected end of JSON input", offset=self.n)
        raise self._unexpected("a value")

    def _enter(self, depth: int) -> None:
        if depth > self.max_depth:
            raise self._err(ErrorKind.DEPTH_EXCEEDED,
                            f"Maximum nesting depth of {self.max_depth} exceeded")
        self.i += 1

    def _parse_object(self, depth: int) -> Dict[str, Any]:
        self._enter(depth)
        obj: Dict[str, Any] = {}
        self._skip_ws()
        if self._peek() == "}":
            self.i += 1
            return obj

        while True:
            if self._peek() != '"':
                raise self._unexpected("double-quoted property name")
            key = self._parse_string()
            self._skip_ws()
            if self._peek() != ":":
                raise self._unexpected("':' after property name")
            self.i += 1
            self._skip_ws()
            # Repeated keys keep their first position and their last value
            obj[key] = self._parse_value(depth)
            self._skip_ws()

            c = self._peek()
            if c == ",":
                comma = self.i
                self.i += 1
                self._skip_ws()
                if self._peek() == "}":
                    raise self._err(ErrorKind.TRAILING_COMMA, "Trailing comma before '}'", offset=comma)
                continue
            if c == "}":
                self.i += 1
                return obj
            raise self._unexpected("',' or '}' after property value")

    def _parse_array(self, depth: int) -> List[Any]:
        self._enter(depth)
        arr: List[Any] = []
        self._skip_ws()
        if self._peek() == "]":
            self.i += 1
            return arr

        while True:
            arr.append(self._parse_value(depth))
            self._skip_ws()

            c = self._peek()
            if c == ",":
                comma = self.i
                self.i += 1
                self._skip_ws()
                if self._peek() == "]":
                    raise self._err(ErrorKind.TRAILING_COMMA, "Trailing comma before ']'", offset=comma)
                continue
            if c == "]":
                self.i += 1
                return arr
            raise self._unexpected("',' or ']' after array element")

    def _parse_string(self) -> str:
        start = self.i
        end = string_end(self.text, start)
        if end < 0:
            raise self._err(ErrorKind.UNTERMINATED_STRING, "Unterminated string", offset=start)

        text = self.text
        chunks: List[str] = []
        j = start + 1
        while j < end:
            m = _PLAIN_RE.match(text, j, end)
            if m:
                chunks.append(m.group())
                j = m.end()
                continue

            c = text[j]
            if c != "\\":
                raise self._err(ErrorKind.UNEXPECTED_TOKEN, "Bad control character in string literal", offset=j)

            esc = text[j + 1]
            if esc in ESCAPES:
                chunks.append(ESCAPES[esc])
                j += 2
            elif esc == "u":
                code = self._hex4(j, end)
                j += 6
                # Combine a UTF-16 surrogate pair into one code point
                if 0xD800 <= code <= 0xDBFF and text.startswith("\\u", j) and _HEX4_RE.fullmatch(text, j + 2, j + 6):
                    low = int(text[j + 2:j + 6], 16)
                    if 0xDC00 <= low <= 0xDFFF:
                        code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                        j += 6
                chunks.append(chr(code))
            else:
                raise self._err(ErrorKind.UNEXPECTED_TOKEN, f"Bad escaped character {esc!r} in string", offset=j + 1)

        self.i = end + 1
        return "".join(chunks)

    def _hex4(self, j: int, end: int) -> int:
        if j + 6 > end or not _HEX4_RE.fullmatch(self.text, j + 2, j + 6):
            raise self._err(ErrorKind.UNEXPECTED_TOKEN, "Bad Unicode escape in string", offset=j)
        return int(self.text[j + 2:j + 6], 16)

    def _parse_number(self) -> JSONValue:
        start = self.i
        m = NUMBER_RE.match(self.text, start)
        run = _NUMBER_RUN_RE.match(self.text, start)
        if m is None or run.end() > m.end():
            bad = run.group() if run else self._peek()
            raise self._err(ErrorKind.INVALID_NUMBER, f"Invalid number {bad!r}", offset=start)

        literal = m.group()
        try:
            if any(ch in literal for ch in ".eE"):
                value = float(literal)
                if value in (float("inf"), float("-inf")):
                    raise ValueError("out of range")
            else:
                value = int(literal)
        except ValueError:
            raise self._err(ErrorKind.INVALID_NUMBER, f"Number {literal[:20]!r} cannot be represented",
                            offset=start) from None
        self.i = m.end()
        return value


def check_limits(text: str, max_depth: int, max_input_size: int) -> None:
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")
    if max_input_size < 1:
        raise ValueError(f"max_input_size must be positive, got {max_input_size}")
    if len(text) > max_input_size:
        raise JSONSyntaxError.at(text, max_input_size, ErrorKind.INPUT_TOO_LARGE,
                                 f"Input of {len(text)} characters exceeds the limit of {max_input_size}")


def parse(text: str, max_depth: int = MAX_DEPTH, max_input_size: int = MAX_INPUT_SIZE) -> JSONValue:
    """
    Parse JSON text into Python values (dicts keep key insertion order).

    Args:
        text: JSON document
        max_depth: Deepest container nesting accepted
        max_input_size: Longest input accepted, in characters

    Returns:
        The parsed value

    Raises:
        JSONSyntaxError: On the first lexical or structural violation
        ValueError: If the limits themselves are out of range
    """
    check_limits(text, max_depth, max_input_size)
    try:
        return Parser(text, max_depth).parse()
    except JSONSyntaxError as e:
        logger.debug("Parse failed: %s (%s)", e, e.kind.value)
        raise


def validate(text: str, max_depth: int = MAX_DEPTH, max_input_size: int = MAX_INPUT_SIZE) -> None:
    """Same contract as parse(), discarding the parsed value."""
    parse(text, max_depth=max_depth, max_input_size=max_input_size)


def check(text: str, max_depth: int = MAX_DEPTH, max_input_size: int = MAX_INPUT_SIZE) -> Optional[ParseError]:
    """Return the ParseError for invalid text, or None when it is valid."""
    try:
        validate(text, max_depth=max_depth, max_input_size=max_input_size)
    except JSONSyntaxError as e:
        return e.error
    return None
