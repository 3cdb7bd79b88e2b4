"""
Lexical Scanner
Shared string/escape state machine used by the parser, stats scanner and
highlighter, so that all of them agree on what is "inside a string".
"""

from enum import Enum
from typing import Iterator, NamedTuple, Tuple

STRUCTURAL_CHARS = frozenset("{}[],:")
WHITESPACE_CHARS = frozenset(" \t\n\r")

CONTEXT_RADIUS = 20


class CharClass(str, Enum):
    STRING_CONTENT = "string-content"
    STRING_BOUNDARY = "string-boundary"
    ESCAPE_MARKER = "escape-marker"
    STRUCTURAL = "structural"
    WHITESPACE = "whitespace"
    OTHER = "other"


class ScanState(NamedTuple):
    """Transient scanner state; `position` is the index of the next character."""
    in_string: bool = False
    escape_next: bool = False
    position: int = 0
    line: int = 1
    column: int = 1


def step(state: ScanState, char: str) -> Tuple[ScanState, CharClass]:
    """
    Advance the scanner by one character.

    Args:
        state: State before `char`
        char: The next character of the input

    Returns:
        (next state, classification of `char`)
    """
    in_string = state.in_string
    escape_next = False

    if in_string:
        if state.escape_next:
            # The escaped character belongs to the string whatever it is
            kind = CharClass.STRING_CONTENT
        elif char == "\\":
            escape_next = True
            kind = CharClass.ESCAPE_MARKER
        elif char == '"':
            in_string = False
            kind = CharClass.STRING_BOUNDARY
        else:
            kind = CharClass.STRING_CONTENT
    elif char == '"':
        in_string = True
        kind = CharClass.STRING_BOUNDARY
    elif char in STRUCTURAL_CHARS:
        kind = CharClass.STRUCTURAL
    elif char in WHITESPACE_CHARS:
        kind = CharClass.WHITESPACE
    else:
        kind = CharClass.OTHER

    if char == "\n":
        line, column = state.line + 1, 1
    else:
        line, column = state.line, state.column + 1

    return ScanState(in_string, escape_next, state.position + 1, line, column), kind


def classify(text: str) -> Iterator[Tuple[int, str, CharClass]]:
    """Yield (index, char, class) for every character of `text`."""
    state = ScanState()
    for index, char in enumerate(text):
        state, kind = step(state, char)
        yield index, char, kind


def string_end(text: str, start: int) -> int:
    """
    Return the index of the quote closing the string opened at `start`,
    or -1 when the string is never terminated.
    """
    state = ScanState(position=start)
    for index in range(start, len(text)):
        state, kind = step(state, text[index])
        if kind is CharClass.STRING_BOUNDARY and not state.in_string:
            return index
    return -1


def locate(text: str, offset: int) -> Tuple[int, int]:
    """1-based (line, column) of `offset` in `text`."""
    before = text[:offset]
    line = before.count("\n") + 1
    column = offset - before.rfind("\n")
    return line, column


def context_window(text: str, offset: int, radius: int = CONTEXT_RADIUS) -> str:
    """Substring of `text` around `offset`, clipped to the input bounds."""
    start = max(0, offset - radius)
    end = min(len(text), offset + radius)
    return text[start:end]
