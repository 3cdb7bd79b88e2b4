from .models import ErrorKind, ParseError
from .scanner import context_window, locate


class JSONSyntaxError(ValueError):
    """Raised by every failing operation; `.error` holds the structured ParseError."""

    def __init__(self, error: ParseError):
        self.error = error
        super().__init__(f"{error.message} at line {error.line}, column {error.column}")

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @classmethod
    def at(cls, text: str, offset: int, kind: ErrorKind, message: str) -> "JSONSyntaxError":
        """Build the error for `offset` in `text`, deriving line, column and context."""
        offset = max(0, min(offset, len(text)))
        line, column = locate(text, offset)
        return cls(ParseError(
            offset=offset,
            line=line,
            column=column,
            kind=kind,
            context_window=context_window(text, offset),
            message=message,
        ))


def describe(error: ParseError) -> str:
    """
    Render a multi-line, user-facing report for a ParseError:
    location, surrounding context and the usual suspects to check.
    """
    lines = [
        f"{error.message} ({error.kind.value}) at position {error.offset}",
        f"Location: Line {error.line}, Column {error.column}",
    ]
    if error.context_window:
        lines.append(f"Context: ...{error.context_window}...")
    if error.kind in (ErrorKind.UNEXPECTED_TOKEN, ErrorKind.TRAILING_COMMA,
                      ErrorKind.UNEXPECTED_END, ErrorKind.UNFIXABLE):
        lines.extend([
            "Possible fixes:",
            "  - Check for missing quotes",
            "  - Remove trailing commas",
            "  - Verify brackets are properly closed",
        ])
    return "\n".join(lines)
