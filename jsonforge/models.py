from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_INDENT, MAX_DEPTH, MAX_DEPTH_LIMIT, MAX_INPUT_SIZE, parse_indent

# In-memory JSON document: dicts keep insertion order
JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class ErrorKind(str, Enum):
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END = "UnexpectedEnd"
    UNTERMINATED_STRING = "UnterminatedString"
    INVALID_NUMBER = "InvalidNumber"
    TRAILING_COMMA = "TrailingComma"
    DEPTH_EXCEEDED = "DepthExceeded"
    INPUT_TOO_LARGE = "InputTooLarge"
    UNFIXABLE = "Unfixable"


class ParseError(BaseModel):
    """Where and why a document failed to parse."""
    model_config = ConfigDict(frozen=True)

    offset: int = Field(..., ge=0, description="Character offset into the text that was parsed")
    line: int = Field(..., ge=1, description="1-based line of the offset")
    column: int = Field(..., ge=1, description="1-based column of the offset")
    kind: ErrorKind
    context_window: str = Field("", description="Input around the offset (+/-20 characters)")
    message: str


class StatsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    char_count: int = Field(0, ge=0)
    line_count: int = Field(0, ge=0)
    byte_size: int = Field(0, ge=0, description="UTF-8 encoded size")
    max_depth: int = Field(0, ge=0)
    object_count: int = Field(0, ge=0, description="Unquoted '{' occurrences")
    array_count: int = Field(0, ge=0, description="Unquoted '[' occurrences")


class SpanClass(str, Enum):
    STRING = "string"
    KEY = "key"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"


class Span(BaseModel):
    """A run of highlighted text with a single classification."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    kind: SpanClass = Field(..., alias="class")

    @property
    def is_line_break(self) -> bool:
        return self.kind is SpanClass.WHITESPACE and self.text == "\n"


class ProcessingOptions(BaseModel):
    indent: Union[int, str] = Field(default=DEFAULT_INDENT, description="1-8 spaces or 'tab'")
    max_depth: int = Field(default=MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)
    max_input_size: int = Field(default=MAX_INPUT_SIZE, ge=1)

    @field_validator("indent")
    @classmethod
    def _check_indent(cls, value):
        parse_indent(value)
        return value


class DocumentInput(ProcessingOptions):
    text: str = Field(..., description="Raw JSON text")


class FormatResult(BaseModel):
    text: str
    spans: List[Span] = Field(default_factory=list)
    stats: StatsResult


class MinifyResult(BaseModel):
    text: str
    original_length: int
    minified_length: int


class ValidationReport(BaseModel):
    valid: bool
    error: Optional[ParseError] = None


class FixResult(BaseModel):
    text: str = Field(..., description="Repaired document, re-formatted with the requested indent")


class StatsReport(StatsResult):
    human_size: str


class HighlightResult(BaseModel):
    spans: List[Span] = Field(default_factory=list)
    html: str
