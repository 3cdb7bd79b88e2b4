import logging

from fastapi import FastAPI, HTTPException

from .errors import JSONSyntaxError
from .fixer import fix_and_format
from .formatter import format_value, minify_text
from .highlighter import highlight, to_html
from .logging_config import setup_logging
from .models import (
    DocumentInput,
    FixResult,
    FormatResult,
    HighlightResult,
    MinifyResult,
    StatsReport,
    ValidationReport,
)
from .parser import check, parse
from .stats import format_bytes, stats

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="jsonforge JSON Processing Service")


def _syntax_error(e: JSONSyntaxError) -> HTTPException:
    logger.info("Rejected document: %s", e)
    return HTTPException(status_code=422, detail=e.error.model_dump(mode="json"))


def _internal_error(endpoint: str, e: Exception) -> HTTPException:
    logger.exception("Error in %s endpoint", endpoint)
    return HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/format", response_model=FormatResult)
async def format_document(doc: DocumentInput):
    try:
        value = parse(doc.text.strip(), max_depth=doc.max_depth, max_input_size=doc.max_input_size)
        formatted = format_value(value, doc.indent)
        return FormatResult(
            text=formatted,
            spans=highlight(formatted, max_depth=doc.max_depth,
                            max_input_size=max(len(formatted), doc.max_input_size)),
            stats=stats(doc.text),
        )
    except JSONSyntaxError as e:
        raise _syntax_error(e)
    except Exception as e:
        raise _internal_error("/format", e)


@app.post("/minify", response_model=MinifyResult)
async def minify_document(doc: DocumentInput):
    try:
        return minify_text(doc.text, max_depth=doc.max_depth, max_input_size=doc.max_input_size)
    except JSONSyntaxError as e:
        raise _syntax_error(e)
    except Exception as e:
        raise _internal_error("/minify", e)


@app.post("/validate", response_model=ValidationReport)
async def validate_document(doc: DocumentInput):
    """Validation failures are a normal answer here, not an HTTP error."""
    try:
        error = check(doc.text.strip(), max_depth=doc.max_depth, max_input_size=doc.max_input_size)
    except Exception as e:
        raise _internal_error("/validate", e)
    return ValidationReport(valid=error is None, error=error)


@app.post("/fix", response_model=FixResult)
async def fix_document(doc: DocumentInput):
    try:
        fixed = fix_and_format(doc.text, indent=doc.indent, max_depth=doc.max_depth,
                               max_input_size=doc.max_input_size)
        return FixResult(text=fixed)
    except JSONSyntaxError as e:
        raise _syntax_error(e)
    except Exception as e:
        raise _internal_error("/fix", e)


@app.post("/stats", response_model=StatsReport)
async def stats_document(doc: DocumentInput):
    result = stats(doc.text)
    return StatsReport(**result.model_dump(), human_size=format_bytes(result.byte_size))


@app.post("/highlight", response_model=HighlightResult)
async def highlight_document(doc: DocumentInput):
    try:
        spans = highlight(doc.text, max_depth=doc.max_depth, max_input_size=doc.max_input_size)
        return HighlightResult(spans=spans, html=to_html(spans))
    except JSONSyntaxError as e:
        raise _syntax_error(e)
    except Exception as e:
        raise _internal_error("/highlight", e)
