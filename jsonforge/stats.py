"""
Stats Scanner
Structural statistics gathered in one pass over raw text. Works on invalid
JSON too: brackets are counted as they occur outside strings, without
checking that they match.
"""

from .models import StatsResult
from .scanner import CharClass, classify

SIZE_UNITS = ["B", "KB", "MB", "GB"]


def stats(text: str) -> StatsResult:
    """Never raises; unbalanced brackets simply move the depth counter."""
    depth = 0
    max_depth = 0
    object_count = 0
    array_count = 0

    for _, char, kind in classify(text):
        if kind is not CharClass.STRUCTURAL:
            continue
        if char == "{" or char == "[":
            depth += 1
            max_depth = max(max_depth, depth)
            if char == "{":
                object_count += 1
            else:
                array_count += 1
        elif char == "}" or char == "]":
            depth -= 1

    return StatsResult(
        char_count=len(text),
        line_count=text.count("\n") + 1,
        byte_size=len(text.encode("utf-8", errors="surrogatepass")),
        max_depth=max_depth,
        object_count=object_count,
        array_count=array_count,
    )


def format_bytes(size: int) -> str:
    """
    Human-readable size:
    - 0 -> "0 B"
    - 1536 -> "1.5 KB"
    - 1048576 -> "1 MB"
    """
    if size <= 0:
        return "0 B"
    i = 0
    value = float(size)
    while value >= 1024 and i < len(SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    rounded = round(value, 1)
    text = str(int(rounded)) if rounded.is_integer() else str(rounded)
    return f"{text} {SIZE_UNITS[i]}"
