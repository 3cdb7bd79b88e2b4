import os
from dotenv import load_dotenv

load_dotenv()


def parse_indent(value) -> str:
    """
    Convert an indent setting into the unit repeated once per nesting level.

    - 2 / "2" -> "  "
    - "tab" -> "\\t"

    Raises:
        ValueError: If the value is not 1-8 or "tab"
    """
    if isinstance(value, str):
        value = value.strip().lower()
        if value == "tab":
            return "\t"
        if not value.isdigit():
            raise ValueError(f"Invalid indent {value!r}: expected 1-8 or 'tab'")
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 8:
        raise ValueError(f"Invalid indent {value!r}: expected 1-8 or 'tab'")
    return " " * value


DEFAULT_INDENT = os.getenv("JSONFORGE_INDENT", "2")
MAX_DEPTH_LIMIT = 400  # Recursive descent uses two frames per nesting level
MAX_DEPTH = min(int(os.getenv("JSONFORGE_MAX_DEPTH", 256)), MAX_DEPTH_LIMIT)
MAX_INPUT_SIZE = int(os.getenv("JSONFORGE_MAX_INPUT_SIZE", 10_000_000))  # Characters
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("JSONFORGE_LOG_DIR")
