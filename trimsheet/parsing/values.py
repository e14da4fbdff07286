"""Cell value coercion shared by the extractors."""

import math
from typing import Any, Sequence


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a raw cell value to float.

    Numbers pass through; strings may carry surrounding whitespace and
    thousands separators. Blanks, booleans, NaN/inf and text that does not
    parse return the default. Never raises.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    return number if math.isfinite(number) else default


def to_text(value: Any, default: str = "") -> str:
    """Coerce a raw cell value to stripped text."""
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def is_blank(value: Any) -> bool:
    """True for empty cells and whitespace-only text."""
    return value is None or (isinstance(value, str) and not value.strip())


def column(row: Sequence[Any], index: int) -> Any:
    """Get a 0-based column from a possibly short row."""
    return row[index] if index < len(row) else None
