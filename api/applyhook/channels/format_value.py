"""
Render submitted form values as embed-safe strings.

Form posts only carry strings, but JSON clients may send multi-select answers
as arrays (``["Firebrand", "Scourge"]``) or numbers. Everything ends up as a
single string so the positional and keyed decoders agree on the value type.
"""

import json
from typing import Any

# Discord rejects empty field values; a zero-width space renders as blank.
BLANK = "\u200b"


def format_value(val: Any, max_len: int = 1024) -> str:
    """
    Format a single submitted value into a string.

    - ``None`` becomes ``""``.
    - Primitives are returned via ``str(val)``.
    - Lists of primitives are joined with ", ".
    - Anything else is compact JSON, truncated to *max_len* chars.
    """
    if val is None:
        return ""

    if not isinstance(val, (dict, list)):
        return str(val)

    if isinstance(val, list) and all(not isinstance(v, (dict, list)) for v in val):
        return ", ".join(str(v) for v in val)

    dumped = json.dumps(val, default=str)
    return f"{dumped[:max_len]}..." if len(dumped) > max_len else dumped


def spaced_list(value: str) -> str:
    """Re-space a comma list (``"a,b"`` -> ``"a, b"``)."""
    return ", ".join(part.strip() for part in value.split(","))


def field_value(value: str, max_len: int = 1024) -> str:
    if not value:
        return BLANK
    return value if len(value) <= max_len else f"{value[: max_len - 3]}..."
