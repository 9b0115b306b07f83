# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Boolean casting between storage and the wire.

Storage holds 'true' / 'false' strings (or 1 / 0 from a MySQL TINYINT);
the API and templates work with native booleans.
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple


def true_false_to_bool(value: Any) -> Optional[bool]:
    """Convert strings 'true'/'false' (any case) to True/False; anything else gives None."""
    if isinstance(value, str) and value.lower() == "true":
        return True
    if isinstance(value, str) and value.lower() == "false":
        return False
    return None


def bool_to_true_false(value: Any) -> Optional[str]:
    """Convert boolean values (including 1/0) to 'true'/'false'; None stays None."""
    if value is None:
        return None
    return "true" if value else "false"


def to_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return true_false_to_bool(value)


def from_db(result: Tuple[List[Dict[str, Any]], List[str]],
            boolean_fields: Iterable[str]) -> Tuple[List[Dict[str, Any]], List[str]]:
    """Return (rows, fields) with every boolean field present in the result cast to a native bool."""
    rows, fields = result
    casts = [f for f in fields if f in set(boolean_fields)]
    if not casts:
        return rows, fields
    cast_rows = []
    for row in rows:
        row = dict(row)
        for field in casts:
            row[field] = to_bool(row.get(field))
        cast_rows.append(row)
    return cast_rows, fields


def to_storage(body: Dict[str, Any], boolean_fields: Iterable[str] = ()) -> Dict[str, Any]:
    """Return body with booleans (and declared boolean fields) in 'true'/'false' form."""
    declared = set(boolean_fields)
    out = {}
    for field, value in body.items():
        if isinstance(value, bool):
            out[field] = bool_to_true_false(value)
        elif field in declared and value is not None:
            cast = to_bool(value)
            out[field] = bool_to_true_false(cast) if cast is not None else value
        else:
            out[field] = value
    return out
