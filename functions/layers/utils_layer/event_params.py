from __future__ import annotations
from typing import Any

import re

# ASCII digits only: no sign, no `_` separators, no full-width digits
DIGITS = re.compile(r"[0-9]+")


def param(event: dict[str, Any], name: str) -> Any:
    """`queryStringParameters` first, then `pathParameters`; both may be null"""
    for source in ("queryStringParameters", "pathParameters"):
        params = event.get(source) or {}
        if params.get(name) is not None:
            return params[name]
    return None


def positive_int(val: object) -> int | None:
    if not isinstance(val, str):
        return None
    val = val.strip()
    if not DIGITS.fullmatch(val):
        return None
    num = int(val)
    return num if num > 0 else None
