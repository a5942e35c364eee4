from __future__ import annotations
from typing import Any, cast

import boto3
from decimal import Decimal

# DynamoDB numbers carry at most 38 significant digits
MAX_NUMBER_DIGITS = 38


def is_storable_key(num: int) -> bool:
    return len(str(abs(num))) <= MAX_NUMBER_DIGITS


def table(table_name: str, region: str, endpoint_url: str | None = None) -> Any:
    return boto3.resource(
        "dynamodb",
        region_name=region,
        endpoint_url=endpoint_url,
    ).Table(table_name)


def decimal_to_number(val: object) -> int | float:
    """`json.dumps` default: boto3 hands every number back as `Decimal`"""
    if isinstance(val, Decimal):
        if val == val.to_integral_value():
            return int(val)
        return float(val)
    raise TypeError(f"Object of type {type(val).__name__} is not JSON serializable")


def unmarshal(val: Any) -> Any:
    if isinstance(val, Decimal):
        return decimal_to_number(val)
    if isinstance(val, dict):
        return {k: unmarshal(v) for k, v in val.items()}
    if isinstance(val, (list, tuple)):
        return [unmarshal(v) for v in val]
    if isinstance(val, set):
        return sorted(unmarshal(v) for v in val)
    return val


def marshal(val: Any) -> Any:
    # empty string -> NULL, None stripped, float -> Decimal, objects -> map
    if val == "":
        return None
    if isinstance(val, bool):
        return val
    if isinstance(val, float):
        return Decimal(str(val))
    if isinstance(val, dict):
        return {k: marshal(v) for k, v in val.items() if v is not None}
    if isinstance(val, (list, tuple)):
        return [marshal(v) for v in val if v is not None]
    if hasattr(val, "__dict__"):
        return marshal(cast(dict[str, Any], vars(val)))
    return val
