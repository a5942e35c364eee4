from __future__ import annotations
from typing import Any, TypedDict

import json
import dynamodb
from botocore.exceptions import ClientError

HEADERS = {
    "content-type": "application/json",
}


class ProxyResponse(TypedDict):
    statusCode: int
    headers: dict[str, str]
    body: str


def response(status_code: int, val: object) -> ProxyResponse:
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": json.dumps(val, default=dynamodb.decimal_to_number),
    }

def s200(val: object = None) -> ProxyResponse:
    return response(200, {
        "data": val,
    })

def s404(message: str) -> ProxyResponse:
    return response(404, {
        "Message": message,
    })

def s500(error: BaseException | None = None) -> ProxyResponse:
    return response(500, {
        "error": serialize_error(error) if error is not None else {},
    })


def serialize_error(error: BaseException) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
    }
    if isinstance(error, ClientError):
        result["code"] = error.response.get("Error", {}).get("Code")
        result["operation"] = error.operation_name
        metadata = error.response.get("ResponseMetadata", {})
        result["requestId"] = metadata.get("RequestId")
        result["httpStatusCode"] = metadata.get("HTTPStatusCode")
    return result
