from __future__ import annotations
from typing import Any, Union

from dataclasses import dataclass
from proxy_response import *


@dataclass(frozen=True)
class Found:
    payload: Any


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class BadInput:
    message: str


@dataclass(frozen=True)
class BackendFailure:
    error: BaseException


LookupResult = Union[Found, NotFound, BadInput, BackendFailure]


def to_response(result: LookupResult) -> ProxyResponse:
    if isinstance(result, Found):
        return s200(result.payload)
    # missing/invalid ids are reported as 404 too, not 400
    if isinstance(result, (NotFound, BadInput)):
        return s404(result.message)
    return s500(result.error)
