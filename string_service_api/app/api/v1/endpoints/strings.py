"""
String operation endpoints for API v1.

``POST /uppercase``, ``POST /concat`` and ``POST /count`` all take
``{"s": "..."}``.  Empty input is reported in the response's ``err``
field by ``uppercase`` and ``concat``; ``count`` cannot fail.
"""

from fastapi import APIRouter

from string_service_api.app.core.dispatch import Endpoint, mount
from string_service_api.app.schemas.strings import (
    ConcatRequest,
    ConcatResponse,
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from string_service_api.app.services.string_service import StringService

router = APIRouter()


def uppercase(request: UppercaseRequest) -> UppercaseResponse:
    return UppercaseResponse(v=StringService.uppercase(request.s))


def concat(request: ConcatRequest) -> ConcatResponse:
    return ConcatResponse(v=StringService.concat(request.s))


def count(request: CountRequest) -> CountResponse:
    return CountResponse(v=StringService.count(request.s))


mount(router, "/uppercase", Endpoint("uppercase", UppercaseRequest, uppercase, UppercaseResponse))
mount(router, "/concat", Endpoint("concat", ConcatRequest, concat, ConcatResponse))
mount(router, "/count", Endpoint("count", CountRequest, count, CountResponse))
