"""
Request dispatcher.

Every JSON operation goes through the same three steps:

1. decode the raw body into the operation's request model,
2. invoke the business function with the decoded request,
3. encode the returned response model as JSON.

An :class:`Endpoint` bundles the pieces for one operation and
:func:`mount` turns it into a ``POST`` route on an ``APIRouter``.
Decode failures abort the request with HTTP 400.  A
:class:`~string_service_api.app.core.errors.DomainError` raised by the
business function does not abort anything: it is written to the
response's ``err`` field and the client receives HTTP 200.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Type, TypeVar

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool

from .errors import DecodeError, DomainError


logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class Endpoint(Generic[RequestT, ResponseT]):
    """One operation, independent of HTTP.

    Attributes:
        name: Operation name, used as the route name and in logs.
        request_model: Model the JSON body is decoded into.
        invoke: Business function.  May raise ``DomainError``.
        response_model: Model returned by ``invoke``.  It must be
            constructible from ``err`` alone when the operation can fail.
    """

    name: str
    request_model: Type[RequestT]
    invoke: Callable[[RequestT], ResponseT]
    response_model: Type[ResponseT]


def decode_request(raw: bytes, model: Type[RequestT]) -> RequestT:
    """Parse ``raw`` as JSON and validate it against ``model``.

    Raises:
        DecodeError: The body is not JSON or does not fit ``model``.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        # RecursionError: nesting deeper than the parser's stack.
        raise DecodeError(f"malformed JSON body: {exc}") from exc
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        reasons = "; ".join(err["msg"] for err in exc.errors())
        raise DecodeError(f"invalid request body: {reasons}") from exc


def invoke_endpoint(endpoint: Endpoint[RequestT, ResponseT], request: RequestT) -> ResponseT:
    """Run the endpoint, folding domain errors into the response."""
    logger.debug("Dispatching %s", endpoint.name)
    try:
        return endpoint.invoke(request)
    except DomainError as exc:
        logger.info("%s failed: %s", endpoint.name, exc.detail or exc)
        return endpoint.response_model(err=str(exc))


def encode_response(response: BaseModel) -> JSONResponse:
    """Serialize ``response`` with HTTP 200, dropping an unset ``err``."""
    body: Dict[str, Any] = response.model_dump(mode="json")
    if body.get("err") is None:
        body.pop("err", None)
    return JSONResponse(status_code=status.HTTP_200_OK, content=body)


def mount(router: APIRouter, path: str, endpoint: Endpoint) -> None:
    """Register ``endpoint`` on ``router`` as ``POST path``."""

    async def handler(request: Request) -> JSONResponse:
        raw = await request.body()
        try:
            decoded = decode_request(raw, endpoint.request_model)
        except DecodeError as exc:
            logger.warning("Rejected %s request: %s", endpoint.name, exc)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        # The business function may block (outbound HTTP), keep it off the event loop.
        response = await run_in_threadpool(invoke_endpoint, endpoint, decoded)
        return encode_response(response)

    handler.__name__ = endpoint.name
    router.add_api_route(
        path,
        handler,
        methods=["POST"],
        name=endpoint.name,
        response_model=endpoint.response_model,
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {
                    "application/json": {"schema": endpoint.request_model.model_json_schema()}
                },
            }
        },
    )
