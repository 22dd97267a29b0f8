"""
Pydantic schemas for the string operations.

All three operations take the same body, ``{"s": "..."}``.  A missing
``s`` (or ``null``) decodes to the empty string.  Responses carry the result in
``v``; ``uppercase`` and ``concat`` may also report a domain error in
``err``, which is left out of the JSON when unset.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class StringRequest(BaseModel):
    """Body shared by the string operations."""

    s: str = Field("", description="Input string", examples=["aaa, bb"])

    @field_validator("s", mode="before")
    @classmethod
    def null_is_empty(cls, v):
        # A JSON null reads as the zero value, same as a missing key.
        return "" if v is None else v


class UppercaseRequest(StringRequest):
    pass


class ConcatRequest(StringRequest):
    pass


class CountRequest(StringRequest):
    pass


class UppercaseResponse(BaseModel):
    v: str = Field("", description="Input converted to upper case", examples=["AAA, BB"])
    err: Optional[str] = Field(None, description="Domain error message, if any")


class ConcatResponse(BaseModel):
    v: str = Field("", description="Input with all spaces removed", examples=["aaa,bb"])
    err: Optional[str] = Field(None, description="Domain error message, if any")


class CountResponse(BaseModel):
    v: int = Field(0, description="Length of the input", examples=[7])
