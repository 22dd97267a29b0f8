"""
Pydantic schemas for the nonprofit search proxy.

The upstream returns a list of organizations and a total hit count.
Organization records are relayed as received: the known fields are
declared for documentation, anything else the upstream sends is kept.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchRequest(BaseModel):
    """Body for ``POST /fetch``."""

    search: str = Field("", description="Free text query forwarded as ``q``", examples=["oakland"])

    @field_validator("search", mode="before")
    @classmethod
    def null_is_empty(cls, v):
        return "" if v is None else v


class Organization(BaseModel):
    """A nonprofit organization as returned by the upstream search."""

    model_config = ConfigDict(extra="allow")

    ein: Optional[int] = None
    strein: Optional[str] = None
    name: Optional[str] = None
    sub_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    ntee_code: Optional[str] = None
    raw_ntee_code: Optional[str] = None
    subseccd: Optional[int] = None
    has_subseccd: Optional[bool] = None
    have_filings: Optional[bool] = None
    have_extracts: Optional[bool] = None
    have_pdfs: Optional[bool] = None
    score: Optional[float] = None


class SearchResponse(BaseModel):
    """Search result relayed to the client."""

    organizations: List[Organization] = Field(default_factory=list)
    total_results: int = Field(0, description="Total hits reported by the upstream")
    err: Optional[str] = Field(None, description="Set when the upstream could not be queried")
