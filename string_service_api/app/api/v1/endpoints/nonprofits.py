"""
Nonprofit search endpoint for API v1.

``POST /fetch`` with ``{"search": "..."}`` forwards the term to the
upstream nonprofit search API and relays its organizations and hit
count.  If the upstream cannot be reached the response is an empty
result with ``err`` set, still with HTTP 200.
"""

from fastapi import APIRouter

from string_service_api.app.core.dispatch import Endpoint, mount
from string_service_api.app.schemas.nonprofit import SearchRequest, SearchResponse
from string_service_api.app.services.nonprofit_service import NonprofitService

router = APIRouter()

# Shared by all requests.  Tests swap ``search_service.client``.
search_service = NonprofitService()


def fetch(request: SearchRequest) -> SearchResponse:
    return search_service.search(request)


mount(router, "/fetch", Endpoint("fetch", SearchRequest, fetch, SearchResponse))
