"""
Nonprofit search proxy.

:class:`NonprofitSearchClient` wraps the upstream search API using the
``requests`` library.  It performs exactly one ``GET`` per search with
the query in the ``q`` parameter and never raises for network or HTTP
problems; instead it returns a ``(payload, error)`` pair and logs the
failure.

:class:`NonprofitService` turns the upstream payload into a
:class:`~string_service_api.app.schemas.nonprofit.SearchResponse`.
When the upstream cannot be queried it raises
``DomainError(UPSTREAM_UNAVAILABLE)`` so the dispatcher answers with an
empty result and an ``err`` message rather than failing the request.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Tuple

import requests
from pydantic import ValidationError

from string_service_api.app.core.config import settings
from string_service_api.app.core.errors import DomainError, ErrorKind
from string_service_api.app.schemas.nonprofit import SearchRequest, SearchResponse


logger = logging.getLogger(__name__)


class NonprofitSearchClient:
    """Client for the upstream nonprofit search endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Full URL of the search endpoint, e.g.
                ``https://projects.propublica.org/nonprofits/api/v2/search.json``.
            timeout: Seconds to wait for the upstream to respond.
            session: Optional requests session, used by every thread.
                If not supplied each worker thread lazily creates its
                own, since ``requests.Session`` is not thread-safe.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """Session for the calling thread."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def search(self, query: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Run a search upstream.

        Args:
            query: Search term, sent verbatim as the ``q`` parameter.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the decoded JSON
            object on success and ``error`` is ``None``.  On failure
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message``.
        """
        try:
            logger.debug("Searching nonprofits for %r", query)
            response = self.session.get(
                self.base_url,
                params={"q": query},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Nonprofit search failed (%s): %s", status, exc)
            return None, {"status_code": status, "message": str(exc)}
        except requests.RequestException as exc:
            logger.error("Nonprofit search failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("Nonprofit search returned invalid JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": str(exc)}
        if not isinstance(payload, dict):
            logger.error("Nonprofit search returned %s instead of an object", type(payload).__name__)
            return None, {"status_code": response.status_code, "message": "unexpected payload"}
        return payload, None


class NonprofitService:
    """Search nonprofits through a :class:`NonprofitSearchClient`."""

    def __init__(self, client: Optional[NonprofitSearchClient] = None) -> None:
        self.client = client or NonprofitSearchClient(
            base_url=settings.nonprofit_api_url,
            timeout=settings.nonprofit_api_timeout,
        )

    def search(self, request: SearchRequest) -> SearchResponse:
        """Return the upstream result for ``request.search``.

        Missing ``organizations`` or ``total_results`` keys in the
        upstream payload fall back to an empty list and ``0``.
        """
        payload, error = self.client.search(request.search)
        if error is not None:
            raise DomainError(ErrorKind.UPSTREAM_UNAVAILABLE, detail=error["message"])
        try:
            return SearchResponse(
                organizations=payload.get("organizations") or [],
                total_results=payload.get("total_results") or 0,
            )
        except ValidationError as exc:
            logger.error("Nonprofit search returned an unexpected shape: %s", exc)
            raise DomainError(ErrorKind.UPSTREAM_UNAVAILABLE, detail=str(exc)) from exc
