"""
Host information endpoint for API v1.

``GET /`` (and ``GET /<anything>``) answers with a plain text page
listing the requested path, the caller's ``User-Agent``, the server
hostname and the IPv4 addresses that hostname resolves to.  Handy to
see which replica served a request.
"""

import logging
import socket
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()

logger = logging.getLogger(__name__)


def resolve_ipv4(hostname: str) -> List[str]:
    """Return the distinct IPv4 addresses of ``hostname``, in resolver order."""
    try:
        infos = socket.getaddrinfo(hostname, None, family=socket.AF_INET)
    except socket.gaierror as exc:
        logger.debug("Could not resolve %s: %s", hostname, exc)
        return []
    addresses: List[str] = []
    for info in infos:
        address = info[4][0]
        if address not in addresses:
            addresses.append(address)
    return addresses


def render_host_info(path: str, user_agent: str, hostname: str, addresses: List[str]) -> str:
    lines = f"{path}\n\n{user_agent}\n\n{hostname}\n\n"
    return lines + "".join(f"{address}\n" for address in addresses)


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
@router.get("/{path:path}", response_class=PlainTextResponse, include_in_schema=False)
def host_info(request: Request) -> str:
    """Describe the serving host."""
    hostname = socket.gethostname()
    return render_host_info(
        request.url.path.lstrip("/"),
        request.headers.get("user-agent", ""),
        hostname,
        resolve_ipv4(hostname),
    )
