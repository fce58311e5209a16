"""
Forwarding helpers shared by all proxy routers.
"""

from typing import Any, Awaitable, Dict, Optional
from urllib.parse import quote

from fastapi.responses import JSONResponse

from config import normalize_tag
from models.schemas import ProxyEnvelope
from services.errors import UpstreamError, UpstreamStatusError


def encode_segment(value: str) -> str:
    """
    Percent-encode a single upstream path segment.

    Args:
        value: Raw path parameter value

    Returns:
        The value with every reserved character escaped, '#' and '/' included
    """
    return quote(value, safe="")


def encode_tag(tag: str) -> str:
    """Normalize a clan or player tag and encode it for the upstream path."""
    return encode_segment(normalize_tag(tag))


def success_response(data: Any) -> JSONResponse:
    envelope = ProxyEnvelope(success=True, data=data)
    return JSONResponse(status_code=200, content=envelope.model_dump(exclude={"error"}))


def error_response(error: Any, status_code: int = 500, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    envelope = ProxyEnvelope(success=False, error=error)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(exclude={"data"}),
        headers=headers,
    )


async def forward(call: Awaitable[Any], not_found_data: Optional[Any] = None) -> JSONResponse:
    """
    Await an upstream call and wrap its outcome in the proxy envelope.

    Args:
        call: Pending CocApiClient call
        not_found_data: When set, an upstream 404 is answered as success with this data

    Returns:
        200 with the upstream body, or 500 with the upstream error payload
    """
    try:
        data = await call
    except UpstreamStatusError as e:
        if e.status_code == 404 and not_found_data is not None:
            return success_response(not_found_data)
        return error_response(e.payload)
    except UpstreamError as e:
        return error_response(e.payload)

    return success_response(data)
