"""
HTTP client for the Clash of Clans API.

Every upstream call made by the proxy goes through CocApiClient, which
attaches the bearer credential, applies the fixed timeout and turns
httpx failures into UpstreamError subclasses.
"""

from typing import Any, Dict, Optional

import httpx

from config import ProxySettings
from services.errors import (
    UpstreamNetworkError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)


def get_httpx_client_config(settings: ProxySettings) -> Dict[str, Any]:
    """
    Get the configuration for the upstream httpx client.

    Args:
        settings: Proxy settings holding the API key and timeout

    Returns:
        Dictionary with httpx client configuration
    """
    return {
        'timeout': httpx.Timeout(settings.timeout),
        'headers': {
            'Authorization': f"Bearer {settings.api_key}",
            'Accept': 'application/json',
        },
        'follow_redirects': False,
    }


def _decode_body(response: httpx.Response) -> Optional[Any]:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class CocApiClient:
    """
    Thin wrapper around httpx.AsyncClient bound to the Clash of Clans API.

    The wrapped client is shared by all requests; it carries no
    per-request state.
    """

    def __init__(self, settings: ProxySettings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._client = http_client or httpx.AsyncClient(**get_httpx_client_config(settings))

    def build_url(self, endpoint: str) -> str:
        """Absolute upstream URL for an API endpoint path."""
        return f"{self.settings.api_base_url}{endpoint}"

    async def get(self, endpoint: str) -> Any:
        """Fetch an upstream resource and return its decoded JSON body."""
        return await self._send("GET", endpoint)

    async def post(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        """POST a JSON payload upstream and return the decoded JSON body."""
        return await self._send(
            "POST",
            endpoint,
            json=payload,
            headers={'Content-Type': 'application/json'},
        )

    async def _send(self, method: str, endpoint: str, **kwargs) -> Any:
        url = self.build_url(endpoint)
        print(f"🔄 Fetching: {method} {url}")

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            print(f"⏰ Timeout error to {url}: {e}")
            raise UpstreamTimeoutError(
                f"Upstream request timed out after {self.settings.timeout:g}s", url
            ) from e
        except httpx.HTTPError as e:
            print(f"❌ Connection error to {url}: {e}")
            raise UpstreamNetworkError(str(e) or e.__class__.__name__, url) from e

        if not response.is_success:
            print(f"❌ Upstream returned {response.status_code} for {url}")
            raise UpstreamStatusError(response.status_code, _decode_body(response), url)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamNetworkError(f"Invalid JSON from upstream: {e}", url) from e

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()
