"""
Proxy configuration loaded once from the environment at startup.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

COC_API_BASE_URL = "https://api.clashofclans.com/v1/"
DEFAULT_CLAN_TAG = "2Y29VCP89"
DEFAULT_PORT = 3002
UPSTREAM_TIMEOUT = 10.0


class ConfigurationError(Exception):
    """Raised when the proxy cannot be configured from the environment."""


def normalize_tag(tag: str) -> str:
    """Prefix a clan or player tag with '#' unless it already has one."""
    return tag if tag.startswith("#") else f"#{tag}"


def mask_secret(secret: str, visible: int = 20) -> str:
    """Show the start of a secret; short secrets show at most half."""
    visible = min(visible, len(secret) // 2)
    return f"{secret[:visible]}..."


class ProxySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    clan_tag: str = normalize_tag(DEFAULT_CLAN_TAG)
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    service_name: str = "Pendragon CoC Proxy"
    api_base_url: str = COC_API_BASE_URL
    timeout: float = UPSTREAM_TIMEOUT


def _first_set(env: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def load_settings(env: Optional[Mapping[str, str]] = None) -> ProxySettings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read from, defaults to os.environ

    Returns:
        The immutable proxy settings

    Raises:
        ConfigurationError: If the API key is missing or PORT is not a number
    """
    if env is None:
        env = os.environ

    api_key = _first_set(env, "COC_API_KEY", "REACT_APP_COC_API_KEY")
    if not api_key:
        raise ConfigurationError("COC_API_KEY not found in environment or .env")

    clan_tag = _first_set(env, "CLAN_TAG", "REACT_APP_CLAN_TAG") or DEFAULT_CLAN_TAG

    raw_port = env.get("PORT") or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}") from None

    return ProxySettings(
        api_key=api_key,
        clan_tag=normalize_tag(clan_tag),
        port=port,
        host=env.get("HOST") or "0.0.0.0",
    )
