from fastapi import Request

from config import ProxySettings
from services.coc_client import CocApiClient


def get_settings(request: Request) -> ProxySettings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_coc_client(request: Request) -> CocApiClient:
    """The shared upstream client opened in the application lifespan."""
    return request.app.state.coc_client
