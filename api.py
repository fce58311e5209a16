from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import sys

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

# Import all routers
from routers import clans, players, wars, leagues

from config import ConfigurationError, ProxySettings, load_settings, mask_secret
from models.schemas import HealthResponse
from routers.forwarding import error_response
from services.coc_client import CocApiClient
from services.dependencies import get_settings


def list_endpoints(app: FastAPI) -> list:
    """Method and path of every proxy route, in registration order."""
    endpoints = []
    for path, operations in app.openapi()["paths"].items():
        for method in operations:
            endpoints.append((method.upper(), path))
    return endpoints


def print_banner(app: FastAPI, settings: ProxySettings):
    print("🚀 CoC proxy ready")
    print(f"   Port: {settings.port}")
    print("Endpoints:")
    for method, path in list_endpoints(app):
        print(f"   {method:<5} {path}")
    print(f"Test: http://localhost:{settings.port}/health")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared upstream client for the lifetime of the app."""
    settings = app.state.settings
    app.state.coc_client = CocApiClient(settings)
    print_banner(app, settings)
    try:
        yield
    finally:
        await app.state.coc_client.aclose()
        print("👋 CoC proxy stopped")


def create_app(settings: Optional[ProxySettings] = None) -> FastAPI:
    """
    Build the proxy application.

    Args:
        settings: Proxy settings, loaded from the environment when omitted

    Raises:
        ConfigurationError: If settings are omitted and the environment is incomplete
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Clash of Clans API Proxy", lifespan=lifespan)
    app.state.settings = settings

    # Browser clients call the proxy directly, so any origin may read it
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.detail, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return error_response(message, status_code=400)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(current: ProxySettings = Depends(get_settings)):
        """Report process status without calling upstream."""
        return HealthResponse(
            status="ONLINE",
            service=current.service_name,
            clanTag=current.clan_tag,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    # Include all routers
    app.include_router(clans.router)
    app.include_router(players.router)
    app.include_router(wars.router)
    app.include_router(leagues.router)

    return app


def main():
    """Load configuration, print a summary and serve until interrupted."""
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    print("✅ Config loaded:")
    print(f"   Clan Tag: {settings.clan_tag}")
    print(f"   API Key: {mask_secret(settings.api_key)}")

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
