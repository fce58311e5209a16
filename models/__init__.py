# Models package
# Re-export the request/response schemas
from models.schemas import (
    ProxyEnvelope,
    VerifyTokenRequest,
    HealthResponse
)

__all__ = [
    "ProxyEnvelope",
    "VerifyTokenRequest",
    "HealthResponse"
]
