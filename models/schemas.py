from pydantic import BaseModel
from typing import Any, Optional

class ProxyEnvelope(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[Any] = None  # upstream error payload or message string

class VerifyTokenRequest(BaseModel):
    token: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    service: str
    clanTag: str
    timestamp: str
