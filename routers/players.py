from fastapi import APIRouter, Body, Depends
from typing import Optional

from models.schemas import VerifyTokenRequest
from services.coc_client import CocApiClient
from services.dependencies import get_coc_client
from routers.forwarding import encode_tag, error_response, forward

router = APIRouter(prefix="/player", tags=["players"])


@router.get("/{tag}")
async def get_player(tag: str, client: CocApiClient = Depends(get_coc_client)):
    """Get player information. The leading '#' of the tag is optional."""
    return await forward(client.get(f"players/{encode_tag(tag)}"))


@router.post("/{tag}/verifytoken")
async def verify_player_token(
    tag: str,
    body: Optional[VerifyTokenRequest] = Body(default=None),
    client: CocApiClient = Depends(get_coc_client)
):
    """
    Verify a player's in-game API token.
    Rejected locally, without calling upstream, when no token is supplied.
    """
    if body is None or not body.token:
        return error_response("Token required", status_code=400)

    return await forward(
        client.post(f"players/{encode_tag(tag)}/verifytoken", {"token": body.token})
    )
