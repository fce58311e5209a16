from fastapi import APIRouter, Depends

from services.coc_client import CocApiClient
from services.dependencies import get_coc_client
from routers.forwarding import encode_segment, forward

router = APIRouter(prefix="/cwl", tags=["wars"])


@router.get("/war/{war_tag}")
async def get_league_war(war_tag: str, client: CocApiClient = Depends(get_coc_client)):
    """Get a specific clan war league war by its war tag."""
    return await forward(client.get(f"clanwarleagues/wars/{encode_segment(war_tag)}"))
