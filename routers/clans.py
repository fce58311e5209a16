from fastapi import APIRouter, Depends, Request
from urllib.parse import urlencode

from config import ProxySettings
from services.coc_client import CocApiClient
from services.dependencies import get_coc_client, get_settings
from routers.forwarding import encode_tag, forward

router = APIRouter(tags=["clans"])

NOT_IN_WAR = {"state": "notInWar"}


def clan_path(settings: ProxySettings, suffix: str = "") -> str:
    """Upstream path for the configured clan."""
    return f"clans/{encode_tag(settings.clan_tag)}{suffix}"


@router.get("/clan")
async def get_clan(
    client: CocApiClient = Depends(get_coc_client),
    settings: ProxySettings = Depends(get_settings)
):
    """Get clan information for the configured clan."""
    return await forward(client.get(clan_path(settings)))


@router.get("/members")
async def list_members(
    client: CocApiClient = Depends(get_coc_client),
    settings: ProxySettings = Depends(get_settings)
):
    """List clan members."""
    return await forward(client.get(clan_path(settings, "/members")))


@router.get("/warlog")
async def get_warlog(
    client: CocApiClient = Depends(get_coc_client),
    settings: ProxySettings = Depends(get_settings)
):
    """Retrieve the clan's war log."""
    return await forward(client.get(clan_path(settings, "/warlog")))


@router.get("/currentwar")
async def get_current_war(
    client: CocApiClient = Depends(get_coc_client),
    settings: ProxySettings = Depends(get_settings)
):
    """
    Retrieve the clan's current war.
    Upstream answers 404 when the clan is not at war, which is a normal state.
    """
    return await forward(
        client.get(clan_path(settings, "/currentwar")),
        not_found_data=NOT_IN_WAR
    )


@router.get("/cwl/group")
async def get_league_group(
    client: CocApiClient = Depends(get_coc_client),
    settings: ProxySettings = Depends(get_settings)
):
    """Retrieve the clan's current clan war league group."""
    return await forward(client.get(clan_path(settings, "/currentwar/leaguegroup")))


@router.get("/capital/raids")
async def get_capital_raid_seasons(
    client: CocApiClient = Depends(get_coc_client),
    settings: ProxySettings = Depends(get_settings)
):
    """Retrieve the clan's capital raid seasons."""
    return await forward(client.get(clan_path(settings, "/capitalraidseasons")))


@router.get("/clans/search")
async def search_clans(request: Request, client: CocApiClient = Depends(get_coc_client)):
    """
    Search clans.
    All query parameters (e.g. ?name=pendragon&minMembers=10) are passed through as-is.
    """
    query_string = urlencode(request.query_params.multi_items())
    endpoint = f"clans?{query_string}" if query_string else "clans"
    return await forward(client.get(endpoint))
