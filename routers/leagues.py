from fastapi import APIRouter, Depends

from services.coc_client import CocApiClient
from services.dependencies import get_coc_client
from routers.forwarding import encode_segment, forward

router = APIRouter(tags=["leagues"])


# Leagues

@router.get("/leagues")
async def list_leagues(client: CocApiClient = Depends(get_coc_client)):
    """List leagues."""
    return await forward(client.get("leagues"))


@router.get("/leagues/{league_id}")
async def get_league(league_id: str, client: CocApiClient = Depends(get_coc_client)):
    """Get league information."""
    return await forward(client.get(f"leagues/{encode_segment(league_id)}"))


@router.get("/leagues/{league_id}/seasons")
async def list_league_seasons(league_id: str, client: CocApiClient = Depends(get_coc_client)):
    """List seasons of a league."""
    return await forward(client.get(f"leagues/{encode_segment(league_id)}/seasons"))


@router.get("/leagues/{league_id}/seasons/{season_id}")
async def get_league_season_rankings(
    league_id: str,
    season_id: str,
    client: CocApiClient = Depends(get_coc_client)
):
    """Get player rankings for a league season."""
    return await forward(
        client.get(f"leagues/{encode_segment(league_id)}/seasons/{encode_segment(season_id)}")
    )


# War leagues

@router.get("/warleagues")
async def list_war_leagues(client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get("warleagues"))


@router.get("/warleagues/{league_id}")
async def get_war_league(league_id: str, client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get(f"warleagues/{encode_segment(league_id)}"))


# Capital leagues

@router.get("/capitalleagues")
async def list_capital_leagues(client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get("capitalleagues"))


@router.get("/capitalleagues/{league_id}")
async def get_capital_league(league_id: str, client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get(f"capitalleagues/{encode_segment(league_id)}"))


# Builder base leagues

@router.get("/builderbaseleagues")
async def list_builder_base_leagues(client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get("builderbaseleagues"))


@router.get("/builderbaseleagues/{league_id}")
async def get_builder_base_league(league_id: str, client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get(f"builderbaseleagues/{encode_segment(league_id)}"))


# League tiers

@router.get("/leaguetiers")
async def list_league_tiers(client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get("leaguetiers"))


@router.get("/leaguetiers/{tier_id}")
async def get_league_tier(tier_id: str, client: CocApiClient = Depends(get_coc_client)):
    return await forward(client.get(f"leaguetiers/{encode_segment(tier_id)}"))
