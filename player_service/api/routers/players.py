"""Player API routes (list, get, create)."""

from __future__ import annotations

from typing import Any, List, Mapping

from fastapi import APIRouter, Body, Depends, HTTPException
from loguru import logger
from pydantic import ValidationError

from player_service.api.deps import get_player
from player_service.api.models import Player, PlayerCreate
from player_service.api.services.store import PlayerStore, get_store
from player_service.core.constants import INVALID_DATA_MSG

router = APIRouter()


# ---------------------------
# Routes
# ---------------------------


@router.get(
    "/players",
    response_model=List[Player],
    summary="List all players in insertion order",
)
def list_players(store: PlayerStore = Depends(get_store)) -> List[Player]:
    """Return every player."""
    logger.info("GET request received for all players.")
    return store.list()


@router.get(
    "/players/{player_id}",
    response_model=Player,
    summary="Get a single player by id",
)
def read_player(player: Player = Depends(get_player)) -> Player:
    """Return the player resolved from the path id."""
    return player


@router.post(
    "/players",
    response_model=Player,
    status_code=201,
    summary="Create a new player from a name and a numeric score",
)
def create_player(
    payload: Any = Body(None), store: PlayerStore = Depends(get_store)
) -> Player:
    """Validate the body, then store and return the new player."""
    name = payload.get("name") if isinstance(payload, Mapping) else None
    logger.info(f"POST request received to create player: {name}")
    try:
        body = PlayerCreate.model_validate(payload)
    except ValidationError as e:
        logger.debug(f"Rejected player payload: {e.errors()}")
        raise HTTPException(status_code=400, detail=INVALID_DATA_MSG)
    return store.create(body)
