"""Dependency utilities for route handlers.

Provides reusable dependency functions for resolving shared services
and objects (e.g., looking up a Player by the id in the request path).
"""

import re
from typing import Optional

from fastapi import Depends, HTTPException
from loguru import logger

from player_service.api.models import Player
from player_service.api.services.store import PlayerStore, get_store
from player_service.core.constants import NOT_FOUND_MSG

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_player_id(raw: str) -> Optional[int]:
    """Parse a path segment as a base-10 integer.

    Only the leading integer is read, so `"2abc"` parses as 2. A segment
    with no leading digits yields None, which matches no player.

    Args:
        raw (str): The raw path segment.

    Returns:
        Optional[int]: The parsed id, or None.
    """
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def get_player(player_id: str, store: PlayerStore = Depends(get_store)) -> Player:
    """Resolve a Player from the store.

    Args:
        player_id (str): Raw id segment from the request path.
        store (PlayerStore): The in-memory store (injected).

    Returns:
        Player: The matching player.

    Raises:
        HTTPException: If no player has the parsed id.
    """
    parsed = parse_player_id(player_id)
    logger.info(f"GET request received for player ID: {parsed}")
    player = store.get(parsed)
    if player is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MSG)
    return player
