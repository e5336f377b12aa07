"""Simple in-memory store for player records.

This module encapsulates a minimal service layer for storing and
retrieving `Player` records keyed by an integer id.

Notes/Assumptions:
    - This is *not* persistent. A process restart reseeds the store.
    - Thread-safe within one process; not multiprocess-safe.
    - Ids come from a counter that only moves forward.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from fastapi import Request
from loguru import logger

from player_service.api.models import Player, PlayerCreate
from player_service.core.constants import SEED_PLAYERS


class PlayerStore:
    """In-memory, insertion-ordered store of Player records.

    Attributes:
        _players (Dict[int, Player]): Internal map of id -> player. Dict order
            is insertion order, which is also the listing order.
        _next_id (int): The id the next created player receives.
        _lock (threading.Lock): Guards reads and the allocate-and-append step.
    """

    def __init__(self, players: Iterable[Player] = (), next_id: int = 1) -> None:
        """Initialize the store.

        Args:
            players (Iterable[Player]): Records to load, in listing order.
            next_id (int): First id to hand out; bumped past any loaded id.
        """
        self._lock = threading.Lock()
        self._players: Dict[int, Player] = {}
        for player in players:
            if player.id in self._players:
                raise ValueError(f"Duplicate player id: {player.id}")
            self._players[player.id] = player
        self._next_id = max([next_id, *(pid + 1 for pid in self._players)])

    @classmethod
    def seeded(cls) -> "PlayerStore":
        """Create a store holding the default seed players."""
        return cls(players=[Player(**p) for p in SEED_PLAYERS])

    @property
    def next_id(self) -> int:
        """Id the next created player will receive."""
        with self._lock:
            return self._next_id

    def list(self) -> List[Player]:
        """Return a snapshot of all players in insertion order."""
        with self._lock:
            return list(self._players.values())

    def get(self, player_id: Optional[int]) -> Optional[Player]:
        """Retrieve a Player by id.

        Args:
            player_id (Optional[int]): Identifier; None never matches.

        Returns:
            Optional[Player]: The found player or None.
        """
        if player_id is None:
            return None
        with self._lock:
            return self._players.get(player_id)

    def create(self, payload: PlayerCreate) -> Player:
        """Allocate the next id, store a new Player and return it.

        Id allocation and append happen under one lock, so concurrent
        creates never share an id and listing order matches id order.
        """
        with self._lock:
            player = Player(id=self._next_id, name=payload.name, score=payload.score)
            self._players[player.id] = player
            self._next_id += 1
        logger.debug(f"Stored player {player.id} ({player.name!r})")
        return player

    def __len__(self) -> int:
        with self._lock:
            return len(self._players)


def get_store(request: Request) -> PlayerStore:
    """FastAPI dependency provider for the application's store.

    Returns:
        PlayerStore: The store owned by the running application instance.
    """
    return request.app.state.store
