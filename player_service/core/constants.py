"""Constants for core module."""

from pathlib import Path
from typing import List

# --- I/O --- #
LOGS_FPATH: Path = Path("logs")

# --- Seed data --- #
SEED_PLAYERS: List[dict] = [
    {"id": 1, "name": "Alice", "score": 1200},
    {"id": 2, "name": "Bob", "score": 950},
    {"id": 3, "name": "Charlie", "score": 1500},
]

# --- Response messages --- #
NOT_FOUND_MSG: str = "Player not found"
INVALID_DATA_MSG: str = "Invalid data. Please provide a name and a numeric score."

# --- Startup banner --- #
API_PREFIX: str = "/api"

ENDPOINTS: List[str] = [
    f"GET {API_PREFIX}/players",
    f"GET {API_PREFIX}/players/:id",
    f"POST {API_PREFIX}/players",
]
