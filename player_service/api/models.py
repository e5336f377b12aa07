"""Pydantic models (request/response schemas) for the API.

Defines the schema used by FastAPI to shape responses and the schema the
create handler validates request bodies against.

Notes/Assumptions:
    - Keep API contracts stable; changes affect clients.
    - Types are strict: `"12"` is not a score and `true` is not a number.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictInt,
    StrictStr,
)

Score = Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]


class PlayerCreate(BaseModel):
    """Request body to create a player.

    Attributes:
        name (str): Display name; must be a non-empty string.
        score (int | float): Numeric score; integers stay integers.
    """

    name: StrictStr = Field(..., min_length=1, examples=["Dana"])
    score: Score = Field(..., examples=[1100])


class Player(BaseModel):
    """A stored player record.

    Attributes:
        id (int): Identifier assigned by the store, never reused.
        name (str): Display name.
        score (int | float): Numeric score.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    score: Union[int, float]
