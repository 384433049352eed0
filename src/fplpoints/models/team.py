"""Team records as loaded from the provider's bootstrap payload."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TeamTableData(BaseModel):
    played: int = Field(default=0, ge=0)
    win: int = Field(default=0, ge=0)
    draw: int = Field(default=0, ge=0)
    loss: int = Field(default=0, ge=0)
    points: int = Field(default=0, ge=0)
    position: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class TeamStrength(BaseModel):
    overall_home: int = 0
    overall_away: int = 0
    attack_home: int = 0
    attack_away: int = 0
    defence_home: int = 0
    defence_away: int = 0

    model_config = ConfigDict(frozen=True)


class Team(BaseModel):
    id: int
    name: str
    short_name: str
    table_data: TeamTableData = Field(default_factory=TeamTableData)
    strength: TeamStrength = Field(default_factory=TeamStrength)

    model_config = ConfigDict(frozen=True)
