"""Request and response bodies for the JSON API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GameCreate(BaseModel):
    title: str
    date: str
    time: str
    location: str
    cost: float
    max_players: int


class GameCreated(BaseModel):
    id: int
    signup_link: str


class GameBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    date: str
    time: str
    location: str
    cost: float
    max_players: int


class GameWithPlayers(GameBase):
    """Game as seen by the signup page."""

    current_players: int


class GameSummary(GameBase):
    """Game row in the admin list."""

    signups: int


class SignupCreate(BaseModel):
    name: str
    position: str
    age: int
    speed: int
    passing: int
    shooting: int
    defending: int


class SignupConfirmation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    signup_id: int = Field(alias="signupId")


class SignupWithSkill(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    game_id: Optional[int]
    name: str
    position: str
    age: int
    speed: int
    passing: int
    shooting: int
    defending: int
    paid: bool
    signup_time: datetime
    avg_skill: float


class PaymentUpdate(BaseModel):
    paid: bool


class SuccessResponse(BaseModel):
    success: bool = True
