import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pickup.database import get_db
from pickup.exceptions import GameFullError, GameNotFoundError
from pickup.schemas import GameWithPlayers, SignupConfirmation, SignupCreate
from pickup.services import game_service, signup_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


@router.get("/games/{game_id}", response_model=GameWithPlayers)
def get_game(game_id: int, db: Session = Depends(get_db)):
    game = game_service.get_with_player_count(db, game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return game


@router.post("/signup/{game_id}", response_model=SignupConfirmation)
def create_signup(game_id: int, payload: SignupCreate, db: Session = Depends(get_db)):
    try:
        signup_id = signup_service.create(
            db,
            game_id=game_id,
            name=payload.name,
            position=payload.position,
            age=payload.age,
            speed=payload.speed,
            passing=payload.passing,
            shooting=payload.shooting,
            defending=payload.defending,
        )
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    except GameFullError:
        raise HTTPException(status_code=400, detail="Game is full")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Signup for game %s failed", game_id)
        raise HTTPException(status_code=500, detail="Signup failed")

    return SignupConfirmation(message="Successfully signed up!", signup_id=signup_id)
