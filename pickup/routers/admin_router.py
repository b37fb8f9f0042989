import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pickup.database import get_db
from pickup.schemas import (
    GameCreate,
    GameCreated,
    GameSummary,
    PaymentUpdate,
    SignupWithSkill,
    SuccessResponse,
)
from pickup.services import game_service, signup_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/admin")


def storage_error_message(request: Request, exc: SQLAlchemyError) -> str:
    if request.app.state.settings.expose_storage_errors:
        return str(getattr(exc, "orig", None) or exc)
    return "Storage error"


@router.get("/games", response_model=List[GameSummary])
def list_games(db: Session = Depends(get_db)):
    return game_service.get_all_with_signup_counts(db)


@router.get("/games/{game_id}/signups", response_model=List[SignupWithSkill])
def list_signups(game_id: int, db: Session = Depends(get_db)):
    return signup_service.get_by_game(db, game_id)


@router.post("/games", response_model=GameCreated)
def create_game(payload: GameCreate, request: Request, db: Session = Depends(get_db)):
    try:
        game = game_service.create(
            db,
            title=payload.title,
            date=payload.date,
            time=payload.time,
            location=payload.location,
            cost=payload.cost,
            max_players=payload.max_players,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Creating game %r failed", payload.title)
        raise HTTPException(status_code=500, detail=storage_error_message(request, e))

    logger.info("Created game %s (%s, %s players max)", game.id, game.title, game.max_players)
    return {"id": game.id, "signup_link": game_service.signup_link(game.id)}


@router.put("/signups/{signup_id}/payment", response_model=SuccessResponse)
def update_payment(
    signup_id: int,
    payload: PaymentUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    try:
        signup_service.update_payment(db, signup_id, payload.paid)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Payment update for signup %s failed", signup_id)
        raise HTTPException(status_code=500, detail=storage_error_message(request, e))

    # Reported as success whether or not the signup exists
    return {"success": True}
