"""
Signup creation, listing and payment tracking.

Capacity is enforced inside a single ``INSERT ... SELECT`` statement: the
row is only produced when the game exists and its signup count is still
below ``max_players``. SQLite serializes writers, so the count cannot change
between the check and the insert.
"""

import logging

from sqlalchemy import func, insert, literal, select
from sqlalchemy.orm import Session

from pickup.exceptions import GameFullError, GameNotFoundError
from pickup.models.game import Game
from pickup.models.signup import Signup

logger = logging.getLogger(__name__)

SIGNUP_COLUMNS = (
    "game_id", "name", "position", "age",
    "speed", "passing", "shooting", "defending",
)


def _current_players(game_id: int):
    return (
        select(func.count(Signup.id))
        .where(Signup.game_id == game_id)
        .correlate(None)
        .scalar_subquery()
    )


def create(db: Session, game_id: int, name, position, age, speed, passing, shooting, defending):
    """
    Insert a signup if the game has room and return the new signup id.

    Raises GameNotFoundError when the game doesn't exist and GameFullError
    when it already has ``max_players`` signups. In both cases nothing is
    written.
    """
    source = (
        select(
            Game.id,
            literal(name),
            literal(position),
            literal(age),
            literal(speed),
            literal(passing),
            literal(shooting),
            literal(defending),
        )
        .where(Game.id == game_id)
        .where(_current_players(game_id) < Game.max_players)
    )
    stmt = (
        insert(Signup)
        .from_select(list(SIGNUP_COLUMNS), source)
        .returning(Signup.id)
    )

    signup_id = db.execute(stmt).scalar_one_or_none()
    if signup_id is not None:
        db.commit()
        logger.info("Signup %s accepted for game %s", signup_id, game_id)
        return signup_id

    db.rollback()
    game = db.query(Game).filter(Game.id == game_id).first()
    if game is None:
        raise GameNotFoundError(game_id)

    logger.info("Signup rejected, game %s is full", game_id)
    raise GameFullError(game_id, game.max_players)


def count_for_game(db: Session, game_id: int) -> int:
    return db.query(Signup).filter(Signup.game_id == game_id).count()


def get_by_game(db: Session, game_id: int):
    """Signups for a game with their average skill, oldest first."""
    avg_skill = (
        (Signup.speed + Signup.passing + Signup.shooting + Signup.defending) / 4.0
    ).label("avg_skill")

    rows = (
        db.query(Signup, avg_skill)
        .filter(Signup.game_id == game_id)
        .order_by(Signup.signup_time, Signup.id)
        .all()
    )

    signups = []
    for s, avg in rows:
        signups.append({
            "id": s.id,
            "game_id": s.game_id,
            "name": s.name,
            "position": s.position,
            "age": s.age,
            "speed": s.speed,
            "passing": s.passing,
            "shooting": s.shooting,
            "defending": s.defending,
            "paid": bool(s.paid),
            "signup_time": s.signup_time,
            "avg_skill": float(avg),
        })
    return signups


def get_by_id(db: Session, signup_id: int):
    return db.query(Signup).filter(Signup.id == signup_id).first()


def update_payment(db: Session, signup_id: int, paid: bool) -> int:
    """
    Set the paid flag and return how many rows matched.

    The signup is not looked up first; an unknown id matches zero rows and
    is not treated as an error.
    """
    matched = (
        db.query(Signup)
        .filter(Signup.id == signup_id)
        .update({Signup.paid: paid}, synchronize_session=False)
    )
    db.commit()
    if matched:
        logger.info("Signup %s marked paid=%s", signup_id, paid)
    else:
        logger.warning("Payment update for unknown signup %s", signup_id)
    return matched
