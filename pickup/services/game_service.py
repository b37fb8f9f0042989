from sqlalchemy import func
from sqlalchemy.orm import Session
from pickup.models.game import Game
from pickup.models.signup import Signup


def _game_data(game: Game, **counts):
    data = {
        "id": game.id,
        "title": game.title,
        "date": game.date,
        "time": game.time,
        "location": game.location,
        "cost": game.cost,
        "max_players": game.max_players,
    }
    data.update(counts)
    return data


def _with_signup_count(db: Session, label: str):
    return (
        db.query(Game, func.count(Signup.id).label(label))
        .outerjoin(Signup, Signup.game_id == Game.id)
        .group_by(Game.id)
    )


def get_with_player_count(db: Session, game_id: int):
    """Game attributes plus current_players, or None if the game doesn't exist."""
    row = (
        _with_signup_count(db, "current_players")
        .filter(Game.id == game_id)
        .first()
    )
    if row is None:
        return None

    game, current_players = row
    return _game_data(game, current_players=current_players)


def get_all_with_signup_counts(db: Session):
    rows = (
        _with_signup_count(db, "signups")
        .order_by(Game.date, Game.time, Game.id)
        .all()
    )
    return [_game_data(game, signups=count) for game, count in rows]


def create(db: Session, title, date, time, location, cost, max_players):
    g = Game(
        title=title,
        date=date,
        time=time,
        location=location,
        cost=cost,
        max_players=max_players,
    )
    db.add(g)
    db.commit()
    db.refresh(g)
    return g


def signup_link(game_id: int) -> str:
    return f"/signup/{game_id}"
