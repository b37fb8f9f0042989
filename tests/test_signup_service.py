"""
Service-level tests for signup_service, run against the test app's database.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from pickup.exceptions import GameFullError, GameNotFoundError
from pickup.services import game_service, signup_service

RATINGS = dict(speed=3, passing=4, shooting=5, defending=2)


def _signup(db, game_id, name="Alex"):
    return signup_service.create(
        db, game_id=game_id, name=name, position="Defender", age=25, **RATINGS
    )


def _new_game(db, max_players=10):
    return game_service.create(
        db,
        title="Sunday Pickup",
        date="2025-06-01",
        time="10:00",
        location="Riverside Park",
        cost=5.0,
        max_players=max_players,
    )


def test_create_returns_new_id(db):
    game = _new_game(db)

    first = _signup(db, game.id, "Ana")
    second = _signup(db, game.id, "Ben")
    assert second > first
    assert signup_service.count_for_game(db, game.id) == 2


def test_create_sets_defaults(db):
    game = _new_game(db)
    signup = signup_service.get_by_id(db, _signup(db, game.id))

    assert signup.paid is False
    assert signup.signup_time is not None
    assert signup.avg_skill == 3.5


def test_create_for_missing_game_raises(db):
    with pytest.raises(GameNotFoundError) as exc_info:
        _signup(db, 42)
    assert exc_info.value.game_id == 42
    assert signup_service.count_for_game(db, 42) == 0


def test_create_for_full_game_raises_and_writes_nothing(db):
    game = _new_game(db, max_players=2)
    _signup(db, game.id, "Ana")
    _signup(db, game.id, "Ben")

    with pytest.raises(GameFullError) as exc_info:
        _signup(db, game.id, "Cai")
    assert exc_info.value.max_players == 2
    assert signup_service.count_for_game(db, game.id) == 2


def test_current_players_matches_signup_rows(db):
    game = _new_game(db)
    for name in ("Ana", "Ben", "Cai", "Dee"):
        _signup(db, game.id, name)

    data = game_service.get_with_player_count(db, game.id)
    assert data["current_players"] == signup_service.count_for_game(db, game.id) == 4


def test_get_with_player_count_missing_game(db):
    assert game_service.get_with_player_count(db, 7) is None


def test_update_payment_reports_matched_rows(db):
    game = _new_game(db)
    signup_id = _signup(db, game.id)

    assert signup_service.update_payment(db, signup_id, True) == 1
    assert signup_service.update_payment(db, signup_id + 100, True) == 0
    assert signup_service.get_by_id(db, signup_id).paid is True


def test_concurrent_signups_for_last_slot_admit_exactly_one(client, db):
    game_id = _new_game(db, max_players=1).id
    session_factory = client.app.state.session_factory

    def attempt(i):
        with session_factory() as session:
            try:
                _signup(session, game_id, f"Racer {i}")
                return "ok"
            except GameFullError:
                return "full"

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    assert results.count("ok") == 1
    assert results.count("full") == 7
    assert signup_service.count_for_game(db, game_id) == 1
