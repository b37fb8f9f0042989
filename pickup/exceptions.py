"""Domain errors raised by the service layer."""


class GameNotFoundError(LookupError):
    def __init__(self, game_id):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class GameFullError(Exception):
    def __init__(self, game_id, max_players):
        super().__init__(f"Game {game_id} is full ({max_players} players)")
        self.game_id = game_id
        self.max_players = max_players
