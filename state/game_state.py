# state/game_state.py


class GameState:
    """Snapshot of a Mastermind game, safe to hand to a presentation layer.

    secret_code is only filled in once the game is over.
    """

    def __init__(
        self, rules, attempts, current_attempt, is_over, is_won, code=None
    ):
        self.rules = dict(rules)
        self.attempts = tuple(attempts)
        self.current_attempt = current_attempt
        self.is_over = is_over
        self.is_won = is_won
        self.secret_code = list(code) if code is not None and is_over else None

    @property
    def code_length(self):
        return self.rules["code_length"]

    @property
    def color_count(self):
        return self.rules["color_count"]

    @property
    def max_attempts(self):
        return self.rules["max_attempts"]

    @property
    def status(self):
        if not self.is_over:
            return "active"
        return "won" if self.is_won else "lost"

    def to_dict(self):
        # Return the snapshot as dictionary for i.e. json
        return {
            "rules": dict(self.rules),
            "attempts": [a.to_dict() for a in self.attempts],
            "current_attempt": self.current_attempt,
            "is_over": self.is_over,
            "is_won": self.is_won,
            "status": self.status,
            "secret_code": self.secret_code,
        }
