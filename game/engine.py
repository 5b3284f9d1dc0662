import logging
import random
from enum import Enum

from .guess import Attempt, Guess
from .ruleset import make_rules
from .secret_code import Code
from state.game_state import GameState

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class GameEngine:
    """
    Owns one game: the secret code, the attempt counter, the history of
    scored guesses and the won/lost detection.

    Domain failures are reported as ``None`` results, never as exceptions:
    a guess to a finished game or a guess of the wrong length is ignored,
    and the secret is withheld while the game is still running. Only an
    unusable configuration raises (ConfigurationError).
    """

    def __init__(
        self,
        code_length: int = 6,
        max_attempts: int = 10,
        *,
        difficulty: dict | None = None,
        rng=None,
        seed=None,
    ):
        """
        Args:
            code_length (int): Number of positions in the secret.
            max_attempts (int): Guesses allowed before the game is lost.
            difficulty (dict, optional): Difficulty table mapping code length
                to color count. Defaults to ruleset.DIFFICULTY_TABLE.
            rng: Random source offering ``choices`` like random.Random.
            seed: Seed for a private random.Random, used when rng is None.
        """
        self.difficulty = difficulty
        self.rules = make_rules(code_length, max_attempts, difficulty)
        self.rng = rng if rng is not None else random.Random(seed)

        self.generate_secret()

    # --- read-only accessors ---

    @property
    def code_length(self) -> int:
        return self.rules["code_length"]

    @property
    def max_attempts(self) -> int:
        return self.rules["max_attempts"]

    @property
    def color_count(self) -> int:
        return self.rules["color_count"]

    @property
    def label(self) -> str:
        return self.rules["label"]

    @property
    def current_attempt(self) -> int:
        return self._current_attempt

    @property
    def attempts(self) -> tuple:
        return tuple(self._attempts)

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def won(self) -> bool:
        return self._won

    @property
    def status(self) -> GameStatus:
        if not self._game_over:
            return GameStatus.ACTIVE
        return GameStatus.WON if self._won else GameStatus.LOST

    def remaining_attempts(self) -> int:
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self._current_attempt)

    # --- game flow ---

    def generate_secret(self):
        """Draw a fresh secret and start over. Prior progress is discarded."""
        secret = Code(rules=self.rules)
        secret.generate_random(self.rng)

        self._secret = secret
        self._attempts = []
        self._current_attempt = 0
        self._game_over = False
        self._won = False

        logger.info(
            "New game: %d slots, %d colors, %d attempts",
            self.code_length,
            self.color_count,
            self.max_attempts,
        )

    def submit_guess(self, guess) -> Attempt | None:
        """
        Score a guess against the secret and advance the game.

        Args:
            guess (Sequence[int]): Ordered color ids, one per position.
        Returns:
            Attempt | None: The new attempt record, or None when the game is
            already over or the guess does not have code_length positions.
            In both cases the state is left untouched.
        """
        if self._game_over:
            logger.debug("Guess ignored: game is over")
            return None

        new_guess = Guess(guess, rules=self.rules)
        if not new_guess.is_valid:
            logger.debug(
                "Guess ignored: expected %d colors, got %d",
                self.code_length,
                len(new_guess),
            )
            return None

        stray = new_guess.out_of_range()
        if stray:
            logger.warning(
                "Guess has colors outside 0..%d at positions %s; "
                "they count as misses",
                self.color_count - 1,
                stray,
            )

        well_placed, misplaced = self._secret.compare_with(new_guess.sequence)

        self._current_attempt += 1
        attempt = Attempt(
            guess=new_guess.sequence,
            well_placed=well_placed,
            misplaced=misplaced,
            attempt_number=self._current_attempt,
        )
        self._attempts.append(attempt)
        logger.debug(
            "Attempt %d: %d well placed, %d misplaced",
            attempt.attempt_number,
            well_placed,
            misplaced,
        )

        self._check_game_over(attempt)
        return attempt

    def _check_game_over(self, attempt: Attempt):
        """Check if the game is finished (code cracked or attempts used)."""
        if attempt.well_placed == self.code_length:
            self._game_over = True
            self._won = True
            logger.info("Game won in %d attempts", self._current_attempt)
        elif self._current_attempt >= self.max_attempts:
            self._game_over = True
            self._won = False
            logger.info("Game lost after %d attempts", self._current_attempt)

    def get_secret(self) -> list[int] | None:
        """Return the secret code once the game is over, None before."""
        if not self._game_over:
            return None
        return self._secret.as_list()

    def reset_settings(self, code_length: int, max_attempts: int):
        """
        Switch to a new configuration and start a new game.

        The configuration is validated before anything changes, so a
        ConfigurationError leaves the current game as it was.
        """
        self.rules = make_rules(code_length, max_attempts, self.difficulty)
        self.generate_secret()

    def reset(self):
        """Start a new game with the same configuration."""
        self.generate_secret()

    def get_state(self) -> GameState:
        """Return a read-only snapshot of the game."""
        return GameState(
            rules=self.rules,
            attempts=self.attempts,
            current_attempt=self._current_attempt,
            is_over=self._game_over,
            is_won=self._won,
            code=self.get_secret(),
        )
