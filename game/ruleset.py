# Configuration: palette, difficulty table, code length, attempts.

# Full palette, indexed by color id
COLORS = [
    {"id": 0, "name": "Red", "hex": "#ef4444", "emoji": "🔴"},
    {"id": 1, "name": "Blue", "hex": "#3b82f6", "emoji": "🔵"},
    {"id": 2, "name": "Green", "hex": "#22c55e", "emoji": "🟢"},
    {"id": 3, "name": "Yellow", "hex": "#eab308", "emoji": "🟡"},
    {"id": 4, "name": "Orange", "hex": "#f97316", "emoji": "🟠"},
    {"id": 5, "name": "Pink", "hex": "#ec4899", "emoji": "🩷"},
    {"id": 6, "name": "Purple", "hex": "#a855f7", "emoji": "🟣"},
    {"id": 7, "name": "Cyan", "hex": "#06b6d4", "emoji": "🩵"},
    {"id": 8, "name": "Brown", "hex": "#92400e", "emoji": "🟤"},
]

# code_length -> number of colors in play
DIFFICULTY_TABLE = {
    2: {"color_count": 3, "label": "Easy (2 slots, 3 colors)"},
    4: {"color_count": 5, "label": "Medium (4 slots, 5 colors)"},
    6: {"color_count": 9, "label": "Hard (6 slots, 9 colors)"},
}

DEFAULT_COLOR_COUNT = 5

DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 6,  # Number of pegs in the code
    "color_count": DIFFICULTY_TABLE[6]["color_count"],  # Colors in play
    "max_attempts": 10,  # Number of guesses per game
    "label": DIFFICULTY_TABLE[6]["label"],
}


class ConfigurationError(ValueError):
    """Raised when a game is configured with an unusable code length or
    attempt limit."""


def _check_positive(name: str, value) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{name} must be a positive integer, but got {value!r}."
        )
    if value < 1:
        raise ConfigurationError(
            f"{name} must be a positive integer, but got {value}."
        )
    return value


def is_color_id(color, color_count: int) -> bool:
    """True if color is one of the ids in play. bool and float never are."""
    if isinstance(color, bool) or not isinstance(color, int):
        return False
    return 0 <= color < color_count


def color_count_for(code_length: int, difficulty: dict | None = None) -> int:
    """
    Look up how many colors are in play for a given code length.

    Args:
        code_length (int): Number of positions in the secret.
        difficulty (dict, optional): Difficulty table to consult.
            Defaults to DIFFICULTY_TABLE.
    Returns:
        int: The color count, DEFAULT_COLOR_COUNT when the table has no
        entry for code_length.
    """
    table = DIFFICULTY_TABLE if difficulty is None else difficulty
    entry = table.get(code_length)
    if entry is None:
        return DEFAULT_COLOR_COUNT
    return entry["color_count"]


def label_for(code_length: int, difficulty: dict | None = None) -> str:
    table = DIFFICULTY_TABLE if difficulty is None else difficulty
    entry = table.get(code_length)
    if entry is None or "label" not in entry:
        count = color_count_for(code_length, table)
        return f"Custom ({code_length} slots, {count} colors)"
    return entry["label"]


def make_rules(
    code_length: int, max_attempts: int, difficulty: dict | None = None
) -> dict:
    """
    Build a validated ruleset for one game.

    Args:
        code_length (int): Number of positions in the secret.
        max_attempts (int): Number of guesses allowed.
        difficulty (dict, optional): Difficulty table used to derive the
            color count.
    Returns:
        dict: A ruleset shaped like DEFAULT_RULES.
    Raises:
        ConfigurationError: If code_length or max_attempts is not a
        positive integer, or the derived color count is unusable.
    """
    _check_positive("code_length", code_length)
    _check_positive("max_attempts", max_attempts)
    color_count = color_count_for(code_length, difficulty)
    _check_positive("color_count", color_count)

    return {
        "name": "classic",
        "code_length": code_length,
        "color_count": color_count,
        "max_attempts": max_attempts,
        "label": label_for(code_length, difficulty),
    }


def palette(color_count: int) -> list[dict]:
    """Return the palette entries for the colors in play."""
    return COLORS[:color_count]
