# Convert game snapshots to readable formats (for display or logging)
import json

from .game_state import GameState


def to_json(game_state: GameState) -> str:
    """
    Convert a game snapshot to a JSON string.
    Args:
        game_state (GameState): The snapshot to convert.
    Returns:
        str: The JSON string representation of the snapshot.
    """
    return json.dumps(game_state.to_dict(), indent=2, ensure_ascii=False)
