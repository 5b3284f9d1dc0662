# # Command-line interface (text-based play)

from game.engine import GameEngine
from game.ruleset import COLORS, DEFAULT_RULES, palette
from state.serializer import to_json

HELP = (
    "Type a guess as color ids (e.g. 0123 or 0 1 2 3).\n"
    "Commands: 'help', 'state', 'new [length [attempts]]', 'exit'."
)


def format_color(color_id):
    """Return the emoji for a color id, or the id itself if it has none."""
    if isinstance(color_id, int) and 0 <= color_id < len(COLORS):
        return COLORS[color_id]["emoji"]
    return f"[{color_id}]"


def format_palette(color_count):
    entries = [
        f"{c['emoji']} {c['id']}={c['name']}" for c in palette(color_count)
    ]
    # ids beyond the named palette still exist, they just have no name
    entries += [f"{i}" for i in range(len(COLORS), color_count)]
    return "  ".join(entries)


def format_attempt(attempt):
    """
    Render one history line, e.g.
    '#1  🔴 🔵 🟢 🟡  | ✓ 2 well placed | ~ 1 misplaced'.
    """
    colors = " ".join(format_color(c) for c in attempt.guess)
    return (
        f"#{attempt.attempt_number}  {colors}  "
        f"| ✓ {attempt.well_placed} well placed "
        f"| ~ {attempt.misplaced} misplaced"
    )


def parse_guess(text, color_count):
    """
    Turn player input into a list of color ids.

    Args:
        text (str): Either one digit per color ('0123') or ids separated by
            spaces or commas ('0 1 2 3', '10,2,3').
        color_count (int): Number of colors in play.
    Returns:
        list[int]: The color ids.
    Raises:
        ValueError: If the input is empty, holds something other than
        digits, or names a color that is not in play.
    """
    text = text.strip()
    if not text:
        raise ValueError("Empty guess.")

    if " " in text or "," in text:
        tokens = text.replace(",", " ").split()
    else:
        tokens = list(text)

    guess = []
    for token in tokens:
        if not token.isdigit():
            raise ValueError(f"'{token}' is not a color id.")
        color_id = int(token)
        if color_id >= color_count:
            raise ValueError(
                f"Color {color_id} is not in play. "
                f"Allowed: 0..{color_count - 1}."
            )
        guess.append(color_id)
    return guess


def attempt_counter(engine):
    """Attempt number to show: the upcoming one while playing."""
    if engine.game_over:
        return engine.current_attempt
    return engine.current_attempt + 1


def print_game_info(engine, output=print):
    output(f"\n{engine.label}")
    output(f"Attempt {attempt_counter(engine)} / {engine.max_attempts}")
    output(f"Available colors: {format_palette(engine.color_count)}")


def print_game_over(engine, output=print):
    if engine.won:
        n = engine.current_attempt
        output("\nCongratulations, you cracked the code!")
        output(f"You found it in {n} attempt{'s' if n > 1 else ''}.")
    else:
        secret = " ".join(format_color(c) for c in engine.get_secret())
        output("\nNo more attempts left.")
        output(f"The secret code was: {secret}")
    output("Type 'new' to play again or 'exit' to quit.")


def _new_game(engine, args):
    if not args:
        engine.reset()
        return
    code_length = int(args[0])
    max_attempts = int(args[1]) if len(args) > 1 else engine.max_attempts
    engine.reset_settings(code_length, max_attempts)


def gameloop(engine=None, input_fn=input, output=print):
    """
    Play on the terminal until the player types 'exit' or input ends.

    Returns:
        GameEngine: The engine used, in its final state.
    """
    output("=== Mastermind CLI ===")
    output(HELP)

    if engine is None:
        engine = GameEngine(
            DEFAULT_RULES["code_length"], DEFAULT_RULES["max_attempts"]
        )
    print_game_info(engine, output)

    while True:
        try:
            user_input = input_fn("Enter your guess: ").strip()
        except EOFError:
            output("")
            break

        command, *args = user_input.lower().split() or [""]

        # handle special commands
        if command == "exit":
            output("Exiting game.")
            break
        elif command == "help":
            output(HELP)
            continue
        elif command == "state":
            output(to_json(engine.get_state()))
            continue
        elif command == "new":
            try:
                _new_game(engine, args)
            except ValueError as e:
                output(f"Invalid input: {e}")
                continue
            output("New game started.")
            print_game_info(engine, output)
            continue

        if engine.game_over:
            output("The game is over. Type 'new' to play again.")
            continue

        try:
            guess = parse_guess(user_input, engine.color_count)
        except ValueError as e:
            output(f"Invalid input: {e}")
            continue

        # Make the guess
        attempt = engine.submit_guess(guess)
        if attempt is None:
            output(
                f"Invalid input: a guess needs exactly "
                f"{engine.code_length} colors."
            )
            continue

        # Render the history, newest first
        for past in reversed(engine.attempts):
            output(format_attempt(past))

        # Check win/loss
        if engine.game_over:
            print_game_over(engine, output)
        else:
            output(f"Attempts left: {engine.remaining_attempts()}")

    output("\n=== Game Over ===")
    return engine
