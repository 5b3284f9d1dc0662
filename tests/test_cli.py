import pytest

from game.engine import GameEngine
from ui.cli import attempt_counter, format_attempt, format_palette, gameloop, parse_guess
from game.guess import Attempt
from conftest import ScriptedRng


def play(engine, *lines):
    inputs = iter(lines)
    out = []

    def fake_input(prompt):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    gameloop(engine, input_fn=fake_input, output=out.append)
    return "\n".join(out)


@pytest.mark.parametrize(
    "text, expected",
    [("0123", [0, 1, 2, 3]), ("0 1 2 3", [0, 1, 2, 3]), (" 4,4 , 0 ", [4, 4, 0])],
)
def test_parse_guess(text, expected):
    assert parse_guess(text, 5) == expected


@pytest.mark.parametrize("text", ["", "   ", "01a3", "RGBY", "0 -1"])
def test_parse_guess_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_guess(text, 5)


def test_parse_guess_rejects_colors_not_in_play():
    with pytest.raises(ValueError, match="not in play"):
        parse_guess("0125", 5)


def test_format_attempt():
    line = format_attempt(Attempt((0, 1), 1, 0, 2))
    assert line.startswith("#2")
    assert "✓ 1 well placed" in line
    assert "~ 0 misplaced" in line


def test_format_palette_is_limited_to_colors_in_play():
    text = format_palette(3)
    assert "2=Green" in text
    assert "Yellow" not in text


def test_attempt_counter():
    engine = GameEngine(2, 1, rng=ScriptedRng([0, 1]))
    assert attempt_counter(engine) == 1
    engine.submit_guess([1, 1])
    assert attempt_counter(engine) == 1


def test_winning_game():
    engine = GameEngine(4, 10, rng=ScriptedRng([1, 3, 0, 2]))
    text = play(engine, "1203", "1302", "exit")
    assert "✓ 2 well placed | ~ 2 misplaced" in text
    assert "Congratulations" in text
    assert "2 attempts" in text
    assert "Exiting game." in text
    assert engine.won


def test_losing_game_reveals_secret():
    engine = GameEngine(2, 1, rng=ScriptedRng([0, 1]))
    text = play(engine, "10")
    assert "No more attempts left." in text
    assert "The secret code was: 🔴 🔵" in text


def test_bad_input_does_not_count():
    engine = GameEngine(4, 10, rng=ScriptedRng([1, 3, 0, 2]))
    text = play(engine, "12", "12x3", "9999")
    assert text.count("Invalid input") == 3
    assert engine.current_attempt == 0


def test_guess_after_game_over():
    engine = GameEngine(2, 1, rng=ScriptedRng([0, 1]))
    text = play(engine, "10", "01")
    assert "The game is over" in text
    assert engine.current_attempt == 1


def test_new_command_changes_settings():
    engine = GameEngine(2, 1, rng=ScriptedRng([0, 1], [4, 4, 4, 4]))
    play(engine, "10", "new 4 6", "4444")
    assert engine.code_length == 4
    assert engine.max_attempts == 6
    assert engine.won


def test_new_command_with_bad_settings():
    engine = GameEngine(2, 3, rng=ScriptedRng([0, 1]))
    text = play(engine, "new 0", "new x")
    assert text.count("Invalid input") == 2
    assert engine.code_length == 2


def test_state_command_hides_secret():
    engine = GameEngine(2, 3, rng=ScriptedRng([2, 1]))
    text = play(engine, "state")
    assert '"secret_code": null' in text


def test_history_is_shown_newest_first():
    engine = GameEngine(2, 5, rng=ScriptedRng([0, 1]))
    text = play(engine, "22", "11")
    last_block = text[text.rindex("#2"):]
    assert "#1" in last_block
    assert last_block.index("#2") < last_block.index("#1")
