import random
from .ruleset import DEFAULT_RULES, is_color_id

# Placeholders for slots already matched. A fresh object compares equal
# to nothing but itself, so no color id can ever hit one.
_SECRET_USED = object()
_GUESS_USED = object()


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (list[int]): The color ids making up the code.
        rules (dict): The ruleset for validation.
        is_valid (bool): Whether the code is valid according to the rules."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (list[int] or None): The color ids of the code.
            rules (dict or None): Reference to the ruleset (defines length
            and color count).
        """

        self.rules = rules or DEFAULT_RULES
        self.sequence = list(sequence) if sequence is not None else []

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate()

    def generate_random(self, rng=None):
        """
        Draw a new code: every position independently uniform over
        [0, color_count).

        Args:
            rng: Source of randomness with random.Random's ``choices``.
            Defaults to the module-level generator.
        """

        rng = rng if rng is not None else random
        self.sequence = list(
            rng.choices(
                range(self.rules["color_count"]), k=self.rules["code_length"]
            )
        )

        # Validate the generated code
        if not self.validate():
            raise ValueError("Generated code violates rules constraints.")
        self.is_valid = True

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length, color ids).

        Args:
            strict (bool): If True, raise ValueError with an explanatory
            message when validation fails. If False, return False on failure.

        Returns:
            bool: True if the code sequence is valid; False if invalid and
            strict is False.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise ValueError(msg)
            return False

        # Validates, if code sequence length is as declared in the rules.
        if len(self.sequence) != self.rules["code_length"]:
            return fail(
                f"Code length must be {self.rules['code_length']}, "
                f"but got {len(self.sequence)}."
            )

        # Validates, if every id is one of the colors in play.
        color_count = self.rules["color_count"]
        for color in self.sequence:
            if not is_color_id(color, color_count):
                return fail(
                    f"Invalid color {color!r}. Allowed: 0..{color_count - 1}."
                )

        return True

    def compare_with(self, guess) -> tuple[int, int]:
        """
        Compare this secret code with a guess and compute Mastermind-style
        feedback.

        Args:
            guess (Sequence[int]): Color ids, same length as the code.

        Returns:
            tuple[int, int]: (well_placed, misplaced)
            well_placed: right color in the right position,
            misplaced: right color in the wrong position.

        Notes:
            Slots counted as well placed are excluded from the misplaced
            count. For repeated colors the lowest remaining secret index is
            consumed first, so every secret slot is counted at most once.
            Ids outside the palette simply never match, and neither do
            bools or floats (True == 1 does not count as color 1).
        """

        well_placed = 0
        misplaced = 0

        color_count = self.rules["color_count"]
        remaining_code = list(self.sequence)
        # Anything that is not a color in play is out of the game from the start.
        remaining_guess = [
            color if is_color_id(color, color_count) else _GUESS_USED
            for color in guess
        ]

        # Exact matches: color and position.
        for i in range(len(remaining_code)):
            if remaining_guess[i] == remaining_code[i]:
                well_placed += 1
                remaining_code[i] = _SECRET_USED
                remaining_guess[i] = _GUESS_USED

        # Colors present elsewhere, first free secret slot wins.
        for color in remaining_guess:
            if color is _GUESS_USED:
                continue
            for j, candidate in enumerate(remaining_code):
                if candidate is not _SECRET_USED and candidate == color:
                    misplaced += 1
                    remaining_code[j] = _SECRET_USED
                    break

        return (well_placed, misplaced)

    def as_list(self):
        """Return a copy of the code sequence."""
        return list(self.sequence)

    def __eq__(self, other):
        """
        Check equality between this Code and another object.

        Args:
            other (Code or list): A Code instance or a list to compare against.

        Returns:
            bool: True if the sequences are equal, False otherwise.
        """

        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return self.sequence == list(other)
        return False

    def __repr__(self):
        # colors stay hidden
        return f"Code(length={len(self.sequence)})"
