from dataclasses import dataclass

from .ruleset import DEFAULT_RULES, is_color_id


class Guess:
    """
        Represents a single player guess before it is scored.
    Attributes:
        sequence (tuple): The guessed color ids, as submitted.
        rules (dict): The ruleset to check against.
        is_valid (bool): Whether the guess has the length the rules ask for.
    """

    def __init__(self, sequence, rules=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (Sequence[int] | None): The guessed color ids. None is
                treated as an empty guess.
            rules (dict, optional): The ruleset for validation. Defaults to
                DEFAULT_RULES.
        """

        # --- Input normalization ---
        self.sequence = tuple(sequence) if sequence is not None else ()

        # --- Attribute setup ---
        self.rules = rules or DEFAULT_RULES
        self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check that the guess has exactly code_length positions.

        Color ids are not range-checked here: an id outside the palette is
        still a scorable guess, it just never matches.

        Args:
            strict (bool): If True, raise ValueError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """
        if len(self.sequence) != self.rules["code_length"]:
            if strict:
                raise ValueError(
                    f"Code length must be {self.rules['code_length']}, "
                    f"but got {len(self.sequence)}."
                )
            return False
        return True

    def out_of_range(self):
        """
        Return the positions holding something other than a color in play.
        Returns:
            list[int]: Indices into the sequence, ascending.
        """
        color_count = self.rules["color_count"]
        return [
            i
            for i, color in enumerate(self.sequence)
            if not is_color_id(color, color_count)
        ]

    def __len__(self):
        return len(self.sequence)


@dataclass(frozen=True)
class Attempt:
    """One scored guess. attempt_number starts at 1."""

    guess: tuple
    well_placed: int
    misplaced: int
    attempt_number: int

    @property
    def feedback(self) -> tuple[int, int]:
        return (self.well_placed, self.misplaced)

    def to_dict(self) -> dict:
        return {
            "guess": list(self.guess),
            "well_placed": self.well_placed,
            "misplaced": self.misplaced,
            "attempt_number": self.attempt_number,
        }
