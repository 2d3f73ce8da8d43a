"""A match-taking game against a computer that never loses from 21 matches."""

__all__ = ["IllegalMove", "MatchGame"]


class IllegalMove(ValueError):
    """Raised for a take outside 1 to 4, more than remain, or after the game."""


class MatchGame:
    """Players alternately take 1 to 4 matches; whoever takes the last loses.

    The player moves first and the computer answers with ``5 - count``.
    """

    def __init__(self, matches: int = 21) -> None:
        if matches < 1:
            raise ValueError("the game needs at least one match")
        self.remaining = matches
        self.winner: str | None = None

    @property
    def finished(self) -> bool:
        return self.winner is not None

    def take(self, count: int) -> int:
        """Take ``count`` matches and return how many the computer takes in reply.

        Returns 0 when the player's take ends the game.
        """
        if self.finished:
            raise IllegalMove("the game is over")
        if not 1 <= count <= 4 or count > self.remaining:
            raise IllegalMove(f"cannot take {count} of {self.remaining} matches")
        self.remaining -= count
        if self.remaining == 0:
            self.winner = "computer"
            return 0
        reply = min(5 - count, self.remaining)
        self.remaining -= reply
        if self.remaining == 0:
            self.winner = "player"
        return reply