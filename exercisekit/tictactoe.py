"""Two-player tic-tac-toe on the console."""

from __future__ import annotations

from typing import Optional, Sequence

TITLE = "Tic Tac Toe v1.0"
PLAYERS = ("X", "O")
_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (6, 4, 2),
)


class Board:
    """A 3x3 board whose free cells show their numbers 1 to 9."""

    def __init__(self) -> None:
        self.cells = [str(n) for n in range(1, 10)]

    def place(self, cell: int, player: str) -> None:
        """Mark ``cell`` (1-9) for ``player``."""
        if player not in PLAYERS:
            raise ValueError(f"player must be one of {PLAYERS}, got {player!r}")
        if not 1 <= cell <= 9:
            raise ValueError(f"field must be between 1 and 9, got {cell}")
        if self.cells[cell - 1] in PLAYERS:
            raise ValueError(f"field {cell} is already taken")
        self.cells[cell - 1] = player

    def winner(self) -> Optional[str]:
        """The player holding a full row, column or diagonal, X checked first."""
        for player in PLAYERS:
            if any(all(self.cells[i] == player for i in line) for line in _LINES):
                return player
        return None

    def is_full(self) -> bool:
        return all(cell in PLAYERS for cell in self.cells)

    def render(self) -> str:
        return "\n".join(" ".join(self.cells[row : row + 3]) for row in range(0, 9, 3))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game, reading moves from standard input."""
    board = Board()
    player = PLAYERS[0]
    print(TITLE)
    print(board.render())
    while True:
        try:
            raw = input("Press the number or the field : ")
        except EOFError:
            return 1
        try:
            cell = int(raw)
        except ValueError:
            print("field must be a number between 1 and 9 !!")
            continue
        try:
            board.place(cell, player)
        except ValueError as exc:
            print(f"{exc} !!")
            continue
        print(TITLE)
        print(board.render())
        winner = board.winner()
        if winner is not None:
            print(f"{winner} wins !!")
            return 0
        if board.is_full():
            print("it's draw !!")
            return 0
        player = PLAYERS[1] if player == PLAYERS[0] else PLAYERS[0]