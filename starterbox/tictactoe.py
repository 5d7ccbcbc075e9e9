"""Two-player tic-tac-toe on a 3x3 board."""

from __future__ import annotations

import argparse

EMPTY = "_"
MARKS = ("X", "O")
SIZE = 3


class CellTakenError(ValueError):
    """Raised when a mark is placed on a cell that is already filled."""


class Board:
    """A 3x3 grid of cells, each empty or holding X or O."""

    def __init__(self) -> None:
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self._cells[row][col]

    def place(self, row: int, col: int, mark: str) -> None:
        """Put mark on the empty cell at row, col."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError("Invalid index")
        if mark not in MARKS:
            raise ValueError(f"mark must be one of {MARKS}")
        if self._cells[row][col] != EMPTY:
            raise CellTakenError("Already filled")
        self._cells[row][col] = mark

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return the coordinates of every empty cell, row by row."""
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, cell in enumerate(row)
            if cell == EMPTY
        ]

    def winner(self) -> str | None:
        """Return the mark filling a whole row or column, rows checked first.

        Diagonals do not count as a win.
        """
        for line in (*self._cells, *zip(*self._cells)):
            first = line[0]
            if first != EMPTY and all(cell == first for cell in line):
                return first
        return None

    def render(self) -> str:
        """Return the board as text, one line per row."""
        return "".join(
            "\t\t\t" + "".join(f"[{cell:>3} ] " for cell in row) + "\n"
            for row in self._cells
        )


class Game:
    """A match between two named players; the first plays X."""

    def __init__(self, player1: str, player2: str) -> None:
        self.players = (player1, player2)
        self.board = Board()
        self._turn = 0

    def current_player(self) -> str:
        """Return the name of the player whose turn it is."""
        return self.players[self._turn]

    @property
    def winner_name(self) -> str | None:
        """The name of the winning player, if any."""
        mark = self.board.winner()
        return None if mark is None else self.players[MARKS.index(mark)]

    @property
    def over(self) -> bool:
        """True once someone has won or the board is full."""
        return self.winner_name is not None or not self.board.empty_cells()

    def play(self, row: int, col: int) -> str | None:
        """Place the current player's mark, pass the turn and return the winner's name, if any."""
        if self.over:
            raise RuntimeError("the game is over")
        self.board.place(row, col, MARKS[self._turn])
        self._turn ^= 1
        return self.winner_name


def _read_move(game: Game) -> tuple[int, int]:
    while True:
        answer = input(
            f"\n *** {game.current_player()} , Enter value (00-22) separated by space :"
        )
        parts = answer.split()
        try:
            row, col = (int(part) for part in parts)
        except ValueError:
            print("\n *** ERROR : Invalid index, try again !!!")
            continue
        return row, col


def main(argv: list[str] | None = None) -> int:
    """Play tic-tac-toe between two players on standard input."""
    argparse.ArgumentParser(description="Two-player tic-tac-toe.").parse_args(argv)
    try:
        player1 = input("\nEnter name of user1 :")
        player2 = input("Enter name of user2 :")
        game = Game(player1, player2)
        while True:
            print("\n\n\n")
            print(game.board.render(), end="")
            if game.winner_name is not None:
                print(
                    f"\n *** Congratulations Dear {game.winner_name} ,\n"
                    "     You have won the game . !!!!"
                )
                return 0
            if not game.board.empty_cells():
                print("\n *** Game Over .")
                return 0
            while True:
                row, col = _read_move(game)
                try:
                    game.play(row, col)
                except IndexError:
                    print("\n *** ERROR : Invalid index, try again !!!")
                except CellTakenError:
                    print("\n *** ERROR : Already filled,try again !!!")
                else:
                    break
    except EOFError:
        return 0