"""Number guessing game."""

from __future__ import annotations

import argparse
import random
from enum import Enum


class Hint(Enum):
    """Feedback for a guess."""

    TOO_HIGH = "Enter a small value: "
    TOO_LOW = "Enter a large value: "
    CORRECT = "Correct"


class GuessGame:
    """Holds a secret number and scores guesses against it."""

    def __init__(self, secret: int | None = None) -> None:
        self.secret = random.randint(1, 100) if secret is None else secret
        self.attempts = 0
        self.solved = False

    def guess(self, value: int) -> Hint:
        """Score a guess and count it as an attempt."""
        self.attempts += 1
        if value > self.secret:
            return Hint.TOO_HIGH
        if value < self.secret:
            return Hint.TOO_LOW
        self.solved = True
        return Hint.CORRECT


def main(argv: list[str] | None = None) -> int:
    """Play the guessing game on standard input."""
    argparse.ArgumentParser(description="Guess a number between 1 and 100.").parse_args(
        argv
    )
    game = GuessGame()
    print("Welcome to no. guess game")
    print("Enter a number between 1 to 100: ")
    while not game.solved:
        try:
            line = input()
        except EOFError:
            break
        try:
            value = int(line.strip())
        except ValueError:
            continue
        hint = game.guess(value)
        if hint is Hint.CORRECT:
            print(f"You have guessed it in {game.attempts} attempts")
        else:
            print(hint.value)
    print("Thank you for playing")
    return 0