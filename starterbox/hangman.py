"""Hangman: guess a hidden website name one letter at a time."""

from __future__ import annotations

import argparse
import random

CHANCES = 6

WORDS = (
    "N~mqOlJ^tZletXodeYgs",
    "gCnDIfFQe^CdP^^B{hZpeLA^hv",
    "7urtrtwQv{dt`>^}FaR]i]XUug^GI",
    "aSwfXsxOsWAlXScVQmjAWJG",
    "cruD=idduvUdr=gmcauCmg]",
    "BQt`zncypFVjvIaTl]u=_?Aa}F",
    "iLvkKdT`yu~mWj[^gcO|",
    "jSiLyzJ=vPmnv^`N]^>ViAC^z_",
    "xo|RqqhO|nNstjmzfiuoiFfhwtdh~",
    "OHkttvxdp|[nnW]Drgaomdq",
)

# (mistakes needed, body slot, character)
_PARTS = (
    (1, 0, "("),
    (1, 1, ")"),
    (2, 2, "/"),
    (3, 3, "|"),
    (4, 4, "\\"),
    (5, 5, "/"),
    (6, 6, "\\"),
)


def decrypt(code: str) -> str:
    """Recover a word hidden in every third character of code."""
    if len(code) < 3:
        raise ValueError("code must be at least three characters long")
    shift = (len(code) - 3) // 3 + 2
    return "".join(
        chr(ord(ch) + pos - 1 - shift) for pos, ch in enumerate(code) if pos % 3 == 2
    )


def random_word(rng: random.Random | None = None) -> str:
    """Return one of the built-in words, chosen at random."""
    rng = rng or random.Random()
    return decrypt(WORDS[rng.randrange(len(WORDS))])


class Hangman:
    """The state of one hangman round."""

    def __init__(self, word: str, chances: int = CHANCES) -> None:
        if not word:
            raise ValueError("word must not be empty")
        self.word = word
        self.chances = chances
        self.false_letters: list[str] = []
        self._revealed: set[str] = set()

    @property
    def mistakes(self) -> int:
        """Number of wrong guesses so far."""
        return len(self.false_letters)

    def guess(self, letter: str) -> bool:
        """Try a letter; reveal it and return True if the word holds it, else count a mistake."""
        if len(letter) != 1:
            raise ValueError("guess exactly one character")
        if letter in self.word:
            self._revealed.add(letter)
            return True
        self.false_letters.append(letter)
        return False

    def masked(self) -> str:
        """Return the word with unguessed letters shown as underscores."""
        return "".join(ch if ch in self._revealed else "_" for ch in self.word)

    def won(self) -> bool:
        """True when every letter has been revealed."""
        return all(ch in self._revealed for ch in self.word)

    def lost(self) -> bool:
        """True when the mistakes have used up every chance without a win."""
        return not self.won() and self.mistakes >= self.chances

    def render_body(self) -> str:
        """Return the gallows with as much of the body as the mistakes have drawn."""
        body = [" "] * 7
        for needed, slot, part in _PARTS:
            if self.mistakes >= needed:
                body[slot] = part
        return (
            f"\tMistakes :{self.mistakes}\n"
            "\t _________\n"
            "\t|         |\n"
            f"\t|        {body[0]} {body[1]}\n"
            f"\t|        {body[2]}{body[3]}{body[4]}\n"
            f"\t|        {body[5]} {body[6]}\n"
            "\t|             \n"
            "\t|             "
        )


_RULES = (
    "\n\t Be aware you can be hanged!!."
    "\n\n\t Rules : "
    "\n\t - Maximum 6 mistakes are allowed."
    "\n\t - All alphabet are in lower case."
    "\n\t - All words are name of very popular Websites. eg. Google"
    "\n\t - If you enjoy continue, otherwise close it."
    "\n\t Syntax : Alphabet"
    "\n\t Example : a \n"
)


def _spaced(text: str) -> str:
    return "\t" + "".join(f"{ch} " for ch in text) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Play one round of hangman on standard input."""
    argparse.ArgumentParser(description="Guess the hidden website name.").parse_args(
        argv
    )
    print(_RULES)
    game = Hangman(random_word())
    try:
        while not (game.won() or game.lost()):
            print("\n")
            print(game.render_body())
            print()
            letters = "".join(game.false_letters) or "None"
            print(f"\tFalse Letters : {letters}\n")
            print(_spaced(game.masked()))
            line = input("\tGive me a alphabet in lower case : ")
            if not line:
                continue
            game.guess(line[0])
    except EOFError:
        print(f"\n\tWord was {game.word}")
        return 0
    if game.won():
        print()
        print(_spaced(game.masked()))
        print(f"\tCongrats! You have won : {game.word}\n")
    else:
        print()
        print(game.render_body())
        print(f"\n\tBetter try next time. Word was {game.word}\n")
    return 0