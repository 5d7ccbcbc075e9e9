# starterbox

A collection of classic beginner programs as a small Python library, with a
few interactive console programs on top. It has no dependencies beyond the
standard library.

## Install

```
pip install .
pip install ".[test]"   # with pytest for the test suite
```

## What is inside

- `starterbox.sorting`: `shell_sort`, `bubble_sort` and `reversed_list`, each
  returning a new list.
- `starterbox.searching`: `binary_search` (on a sorted sequence) and
  `linear_search` return an index or `None`; `largest` returns the largest
  value, never less than 0.
- `starterbox.arithmetic`: `calculate(op, a, b)` for `+ - * /` on integers
  (division truncates toward zero; any other operator raises
  `UnknownOperatorError`), `fib`, `fibonacci` (a generator), `fibonacci_sum`,
  `factorial`, `binomial`, `pascal_rows`, `reverse_digits`,
  `reverse_five_digits`, `is_palindrome`, `armstrong_numbers` (a generator)
  and `multiplication_table`.
- `starterbox.finance`: `compound_interest`, `simple_interest` (8% above 10
  years, 7% for 5 to 9, otherwise 5%) and `electricity_bill` (tiered rate plus
  a surcharge, truncated to whole units).
- `starterbox.geometry`: `parallelogram_area`, `trapezoid_area`,
  `rhombus_area`, `ellipse_area` and `sphere_area`, with pi taken as 3.14 and
  results truncated to whole numbers.
- `starterbox.matrix`: `multiply` and `transpose` on lists of rows; mismatched
  shapes raise `ValueError`.
- `starterbox.text`: `swap_ascii_case`.
- `starterbox.grades`: the `Student` dataclass with `average()`, `averages`,
  and `marks_verdict`, which knows the marks 100, 90, 80 and 70 and raises
  `ValueError` for any other.
- `starterbox.patterns`: `heart`, `hollow_square`, `x_pattern`, `pyramid`,
  `rhombus`, `butterfly`, `spaced_butterfly`, `inverted_half_pyramid` and
  `number_half_pyramid`, each returning the pattern as a string.
- `starterbox.linkedlist`: `DoublyLinkedList` with `insert_first`, `append`,
  `insert_after`, `pop_first`, `pop_last`, `delete_after`, `find`, iteration
  in both directions and `len()`.
- `starterbox.polynomial`: `Term` and `Polynomial`, which keeps terms ordered
  by ascending power and prints them as `3X^1 + 2X^4`.
- `starterbox.guessgame`: `GuessGame` and the `Hint` enum.
- `starterbox.tictactoe`: `Board`, `Game` and `CellTakenError`. A win is a
  full row or column; diagonals do not count.
- `starterbox.hangman`: `Hangman`, `decrypt` and `random_word`.

## Examples

```python
from starterbox.sorting import shell_sort
from starterbox.searching import binary_search
from starterbox.arithmetic import calculate
from starterbox.patterns import pyramid

print(shell_sort([9, 8, 3, 7, 5]))          # [3, 5, 7, 8, 9]
print(binary_search([2, 3, 4, 10, 40], 10))  # 3
print(calculate("/", -7, 2))                 # -3
print(pyramid(3), end="")
```

```python
from starterbox.tictactoe import Game

game = Game("alice", "bob")
for row, col in [(0, 0), (1, 0), (0, 1), (1, 1)]:
    game.play(row, col)
print(game.play(0, 2))   # alice
```

## Console programs

Each reads from standard input and writes to standard output.

```
starterbox-linkedlist    # menu-driven doubly linked list of integers
starterbox-polynomial    # read a term count and coefficient/exponent pairs, print the polynomial
starterbox-guess         # guess a number between 1 and 100
starterbox-tictactoe     # two-player tic-tac-toe
starterbox-hangman       # guess the hidden website name
```

## What it does not do

The console programs keep everything in memory: nothing is saved between
runs, and the games have no computer opponent or graphical screen.

## Tests

```
pytest
```