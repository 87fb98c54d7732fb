# studylab

A small collection of classic data structures, number exercises and console
games, written to be read, run and tinkered with. It has no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `studylab.array_list.ArrayList`: a list with a fixed capacity (20 by
  default). `append` and `insert` raise `OverflowError` when it is full; bad
  indexes raise `IndexError`, missing items `ValueError`.
- `studylab.linked_list.SinglyLinkedList` and `DoublyLinkedList`. The doubly
  linked list hands out `Position` cursors from `begin()` and `find()`, which
  `insert` and `erase` take; `advance()` and `retreat()` move a cursor.
- `studylab.stack_queue.Stack` and `Queue`, built on `DoublyLinkedList`. Taking
  from an empty one raises `EmptyContainerError`. `is_balanced(text)` checks
  that the round brackets in a string match.
- `studylab.bst.BinarySearchTree`: an unbalanced tree of distinct values; it
  iterates in ascending order and supports `in`.
- `studylab.heap.MinHeap`: a min-heap holding at most `max_size` items
  (20 by default); pushing onto a full heap raises `HeapFullError`. The
  functions `parent`, `left` and `right` give the slot index arithmetic.

```python
from studylab.heap import MinHeap
from studylab.stack_queue import is_balanced

heap = MinHeap([1, 16, 13, 5, 3, 7])
print(heap.pop())             # 1
print(str(heap))              # [3,5,7,13,16,]
print(is_balanced("(()())"))  # True
```

## Exercises

- `studylab.arithmetic`: `calculate`, `is_even`, `round_integer`,
  `round_float`, star patterns (`star_square`, `star_descending`,
  `star_ascending`, `star_pyramid`), `factorial`, `fibonacci`, `gcd`, `lcm`,
  `is_prime`, `sequential_search`, `binary_search`, and `bubble_sort`,
  `insertion_sort` and `selection_sort`, which return new sorted lists.
- `studylab.fraction`: `Fraction`, kept in lowest terms, with `+ - * /` and
  `Fraction.parse("3/5")`; `Matrix` with `+ - *`, which raise
  `ShapeMismatchError` for incompatible shapes.
- `studylab.shop`: a `Cart` of at most ten product ids (`CartFullError` when
  full) whose `listing()` looks up `Product` prices, and a `BankAccount` with up
  to twenty `Transaction`s (`HistoryFullError` beyond that) and a running
  `BankAccount.bank_total()` over all accounts.

```python
from studylab.fraction import Fraction

print(Fraction(3, 5) + Fraction(7, 10))   # 13/10
print(Fraction.parse("3/5") / Fraction(7, 10))  # 6/7
```

## Student records

`studylab.student.Student` holds an id, a one-word name and an address; two
students are equal when their ids are. Records are stored one per line as
`<id> <name> <address>`, read with `read_students(path)` and written with
`write_students(students, path)`.

`studylab.application.Application` is a menu that reads commands from a
stream and keeps up to 20 students in an `ArrayList`:

| Command | Action |
| --- | --- |
| 1 | add a record |
| 2 | delete by id |
| 3 | replace the record with the same id |
| 4 | display a record by id |
| 5 | display all records |
| 6 | empty the list |
| 7 | load records from a file |
| 8 | save records to a file |
| 0 | quit |

## Programs

```
studylab-students                    # the student record menu on the terminal
studylab-games rps [--scores FILE]   # rock-paper-scissors, best scores kept in FILE (default user.txt)
studylab-games updown                # guess a number from 100 to 200
studylab-games hangman               # guess one of a few words, five lives
studylab-games tictactoe             # two players on one terminal
studylab-tetris                      # Tetris in the terminal
```

The game logic is available on its own in `studylab.games` (`judge`,
`Scoreboard`, `compare_guess`, `Hangman`, `TicTacToe`) and in
`studylab.tetris` (`pieces.Block`, `board.Board`, `game.TetrisGame`, which is
advanced by `handle_key` and `tick` without a screen).

In Tetris:

| Key | Action |
| --- | --- |
| left / right | move |
| up | rotate |
| down | move down one row |
| space | hard drop |
| p | pause |
| Esc | quit |

## Limitations

- `studylab-tetris` draws with the standard library's `curses` module. Where
  Python has no `curses` (such as a plain Windows install), the command stops
  with a `RuntimeError`; `TetrisGame` itself still works.
- The Tetris game keeps no high scores, and its score is only shown when the
  game ends.