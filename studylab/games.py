"""Small console games: rock-paper-scissors, up-and-down, hangman and tic-tac-toe."""

from __future__ import annotations

import argparse
import enum
import random
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

ROCK, SCISSORS, PAPER = "r", "s", "p"
_BEATS = {(ROCK, SCISSORS), (SCISSORS, PAPER), (PAPER, ROCK)}
_BY_NUMBER = {0: PAPER, 1: ROCK, 2: SCISSORS}

WORDS = ("python", "house", "century")
DEFAULT_LIVES = 5
GUESS_LOW, GUESS_HIGH = 100, 200


class Outcome(enum.Enum):
    """The result of one round of rock-paper-scissors, for the player."""

    WIN = "Win"
    DRAW = "Draw"
    LOSE = "Lose"


def judge(mine: str, computer: str) -> Outcome:
    """Decide a round; anything other than a winning or equal choice loses."""
    if (mine, computer) in _BEATS:
        return Outcome.WIN
    if mine == computer:
        return Outcome.DRAW
    return Outcome.LOSE


def cyclic_choice(round_number: int) -> str:
    """Return the computer's choice in a fixed rock, scissors, paper cycle."""
    return _BY_NUMBER[round_number % 3]


def random_choice(rng: Optional[random.Random] = None) -> str:
    """Return a random choice for the computer."""
    source = rng if rng is not None else random
    return _BY_NUMBER[source.randrange(3)]


def _parse_score(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


@dataclass
class Scoreboard:
    """Each player's best score, kept as alternating name and score lines."""

    scores: dict[str, int] = field(default_factory=dict)

    @classmethod
    def load(cls, path: PathLike) -> "Scoreboard":
        """Read a scoreboard; a missing file gives an empty one."""
        try:
            lines = Path(path).read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return cls()
        return cls({name: _parse_score(value) for name, value in zip(lines[0::2], lines[1::2])})

    def save(self, path: PathLike) -> None:
        with open(path, "w", encoding="utf-8") as handle:
            for name, score in self.scores.items():
                handle.write(f"{name}\n{score}\n")

    def best(self, name: str) -> int:
        """Return the player's best score, 0 for a new player."""
        return self.scores.get(name, 0)

    def record(self, name: str, score: int) -> int:
        """Keep ``score`` if it beats the player's best; return the best."""
        best = max(self.best(name), score)
        self.scores[name] = best
        return best


class Hint(enum.Enum):
    """What the secret number is, compared with a guess."""

    HIGHER = "The number is bigger than your guess."
    LOWER = "The number is smaller than your guess."
    CORRECT = "Correct."


def compare_guess(guess: int, secret: int) -> Hint:
    if guess < secret:
        return Hint.HIGHER
    if guess > secret:
        return Hint.LOWER
    return Hint.CORRECT


class Hangman:
    """Guess a word one letter at a time before the lives run out."""

    def __init__(self, word: str, lives: int = DEFAULT_LIVES) -> None:
        if not word:
            raise ValueError("the word must not be empty")
        if lives <= 0:
            raise ValueError("lives must be positive")
        self.word = word
        self.lives = lives
        self._revealed = [False] * len(word)

    def guess(self, letter: str) -> bool:
        """Reveal the first hidden place holding ``letter``; lose a life on a miss."""
        if self.won() or self.lost():
            raise ValueError("the game is over")
        if len(letter) != 1:
            raise ValueError("guess one letter at a time")
        for i, (char, shown) in enumerate(zip(self.word, self._revealed)):
            if char == letter and not shown:
                self._revealed[i] = True
                return True
        if letter in self.word:
            return True
        self.lives -= 1
        return False

    def masked(self) -> str:
        return "".join(c if shown else "_" for c, shown in zip(self.word, self._revealed))

    def won(self) -> bool:
        return all(self._revealed)

    def lost(self) -> bool:
        return self.lives <= 0


def choose_word(rng: Optional[random.Random] = None) -> str:
    source = rng if rng is not None else random
    return WORDS[source.randrange(len(WORDS))]


EMPTY_MARK = "*"
PLAYER_MARKS = ("O", "X")


def _empty_grid() -> list[list[str]]:
    return [[EMPTY_MARK] * 3 for _ in range(3)]


@dataclass
class TicTacToe:
    """A 3x3 board; player 1 plays O and moves first, player 2 plays X."""

    cells: list[list[str]] = field(default_factory=_empty_grid)
    turn: str = PLAYER_MARKS[0]

    def play(self, row: int, col: int) -> str:
        """Put the current player's mark on a free square and return the mark."""
        if self.winner() is not None or self.is_full():
            raise ValueError("the game is over")
        if not (0 <= row < 3 and 0 <= col < 3):
            raise IndexError(f"no square at ({row}, {col})")
        if self.cells[row][col] != EMPTY_MARK:
            raise ValueError(f"square ({row}, {col}) is taken")
        mark = self.turn
        self.cells[row][col] = mark
        self.turn = PLAYER_MARKS[1] if mark == PLAYER_MARKS[0] else PLAYER_MARKS[0]
        return mark

    def winner(self) -> Optional[str]:
        """Return the mark holding a full line, or None."""
        grid = self.cells
        lines = [list(row) for row in grid]
        lines += [[grid[r][c] for r in range(3)] for c in range(3)]
        lines.append([grid[i][i] for i in range(3)])
        lines.append([grid[i][2 - i] for i in range(3)])
        for line in lines:
            if line[0] != EMPTY_MARK and all(mark == line[0] for mark in line):
                return line[0]
        return None

    def is_full(self) -> bool:
        return all(mark != EMPTY_MARK for row in self.cells for mark in row)

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.cells)


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _play_rps(scores_path: PathLike, rng: random.Random) -> None:
    name = ""
    while not name:
        words = _ask("Enter your name: ").split()
        name = words[0] if words else ""
    board = Scoreboard.load(scores_path)
    print("Welcome back." if name in board.scores else "New player.")
    past_best = board.best(name)
    score = 0
    try:
        while True:
            mine = _ask("Choose rock (r), scissors (s) or paper (p); q quits: ")[:1]
            computer = random_choice(rng)
            print(f"Your choice: {mine}")
            print(f"Computer's choice: {computer}")
            outcome = judge(mine, computer)
            print(outcome.value)
            if outcome is Outcome.WIN:
                score += 1
            if outcome is Outcome.LOSE:
                print(f"Your score: {score}")
                print(f"Your past best: {past_best}")
                break
            print(f"Current score: {score}")
    except EOFError:
        pass
    board.record(name, score)
    board.save(scores_path)


def _play_updown(rng: random.Random) -> None:
    secret = rng.randint(GUESS_LOW, GUESS_HIGH)
    while True:
        text = _ask(f"Enter a whole number from {GUESS_LOW} to {GUESS_HIGH}: ")
        try:
            guess = int(text)
        except ValueError:
            print("That is not a whole number.")
            continue
        hint = compare_guess(guess, secret)
        print(hint.value)
        if hint is Hint.CORRECT:
            return


def _play_hangman(rng: random.Random) -> None:
    game = Hangman(choose_word(rng))
    print(game.masked())
    while not (game.won() or game.lost()):
        letter = _ask("[Hangman] Enter one letter: ")
        try:
            hit = game.guess(letter)
        except ValueError as error:
            print(error)
            continue
        print("Correct!" if hit else "Wrong!")
        print(game.masked())
        print(f"life:{game.lives}")
    print("You won!" if game.won() else "You lost!")


def _play_tictactoe() -> None:
    game = TicTacToe()
    print("TicTacToe")
    print(game.render())
    while True:
        player = PLAYER_MARKS.index(game.turn) + 1
        text = _ask(f"Player [{player}], enter a row and a column: ")
        try:
            row, col = (int(part) for part in text.split())
            game.play(row, col)
        except (ValueError, IndexError) as error:
            print(f"Invalid move: {error}")
            continue
        print(game.render())
        mark = game.winner()
        if mark is not None:
            print(f"Player [{PLAYER_MARKS.index(mark) + 1}] wins.")
            return
        if game.is_full():
            print("Draw.")
            return


def main(argv: Optional[list[str]] = None) -> int:
    """Play one of the console games."""
    parser = argparse.ArgumentParser(description="Small console games.")
    parser.add_argument("game", choices=("rps", "updown", "hangman", "tictactoe"))
    parser.add_argument("--scores", default="user.txt", help="rock-paper-scissors score file")
    args = parser.parse_args(argv)
    rng = random.Random()
    try:
        if args.game == "rps":
            _play_rps(args.scores, rng)
        elif args.game == "updown":
            _play_updown(rng)
        elif args.game == "hangman":
            _play_hangman(rng)
        else:
            _play_tictactoe()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())