# ============================================================
# Constraint-tracking Word Solver
# ============================================================

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections import Counter
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from tqdm import tqdm

from wordle_server import (
    GameOver,
    InMemoryServer,
    InteractiveServer,
    WordleError,
)
from wordle_words import (
    WORD_LENGTH,
    Letter,
    Outcome,
    Word,
    format_outcome,
    is_solved,
    load_words,
)

log = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = "words.txt"


class Stumped(WordleError):
    pass


# ------------------------------------------------------------
# Per-letter knowledge
# ------------------------------------------------------------

class PositionState(Enum):
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"

    def inverted(self) -> "PositionState":
        if self is PositionState.YES:
            return PositionState.NO
        if self is PositionState.NO:
            return PositionState.YES
        return self


class Kind(Enum):
    UNKNOWN = "unknown"
    # letter is in the answer; NO marks the slots it cannot occupy
    POSITIONS = "positions"
    # only known through other letters; YES marks the slots it cannot occupy
    ANTI_POSITIONS = "anti_positions"
    ABSENT = "absent"


class LetterState(NamedTuple):
    kind: Kind
    positions: Optional[Tuple[PositionState, ...]] = None

    @classmethod
    def unknown(cls):
        return cls(Kind.UNKNOWN)

    @classmethod
    def absent(cls):
        return cls(Kind.ABSENT)

    @classmethod
    def with_positions(cls, ps):
        return cls(Kind.POSITIONS, tuple(ps))

    @classmethod
    def with_anti_positions(cls, ps):
        return cls(Kind.ANTI_POSITIONS, tuple(ps))

    def set(self, i, value) -> "LetterState":
        ps = list(self.positions)
        ps[i] = value
        return self._replace(positions=tuple(ps))

    def as_positions(self) -> "LetterState":
        """Turn anti-positions into positions: an excluded slot becomes NO."""
        return LetterState.with_positions(p.inverted() for p in self.positions)


def _fresh(value, i, fill=PositionState.MAYBE):
    ps = [fill] * WORD_LENGTH
    ps[i] = value
    return ps


class Constraints:
    """Everything learned so far about the answer, one state per letter.

    Besides the 26 letter states, ``ceilings`` holds an exclusive upper
    bound on how often a letter may occur. It is set when a letter already
    known to be in the answer is marked absent in a guess: the answer then
    holds fewer copies than that guess did.
    """

    def __init__(self):
        self.letters: List[LetterState] = [LetterState.unknown()] * 26
        self.ceilings: Dict[int, int] = {}

    def state_of(self, letter: Letter) -> LetterState:
        return self.letters[letter.index]

    def update(self, guess: Word, outcome) -> None:
        for i, (letter, result) in enumerate(zip(guess, outcome)):
            if result is Outcome.ABSENT:
                self._absent(letter, i, guess.count(letter))
            elif result is Outcome.PRESENT:
                self._present(letter, i)
            else:
                self._correct(letter, i)

    def _absent(self, letter, i, copies):
        j = letter.index
        state = self.letters[j]
        if state.kind is Kind.POSITIONS:
            self.letters[j] = state.set(i, PositionState.NO)
            self.ceilings[j] = min(self.ceilings.get(j, copies), copies)
        elif state.kind is not Kind.ABSENT:
            self.letters[j] = LetterState.absent()

    def _present(self, letter, i):
        j = letter.index
        state = self.letters[j]
        if state.kind is Kind.ABSENT:
            log.warning("'%s' reported present after being reported absent", letter)
            raise Stumped(f"Contradictory feedback: '{letter}' is both absent and present")
        if state.kind is Kind.UNKNOWN:
            self.letters[j] = LetterState.with_positions(_fresh(PositionState.NO, i))
            return
        if state.kind is Kind.ANTI_POSITIONS:
            state = state.as_positions()
        self.letters[j] = state.set(i, PositionState.NO)

    def _correct(self, letter, i):
        j = letter.index
        state = self.letters[j]
        if state.kind is Kind.UNKNOWN:
            state = LetterState.with_positions(_fresh(PositionState.YES, i))
        elif state.kind is Kind.ABSENT:
            # the same guess marked another copy absent, so this is the only one
            state = LetterState.with_positions(_fresh(PositionState.YES, i, PositionState.NO))
        else:
            if state.kind is Kind.ANTI_POSITIONS:
                state = state.as_positions()
            state = state.set(i, PositionState.YES)
        self.letters[j] = state

        for k, other in enumerate(self.letters):
            if k == j:
                continue
            if other.kind is Kind.UNKNOWN:
                self.letters[k] = LetterState.with_anti_positions(_fresh(PositionState.YES, i))
            elif other.kind is Kind.ANTI_POSITIONS:
                self.letters[k] = other.set(i, PositionState.YES)
            elif other.kind is Kind.POSITIONS:
                self.letters[k] = other.set(i, PositionState.NO)

    def is_consistent(self, word: Word) -> bool:
        for i, letter in enumerate(word):
            state = self.letters[letter.index]
            if state.kind is Kind.ABSENT:
                return False
            if state.kind is Kind.POSITIONS and state.positions[i] is PositionState.NO:
                return False
            if state.kind is Kind.ANTI_POSITIONS and state.positions[i] is PositionState.YES:
                return False

        for letter in Letter.LETTERS:
            if self.letters[letter.index].kind is Kind.POSITIONS and letter not in word:
                return False

        for j, ceiling in self.ceilings.items():
            if word.count(Letter.LETTERS[j]) >= ceiling:
                return False

        return True


# ------------------------------------------------------------
# Guess selection
# ------------------------------------------------------------

def most_vowels(pool) -> Word:
    if not pool:
        raise Stumped("No candidates remain")
    return sorted(pool, key=lambda w: (w.distinct_vowels(), w))[-1]


class RandomPolicy:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def __call__(self, pool) -> Word:
        if not pool:
            raise Stumped("No candidates remain")
        # sorted so that a seeded rng replays the same game
        return self.rng.choice(sorted(pool))


POLICIES = {
    "vowels": lambda seed: most_vowels,
    "random": lambda seed: RandomPolicy(random.Random(seed)),
}


# ------------------------------------------------------------
# Game driver
# ------------------------------------------------------------

class Status(Enum):
    SOLVED = "solved"
    FAILED = "failed"
    STUMPED = "stumped"


class GameResult(NamedTuple):
    status: Status
    guesses: List[Tuple[Word, tuple]]

    @property
    def attempts(self) -> int:
        return len(self.guesses)

    @property
    def solved(self) -> bool:
        return self.status is Status.SOLVED


class Solver:
    def __init__(self, dictionary, policy=most_vowels):
        self.pool = set(dictionary)
        self.constraints = Constraints()
        self.policy = policy
        self.history = []

    def guess(self, server):
        """Play one round against ``server`` and narrow the pool.

        returns: (guess, outcome)
        raises:  Stumped when no candidate is left, or the server's own
                 errors (GameOver, AlreadyGuessed, InvalidWord)
        """
        guess = self.policy(self.pool)
        self.pool.discard(guess)

        outcome = server.submit(guess)
        self.history.append((guess, outcome))

        self.constraints.update(guess, outcome)
        self.pool = {w for w in self.pool if self.constraints.is_consistent(w)}
        log.debug("%s %s -> %d candidates", guess, format_outcome(outcome), len(self.pool))

        if not self.pool and not is_solved(outcome):
            raise Stumped(f"No word fits the feedback after {len(self.history)} guesses")
        return guess, outcome

    def solve(self, server, on_round=None) -> GameResult:
        """Guess until solved, stumped or the server stops the game.

        ``on_round(solver)`` is called after every unsolved round.
        AlreadyGuessed and InvalidWord are left to the caller.
        """
        while server.can_guess():
            try:
                _, outcome = self.guess(server)
            except GameOver:
                return GameResult(Status.FAILED, list(self.history))
            except Stumped as e:
                log.warning("%s", e)
                return GameResult(Status.STUMPED, list(self.history))
            if is_solved(outcome):
                return GameResult(Status.SOLVED, list(self.history))
            if on_round is not None:
                on_round(self)
        return GameResult(Status.FAILED, list(self.history))


# ------------------------------------------------------------
# Simulation over a whole dictionary
# ------------------------------------------------------------

def simulate(dictionary, policy_factory=lambda: most_vowels, show_progress=True):
    results = {}
    for answer in tqdm(sorted(dictionary), desc="Games", disable=not show_progress):
        server = InMemoryServer(answer, dictionary)
        results[answer] = Solver(dictionary, policy_factory()).solve(server)
    return results


def summarize(results) -> dict:
    statuses = Counter(r.status for r in results.values())
    solved = [r.attempts for r in results.values() if r.solved]
    return {
        "games": len(results),
        "solved": statuses[Status.SOLVED],
        "failed": statuses[Status.FAILED],
        "stumped": statuses[Status.STUMPED],
        "average_attempts": sum(solved) / len(solved) if solved else 0.0,
        "histogram": dict(sorted(Counter(solved).items())),
    }


# ------------------------------------------------------------
# Main
# ------------------------------------------------------------

def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Solve five-letter word puzzles")
    p.add_argument("--words-file", default=DEFAULT_WORDS_FILE, help="path to words file (one word per line)")
    p.add_argument("--policy", choices=sorted(POLICIES), default="vowels", help="how the next guess is picked")
    p.add_argument("--seed", type=int, default=None, help="seed for the random policy")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--answer", help="play an automated game against this answer")
    mode.add_argument("--simulate", action="store_true", help="play one game for every word in the list")
    p.add_argument("--output", help="with --simulate, write 'word: attempts' lines to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="log every round")
    return p.parse_args(argv)


def _print_game(result: GameResult):
    for n, (guess, outcome) in enumerate(result.guesses, 1):
        print(f"{n}. {str(guess).upper()} {format_outcome(outcome)}")
    print(f"{result.status.value} after {result.attempts} guesses")


def _print_remaining(solver: Solver):
    print(f"{len(solver.pool)} possible words remaining")
    if len(solver.pool) <= 10:
        print("  " + ", ".join(sorted(str(w) for w in solver.pool)))


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        words = load_words(args.words_file)
    except OSError as e:
        raise SystemExit(f"Words file not found: {args.words_file} ({e.strerror})") from None
    if not words:
        raise SystemExit(f"No five-letter words in {args.words_file}")

    make_policy = POLICIES[args.policy]

    if args.simulate:
        results = simulate(words, lambda: make_policy(args.seed))
        summary = summarize(results)
        print(
            f"Games: {summary['games']}, solved: {summary['solved']}, "
            f"failed: {summary['failed']}, stumped: {summary['stumped']}, "
            f"average guesses: {summary['average_attempts']:.2f}"
        )
        for attempts, count in summary["histogram"].items():
            print(f"  {attempts}: {count}")
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                for word, result in results.items():
                    f.write(f"{word}: {result.attempts if result.solved else result.status.value}\n")
        return 0 if summary["stumped"] == 0 else 1

    solver = Solver(words, make_policy(args.seed))

    if args.answer:
        answer = Word.try_from_str(args.answer)
        if answer is None or answer not in words:
            print(f"'{args.answer}' is not in {args.words_file}", file=sys.stderr)
            return 2
        result = solver.solve(InMemoryServer(answer, words))
        _print_game(result)
        return 0 if result.solved else 1

    result = solver.solve(InteractiveServer(), on_round=_print_remaining)
    print(f"{result.status.value} after {result.attempts} guesses")
    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
