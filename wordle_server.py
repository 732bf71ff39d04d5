# ============================================================
# Feedback sources: an automated game holding the answer, and a
# human typing feedback at the terminal
# ============================================================

from __future__ import annotations

from wordle_words import WORD_LENGTH, Word, evaluate, parse_outcome

MAX_ATTEMPTS = 6


class WordleError(Exception):
    pass


class GameOver(WordleError):
    pass


class AlreadyGuessed(WordleError):
    pass


class InvalidWord(WordleError):
    pass


class Server:
    def can_guess(self) -> bool:
        raise NotImplementedError

    def submit(self, guess: Word):
        raise NotImplementedError


# ------------------------------------------------------------
# Automated game
# ------------------------------------------------------------

class InMemoryServer(Server):
    def __init__(self, answer: Word, dictionary, max_attempts=MAX_ATTEMPTS):
        if answer not in dictionary:
            raise ValueError(f"Answer '{answer}' is not in the word list.")
        self.answer = answer
        self.dictionary = frozenset(dictionary)
        self.max_attempts = max_attempts
        self.guesses = []

    @property
    def attempts(self) -> int:
        return len(self.guesses)

    def can_guess(self) -> bool:
        return self.attempts < self.max_attempts

    def submit(self, guess: Word):
        if not self.can_guess():
            raise GameOver(f"No attempts left after {self.max_attempts} guesses")
        if guess in self.guesses:
            raise AlreadyGuessed(f"'{guess}' was already guessed")
        if guess not in self.dictionary:
            raise InvalidWord(f"'{guess}' is not in the word list")
        self.guesses.append(guess)
        return evaluate(self.answer, guess)


# ------------------------------------------------------------
# Human feedback
# * = correct, + = present, - = absent, ! = give up
# ------------------------------------------------------------

class InteractiveServer(Server):
    def __init__(self, prompt=input, echo=print):
        self.prompt = prompt
        self.echo = echo

    def can_guess(self) -> bool:
        return True

    def submit(self, guess: Word):
        self.echo(f"Guess: {str(guess).upper()}")
        while True:
            try:
                line = self.prompt("Feedback (* correct, + present, - absent, ! quit): ")
            except EOFError:
                raise GameOver("Input closed") from None
            line = line.strip()
            if "!" in line:
                raise GameOver("Game ended by player")
            if len(line) < WORD_LENGTH:
                self.echo(f"Please enter {WORD_LENGTH} symbols, got {len(line)}.")
                continue
            try:
                return parse_outcome(line[:WORD_LENGTH])
            except ValueError as e:
                self.echo(str(e))
