import enum
import logging
import re
from typing import Optional, TextIO

import click

from guessgame.core.exceptions import InputStreamFailed, InvalidGuess

log = logging.getLogger("guessgame.core.game")

# unsigned 32-bit decimal, optionally prefixed with a plus sign
GUESS_PATTERN = re.compile(r"\+?[0-9]+")
GUESS_MAX = 2**32 - 1


class Outcome(enum.Enum):
    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


def parse_guess(text: str) -> int:
    stripped = text.strip()

    # int() alone also accepts underscores and non-ASCII digits
    if not GUESS_PATTERN.fullmatch(stripped):
        raise InvalidGuess(f"'{stripped}' is not an unsigned integer", text=text)

    guess = int(stripped)
    if guess > GUESS_MAX:
        raise InvalidGuess(f"'{stripped}' is out of range", text=text)

    return guess


def compare(guess: int, secret: int) -> Outcome:
    if guess < secret:
        return Outcome.LESS

    if guess > secret:
        return Outcome.GREATER

    return Outcome.EQUAL


class Game:
    FEEDBACK = {
        Outcome.LESS: ("Too small!", "yellow"),
        Outcome.GREATER: ("Too big!", "yellow"),
        Outcome.EQUAL: ("You win!", "green"),
    }

    def __init__(self, secret: int, input_stream: Optional[TextIO] = None):
        self._secret = secret

        if input_stream is None:
            input_stream = click.get_text_stream("stdin")

        self.input_stream = input_stream

    @property
    def secret(self) -> int:
        return self._secret

    def read_line(self) -> str:
        try:
            line = self.input_stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamFailed("Failed to read line") from e

        # readline() only returns an empty string at end of stream
        if line == "":
            raise InputStreamFailed("Failed to read line")

        return line

    def turn(self, line: str) -> Optional[Outcome]:
        """
        Processes a single line of input against the secret.
        Returns the outcome of the comparison, or None if the line did not hold a guess.
        """
        try:
            guess = parse_guess(line)
        except InvalidGuess as e:
            log.debug(f"discarding input: {e}")
            return None

        click.echo(f"You guessed: {guess}")

        outcome = compare(guess, self.secret)
        message, color = self.FEEDBACK[outcome]
        click.secho(message, fg=color)
        return outcome

    def play(self) -> int:
        """
        Runs the prompt loop until a guess matches the secret, and returns the winning guess.
        Raises InputStreamFailed if the input stream ends or errors before that.
        """
        log.debug("play")
        click.echo("Guess the number!")

        while True:
            click.echo("Please input your guess.")
            line = self.read_line()

            if self.turn(line) is Outcome.EQUAL:
                return self.secret
