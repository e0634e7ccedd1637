import logging
from typing import Optional

import click

from guessgame.core.config import Config
from guessgame.core.exceptions import InputStreamFailed, InvalidConfiguration
from guessgame.core.game import Game
from guessgame.core.secret import generate_secret, make_rng

log = logging.getLogger("guessgame.cli.game")


class GameCommand:
    def play(self, seed: Optional[int] = None) -> int:
        """Play a round of guess the number"""
        log.debug(f"play: (seed={seed})")

        if seed is None:
            try:
                seed = Config().seed
            except InvalidConfiguration as e:
                click.secho(str(e), fg="red", err=True)
                return 1

        game = Game(generate_secret(make_rng(seed)))

        try:
            game.play()
        except InputStreamFailed as e:
            click.secho(str(e), fg="red", err=True)
            return 1

        return 0
