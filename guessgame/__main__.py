import logging
import os
import sys
from typing import Optional

import click
import fire

from guessgame.cli.config import ConfigCommand
from guessgame.cli.game import GameCommand

# Init logging
logging.basicConfig(level=os.environ.get("LOGLEVEL", "INFO").upper())

log = logging.getLogger("guessgame.main")


class GuessCLI:
    def play(self, seed: Optional[int] = None) -> int:
        """Play a round of guess the number"""
        return COMMANDS["game"].play(seed=seed)

    def config(self):
        return COMMANDS.get("config")


COMMANDS = {
    "game": GameCommand(),
    "config": ConfigCommand(),
    "cli": GuessCLI(),
}


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    # a bare invocation plays a round
    if len(argv) == 0:
        argv = ["play"]

    log.debug(f"main: {argv}")

    try:
        # if the command returns an int, then we serialize it as none to prevent fire from printing it
        # (this does not change the actual return value, so it's still good to use as an exit code)
        ret = fire.Fire(COMMANDS["cli"], command=argv, serialize=lambda r: None if isinstance(r, int) else r)

        if isinstance(ret, int):
            sys.exit(ret)

    except KeyboardInterrupt:
        click.secho("\n[Ctrl-C] Aborting.", fg="red")
        sys.exit(2)


if __name__ == "__main__":
    main()
