import logging

import click

from guessgame.core.config import Config
from guessgame.core.exceptions import InvalidConfiguration

log = logging.getLogger("guessgame.cli.config")


class ConfigCommand:
    def path(self) -> int:
        log.debug("path")
        click.echo(Config.get_config_path())
        return 0

    def show(self, json=False) -> int:
        # alias for the view command
        log.debug(f"show (json={json})")
        return self.view(json=json)

    def view(self, json=False) -> int:
        log.debug(f"view (json={json})")
        try:
            config = Config()
        except InvalidConfiguration as e:
            click.secho(str(e), fg="red", err=True)
            return 1

        if json:
            click.echo(config.as_json(pretty=True))
            return 0

        click.echo(config.as_ini())
        return 0
