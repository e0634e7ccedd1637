import configparser
import json
import logging
import os
from pathlib import Path
from typing import Optional

import appdirs

from guessgame import __name__ as pkg_name
from guessgame.core.exceptions import InvalidConfiguration

log = logging.getLogger("guessgame.core.config")


class Config:
    _env_vars = {
        "GUESSGAME_SEED": "seed",
    }

    def __init__(self):
        self.config_path = self.get_config_path()

        parser = configparser.ConfigParser()
        parser.optionxform = str
        try:
            parser.read(self.config_path)
        except configparser.Error as e:
            raise InvalidConfiguration(f"could not parse {self.config_path}: {e}")

        self.config = parser
        if not self.config.has_section("game"):
            self.config.add_section("game")

        # Load environment variables
        self._env_overrides()

    def _env_overrides(self):
        """
        For each environment variable specified in _env_vars, check if it exists
        and if so, add it to the config under the "game" section.
        """
        for env_var, config_key in self._env_vars.items():
            env_value = os.getenv(env_var)
            if not env_value:
                continue

            log.debug(f"overriding '{config_key}' from {env_var}")
            self.config["game"][config_key] = env_value

    def __getitem__(self, key):
        return self.config[key]

    def __contains__(self, key):
        return key in self.config

    @property
    def seed(self) -> Optional[int]:
        seed = self.config["game"].get("seed")
        if seed is None or seed.strip() == "":
            return None

        try:
            return int(seed)
        except ValueError:
            raise InvalidConfiguration(f"seed must be an integer, got '{seed}'")

    def as_json(self, pretty=False) -> str:
        data = {}
        for section in self.config.sections():
            data[section] = {}
            for k, v in self.config.items(section):
                data[section][k] = v

        if pretty:
            return json.dumps(data, sort_keys=True, indent=4)

        return json.dumps(data)

    def as_ini(self) -> str:
        lines = []
        for section in self.config.sections():
            lines.append(f"[{section}]")
            for k, v in self.config.items(section):
                lines.append(f"{k} = {v}")

        return "\n".join(lines)

    @staticmethod
    def get_config_path() -> Path:
        return Path(appdirs.user_config_dir(appname=pkg_name)) / "config"
