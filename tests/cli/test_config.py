import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock
from unittest.mock import MagicMock

from guessgame.cli.config import ConfigCommand


class TestConfigCommand(unittest.TestCase):
    def setUp(self):
        self.config_dir = Path(tempfile.mkdtemp())
        (self.config_dir / "config").write_text("[game]\nseed = 1234\n")

        patcher = mock.patch("guessgame.core.config.appdirs.user_config_dir", return_value=str(self.config_dir))
        patcher.start()
        self.addCleanup(patcher.stop)

        env_patcher = mock.patch.dict(os.environ)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        os.environ.pop("GUESSGAME_SEED", None)

    @mock.patch("guessgame.cli.config.click.echo")
    def test_prints_path(self, mock_echo: MagicMock):
        self.assertEqual(0, ConfigCommand().path())
        mock_echo.assert_called_once_with(self.config_dir / "config")

    @mock.patch("guessgame.cli.config.click.echo")
    def test_shows_ini(self, mock_echo: MagicMock):
        self.assertEqual(0, ConfigCommand().show())
        mock_echo.assert_called_once_with("[game]\nseed = 1234")

    @mock.patch("guessgame.cli.config.click.echo")
    def test_views_json(self, mock_echo: MagicMock):
        self.assertEqual(0, ConfigCommand().view(json=True))

        mock_echo.assert_called_once()
        self.assertEqual({"game": {"seed": "1234"}}, json.loads(mock_echo.call_args[0][0]))

    @mock.patch("guessgame.cli.config.click.secho")
    @mock.patch("guessgame.cli.config.click.echo")
    def test_reports_unparseable_file(self, mock_echo: MagicMock, mock_secho: MagicMock):
        (self.config_dir / "config").write_text("seed = 3\n")

        self.assertEqual(1, ConfigCommand().view())
        mock_echo.assert_not_called()
        mock_secho.assert_called_once()
        self.assertTrue(mock_secho.call_args[0][0].startswith("could not parse"))
