"""JSON files under the app directory."""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .config import Configuration, Options, default_config
from .frequency import FrequencyTable
from .ordered import ParseError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
OPTIONS_FILE = "options.json"
FREQUENCY_FILE = "goto_frequency.json"
COMMAND_FILE = "cmd-exec"


class ConfigError(Exception):
    """A persisted file exists but cannot be read."""

    def __init__(self, path: Path, cause: str):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


class FileStore:
    """Reads and writes the navigator's files.

    Missing or blank files load as defaults; malformed ones raise
    ``ConfigError`` rather than being overwritten.
    """

    def __init__(self, app_dir: Path):
        self.app_dir = Path(app_dir)
        self.config_path = self.app_dir / CONFIG_FILE
        self.options_path = self.app_dir / OPTIONS_FILE
        self.frequency_path = self.app_dir / FREQUENCY_FILE
        self.command_path = self.app_dir / COMMAND_FILE

    def setup(self) -> None:
        self.app_dir.mkdir(parents=True, exist_ok=True)

    def _read(self, path: Path) -> str:
        if not path.exists():
            return ""
        return path.read_text(encoding="utf-8")

    def _write(self, path: Path, content: str) -> None:
        self.setup()
        path.write_text(content, encoding="utf-8")
        logger.debug("wrote %s", path)

    # -- configuration -----------------------------------------------------

    def load_config(self, create: bool = True) -> Configuration:
        """Load config.json.

        A missing or blank file yields the default configuration, which is
        also written to disk unless ``create`` is False.
        """
        text = self._read(self.config_path)
        if not text.strip():
            config = default_config()
            if not create:
                return config
            self.save_config(config)
            logger.info("created default config at %s", self.config_path)
            return config
        try:
            return Configuration.from_json(text)
        except ParseError as e:
            raise ConfigError(self.config_path, str(e)) from e

    def save_config(self, config: Configuration) -> None:
        self._write(self.config_path, config.to_json() + "\n")

    # -- options -----------------------------------------------------------

    def load_options(self) -> Options:
        text = self._read(self.options_path)
        if not text.strip():
            return Options()
        try:
            return Options.model_validate_json(text)
        except ValidationError as e:
            raise ConfigError(self.options_path, _first_error(e)) from e

    def save_options(self, options: Options) -> None:
        self._write(self.options_path, options.model_dump_json(by_alias=True, indent=2) + "\n")

    # -- frequency ---------------------------------------------------------

    def load_frequency(self) -> FrequencyTable:
        text = self._read(self.frequency_path)
        if not text.strip():
            return FrequencyTable()
        try:
            return FrequencyTable.model_validate_json(text)
        except ValidationError as e:
            raise ConfigError(self.frequency_path, _first_error(e)) from e

    def save_frequency(self, frequency: FrequencyTable) -> None:
        self._write(self.frequency_path, frequency.model_dump_json(indent=2) + "\n")

    # -- shell hand-off ----------------------------------------------------

    def write_command(self, command: str) -> None:
        """Write the line the shell wrapper sources after the navigator exits."""
        self._write(self.command_path, command)

    def clear_command(self) -> None:
        self.command_path.unlink(missing_ok=True)


def _first_error(e: ValidationError) -> str:
    errors = e.errors()
    if not errors:
        return str(e)
    err = errors[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))
