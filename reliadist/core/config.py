"""
Configuration of reliadist.
"""
import os
import json
import logging
from json import JSONDecodeError
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema

from reliadist.patterns import Singleton

logger = logging.getLogger(__name__)


class ReliaDistConfiguration(metaclass=Singleton):
    r"""Encapsulate reliadist configuration parameters.

    By default, reliadist configuration folder is stored in
    - `$HOME/.reliadist.d` (Linux)
    - `%USERPROFILE%\.reliadist.d` (MS Windows)

    This default configuration folder is overwritten by the environment
    variable ``RELIADIST_CONFIG_DIR``.

    The class is a singleton; use :py:meth:`reload` to take into account a
    modified configuration file.
    """

    RELIADIST_CONFIG_DIR = ".reliadist.d"
    CONFIG_FILE = "reliadist_config.json"
    DEFAULTS: Dict[str, Any] = {
        "precision": 6,
        "log_level": "INFO",
    }

    def __init__(self) -> None:
        self._precision: int = self.DEFAULTS["precision"]
        self._log_level: str = self.DEFAULTS["log_level"]

        self.__load_configuration()

    def __load_configuration(self) -> None:
        """Read configuration from file, or fall back to the defaults."""
        fullpath = self.get_config_filename()
        parameters = dict(self.DEFAULTS)

        if os.path.isfile(fullpath):
            try:
                parameters.update(self.validate_file(fullpath))
            except (OSError, JSONDecodeError, jsonschema.ValidationError) as error:
                logger.warning(
                    f"Configuration file `{fullpath!s}` cannot be loaded ({error.__class__.__name__}); fall back to default."
                )
        else:
            logger.debug(f"No configuration file `{fullpath!s}`; use default.")

        self._precision = parameters["precision"]
        self._log_level = parameters["log_level"]

    @staticmethod
    def get_config_dir() -> Path:
        try:
            return Path(os.environ["RELIADIST_CONFIG_DIR"])
        except KeyError:
            return Path.home().joinpath(ReliaDistConfiguration.RELIADIST_CONFIG_DIR)

    @classmethod
    def get_config_filename(cls) -> Path:
        config_dir = cls.get_config_dir()
        return config_dir.joinpath(cls.CONFIG_FILE)

    @property
    def precision(self) -> int:
        """int : Number of significant digits used in random variable diagnostics."""
        return self._precision

    @property
    def log_level(self) -> int:
        """int : Default log level, as a `logging` numerical level."""
        return logging.getLevelName(self._log_level)

    @staticmethod
    def config_schema() -> dict:
        """Static method returning the JSON validation schema of the class."""
        path = os.path.dirname(os.path.abspath(__file__))
        with open(os.path.join(path, "configuration_schema.json"), "r") as fp:
            config_schema = json.load(fp)
        return config_schema

    @classmethod
    def validate_file(cls, filename: Union[str, Path]) -> dict:
        """Validate the provided file against JSON schema for configuration file.

        Parameters
        ----------
        filename : str or Path
            Absolute path to the file to be tested.

        Returns
        -------
        dict
            The dictionary read in the validated file

        Raises
        ------
        `OSError` (and derived exceptions)
            If a problem occurs while opening the file.
        `jsonschema.exceptions.ValidationError`
            If the provided file does not conform to the JSON schema.
        """
        with open(filename, "r") as fp:
            params = json.load(fp)

        jsonschema.validate(params, cls.config_schema())

        return params

    def reload(self) -> None:
        """Read the configuration file again."""
        self.__load_configuration()


def get_config() -> ReliaDistConfiguration:
    """Returns the process-wide reliadist configuration."""
    return ReliaDistConfiguration()
