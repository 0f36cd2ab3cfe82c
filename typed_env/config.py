"""
ABOUTME: Startup helpers for environment-based configuration
ABOUTME: Loads .env files and turns accumulated parse failures into a fail-fast ConfigError
"""

import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .accessors import EnvReader, default_reader
from .exceptions import ConfigError


def load_environment(
    env_file: Union[str, Path] = ".env", override: bool = False
) -> bool:
    """
    Load variables from a dotenv file into os.environ if the file exists.

    Parameters:
        env_file (str | Path): Path to the dotenv file. Defaults to ".env" in the working directory.
        override (bool): Replace variables that are already set in the environment.

    Returns:
        bool: True if the file was found and loaded, False otherwise.
    """
    env_path = Path(env_file)
    if not env_path.is_file():
        logging.debug(f"No env file at {env_path}, using system environment variables")
        return False

    load_dotenv(env_path, override=override)
    logging.debug(f"Loaded environment from {env_path}")
    return True


def raise_for_errors(reader: Optional[EnvReader] = None) -> None:
    """
    Raise ConfigError if any environment variable failed to parse.

    Parameters:
        reader (EnvReader, optional): Reader whose errors are checked. Defaults to the process-wide reader.

    Raises:
        ConfigError: Lists every recorded failure, one per line. The failures are available on its ``errors`` attribute.
    """
    reader = reader if reader is not None else default_reader()
    errors = reader.all_errors()
    if not errors:
        return
    lines = "\n".join(f"- {error}" for error in errors)
    raise ConfigError(
        f"{len(errors)} invalid environment variable(s):\n{lines}", errors=errors
    )
