from pathlib import Path
from typing import Any, TypedDict

import tomllib

from cargoentry.types import Cmd

CONFIG_FILE = Path("cargoentry.toml")

DEFAULT_BUILD: Cmd = ("cargo", "build", "--release")
DEFAULT_TEST: Cmd = ("cargo", "test")


class ConfigError(Exception):
    pass


class Commands(TypedDict):
    build: Cmd
    test: Cmd


class Config(TypedDict):
    commands: Commands
    verbose: bool


def config_default() -> Config:
    return Config(
        commands=Commands(build=DEFAULT_BUILD, test=DEFAULT_TEST),
        verbose=False,
    )


def _parse_cmd(name: str, value: Any) -> Cmd:
    if (
        not isinstance(value, list)
        or not value
        or not all(isinstance(arg, str) for arg in value)
    ):
        raise ConfigError(
            f"'commands.{name}' has to be a non-empty list of strings, got {value!r}"
        )
    return tuple(value)


def config_parse(config: dict[str, Any]) -> Config:
    result = config_default()

    commands = config.get("commands", {})
    if not isinstance(commands, dict):
        raise ConfigError("'commands' has to be a table")
    for name in ("build", "test"):
        if name in commands:
            result["commands"][name] = _parse_cmd(name, commands[name])

    options = config.get("cargoentry", {})
    if not isinstance(options, dict):
        raise ConfigError("'cargoentry' has to be a table")
    verbose = options.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError(f"'cargoentry.verbose' has to be a bool, got {verbose!r}")
    result["verbose"] = verbose

    return result


def config_load(filename: Path = CONFIG_FILE) -> Config:
    if not filename.is_file():
        return config_default()
    try:
        # binary mode: tomllib enforces the utf-8 encoding itself
        with filename.open("rb") as f:
            return config_parse(tomllib.load(f))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"'{filename}': {e}") from e
