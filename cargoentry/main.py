from pathlib import Path
import sys
from typing import NoReturn

from returns.result import Failure, Success
from returns.unsafe import unsafe_perform_io

from cargoentry import commands
from cargoentry.args import args_parse
from cargoentry.config import CONFIG_FILE, ConfigError, config_load
from cargoentry.types import Action

# exit codes a shell uses for failed commands
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127
EXIT_SIGNAL = 128


def usage(prog: str) -> str:
    return f"Usage: {prog} {{build|test}}"


def _error(msg: str) -> None:
    print(f"[cargoentry] Error: {msg}", file=sys.stderr)


def dispatch(action: Action, prog: str, config_file: Path = CONFIG_FILE) -> int:
    match action:
        case Action.BUILD:
            run = commands.build
        case Action.TEST:
            run = commands.test
        case _:
            print(usage(prog))
            return 1

    try:
        config = config_load(config_file)
    except ConfigError as e:
        _error(str(e))
        return 1

    cmd = config["commands"][action.value][0]
    match unsafe_perform_io(run(config)):
        case Success(returncode) if returncode < 0:
            # killed by a signal, report it like a shell does
            return EXIT_SIGNAL - returncode
        case Success(returncode):
            return returncode
        case Failure(FileNotFoundError()):
            _error(f"command '{cmd}' not found")
            return EXIT_NOT_FOUND
        case Failure(e):
            _error(f"command '{cmd}' could not be executed: {e}")
            return EXIT_NOT_EXECUTABLE


def main(argv: list[str] | None = None, prog: str | None = None) -> NoReturn:
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = Path(sys.argv[0]).name
    sys.exit(dispatch(args_parse(argv), prog))
