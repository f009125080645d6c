import subprocess

from returns.io import IOResultE

from cargoentry.config import Config
from cargoentry.types import Cmd


def run_command(cmd: Cmd, verbose: bool = False) -> IOResultE[int]:
    if verbose:
        print(" ".join(cmd), flush=True)
    try:
        # no check: the return code is handed back to the caller as is
        ret = subprocess.run(cmd)
    except FileNotFoundError as e:
        e.add_note(f"Command '{cmd[0]}' not found!")
        return IOResultE.from_failure(e)
    except OSError as e:
        e.add_note(f"Command '{cmd[0]}' could not be executed!")
        return IOResultE.from_failure(e)
    return IOResultE.from_value(ret.returncode)


def build(config: Config) -> IOResultE[int]:
    print("Running build...", flush=True)
    return run_command(config["commands"]["build"], config["verbose"])


def test(config: Config) -> IOResultE[int]:
    print("Running tests...", flush=True)
    return run_command(config["commands"]["test"], config["verbose"])
