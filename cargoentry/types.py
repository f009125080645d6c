from enum import Enum

Cmd = tuple[str, ...]


class Action(Enum):
    BUILD = "build"
    TEST = "test"
    UNKNOWN = "unknown"
