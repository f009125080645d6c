from cargoentry.types import Action


def args_parse(argv: list[str]) -> Action:
    # only the first argument is consulted, the rest is ignored
    match argv[:1]:
        case ["build"]:
            return Action.BUILD
        case ["test"]:
            return Action.TEST
        case _:
            return Action.UNKNOWN
