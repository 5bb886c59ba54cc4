from typing import Any


def make_arguments(*arguments: Any) -> str:
    """Converts values into a command line arguments."""
    return " ".join(str(argument) for argument in arguments)


def make_options(name: str, *values: Any) -> str:
    """Converts values into repeated command line options."""
    return " ".join(f"--{name} {value}" for value in values)
