"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX_DIGITS = "2147483647"
MAX_PHILOSOPHERS = 200
_WHITESPACE = frozenset(" \t\n\v\f\r")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable.

    ``str()`` of the error is the exact line to show the user.
    """

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line

    @classmethod
    def reason(cls, text: str) -> "ArgumentError":
        """Build an error shown in the standard ``Error: <text>.`` form."""
        return cls(f"Error: {text}.")


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters, all times in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = 0


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _skip_whitespace(text: str) -> int:
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    return index


def atoi(text: str) -> int:
    """Read a leading signed decimal integer, wrapping like a 32-bit int.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. A string with no digits reads as 0.
    """
    index = _skip_whitespace(text)
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    for char in text[index:]:
        if not _is_digit(char):
            break
        result = result * 10 + ord(char) - ord("0")
    result = (result * sign) & 0xFFFFFFFF
    return result - (1 << 32) if result >= 1 << 31 else result


def exceeds_int_limit(text: str) -> bool:
    """Tell whether the number in ``text`` has more magnitude than a 32-bit int allows."""
    index = _skip_whitespace(text)
    if index < len(text) and text[index] in "+-":
        index += 1
    while index < len(text) and text[index] == "0":
        index += 1
    start = index
    while index < len(text) and _is_digit(text[index]):
        index += 1
    length = index - start
    if length > len(INT_MAX_DIGITS):
        return True
    if length == len(INT_MAX_DIGITS):
        return text[start:] > INT_MAX_DIGITS
    return False


def check_digits(args: Sequence[str]) -> None:
    """Require each argument to be an optional sign followed by digits only."""
    for arg in args:
        body = arg[1:] if arg[:1] in ("-", "+") else arg
        if not body:
            raise ArgumentError.reason("Empty argument")
        if not all(_is_digit(char) for char in body):
            raise ArgumentError.reason("Non-digit character")


def check_limits(args: Sequence[str]) -> None:
    """Check ranges: int limits, no negatives, 1 to 200 philosophers, non-zero meal count."""
    if not args:
        return
    philosophers = atoi(args[0])
    must_eat = args[4] if len(args) > 4 else None
    for arg in args:
        if exceeds_int_limit(arg):
            raise ArgumentError.reason("Value cannot exceed int limits")
        if atoi(arg) < 0:
            raise ArgumentError.reason("Negative value")
        if philosophers > MAX_PHILOSOPHERS:
            raise ArgumentError.reason(
                f"Too many philosophers. Maximum is {MAX_PHILOSOPHERS}"
            )
        if philosophers == 0:
            raise ArgumentError.reason("Number of philosophers cannot be 0")
        if must_eat is not None and atoi(must_eat) == 0:
            raise ArgumentError(
                "Number of times each philosopher must eat cannot be 0"
            )


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the arguments (without the program name) and build the settings."""
    args = list(args)
    if not 4 <= len(args) <= 5:
        raise ArgumentError("Error: Wrong number of arguments")
    check_digits(args)
    check_limits(args)
    philosophers, die, eat, sleep = (atoi(arg) for arg in args[:4])
    must_eat = atoi(args[4]) if len(args) == 5 else 0
    return Settings(philosophers, die, eat, sleep, must_eat)