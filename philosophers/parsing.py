"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MAX = 2**31 - 1
MAX_PHILOSOPHERS = 200

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def is_digit_string(text: str) -> bool:
    """Return True if text is an optional '-' followed only by decimal digits."""
    body = text[1:] if text.startswith("-") else text
    return all(ch in _DIGITS for ch in body)


def parse_long(text: str) -> int:
    """Parse a leading integer the way atol does, clamping to the 64-bit range.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and a string with no digits yields 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    limit = LONG_MAX // 10
    result = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        if result > limit or (result == limit and ch > "7"):
            return LONG_MAX if sign == 1 else LONG_MIN
        result = result * 10 + int(ch)
    return result * sign


def check_args(args: Sequence[str]) -> None:
    """Validate the numeric arguments, raising ArgumentError if any is invalid.

    Every argument must be a plain number between 1 and INT_MAX, and the
    first one, the number of philosophers, must not exceed MAX_PHILOSOPHERS.
    """
    if not args:
        raise ArgumentError("invalid Arguments")
    if not all(is_digit_string(arg) for arg in args):
        raise ArgumentError("invalid Arguments")
    if not 0 < parse_long(args[0]) <= MAX_PHILOSOPHERS:
        raise ArgumentError("invalid Arguments")
    if any(not 0 < parse_long(arg) <= INT_MAX for arg in args):
        raise ArgumentError("invalid Arguments")


def parse_args(args: Sequence[str]) -> Settings:
    """Turn the arguments after the program name into Settings.

    Expects: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat].
    """
    if len(args) not in (4, 5):
        raise ArgumentError("Invalid number of arguments")
    check_args(args)
    count, die, eat, sleep, *rest = (parse_long(arg) for arg in args)
    return Settings(
        philosopher_count=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meals_required=rest[0] if rest else None,
    )