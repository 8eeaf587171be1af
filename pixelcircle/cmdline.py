"""Parse ``-name=value`` style command-line arguments.

Arguments are matched without regard to case, after any leading dashes
are removed. The first element of ``argv`` is the program name and is
never examined.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, no digits give 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    """Read a leading floating-point number; no number gives 0.0."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def strip_delimiter(delimiter: str, string: str) -> int:
    """Return the index just past the leading run of ``delimiter``.

    When that run leaves at most one character, 0 is returned instead, so a
    lone ``-x`` keeps its dash.
    """
    start = len(string) - len(string.lstrip(delimiter)) if delimiter else 0
    if start >= len(string) - 1:
        return 0
    return start


def file_extension(filename: str) -> str | None:
    """Return the text after the last dot of ``filename``, or None.

    A dot in the first two positions does not count as starting an
    extension.
    """
    pos = filename.rfind(".")
    if pos < 2:
        return None
    return filename[pos + 1:]


def _stripped(argv: Sequence[str]) -> Iterator[str]:
    for arg in argv[1:]:
        yield arg[strip_delimiter("-", arg):]


def _matches_prefix(text: str, name: str) -> bool:
    return len(text) >= len(name) and text[: len(name)].lower() == name.lower()


def _remainder(text: str, name: str) -> str | None:
    """Text after ``name`` and one optional '='; None when nothing follows ``name``."""
    if len(text) < len(name) + 1:
        return None
    rest = text[len(name):]
    return rest[1:] if rest.startswith("=") else rest


def check_flag(argv: Sequence[str], name: str) -> bool:
    """Tell whether ``name`` appears as a whole flag, with or without ``=value``."""
    for text in _stripped(argv):
        key = text.split("=", 1)[0]
        if len(key) == len(name) and key.lower() == name.lower():
            return True
    return False


def argument_value(
    argv: Sequence[str], name: str, convert: Callable[[str], T]
) -> T | None:
    """Convert the value of the first argument starting with ``name``.

    ``convert`` receives the text after the name and an optional '='. None is
    returned when no argument matches or the matching one carries no value.
    """
    for text in _stripped(argv):
        if _matches_prefix(text, name):
            rest = _remainder(text, name)
            return None if rest is None else convert(rest)
    return None


def argument_int(argv: Sequence[str], name: str) -> int:
    """Integer value of the last argument starting with ``name``; 0 if absent or empty."""
    value = 0
    for text in _stripped(argv):
        if _matches_prefix(text, name):
            rest = _remainder(text, name)
            value = 0 if rest is None else _atoi(rest)
    return value


def argument_float(argv: Sequence[str], name: str) -> float:
    """Float value of the last argument starting with ``name``; 0.0 if absent or empty."""
    value = 0.0
    for text in _stripped(argv):
        if _matches_prefix(text, name):
            rest = _remainder(text, name)
            value = 0.0 if rest is None else _atof(rest)
    return value


def argument_string(argv: Sequence[str], name: str) -> str | None:
    """Text of the last argument starting with ``name``, one separator character skipped.

    None is returned when no argument matches.
    """
    value: str | None = None
    for text in _stripped(argv):
        if _matches_prefix(text, name):
            value = text[len(name) + 1:]
    return value