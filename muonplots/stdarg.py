"""Command-line parser for flags and key/value pairs given in any order.

Options are read from ``argv[2]`` onwards: ``argv[0]`` is the program name
and ``argv[1]`` is a leading positional argument that the parser leaves
untouched.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Callable

__all__ = ["BadInput", "StdArg"]

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")
_FLOAT_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")


class BadInput(Exception):
    """Raised when the command line or a requested value is not acceptable."""

    def __init__(self, message: str, key: str, value: str | None = None) -> None:
        self.message = message
        self.key = key
        self.value = value
        if value is None:
            text = f"*** ERROR StdArg: {message}{key}"
        else:
            text = f"*** ERROR StdArg: {message}. Key-value pair: {key} {value}"
        super().__init__(text)


class StdArg:
    """Parses declared flags and key/value options from an argument list."""

    def __init__(self, argv: list[str], check_minus: bool = True) -> None:
        self._argv = list(argv)
        self._check_minus = check_minus
        self._known_flags: set[str] = set()
        self._known_keys: set[str] = set()
        self._seen_flags: set[str] = set()
        self._values: dict[str, str] = {}

    def add_flags(self, *args: str) -> "StdArg":
        """Declare flags that take no value."""
        self._known_flags.update(args)
        return self

    def add_keys(self, *args: str) -> "StdArg":
        """Declare keys that are followed by a value."""
        self._known_keys.update(args)
        return self

    def process(self) -> None:
        """Read the arguments, raising BadInput on the first problem."""
        args = iter(self._argv[2:])
        for arg in args:
            if arg in self._known_flags:
                if arg in self._seen_flags:
                    raise BadInput("defined twice flag: ", arg)
                self._seen_flags.add(arg)
                continue
            if arg not in self._known_keys:
                raise BadInput("no such key: ", arg)
            if arg in self._values:
                raise BadInput("defined twice key: ", arg)
            try:
                self._values[arg] = next(args)
            except StopIteration:
                raise BadInput("no value for key ", arg) from None

    def flag(self, name: str) -> bool:
        """Whether the flag was given."""
        return name in self._seen_flags

    def key(self, name: str) -> bool:
        """Whether the key was given with a value."""
        return name in self._values

    def value(self, name: str) -> str | None:
        """The raw value of a key, or None when it was not given."""
        return self._values.get(name)

    def get(self, name: str, kind: Callable[[str], Any] = str) -> Any:
        """The value of a key converted to ``kind``."""
        if name not in self._values:
            raise BadInput("no such key: ", name)
        raw = self._values[name]
        if kind is str:
            if self._check_minus and raw.startswith("-"):
                raise BadInput("value should not start from '-'", name, raw)
            return raw
        if kind is bool:
            return self._to_bool(name, raw)
        if kind is int:
            if not _INT_RE.fullmatch(raw):
                raise BadInput("conversion error", name, raw)
            return int(raw)
        if kind is float:
            if not _FLOAT_RE.fullmatch(raw):
                raise BadInput("conversion error", name, raw)
            return float(raw)
        try:
            return kind(raw)
        except (TypeError, ValueError) as exc:
            raise BadInput("conversion error", name, raw) from exc

    @staticmethod
    def _to_bool(name: str, raw: str) -> bool:
        if raw == "true":
            return True
        if raw == "false":
            return False
        if _INT_RE.fullmatch(raw):
            number = int(raw)
            if number in (0, 1):
                return bool(number)
        raise BadInput("conversion error", name, raw)

    def show_flags(self) -> None:
        """Print the flags that were given, one per line, sorted."""
        for name in sorted(self._seen_flags):
            print(name, file=sys.stdout)

    def show_keys(self) -> None:
        """Print the given keys and their values, one pair per line, sorted."""
        for name in sorted(self._values):
            print(name, self._values[name], file=sys.stdout)