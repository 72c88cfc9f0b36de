"""Lookup table from command names to digest algorithms."""

from __future__ import annotations

from typing import Callable, Dict, Tuple, Type, Union

from .md5 import MD5
from .sha256 import SHA224, SHA256
from .sha512 import SHA384, SHA512

Hasher = Union[MD5, SHA256, SHA224, SHA512, SHA384]
HasherFactory = Callable[[], Hasher]

_COMMANDS: Dict[str, Type] = {
    "md5": MD5,
    "sha256": SHA256,
    "sha224": SHA224,
    "sha512": SHA512,
    "sha384": SHA384,
}


class UnknownCommandError(ValueError):
    """Raised when a command name matches no known digest algorithm."""

    def __init__(self, name: str) -> None:
        super().__init__(f"'{name}' is an invalid command.")
        self.name = name


def available_commands() -> Tuple[str, ...]:
    """Return the names of all supported digest commands, in table order."""
    return tuple(_COMMANDS)


def get_command(name: str) -> HasherFactory:
    """Return the hasher class for ``name`` (exact, case-sensitive match)."""
    try:
        return _COMMANDS[name]
    except (KeyError, TypeError):
        raise UnknownCommandError(str(name)) from None