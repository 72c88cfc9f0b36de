"""Feeding strings and streams into a digest algorithm."""

from __future__ import annotations

import io
from typing import IO, Optional, Union

from .commands import Hasher, HasherFactory, get_command
from .md5 import BytesLike

Command = Union[str, HasherFactory]

_READ_SIZE = io.DEFAULT_BUFFER_SIZE


def _new_hasher(command: Command) -> Hasher:
    if isinstance(command, str):
        return get_command(command)()
    return command()


def hash_string(command: Command, text: BytesLike) -> str:
    """Return the hex digest of ``text`` under ``command``."""
    hasher = _new_hasher(command)
    hasher.update(text)
    return hasher.hexdigest()


def hash_stream(command: Command, stream: IO, echo: Optional[IO] = None) -> str:
    """Return the hex digest of everything read from ``stream``.

    When ``echo`` is given, every piece read is also written to it
    unchanged, as it arrives.
    """
    hasher = _new_hasher(command)
    while True:
        piece = stream.read(_READ_SIZE)
        if not piece:
            break
        hasher.update(piece)
        if echo is not None:
            echo.write(piece)
    if echo is not None and hasattr(echo, "flush"):
        echo.flush()
    return hasher.hexdigest()