"""Command-line front end: option parsing and the digest run loop."""

from __future__ import annotations

import codecs
import enum
import os
import sys
from dataclasses import dataclass
from typing import IO, Optional, Sequence, Tuple

from .commands import HasherFactory, UnknownCommandError, get_command
from .output import (
    OutputOptions,
    format_file_error,
    format_result,
    format_wrong_command,
    usage,
)
from .reader import hash_stream, hash_string


class Flag(enum.Flag):
    """Command options that change what is read and how results look."""

    ECHO = enum.auto()
    QUIET = enum.auto()
    REVERSE = enum.auto()
    STRING = enum.auto()


_FLAG_CHARS = {
    "p": Flag.ECHO,
    "q": Flag.QUIET,
    "r": Flag.REVERSE,
    "s": Flag.STRING,
}

_INPUT_FLAGS = Flag.ECHO | Flag.STRING


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


def parse_flag(char: str) -> Flag:
    """Return the flag for one option letter."""
    try:
        return _FLAG_CHARS[char]
    except KeyError:
        raise UsageError("Sorry this is not a legal option =[") from None


class _TextEcho:
    """Writes echoed bytes to a text-only stream, decoding them as UTF-8."""

    def __init__(self, stream: IO) -> None:
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def write(self, piece) -> None:
        if isinstance(piece, str):
            self._stream.write(piece)
        else:
            self._stream.write(self._decoder.decode(piece))

    def flush(self) -> None:
        self._stream.write(self._decoder.decode(b"", final=True))
        if hasattr(self._stream, "flush"):
            self._stream.flush()


@dataclass
class _Session:
    """State shared by every digest computed during one run."""

    command: str
    factory: HasherFactory
    stdin: IO
    stdout: IO
    flags: Flag = Flag(0)

    def _options(self, *, string: bool = False, echo: bool = False) -> OutputOptions:
        return OutputOptions(
            quiet=bool(self.flags & Flag.QUIET),
            reverse=bool(self.flags & Flag.REVERSE),
            echo=echo,
            string=string,
        )

    def _emit(self, digest: str, label: str, options: OutputOptions) -> None:
        self.stdout.write(format_result(self.command, digest, label, options))

    def _echo_target(self):
        buffer = getattr(self.stdout, "buffer", None)
        if buffer is not None:
            self.stdout.flush()
            return buffer
        return _TextEcho(self.stdout)

    def digest_stdin(self, echo: bool) -> None:
        source = getattr(self.stdin, "buffer", self.stdin)
        target = self._echo_target() if echo else None
        digest = hash_stream(self.factory, source, target)
        self._emit(digest, "stdin", self._options(echo=True))

    def digest_string(self, text: str) -> None:
        digest = hash_string(self.factory, os.fsencode(text))
        self._emit(digest, text, self._options(string=True))

    def digest_file(self, path: str) -> None:
        try:
            with open(path, "rb") as handle:
                digest = hash_stream(self.factory, handle)
        except OSError as error:
            self.stdout.write(format_file_error(path, self.command, error))
            return
        self._emit(digest, path, self._options())

    def without_input(self, tokens: Sequence[str]) -> bool:
        """Collect leading flags; tell whether no string or file follows."""
        for token in tokens:
            if not token.startswith("-"):
                return False
            for char in token[1:]:
                flag = parse_flag(char)
                self.flags |= flag
                if flag & _INPUT_FLAGS:
                    self.flags &= ~_INPUT_FLAGS
                    return False
        return True

    def _fetch_flags(
        self, tokens: Sequence[str], i: int, j: int
    ) -> Tuple[Optional[Flag], int, int]:
        while True:
            token = tokens[i]
            while j < len(token):
                flag = parse_flag(token[j])
                self.flags |= flag
                if flag & _INPUT_FLAGS:
                    return flag, i, j
                j += 1
            if i + 1 < len(tokens) and tokens[i + 1].startswith("-"):
                i, j = i + 1, 1
            else:
                return None, i, j

    def process_flags(self, tokens: Sequence[str]) -> int:
        """Handle the leading options; return the index of the first file."""
        if not tokens or not tokens[0].startswith("-"):
            return 0
        i, j = 0, 1
        while True:
            trigger, i, j = self._fetch_flags(tokens, i, j)
            if self.flags & Flag.QUIET:
                self.flags &= ~Flag.REVERSE
            if trigger is None:
                return i + 1
            if trigger is Flag.STRING:
                if j + 1 == len(tokens[i]):
                    i, j = i + 1, 0
                else:
                    j += 1
                if i == len(tokens):
                    raise UsageError("We require some sort of argument")
                self.digest_string(tokens[i][j:])
                self.flags &= ~Flag.STRING
                i, j = i + 1, 0
                if i < len(tokens) and tokens[i].startswith("-"):
                    j = 1
                else:
                    return i
            else:
                self.digest_stdin(echo=True)
                self.flags &= ~Flag.ECHO
                j += 1


def run(argv: Sequence[str], stdin: Optional[IO] = None, stdout: Optional[IO] = None) -> int:
    """Run one command line (without the program name); return the exit status."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    args = list(argv)
    try:
        if not args:
            raise UsageError(usage())
        command, tokens = args[0], args[1:]
        try:
            factory = get_command(command)
        except UnknownCommandError:
            stdout.write(format_wrong_command(command))
            return 1
        session = _Session(command, factory, stdin, stdout)
        if session.without_input(tokens):
            session.digest_stdin(echo=False)
        else:
            start = session.process_flags(tokens)
            for path in tokens[start:]:
                session.digest_file(path)
    except UsageError as error:
        stdout.write(f"{error}\n")
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the command line."""
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())