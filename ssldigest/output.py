"""Formatting of digest results and error messages."""

from __future__ import annotations

import errno
from dataclasses import dataclass

from .commands import available_commands

PROGRAM_NAME = "ssldigest"

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BOLDBLACK = "\033[1m\033[30m"
BOLDRED = "\033[1m\033[31m"
BOLDGREEN = "\033[1m\033[32m"
BOLDYELLOW = "\033[1m\033[33m"
BOLDBLUE = "\033[1m\033[34m"
BOLDMAGENTA = "\033[1m\033[35m"
BOLDCYAN = "\033[1m\033[36m"
BOLDWHITE = "\033[1m\033[37m"
COLOR_RESET = "\033[0m"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

_FILE_ERRORS = {
    errno.EISDIR: "Is a directory",
    errno.EACCES: "Permission denied",
    errno.ENOENT: "No such file or directory",
}


@dataclass(frozen=True)
class OutputOptions:
    """Switches that shape one result line."""

    quiet: bool = False
    reverse: bool = False
    echo: bool = False
    string: bool = False
    color: bool = True


def format_result(command: str, digest: str, label: str, options: OutputOptions) -> str:
    """Return the full result line, newline included, for one digest."""

    def paint(code: str) -> str:
        return code if options.color else ""

    def quoted_label() -> list[str]:
        if not options.string:
            return [label]
        return [paint(COLOR_RESET), '"', paint(BOLDCYAN), label, paint(COLOR_RESET), '"']

    parts: list[str] = []
    if not (options.quiet or options.reverse or options.echo):
        parts += [command.translate(_ASCII_UPPER), " (", paint(BOLDBLUE)]
        parts += quoted_label()
        parts += [paint(COLOR_RESET), ") = "]
    parts += [paint(BOLDMAGENTA), digest]
    if options.reverse and not options.echo:
        parts += [paint(COLOR_RESET), " ", paint(BOLDBLUE)]
        parts += quoted_label()
    parts += [paint(COLOR_RESET), "\n"]
    return "".join(parts)


def format_wrong_command(name: str) -> str:
    """Return the message shown for an unknown command name."""
    listing = "\n".join(sorted(available_commands()))
    return (
        f"{PROGRAM_NAME}: Error: '{name}' is an invalid command.\n\n"
        "Standard commands:\n\n"
        "Message Digest commands:\n"
        f"{listing}\n\n"
    )


def format_file_error(filename: str, command: str, error: OSError) -> str:
    """Return the message shown when a file cannot be hashed."""
    prefix = f"{PROGRAM_NAME}: {command}: "
    reason = _FILE_ERRORS.get(error.errno) or error.strerror
    if not reason:
        return prefix
    return f"{prefix}{filename}: {reason}\n"


def usage() -> str:
    """Return the one-line usage message."""
    return f"usage: {PROGRAM_NAME} command [command opts] [command args]"