import errno
import re

from ssldigest.commands import available_commands
from ssldigest.output import (
    BOLDMAGENTA,
    COLOR_RESET,
    OutputOptions,
    format_file_error,
    format_result,
    format_wrong_command,
    usage,
)

_ESCAPE = re.compile(r"\033\[[0-9;]*m")
PLAIN = OutputOptions(color=False)


def test_default_line():
    assert format_result("md5", "abc123", "file.txt", PLAIN) == "MD5 (file.txt) = abc123\n"


def test_string_label_is_quoted():
    options = OutputOptions(string=True, color=False)
    assert format_result("sha256", "ff", "hi", options) == 'SHA256 ("hi") = ff\n'


def test_quiet_prints_digest_only():
    options = OutputOptions(quiet=True, color=False)
    assert format_result("md5", "deadbeef", "f", options) == "deadbeef\n"


def test_reverse_puts_label_after():
    options = OutputOptions(reverse=True, color=False)
    assert format_result("md5", "cafe", "f.txt", options) == "cafe f.txt\n"


def test_reverse_with_string_quotes_label():
    options = OutputOptions(reverse=True, string=True, color=False)
    assert format_result("md5", "cafe", "hi", options) == 'cafe "hi"\n'


def test_echo_hides_label_even_when_reversed():
    options = OutputOptions(echo=True, reverse=True, color=False)
    assert format_result("md5", "cafe", "stdin", options) == "cafe\n"


def test_color_version_strips_to_plain():
    for flags in [{}, {"string": True}, {"reverse": True}, {"quiet": True}]:
        colored = format_result("sha512", "abcd", "lbl", OutputOptions(**flags))
        plain = format_result("sha512", "abcd", "lbl", OutputOptions(color=False, **flags))
        assert _ESCAPE.sub("", colored) == plain
        assert BOLDMAGENTA + "abcd" in colored
        assert colored.endswith(COLOR_RESET + "\n")


def test_wrong_command_lists_commands():
    message = format_wrong_command("bogus")
    assert "'bogus' is an invalid command." in message
    lines = message.splitlines()
    for name in available_commands():
        assert name in lines
    assert message.endswith("\n\n")


def test_file_error_messages():
    assert format_file_error("x", "md5", FileNotFoundError(errno.ENOENT, "gone")).endswith(
        "md5: x: No such file or directory\n"
    )
    assert format_file_error("d", "md5", IsADirectoryError(errno.EISDIR, "dir")).endswith(
        "d: Is a directory\n"
    )
    assert format_file_error("p", "sha256", PermissionError(errno.EACCES, "no")).endswith(
        "sha256: p: Permission denied\n"
    )


def test_usage_line():
    text = usage()
    assert text.startswith("usage: ")
    assert text.endswith("command [command opts] [command args]")