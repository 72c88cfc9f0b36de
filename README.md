# ssldigest

Message digests written in pure Python: MD5, SHA-224, SHA-256, SHA-384 and
SHA-512. It ships as a library and as a command line tool that hashes strings,
files and standard input. The tool prints its results in the familiar
`openssl`-style digest format.

It has no runtime dependencies.

## Installation

```
pip install .
```

## Command line

```
ssldigest command [command opts] [command args]
```

`command` is one of `md5`, `sha224`, `sha256`, `sha384` or `sha512`. Names are
case-sensitive.

Options:

- `-p`: read standard input, echo it to standard output, then print its digest
- `-q`: quiet mode, which prints only the digest (it also turns off `-r`)
- `-r`: reverse the format, so the digest is printed first and the name after it
- `-s string`: print the digest of `string`. The string may be attached
  (`-shello`) or given as the next argument.

You can combine option letters in one argument, as in `-qr`. More options may
follow a `-s string`. Every argument after the options is a file name, and
each file is hashed in turn. If no string, file or `-p` is given, the tool
hashes standard input.

```
$ ssldigest md5 -s "hello"
MD5 ("hello") = 5d41402abc4b2a76b9719d911017c592

$ echo "hello" | ssldigest sha256
5891b5b522d5df086d0ff0b110fbd9d21bb4fc7163af34d08286a2e846f6be03

$ ssldigest sha512 -r some_file.txt
<digest> some_file.txt
```

Results are coloured with ANSI escape sequences. All messages, including
errors, go to standard output:

- An unknown command prints a list of the valid commands and exits with status 1.
- An unknown option letter, or `-s` with nothing after it, prints a message
  and exits with status 1.
- A file that cannot be read (missing, a directory, no permission) prints an
  error line, and the remaining files are still hashed.

## Library

```python
from ssldigest.md5 import MD5, md5_hex
from ssldigest.sha256 import SHA256, SHA224, sha256_hex, sha224_hex
from ssldigest.sha512 import SHA512, SHA384, sha512_hex, sha384_hex

md5_hex(b"hello")               # '5d41402abc4b2a76b9719d911017c592'

h = SHA256(b"hel")
h.update(b"lo")
h.hexdigest()
```

The hasher classes `MD5`, `SHA224`, `SHA256`, `SHA384` and `SHA512` follow
the interface of `hashlib`. They take optional initial data. They provide
`update(data)`, `digest()`, `hexdigest()` and `copy()`, and the attributes
`name`, `digest_size` and `block_size`. Text (`str`) is encoded as UTF-8.
Any bytes-like object is accepted.

Other modules:

- `ssldigest.commands`: `get_command(name)` returns the hasher class for a
  command name, and raises `UnknownCommandError` (a `ValueError`) for an
  unknown one. `available_commands()` lists the accepted names.
- `ssldigest.reader`: `hash_string(command, text)` and
  `hash_stream(command, stream, echo=None)` return hex digests. `command` can
  be a name or a hasher class. `hash_stream` can also copy what it reads to
  an `echo` stream.
- `ssldigest.output`: `format_result(command, digest, label, options)` builds
  one result line from an `OutputOptions` value. Colour can be switched off
  there with `color=False`. `format_wrong_command`, `format_file_error` and
  `usage` build the error texts.
- `ssldigest.cli`: `run(argv, stdin=None, stdout=None)` runs one command line
  (without the program name) against the given streams and returns the exit
  status. `main()` is the console entry point.

## What it does not do

Only message digests are provided. There are no ciphers, no encoding
commands such as base64, no HMAC and no key handling. The command line has no
switch to turn colour off.

## Running the tests

```
pip install .[test]
pytest
```