[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssldigest"
version = "0.1.0"
description = "Pure-Python MD5, SHA-224, SHA-256, SHA-384 and SHA-512 digests with a command line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "sha224", "sha256", "sha384", "sha512", "digest", "hash", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ssldigest = "ssldigest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ssldigest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
