"""Exceptions raised while parsing and locating .env files."""

from __future__ import annotations

from pathlib import Path


class EnvlexError(Exception):
    """Base exception for envlex errors."""


class EnvParseError(EnvlexError):
    """Malformed .env content, reported at the first offending character."""

    def __init__(self, message: str, line: int, column: int, fragment: str) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.fragment = fragment
        super().__init__(f"{message} at line {line}, column {column}: {fragment!r}")


class InvalidKeyError(EnvParseError):
    """Key does not start with a letter or contains disallowed characters."""


class MissingAssignmentError(EnvParseError):
    """A key is not followed by '=' before the end of the line."""


class UnterminatedQuoteError(EnvParseError):
    """A quoted value has no closing quote on its line."""


class TrailingCharactersError(EnvParseError):
    """Content other than a comment follows a closing quote."""


class EnvDecodeError(EnvlexError):
    """The file is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"{path} is not valid UTF-8: {reason}")


class EnvFileNotFoundError(EnvlexError):
    """No .env file in the start directory or any of its parents."""

    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"No .env file found in {start} or any parent directory")
