"""Parser for .env configuration files."""

from __future__ import annotations

from envlex.exceptions import (
    EnvDecodeError,
    EnvFileNotFoundError,
    EnvlexError,
    EnvParseError,
    InvalidKeyError,
    MissingAssignmentError,
    TrailingCharactersError,
    UnterminatedQuoteError,
)
from envlex.files import (
    apply_to_environ,
    find_env,
    find_env_file,
    load_env_file,
    serialize_env,
    write_env_file,
)
from envlex.parser import parse_env

__all__ = [
    "EnvDecodeError",
    "EnvFileNotFoundError",
    "EnvParseError",
    "EnvlexError",
    "InvalidKeyError",
    "MissingAssignmentError",
    "TrailingCharactersError",
    "UnterminatedQuoteError",
    "apply_to_environ",
    "find_env",
    "find_env_file",
    "load_env_file",
    "parse_env",
    "serialize_env",
    "write_env_file",
]
