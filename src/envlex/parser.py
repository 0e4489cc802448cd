"""Parse .env file content into a dictionary."""

from __future__ import annotations

from envlex.exceptions import (
    EnvParseError,
    InvalidKeyError,
    MissingAssignmentError,
    TrailingCharactersError,
    UnterminatedQuoteError,
)

INLINE_WHITESPACE = " \t\r\f\v"

# Backslash escapes resolved inside double quotes; other pairs stay literal.
DOUBLE_QUOTE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def is_key_start(char: str) -> bool:
    return char.isascii() and char.isalpha()


def is_key_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def is_valid_key(key: str) -> bool:
    """Check a key against ``[A-Za-z][A-Za-z0-9_]*``."""
    return bool(key) and is_key_start(key[0]) and all(is_key_char(c) for c in key[1:])


def parse_env(content: str) -> dict[str, str]:
    """Parse .env file content into key=value pairs.

    Handles unquoted, single-quoted and double-quoted values, comments and
    blank lines. Later definitions of a key overwrite earlier ones. Values are
    never interpolated.

    Raises an ``EnvParseError`` subclass for the first malformed line; no
    partial result is returned.
    """
    result: dict[str, str] = {}
    pos = 0
    end = len(content)
    while pos < end:
        pos = _skip_whitespace(content, pos)
        if pos >= end:
            break
        char = content[pos]
        if char == "\n":
            pos += 1
            continue
        if char == "#":
            pos = _line_end(content, pos)
            continue
        key, pos = _scan_key(content, pos)
        value, pos = _scan_value(content, _skip_whitespace(content, pos + 1))
        result[key] = value
    return result


def _skip_whitespace(content: str, pos: int) -> int:
    while pos < len(content) and content[pos] in INLINE_WHITESPACE:
        pos += 1
    return pos


def _line_end(content: str, pos: int) -> int:
    newline = content.find("\n", pos)
    return len(content) if newline == -1 else newline


def _error(
    error_cls: type[EnvParseError], message: str, content: str, pos: int
) -> EnvParseError:
    """Build an error located at ``pos`` with its line as the fragment."""
    line_start = content.rfind("\n", 0, pos) + 1
    fragment = content[line_start:_line_end(content, line_start)].rstrip("\r")
    return error_cls(
        message,
        line=content.count("\n", 0, pos) + 1,
        column=pos - line_start + 1,
        fragment=fragment,
    )


def _scan_key(content: str, start: int) -> tuple[str, int]:
    """Scan a key starting at ``start`` and return it with the index of '='."""
    if not is_key_start(content[start]):
        raise _error(InvalidKeyError, "Key must start with a letter", content, start)
    pos = start + 1
    while pos < len(content) and is_key_char(content[pos]):
        pos += 1
    key = content[start:pos]

    pos = _skip_whitespace(content, pos)
    if pos < len(content) and content[pos] == "=":
        return key, pos

    rest = content[pos:_line_end(content, pos)].split("#", 1)[0]
    if "=" in rest:
        raise _error(InvalidKeyError, f"Invalid character in key {key!r}", content, pos)
    raise _error(MissingAssignmentError, f"Missing '=' after key {key!r}", content, pos)


def _scan_value(content: str, start: int) -> tuple[str, int]:
    """Scan a value and return it with the index of its line terminator."""
    if start >= len(content):
        return "", start

    opening = content[start]
    if opening == "'":
        close = content.find("'", start + 1, _line_end(content, start))
        if close == -1:
            raise _error(
                UnterminatedQuoteError, "Unterminated single-quoted value", content, start
            )
        return content[start + 1:close], _finish_quoted(content, close + 1, start)

    if opening == '"':
        value, close = _scan_double_quoted(content, start)
        return value, _finish_quoted(content, close + 1, start)

    stop = start
    while stop < len(content) and content[stop] not in "#\n":
        stop += 1
    value = content[start:stop].rstrip(INLINE_WHITESPACE)
    if stop < len(content) and content[stop] == "#":
        stop = _line_end(content, stop)
    return value, stop


def _scan_double_quoted(content: str, start: int) -> tuple[str, int]:
    chars: list[str] = []
    pos = start + 1
    while pos < len(content):
        char = content[pos]
        if char == '"':
            return "".join(chars), pos
        if char == "\n":
            break
        if char == "\\" and pos + 1 < len(content) and content[pos + 1] != "\n":
            escaped = content[pos + 1]
            chars.append(DOUBLE_QUOTE_ESCAPES.get(escaped, "\\" + escaped))
            pos += 2
            continue
        chars.append(char)
        pos += 1
    raise _error(
        UnterminatedQuoteError, "Unterminated double-quoted value", content, start
    )


def _finish_quoted(content: str, pos: int, opening: int) -> int:
    """Allow only whitespace or a comment after a closing quote."""
    pos = _skip_whitespace(content, pos)
    if pos >= len(content) or content[pos] == "\n":
        return pos
    if content[pos] == "#":
        return _line_end(content, pos)
    if content.startswith(content[opening] * 3, opening):
        message = "Triple-quoted values are not supported"
    else:
        message = "Unexpected characters after closing quote"
    raise _error(TrailingCharactersError, message, content, pos)
