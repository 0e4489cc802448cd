"""Locate, read and write .env files."""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path

from envlex.exceptions import EnvDecodeError, EnvFileNotFoundError
from envlex.models import EnvDocument
from envlex.parser import parse_env


def find_env_file(
    start: Path | None = None,
    filename: str = ".env",
    match_suffix: bool = True,
) -> Path | None:
    """Search ``start`` and its parents for a .env file.

    An exact ``filename`` match wins. With ``match_suffix`` any file whose
    name ends with ``filename`` (e.g. ``local.env``) is accepted next, the
    alphabetically first one being picked.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        exact = candidate_dir / filename
        try:
            if exact.is_file():
                return exact
            if not match_suffix:
                continue
            matches = sorted(
                p for p in candidate_dir.iterdir()
                if p.name.endswith(filename) and p.is_file()
            )
        except OSError:
            # Unreadable directory; keep walking up.
            continue
        if matches:
            return matches[0]
    return None


def load_env_file(path: Path | str) -> dict[str, str]:
    """Read and parse a .env file.

    Undecodable bytes raise ``EnvDecodeError``; other I/O errors propagate.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise EnvDecodeError(path, str(e)) from e
    return parse_env(content)


def find_env(
    start: Path | None = None,
    filename: str = ".env",
    match_suffix: bool = True,
) -> dict[str, str]:
    """Find the nearest .env file and parse it."""
    path = find_env_file(start, filename=filename, match_suffix=match_suffix)
    if path is None:
        raise EnvFileNotFoundError((start or Path.cwd()).resolve())
    return load_env_file(path)


def serialize_env(values: Mapping[str, str]) -> str:
    """Serialize a mapping as double-quoted dotenv lines."""
    return EnvDocument.from_mapping(values).render()


def write_env_file(path: Path | str, values: Mapping[str, str]) -> Path:
    """Write values to ``path``, overwriting any existing file."""
    path = Path(path)
    content = serialize_env(values)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    # An existing file keeps its old mode through O_CREAT.
    os.fchmod(fd, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)
    return path


def apply_to_environ(
    values: Mapping[str, str],
    *,
    override: bool = False,
    environ: MutableMapping[str, str] | None = None,
) -> list[str]:
    """Merge values into the process environment.

    Existing keys are left alone unless ``override`` is set. Returns the keys
    that were written.
    """
    target = os.environ if environ is None else environ
    applied: list[str] = []
    for key, value in values.items():
        if key in target and not override:
            continue
        target[key] = value
        applied.append(key)
    return applied
