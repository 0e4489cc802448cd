"""Pydantic models for parsed .env documents."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from envlex.parser import is_valid_key


def escape_value(value: str) -> str:
    """Escape a value for use inside double quotes."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


class EnvEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str = ""

    @field_validator("key")
    @classmethod
    def _check_key(cls, v: str) -> str:
        if not is_valid_key(v):
            raise ValueError(
                "key must start with a letter and contain only letters, digits and underscores"
            )
        return v

    def to_line(self) -> str:
        return f'{self.key}="{escape_value(self.value)}"'


class EnvDocument(BaseModel):
    """An ordered set of entries, optionally tied to the file they came from."""

    path: Path | None = None
    entries: list[EnvEntry] = Field(default_factory=list)

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, str], path: Path | None = None
    ) -> EnvDocument:
        return cls(
            path=path,
            entries=[EnvEntry(key=k, value=v) for k, v in values.items()],
        )

    def as_dict(self) -> dict[str, str]:
        return {entry.key: entry.value for entry in self.entries}

    def render(self) -> str:
        """Render as dotenv text that parses back to the same mapping."""
        return "".join(f"{entry.to_line()}\n" for entry in self.entries)
