"""Shared test fixtures for envlex."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_env_content():
    """A small .env file exercising each value form."""
    return (
        "# Application\n"
        "APP_NAME=Laravel\n"
        "APP_KEY='base64:abc#123=='\n"
        'DB_PASSWORD="s3cr3t \\"quoted\\"" # inline comment\n'
        "\n"
        "EMPTY=\n"
    )


@pytest.fixture
def sample_env_values():
    return {
        "APP_NAME": "Laravel",
        "APP_KEY": "base64:abc#123==",
        "DB_PASSWORD": 's3cr3t "quoted"',
        "EMPTY": "",
    }


@pytest.fixture
def env_file(tmp_path, sample_env_content):
    """A .env file written to a temp project directory."""
    path = tmp_path / "project" / ".env"
    path.parent.mkdir()
    path.write_text(sample_env_content, encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Redirect config to a temp directory."""
    config_dir = tmp_path / ".config" / "envlex"
    config_path = config_dir / "config.toml"
    monkeypatch.setattr("envlex.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("envlex.config.CONFIG_PATH", config_path)
    return config_dir


@pytest.fixture
def config_path(config_dir):
    return config_dir / "config.toml"
