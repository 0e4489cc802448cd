"""Main envlex application class."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from envlex.config import EnvlexConfig, load_config
from envlex.files import find_env_file
from envlex.widgets.env_table import EnvTable


class EnvViewerApp(App):
    """envlex - .env file viewer."""

    TITLE = "envlex"
    SUB_TITLE = ".env viewer"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
        Binding("r", "toggle_reveal", "Reveal", show=True),
        Binding("ctrl+r", "refresh", "Reload", show=True),
    ]

    def __init__(
        self,
        path: Path | None = None,
        envlex_config: EnvlexConfig | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.envlex_config = envlex_config or load_config()
        if path is None:
            search = self.envlex_config.search
            path = find_env_file(
                filename=search.filename, match_suffix=search.match_suffix
            )
        self.env_path = path

    def compose(self) -> ComposeResult:
        yield Header()
        yield EnvTable(
            self.env_path,
            mask_values=self.envlex_config.viewer.mask_values,
            id="env-panel",
        )
        yield Footer()

    def on_mount(self) -> None:
        if self.envlex_config.viewer.theme == "light":
            self.theme = "textual-light"
        else:
            self.theme = "textual-dark"

    def action_toggle_reveal(self) -> None:
        self.query_one(EnvTable).toggle_reveal()

    def action_refresh(self) -> None:
        self.query_one(EnvTable).load_data()
