"""Table panel listing the variables of a .env file."""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.markup import escape
from rich.text import Text
from textual import log, work
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from envlex.exceptions import EnvlexError
from envlex.files import load_env_file
from envlex.models import EnvDocument

MASK = "********"


class EnvTable(Vertical):
    """Shows parsed .env variables, masking values until revealed."""

    DEFAULT_CSS = """
    EnvTable {
        height: 1fr;
    }
    EnvTable .panel-title {
        height: 1;
        margin-bottom: 1;
    }
    EnvTable DataTable {
        height: 1fr;
    }
    EnvTable #env-status {
        height: 1;
        margin-top: 1;
    }
    """

    def __init__(self, path: Path | None, mask_values: bool = True, **kwargs) -> None:
        super().__init__(**kwargs)
        self.env_path = path
        self.masked = mask_values
        self.env_document = EnvDocument(path=path)

    def compose(self) -> ComposeResult:
        title = escape(str(self.env_path)) if self.env_path else "No .env file"
        yield Static(f"[bold]{title}[/bold]", classes="panel-title")
        yield DataTable(id="env-table", cursor_type="row")
        yield Static("", id="env-status")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_column("Key", key="key")
        table.add_column("Value", key="value")
        self.load_data()

    @work(exclusive=True)
    async def load_data(self) -> None:
        status = self.query_one("#env-status", Static)
        self.env_document = EnvDocument(path=self.env_path)
        if self.env_path is None:
            self._render_rows()
            status.update("[red]Error: No .env file found[/red]")
            self.notify("No .env file found", severity="warning")
            return
        try:
            values = await asyncio.to_thread(load_env_file, self.env_path)
        except (EnvlexError, OSError) as e:
            log.error(f"failed to load {self.env_path}: {e}")
            self._render_rows()
            status.update(f"[red]Error: {escape(str(e))}[/red]")
            self.notify(f"Error: {e}", severity="error", markup=False)
            return
        self.env_document = EnvDocument.from_mapping(values, path=self.env_path)
        log.debug(f"loaded {len(values)} variables from {self.env_path}")
        self._render_rows()
        status.update(f"{len(self.env_document.entries)} variables")

    def toggle_reveal(self) -> None:
        self.masked = not self.masked
        self._render_rows()

    def _render_rows(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        for entry in self.env_document.entries:
            table.add_row(Text(entry.key), self._display(entry.value), key=entry.key)

    def _display(self, value: str) -> Text:
        if self.masked and value:
            return Text(MASK, style="dim")
        return Text(value)
