from __future__ import annotations
import asyncio
from typing import List

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Static

from field import Field
from forms import ApConfForm, StaConfForm
from network.endpoint import EndpointError
from widgets.conf_form import ApConfPane, StaConfPane
from widgets.wifi_header import WifiHeader
from logger import log

POLL_INTERVAL = 2.0


class WifiScreen(Screen):
    """Access point and client settings with a shared Save button."""

    BINDINGS = [
        ("ctrl+s", "save", "Save"),
        ("escape", "app.quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.ap_form = ApConfForm()
        self.sta_form = StaConfForm()
        self._tasks: List[asyncio.Task] = []
        self._syncing = False
        self._active_tab = "ap"

    def compose(self) -> ComposeResult:
        state = self.app.state
        yield WifiHeader()
        with Vertical(id="content"):
            yield Static(state.behavior.description, classes="title")
            yield Static("Waiting for status…", id="status_line")
            with Horizontal(id="tabs"):
                yield Button("Access Point", id="tab_ap", classes="tab")
                yield Button("Client", id="tab_sta", classes="tab")
            yield ApConfPane(self.ap_form, id="ap_pane")
            yield StaConfPane(self.sta_form, id="sta_pane")
            yield Static("", id="status_msg")
        with Horizontal(id="nav_buttons"):
            yield Button("Save", id="btn_save", variant="primary", disabled=True)
        yield Footer()

    def on_mount(self) -> None:
        behavior = self.app.state.behavior
        self.query_one("#tab_ap").display = behavior.uses_ap
        self.query_one("#tab_sta").display = behavior.uses_sta
        self._active_tab = "ap" if behavior.uses_ap else "sta"

        self.ap_form.subscribe(self._on_field_change)
        self.sta_form.subscribe(self._on_field_change)
        self._refresh()

        self._tasks.append(asyncio.create_task(self._poll_status()))
        load = asyncio.create_task(self._load_configuration())
        load.add_done_callback(self._task_done)
        self._tasks.append(load)

    def on_unmount(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()
        self.ap_form.unsubscribe(self._on_field_change)
        self.sta_form.unsubscribe(self._on_field_change)

    # -- Remote state ------------------------------------------------------

    async def _poll_status(self) -> None:
        """Refresh #status_line every POLL_INTERVAL seconds until unmounted."""
        endpoint = self.app.endpoint
        widget = self.query_one("#status_line", Static)
        while True:
            try:
                status = await endpoint.get_status()
            except EndpointError as e:
                log.warning("Status poll failed: %s", e)
                widget.update(f"[yellow]Status unavailable: {e}[/yellow]")
            else:
                log.debug("Got status %s", status)
                self.app.state.status = status
                color = "green" if status.connected else "yellow"
                widget.update(f"[{color}]{status.summary()}[/{color}]")
            await asyncio.sleep(POLL_INTERVAL)

    async def _load_configuration(self) -> None:
        try:
            conf = await self.app.endpoint.get_configuration()
        except EndpointError as e:
            log.error("Loading configuration failed: %s", e)
            self._show_message(f"[red]Error loading configuration: {e}[/red]")
            return
        log.info("Got configuration (%s)", conf.kind)
        self._adopt(conf)

    def _adopt(self, conf) -> None:
        """Make `conf` the confirmed state and show it in both forms."""
        self._syncing = True
        try:
            if self.app.state.load(conf, self.ap_form, self.sta_form):
                self.query_one(ApConfPane).sync_widgets()
                self.query_one(StaConfPane).sync_widgets()
        finally:
            self._syncing = False
        self._refresh()

    async def _save(self) -> None:
        state = self.app.state
        conf = state.build_configuration(self.ap_form, self.sta_form)
        self.query_one("#btn_save", Button).disabled = True
        self._show_message("Saving…")
        try:
            await self.app.endpoint.set_configuration(conf)
        except EndpointError as e:
            log.error("Saving configuration failed: %s", e)
            self._show_message(f"[red]Error saving configuration: {e}[/red]")
            self._refresh()
            return
        log.info("Configuration saved (%s)", conf.kind)
        self._adopt(conf)
        self._show_message("[green]✓ Configuration saved.[/green]")

    # -- View --------------------------------------------------------------

    def _on_field_change(self, field: Field) -> None:
        if not self._syncing:
            self._refresh()

    def _refresh(self) -> None:
        state = self.app.state
        disabled = not state.loaded

        for form, tab_id, title in (
            (self.ap_form, "#tab_ap", "Access Point"),
            (self.sta_form, "#tab_sta", "Client"),
        ):
            tab = self.query_one(tab_id, Button)
            tab.label = f"{title} *" if state.loaded and form.is_dirty() else title
            tab.set_class(state.loaded and form.has_errors(), "has-errors")
            tab.set_class(tab_id == f"#tab_{self._active_tab}", "active")

        ap_pane = self.query_one(ApConfPane)
        sta_pane = self.query_one(StaConfPane)
        ap_pane.display = self._active_tab == "ap"
        sta_pane.display = self._active_tab == "sta"
        ap_pane.refresh_state(disabled)
        sta_pane.refresh_state(disabled)

        self.query_one("#btn_save", Button).disabled = not state.submit_enabled(
            self.ap_form, self.sta_form
        )

    def _show_message(self, msg: str) -> None:
        self.query_one("#status_msg", Static).update(msg)

    # -- Actions -----------------------------------------------------------

    def action_save(self) -> None:
        if not self.query_one("#btn_save", Button).disabled:
            task = asyncio.create_task(self._save())
            task.add_done_callback(self._task_done)
            self._tasks.append(task)

    def _task_done(self, task: asyncio.Task) -> None:
        if task in self._tasks:
            self._tasks.remove(task)
        if not task.cancelled() and task.exception() is not None:
            log.error("Background task failed", exc_info=task.exception())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "tab_ap":
            self._active_tab = "ap"
            self._refresh()
        elif event.button.id == "tab_sta":
            self._active_tab = "sta"
            self._refresh()
        elif event.button.id == "btn_save":
            self.action_save()
