from __future__ import annotations
from typing import Iterator, Optional

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Checkbox, Input, Label, Select, Static

from field import Field
from forms import ApConfForm, ConfForm, StaConfForm
from network.models import AuthMethod

AUTH_OPTIONS = [(method.description, method.value) for method in AuthMethod]


class ConfFormPane(VerticalScroll):
    """Renders a ConfForm and routes widget edits into its fields.

    Widget ids are "<prefix>_<field name>"; error lines add "_err".
    """

    DEFAULT_CSS = """
    ConfFormPane {
        height: auto;
        max-height: 100%;
    }
    ConfFormPane Vertical {
        height: auto;
    }
    ConfFormPane Input.has-error {
        border: tall $error;
    }
    ConfFormPane .field-error {
        color: $error;
        height: 1;
        margin-bottom: 1;
    }
    """

    def __init__(self, form: ConfForm, prefix: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.form = form
        self.prefix = prefix

    # -- Compose helpers ---------------------------------------------------

    def _wid(self, name: str) -> str:
        return f"{self.prefix}_{name}"

    def text_row(
        self, name: str, label: str, placeholder: str = "", password: bool = False
    ) -> Iterator[Widget]:
        yield Label(label, id=self._wid(name) + "_label")
        yield Input(placeholder=placeholder, password=password, id=self._wid(name))
        yield Static("", id=self._wid(name) + "_err", classes="field-error", markup=False)

    def auth_rows(self) -> Iterator[Widget]:
        yield Label("Authentication")
        yield Select(
            AUTH_OPTIONS,
            allow_blank=False,
            value=AuthMethod.default().value,
            id=self._wid("auth"),
        )
        with Vertical(id=self._wid("password_fields")):
            yield from self.text_row("password", "Password", "0..64 characters", password=True)
            yield from self.text_row(
                "password_confirm", "Password Confirmation", "0..64 characters", password=True
            )

    # -- Widget -> field ---------------------------------------------------

    def _field_for(self, widget_id: Optional[str]) -> Optional[Field]:
        if not widget_id or not widget_id.startswith(self.prefix + "_"):
            return None
        return self.form.fields().get(widget_id[len(self.prefix) + 1:])

    def _route(self, widget: Widget, event) -> None:
        f = self._field_for(widget.id)
        if f is None:
            return
        if getattr(widget, "value", None) != event.value:
            return  # stale: the widget has been set again since
        raw = f.extract(event)
        # sync_widgets() writes model values into widgets; their echo is not an edit
        if f.raw_value is None and raw == f.effective_value():
            return
        f.on_change(raw)

    def on_input_changed(self, event: Input.Changed) -> None:
        self._route(event.input, event)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self._route(event.checkbox, event)

    def on_select_changed(self, event: Select.Changed) -> None:
        self._route(event.select, event)

    # -- Field -> widget ---------------------------------------------------

    def sync_widgets(self) -> None:
        """Show each field's effective value, e.g. after a configuration load."""
        for name, f in self.form.fields().items():
            widget = self.query_one(f"#{self._wid(name)}")
            value = f.effective_value()
            if isinstance(widget, Select):
                widget.value = value or AuthMethod.default().value
            elif widget.value != value:
                widget.value = value

    def editable(self, name: str) -> bool:
        """False for fields whose gate currently switches them off."""
        return True

    def refresh_state(self, disabled: bool) -> None:
        auth = self.form.auth.value()
        key_word = "Key" if auth == AuthMethod.WEP else "Password"
        self.query_one(f"#{self._wid('password_label')}", Label).update(key_word)
        self.query_one(f"#{self._wid('password_confirm_label')}", Label).update(
            f"{key_word} Confirmation"
        )
        self.query_one(f"#{self._wid('password_fields')}").display = auth != AuthMethod.NONE

        for name, f in self.form.fields().items():
            widget = self.query_one(f"#{self._wid(name)}")
            off = disabled or not self.editable(name)
            widget.disabled = off
            if isinstance(widget, Input):
                widget.set_class(not off and f.has_errors(), "has-error")
                err = self.query_one(f"#{self._wid(name)}_err", Static)
                err.update(f.error_message())
                err.visible = not off


class ApConfPane(ConfFormPane):
    form: ApConfForm

    ROUTER_FIELDS = ("dhcp_server_enabled", "subnet", "dns", "secondary_dns")

    def __init__(self, form: ApConfForm, **kwargs) -> None:
        super().__init__(form, "ap", **kwargs)

    def compose(self) -> ComposeResult:
        yield from self.text_row("ssid", "SSID", "0..32 characters")
        yield Checkbox("Hidden", id=self._wid("hidden_ssid"))
        yield from self.auth_rows()
        yield Checkbox("IP Configuration", id=self._wid("ip_conf_enabled"))
        yield Checkbox("DHCP Server", id=self._wid("dhcp_server_enabled"))
        yield from self.text_row("subnet", "Subnet", "XXX.XXX.XXX.XXX/YY")
        yield from self.text_row("dns", "DNS", "XXX.XXX.XXX.XXX (optional)")
        yield from self.text_row("secondary_dns", "Secondary DNS", "XXX.XXX.XXX.XXX (optional)")

    def editable(self, name: str) -> bool:
        if name in self.ROUTER_FIELDS:
            return bool(self.form.ip_conf_enabled.value())
        return True


class StaConfPane(ConfFormPane):
    form: StaConfForm

    FIXED_FIELDS = ("subnet", "ip", "dns", "secondary_dns")

    def __init__(self, form: StaConfForm, **kwargs) -> None:
        super().__init__(form, "sta", **kwargs)

    def compose(self) -> ComposeResult:
        yield from self.text_row("ssid", "SSID", "0..32 characters")
        yield from self.auth_rows()
        yield Checkbox("IP Configuration", id=self._wid("ip_conf_enabled"))
        yield Checkbox("DHCP", id=self._wid("dhcp_enabled"))
        with Vertical(id=self._wid("fixed_fields")):
            yield from self.text_row("subnet", "Gateway/Subnet", "XXX.XXX.XXX.XXX/YY")
            yield from self.text_row("ip", "IP", "XXX.XXX.XXX.XXX")
            yield from self.text_row("dns", "DNS", "XXX.XXX.XXX.XXX (optional)")
            yield from self.text_row("secondary_dns", "Secondary DNS", "XXX.XXX.XXX.XXX (optional)")

    def editable(self, name: str) -> bool:
        if name == "dhcp_enabled" or name in self.FIXED_FIELDS:
            return bool(self.form.ip_conf_enabled.value())
        return True

    def refresh_state(self, disabled: bool) -> None:
        super().refresh_state(disabled)
        self.query_one(f"#{self._wid('fixed_fields')}").display = not self.form.dhcp_enabled.value()
