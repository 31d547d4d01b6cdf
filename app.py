from textual.app import App
from network.endpoint import WifiEndpoint
from state import PluginBehavior, WifiState
from logger import log


class WifiSetupApp(App):
    """Wifi access point / client settings."""

    TITLE = "Wifi Setup"

    CSS = """
    Screen {
        background: $surface;
    }
    .title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    #content {
        margin: 1 2;
    }
    #status_line {
        margin-bottom: 1;
    }
    #tabs {
        height: 3;
    }
    .tab {
        margin: 0 1 0 0;
    }
    .tab.active {
        text-style: bold reverse;
    }
    .tab.has-errors {
        color: $error;
    }
    #nav_buttons {
        dock: bottom;
        height: 3;
        align: center middle;
        margin: 1 2;
    }
    Button {
        margin: 0 1;
    }
    #status_msg {
        margin-top: 1;
    }
    Input {
        margin-bottom: 0;
    }
    Checkbox {
        margin-bottom: 1;
    }
    """

    def __init__(
        self,
        endpoint: WifiEndpoint,
        behavior: PluginBehavior = PluginBehavior.MIXED,
    ) -> None:
        super().__init__()
        self.endpoint = endpoint
        self.state = WifiState(behavior=behavior)
        log.info("WifiSetupApp started (behavior=%s)", behavior.value)

    async def on_mount(self) -> None:
        from screens.wifi import WifiScreen
        await self.push_screen(WifiScreen())
