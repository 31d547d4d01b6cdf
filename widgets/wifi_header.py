from __future__ import annotations
import pyfiglet
from textual.widgets import Static

_ASCII = pyfiglet.figlet_format("Wifi Setup", font="small")


class WifiHeader(Static):
    """Full-width ASCII-art banner shown above the configuration forms."""

    DEFAULT_CSS = """
    WifiHeader {
        color: #38bdf8;
        text-style: bold;
        width: 100%;
        padding: 0 2;
    }
    """

    def __init__(self, subtitle: str = "") -> None:
        text = _ASCII if not subtitle else f"{_ASCII}{subtitle}"
        super().__init__(text, markup=False)
