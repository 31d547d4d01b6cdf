from __future__ import annotations
import asyncio
import os
from pathlib import Path
from typing import List, Tuple
from logger import log

SYS_NET = "/sys/class/net"
DEFAULT_WIRELESS_IFACE = "wlan0"


def list_wireless_interfaces() -> List[str]:
    """Names under /sys/class/net that have a `wireless` directory, sorted."""
    try:
        ifaces = sorted(os.listdir(SYS_NET))
    except OSError:
        return []
    return [
        name for name in ifaces
        if os.path.isdir(os.path.join(SYS_NET, name, "wireless"))
    ]


def default_wireless_interface() -> str:
    ifaces = list_wireless_interfaces()
    if not ifaces:
        log.warning("No wireless interface found, assuming %s", DEFAULT_WIRELESS_IFACE)
        return DEFAULT_WIRELESS_IFACE
    return ifaces[0]


async def async_iface_status(iface: str) -> Tuple[str, List[str]]:
    """
    Return (operstate, [ip/prefix, ...]) for `iface` without blocking.
    Reads operstate from sysfs; parses IPs from `ip -4 addr show dev <iface>`.
    Returns ("unknown", []) if the interface does not exist.
    """
    operstate_path = Path(SYS_NET) / iface / "operstate"
    try:
        operstate = operstate_path.read_text().strip()
    except OSError:
        return "unknown", []

    try:
        proc = await asyncio.create_subprocess_exec(
            "ip", "-4", "addr", "show", "dev", iface,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
        stdout, _ = await proc.communicate()
    except OSError as e:
        log.debug("ip addr failed for %s: %s", iface, e)
        return operstate, []

    ips: List[str] = []
    for line in stdout.decode().splitlines():
        line = line.strip()
        if line.startswith("inet "):
            parts = line.split()
            if len(parts) >= 2:
                ips.append(parts[1])   # e.g. "192.168.71.1/24"

    return operstate, ips
