import pytest
import network.interfaces as ifaces_mod
from network.interfaces import (
    async_iface_status, default_wireless_interface, list_wireless_interfaces,
)

@pytest.fixture
def sys_net(tmp_path, monkeypatch):
    """Fake /sys/class/net with one wired and two wireless interfaces."""
    for name in ("eth0", "wlan1", "wlan0"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "operstate").write_text("up\n")
    (tmp_path / "wlan0" / "wireless").mkdir()
    (tmp_path / "wlan1" / "wireless").mkdir()
    monkeypatch.setattr(ifaces_mod, "SYS_NET", str(tmp_path))
    return tmp_path

def test_list_wireless_interfaces(sys_net):
    assert list_wireless_interfaces() == ["wlan0", "wlan1"]

def test_default_wireless_interface(sys_net):
    assert default_wireless_interface() == "wlan0"

def test_default_without_wireless(tmp_path, monkeypatch):
    monkeypatch.setattr(ifaces_mod, "SYS_NET", str(tmp_path / "missing"))
    assert list_wireless_interfaces() == []
    assert default_wireless_interface() == "wlan0"

@pytest.mark.asyncio
async def test_status_of_unknown_interface(sys_net):
    assert await async_iface_status("wlan9") == ("unknown", [])

@pytest.mark.asyncio
async def test_status_parses_ip_output(sys_net, monkeypatch):
    class FakeProc:
        async def communicate(self):
            out = (
                "3: wlan0: <BROADCAST,MULTICAST,UP> mtu 1500\n"
                "    inet 192.168.71.1/24 brd 192.168.71.255 scope global wlan0\n"
                "       valid_lft forever preferred_lft forever\n"
            )
            return out.encode(), b""

    async def fake_exec(*args, **kwargs):
        assert args[:4] == ("ip", "-4", "addr", "show")
        return FakeProc()

    monkeypatch.setattr(ifaces_mod.asyncio, "create_subprocess_exec", fake_exec)
    assert await async_iface_status("wlan0") == ("up", ["192.168.71.1/24"])

@pytest.mark.asyncio
async def test_status_without_ip_tool(sys_net, monkeypatch):
    async def fake_exec(*args, **kwargs):
        raise FileNotFoundError("ip")

    monkeypatch.setattr(ifaces_mod.asyncio, "create_subprocess_exec", fake_exec)
    assert await async_iface_status("wlan0") == ("up", [])
