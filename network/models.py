from __future__ import annotations
import ipaddress
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

IPv4Address = ipaddress.IPv4Address


class AuthMethod(Enum):
    """Wifi authentication methods, valued by the label stored in widgets."""

    NONE = "None"
    WEP = "WEP"
    WPA = "WPA"
    WPA2_PERSONAL = "WPA2Personal"
    WPA_WPA2_PERSONAL = "WPAWPA2Personal"
    WPA2_WPA3_PERSONAL = "WPA2WPA3Personal"
    WPA3_PERSONAL = "WPA3Personal"
    WAPI_PERSONAL = "WAPIPersonal"

    @property
    def description(self) -> str:
        return _AUTH_DESCRIPTIONS[self]

    @classmethod
    def default(cls) -> "AuthMethod":
        return cls.WPA2_PERSONAL


_AUTH_DESCRIPTIONS = {
    AuthMethod.NONE: "None",
    AuthMethod.WEP: "WEP",
    AuthMethod.WPA: "WPA",
    AuthMethod.WPA2_PERSONAL: "WPA2 Personal",
    AuthMethod.WPA_WPA2_PERSONAL: "WPA/WPA2 Personal",
    AuthMethod.WPA2_WPA3_PERSONAL: "WPA2/WPA3 Personal",
    AuthMethod.WPA3_PERSONAL: "WPA3 Personal",
    AuthMethod.WAPI_PERSONAL: "WAPI Personal",
}


def _ip_or_none(value: Optional[str]) -> Optional[IPv4Address]:
    return IPv4Address(value) if value else None


def _str_or_none(value: Optional[IPv4Address]) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class Subnet:
    """Gateway address plus prefix length, written as '192.168.71.1/24'."""

    gateway: IPv4Address
    mask: int

    def __str__(self) -> str:
        return f"{self.gateway}/{self.mask}"

    @classmethod
    def from_dict(cls, data: dict) -> "Subnet":
        return cls(gateway=IPv4Address(data["gateway"]), mask=int(data["mask"]))

    def to_dict(self) -> dict:
        return {"gateway": str(self.gateway), "mask": self.mask}


DEFAULT_SUBNET = Subnet(IPv4Address("192.168.71.1"), 24)


@dataclass(frozen=True)
class RouterConfiguration:
    """IP settings of the access point side."""

    dhcp_enabled: bool = True
    subnet: Subnet = DEFAULT_SUBNET
    dns: Optional[IPv4Address] = IPv4Address("8.8.8.8")
    secondary_dns: Optional[IPv4Address] = IPv4Address("8.8.4.4")

    @classmethod
    def from_dict(cls, data: dict) -> "RouterConfiguration":
        return cls(
            dhcp_enabled=bool(data["dhcp_enabled"]),
            subnet=Subnet.from_dict(data["subnet"]),
            dns=_ip_or_none(data.get("dns")),
            secondary_dns=_ip_or_none(data.get("secondary_dns")),
        )

    def to_dict(self) -> dict:
        return {
            "dhcp_enabled": self.dhcp_enabled,
            "subnet": self.subnet.to_dict(),
            "dns": _str_or_none(self.dns),
            "secondary_dns": _str_or_none(self.secondary_dns),
        }


@dataclass(frozen=True)
class ClientSettings:
    """Fixed (non-DHCP) IP settings of the client side."""

    ip: IPv4Address
    subnet: Subnet
    dns: Optional[IPv4Address] = None
    secondary_dns: Optional[IPv4Address] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ClientSettings":
        return cls(
            ip=IPv4Address(data["ip"]),
            subnet=Subnet.from_dict(data["subnet"]),
            dns=_ip_or_none(data.get("dns")),
            secondary_dns=_ip_or_none(data.get("secondary_dns")),
        )

    def to_dict(self) -> dict:
        return {
            "mode": "fixed",
            "ip": str(self.ip),
            "subnet": self.subnet.to_dict(),
            "dns": _str_or_none(self.dns),
            "secondary_dns": _str_or_none(self.secondary_dns),
        }


@dataclass(frozen=True)
class DhcpClientSettings:
    hostname: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DhcpClientSettings":
        return cls(hostname=data.get("hostname"))

    def to_dict(self) -> dict:
        return {"mode": "dhcp", "hostname": self.hostname}


ClientIpConfiguration = Union[ClientSettings, DhcpClientSettings]


def _client_ip_from_dict(data: Optional[dict]) -> Optional[ClientIpConfiguration]:
    if data is None:
        return None
    mode = data.get("mode", "dhcp")
    if mode == "dhcp":
        return DhcpClientSettings.from_dict(data)
    if mode == "fixed":
        return ClientSettings.from_dict(data)
    raise ValueError(f"Unknown client IP mode {mode!r}")


@dataclass(frozen=True)
class AccessPointConfiguration:
    ssid: str = "iot-device"
    ssid_hidden: bool = False
    auth_method: AuthMethod = AuthMethod.NONE
    password: str = ""
    ip_conf: Optional[RouterConfiguration] = field(default_factory=RouterConfiguration)

    @classmethod
    def from_dict(cls, data: dict) -> "AccessPointConfiguration":
        ip_conf = data.get("ip_conf")
        return cls(
            ssid=str(data.get("ssid", "")),
            ssid_hidden=bool(data.get("ssid_hidden", False)),
            auth_method=AuthMethod(data.get("auth_method", AuthMethod.NONE.value)),
            password=str(data.get("password", "")),
            ip_conf=RouterConfiguration.from_dict(ip_conf) if ip_conf else None,
        )

    def to_dict(self) -> dict:
        return {
            "ssid": self.ssid,
            "ssid_hidden": self.ssid_hidden,
            "auth_method": self.auth_method.value,
            "password": self.password,
            "ip_conf": self.ip_conf.to_dict() if self.ip_conf else None,
        }


@dataclass(frozen=True)
class ClientConfiguration:
    ssid: str = ""
    auth_method: AuthMethod = AuthMethod.WPA2_PERSONAL
    password: str = ""
    ip_conf: Optional[ClientIpConfiguration] = field(default_factory=DhcpClientSettings)

    @property
    def fixed_settings(self) -> Optional[ClientSettings]:
        if isinstance(self.ip_conf, ClientSettings):
            return self.ip_conf
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfiguration":
        return cls(
            ssid=str(data.get("ssid", "")),
            auth_method=AuthMethod(data.get("auth_method", AuthMethod.default().value)),
            password=str(data.get("password", "")),
            ip_conf=_client_ip_from_dict(data.get("ip_conf")),
        )

    def to_dict(self) -> dict:
        return {
            "ssid": self.ssid,
            "auth_method": self.auth_method.value,
            "password": self.password,
            "ip_conf": self.ip_conf.to_dict() if self.ip_conf else None,
        }


@dataclass(frozen=True)
class Configuration:
    """Combined device configuration; either side may be absent."""

    access_point: Optional[AccessPointConfiguration] = None
    client: Optional[ClientConfiguration] = None

    @property
    def kind(self) -> str:
        if self.access_point and self.client:
            return "Mixed"
        if self.access_point:
            return "AccessPoint"
        if self.client:
            return "Client"
        return "None"

    @classmethod
    def mixed(cls) -> "Configuration":
        return cls(AccessPointConfiguration(), ClientConfiguration())

    @classmethod
    def from_dict(cls, data: dict) -> "Configuration":
        ap = data.get("access_point")
        client = data.get("client")
        return cls(
            access_point=AccessPointConfiguration.from_dict(ap) if ap else None,
            client=ClientConfiguration.from_dict(client) if client else None,
        )

    def to_dict(self) -> dict:
        return {
            "access_point": self.access_point.to_dict() if self.access_point else None,
            "client": self.client.to_dict() if self.client else None,
        }


@dataclass(frozen=True)
class WifiStatus:
    interface: str
    operstate: str          # "up" | "down" | "dormant" | "unknown"
    ip_addresses: List[str] = field(default_factory=list)  # CIDR notation

    @property
    def connected(self) -> bool:
        return self.operstate == "up" and bool(self.ip_addresses)

    def summary(self) -> str:
        ips = ", ".join(self.ip_addresses) if self.ip_addresses else "—"
        return f"Interface {self.interface}: {self.operstate.upper()}  IP: {ips}"
