from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

from field import Field, Listener, checked_field, text_field
from network.models import (
    AccessPointConfiguration, AuthMethod, ClientConfiguration, ClientSettings,
    DhcpClientSettings, RouterConfiguration,
)
from validators import (
    accept, confirms, parse_auth_method, parse_ipv4, parse_optional_ipv4,
    parse_subnet, validate_password, validate_ssid,
)

C = TypeVar("C")


def _ip_text(value) -> str:
    return str(value) if value is not None else ""


class ConfForm(ABC, Generic[C]):
    """A fixed set of named fields plus the gate rules between them.

    Subclasses list their field attribute names in FIELDS, build the fields
    in __init__ and then call super().__init__(). They also implement get(),
    which returns the typed configuration or None while an active field has
    errors, and set(), which loads a confirmed configuration into the fields.
    """

    FIELDS: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self.check_acyclic()

    def fields(self) -> Dict[str, Field]:
        return {name: getattr(self, name) for name in self.FIELDS}

    def active_fields(self) -> List[str]:
        return list(self.FIELDS)

    def is_active(self, name: str) -> bool:
        return name in self.active_fields()

    def has_errors(self) -> bool:
        fields = self.fields()
        return any(fields[name].has_errors() for name in self.active_fields())

    def errors(self) -> Dict[str, str]:
        """Error messages of the active fields that currently fail."""
        fields = self.fields()
        return {
            name: fields[name].error()
            for name in self.active_fields()
            if fields[name].has_errors()
        }

    def is_dirty(self) -> bool:
        fields = self.fields()
        return any(fields[name].is_dirty() for name in self.active_fields())

    def subscribe(self, listener: Listener) -> None:
        for f in self.fields().values():
            f.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        for f in self.fields().values():
            f.unsubscribe(listener)

    def check_acyclic(self) -> None:
        """Raise ValueError if a validator depends, directly or not, on itself."""
        names = {id(f): name for name, f in self.fields().items()}
        done = set()

        def visit(f: Field, path: List[Field]) -> None:
            if f in path:
                cycle = path[path.index(f):] + [f]
                chain = " -> ".join(names.get(id(c), "?") for c in cycle)
                raise ValueError(f"Cyclic field dependency: {chain}")
            if id(f) in done:
                return
            for dep in f.depends_on:
                visit(dep, path + [f])
            done.add(id(f))

        for f in self.fields().values():
            visit(f, [])

    @abstractmethod
    def get(self) -> Optional[C]:
        ...

    @abstractmethod
    def set(self, conf: C) -> None:
        ...


class ApConfForm(ConfForm[AccessPointConfiguration]):
    """Access point: SSID, authentication and the optional router settings."""

    FIELDS = (
        "ssid", "hidden_ssid",
        "auth", "password", "password_confirm",
        "ip_conf_enabled", "dhcp_server_enabled", "subnet", "dns", "secondary_dns",
    )

    def __init__(self) -> None:
        self.ssid = text_field(validate_ssid)
        self.hidden_ssid = checked_field(accept)

        self.auth = text_field(parse_auth_method)
        self.password = text_field(validate_password)
        self.password_confirm = text_field(confirms(self.password), depends_on=[self.password])

        self.ip_conf_enabled = checked_field(accept)
        self.dhcp_server_enabled = checked_field(accept)
        self.subnet = text_field(parse_subnet)
        self.dns = text_field(parse_optional_ipv4)
        self.secondary_dns = text_field(parse_optional_ipv4)
        super().__init__()

    def active_fields(self) -> List[str]:
        active = ["ssid", "hidden_ssid", "auth", "ip_conf_enabled"]
        if self.auth.value() != AuthMethod.NONE:
            active += ["password", "password_confirm"]
        if self.ip_conf_enabled.value() is True:
            active += ["dhcp_server_enabled", "subnet", "dns", "secondary_dns"]
        return active

    def get(self) -> Optional[AccessPointConfiguration]:
        if self.has_errors():
            return None

        auth = self.auth.value()
        ip_conf = None
        if self.ip_conf_enabled.value():
            ip_conf = RouterConfiguration(
                dhcp_enabled=self.dhcp_server_enabled.value(),
                subnet=self.subnet.value(),
                dns=self.dns.value(),
                secondary_dns=self.secondary_dns.value(),
            )
        return AccessPointConfiguration(
            ssid=self.ssid.value(),
            ssid_hidden=self.hidden_ssid.value(),
            auth_method=auth,
            password=self.password.value() if auth != AuthMethod.NONE else "",
            ip_conf=ip_conf,
        )

    def set(self, conf: AccessPointConfiguration) -> None:
        self.ssid.set(conf.ssid)
        self.hidden_ssid.set(conf.ssid_hidden)

        self.auth.set(conf.auth_method.value)
        self.password.set(conf.password)
        self.password_confirm.set(conf.password)

        ip_conf = conf.ip_conf
        self.ip_conf_enabled.set(ip_conf is not None)
        self.dhcp_server_enabled.set(ip_conf.dhcp_enabled if ip_conf else False)
        self.subnet.set(str(ip_conf.subnet) if ip_conf else "")
        self.dns.set(_ip_text(ip_conf.dns) if ip_conf else "")
        self.secondary_dns.set(_ip_text(ip_conf.secondary_dns) if ip_conf else "")


class StaConfForm(ConfForm[ClientConfiguration]):
    """Client: SSID, authentication and either DHCP or fixed IP settings."""

    FIELDS = (
        "ssid",
        "auth", "password", "password_confirm",
        "ip_conf_enabled", "dhcp_enabled", "subnet", "ip", "dns", "secondary_dns",
    )

    def __init__(self) -> None:
        self.ssid = text_field(validate_ssid)

        self.auth = text_field(parse_auth_method)
        self.password = text_field(validate_password)
        self.password_confirm = text_field(confirms(self.password), depends_on=[self.password])

        self.ip_conf_enabled = checked_field(accept)
        self.dhcp_enabled = checked_field(accept)
        self.subnet = text_field(parse_subnet)
        self.ip = text_field(parse_ipv4)
        self.dns = text_field(parse_optional_ipv4)
        self.secondary_dns = text_field(parse_optional_ipv4)
        # DHCP options have no widgets; the confirmed ones are passed through
        self._dhcp = DhcpClientSettings()
        super().__init__()

    def fixed_ip_active(self) -> bool:
        return self.ip_conf_enabled.value() is True and self.dhcp_enabled.value() is False

    def active_fields(self) -> List[str]:
        active = ["ssid", "auth", "ip_conf_enabled"]
        if self.auth.value() != AuthMethod.NONE:
            active += ["password", "password_confirm"]
        if self.ip_conf_enabled.value() is True:
            active.append("dhcp_enabled")
        if self.fixed_ip_active():
            active += ["subnet", "ip", "dns", "secondary_dns"]
        return active

    def get(self) -> Optional[ClientConfiguration]:
        if self.has_errors():
            return None

        auth = self.auth.value()
        ip_conf = None
        if self.ip_conf_enabled.value():
            if self.dhcp_enabled.value():
                ip_conf = self._dhcp
            else:
                ip_conf = ClientSettings(
                    ip=self.ip.value(),
                    subnet=self.subnet.value(),
                    dns=self.dns.value(),
                    secondary_dns=self.secondary_dns.value(),
                )
        return ClientConfiguration(
            ssid=self.ssid.value(),
            auth_method=auth,
            password=self.password.value() if auth != AuthMethod.NONE else "",
            ip_conf=ip_conf,
        )

    def set(self, conf: ClientConfiguration) -> None:
        self.ssid.set(conf.ssid)

        self.auth.set(conf.auth_method.value)
        self.password.set(conf.password)
        self.password_confirm.set(conf.password)

        self.ip_conf_enabled.set(conf.ip_conf is not None)
        dhcp = isinstance(conf.ip_conf, DhcpClientSettings)
        self._dhcp = conf.ip_conf if dhcp else DhcpClientSettings()
        self.dhcp_enabled.set(dhcp)

        fixed = conf.fixed_settings
        self.subnet.set(str(fixed.subnet) if fixed else "")
        self.ip.set(str(fixed.ip) if fixed else "")
        self.dns.set(_ip_text(fixed.dns) if fixed else "")
        self.secondary_dns.set(_ip_text(fixed.secondary_dns) if fixed else "")
