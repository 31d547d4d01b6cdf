from __future__ import annotations
import ipaddress
from typing import Callable, Optional, TypeVar

from network.models import AuthMethod, Subnet

T = TypeVar("T")

IP_FORMAT_ERROR = "Invalid IP address format, expected XXX.XXX.XXX.XXX"
SSID_MAX_LEN = 32

# Validators take the raw widget value and return the typed value,
# raising ValueError with a user-facing message when it is rejected.


def accept(raw: T) -> T:
    return raw


def parse_ipv4(text: str) -> ipaddress.IPv4Address:
    try:
        return ipaddress.IPv4Address(text)
    except ValueError:
        raise ValueError(IP_FORMAT_ERROR) from None


def parse_optional_ipv4(text: str) -> Optional[ipaddress.IPv4Address]:
    """Blank means 'not configured'."""
    if not text.strip():
        return None
    return parse_ipv4(text)


def parse_mask(text: str) -> int:
    if not text.isdecimal():
        raise ValueError("Invalid subnet mask")
    mask = int(text)
    if mask > 32:
        raise ValueError("Mask should be a number between 0 and 32")
    return mask


def parse_subnet(text: str) -> Subnet:
    """Parse '192.168.71.1/24' -> Subnet(gateway=192.168.71.1, mask=24)."""
    parts = text.split("/")
    if len(parts) != 2:
        raise ValueError("Expected <gateway-ip-address>/<mask>")
    gateway_str, mask_str = parts
    return Subnet(gateway=parse_ipv4(gateway_str), mask=parse_mask(mask_str))


def parse_auth_method(label: str) -> AuthMethod:
    """Map a select label back to its method; unknown labels get the default."""
    for method in AuthMethod:
        if method.value == label:
            return method
    return AuthMethod.default()


def validate_ssid(text: str) -> str:
    if len(text) > SSID_MAX_LEN:
        raise ValueError(f"SSID must be at most {SSID_MAX_LEN} characters")
    return text


def validate_password(text: str) -> str:
    if not text:
        raise ValueError("Password cannot be empty")
    return text


def confirms(other) -> Callable[[str], str]:
    """Validator that only accepts the current value of the field `other`.

    `other` is read on every call, so edits to it are picked up without
    re-validating this field explicitly.
    """
    def validate(text: str) -> str:
        if text != other.effective_value():
            raise ValueError("Passwords do not match")
        return text

    return validate
