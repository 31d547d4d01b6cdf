import ipaddress
import pytest

from field import text_field
from network.models import AuthMethod, Subnet
from validators import (
    IP_FORMAT_ERROR, confirms, parse_auth_method, parse_ipv4, parse_mask,
    parse_optional_ipv4, parse_subnet, validate_password, validate_ssid,
)

def test_valid_ip():
    assert parse_ipv4("192.168.1.100") == ipaddress.IPv4Address("192.168.1.100")

def test_invalid_ip_format():
    with pytest.raises(ValueError, match="expected XXX.XXX.XXX.XXX"):
        parse_ipv4("999.1.1.1")

def test_optional_ip_blank_is_none():
    assert parse_optional_ipv4("") is None
    assert parse_optional_ipv4("   ") is None

def test_optional_ip_parses_address():
    assert parse_optional_ipv4("8.8.8.8") == ipaddress.IPv4Address("8.8.8.8")

def test_optional_ip_rejects_garbage():
    with pytest.raises(ValueError) as e:
        parse_optional_ipv4("not-an-ip")
    assert str(e.value) == IP_FORMAT_ERROR

def test_valid_mask():
    assert parse_mask("0") == 0
    assert parse_mask("32") == 32

def test_mask_too_large():
    with pytest.raises(ValueError, match="between 0 and 32"):
        parse_mask("33")

def test_mask_not_a_number():
    with pytest.raises(ValueError, match="Invalid subnet mask"):
        parse_mask("x")

def test_mask_rejects_non_ascii_digits():
    with pytest.raises(ValueError, match="Invalid subnet mask"):
        parse_mask("\u00b2")

def test_parse_subnet():
    subnet = parse_subnet("10.0.0.0/24")
    assert subnet == Subnet(ipaddress.IPv4Address("10.0.0.0"), 24)
    assert str(subnet) == "10.0.0.0/24"

def test_parse_subnet_without_mask():
    with pytest.raises(ValueError, match="Expected <gateway-ip-address>/<mask>"):
        parse_subnet("bad")

def test_parse_subnet_too_many_parts():
    with pytest.raises(ValueError, match="Expected"):
        parse_subnet("10.0.0.1/24/8")

def test_parse_subnet_bad_gateway():
    with pytest.raises(ValueError, match="Invalid IP address"):
        parse_subnet("10.0.0/24")

def test_parse_auth_method_by_label():
    assert parse_auth_method("WEP") is AuthMethod.WEP
    assert parse_auth_method("None") is AuthMethod.NONE

def test_parse_auth_method_unknown_falls_back_to_default():
    assert parse_auth_method("") is AuthMethod.default()
    assert parse_auth_method("bogus") is AuthMethod.WPA2_PERSONAL

def test_ssid_may_be_empty():
    assert validate_ssid("") == ""

def test_ssid_too_long():
    with pytest.raises(ValueError, match="at most 32"):
        validate_ssid("x" * 33)

def test_password_cannot_be_empty():
    with pytest.raises(ValueError, match="Password cannot be empty"):
        validate_password("")

def test_confirms_reads_other_field_live():
    password = text_field(validate_password)
    check = confirms(password)
    password.on_change("abc")
    assert check("abc") == "abc"
    password.on_change("abcd")
    with pytest.raises(ValueError, match="Passwords do not match"):
        check("abc")
