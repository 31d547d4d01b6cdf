import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import ipaddress
import pytest
from forms import ApConfForm, StaConfForm
from network.models import (
    AccessPointConfiguration, AuthMethod, ClientConfiguration, ClientSettings,
    Configuration, RouterConfiguration, Subnet,
)


@pytest.fixture
def ap_conf():
    return AccessPointConfiguration(
        ssid="office",
        ssid_hidden=False,
        auth_method=AuthMethod.WPA2_PERSONAL,
        password="hunter22",
        ip_conf=RouterConfiguration(
            dhcp_enabled=True,
            subnet=Subnet(ipaddress.IPv4Address("10.0.0.1"), 24),
            dns=ipaddress.IPv4Address("10.0.0.1"),
            secondary_dns=None,
        ),
    )


@pytest.fixture
def sta_conf():
    return ClientConfiguration(
        ssid="home",
        auth_method=AuthMethod.WPA3_PERSONAL,
        password="s3cr3t",
        ip_conf=ClientSettings(
            ip=ipaddress.IPv4Address("192.168.1.50"),
            subnet=Subnet(ipaddress.IPv4Address("192.168.1.1"), 24),
            dns=ipaddress.IPv4Address("192.168.1.1"),
            secondary_dns=ipaddress.IPv4Address("8.8.8.8"),
        ),
    )


@pytest.fixture
def conf(ap_conf, sta_conf):
    return Configuration(access_point=ap_conf, client=sta_conf)


@pytest.fixture
def ap_form(ap_conf):
    form = ApConfForm()
    form.set(ap_conf)
    return form


@pytest.fixture
def sta_form(sta_conf):
    form = StaConfForm()
    form.set(sta_conf)
    return form
