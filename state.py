from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from forms import ApConfForm, StaConfForm
from network.models import (
    AccessPointConfiguration, ClientConfiguration, Configuration, WifiStatus,
)


class PluginBehavior(Enum):
    STA = "sta"
    AP = "ap"
    MIXED = "mixed"

    @property
    def description(self) -> str:
        return {
            PluginBehavior.STA: "A settings user interface for configuring Wifi access",
            PluginBehavior.AP: "A settings user interface for configuring Wifi Access Point",
            PluginBehavior.MIXED: "A settings user interface for configuring WiFi Access Point and STA",
        }[self]

    @property
    def uses_ap(self) -> bool:
        return self in (PluginBehavior.AP, PluginBehavior.MIXED)

    @property
    def uses_sta(self) -> bool:
        return self in (PluginBehavior.STA, PluginBehavior.MIXED)


def ap_slice(conf: Configuration) -> AccessPointConfiguration:
    """The access point part of `conf`, as it is loaded into the AP form."""
    return conf.access_point or AccessPointConfiguration()


def sta_slice(conf: Configuration) -> ClientConfiguration:
    return conf.client or ClientConfiguration()


@dataclass
class WifiState:
    behavior: PluginBehavior = PluginBehavior.MIXED
    conf: Optional[Configuration] = None   # None = not fetched yet
    status: Optional[WifiStatus] = None

    @property
    def loaded(self) -> bool:
        return self.conf is not None

    def load(self, conf: Configuration, ap_form: ApConfForm, sta_form: StaConfForm) -> bool:
        """Adopt a freshly fetched conf. Returns False if nothing changed."""
        if self.conf == conf:
            return False
        ap_form.set(ap_slice(conf))
        sta_form.set(sta_slice(conf))
        self.conf = conf
        return True

    def has_errors(self, ap_form: ApConfForm, sta_form: StaConfForm) -> bool:
        return (
            (self.behavior.uses_ap and ap_form.has_errors())
            or (self.behavior.uses_sta and sta_form.has_errors())
        )

    def submit_enabled(self, ap_form: ApConfForm, sta_form: StaConfForm) -> bool:
        if self.conf is None or self.has_errors(ap_form, sta_form):
            return False
        changed = False
        if self.behavior.uses_ap:
            changed = changed or ap_form.get() != ap_slice(self.conf)
        if self.behavior.uses_sta:
            changed = changed or sta_form.get() != sta_slice(self.conf)
        return changed

    def build_configuration(self, ap_form: ApConfForm, sta_form: StaConfForm) -> Configuration:
        """Combine the forms into the configuration to save.

        A part the behavior does not edit is kept as confirmed, so saving
        from an AP-only or STA-only screen never drops the other one.
        """
        confirmed = self.conf or Configuration()
        ap, sta = confirmed.access_point, confirmed.client
        if self.behavior.uses_ap:
            ap = ap_form.get() or AccessPointConfiguration()
        if self.behavior.uses_sta:
            sta = sta_form.get() or ClientConfiguration()
        return Configuration(access_point=ap, client=sta)
