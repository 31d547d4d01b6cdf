from __future__ import annotations
import asyncio
import os
import shutil
from pathlib import Path
from typing import Union

import yaml

from logger import log
from network.interfaces import async_iface_status
from network.models import Configuration, WifiStatus

CONF_PATH = Path("/etc/wifi-setup/wifi.yaml")


class EndpointError(Exception):
    """Reading or writing the device configuration failed."""


class WifiEndpoint:
    """Source of truth for the device's wifi status and configuration."""

    async def get_status(self) -> WifiStatus:
        raise NotImplementedError

    async def get_configuration(self) -> Configuration:
        raise NotImplementedError

    async def set_configuration(self, conf: Configuration) -> None:
        raise NotImplementedError


class LocalWifiEndpoint(WifiEndpoint):
    """Keeps the configuration in a YAML file and reads status from sysfs."""

    def __init__(self, iface: str, conf_path: Union[str, Path] = CONF_PATH):
        self.iface = iface
        self.conf_path = Path(conf_path)

    # -- Status ------------------------------------------------------------

    async def get_status(self) -> WifiStatus:
        operstate, ips = await async_iface_status(self.iface)
        return WifiStatus(interface=self.iface, operstate=operstate, ip_addresses=ips)

    # -- Configuration -----------------------------------------------------

    def read(self) -> Configuration:
        """Load the stored configuration; a missing file means device defaults."""
        if not self.conf_path.exists():
            log.info("No configuration at %s, using defaults", self.conf_path)
            return Configuration.mixed()
        try:
            with open(self.conf_path) as f:
                data = yaml.safe_load(f) or {}
            return Configuration.from_dict(data)
        except (OSError, yaml.YAMLError) as e:
            raise EndpointError(f"Cannot read {self.conf_path}: {e}") from e
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise EndpointError(f"Malformed configuration in {self.conf_path}: {e}") from e

    def write(self, conf: Configuration) -> None:
        """Write `conf`, keeping the previous file as <name>.bak."""
        path = self.conf_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if path.exists():
                bak = path.with_suffix(path.suffix + ".bak")
                shutil.copy2(path, bak)
                log.info("Backed up %s -> %s", path, bak)
            with open(path, "w") as f:
                yaml.safe_dump(conf.to_dict(), f, default_flow_style=False, sort_keys=False)
            os.chmod(path, 0o600)
        except OSError as e:
            raise EndpointError(f"Cannot write {path}: {e}") from e
        log.info("Wrote wifi configuration (%s) to %s", conf.kind, path)

    async def get_configuration(self) -> Configuration:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.read)

    async def set_configuration(self, conf: Configuration) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, lambda: self.write(conf))
