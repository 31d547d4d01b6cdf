import argparse
import logging
import os
import sys

from logger import log, set_console_level
from network.endpoint import CONF_PATH
from state import PluginBehavior


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wifi-setup",
        description="Edit the Wifi access point and client configuration.",
    )
    parser.add_argument(
        "--behavior",
        choices=[b.value for b in PluginBehavior],
        default=PluginBehavior.MIXED.value,
        help="which forms to show (default: %(default)s)",
    )
    parser.add_argument("--iface", help="wireless interface to report status for")
    parser.add_argument(
        "--config",
        default=str(CONF_PATH),
        help="configuration file (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log INFO to stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.config == str(CONF_PATH) and os.geteuid() != 0:
        print(f"ERROR: writing {CONF_PATH} requires root; use --config for another file.",
              file=sys.stderr)
        sys.exit(1)
    if args.verbose:
        set_console_level(logging.INFO)

    from app import WifiSetupApp
    from network.endpoint import LocalWifiEndpoint
    from network.interfaces import default_wireless_interface

    iface = args.iface or default_wireless_interface()
    log.info("Using interface %s, configuration %s", iface, args.config)
    endpoint = LocalWifiEndpoint(iface, args.config)
    WifiSetupApp(endpoint, PluginBehavior(args.behavior)).run()
    sys.exit(0)

if __name__ == "__main__":
    main()
