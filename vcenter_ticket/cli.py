"""Command line wrapper: print a CIM ticket or the list of hosts of a vCenter."""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from vcenter_ticket.api import CertificateRequestService
from vcenter_ticket.config import VCenterConfig
from vcenter_ticket.diagnostics import Diagnostics
from vcenter_ticket.exceptions import VCenterError
from vcenter_ticket.utils import validate_vcenter_config


def _always() -> bool:
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Request a CIM session ticket for an ESX host from VMware vCenter."
    )
    parser.add_argument("--config", help="Path to YAML config file.")
    parser.add_argument("--vcenter", help="Override vCenter hostname from config file.")
    parser.add_argument("--username", help="Override username from config file.")
    parser.add_argument("--password", help="Override password from config file.")

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--host", help="ESX hostname or IP address to get a ticket for.")
    action.add_argument(
        "--list",
        action="store_true",
        help="List every host registered in the vCenter.",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print diagnostic messages to stdout.",
    )
    return parser


def load_config(args: argparse.Namespace) -> VCenterConfig:
    """
    Merge the YAML config file with the command line overrides.

    Raises:
        ValueError: If hostname, username or password is missing.
    """
    file_config = {}
    if args.config:
        with open(args.config, "r", encoding="utf-8") as file:
            file_config = yaml.safe_load(file) or {}

    overrides = {}
    if args.vcenter is not None:
        overrides["hostname"] = args.vcenter
    if args.username is not None:
        overrides["username"] = args.username
    if args.password is not None:
        overrides["password"] = args.password

    return VCenterConfig(**validate_vcenter_config(overrides, file_config))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool and return its exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.debug:
        diagnostics = Diagnostics(is_enabled=_always, emit=print)
    else:
        diagnostics = Diagnostics.disabled()

    try:
        config = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.error("Invalid configuration: %s", e)
        return 1

    from vcenter_ticket.vsphere import PyVmomiClient

    service = CertificateRequestService(
        client=PyVmomiClient(verify_ssl=config.verify_ssl, port=config.port),
        diagnostics=diagnostics,
    )

    try:
        if args.list:
            for name in service.list_all_hosts(config.hostname, config.credentials):
                print(name)
        else:
            print(
                service.request_certificate(
                    config.hostname, config.credentials, args.host
                )
            )
    except VCenterError as e:
        logging.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
