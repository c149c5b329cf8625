# exceptions.py
from typing import Optional


class VCenterError(Exception):
    """Base class for every error raised by vcenter_ticket."""


class AuthenticationError(VCenterError):
    """The vCenter rejected the username/password."""


class ConnectivityError(VCenterError):
    """The vCenter could not be reached (network, TLS or malformed URL)."""


class InventoryError(VCenterError):
    """The inventory root or the datacenter set is not available."""


class DnsResolutionError(VCenterError):
    """A host name could not be resolved into any IP address."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Couldn't resolve {name} into a valid IP address")
        self.name = name


class HostNotFoundError(VCenterError):
    """The host is not registered in the vCenter."""

    def __init__(self, hostname: str, vcenter: Optional[str] = None) -> None:
        super().__init__(f"Unable to find host {hostname} in VCenter {vcenter}")
        self.hostname = hostname
        self.vcenter = vcenter


class UnknownError(VCenterError):
    """Unexpected error from the underlying transport."""
