"""vCenter ticket client: get CIM session tickets for ESX hosts managed by VMware vCenter."""

from .api import (
    CertificateRequestService,
    configure_diagnostics,
    list_all_hosts,
    request_certificate,
    request_ticket,
)
from .client import EndpointSession, ManagementClient
from .config import Credentials, InventoryEntity, SessionTicket, VCenterConfig
from .diagnostics import Diagnostics
from .exceptions import (
    AuthenticationError,
    ConnectivityError,
    DnsResolutionError,
    HostNotFoundError,
    InventoryError,
    UnknownError,
    VCenterError,
)
from .resolver import HostResolver
from .session import SessionManager

__all__ = [
    "CertificateRequestService",
    "configure_diagnostics",
    "list_all_hosts",
    "request_certificate",
    "request_ticket",
    "EndpointSession",
    "ManagementClient",
    "Credentials",
    "InventoryEntity",
    "SessionTicket",
    "VCenterConfig",
    "Diagnostics",
    "AuthenticationError",
    "ConnectivityError",
    "DnsResolutionError",
    "HostNotFoundError",
    "InventoryError",
    "UnknownError",
    "VCenterError",
    "HostResolver",
    "SessionManager",
]
