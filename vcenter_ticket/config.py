from dataclasses import dataclass, field
from typing import Any, Optional

ENTITY_HOST_SYSTEM: str = "HostSystem"
ENTITY_DATACENTER: str = "Datacenter"
SDK_PATH: str = "/sdk"


@dataclass(frozen=True)
class VCenterConfig:
    """Static configuration for a VMware vCenter endpoint.

    Attributes:
        hostname: Hostname or IP address of the vCenter server.
        username: Username for authentication.
        password: Password for authentication.
        verify_ssl: If True, verify the server certificate. Defaults to False.
        port: HTTPS port of the SDK endpoint. Defaults to 443.
    """
    hostname: str
    username: str
    password: str = field(repr=False)
    verify_ssl: bool = False
    port: int = 443

    @property
    def credentials(self) -> "Credentials":
        """Get the username/password pair of this endpoint.

        Returns:
            Credentials: The credentials.
        """
        return Credentials(self.username, self.password)


@dataclass(frozen=True)
class Credentials:
    """Username and password pair. The password is kept out of repr()."""
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class InventoryEntity:
    """A named node of the vCenter inventory.

    Attributes:
        name: Name of the entity as returned by the server.
        entity_type: Type tag, e.g. "HostSystem" or "Datacenter".
        ref: Underlying managed object, if any.
    """
    name: str
    entity_type: str
    ref: Optional[Any] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SessionTicket:
    """Session ticket issued by an ESX host for CIM/WBEM access.

    Attributes:
        session_id: Opaque session identifier.
        host_name: Name of the host that issued the ticket.
    """
    session_id: str = field(repr=False)
    host_name: Optional[str] = None
