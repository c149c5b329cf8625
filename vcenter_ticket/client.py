# client.py
from abc import ABC, abstractmethod
from typing import List, Optional
from urllib.parse import urlsplit

from vcenter_ticket.config import InventoryEntity, SessionTicket


class EndpointSession(ABC):
    """
    Authenticated connection to a vCenter management endpoint.

    The resolver only talks to the inventory through this class, so any
    transport (pyVmomi, a raw SOAP layer, an in-memory fake) can sit behind it.

    Attributes:
        url: SDK URL this session was opened against.
        closed: True once logout() has been called.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self.closed = False

    @property
    def host(self) -> Optional[str]:
        """Get the vCenter host name this session is connected to.

        Returns:
            str: Host part of the SDK URL.
        """
        return urlsplit(self.url).hostname

    @abstractmethod
    def root_folder(self) -> Optional[InventoryEntity]:
        """Return the inventory root folder, or None if it is not available."""

    @abstractmethod
    def search_entities(
        self, root: InventoryEntity, entity_type: str
    ) -> Optional[List[InventoryEntity]]:
        """
        Search every entity of the given type below root.

        Args:
            root: Container to search from.
            entity_type: Type name, e.g. "HostSystem".

        Returns:
            list: Entities in server order, or None if the server returned nothing.
        """

    @abstractmethod
    def find_all_by_ip(
        self, datacenter: InventoryEntity, ip_address: str
    ) -> Optional[List[InventoryEntity]]:
        """
        Query the IP index of a datacenter for hosts owning an address.

        Args:
            datacenter: Datacenter entity to search in.
            ip_address: IP address as a string.

        Returns:
            list: Matching host entities, or None.
        """

    @abstractmethod
    def acquire_cim_ticket(self, host: InventoryEntity) -> SessionTicket:
        """Ask a host for a CIM services ticket."""

    @abstractmethod
    def logout(self) -> None:
        """Terminate the session on the server."""


class ManagementClient(ABC):
    """Factory of authenticated EndpointSession objects."""

    @abstractmethod
    def connect(self, url: str, username: str, password: str) -> EndpointSession:
        """
        Open an authenticated session.

        Args:
            url: SDK URL, e.g. "https://vc.example.com/sdk".
            username: Username for authentication.
            password: Password for authentication.

        Returns:
            EndpointSession: The open session.

        Raises:
            AuthenticationError: If the credentials are rejected.
            ConnectivityError: If the endpoint cannot be reached.
        """
