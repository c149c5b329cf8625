# vsphere.py
import logging
import ssl
from typing import Any, List, Optional

from pyVim.connect import Disconnect, SmartConnect
from pyVmomi import vim

from vcenter_ticket.client import EndpointSession, ManagementClient
from vcenter_ticket.config import ENTITY_HOST_SYSTEM, InventoryEntity, SessionTicket
from vcenter_ticket.exceptions import AuthenticationError, ConnectivityError
from vcenter_ticket.utils import get_connect_kwargs


def _to_entity(managed_object: Any, entity_type: str) -> InventoryEntity:
    return InventoryEntity(
        name=managed_object.name, entity_type=entity_type, ref=managed_object
    )


class PyVmomiSession(EndpointSession):
    """
    EndpointSession backed by a pyVmomi ServiceInstance.

    Attributes:
        service_instance: The connected vim.ServiceInstance.
    """

    def __init__(self, url: str, service_instance: Any) -> None:
        super().__init__(url)
        self.service_instance = service_instance
        self._content = None

    @property
    def content(self) -> Any:
        """Get the service content, retrieved once per session."""
        if self._content is None:
            self._content = self.service_instance.RetrieveContent()
        return self._content

    def root_folder(self) -> Optional[InventoryEntity]:
        root = self.content.rootFolder
        if root is None:
            return None
        return _to_entity(root, "Folder")

    def search_entities(
        self, root: InventoryEntity, entity_type: str
    ) -> Optional[List[InventoryEntity]]:
        vim_type = getattr(vim, entity_type)
        view = self.content.viewManager.CreateContainerView(
            root.ref, [vim_type], True
        )
        try:
            managed_objects = view.view
            if managed_objects is None:
                return None
            return [_to_entity(mo, entity_type) for mo in managed_objects]
        finally:
            view.Destroy()

    def find_all_by_ip(
        self, datacenter: InventoryEntity, ip_address: str
    ) -> Optional[List[InventoryEntity]]:
        found = self.content.searchIndex.FindAllByIp(
            datacenter=datacenter.ref, ip=ip_address, vmSearch=False
        )
        if found is None:
            return None
        return [_to_entity(mo, ENTITY_HOST_SYSTEM) for mo in found]

    def acquire_cim_ticket(self, host: InventoryEntity) -> SessionTicket:
        ticket = host.ref.AcquireCimServicesTicket()
        return SessionTicket(session_id=ticket.sessionId, host_name=host.name)

    def logout(self) -> None:
        try:
            Disconnect(self.service_instance)
        finally:
            self.closed = True


class PyVmomiClient(ManagementClient):
    """
    ManagementClient that connects with pyVim.connect.SmartConnect.

    Attributes:
        verify_ssl: If True, verify the vCenter certificate.
        port: Port used when the SDK URL does not carry one.
    """

    def __init__(self, verify_ssl: bool = False, port: int = 443) -> None:
        self.verify_ssl = verify_ssl
        self.port = port

    def connect(self, url: str, username: str, password: str) -> PyVmomiSession:
        try:
            kwargs = get_connect_kwargs(url, self.verify_ssl, self.port)
            service_instance = SmartConnect(user=username, pwd=password, **kwargs)
        except vim.fault.InvalidLogin as e:
            raise AuthenticationError(f"Invalid username or password for {url}") from e
        except ssl.SSLError as e:
            raise ConnectivityError(f"TLS error while connecting to {url}: {e}") from e
        except OSError as e:
            raise ConnectivityError(f"Unable to connect to {url}: {e}") from e
        except ValueError as e:
            raise ConnectivityError(f"Invalid vCenter URL {url}: {e}") from e

        logging.debug("SmartConnect to %s succeeded", url)
        return PyVmomiSession(url, service_instance)
