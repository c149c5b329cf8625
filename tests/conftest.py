# tests/conftest.py
import pytest
from vcenter_ticket.client import EndpointSession, ManagementClient
from vcenter_ticket.config import (
    ENTITY_DATACENTER,
    ENTITY_HOST_SYSTEM,
    Credentials,
    InventoryEntity,
    SessionTicket,
)
from vcenter_ticket.diagnostics import Diagnostics


def host(name):
    """Create a HostSystem entity."""
    return InventoryEntity(name=name, entity_type=ENTITY_HOST_SYSTEM)


def datacenter(name):
    """Create a Datacenter entity."""
    return InventoryEntity(name=name, entity_type=ENTITY_DATACENTER)


class FakeSession(EndpointSession):
    """In-memory vCenter session."""

    def __init__(
        self,
        url="https://vc.example.com/sdk",
        hosts=None,
        datacenters=None,
        ip_index=None,
        has_root=True,
        ticket_error=None,
        logout_error=None,
    ):
        super().__init__(url)
        self.hosts = hosts
        self.datacenters = datacenters
        self.ip_index = ip_index or {}
        self.has_root = has_root
        self.ticket_error = ticket_error
        self.logout_error = logout_error
        self.logout_calls = 0
        self.ip_queries = []

    def root_folder(self):
        if not self.has_root:
            return None
        return InventoryEntity(name="Datacenters", entity_type="Folder")

    def search_entities(self, root, entity_type):
        if entity_type == ENTITY_HOST_SYSTEM:
            return self.hosts
        if entity_type == ENTITY_DATACENTER:
            return self.datacenters
        return None

    def find_all_by_ip(self, datacenter, ip_address):
        self.ip_queries.append((datacenter.name, ip_address))
        return self.ip_index.get((datacenter.name, ip_address))

    def acquire_cim_ticket(self, host):
        if self.ticket_error is not None:
            raise self.ticket_error
        return SessionTicket(session_id=f"ticket-{host.name}", host_name=host.name)

    def logout(self):
        self.logout_calls += 1
        if self.logout_error is not None:
            raise self.logout_error
        self.closed = True


class FakeClient(ManagementClient):
    """Management client handing out a prepared FakeSession."""

    def __init__(self, session=None, connect_error=None):
        self.session = session or FakeSession()
        self.connect_error = connect_error
        self.connect_calls = []

    def connect(self, url, username, password):
        self.connect_calls.append((url, username, password))
        if self.connect_error is not None:
            raise self.connect_error
        self.session.url = url
        return self.session


class RecordingSink:
    """Diagnostics sink that keeps every message."""

    def __init__(self, enabled=True):
        self.enabled = enabled
        self.messages = []

    def diagnostics(self):
        return Diagnostics(is_enabled=lambda: self.enabled, emit=self.messages.append)


@pytest.fixture
def credentials():
    return Credentials("administrator@vsphere.local", "secret")


@pytest.fixture
def sink():
    return RecordingSink()
