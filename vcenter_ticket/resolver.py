# resolver.py
import logging
from typing import Callable, Iterable, List, Optional

from vcenter_ticket.client import EndpointSession
from vcenter_ticket.config import ENTITY_DATACENTER, ENTITY_HOST_SYSTEM, InventoryEntity
from vcenter_ticket.diagnostics import Diagnostics
from vcenter_ticket.exceptions import InventoryError
from vcenter_ticket.metrics import RESOLUTION_COUNTER
from vcenter_ticket.utils import resolve_ip_addresses


def short_name(entity_name: str) -> Optional[str]:
    """
    Get the part of a host name before its first dot.

    Args:
        entity_name: Host name as registered in the vCenter.

    Returns:
        str: The short name, or None if the name has no dot past index 1.
    """
    dot_index = entity_name.find(".")
    if dot_index > 1:
        return entity_name[:dot_index]
    return None


def match_exact_name(
    entities: Iterable[InventoryEntity], target_name: str
) -> Optional[InventoryEntity]:
    """Return the first entity whose name equals target_name, ignoring case."""
    wanted = target_name.lower()
    for entity in entities:
        if entity.name is not None and entity.name.lower() == wanted:
            return entity
    return None


def match_short_name(
    entities: Iterable[InventoryEntity], target_name: str
) -> Optional[InventoryEntity]:
    """Return the first entity whose short name equals target_name, ignoring case."""
    wanted = target_name.lower()
    for entity in entities:
        if entity.name is None:
            continue
        name = short_name(entity.name)
        if name is not None and name.lower() == wanted:
            return entity
    return None


def format_candidates(entities: Iterable[InventoryEntity]) -> str:
    """Format entity names as a bullet list, one per line."""
    return "".join(f" - {entity.name}\n" for entity in entities)


class HostResolver:
    """
    Find the HostSystem entity that matches a host name or IP address.

    Three passes are tried in order, and the first hit wins:

    1. exact (case insensitive) match of the entity name,
    2. match of the entity short name, only when the target has no dot,
    3. reverse lookup through the IP index of every datacenter, for every
       address the target resolves to.

    Attributes:
        diagnostics: Debug output sink.
        resolve_ips: Callable turning a name into a list of IP addresses.
    """

    def __init__(
        self,
        diagnostics: Optional[Diagnostics] = None,
        resolve_ips: Callable[[str], List[str]] = resolve_ip_addresses,
    ) -> None:
        self.diagnostics = diagnostics or Diagnostics.disabled()
        self.resolve_ips = resolve_ips

    @staticmethod
    def root_folder(session: EndpointSession) -> InventoryEntity:
        """
        Get the inventory root of a session.

        Raises:
            InventoryError: If the root folder is not available.
        """
        root = session.root_folder()
        if root is None:
            raise InventoryError("Couldn't get the root folder")
        return root

    def host_names(self, session: EndpointSession) -> List[str]:
        """
        List the names of every HostSystem entity, in server order.

        Args:
            session: Open vCenter session.

        Returns:
            list: Host names, possibly empty.
        """
        root = self.root_folder(session)
        hosts = session.search_entities(root, ENTITY_HOST_SYSTEM) or []
        return [host.name for host in hosts]

    def resolve(
        self, session: EndpointSession, target_name: str
    ) -> Optional[InventoryEntity]:
        """
        Find the HostSystem entity for a host name or IP address.

        Args:
            session: Open vCenter session.
            target_name: Host name, FQDN or IP address of the ESX host.

        Returns:
            InventoryEntity: The matching host, or None if no pass found it.

        Raises:
            InventoryError: If the root folder or the datacenters are missing.
            DnsResolutionError: If the IP pass is needed and target_name
                does not resolve.
        """
        root = self.root_folder(session)

        hosts = session.search_entities(root, ENTITY_HOST_SYSTEM)
        if hosts is not None:
            host = match_exact_name(hosts, target_name)
            if host is not None:
                RESOLUTION_COUNTER.labels(method="exact").inc()
                return host

            if "." not in target_name:
                host = match_short_name(hosts, target_name)
                if host is not None:
                    RESOLUTION_COUNTER.labels(method="short_name").inc()
                    return host

            if self.diagnostics.enabled:
                self.diagnostics.emit(
                    f"Couldn't find host {target_name} in the list of managed "
                    f"entities in VCenter {session.host}:\n{format_candidates(hosts)}"
                )
                self.diagnostics.emit(
                    f"Will now try with the IP address of {target_name}"
                )

        host = self._find_by_ip(session, root, target_name)
        if host is None:
            RESOLUTION_COUNTER.labels(method="not_found").inc()
            logging.info("Host %s not found in %s", target_name, session.host)
            return None
        RESOLUTION_COUNTER.labels(method="ip").inc()
        return host

    def _find_by_ip(
        self, session: EndpointSession, root: InventoryEntity, target_name: str
    ) -> Optional[InventoryEntity]:
        addresses = self.resolve_ips(target_name)

        datacenters = session.search_entities(root, ENTITY_DATACENTER)
        if not datacenters:
            raise InventoryError("No Datacenter-type managed entity")

        for datacenter in datacenters:
            for address in addresses:
                found = session.find_all_by_ip(datacenter, address)
                if found:
                    logging.debug(
                        "Found %s by IP %s in datacenter %s",
                        target_name, address, datacenter.name,
                    )
                    return found[0]
        return None
