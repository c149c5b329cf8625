# api.py
import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from vcenter_ticket.client import ManagementClient
from vcenter_ticket.config import Credentials, SessionTicket
from vcenter_ticket.diagnostics import Diagnostics
from vcenter_ticket.exceptions import HostNotFoundError, UnknownError, VCenterError
from vcenter_ticket.metrics import REQUEST_LATENCY, record_request
from vcenter_ticket.resolver import HostResolver
from vcenter_ticket.session import SessionManager

_diagnostics: Optional[Diagnostics] = None


class CertificateRequestService:
    """
    Get CIM session tickets for ESX hosts managed by a vCenter.

    Each call performs a full connect, query and logout cycle; nothing is
    cached between calls.

    Attributes:
        diagnostics: Debug output sink shared by the session manager and resolver.
        sessions: Session manager.
        resolver: Host resolver.
    """

    def __init__(
        self,
        client: Optional[ManagementClient] = None,
        diagnostics: Optional[Diagnostics] = None,
        resolver: Optional[HostResolver] = None,
    ) -> None:
        if client is None:
            from vcenter_ticket.vsphere import PyVmomiClient

            client = PyVmomiClient()
        self.diagnostics = diagnostics or Diagnostics.from_logging()
        self.sessions = SessionManager(client, self.diagnostics)
        self.resolver = resolver or HostResolver(self.diagnostics)

    @contextmanager
    def _tracked(self, endpoint: str, operation: str) -> Iterator[None]:
        start = time.monotonic()
        try:
            yield
        except VCenterError as e:
            record_request(endpoint, operation, e)
            raise
        except Exception as e:
            logging.exception("Unexpected error on %s during %s: %s", endpoint, operation, e)
            error = UnknownError(f"Unexpected error on {endpoint}: {e}")
            record_request(endpoint, operation, error)
            raise error from e
        else:
            record_request(endpoint, operation)
        finally:
            REQUEST_LATENCY.labels(vcenter=endpoint, operation=operation).observe(
                time.monotonic() - start
            )

    def request_ticket(
        self, endpoint: str, credentials: Credentials, target_host: str
    ) -> SessionTicket:
        """
        Get a CIM services ticket for a host registered in a vCenter.

        Args:
            endpoint: Hostname or IP address of the vCenter.
            credentials: vCenter username and password.
            target_host: Hostname or IP address of the ESX host.

        Returns:
            SessionTicket: The ticket issued by the host.

        Raises:
            HostNotFoundError: If no pass of the resolver found the host.
            VCenterError: Any other failure, see exceptions.py.
        """
        with self._tracked(endpoint, "request_ticket"):
            with self.sessions.session(endpoint, credentials) as session:
                host = self.resolver.resolve(session, target_host)
                if host is None:
                    raise HostNotFoundError(target_host, endpoint)
                ticket = session.acquire_cim_ticket(host)
        return ticket

    def request_certificate(
        self, endpoint: str, credentials: Credentials, target_host: str
    ) -> str:
        """Same as request_ticket() but return the session id only."""
        return self.request_ticket(endpoint, credentials, target_host).session_id

    def list_all_hosts(self, endpoint: str, credentials: Credentials) -> List[str]:
        """
        List the names of every host registered in a vCenter.

        Args:
            endpoint: Hostname or IP address of the vCenter.
            credentials: vCenter username and password.

        Returns:
            list: Host names in the order returned by the server.
        """
        with self._tracked(endpoint, "list_all_hosts"):
            with self.sessions.session(endpoint, credentials) as session:
                names = self.resolver.host_names(session)
        return names


def configure_diagnostics(
    is_enabled: Callable[[], bool], emit: Callable[[str], None]
) -> Diagnostics:
    """
    Set the debug output sink used by the module level functions.

    Call this once, before any request, when debug output is wanted.

    Args:
        is_enabled: Returns True when debug output is wanted.
        emit: Writes one debug message.

    Returns:
        Diagnostics: The configured sink.
    """
    global _diagnostics
    _diagnostics = Diagnostics(is_enabled=is_enabled, emit=emit)
    return _diagnostics


def _default_service(client: Optional[ManagementClient]) -> CertificateRequestService:
    return CertificateRequestService(client=client, diagnostics=_diagnostics)


def request_ticket(
    endpoint: str,
    username: str,
    password: str,
    target_host: str,
    client: Optional[ManagementClient] = None,
) -> SessionTicket:
    """Get a CIM services ticket for target_host from the vCenter at endpoint."""
    return _default_service(client).request_ticket(
        endpoint, Credentials(username, password), target_host
    )


def request_certificate(
    endpoint: str,
    username: str,
    password: str,
    target_host: str,
    client: Optional[ManagementClient] = None,
) -> str:
    """Get the CIM session id for target_host from the vCenter at endpoint."""
    return request_ticket(endpoint, username, password, target_host, client).session_id


def list_all_hosts(
    endpoint: str,
    username: str,
    password: str,
    client: Optional[ManagementClient] = None,
) -> List[str]:
    """List every host name registered in the vCenter at endpoint."""
    return _default_service(client).list_all_hosts(
        endpoint, Credentials(username, password)
    )
