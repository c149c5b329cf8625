# session.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from vcenter_ticket.client import EndpointSession, ManagementClient
from vcenter_ticket.config import Credentials
from vcenter_ticket.diagnostics import Diagnostics
from vcenter_ticket.utils import build_sdk_url


class SessionManager:
    """
    Open and close vCenter sessions.

    Every session returned by open() must be handed back to close() exactly
    once; session() does that for you.

    Attributes:
        client: Management client used to connect.
        diagnostics: Debug output sink.
    """

    def __init__(
        self, client: ManagementClient, diagnostics: Optional[Diagnostics] = None
    ) -> None:
        self.client = client
        self.diagnostics = diagnostics or Diagnostics.disabled()

    def open(self, endpoint: str, credentials: Credentials) -> EndpointSession:
        """
        Connect and authenticate against a vCenter.

        Args:
            endpoint: Hostname or IP address of the vCenter.
            credentials: Username and password.

        Returns:
            EndpointSession: The authenticated session.

        Raises:
            AuthenticationError: If the credentials are rejected.
            ConnectivityError: If the vCenter cannot be reached.
        """
        url = build_sdk_url(endpoint)
        self.diagnostics.debug(f"Connecting to {url}...")
        session = self.client.connect(url, credentials.username, credentials.password)
        logging.info("Connected to %s", url)
        return session

    def close(self, session: Optional[EndpointSession]) -> None:
        """Log out from a session. Logout errors are logged, never raised."""
        if session is None or session.closed:
            return
        try:
            session.logout()
            logging.info("Logged out from %s", session.host)
        except Exception as e:
            logging.warning("Logout error for %s: %s", session.host, e)

    @contextmanager
    def session(
        self, endpoint: str, credentials: Credentials
    ) -> Iterator[EndpointSession]:
        """Open a session for the duration of a with block."""
        session = self.open(endpoint, credentials)
        try:
            yield session
        finally:
            self.close(session)
