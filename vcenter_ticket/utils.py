# utils.py
import socket
from typing import Any, Dict, List, Union
from urllib.parse import urlsplit

from vcenter_ticket.config import SDK_PATH
from vcenter_ticket.exceptions import ConnectivityError, DnsResolutionError


def build_sdk_url(endpoint: str) -> str:
    """
    Build the SDK URL of a vCenter endpoint.

    Args:
        endpoint: Hostname or IP address of the vCenter, optionally with a port.

    Returns:
        str: The URL, e.g. "https://vc.example.com/sdk".

    Raises:
        ConnectivityError: If the endpoint cannot form a valid URL.
    """
    if not endpoint or not endpoint.strip():
        raise ConnectivityError("Empty vCenter endpoint")
    endpoint = endpoint.strip()
    if ":" in endpoint and not endpoint.startswith("[") and endpoint.count(":") > 1:
        # Bare IPv6 literal
        endpoint = f"[{endpoint}]"
    url = f"https://{endpoint}{SDK_PATH}"
    try:
        parts = urlsplit(url)
        parts.port  # noqa: B018 - raises ValueError on a bad port
    except ValueError as e:
        raise ConnectivityError(f"Invalid vCenter URL {url}: {e}") from e
    if not parts.hostname or parts.path != SDK_PATH:
        raise ConnectivityError(f"Invalid vCenter URL {url}")
    return url


def get_connect_kwargs(url: str, verify_ssl: bool, default_port: int = 443) -> Dict[str, Any]:
    """
    Generate keyword arguments for pyVim.connect.SmartConnect.

    Args:
        url: SDK URL as returned by build_sdk_url().
        verify_ssl: If True, verify the server certificate.
        default_port: Port used when the URL does not carry one.

    Returns:
        dict: Keyword arguments (host, port, path, disableSslCertValidation).
    """
    parts = urlsplit(url)
    return {
        "host": parts.hostname,
        "port": parts.port or default_port,
        "path": parts.path or SDK_PATH,
        "disableSslCertValidation": not verify_ssl,
    }


def resolve_ip_addresses(name: str) -> List[str]:
    """
    Resolve a host name into its IP addresses, in resolver order.

    Args:
        name: Host name or IP address literal.

    Returns:
        list: Distinct IP addresses as strings.

    Raises:
        DnsResolutionError: If the name does not resolve to any address.
    """
    try:
        infos = socket.getaddrinfo(name, None)
    except (socket.gaierror, UnicodeError, OSError) as e:
        raise DnsResolutionError(name) from e

    addresses: List[str] = []
    for _family, _type, _proto, _canon, sockaddr in infos:
        address = sockaddr[0]
        if address not in addresses:
            addresses.append(address)

    if not addresses:
        raise DnsResolutionError(name)
    return addresses


def validate_vcenter_config(
    config: Union[Dict[str, Any], str], global_config: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Validate and sanitize vCenter configuration.

    Args:
        config: Raw configuration dictionary, or a bare hostname.
        global_config: Defaults applied to missing fields.

    Returns:
        Dict[str, Any]: Validated configuration with defaults.

    Raises:
        ValueError: If required fields are missing.
    """
    if isinstance(config, str):
        config = {"hostname": config}

    validated_config = {
        "hostname": config.get("hostname", global_config.get("hostname")),
        "username": config.get("username", global_config.get("username")),
        "password": config.get("password", global_config.get("password")),
        "verify_ssl": config.get("verify_ssl", global_config.get("verify_ssl", False)),
        "port": config.get("port", global_config.get("port", 443)),
    }

    if not validated_config.get("hostname"):
        raise ValueError("Missing required field in config: hostname")
    if not validated_config.get("username"):
        raise ValueError("Missing required field in config: username")
    if not validated_config.get("password"):
        raise ValueError("Missing required field in config: password")

    return validated_config
