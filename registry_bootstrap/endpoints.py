"""
Endpoint addresses published for each protocol server
"""

from typing import Dict

from .config import ProtocolConfig
from .errors import InvalidEndpointError

UNSPECIFIED_HOSTS = ("0.0.0.0", "::", "[::]")


def split_host_port(address: str):
    """Split "host:port" (or "[v6]:port") into its parts"""
    host, sep, port = address.rpartition(":")
    if not sep:
        raise InvalidEndpointError(f"Missing port in address [{address}]")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def make_endpoint_map(protocols: Dict[str, ProtocolConfig], node_ip: str) -> Dict[str, str]:
    """
    Build the protocol -> endpoint map of this instance

    Args:
        protocols: Configured protocol servers
        node_ip: Address that replaces an unspecified listen host

    Returns:
        Dictionary of protocol names to endpoint addresses

    Raises:
        InvalidEndpointError: If a listen address has no host or port
    """
    endpoints = {}
    for name, protocol in protocols.items():
        if protocol.advertise:
            endpoints[name] = protocol.advertise
            continue

        host, port = split_host_port(protocol.listen)
        if not host or not port:
            raise InvalidEndpointError(f"Listen address of {name} is invalid [{protocol.listen}]")
        if host in UNSPECIFIED_HOSTS:
            host = node_ip
        if ":" in host:
            host = f"[{host}]"
        endpoints[name] = f"{host}:{port}"
    return endpoints
