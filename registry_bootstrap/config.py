"""
Configuration of the service being registered
"""

import json
import logging
import os
import socket
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import psutil

from .errors import ConfigurationError
from .models import ServicePath
from .runtime import DEFAULT_APP

# Set up logging
logger = logging.getLogger(__name__)

LOOPBACK_IP = "127.0.0.1"


@dataclass
class ServiceDescription:
    """Static description of the service"""

    name: str
    version: str
    environment: str = ""
    level: str = ""
    properties: Optional[Dict[str, str]] = None
    paths: List[ServicePath] = field(default_factory=list)
    instance_properties: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceDescription":
        name = data.get("name")
        version = data.get("version")
        if not name:
            raise ConfigurationError("Missing service name")
        if not version:
            raise ConfigurationError(f"Missing version for service {name}")

        properties = data.get("properties")
        instance_properties = data.get("instance_properties")
        return cls(
            name=name,
            version=str(version),
            environment=data.get("environment") or "",
            level=data.get("level") or "",
            properties=dict(properties) if properties is not None else None,
            paths=[ServicePath.from_dict(p) for p in data.get("paths") or []],
            instance_properties=(
                dict(instance_properties) if instance_properties is not None else None
            ),
        )


@dataclass
class ProtocolConfig:
    """Listen and advertise addresses of one protocol server"""

    listen: str = ""
    advertise: str = ""


@dataclass
class DataCenterConfig:
    name: str = ""
    region: str = ""
    available_zone: str = ""


@dataclass
class MicroserviceConfig:
    """
    Everything the registration phases read from configuration
    """

    service: ServiceDescription
    app_id: str = DEFAULT_APP
    protocols: Dict[str, ProtocolConfig] = field(default_factory=dict)
    datacenter: DataCenterConfig = field(default_factory=DataCenterConfig)
    registrator_scope: str = ""
    node_ip: str = ""
    host_name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MicroserviceConfig":
        """
        Create configuration from a dictionary

        Args:
            data: Parsed configuration document

        Returns:
            MicroserviceConfig with node IP and host name filled in

        Raises:
            ConfigurationError: If the document is malformed
        """
        if not isinstance(data, dict) or "service" not in data:
            raise ConfigurationError("Invalid configuration format: missing 'service' key")

        protocols = {}
        for proto_name, proto in (data.get("protocols") or {}).items():
            if not isinstance(proto, dict):
                raise ConfigurationError(f"Invalid protocol configuration for {proto_name}")
            protocols[proto_name] = ProtocolConfig(
                listen=proto.get("listen") or "",
                advertise=proto.get("advertise") or "",
            )

        dc = data.get("datacenter") or {}
        registrator = data.get("registrator") or {}

        return cls(
            service=ServiceDescription.from_dict(data["service"]),
            app_id=data.get("app_id") or DEFAULT_APP,
            protocols=protocols,
            datacenter=DataCenterConfig(
                name=dc.get("name") or "",
                region=dc.get("region") or "",
                available_zone=dc.get("available_zone") or "",
            ),
            registrator_scope=registrator.get("scope") or "",
            node_ip=data.get("node_ip") or get_node_ip(),
            host_name=data.get("host_name") or socket.gethostname(),
        )

    def apply_env(self, environ: Optional[Dict[str, str]] = None) -> "MicroserviceConfig":
        """Override fields from environment variables"""
        environ = os.environ if environ is None else environ

        if environ.get("APP_ID"):
            self.app_id = environ["APP_ID"]
        if environ.get("SERVICE_ENVIRONMENT"):
            self.service.environment = environ["SERVICE_ENVIRONMENT"]
        if environ.get("NODE_IP"):
            self.node_ip = environ["NODE_IP"]
        if environ.get("HOSTNAME"):
            self.host_name = environ["HOSTNAME"]
        if environ.get("REGISTRATOR_SCOPE"):
            self.registrator_scope = environ["REGISTRATOR_SCOPE"]
        return self


def get_node_ip() -> str:
    """
    Get the first non-loopback IPv4 address of this node

    Returns:
        IP address, or 127.0.0.1 if the node has none
    """
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family == socket.AF_INET and not addr.address.startswith("127."):
                return addr.address
    return LOOPBACK_IP


def load_config(config_file: str, environ: Optional[Dict[str, str]] = None) -> MicroserviceConfig:
    """
    Load configuration from a JSON file and apply environment overrides

    Args:
        config_file: Path to the configuration file

    Raises:
        ConfigurationError: If the file is missing or not valid JSON
    """
    if not os.path.exists(config_file):
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_file}: {e}") from e

    config = MicroserviceConfig.from_dict(data).apply_env(environ)
    logger.info(f"Loaded configuration for {config.service.name} from {config_file}")
    return config
