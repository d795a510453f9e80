"""
Descriptors submitted to the service registry
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .runtime import DEFAULT_LEVEL, DEFAULT_STATUS


@dataclass
class ServicePath:
    """A routable path and its routing property"""

    path: str
    property: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "property": dict(self.property)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServicePath":
        return cls(path=data["path"], property=dict(data.get("property") or {}))


@dataclass
class Framework:
    """Name and version of the framework doing the registration"""

    name: str
    version: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "version": self.version}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Framework":
        return cls(name=data.get("name", ""), version=data.get("version", ""))


@dataclass
class DataCenterInfo:
    """Datacenter placement of an instance"""

    name: str
    region: str
    available_zone: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "region": self.region,
            "availableZone": self.available_zone,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DataCenterInfo":
        return cls(
            name=data.get("name", ""),
            region=data.get("region", ""),
            available_zone=data.get("availableZone", ""),
        )


@dataclass
class MicroService:
    """Information about a service as registered with the registry"""

    service_name: str
    version: str
    app_id: str
    service_id: str = ""
    paths: List[ServicePath] = field(default_factory=list)
    environment: str = ""
    status: str = DEFAULT_STATUS
    level: str = DEFAULT_LEVEL
    schemas: List[str] = field(default_factory=list)
    framework: Optional[Framework] = None
    registered_by: str = ""
    metadata: Dict[str, str] = field(default_factory=dict)
    alias: str = ""

    def __post_init__(self):
        # other apps address this service by "<app>:<name>", so consumer side
        # governance keys must carry the app id
        if not self.alias:
            self.alias = f"{self.app_id}:{self.service_name}"

    @property
    def key(self) -> str:
        """Registry lookup key: app/name/version/environment"""
        return "/".join([self.app_id, self.service_name, self.version, self.environment])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "serviceId": self.service_id,
            "appId": self.app_id,
            "serviceName": self.service_name,
            "version": self.version,
            "paths": [p.to_dict() for p in self.paths],
            "environment": self.environment,
            "status": self.status,
            "level": self.level,
            "schemas": list(self.schemas),
            "framework": self.framework.to_dict() if self.framework else None,
            "registeredBy": self.registered_by,
            "metadata": dict(self.metadata),
            "alias": self.alias,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MicroService":
        """Create MicroService from dictionary"""
        framework = data.get("framework")
        return cls(
            service_id=data.get("serviceId", ""),
            app_id=data["appId"],
            service_name=data["serviceName"],
            version=data["version"],
            paths=[ServicePath.from_dict(p) for p in data.get("paths") or []],
            environment=data.get("environment", ""),
            status=data.get("status", DEFAULT_STATUS),
            level=data.get("level", DEFAULT_LEVEL),
            schemas=list(data.get("schemas") or []),
            framework=Framework.from_dict(framework) if framework else None,
            registered_by=data.get("registeredBy", ""),
            metadata=dict(data.get("metadata") or {}),
            alias=data.get("alias", ""),
        )


@dataclass
class MicroServiceInstance:
    """Information about one running instance of a service"""

    endpoints: Dict[str, str]
    host_name: str
    service_id: str = ""
    status: str = DEFAULT_STATUS
    metadata: Dict[str, str] = field(default_factory=dict)
    data_center_info: Optional[DataCenterInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "serviceId": self.service_id,
            "endpoints": dict(self.endpoints),
            "hostName": self.host_name,
            "status": self.status,
            "metadata": dict(self.metadata),
            "dataCenterInfo": (
                self.data_center_info.to_dict() if self.data_center_info else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MicroServiceInstance":
        """Create MicroServiceInstance from dictionary"""
        dc_info = data.get("dataCenterInfo")
        return cls(
            service_id=data.get("serviceId", ""),
            endpoints=dict(data.get("endpoints") or {}),
            host_name=data.get("hostName", ""),
            status=data.get("status", DEFAULT_STATUS),
            metadata=dict(data.get("metadata") or {}),
            data_center_info=DataCenterInfo.from_dict(dc_info) if dc_info else None,
        )
