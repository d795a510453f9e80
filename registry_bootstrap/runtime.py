"""
Runtime identity of the running process
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

DEFAULT_APP = "default"
DEFAULT_STATUS = "UP"
DEFAULT_LEVEL = "FRONT"
SCOPE_FULL = "full"
STATUS_RUNNING = "running"
STATUS_STARTING = "starting"

TRUE = "true"
FALSE = "false"


@dataclass(frozen=True)
class RuntimeIdentity:
    """
    Identity of this process as known to the registry.

    Registration phases never mutate an identity; they return a new one with
    the fields they learned filled in.
    """

    app_id: str = DEFAULT_APP
    host_name: str = ""
    service_id: str = ""
    instance_id: str = ""
    instance_status: str = STATUS_STARTING

    def with_service(self, service_id: str) -> "RuntimeIdentity":
        return replace(self, service_id=service_id)

    def with_instance(self, service_id: str, instance_id: str) -> "RuntimeIdentity":
        return replace(
            self,
            service_id=service_id,
            instance_id=instance_id,
            instance_status=STATUS_RUNNING,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return asdict(self)
