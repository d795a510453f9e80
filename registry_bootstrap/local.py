"""
Local service registry for development and single-host deployments
"""

import json
import logging
import os
import threading
import uuid
from typing import Any, Dict, List, Optional

from .errors import RegistrationError, ServiceNotFoundError
from .models import MicroService, MicroServiceInstance
from .ports import Registrator, ServiceDiscoveryService

# Set up logging
logger = logging.getLogger(__name__)


class LocalRegistry(Registrator, ServiceDiscoveryService):
    """
    In-memory registry, optionally persisted to a JSON file.

    Registering the same service key or the same instance again returns the
    ID assigned the first time.
    """

    def __init__(self, storage_path: Optional[str] = None):
        """
        Initialize the local registry

        Args:
            storage_path: Path to store registry data (optional, memory only
                when omitted)
        """
        self.storage_path = storage_path
        self.services: Dict[str, Dict[str, Any]] = {}
        self.lock = threading.RLock()

        # Load existing registry if available
        self._load_registry()

    def register_service(self, microservice: MicroService) -> str:
        with self.lock:
            service_id = self._find_service_id(microservice.key)
            if service_id is None:
                service_id = microservice.service_id or uuid.uuid4().hex
                if service_id in self.services:
                    raise RegistrationError(
                        f"Service ID {service_id} already belongs to {self.services[service_id].get('key')}"
                    )
                self.services[service_id] = {"schemas": {}, "instances": {}}

            record = self.services[service_id]
            descriptor = microservice.to_dict()
            descriptor["serviceId"] = service_id
            record["service"] = descriptor
            record["key"] = microservice.key
            self._save_registry()

            logger.info(f"Registered service: {microservice.key} as {service_id}")
            return service_id

    def add_schema(self, service_id: str, schema_id: str, content: str) -> None:
        with self.lock:
            self._get_record(service_id)["schemas"][schema_id] = content
            self._save_registry()

    def register_service_instance(
        self, service_id: str, instance: MicroServiceInstance
    ) -> str:
        with self.lock:
            instances = self._get_record(service_id)["instances"]

            instance_id = None
            for existing_id, existing in instances.items():
                if (
                    existing["hostName"] == instance.host_name
                    and existing["endpoints"] == instance.endpoints
                ):
                    instance_id = existing_id
                    break
            if instance_id is None:
                instance_id = uuid.uuid4().hex

            descriptor = instance.to_dict()
            descriptor["serviceId"] = service_id
            descriptor["instanceId"] = instance_id
            descriptor["properties"] = instances.get(instance_id, {}).get("properties", {})
            instances[instance_id] = descriptor
            self._save_registry()

            logger.info(f"Registered instance: {service_id}/{instance_id} on {instance.host_name}")
            return instance_id

    def update_instance_properties(
        self, service_id: str, instance_id: str, properties: Dict[str, str]
    ) -> None:
        with self.lock:
            instances = self._get_record(service_id)["instances"]
            if instance_id not in instances:
                raise ServiceNotFoundError(f"Instance not found: {service_id}/{instance_id}")
            instances[instance_id]["properties"] = dict(properties)
            self._save_registry()

    def resolve_service_id(
        self, app_id: str, name: str, version: str, environment: str
    ) -> str:
        key = "/".join([app_id, name, version, environment])
        with self.lock:
            service_id = self._find_service_id(key)
        if service_id is None:
            raise ServiceNotFoundError(f"Service not found: {key}")
        return service_id

    def get_service(self, service_id: str) -> Optional[MicroService]:
        """
        Get a registered service

        Returns:
            MicroService if found, None otherwise
        """
        with self.lock:
            record = self.services.get(service_id)
            return MicroService.from_dict(record["service"]) if record else None

    def get_instances(self, service_id: str) -> List[MicroServiceInstance]:
        with self.lock:
            record = self._get_record(service_id)
            return [MicroServiceInstance.from_dict(i) for i in record["instances"].values()]

    def get_schema(self, service_id: str, schema_id: str) -> Optional[str]:
        with self.lock:
            return self._get_record(service_id)["schemas"].get(schema_id)

    def get_instance_properties(self, service_id: str, instance_id: str) -> Dict[str, str]:
        with self.lock:
            instances = self._get_record(service_id)["instances"]
            if instance_id not in instances:
                raise ServiceNotFoundError(f"Instance not found: {service_id}/{instance_id}")
            return dict(instances[instance_id]["properties"])

    def _find_service_id(self, key: str) -> Optional[str]:
        for service_id, record in self.services.items():
            if record.get("key") == key:
                return service_id
        return None

    def _get_record(self, service_id: str) -> Dict[str, Any]:
        record = self.services.get(service_id)
        if record is None:
            raise ServiceNotFoundError(f"Service not found: {service_id}")
        return record

    def _save_registry(self) -> None:
        """Save the registry to disk"""
        if not self.storage_path:
            return

        with open(self.storage_path, "w") as f:
            json.dump(self.services, f, indent=2)

    def _load_registry(self) -> None:
        """Load the registry from disk"""
        if not self.storage_path or not os.path.exists(self.storage_path):
            return

        with open(self.storage_path, "r") as f:
            data = json.load(f)

        with self.lock:
            self.services = data
        logger.info(f"Loaded {len(self.services)} services from {self.storage_path}")
