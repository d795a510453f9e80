"""
Interfaces of the registry clients used during registration
"""

from abc import ABC, abstractmethod
from typing import Dict

from .models import MicroService, MicroServiceInstance


class Registrator(ABC):
    """Write path of the service registry"""

    @abstractmethod
    def register_service(self, microservice: MicroService) -> str:
        """
        Register a service description

        Args:
            microservice: Service descriptor to publish

        Returns:
            The service ID assigned by the registry (may be empty on a
            misbehaving registry)
        """

    @abstractmethod
    def add_schema(self, service_id: str, schema_id: str, content: str) -> None:
        """Attach schema content to a registered service"""

    @abstractmethod
    def register_service_instance(
        self, service_id: str, instance: MicroServiceInstance
    ) -> str:
        """
        Register an instance of a service

        Args:
            service_id: ID of the owning service
            instance: Instance descriptor to publish

        Returns:
            The instance ID assigned by the registry
        """

    @abstractmethod
    def update_instance_properties(
        self, service_id: str, instance_id: str, properties: Dict[str, str]
    ) -> None:
        """Replace the properties of a registered instance"""


class ServiceDiscoveryService(ABC):
    """Read path of the service registry"""

    @abstractmethod
    def resolve_service_id(
        self, app_id: str, name: str, version: str, environment: str
    ) -> str:
        """
        Look up the ID of an already registered service

        Raises:
            Exception: Implementation specific, when no such service exists
        """
