"""
Registration of the running instance of a service
"""

import logging
from typing import Dict, Optional

from .cache import SelfInstanceCache
from .config import MicroserviceConfig
from .endpoints import make_endpoint_map
from .errors import DiscoveryError, PropertyUpdateError, RegistrationError
from .models import DataCenterInfo, MicroServiceInstance
from .ports import Registrator, ServiceDiscoveryService
from .runtime import DEFAULT_STATUS, RuntimeIdentity

# Set up logging
logger = logging.getLogger(__name__)


class InstanceRegistrar:
    """
    Publishes this process as an instance of an already registered service
    and remembers which instance IDs it owns
    """

    def __init__(
        self,
        config: MicroserviceConfig,
        registrator: Registrator,
        discovery: ServiceDiscoveryService,
        cache: Optional[SelfInstanceCache] = None,
    ):
        self.config = config
        self.registrator = registrator
        self.discovery = discovery
        self.cache = cache if cache is not None else SelfInstanceCache()
        self.endpoints: Optional[Dict[str, str]] = None
        self.instance: Optional[MicroServiceInstance] = None

    def set_endpoints(self, endpoints: Optional[Dict[str, str]]) -> None:
        """
        Publish these endpoints instead of the ones derived from the protocols

        Args:
            endpoints: Protocol -> address map, or None to derive again
        """
        self.endpoints = dict(endpoints) if endpoints is not None else None

    def register_service_instance(self, identity: RuntimeIdentity) -> RuntimeIdentity:
        """
        Register this process as an instance of the service

        Args:
            identity: Current runtime identity

        Returns:
            New identity carrying the service ID, instance ID and running status

        Raises:
            DiscoveryError: If the service ID cannot be resolved
            RegistrationError: If the registry fails the instance write
            PropertyUpdateError: If the instance properties cannot be pushed
            InvalidEndpointError: If a protocol listen address is malformed
        """
        logger.info("Start to register instance.")
        description = self.config.service
        app_id = identity.app_id

        try:
            service_id = self.discovery.resolve_service_id(
                app_id, description.name, description.version, description.environment
            )
        except Exception as e:
            logger.error(
                f"Get service failed, key: {app_id}:{description.name}:{description.version}, err {str(e)}"
            )
            raise DiscoveryError(
                f"Get service failed, key: {app_id}:{description.name}:{description.version}"
            ) from e

        if self.endpoints is not None:
            endpoints = dict(self.endpoints)
        else:
            endpoints = make_endpoint_map(self.config.protocols, self.config.node_ip)
            logger.info(f"service support protocols {list(self.config.protocols)}")

        instance = MicroServiceInstance(
            service_id=service_id,
            endpoints=endpoints,
            host_name=identity.host_name or self.config.host_name,
            status=DEFAULT_STATUS,
            metadata={"nodeIP": self.config.node_ip},
            data_center_info=self._data_center_info(),
        )
        self.instance = instance

        try:
            instance_id = self.registrator.register_service_instance(service_id, instance)
        except Exception as e:
            logger.error(f"Register instance failed, serviceID: {service_id}, err {str(e)}")
            raise RegistrationError(
                f"Register instance failed, serviceID: {service_id}"
            ) from e

        identity = identity.with_instance(service_id, instance_id)

        instance_properties = description.instance_properties
        if instance_properties is not None:
            try:
                self.registrator.update_instance_properties(
                    service_id, instance_id, dict(instance_properties)
                )
            except Exception as e:
                logger.error(
                    f"UpdateMicroServiceInstanceProperties failed, microServiceID/instanceID = {service_id}/{instance_id}."
                )
                raise PropertyUpdateError(
                    f"Update properties of {service_id}/{instance_id} failed: {str(e)}",
                    identity=identity,
                ) from e
            logger.debug(
                f"UpdateMicroServiceInstanceProperties success, microServiceID/instanceID = {service_id}/{instance_id}."
            )

        self.cache.add(service_id, instance_id)
        logger.info(f"Register instance success, serviceID/instanceID: {service_id}/{instance_id}.")
        return identity

    def _data_center_info(self) -> Optional[DataCenterInfo]:
        dc = self.config.datacenter
        if not dc.name or not dc.available_zone:
            return None
        return DataCenterInfo(
            name=dc.name,
            region=dc.region or dc.name,
            available_zone=dc.available_zone,
        )
