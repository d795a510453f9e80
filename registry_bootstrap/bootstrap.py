"""
Startup sequence registering the service and then this instance
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .cache import SelfInstanceCache
from .config import MicroserviceConfig
from .instance import InstanceRegistrar
from .models import MicroService, MicroServiceInstance
from .ports import Registrator, ServiceDiscoveryService
from .runtime import RuntimeIdentity
from .schema import SchemaLoader
from .service import ServiceRegistrar

# Set up logging
logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    identity: RuntimeIdentity
    microservice: MicroService
    instance: MicroServiceInstance
    cache: SelfInstanceCache


def bootstrap(
    config: MicroserviceConfig,
    registrator: Registrator,
    discovery: ServiceDiscoveryService,
    identity: Optional[RuntimeIdentity] = None,
    cache: Optional[SelfInstanceCache] = None,
    schema_loader: Optional[SchemaLoader] = None,
    endpoints: Optional[Dict[str, str]] = None,
) -> BootstrapResult:
    """
    Register the service, then register this process as one of its instances

    Args:
        config: Service configuration
        registrator: Registry write client
        discovery: Registry read client
        identity: Starting identity (default: built from config)
        cache: Self-instance cache to record into
        schema_loader: Source of schema files
        endpoints: Endpoint override replacing the configured protocols

    Returns:
        BootstrapResult with the final identity and published descriptors

    Raises:
        RegistryBootstrapError: If either phase fails; the instance phase is
            not attempted when the service phase fails
    """
    if identity is None:
        identity = RuntimeIdentity(app_id=config.app_id, host_name=config.host_name)

    service_registrar = ServiceRegistrar(config, registrator, schema_loader=schema_loader)
    identity = service_registrar.register_service(identity)

    instance_registrar = InstanceRegistrar(config, registrator, discovery, cache=cache)
    if endpoints is not None:
        instance_registrar.set_endpoints(endpoints)
    identity = instance_registrar.register_service_instance(identity)

    logger.info(f"Bootstrap complete: {identity.service_id}/{identity.instance_id}")
    return BootstrapResult(
        identity=identity,
        microservice=service_registrar.microservice,
        instance=instance_registrar.instance,
        cache=instance_registrar.cache,
    )
