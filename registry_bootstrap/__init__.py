"""
Service and instance registration for microservices
"""
from .bootstrap import BootstrapResult, bootstrap
from .cache import SelfInstanceCache
from .config import MicroserviceConfig, load_config
from .errors import (
    ConfigurationError,
    DiscoveryError,
    EmptyServiceIDError,
    InvalidEndpointError,
    PropertyUpdateError,
    RegistrationError,
    RegistryBootstrapError,
    SchemaNotFoundError,
    ServiceNotFoundError,
)
from .info import RegistrationInfo
from .instance import InstanceRegistrar
from .local import LocalRegistry
from .metadata import __version__
from .models import DataCenterInfo, Framework, MicroService, MicroServiceInstance, ServicePath
from .ports import Registrator, ServiceDiscoveryService
from .runtime import RuntimeIdentity
from .schema import SchemaLoader
from .service import ServiceRegistrar

__all__ = [
    'BootstrapResult', 'bootstrap', 'SelfInstanceCache', 'MicroserviceConfig', 'load_config',
    'ConfigurationError', 'DiscoveryError', 'EmptyServiceIDError', 'InvalidEndpointError',
    'PropertyUpdateError', 'RegistrationError', 'RegistryBootstrapError', 'SchemaNotFoundError',
    'ServiceNotFoundError', 'RegistrationInfo', 'InstanceRegistrar', 'LocalRegistry',
    'DataCenterInfo', 'Framework', 'MicroService', 'MicroServiceInstance', 'ServicePath',
    'Registrator', 'ServiceDiscoveryService', 'RuntimeIdentity', 'SchemaLoader',
    'ServiceRegistrar', '__version__',
]
