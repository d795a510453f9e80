"""
Errors raised while registering a service and its instances
"""


class RegistryBootstrapError(Exception):
    """Base class for all registration bootstrap errors"""


class ConfigurationError(RegistryBootstrapError):
    """The service configuration is missing or malformed"""


class InvalidEndpointError(ConfigurationError):
    """A protocol listen address could not be turned into an endpoint"""


class SchemaNotFoundError(RegistryBootstrapError):
    """No schema files exist for a service"""


class RegistrationError(RegistryBootstrapError):
    """The registry rejected or failed a write"""


class EmptyServiceIDError(RegistrationError):
    """The registry accepted a service but returned no identifier"""

    def __init__(self, message: str = "got empty serviceID from registry"):
        super().__init__(message)


class DiscoveryError(RegistryBootstrapError):
    """An existing service ID could not be resolved"""


class PropertyUpdateError(RegistryBootstrapError):
    """
    Instance properties could not be pushed after registration.

    The instance is already registered; ``identity`` carries its ID and
    running status.
    """

    def __init__(self, message: str, identity=None):
        super().__init__(message)
        self.identity = identity


class ServiceNotFoundError(RegistryBootstrapError):
    """The registry holds no service with the requested key or ID"""
