"""
Registration of the service description
"""

import logging
from typing import List, Optional

from .config import MicroserviceConfig
from .errors import EmptyServiceIDError, RegistrationError, SchemaNotFoundError
from .metadata import FrameworkMetadata, new_framework
from .models import MicroService, ServicePath
from .ports import Registrator
from .runtime import DEFAULT_LEVEL, DEFAULT_STATUS, FALSE, SCOPE_FULL, TRUE, RuntimeIdentity
from .schema import SchemaLoader

# Set up logging
logger = logging.getLogger(__name__)

ALLOW_CROSS_APP = "allowCrossApp"


class ServiceRegistrar:
    """
    Publishes the description of this service and its schemas
    """

    def __init__(
        self,
        config: MicroserviceConfig,
        registrator: Registrator,
        schema_loader: Optional[SchemaLoader] = None,
        framework: Optional[FrameworkMetadata] = None,
    ):
        """
        Initialize the service registrar

        Args:
            config: Service configuration
            registrator: Registry write client
            schema_loader: Source of schema files (default: ./conf)
            framework: Framework metadata (default: from environment)
        """
        self.config = config
        self.registrator = registrator
        self.schema_loader = schema_loader or SchemaLoader()
        self.framework = framework or new_framework()
        self.microservice: Optional[MicroService] = None
        self.registered_schemas: List[str] = []
        self.failed_schemas: List[str] = []

    def register_service(self, identity: RuntimeIdentity) -> RuntimeIdentity:
        """
        Register this service with the registry

        Args:
            identity: Current runtime identity

        Returns:
            New identity carrying the service ID assigned by the registry

        Raises:
            RegistrationError: If the registry fails the write
            EmptyServiceIDError: If the registry returns an empty service ID
        """
        description = self.config.service
        if description.environment:
            logger.info(f"Microservice environment: [{description.environment}]")
        else:
            logger.debug("No microservice environment defined")

        schemas = self._discover_schemas(description.name)

        if not description.level:
            description.level = DEFAULT_LEVEL
        if description.properties is None:
            description.properties = {}

        microservice = MicroService(
            service_id=identity.service_id,
            app_id=identity.app_id,
            service_name=description.name,
            version=description.version,
            paths=[ServicePath(path=p.path, property=dict(p.property)) for p in description.paths],
            environment=description.environment,
            status=DEFAULT_STATUS,
            level=description.level,
            schemas=schemas,
            framework=self.framework.framework,
            registered_by=self.framework.registered_by,
        )
        self._apply_visibility(microservice)
        self.microservice = microservice

        logger.debug(f"Update micro service properties {description.properties}")
        logger.info(f"Framework registered is [ {self.framework.name}:{self.framework.version} ]")
        logger.info(f"Micro service registered by [ {self.framework.registered_by} ]")

        try:
            service_id = self.registrator.register_service(microservice)
        except Exception as e:
            logger.error(f"Register [{microservice.service_name}] failed: {str(e)}")
            raise RegistrationError(
                f"Register [{microservice.service_name}] failed: {str(e)}"
            ) from e

        if not service_id:
            error = EmptyServiceIDError()
            logger.error(str(error))
            raise error

        identity = identity.with_service(service_id)
        logger.info(f"Register [{service_id}/{microservice.service_name}] success")

        self._add_schemas(service_id, schemas)
        return identity

    def _discover_schemas(self, service_name: str) -> List[str]:
        try:
            return self.schema_loader.schema_ids(service_name)
        except SchemaNotFoundError:
            logger.warning(f"No schemas file for microservice [{service_name}].")
            return []

    def _apply_visibility(self, microservice: MicroService) -> None:
        """Allow or forbid addressing this service from other apps"""
        value = TRUE if self.config.registrator_scope == SCOPE_FULL else FALSE
        microservice.metadata[ALLOW_CROSS_APP] = value
        self.config.service.properties[ALLOW_CROSS_APP] = value

    def _add_schemas(self, service_id: str, schemas: List[str]) -> None:
        # schema failures leave the service registered; they are only reported
        self.registered_schemas = []
        self.failed_schemas = []
        for schema_id in schemas:
            content = self.schema_loader.content(self.config.service.name, schema_id)
            try:
                self.registrator.add_schema(service_id, schema_id, content)
            except Exception as e:
                logger.warning(f"Add schema [{schema_id}] to [{service_id}] failed: {str(e)}")
                self.failed_schemas.append(schema_id)
            else:
                self.registered_schemas.append(schema_id)
