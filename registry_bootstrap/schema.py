"""
Discovery of the schema files describing a service's contracts
"""

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import SchemaNotFoundError

# Set up logging
logger = logging.getLogger(__name__)

SCHEMA_SUFFIXES = (".yaml", ".yml", ".json")


class SchemaLoader:
    """
    Loads schemas laid out as <schema_root>/<service>/schema/<schema_id>.yaml
    """

    def __init__(self, schema_root: Optional[Union[str, Path]] = None):
        """
        Initialize the schema loader

        Args:
            schema_root: Directory holding one folder per service
                (default: ./conf)
        """
        self.schema_root = Path(schema_root) if schema_root else Path.cwd() / "conf"
        self.lock = threading.RLock()
        self._contents: Dict[str, Dict[str, str]] = {}

    def schema_dir(self, service_name: str) -> Path:
        return self.schema_root / service_name / "schema"

    def schema_ids(self, service_name: str) -> List[str]:
        """
        Get the schema IDs of a service

        Args:
            service_name: Service whose schemas to list

        Returns:
            Sorted schema IDs (file names without extension)

        Raises:
            SchemaNotFoundError: If the service has no schema files
        """
        return sorted(self._load(service_name))

    def content(self, service_name: str, schema_id: str) -> str:
        """Get the text of one schema, empty if unknown"""
        return self._load(service_name).get(schema_id, "")

    def _load(self, service_name: str) -> Dict[str, str]:
        with self.lock:
            if service_name in self._contents:
                return self._contents[service_name]

            directory = self.schema_dir(service_name)
            if not directory.is_dir():
                raise SchemaNotFoundError(f"No schema directory for {service_name}: {directory}")

            contents = {
                path.stem: path.read_text(encoding="utf-8")
                for path in directory.iterdir()
                if path.is_file() and path.suffix in SCHEMA_SUFFIXES
            }
            if not contents:
                raise SchemaNotFoundError(f"No schema files in {directory}")

            logger.debug(f"Loaded {len(contents)} schemas for {service_name}")
            self._contents[service_name] = contents
            return contents
