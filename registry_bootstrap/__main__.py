"""
Register a service and its instance with a local registry file
"""

import argparse
import json
import logging
import sys

from .bootstrap import bootstrap
from .config import load_config
from .errors import RegistryBootstrapError
from .local import LocalRegistry
from .schema import SchemaLoader

logger = logging.getLogger("registry_bootstrap")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Register service and instance")
    parser.add_argument("--config", required=True, help="Path to configuration file")
    parser.add_argument("--registry-file", help="Path to local registry file")
    parser.add_argument("--schema-root", help="Directory holding service schemas")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    registry = LocalRegistry(storage_path=args.registry_file)
    try:
        config = load_config(args.config)
        result = bootstrap(
            config,
            registry,
            registry,
            schema_loader=SchemaLoader(args.schema_root),
        )
    except RegistryBootstrapError as e:
        logger.error(f"Registration failed: {str(e)}")
        return 1

    print(json.dumps(result.identity.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
