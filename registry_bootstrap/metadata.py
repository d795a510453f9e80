"""
Metadata about the framework performing the registration
"""

import os
from dataclasses import dataclass

from .models import Framework

__version__ = "0.1.0"

DEFAULT_FRAMEWORK_NAME = "registry-bootstrap"
DEFAULT_REGISTERED_BY = "SDK"


@dataclass(frozen=True)
class FrameworkMetadata:
    name: str
    version: str
    registered_by: str

    @property
    def framework(self) -> Framework:
        return Framework(name=self.name, version=self.version)


def new_framework() -> FrameworkMetadata:
    """Framework metadata, overridable through FRAMEWORK_* environment variables"""
    return FrameworkMetadata(
        name=os.environ.get("FRAMEWORK_NAME", DEFAULT_FRAMEWORK_NAME),
        version=os.environ.get("FRAMEWORK_VERSION", __version__),
        registered_by=os.environ.get("FRAMEWORK_REGISTERED_BY", DEFAULT_REGISTERED_BY),
    )
