import pytest

from registry_bootstrap.config import MicroserviceConfig
from registry_bootstrap.ports import Registrator, ServiceDiscoveryService
from registry_bootstrap.runtime import RuntimeIdentity
from registry_bootstrap.schema import SchemaLoader


class FakeRegistrator(Registrator):
    """Records every call and returns canned IDs"""

    def __init__(self, service_id="sid-1", instance_id="inst-1"):
        self.service_id = service_id
        self.instance_id = instance_id
        self.services = []
        self.schemas = []
        self.instances = []
        self.properties = []
        self.service_error = None
        self.schema_error = None
        self.instance_error = None
        self.properties_error = None

    def register_service(self, microservice):
        self.services.append(microservice)
        if self.service_error:
            raise self.service_error
        return self.service_id

    def add_schema(self, service_id, schema_id, content):
        if self.schema_error:
            raise self.schema_error
        self.schemas.append((service_id, schema_id, content))

    def register_service_instance(self, service_id, instance):
        self.instances.append((service_id, instance))
        if self.instance_error:
            raise self.instance_error
        return self.instance_id

    def update_instance_properties(self, service_id, instance_id, properties):
        if self.properties_error:
            raise self.properties_error
        self.properties.append((service_id, instance_id, properties))


class FakeDiscovery(ServiceDiscoveryService):
    def __init__(self, service_id="sid-1"):
        self.service_id = service_id
        self.error = None
        self.calls = []

    def resolve_service_id(self, app_id, name, version, environment):
        self.calls.append((app_id, name, version, environment))
        if self.error:
            raise self.error
        return self.service_id


def make_config(**overrides):
    data = {
        "app_id": "app1",
        "service": {"name": "svcA", "version": "1.0"},
        "protocols": {"rest": {"listen": "0.0.0.0:8080"}},
        "registrator": {"scope": "full"},
        "node_ip": "10.0.0.5",
        "host_name": "host-a",
    }
    data.update(overrides)
    return MicroserviceConfig.from_dict(data)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def registrator():
    return FakeRegistrator()


@pytest.fixture
def discovery():
    return FakeDiscovery()


@pytest.fixture
def identity():
    return RuntimeIdentity(app_id="app1", host_name="host-a")


@pytest.fixture
def schema_root(tmp_path):
    schema_dir = tmp_path / "svcA" / "schema"
    schema_dir.mkdir(parents=True)
    (schema_dir / "hello.yaml").write_text("swagger: '2.0'\n")
    (schema_dir / "orders.yaml").write_text("swagger: '2.0'\ninfo: {}\n")
    return tmp_path


@pytest.fixture
def schema_loader(schema_root):
    return SchemaLoader(schema_root)


@pytest.fixture
def empty_schema_loader(tmp_path):
    return SchemaLoader(tmp_path / "none")
