from registry_bootstrap.models import (
    DataCenterInfo,
    Framework,
    MicroService,
    MicroServiceInstance,
    ServicePath,
)


def test_alias_defaults_to_app_and_name():
    assert MicroService(app_id="app1", service_name="svcA", version="1.0").alias == "app1:svcA"


def test_explicit_alias_is_kept():
    service = MicroService(app_id="app1", service_name="svcA", version="1.0", alias="orders")

    assert service.alias == "orders"


def test_service_dict_uses_registry_keys():
    service = MicroService(
        app_id="app1",
        service_name="svcA",
        version="1.0",
        paths=[ServicePath("/a", {"x": "1"})],
        framework=Framework("chassis", "2.1"),
        registered_by="SDK",
    )

    data = service.to_dict()

    assert data["appId"] == "app1"
    assert data["serviceName"] == "svcA"
    assert data["registeredBy"] == "SDK"
    assert data["paths"] == [{"path": "/a", "property": {"x": "1"}}]
    assert MicroService.from_dict(data) == service


def test_instance_dict_includes_datacenter():
    instance = MicroServiceInstance(
        endpoints={"rest": "10.0.0.5:8080"},
        host_name="host-a",
        service_id="sid-1",
        data_center_info=DataCenterInfo("dc1", "dc1", "az1"),
    )

    data = instance.to_dict()

    assert data["hostName"] == "host-a"
    assert data["dataCenterInfo"] == {"name": "dc1", "region": "dc1", "availableZone": "az1"}
    assert MicroServiceInstance.from_dict(data) == instance


def test_instance_without_datacenter():
    instance = MicroServiceInstance(endpoints={}, host_name="host-a")

    assert instance.to_dict()["dataCenterInfo"] is None
    assert MicroServiceInstance.from_dict(instance.to_dict()).data_center_info is None
