import json
import socket

import pytest

from registry_bootstrap import config as config_module
from registry_bootstrap.config import MicroserviceConfig, get_node_ip, load_config
from registry_bootstrap.errors import ConfigurationError

from .conftest import make_config


def test_from_dict_reads_all_sections():
    config = make_config(
        datacenter={"name": "dc1", "region": "r1", "available_zone": "az1"},
        service={
            "name": "svcA",
            "version": 2,
            "environment": "production",
            "properties": {"owner": "team"},
            "paths": [{"path": "/a"}],
            "instance_properties": {"tag": "blue"},
        },
    )

    assert config.app_id == "app1"
    assert config.service.version == "2"
    assert config.service.environment == "production"
    assert config.service.properties == {"owner": "team"}
    assert config.service.paths[0].path == "/a"
    assert config.service.paths[0].property == {}
    assert config.service.instance_properties == {"tag": "blue"}
    assert config.protocols["rest"].listen == "0.0.0.0:8080"
    assert config.datacenter.region == "r1"
    assert config.registrator_scope == "full"


def test_app_id_defaults():
    config = MicroserviceConfig.from_dict({
        "service": {"name": "svcA", "version": "1.0"},
        "node_ip": "10.0.0.5",
        "host_name": "h",
    })

    assert config.app_id == "default"
    assert config.service.properties is None
    assert config.protocols == {}


@pytest.mark.parametrize("service", [
    {"version": "1.0"},
    {"name": "svcA"},
    {"name": "", "version": "1.0"},
])
def test_name_and_version_are_required(service):
    with pytest.raises(ConfigurationError):
        MicroserviceConfig.from_dict({"service": service, "node_ip": "1.1.1.1", "host_name": "h"})


def test_missing_service_section():
    with pytest.raises(ConfigurationError):
        MicroserviceConfig.from_dict({"app_id": "app1"})


def test_env_overrides():
    config = make_config().apply_env({
        "APP_ID": "app2",
        "SERVICE_ENVIRONMENT": "testing",
        "NODE_IP": "10.1.1.1",
        "HOSTNAME": "host-b",
        "REGISTRATOR_SCOPE": "app",
    })

    assert config.app_id == "app2"
    assert config.service.environment == "testing"
    assert config.node_ip == "10.1.1.1"
    assert config.host_name == "host-b"
    assert config.registrator_scope == "app"


def test_load_config_from_file(tmp_path):
    path = tmp_path / "service.json"
    path.write_text(json.dumps({
        "app_id": "app1",
        "service": {"name": "svcA", "version": "1.0"},
        "node_ip": "10.0.0.5",
        "host_name": "host-a",
    }))

    config = load_config(str(path), environ={})

    assert config.service.name == "svcA"
    assert config.node_ip == "10.0.0.5"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"), environ={})


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "service.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError):
        load_config(str(path), environ={})


class _Addr:
    def __init__(self, family, address):
        self.family = family
        self.address = address


def test_node_ip_skips_loopback(monkeypatch):
    monkeypatch.setattr(config_module.psutil, "net_if_addrs", lambda: {
        "lo": [_Addr(socket.AF_INET, "127.0.0.1")],
        "eth0": [_Addr(socket.AF_INET6, "fe80::1"), _Addr(socket.AF_INET, "192.168.0.7")],
    })

    assert get_node_ip() == "192.168.0.7"


def test_node_ip_falls_back_to_loopback(monkeypatch):
    monkeypatch.setattr(config_module.psutil, "net_if_addrs", lambda: {
        "lo": [_Addr(socket.AF_INET, "127.0.0.1")],
    })

    assert get_node_ip() == "127.0.0.1"
