import pytest

from dockapi.containers import (
    ContainerJSON,
    ContainerJSONBase,
    ContainerState,
    Health,
    HealthcheckResult,
    NetworkCreate,
    NetworkCreateRequest,
    NetworkSettings,
    NetworkSettingsBase,
    SecretListOptions,
    ConfigListOptions,
    HEALTHY,
    NO_HEALTHCHECK,
)
from dockapi.network import IPAM, IPAMConfig, ConfigReference, EndpointSettings


def test_host_bindings_lookup():
    settings = NetworkSettingsBase(ports={"5432/tcp": [("0.0.0.0", "5433")]})
    assert settings.host_bindings("5432/tcp") == [("0.0.0.0", "5433")]


def test_host_bindings_bare_port_is_tcp():
    settings = NetworkSettingsBase(ports={"8080/tcp": [("", "9000")]})
    assert settings.host_bindings("8080") == [("", "9000")]
    assert settings.host_bindings("8080/udp") == []


def test_host_bindings_missing_port_is_empty():
    settings = NetworkSettingsBase()
    assert settings.host_bindings("80/tcp") == []


def test_host_bindings_returns_copy():
    settings = NetworkSettingsBase(ports={"80/tcp": [("127.0.0.1", "8000")]})
    settings.host_bindings("80/tcp").clear()
    assert settings.host_bindings("80/tcp") == [("127.0.0.1", "8000")]


def test_ports_bindings_normalised_to_tuples():
    settings = NetworkSettingsBase(ports={"80": [["127.0.0.1", "8000"]], "81/tcp": None})
    assert settings.ports == {"80/tcp": [("127.0.0.1", "8000")], "81/tcp": []}


def test_network_settings_combines_base_and_default():
    endpoint = EndpointSettings(ip_address="172.18.0.2")
    settings = NetworkSettings(
        bridge="docker0",
        ip_address="172.17.0.2",
        ports={"80/tcp": [("0.0.0.0", "32768")]},
        networks={"bridge": endpoint},
    )
    assert settings.bridge == "docker0"
    assert settings.ip_address == "172.17.0.2"
    assert settings.networks["bridge"].ip_address == "172.18.0.2"
    assert settings.host_bindings("80") == [("0.0.0.0", "32768")]


def test_container_json_extends_base():
    state = ContainerState(status="running", running=True, pid=42)
    info = ContainerJSON(id="abc", name="/db", state=state)
    assert isinstance(info, ContainerJSONBase)
    assert info.name == "/db"
    assert info.state.running is True
    assert info.mounts == []
    assert info.size_rw is None


def test_health_log_keeps_order():
    first = HealthcheckResult(exit_code=1, output="first")
    second = HealthcheckResult(exit_code=0, output="second")
    health = Health(status=HEALTHY, failing_streak=0, log=[first, second])
    assert [entry.output for entry in health.log] == ["first", "second"]
    assert NO_HEALTHCHECK == "none"


def test_network_create_request_to_dict():
    request = NetworkCreateRequest(
        name="net",
        driver="bridge",
        ipam=IPAM(driver="default", config=[IPAMConfig(subnet="10.0.0.0/24")]),
        config_from=ConfigReference(network="base"),
        labels={"a": "b"},
    )
    body = request.to_dict()
    assert body["Name"] == "net"
    assert body["Driver"] == "bridge"
    assert body["IPAM"] == {
        "Driver": "default",
        "Options": {},
        "Config": [{"Subnet": "10.0.0.0/24"}],
    }
    assert body["ConfigFrom"] == {"Network": "base"}
    assert body["Labels"] == {"a": "b"}
    assert body["CheckDuplicate"] is False


def test_network_create_request_without_ipam():
    request = NetworkCreateRequest(name="plain")
    body = request.to_dict()
    assert body["IPAM"] is None
    assert body["ConfigFrom"] is None
    assert isinstance(request, NetworkCreate)
    assert body["Options"] == {}


def test_list_options_have_independent_empty_filters():
    first = SecretListOptions()
    second = ConfigListOptions()
    first.filters.add("name", "x")
    assert first.filters.len() if hasattr(first.filters, "len") else True
    assert first.filters.contains("name")
    assert not second.filters.contains("name")
    assert not SecretListOptions().filters.contains("name")


@pytest.mark.parametrize("port", ["443", "443/tcp"])
def test_host_bindings_parametrized(port):
    settings = NetworkSettingsBase(ports={"443/tcp": [("::", "8443")]})
    assert settings.host_bindings(port) == [("::", "8443")]