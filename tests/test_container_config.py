import pytest

from dockapi.container_config import (
    Config,
    ContainerChangeResponseItem,
    ContainerWaitOKBody,
    HealthConfig,
    WaitCondition,
)
from dockapi.strslice import StrSlice


def test_health_config_default_is_empty():
    assert HealthConfig().to_dict() == {}


def test_health_config_values():
    hc = HealthConfig(test=["CMD", "true"], interval=5, retries=3)
    out = hc.to_dict()
    assert out == {"Test": ["CMD", "true"], "Interval": 5, "Retries": 3}
    assert "Timeout" not in out


def test_config_default_omits_optional_fields():
    out = Config().to_dict()
    for key in ("ExposedPorts", "Healthcheck", "ArgsEscaped", "NetworkDisabled",
                "MacAddress", "StopSignal", "StopTimeout", "Shell"):
        assert key not in out
    assert out["Cmd"] is None
    assert out["Entrypoint"] is None
    assert out["Env"] == []


def test_config_cmd_is_str_slice():
    cfg = Config(cmd=["mongod", "--port", "3000"])
    assert isinstance(cfg.cmd, StrSlice)
    assert cfg.to_dict()["Cmd"] == ["mongod", "--port", "3000"]


def test_config_exposed_ports_and_volumes():
    cfg = Config(exposed_ports=["3000/tcp", "3000/tcp"], volumes=["/data"])
    out = cfg.to_dict()
    assert out["ExposedPorts"] == {"3000/tcp": {}}
    assert out["Volumes"] == {"/data": {}}


def test_config_stop_signal_and_zero_timeout_kept():
    cfg = Config(image="postgres:9.5", stop_signal="SIGWINCH", stop_timeout=0)
    out = cfg.to_dict()
    assert out["StopSignal"] == "SIGWINCH"
    assert out["StopTimeout"] == 0
    assert out["Image"] == "postgres:9.5"


def test_config_healthcheck_nested():
    cfg = Config(healthcheck=HealthConfig(test=["NONE"]))
    assert cfg.to_dict()["Healthcheck"] == {"Test": ["NONE"]}


def test_config_empty_shell_omitted():
    assert "Shell" not in Config(shell=[]).to_dict()
    assert Config(shell=["/bin/sh", "-c"]).to_dict()["Shell"] == ["/bin/sh", "-c"]


def test_config_labels_copied():
    labels = {"my": "label"}
    out = Config(labels=labels).to_dict()
    out["Labels"]["other"] = "x"
    assert labels == {"my": "label"}


def test_change_kind_range():
    with pytest.raises(ValueError):
        ContainerChangeResponseItem(kind=256, path="/tmp")


def test_wait_body_default_has_no_error():
    body = ContainerWaitOKBody(status_code=2)
    assert body.error is None
    assert body.status_code == 2


def test_wait_condition_from_value():
    assert WaitCondition("next-exit") is WaitCondition.NEXT_EXIT
    with pytest.raises(ValueError):
        WaitCondition("bogus")