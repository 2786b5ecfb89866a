import pytest

from dockapi.host_config import (
    ISOLATION_DEFAULT,
    ISOLATION_EMPTY,
    ISOLATION_HYPERV,
    ISOLATION_PROCESS,
    CgroupSpec,
    HostConfig,
    IpcMode,
    Isolation,
    LogMode,
    NetworkMode,
    PidMode,
    RestartPolicy,
    UpdateConfig,
    UsernsMode,
    UTSMode,
    WindowsIsolation,
    WindowsNetworkMode,
)
from dockapi.strslice import StrSlice


@pytest.mark.parametrize(
    "value, default, hyperv, process",
    [
        ("", True, False, False),
        ("default", True, False, False),
        ("DEFAULT", True, False, False),
        ("hyperv", False, True, False),
        ("HyperV", False, True, False),
        ("process", False, False, True),
        ("other", False, False, False),
    ],
)
def test_isolation_kinds(value, default, hyperv, process):
    iso = Isolation(value)
    assert iso.is_default() is default
    assert iso.is_hyperv() is hyperv
    assert iso.is_process() is process


def test_isolation_validity_differs_by_platform():
    assert ISOLATION_EMPTY.is_valid()
    assert ISOLATION_DEFAULT.is_valid()
    assert not ISOLATION_HYPERV.is_valid()
    assert not ISOLATION_PROCESS.is_valid()
    assert WindowsIsolation("hyperv").is_valid()
    assert WindowsIsolation("process").is_valid()
    assert WindowsIsolation("").is_valid()
    assert not WindowsIsolation("bogus").is_valid()


@pytest.mark.parametrize(
    "mode, valid",
    [
        ("", True),
        ("none", True),
        ("private", True),
        ("host", True),
        ("shareable", True),
        ("container:abc", True),
        ("container", False),
        ("bogus", False),
    ],
)
def test_ipc_mode_valid(mode, valid):
    assert IpcMode(mode).valid() is valid


def test_ipc_mode_container():
    mode = IpcMode("container:web")
    assert mode.is_container()
    assert mode.container() == "web"
    assert IpcMode("other:web").container() == ""
    assert not IpcMode("other:web").is_container()
    assert IpcMode("").is_empty()
    assert IpcMode("none").is_none()


@pytest.mark.parametrize(
    "mode, name",
    [
        ("bridge", "bridge"),
        ("host", "host"),
        ("container:abc", "container"),
        ("none", "none"),
        ("default", "default"),
        ("mynet", "mynet"),
    ],
)
def test_network_name_unix(mode, name):
    assert NetworkMode(mode).network_name() == name


@pytest.mark.parametrize(
    "mode, name",
    [
        ("default", "default"),
        ("nat", "nat"),
        ("none", "none"),
        ("container:abc", "container"),
        ("host", "host"),
        ("bridge", "bridge"),
    ],
)
def test_network_name_windows(mode, name):
    assert WindowsNetworkMode(mode).network_name() == name


def test_network_mode_predicates():
    assert NetworkMode("host").is_host()
    assert not NetworkMode("host").is_private()
    assert not NetworkMode("container:x").is_private()
    assert NetworkMode("bridge").is_private()
    assert NetworkMode("container:x").connected_container() == "x"
    assert NetworkMode("plain").connected_container() == ""
    assert NetworkMode("bridge").user_defined() == ""
    assert NetworkMode("mynet").user_defined() == "mynet"
    assert not WindowsNetworkMode("host").is_host()
    assert WindowsNetworkMode("host").is_user_defined()
    assert WindowsNetworkMode("nat").is_bridge()
    assert WindowsNetworkMode("host").is_private()


@pytest.mark.parametrize("mode, valid", [("", True), ("host", True), ("host:x", True), ("private", False)])
def test_userns_and_uts_valid(mode, valid):
    assert UsernsMode(mode).valid() is valid
    assert UTSMode(mode).valid() is valid


def test_userns_and_uts_host():
    assert UsernsMode("host").is_host()
    assert not UsernsMode("host").is_private()
    assert UsernsMode("").is_private()
    assert UTSMode("host").is_host()
    assert UTSMode("x").is_private()


def test_cgroup_spec():
    spec = CgroupSpec("container:db")
    assert spec.is_container()
    assert spec.valid()
    assert spec.container() == "db"
    assert CgroupSpec("").valid()
    assert not CgroupSpec("host").valid()
    assert CgroupSpec("host").container() == ""


@pytest.mark.parametrize(
    "mode, valid",
    [
        ("", True),
        ("host", True),
        ("container:abc", True),
        ("container:", False),
        ("container", False),
        ("container:a:b", False),
        ("other", False),
    ],
)
def test_pid_mode_valid(mode, valid):
    assert PidMode(mode).valid() is valid


def test_pid_mode_predicates():
    assert PidMode("host").is_host()
    assert not PidMode("host").is_private()
    assert PidMode("container:abc").is_container()
    assert PidMode("container:abc").container() == "abc"
    assert not PidMode("container:abc").is_private()
    assert PidMode("").is_private()


@pytest.mark.parametrize(
    "name, none, always, on_failure, unless_stopped",
    [
        ("", True, False, False, False),
        ("no", True, False, False, False),
        ("always", False, True, False, False),
        ("on-failure", False, False, True, False),
        ("unless-stopped", False, False, False, True),
    ],
)
def test_restart_policy_kinds(name, none, always, on_failure, unless_stopped):
    policy = RestartPolicy(name=name)
    assert policy.is_none() is none
    assert policy.is_always() is always
    assert policy.is_on_failure() is on_failure
    assert policy.is_unless_stopped() is unless_stopped


def test_restart_policy_is_same():
    a = RestartPolicy("on-failure", 3)
    assert a.is_same(RestartPolicy("on-failure", 3))
    assert not a.is_same(RestartPolicy("on-failure", 4))
    assert not a.is_same(RestartPolicy("always", 3))


def test_log_mode_values():
    assert LogMode.UNSET.value == ""
    assert LogMode("blocking") is LogMode.BLOCKING
    assert LogMode("non-blocking") is LogMode.NON_BLOCK


def test_host_config_coerces_modes():
    hc = HostConfig(network_mode="container:x", pid_mode="host", cap_add=["NET_ADMIN"])
    assert isinstance(hc.network_mode, NetworkMode)
    assert hc.network_mode.connected_container() == "x"
    assert hc.pid_mode.is_host()
    assert isinstance(hc.cap_add, StrSlice)
    assert list(hc.cap_add) == ["NET_ADMIN"]


def test_host_config_keeps_windows_mode_and_resources():
    hc = HostConfig(network_mode=WindowsNetworkMode("nat"), shm_size=1024, memory=2048)
    assert hc.network_mode.network_name() == "nat"
    assert hc.shm_size == 1024
    assert hc.memory == 2048
    assert hc.init is None
    assert hc.restart_policy.is_none()


def test_host_config_defaults_not_shared():
    first, second = HostConfig(), HostConfig()
    first.binds.append("/a:/b")
    first.devices.append("x")
    assert second.binds == []
    assert second.devices == []


def test_update_config_has_resources_and_policy():
    cfg = UpdateConfig(cpu_shares=512, restart_policy=RestartPolicy("always"))
    assert cfg.cpu_shares == 512
    assert cfg.restart_policy.is_always()
    assert cfg.memory_swappiness is None