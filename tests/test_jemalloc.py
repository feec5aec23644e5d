from unittest import mock

import pytest

from caco3.jemalloc import (
    BackgroundThread,
    JemallocConfig,
    JemallocInfo,
    JemallocRawData,
    POSSIBLE_MALLOC_CONF_ENVIRONMENT_VARIABLES,
    apply_config,
    is_background_thread_supported,
    is_configured,
)


@pytest.mark.parametrize(
    ("config", "expected"),
    [
        (JemallocConfig(), "abort_conf:true"),
        (JemallocConfig(extra_conf="tcache:false"), "abort_conf:true,tcache:false"),
        (JemallocConfig(number_of_arenas=16), "abort_conf:true,narenas:16"),
        (JemallocConfig(background_thread=True), "abort_conf:true"),
        (JemallocConfig(max_background_threads=4), "abort_conf:true,max_background_threads:4"),
        (
            JemallocConfig(background_thread=True, max_background_threads=8, number_of_arenas=64),
            "abort_conf:true,max_background_threads:8,narenas:64",
        ),
    ],
)
def test_to_config(config, expected):
    assert config.to_config() == expected


def test_is_configured(monkeypatch):
    for name in POSSIBLE_MALLOC_CONF_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    assert is_configured() is False
    monkeypatch.setenv("_RJEM_MALLOC_CONF", "abort_conf:true")
    assert is_configured() is True


def test_background_thread_unsupported_on_darwin():
    with mock.patch("sys.platform", "darwin"):
        assert is_background_thread_supported() is False


def test_background_thread_on_linux_depends_on_libc():
    with mock.patch("sys.platform", "linux"):
        with mock.patch("platform.libc_ver", return_value=("glibc", "2.35")):
            assert is_background_thread_supported() is True
        with mock.patch("platform.libc_ver", return_value=("", "")):
            assert is_background_thread_supported() is False


def test_apply_config_execs_with_environment():
    seen = []
    config = JemallocConfig(number_of_arenas=2)
    with mock.patch("os.execve", side_effect=OSError("boom")) as execve:
        with pytest.raises(RuntimeError, match="jemalloc: exec error"):
            apply_config(config, seen.append)
    assert seen == ["abort_conf:true,narenas:2"]
    env = execve.call_args.args[2]
    for name in POSSIBLE_MALLOC_CONF_ENVIRONMENT_VARIABLES:
        assert env[name] == "abort_conf:true,narenas:2"


def _raw(**overrides):
    values = dict(
        active_bytes=2048,
        allocated_bytes=1536,
        mapped_bytes=3 * 1024**3,
        metadata_bytes=512,
        resident_bytes=1024**2,
        retained_bytes=0,
        background_thread=BackgroundThread(enabled=True, max=4),
        number_of_arenas=8,
    )
    values.update(overrides)
    return JemallocRawData(**values)


def test_info_to_dict():
    info = JemallocInfo.from_raw(_raw())
    assert info.to_dict() == {
        "options": {
            "background_thread": {"enabled": True, "max": 4},
            "number_of_arenas": 8,
        },
        "stats": {
            "allocated": "1.50 KiB",
            "resident": "1.00 MiB",
            "active": "2.00 KiB",
            "mapped": "3.00 GiB",
            "metadata": "512.00 B",
            "retained": "0.00 B",
        },
    }


def test_info_without_background_thread():
    info = JemallocInfo.from_raw(_raw(background_thread=None))
    assert info.to_dict()["options"]["background_thread"] is None
    assert info.stats.allocated == 1536


def test_from_raw_out_of_range():
    assert JemallocInfo.from_raw(_raw(active_bytes=2**64)) is None
    assert JemallocInfo.from_raw(_raw(retained_bytes=-1)) is None