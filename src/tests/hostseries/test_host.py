# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from concurrent.futures import ThreadPoolExecutor
import platform
import threading
from unittest.mock import Mock

import pytest

from hostseries import host
from hostseries.config import InvalidConfiguration, SeriesConfig
from hostseries.errors import (
    FileUnreadable,
    HostSeriesError,
    MissingIdentifier,
    SeriesNotDetermined,
    UnknownDarwinVersion,
    UnsupportedOperatingSystem,
)
from hostseries.host import (
    get_host_series,
    get_host_series_result,
    get_series_table,
    HostSeriesResult,
    must_host_series,
    override_host_series,
    read_series,
)
from hostseries.ostype import OSType
from hostseries.table import SeriesTable
from seriestesting.factory import factory

SPOCK_ROW = ("99.04", "Star Trek", "spock")


def make_config(tmp_path, os_type=OSType.GENERIC_LINUX, **kwargs):
    return SeriesConfig(
        os_release_path=tmp_path / "os-release",
        distro_info_path=tmp_path / "ubuntu.csv",
        get_os_type=lambda: os_type,
        **kwargs,
    )


class TestReadSeries:
    def test_linux(self, tmp_path):
        factory.make_os_release(tmp_path, {"ID": "centos", "VERSION_ID": "7"})
        assert read_series(make_config(tmp_path)) == "centos7"

    def test_linux_merges_distro_info(self, tmp_path):
        factory.make_os_release(
            tmp_path, {"ID": "ubuntu", "VERSION_ID": "99.04"}
        )
        factory.make_distro_info(tmp_path, [SPOCK_ROW])
        assert read_series(make_config(tmp_path)) == "spock"

    def test_linux_uses_given_table(self, tmp_path):
        factory.make_os_release(
            tmp_path, {"ID": "ubuntu", "VERSION_ID": "99.04"}
        )
        factory.make_distro_info(tmp_path, [SPOCK_ROW])
        with pytest.raises(SeriesNotDetermined):
            read_series(make_config(tmp_path), table=SeriesTable())

    def test_linux_missing_os_release(self, tmp_path):
        with pytest.raises(FileUnreadable):
            read_series(make_config(tmp_path))

    def test_macos(self, tmp_path):
        config = make_config(
            tmp_path, OSType.OSX, get_kernel_version=lambda: "23.1.0"
        )
        assert read_series(config) == "sonoma"

    def test_macos_unknown_version(self, tmp_path):
        config = make_config(
            tmp_path, OSType.OSX, get_kernel_version=lambda: "4.0.0"
        )
        with pytest.raises(UnknownDarwinVersion):
            read_series(config)

    @pytest.mark.parametrize("os_type", [OSType.WINDOWS, OSType.UNKNOWN])
    def test_unsupported(self, tmp_path, os_type):
        with pytest.raises(UnsupportedOperatingSystem):
            read_series(make_config(tmp_path, os_type))

    def test_defaults_to_environ(self, linux_host):
        linux_host({"ID": "opensuse", "VERSION_ID": "42.2"})
        assert read_series() == "opensuseleap"


class TestGetHostSeries:
    def test_precise(self, linux_host):
        linux_host({"NAME": "Ubuntu", "ID": "ubuntu", "VERSION_ID": "12.04"})
        assert get_host_series() == "precise"
        assert get_host_series_result() == HostSeriesResult("precise", None)

    def test_future_series_from_distro_info(self, linux_host, distro_info):
        linux_host({"ID": "ubuntu", "VERSION_ID": "99.04"})
        distro_info([("12.04 LTS", "Precise Pangolin", "precise"), SPOCK_ROW])
        assert get_host_series() == "spock"

        table = get_series_table()
        assert not table["precise"].created_by_local_distro_info
        assert not table["precise"].supported
        assert not table["bionic"].created_by_local_distro_info
        assert not table["bionic"].supported
        assert table["spock"].created_by_local_distro_info
        assert not table["spock"].supported

    def test_computed_once(self, linux_host):
        linux_host({"ID": "arch"})
        assert get_host_series() == "genericlinux"
        linux_host({"ID": "centos", "VERSION_ID": "8"})
        assert get_host_series() == "genericlinux"

    def test_missing_id(self, linux_host):
        linux_host({"NAME": "junk"})
        with pytest.raises(HostSeriesError) as exc_info:
            get_host_series()
        error = exc_info.value
        assert str(error) == (
            "cannot determine host series: OS release file is missing ID"
        )
        assert error.series == "unknown"
        assert isinstance(error.__cause__, MissingIdentifier)

    def test_error_is_memoized(self, linux_host):
        linux_host({"ID": "centos"})
        series, error = get_host_series_result()
        assert series == "unknown"
        assert str(error) == (
            "cannot determine host series: could not determine series"
        )
        linux_host({"ID": "centos", "VERSION_ID": "7"})
        assert get_host_series_result() == (series, error)
        with pytest.raises(HostSeriesError):
            get_host_series()

    def test_missing_os_release(self, linux_host):
        with pytest.raises(HostSeriesError) as exc_info:
            get_host_series()
        assert isinstance(exc_info.value.__cause__, FileUnreadable)

    def test_each_caller_gets_own_error(self, linux_host):
        linux_host({"NAME": "junk"})
        try:
            raise KeyError("caller")
        except KeyError:
            with pytest.raises(HostSeriesError) as exc_info:
                get_host_series()
        raised = exc_info.value
        _, memoized = get_host_series_result()
        assert raised is not memoized
        assert memoized.__context__ is None
        assert memoized.__traceback__ is None
        assert raised.__cause__ is memoized.__cause__
        assert str(raised) == str(memoized)
        assert raised.series == "unknown"

    def test_concurrent_first_calls_resolve_once(self):
        calls = []
        started = threading.Event()
        release = threading.Event()

        def read():
            calls.append(None)
            started.set()
            release.wait(5)
            return "trusty"

        with override_host_series(read):
            with ThreadPoolExecutor(max_workers=10) as executor:
                futures = [executor.submit(get_host_series) for _ in range(10)]
                started.wait(5)
                release.set()
                results = [future.result() for future in futures]
        assert len(calls) == 1
        assert results == ["trusty"] * 10


class TestOverrideHostSeries:
    def test_override(self):
        read = Mock(return_value="jammy")
        with override_host_series(read):
            assert get_host_series() == "jammy"
            assert get_host_series() == "jammy"
        read.assert_called_once_with()

    def test_override_resets_between_uses(self):
        with override_host_series(lambda: "focal"):
            assert get_host_series() == "focal"
        with override_host_series(lambda: "noble"):
            assert get_host_series() == "noble"

    def test_override_error(self):
        def read():
            raise UnknownDarwinVersion(4)

        with override_host_series(read):
            series, error = get_host_series_result()
        assert series == "unknown"
        assert str(error) == (
            "cannot determine host series: unknown series version 4"
        )

    def test_other_errors_propagate(self):
        with override_host_series(Mock(side_effect=RuntimeError("boom"))):
            with pytest.raises(RuntimeError):
                get_host_series()


class TestMustHostSeries:
    def test_returns_series(self):
        with override_host_series(lambda: "xenial"):
            assert must_host_series() == "xenial"

    def test_exits_on_error(self):
        def read():
            raise MissingIdentifier()

        with override_host_series(read):
            with pytest.raises(SystemExit) as exc_info:
                must_host_series()
        assert str(exc_info.value) == (
            "cannot determine host series: OS release file is missing ID"
        )


class TestGetSeriesTable:
    def test_builtin_without_distro_info(self, distro_info):
        table = get_series_table()
        assert "precise" in table
        assert not any(
            info.created_by_local_distro_info for info in table.values()
        )

    def test_snapshot(self, distro_info):
        table = get_series_table()
        table.clear()
        assert "precise" in get_series_table()

    def test_loaded_once(self, distro_info):
        distro_info([SPOCK_ROW])
        assert "spock" in get_series_table()
        distro_info([])
        assert "spock" in get_series_table()

    def test_shared_with_host_series(self, mocker, linux_host, distro_info):
        load = mocker.spy(host, "load_series_table")
        linux_host({"ID": "ubuntu", "VERSION_ID": "99.04"})
        distro_info([SPOCK_ROW])
        get_series_table()
        assert get_host_series() == "spock"
        load.assert_called_once()


class TestInvalidConfiguration:
    def test_invalid_os_release_path_is_memoized(self, mocker, tmp_path):
        mocker.patch.object(platform, "system", return_value="Linux")
        factory.make_file(
            tmp_path, "hostseries.yaml", 'os_release: "/etc/a\\0b"\n'
        )
        read = mocker.spy(host, "read_series")
        results = [get_host_series_result() for _ in range(2)]
        assert results[0] is results[1]
        series, error = results[0]
        assert series == "unknown"
        assert isinstance(error, HostSeriesError)
        assert isinstance(error.__cause__, FileUnreadable)
        read.assert_called_once()

    def test_reported_as_host_series_error(
        self, linux_host, monkeypatch, tmp_path
    ):
        linux_host({"ID": "arch"})
        filename = factory.make_file(
            tmp_path, "settings.yaml", "log_verbosity: 9\n"
        )
        monkeypatch.setenv("HOSTSERIES_CONFIG", filename)
        with pytest.raises(HostSeriesError) as exc_info:
            get_host_series()
        assert isinstance(exc_info.value.__cause__, InvalidConfiguration)
