#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).
import platform

import pytest

from hostseries import host
from seriestesting.factory import factory


@pytest.fixture(autouse=True)
def no_settings_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HOSTSERIES_CONFIG", str(tmp_path / "hostseries.yaml"))
    monkeypatch.delenv("HOSTSERIES_OS_RELEASE", raising=False)
    monkeypatch.delenv("HOSTSERIES_DISTRO_INFO", raising=False)


@pytest.fixture(autouse=True)
def fresh_host_series():
    host.HOST_SERIES.clear_cached()
    host.SERIES_TABLE.clear_cached()
    yield
    host.HOST_SERIES.clear_cached()
    host.SERIES_TABLE.clear_cached()


@pytest.fixture
def os_release(tmp_path, monkeypatch):
    """Return a function writing the host's os-release file."""

    def write(values):
        path = factory.make_os_release(tmp_path, values)
        monkeypatch.setenv("HOSTSERIES_OS_RELEASE", path)
        return path

    monkeypatch.setenv("HOSTSERIES_OS_RELEASE", str(tmp_path / "missing"))
    return write


@pytest.fixture
def distro_info(tmp_path, monkeypatch):
    """Return a function writing the host's distro-info feed."""

    def write(rows):
        path = factory.make_distro_info(tmp_path, rows)
        monkeypatch.setenv("HOSTSERIES_DISTRO_INFO", path)
        return path

    monkeypatch.setenv("HOSTSERIES_DISTRO_INFO", str(tmp_path / "no.csv"))
    return write


@pytest.fixture
def linux_host(mocker, os_release, distro_info):
    """Pretend the host runs Linux; return the os-release writer."""
    mocker.patch.object(platform, "system", return_value="Linux")
    return os_release
