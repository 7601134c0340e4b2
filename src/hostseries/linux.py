# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Series of Linux distributions, from their os-release information."""

from typing import Optional

from hostseries.errors import MissingIdentifier, SeriesNotDetermined
from hostseries.osrelease import OS_RELEASE_FILE, read_os_release, unquote
from hostseries.table import SeriesTable

GENERIC_LINUX_SERIES = "genericlinux"
OPENSUSE_LEAP_SERIES = "opensuseleap"
CENTOS_SERIES_PREFIX = "centos"

# openSUSE Leap 15 and later use the distribution version as their
# `VERSION_ID`; before that it was 42.x.
OPENSUSE_LEAP_LEGACY_PREFIX = "42"
OPENSUSE_LEAP_MIN_MAJOR = 15


def _ubuntu_series(values, table: SeriesTable) -> str:
    version = unquote(values.get("VERSION_ID", ""))
    series = table.series_for_version(version) if version else None
    if series is None:
        raise SeriesNotDetermined()
    return series


def _centos_series(values, table: SeriesTable) -> str:
    version = unquote(values.get("VERSION_ID", ""))
    if not version:
        raise SeriesNotDetermined()
    return CENTOS_SERIES_PREFIX + version


def is_suse_family(values) -> bool:
    """Whether the os-release information is branded SuSE."""
    os_id = values.get("ID", "").lower()
    name = values.get("NAME", "").lower()
    return os_id.startswith("opensuse") or "suse" in os_id or "suse" in name


def _opensuse_series(values) -> Optional[str]:
    """Return the openSUSE Leap series, or `None` for other SuSE flavours."""
    os_id = values.get("ID", "").lower()
    name = values.get("NAME", "").lower()
    version = unquote(values.get("VERSION_ID", ""))
    if version.startswith(OPENSUSE_LEAP_LEGACY_PREFIX):
        return OPENSUSE_LEAP_SERIES
    if os_id in ("opensuse", "opensuse-leap") and "leap" in name:
        major = version.partition(".")[0]
        if major.isdigit() and int(major) >= OPENSUSE_LEAP_MIN_MAJOR:
            return OPENSUSE_LEAP_SERIES
    return None


def series_from_os_release(values, table: SeriesTable) -> str:
    """Return the series described by parsed os-release `values`.

    Distributions are tried in a fixed order: Ubuntu, CentOS, openSUSE Leap
    and finally anything else, which is reported as the generic Linux series.

    :param values: Mapping parsed from an os-release file.
    :param table: The Ubuntu series table to look versions up in.
    :raises MissingIdentifier: if `values` has no ``ID``.
    :raises SeriesNotDetermined: if the distribution is known but its version
        can't be mapped to a series.
    """
    os_id = unquote(values.get("ID", "")).lower()
    if not os_id:
        raise MissingIdentifier()
    if os_id == "ubuntu":
        return _ubuntu_series(values, table)
    if os_id == "centos":
        return _centos_series(values, table)
    if is_suse_family(values):
        series = _opensuse_series(values)
        if series is not None:
            return series
    return GENERIC_LINUX_SERIES


def read_linux_series(os_release_path=OS_RELEASE_FILE, table=None) -> str:
    """Return the series of the Linux host from its os-release file.

    :param table: The `SeriesTable` to use; defaults to the built-in table
        without anything from distro-info.
    :raises FileUnreadable: if the os-release file can't be read.
    """
    if table is None:
        table = SeriesTable()
    return series_from_os_release(read_os_release(os_release_path), table)
