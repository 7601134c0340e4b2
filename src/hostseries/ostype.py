# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Operating system families, as far as series are concerned."""

import enum
import platform

from hostseries.darwin import MACOS_SERIES
from hostseries.errors import SeriesError, UnknownOSForSeries
from hostseries.linux import (
    CENTOS_SERIES_PREFIX,
    GENERIC_LINUX_SERIES,
    OPENSUSE_LEAP_SERIES,
)
from hostseries.logger import get_series_logger

serieslog = get_series_logger("ostype")


@enum.unique
class OSType(enum.Enum):
    """The vocabulary of operating system families."""

    UNKNOWN = "unknown"
    UBUNTU = "ubuntu"
    WINDOWS = "windows"
    OSX = "osx"
    CENTOS = "centos"
    GENERIC_LINUX = "genericlinux"
    OPENSUSE = "opensuse"

    def is_linux(self) -> bool:
        return self in LINUX_OS_TYPES

    def __str__(self):
        return self.value


LINUX_OS_TYPES = frozenset(
    (OSType.UBUNTU, OSType.CENTOS, OSType.GENERIC_LINUX, OSType.OPENSUSE)
)

# `platform.system()` to OS family. The Linux distribution isn't known until
# os-release has been read, so Linux is reported as generic.
PLATFORM_OS_TYPES = {
    "Linux": OSType.GENERIC_LINUX,
    "Darwin": OSType.OSX,
    "Windows": OSType.WINDOWS,
}


def detect_os_type() -> OSType:
    """Return the family of the running operating system."""
    system = platform.system()
    os_type = PLATFORM_OS_TYPES.get(system, OSType.UNKNOWN)
    if os_type is OSType.UNKNOWN:
        serieslog.debug("Unknown operating system %r", system)
    return os_type


def get_os_from_series(series: str, table=None) -> OSType:
    """Return the OS family a series belongs to.

    :param table: `SeriesTable` used to recognise Ubuntu series; defaults to
        the host's table, merged with its distro-info feed.
    :raises UnknownOSForSeries: if `series` is not recognised.
    """
    if not series:
        raise UnknownOSForSeries(series)
    if table is None:
        from hostseries.host import SERIES_TABLE

        table = SERIES_TABLE.get()
    if series in table:
        return OSType.UBUNTU
    if series in MACOS_SERIES.values():
        return OSType.OSX
    if series == OPENSUSE_LEAP_SERIES:
        return OSType.OPENSUSE
    if series == GENERIC_LINUX_SERIES:
        return OSType.GENERIC_LINUX
    if series.startswith(CENTOS_SERIES_PREFIX) and series.removeprefix(
        CENTOS_SERIES_PREFIX
    ):
        return OSType.CENTOS
    raise UnknownOSForSeries(series)


def must_os_from_series(series: str, table=None) -> OSType:
    """Return the OS family of `series`, exiting if there's none."""
    try:
        return get_os_from_series(series, table)
    except SeriesError as error:
        serieslog.error("%s", error)
        raise SystemExit(str(error))  # noqa: B904
