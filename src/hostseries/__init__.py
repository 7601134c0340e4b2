# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Determine the series of the host operating system.

A series is a short, stable name for an operating system release, like
"jammy", "centos7" or "sonoma". `get_host_series` works it out once per
process from `/etc/os-release` (plus the distro-info feed, for Ubuntu
releases newer than this code) or from the Darwin kernel version.
"""

__all__ = [
    "get_host_series",
    "get_host_series_result",
    "get_os_from_series",
    "get_series_table",
    "HostSeriesError",
    "HostSeriesResult",
    "must_host_series",
    "must_os_from_series",
    "OSType",
    "read_series",
    "SeriesConfig",
    "SeriesError",
    "SeriesInfo",
]

from hostseries.config import SeriesConfig
from hostseries.errors import HostSeriesError, SeriesError
from hostseries.host import (
    get_host_series,
    get_host_series_result,
    get_series_table,
    HostSeriesResult,
    must_host_series,
    read_series,
)
from hostseries.ostype import get_os_from_series, must_os_from_series, OSType
from hostseries.table import SeriesInfo
