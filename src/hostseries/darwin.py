# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Series of macOS hosts, from the Darwin kernel version."""

import platform
import re

from hostseries.errors import InvalidKernelVersion, UnknownDarwinVersion
from hostseries.logger import get_series_logger

serieslog = get_series_logger("darwin")

KERNEL_MAJOR_RE = re.compile(r"[+-]?[0-9]+")

# Darwin kernel major version to macOS series.
MACOS_SERIES = {
    23: "sonoma",
    22: "ventura",
    21: "monterey",
    20: "bigsur",
    19: "catalina",
    18: "mojave",
    17: "highsierra",
    16: "sierra",
    15: "elcapitan",
    14: "yosemite",
    13: "mavericks",
    12: "mountainlion",
    11: "lion",
    10: "snowleopard",
    9: "leopard",
    8: "tiger",
    7: "panther",
    6: "jaguar",
    5: "puma",
}


def get_kernel_version() -> str:
    """Return the release of the running kernel, e.g. "23.1.0"."""
    return platform.release()


def kernel_to_major(get_kernel_version=get_kernel_version) -> int:
    """Return the major part of the dotted kernel version.

    :param get_kernel_version: Callable returning the kernel version.
    :raises InvalidKernelVersion: if the version can't be read or its first
        component isn't an integer.
    """
    try:
        full_version = get_kernel_version()
    except Exception as error:
        raise InvalidKernelVersion(
            f"cannot read kernel version: {error}"
        ) from error
    major = str(full_version).split(".", 1)[0]
    # `int` would also take whitespace, underscores and non-ASCII digits.
    if KERNEL_MAJOR_RE.fullmatch(major) is None:
        raise InvalidKernelVersion(f"invalid kernel version {full_version!r}")
    return int(major)


def macos_series_from_major_version(major_version: int) -> str:
    """Return the macOS series for a Darwin kernel major version.

    :raises UnknownDarwinVersion: if the version isn't in `MACOS_SERIES`.
    """
    try:
        return MACOS_SERIES[major_version]
    except KeyError:
        raise UnknownDarwinVersion(major_version)  # noqa: B904


def macos_series_from_kernel_version(get_kernel_version=get_kernel_version):
    """Return the macOS series of the host running `get_kernel_version`."""
    try:
        major_version = kernel_to_major(get_kernel_version)
    except InvalidKernelVersion as error:
        serieslog.info("Unable to determine OS version: %s", error)
        raise
    return macos_series_from_major_version(major_version)
