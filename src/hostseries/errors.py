# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Errors raised while resolving the host series."""

UNKNOWN_SERIES = "unknown"


class SeriesError(Exception):
    """Base class for series resolution errors.

    :ivar series: The series reported alongside the error. Resolution never
        reports an empty series; when it fails it reports "unknown".
    """

    series = UNKNOWN_SERIES


class FileUnreadable(SeriesError):
    """A metadata file is missing or cannot be read."""

    def __init__(self, path, error):
        super().__init__(f"cannot read {path}: {error}")
        self.path = path
        self.error = error


class MissingIdentifier(SeriesError):
    """The os-release file has no ID."""

    def __init__(self):
        super().__init__("OS release file is missing ID")


class SeriesNotDetermined(SeriesError):
    """The distribution is known but its version maps to no series."""

    def __init__(self):
        super().__init__("could not determine series")


class InvalidKernelVersion(SeriesError):
    """The kernel version could not be read or parsed."""


class UnknownDarwinVersion(SeriesError):
    """The Darwin kernel major version is not in the macOS table."""

    def __init__(self, major_version):
        super().__init__(f"unknown series version {major_version}")
        self.major_version = major_version


class UnsupportedOperatingSystem(SeriesError):
    """The host operating system has no series resolver."""

    def __init__(self, os_type):
        super().__init__(f"unsupported operating system: {os_type}")
        self.os_type = os_type


class UnknownOSForSeries(SeriesError):
    """The series does not belong to any known operating system."""

    def __init__(self, series):
        super().__init__(f"unknown OS for series: {series!r}")
        self.series_name = series


class HostSeriesError(SeriesError):
    """The series of the running host could not be determined."""

    def __init__(self, error, series=UNKNOWN_SERIES):
        super().__init__(f"cannot determine host series: {error}")
        self.series = series
