# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Series of the machine the current process is running on."""

from contextlib import contextmanager
from functools import partial
from typing import NamedTuple, Optional

from hostseries.cache import ComputedValue
from hostseries.config import SeriesConfig
from hostseries.darwin import macos_series_from_kernel_version
from hostseries.distroinfo import load_series_table
from hostseries.errors import (
    HostSeriesError,
    SeriesError,
    UNKNOWN_SERIES,
    UnsupportedOperatingSystem,
)
from hostseries.linux import read_linux_series
from hostseries.logger import get_series_logger
from hostseries.ostype import OSType
from hostseries.table import SeriesInfo

serieslog = get_series_logger("host")


class HostSeriesResult(NamedTuple):
    """The outcome of resolving the host series."""

    series: str
    error: Optional[HostSeriesError] = None


def read_series(config=None, table=None) -> str:
    """Return the series of the host described by `config`.

    This does the work every time; use `get_host_series` to share the
    result across the process.

    :param config: A `SeriesConfig`; defaults to `SeriesConfig.from_environ`.
    :param table: The Ubuntu `SeriesTable`; defaults to one merged with the
        distro-info feed named in `config`.
    :raises SeriesError: if the series can't be determined.
    """
    if config is None:
        config = SeriesConfig.from_environ()
    os_type = config.get_os_type()
    if os_type.is_linux():
        if table is None:
            table = load_series_table(config.distro_info_path)
        return read_linux_series(config.os_release_path, table)
    elif os_type is OSType.OSX:
        return macos_series_from_kernel_version(config.get_kernel_version)
    else:
        raise UnsupportedOperatingSystem(os_type)


def _load_series_table():
    config = SeriesConfig.from_environ()
    return load_series_table(config.distro_info_path)


# The Ubuntu series table merged with the host's distro-info feed.
SERIES_TABLE = ComputedValue(_load_series_table)


def _read_host_series() -> str:
    return read_series(table=SERIES_TABLE.get())


def resolve_host_series(read=_read_host_series) -> HostSeriesResult:
    """Call `read` and capture its series, or its error, as a result.

    :param read: Callable returning the host series, raising `SeriesError`
        if it can't.
    """
    try:
        series = read()
    except SeriesError as error:
        host_error = HostSeriesError(error, series=error.series)
        host_error.__cause__ = error
        serieslog.warning("%s", host_error)
        return HostSeriesResult(error.series or UNKNOWN_SERIES, host_error)
    serieslog.debug("Host series is %s", series)
    return HostSeriesResult(series)


# Resolved on first use.
HOST_SERIES = ComputedValue(resolve_host_series)


@contextmanager
def override_host_series(read):
    """Context manager: resolve the host series with `read` instead.

    For tests only. The memoized result is cleared on entry and exit so each
    use observes a fresh resolution.
    """
    with HOST_SERIES.override(partial(resolve_host_series, read)):
        yield


def get_host_series_result() -> HostSeriesResult:
    """Return the memoized series of this host, and the error if any."""
    return HOST_SERIES.get()


def get_host_series() -> str:
    """Return the series of the machine the current process is running on.

    The series is determined on the first call; later calls return the same
    result, including the same error.

    :raises HostSeriesError: if the series can't be determined. Its `series`
        attribute holds the partial result, usually "unknown".
    """
    series, error = get_host_series_result()
    if error is not None:
        # The memoized error itself is never raised.
        cause = error.__cause__
        raise HostSeriesError(cause, series=error.series) from cause
    return series


def must_host_series() -> str:
    """Return the host series, exiting the process if it can't be known.

    For call sites with nothing sensible to do without a series.
    """
    try:
        return get_host_series()
    except HostSeriesError as error:
        serieslog.error("%s", error)
        raise SystemExit(str(error))  # noqa: B904


def get_series_table() -> dict[str, SeriesInfo]:
    """Return the known Ubuntu series, including any from distro-info."""
    return dict(SERIES_TABLE.get())
