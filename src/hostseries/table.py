# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""The table of known Ubuntu series."""

from collections.abc import Mapping
import dataclasses
from typing import Iterable, Optional


@dataclasses.dataclass(frozen=True)
class SeriesInfo:
    """Details about an Ubuntu series."""

    version: str
    series: str
    # Added from the local distro-info feed rather than shipped here.
    created_by_local_distro_info: bool = False
    supported: bool = False


# Shipped with the code. Series newer than these are picked up from the
# distro-info feed, see `hostseries.distroinfo`.
UBUNTU_SERIES = (
    SeriesInfo("12.04", "precise"),
    SeriesInfo("12.10", "quantal"),
    SeriesInfo("13.04", "raring"),
    SeriesInfo("13.10", "saucy"),
    SeriesInfo("14.04", "trusty"),
    SeriesInfo("14.10", "utopic"),
    SeriesInfo("15.04", "vivid"),
    SeriesInfo("15.10", "wily"),
    SeriesInfo("16.04", "xenial"),
    SeriesInfo("16.10", "yakkety"),
    SeriesInfo("17.04", "zesty"),
    SeriesInfo("17.10", "artful"),
    SeriesInfo("18.04", "bionic"),
    SeriesInfo("18.10", "cosmic"),
    SeriesInfo("19.04", "disco"),
    SeriesInfo("19.10", "eoan"),
    SeriesInfo("20.04", "focal", supported=True),
    SeriesInfo("20.10", "groovy"),
    SeriesInfo("21.04", "hirsute"),
    SeriesInfo("21.10", "impish"),
    SeriesInfo("22.04", "jammy", supported=True),
    SeriesInfo("22.10", "kinetic"),
    SeriesInfo("23.04", "lunar"),
    SeriesInfo("23.10", "mantic"),
    SeriesInfo("24.04", "noble", supported=True),
)


class SeriesTable(Mapping):
    """Mapping of series name to `SeriesInfo`.

    Entries can be added but never replaced, so whatever is shipped in
    `UBUNTU_SERIES` stays authoritative.
    """

    def __init__(self, entries: Iterable[SeriesInfo] = UBUNTU_SERIES):
        self._series: dict[str, SeriesInfo] = {}
        for info in entries:
            self.add(info)

    def __getitem__(self, series):
        return self._series[series]

    def __iter__(self):
        return iter(self._series)

    def __len__(self):
        return len(self._series)

    def __repr__(self):
        return f"<SeriesTable {sorted(self._series)}>"

    def add(self, info: SeriesInfo) -> bool:
        """Add `info` unless its series is already known.

        :return: Whether the entry was added.
        """
        if info.series in self._series:
            return False
        self._series[info.series] = info
        return True

    def series_for_version(self, version: str) -> Optional[str]:
        """Return the series for the dotted `version`, or `None`."""
        for info in self._series.values():
            if info.version == version:
                return info.series
        return None

    def version_for_series(self, series: str) -> Optional[str]:
        """Return the dotted version of `series`, or `None`."""
        info = self._series.get(series)
        if info is None:
            return None
        return info.version

    def supported_series(self) -> list[str]:
        """Return the names of the supported series, in version order."""
        return [
            info.series for info in self._series.values() if info.supported
        ]

    def copy(self):
        return SeriesTable(self._series.values())
