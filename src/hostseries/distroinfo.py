# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Merge the local distro-info feed into the series table.

The distro-info-data package ships a CSV file per distribution in
``/usr/share/distro-info``. It is updated far more often than this code, so
reading it lets a host running a brand new Ubuntu release resolve its series
without an update here. Releases learnt this way are never supported.
"""

import csv
from pathlib import Path
from typing import NamedTuple

from hostseries.errors import FileUnreadable
from hostseries.logger import get_series_logger
from hostseries.table import SeriesInfo, SeriesTable

UBUNTU_DISTRO_INFO = Path("/usr/share/distro-info/ubuntu.csv")

DISTRO_INFO_FIELDS = (
    "version",
    "codename",
    "series",
    "created",
    "release",
    "eol",
    "eol-server",
)
# `eol-server` is only filled in for LTS releases, and older feeds leave the
# column out entirely.
MANDATORY_FIELDS = 6

serieslog = get_series_logger("distroinfo")


class DistroInfoRow(NamedTuple):
    """A release from the distro-info feed."""

    version: str
    codename: str
    series: str
    created: str
    release: str
    eol: str
    eol_server: str = ""


def _decode_lines(path, lines):
    """Yield `lines` decoded as UTF-8, dropping those that don't decode."""
    for lineno, line in enumerate(lines, start=1):
        try:
            yield line.decode("utf-8")
        except UnicodeDecodeError as error:
            serieslog.debug(
                "Skipping undecodable line %d of %s: %s", lineno, path, error
            )


def _read_records(path, lines):
    """Yield the non-empty CSV records of `lines`, skipping broken ones."""
    reader = csv.reader(_decode_lines(path, lines))
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as error:
            serieslog.debug(
                "Skipping malformed row %d of %s: %s",
                reader.line_num,
                path,
                error,
            )
            continue
        if record:
            yield record


def read_distro_info(path=UBUNTU_DISTRO_INFO) -> list[DistroInfoRow]:
    """Return the releases listed in the distro-info CSV file at `path`.

    The first row is the header. Data rows are mapped by position; rows with
    too few or too many columns, and rows that can't be decoded or parsed,
    are skipped without affecting the others.

    :raises FileUnreadable: if the file is missing or unreadable.
    """
    try:
        with open(path, "rb") as csvfile:
            data = csvfile.read()
    except (OSError, ValueError) as error:
        raise FileUnreadable(path, error) from error

    records = _read_records(path, data.splitlines(keepends=True))
    header = next(records, None)
    if header is None:
        return []
    max_fields = max(len(header), len(DISTRO_INFO_FIELDS))

    rows = []
    for record in records:
        if not MANDATORY_FIELDS <= len(record) <= max_fields:
            serieslog.debug("Skipping malformed row of %s: %r", path, record)
            continue
        fields = [field.strip() for field in record[: len(DISTRO_INFO_FIELDS)]]
        # LTS releases are listed as e.g. "12.04 LTS".
        fields[0] = fields[0].replace(" LTS", "")
        rows.append(DistroInfoRow(*fields))
    return rows


def merge_distro_info(table: SeriesTable, path=UBUNTU_DISTRO_INFO):
    """Add releases from the distro-info feed missing from `table`.

    A missing or unreadable feed is not an error: the table is left as it is.

    :return: The list of `SeriesInfo` added to `table`.
    """
    try:
        rows = read_distro_info(path)
    except FileUnreadable as error:
        serieslog.info("Not merging distro-info: %s", error)
        return []

    added = []
    for row in rows:
        if not row.series or not row.version:
            continue
        info = SeriesInfo(
            version=row.version,
            series=row.series,
            created_by_local_distro_info=True,
            supported=False,
        )
        if table.add(info):
            added.append(info)
    if added:
        serieslog.debug(
            "Added %d series from %s: %s",
            len(added),
            path,
            ", ".join(info.series for info in added),
        )
    return added


def load_series_table(distro_info_path=UBUNTU_DISTRO_INFO) -> SeriesTable:
    """Return the built-in series table merged with the distro-info feed."""
    table = SeriesTable()
    merge_distro_info(table, distro_info_path)
    return table
