# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Parser for /etc/os-release.

Format documentation at:

https://www.freedesktop.org/software/systemd/man/os-release.html
"""

from pathlib import Path

from hostseries.errors import FileUnreadable, SeriesError
from hostseries.logger import get_series_logger

OS_RELEASE_FILE = Path("/etc/os-release")

serieslog = get_series_logger("osrelease")


def unquote(value: str) -> str:
    """Strip whitespace and one pair of matching quotes from `value`."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1].strip()
    return value


def parse_key_value_text(text: str) -> dict[str, str]:
    """Parse newline-delimited ``KEY=VALUE`` lines.

    Lines are split on the first ``=``; lines without one are ignored, as
    are comments. Values are stripped of whitespace and encapsulating
    quotes. When a key appears more than once the last value wins.
    """
    mappings: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, eq, value = line.partition("=")
        if eq != "=":  # Not a variable getting set; ignore.
            continue
        mappings[key.strip()] = unquote(value)
    return mappings


def read_os_release(path=OS_RELEASE_FILE) -> dict[str, str]:
    """Read and parse the os-release file at `path`.

    :raises FileUnreadable: if the file is missing or unreadable.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, ValueError) as error:
        raise FileUnreadable(path, error) from error
    return parse_key_value_text(text)


def release_version(path=OS_RELEASE_FILE) -> str:
    """Return the ``VERSION_ID`` of the os-release file at `path`.

    An empty string is returned when the file can't be read or does not
    identify the distribution.
    """
    try:
        values = read_os_release(path)
    except SeriesError as error:
        serieslog.debug("No release version: %s", error)
        return ""
    if not values.get("ID"):
        return ""
    return values.get("VERSION_ID", "")
