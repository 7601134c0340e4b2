# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Test object factories."""

from itertools import islice, repeat
import os
import random
import string

from hostseries.distroinfo import DISTRO_INFO_FIELDS
from hostseries.table import SeriesInfo

# Occasionally a parameter needs separate values for None and "no value
# given, make one up."  In that case, use NO_VALUE as the default and
# accept None as a normal value.
NO_VALUE = object()


class Factory:
    random_letters = map(
        random.choice, repeat(string.ascii_letters + string.digits)
    )

    random_lowercase_letters = map(
        random.choice, repeat(string.ascii_lowercase)
    )

    def make_string(self, size=10, prefix=""):
        """Return a `str` filled with random ASCII letters or digits."""
        return prefix + "".join(islice(self.random_letters, size))

    def make_name(self, prefix=None, sep="-", size=6):
        """Generate a random name.

        :param prefix: Optional prefix.  Pass one to help make test failures
            and tracebacks easier to read!  If you don't, you might as well
            use `make_string`.
        :param sep: Separator that will go between the prefix and the random
            portion of the name.  Defaults to a dash.
        :param size: Length of the random portion of the name.
        :return: A randomized unicode string.
        """
        if prefix is None:
            return self.make_string(size=size)
        else:
            return prefix + sep + self.make_string(size=size)

    def make_file(self, location, name=None, contents=None):
        """Create a file, and write data to it.

        :param location: Directory.  Use a temporary directory for this, such
            as pytest's `tmp_path`.
        :param name: Optional name for the file.  If none is given, one will
            be made up.
        :param contents: Optional contents for the file. If omitted, some
            arbitrary ASCII text will be written.
        :return: Path to the file.
        """
        if name is None:
            name = self.make_string()
        if contents is None:
            contents = self.make_string()
        path = os.path.join(location, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(contents)
        return path

    def make_series_name(self):
        """Return a made up series name, in lower case like real ones."""
        return "".join(islice(self.random_lowercase_letters, 8))

    def make_version(self, major=None):
        """Return an Ubuntu-style version far beyond any real release."""
        if major is None:
            major = random.randint(90, 99)
        return "%d.%02d" % (major, random.choice((4, 10)))

    def make_series_info(
        self,
        version=None,
        series=None,
        created_by_local_distro_info=False,
        supported=False,
    ):
        if version is None:
            version = self.make_version()
        if series is None:
            series = self.make_series_name()
        return SeriesInfo(
            version=version,
            series=series,
            created_by_local_distro_info=created_by_local_distro_info,
            supported=supported,
        )

    def make_os_release(self, location, values=NO_VALUE, name="os-release"):
        """Write an os-release file with the given `values`.

        :param values: Mapping written as double-quoted ``KEY="VALUE"`` lines.
            If omitted, an Ubuntu 12.04 release is written.
        :return: Path to the file.
        """
        if values is NO_VALUE:
            values = {"NAME": "Ubuntu", "ID": "ubuntu", "VERSION_ID": "12.04"}
        contents = "".join(
            f'{key}="{value}"\n' for key, value in values.items()
        )
        return self.make_file(location, name, contents)

    def make_distro_info(self, location, rows=(), name="ubuntu.csv"):
        """Write a distro-info CSV file.

        :param rows: Iterable of `(version, codename, series)` tuples, or of
            complete rows. Short rows are padded with made up dates.
        :return: Path to the file.
        """
        lines = [",".join(DISTRO_INFO_FIELDS)]
        for row in rows:
            row = list(row)
            if len(row) == 3:
                row += ["2011-10-13", "2012-04-26", "2017-04-26"]
            lines.append(",".join(row))
        return self.make_file(location, name, "\n".join(lines) + "\n")


# Create factory singleton.
factory = Factory()
