# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Configuration for series resolution.

Where the host information comes from can be set in a YAML file, by default
``/etc/hostseries.yaml`` or the file named by ``HOSTSERIES_CONFIG``::

  os_release: /etc/os-release
  distro_info: /usr/share/distro-info/ubuntu.csv
  log_verbosity: 2

Every setting is optional, and so is the file. The ``HOSTSERIES_OS_RELEASE``
and ``HOSTSERIES_DISTRO_INFO`` environment variables take precedence over
the file. Tests don't need either: they build a `SeriesConfig` directly.
"""

import os
from pathlib import Path
from typing import Callable, NamedTuple

import formencode
from formencode import Schema
from formencode.validators import Int
import yaml

from hostseries.darwin import get_kernel_version
from hostseries.distroinfo import UBUNTU_DISTRO_INFO
from hostseries.errors import SeriesError
from hostseries.logger import DEFAULT_LOG_VERBOSITY, set_verbosity
from hostseries.osrelease import OS_RELEASE_FILE
from hostseries.ostype import detect_os_type, OSType

DEFAULT_CONFIG_FILE = Path("/etc/hostseries.yaml")


class InvalidConfiguration(SeriesError):
    """The configuration file can't be parsed or has invalid settings."""


class PathString(formencode.FancyValidator):
    """A non-empty `str` naming a file."""

    not_empty = True
    messages = {"badType": "Expected a path, not a %(type)s: %(value)r"}

    def _validate_python(self, value, state=None):
        if not isinstance(value, str):
            raise formencode.Invalid(
                self.message(
                    "badType", state, value=value, type=type(value).__name__
                ),
                value,
                state,
            )


class SeriesSettings(Schema):
    """Configuration validator for the settings file."""

    if_key_missing = None

    os_release = PathString(if_missing=str(OS_RELEASE_FILE))
    distro_info = PathString(if_missing=str(UBUNTU_DISTRO_INFO))
    log_verbosity = Int(min=0, max=3, if_missing=DEFAULT_LOG_VERBOSITY)


def get_config_filename(environ=None) -> Path:
    """Return the path of the settings file."""
    if environ is None:
        environ = os.environ
    return Path(environ.get("HOSTSERIES_CONFIG") or DEFAULT_CONFIG_FILE)


def load_settings(filename=None) -> dict:
    """Load and validate the YAML settings in `filename`.

    A missing file gives the default settings.

    :raises InvalidConfiguration: if the file isn't valid YAML, isn't a
        mapping, or has invalid settings.
    """
    if filename is None:
        filename = get_config_filename()
    try:
        with open(filename, "rb") as stream:
            settings = yaml.safe_load(stream)
    except FileNotFoundError:
        settings = None
    except (OSError, yaml.YAMLError) as error:
        raise InvalidConfiguration(
            f"cannot load {filename}: {error}"
        ) from error
    if settings is None:
        settings = {}
    elif not isinstance(settings, dict):
        raise InvalidConfiguration(
            f"configuration in {filename} is not a mapping: {settings!r}"
        )
    try:
        return SeriesSettings.to_python(settings)
    except formencode.Invalid as error:
        raise InvalidConfiguration(f"{filename}: {error}") from error


class SeriesConfig(NamedTuple):
    """Sources of information about the host.

    Tests pass their own files and callables; production code uses
    `from_environ`.
    """

    os_release_path: Path = OS_RELEASE_FILE
    distro_info_path: Path = UBUNTU_DISTRO_INFO
    get_os_type: Callable[[], OSType] = detect_os_type
    get_kernel_version: Callable[[], str] = get_kernel_version

    @classmethod
    def from_environ(cls, environ=None):
        """Return the configuration from the settings file and environment."""
        if environ is None:
            environ = os.environ
        settings = load_settings(get_config_filename(environ))
        var_map = {
            # field: (environment variable, setting)
            "os_release_path": ("HOSTSERIES_OS_RELEASE", "os_release"),
            "distro_info_path": ("HOSTSERIES_DISTRO_INFO", "distro_info"),
        }
        args = {}
        for key, (var, setting) in var_map.items():
            value = environ.get(var, None) or settings[setting]
            args[key] = Path(value)
        return cls(**args)


def configure_logging(environ=None):
    """Apply the log verbosity from the settings file."""
    settings = load_settings(get_config_filename(environ))
    set_verbosity(settings["log_verbosity"])
