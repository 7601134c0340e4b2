# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Setuptools installer for hostseries."""

from os.path import dirname, join

from setuptools import find_packages, setup


def read(filename):
    """Return the whitespace-stripped content of `filename`."""
    path = join(dirname(__file__), filename)
    with open(path, "r") as fin:
        return fin.read().strip()


setup(
    name="hostseries",
    version="1.0.0",
    license="AGPLv3",
    description="Determine the series of the host operating system",
    long_description=read("README.rst"),
    author="MAAS Developers",
    author_email="maas-devel@lists.launchpad.net",
    packages=find_packages(where="src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "FormEncode",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Systems Administration",
    ],
)
