"""Packaging settings."""

from codecs import open as codecs_open
from os.path import abspath, dirname, join

from setuptools import find_packages, setup

THIS_DIR = abspath(dirname(__file__))


def local_scheme(version: str) -> str:  # noqa: ARG001
    """Skip the local version (eg. +xyz) to upload to Test PyPI."""
    return ""


with codecs_open(join(THIS_DIR, "README.md"), encoding="utf-8") as readfile:
    LONG_DESCRIPTION = readfile.read()


INSTALL_REQUIRES = [
    "click>=8.0",
    "coloredlogs",
    "humanfriendly",  # terminal color detection, also a coloredlogs dependency
    "pydantic>=2.6,<3.0",
    "PyYAML>=5.4",
    "requests",
    "typing_extensions",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
        "pytest-mock",
    ],
}


setup(
    name="rundown",
    description="Tear down deployments recorded in a deployment directory",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: Utilities",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    keywords="cli",
    packages=find_packages(exclude=("tests*",)),
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    setup_requires=["setuptools_scm"],
    use_scm_version={"local_scheme": local_scheme, "fallback_version": "0.0.0"},
    entry_points={"console_scripts": ["rundown=rundown._cli.main:cli"]},
)
