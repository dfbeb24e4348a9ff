"""Shared fixtures for javaspec tests."""

import subprocess
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from pytest import MonkeyPatch

from javaspec.config import (
    JAVA_EXECUTABLE_ENV,
    JAVA_HOME_ENV,
    PROBE_TIMEOUT_ENV,
    property_override_env,
)
from javaspec.specification_version import JAVA_SPEC_VERSION_PROPERTY_NAME

SPEC_VERSION_ENV = property_override_env(JAVA_SPEC_VERSION_PROPERTY_NAME)

JVM_SETTINGS_OUTPUT = """\
Property settings:
    file.encoding = UTF-8
    java.class.path = 
    java.home = /usr/lib/jvm/java-17-openjdk-amd64
    java.specification.name = Java Platform API Specification
    java.specification.vendor = Oracle Corporation
    java.specification.version = 17
    java.version = 17.0.9
    java.vm.specification.version = 17
    line.separator = \\n 
    user.dir = /home/user

openjdk version "17.0.9" 2023-10-17
OpenJDK Runtime Environment (build 17.0.9+9-Ubuntu-122.04)
OpenJDK 64-Bit Server VM (build 17.0.9+9-Ubuntu-122.04, mixed mode, sharing)
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: MonkeyPatch) -> None:
    """Remove environment variables that influence platform detection."""
    for name in (SPEC_VERSION_ENV, JAVA_EXECUTABLE_ENV, JAVA_HOME_ENV, PROBE_TIMEOUT_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jvm_settings_output() -> str:
    """Sample output of `java -XshowSettings:properties -version`."""
    return JVM_SETTINGS_OUTPUT


@pytest.fixture
def no_java() -> Iterator[MagicMock]:
    """Pretend no java executable is installed."""
    with patch("javaspec._platform.shutil.which", return_value=None) as which:
        yield which


@pytest.fixture
def fake_java() -> Iterator[MagicMock]:
    """Pretend a Java 17 executable is on PATH."""
    completed = subprocess.CompletedProcess(
        args=["java"], returncode=0, stdout="", stderr=JVM_SETTINGS_OUTPUT
    )
    with (
        patch("javaspec._platform.shutil.which", return_value="/usr/bin/java"),
        patch("javaspec._platform.subprocess.run", return_value=completed) as run,
    ):
        yield run
