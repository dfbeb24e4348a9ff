"""Tests ProbeSettings."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from pytest import MonkeyPatch

from javaspec import ProbeSettings
from javaspec.config import DEFAULT_PROBE_TIMEOUT, property_override_env


def test_defaults() -> None:
    """Test settings with an empty environment."""
    settings = ProbeSettings.from_env({})
    assert settings.java_executable is None
    assert settings.java_home is None
    assert settings.timeout == DEFAULT_PROBE_TIMEOUT


def test_from_env() -> None:
    """Test loading every setting from the environment."""
    settings = ProbeSettings.from_env(
        {
            "JAVASPEC_JAVA": "/opt/jdk/bin/java",
            "JAVA_HOME": "/usr/lib/jvm/default",
            "JAVASPEC_PROBE_TIMEOUT": "2.5",
        }
    )
    assert settings.java_executable == Path("/opt/jdk/bin/java")
    assert settings.java_home == Path("/usr/lib/jvm/default")
    assert settings.timeout == 2.5


def test_from_env_ignores_empty_values() -> None:
    """Test that empty variables fall back to defaults."""
    settings = ProbeSettings.from_env({"JAVA_HOME": "", "JAVASPEC_PROBE_TIMEOUT": ""})
    assert settings == ProbeSettings()


def test_from_env_reads_os_environ(monkeypatch: MonkeyPatch) -> None:
    """Test that os.environ is read by default."""
    monkeypatch.setenv("JAVA_HOME", "/usr/lib/jvm/java-21")
    assert ProbeSettings.from_env().java_home == Path("/usr/lib/jvm/java-21")


@pytest.mark.parametrize("timeout", ["0", "-1", "soon"])
def test_from_env_invalid_timeout(timeout: str) -> None:
    """Test that the timeout must be a positive number."""
    with pytest.raises(ValidationError, match="timeout"):
        ProbeSettings.from_env({"JAVASPEC_PROBE_TIMEOUT": timeout})


def test_settings_are_frozen() -> None:
    """Test that settings cannot be modified."""
    settings = ProbeSettings()
    with pytest.raises(ValidationError):
        settings.timeout = 1  # type: ignore[misc]


def test_property_override_env() -> None:
    """Test deriving the override variable from a property name."""
    assert (
        property_override_env("java.specification.version")
        == "JAVASPEC_JAVA_SPECIFICATION_VERSION"
    )
    assert property_override_env("os.arch") == "JAVASPEC_OS_ARCH"
