"""Readers for the platform properties of the current process."""

import logging
import os
import re
import shutil
import subprocess

from .config import ProbeSettings, property_override_env
from .exceptions import PlatformProbeError
from .types import Environ, Properties

logger = logging.getLogger(__name__)

_PROPERTY_LINE = re.compile(r"^\s*(?P<name>[\w.-]+)\s*=\s*(?P<value>.*?)\s*$")


def environment_property(name: str, environ: Environ | None = None) -> str | None:
    """Read a property override from the environment.

    Args:
        name: Property name, e.g. "java.specification.version".
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        The override value, or None if the variable is unset or empty.
    """
    env = os.environ if environ is None else environ
    variable = property_override_env(name)
    value = env.get(variable)
    if not value:
        return None
    logger.debug("Using %s=%s for property %s", variable, value, name)
    return value


def find_java_executable(settings: ProbeSettings) -> str | None:
    """Locate the java executable.

    Looks at the explicit executable first, then ``JAVA_HOME``, then ``PATH``.

    Args:
        settings: Probe settings.

    Returns:
        Path to the executable, or None if no Java installation is found.
    """
    if settings.java_executable is not None:
        return str(settings.java_executable)
    if settings.java_home is not None:
        candidate = settings.java_home / "bin" / "java"
        if candidate.is_file():
            return str(candidate)
        logger.debug("No java executable under JAVA_HOME=%s", settings.java_home)
    return shutil.which("java")


def parse_jvm_properties(output: str) -> Properties:
    """Parse the output of ``java -XshowSettings:properties``.

    Args:
        output: Text printed by the java executable.

    Returns:
        Mapping of property name to value. Multi-line values keep their
        first line only.
    """
    properties: Properties = {}
    for line in output.splitlines():
        match = _PROPERTY_LINE.match(line)
        if match is None:
            continue
        properties.setdefault(match["name"], match["value"])
    return properties


def read_jvm_properties(settings: ProbeSettings | None = None) -> Properties:
    """Query the java executable for its system properties.

    Args:
        settings: Probe settings. Defaults to ``ProbeSettings.from_env()``.

    Returns:
        The reported properties, or an empty mapping if no java executable
        can be found.

    Raises:
        PlatformProbeError: If the executable fails, times out or cannot be
            started.
    """
    settings = settings or ProbeSettings.from_env()
    executable = find_java_executable(settings)
    if executable is None:
        logger.debug("No java executable found")
        return {}

    command = [executable, "-XshowSettings:properties", "-version"]
    logger.debug("Running %s", " ".join(command))
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=settings.timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise PlatformProbeError(
            executable, f"timed out after {settings.timeout}s"
        ) from e
    except OSError as e:
        raise PlatformProbeError(executable, str(e)) from e

    if result.returncode != 0:
        raise PlatformProbeError(
            executable, f"exited with status {result.returncode}"
        )

    # The JVM prints its settings to stderr.
    properties = parse_jvm_properties(result.stderr + "\n" + result.stdout)
    logger.debug("Read %d properties from %s", len(properties), executable)
    return properties


def jvm_property(name: str, settings: ProbeSettings | None = None) -> str | None:
    """Read a property from the java executable.

    Args:
        name: Property name.
        settings: Probe settings. Defaults to ``ProbeSettings.from_env()``.

    Returns:
        The property value, or None if it is not reported.
    """
    return read_jvm_properties(settings).get(name)


def system_property(name: str) -> str | None:
    """Read a platform property for the current process.

    The environment override wins; otherwise the java executable is queried.

    Args:
        name: Property name.

    Returns:
        The property value, or None if the platform does not provide it.
    """
    value = environment_property(name)
    if value is not None:
        return value
    return jvm_property(name)
