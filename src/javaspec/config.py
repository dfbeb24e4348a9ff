"""Settings for querying the Java platform of the current process."""

import os
from pathlib import Path
from typing import Final, Self

from pydantic import BaseModel, ConfigDict, Field

from .types import Environ

JAVA_EXECUTABLE_ENV: Final = "JAVASPEC_JAVA"
JAVA_HOME_ENV: Final = "JAVA_HOME"
PROBE_TIMEOUT_ENV: Final = "JAVASPEC_PROBE_TIMEOUT"
PROPERTY_OVERRIDE_PREFIX: Final = "JAVASPEC_"

DEFAULT_PROBE_TIMEOUT: Final = 10.0


class ProbeSettings(BaseModel):
    """How to locate and run the Java executable.

    Attributes:
        java_executable: Explicit path to the java executable.
        java_home: Java installation directory; ``bin/java`` is used from it.
        timeout: Seconds to wait for the java executable to answer.
    """

    model_config = ConfigDict(frozen=True)

    java_executable: Path | None = None
    java_home: Path | None = None
    timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0)

    @classmethod
    def from_env(cls, environ: Environ | None = None) -> Self:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Validated settings. Unset or empty variables fall back to defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values = {
            "java_executable": env.get(JAVA_EXECUTABLE_ENV),
            "java_home": env.get(JAVA_HOME_ENV),
            "timeout": env.get(PROBE_TIMEOUT_ENV),
        }
        return cls.model_validate({k: v for k, v in values.items() if v})


def property_override_env(property_name: str) -> str:
    """Return the environment variable that overrides a platform property.

    Args:
        property_name: Dotted property name, e.g. "java.specification.version".

    Returns:
        Variable name, e.g. "JAVASPEC_JAVA_SPECIFICATION_VERSION".
    """
    return PROPERTY_OVERRIDE_PREFIX + property_name.upper().replace(".", "_")
