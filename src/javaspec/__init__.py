"""javaspec - Java specification versions normalized according to JEP-223.

A package for parsing and comparing Java platform specification versions
such as "1.8" and "11", and for detecting the version of the Java platform
available to the current process.
"""

from ._version import __version__
from .config import ProbeSettings
from .exceptions import (
    InvalidVersionError,
    JavaSpecError,
    MalformedVersionError,
    MissingPlatformPropertyError,
    PlatformProbeError,
    VersionNumberFormatError,
)
from .specification_version import (
    JAVA_5,
    JAVA_6,
    JAVA_7,
    JAVA_8,
    JAVA_9,
    JAVA_10,
    JAVA_11,
    JAVA_12,
    JAVA_SPEC_VERSION_PROPERTY_NAME,
    KNOWN_VERSIONS,
    JavaSpecificationVersion,
    normalize_version,
)
from .types import PropertyReader
from .version_number import VersionNumber

__all__ = [
    "JAVA_10",
    "JAVA_11",
    "JAVA_12",
    "JAVA_5",
    "JAVA_6",
    "JAVA_7",
    "JAVA_8",
    "JAVA_9",
    "JAVA_SPEC_VERSION_PROPERTY_NAME",
    "KNOWN_VERSIONS",
    "InvalidVersionError",
    "JavaSpecError",
    "JavaSpecificationVersion",
    "MalformedVersionError",
    "MissingPlatformPropertyError",
    "PlatformProbeError",
    "ProbeSettings",
    "PropertyReader",
    "VersionNumber",
    "VersionNumberFormatError",
    "__version__",
    "normalize_version",
]
