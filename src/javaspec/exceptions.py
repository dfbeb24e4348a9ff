"""Exceptions raised while parsing versions or reading platform properties."""

from typing import Self


class JavaSpecError(Exception):
    """Base exception for all javaspec errors."""


class InvalidVersionError(JavaSpecError, ValueError):
    """Raised when a version string cannot be parsed."""

    def __init__(self: Self, version: str, message: str | None = None) -> None:
        """Initialize the error.

        Args:
            version: The offending version string.
            message: Optional custom message.
        """
        self.version = version
        super().__init__(message or f"Invalid version string: '{version}'")


class MalformedVersionError(InvalidVersionError):
    """Raised when a legacy "1.N" version has the wrong number of segments."""

    def __init__(self: Self, version: str) -> None:
        """Initialize the error.

        Args:
            version: The offending version string.
        """
        super().__init__(
            version,
            "Malformed old Java specification version. There should be exactly "
            f"one dot and something after it: '{version}'",
        )


class VersionNumberFormatError(InvalidVersionError):
    """Raised when the major version segment is not an integer."""

    def __init__(
        self: Self, version: str, segment: str, reason: str = "is not an integer"
    ) -> None:
        """Initialize the error.

        Args:
            version: The offending version string.
            segment: The segment that failed to parse.
            reason: Why the segment was rejected.
        """
        self.segment = segment
        super().__init__(
            version,
            f"Invalid Java specification version '{version}': "
            f"'{segment}' {reason}",
        )


class MissingPlatformPropertyError(JavaSpecError, RuntimeError):
    """Raised when the platform does not expose a mandatory property."""

    def __init__(self: Self, property_name: str) -> None:
        """Initialize the error.

        Args:
            property_name: Name of the missing property.
        """
        self.property_name = property_name
        super().__init__(f"Missing mandatory JVM system property: {property_name}")


class PlatformProbeError(JavaSpecError):
    """Raised when the Java executable cannot be queried for its properties."""

    def __init__(self: Self, executable: str, reason: str) -> None:
        """Initialize the error.

        Args:
            executable: The java executable that was run.
            reason: Why the probe failed.
        """
        self.executable = executable
        self.reason = reason
        super().__init__(f"Failed to query properties from '{executable}': {reason}")
