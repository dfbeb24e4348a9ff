"""Java platform specification versions, normalized according to JEP-223.

Before Java 9 the specification version carried a legacy "1." prefix
("1.5" to "1.8"). From Java 9 on it is a bare number ("9", "11"). Versions
are normalized so both styles compare consistently: majors up to 8 keep the
"1.N" form and later majors use the bare "N" form.

See https://openjdk.org/jeps/223
"""

import re
from typing import Final, Self

from ._platform import system_property
from .exceptions import (
    InvalidVersionError,
    MalformedVersionError,
    MissingPlatformPropertyError,
    VersionNumberFormatError,
)
from .types import PropertyReader
from .version_number import VersionNumber

JAVA_SPEC_VERSION_PROPERTY_NAME: Final = "java.specification.version"

_LEGACY_PREFIX: Final = "1."
_LAST_LEGACY_MAJOR: Final = 8
_MAJOR_PATTERN: Final = re.compile(r"[0-9]+", re.ASCII)
_MAX_MAJOR: Final = 2**31 - 1


def normalize_version(version_str: str) -> str:
    """Normalize a Java specification version string.

    Args:
        version_str: Version in the JEP-223 form ("11") or the legacy form
            ("1.8"). Surrounding whitespace is ignored.

    Returns:
        "1.N" for majors up to 8, otherwise the bare major "N".

    Raises:
        MalformedVersionError: If a legacy version does not have exactly one
            dot followed by a major version.
        VersionNumberFormatError: If the major version is not an integer
            or does not fit in a signed 32-bit integer.
    """
    major_str = version_str.strip()
    if major_str.startswith(_LEGACY_PREFIX):
        parts = major_str.split(".")
        # Trailing empty segments are ignored: "1.8." is "1.8".
        while parts and not parts[-1]:
            parts.pop()
        if len(parts) != 2:  # noqa: PLR2004
            raise MalformedVersionError(version_str)
        major_str = parts[1]

    if not _MAJOR_PATTERN.fullmatch(major_str):
        raise VersionNumberFormatError(version_str, major_str)

    major = int(major_str)
    if major > _MAX_MAJOR:
        raise VersionNumberFormatError(
            version_str, major_str, "is out of range for a major version"
        )
    if major > _LAST_LEGACY_MAJOR:
        return str(major)
    return f"{_LEGACY_PREFIX}{major}"


class JavaSpecificationVersion(VersionNumber):
    """Java specification version.

    Instances are always in canonical form, so ordering follows the release
    order of the platform: ``JAVA_8 < JAVA_9 < JAVA_11``.

    Use ``parse`` to build an instance from a raw string.
    """

    def __post_init__(self: Self) -> None:
        """Validate that the components are in canonical form.

        Raises:
            InvalidVersionError: If the components do not describe a
                normalized Java specification version.
        """
        super().__post_init__()
        text = str(self)
        try:
            canonical = normalize_version(text)
        except InvalidVersionError as e:
            raise InvalidVersionError(
                text, f"Not a Java specification version: '{text}'"
            ) from e
        if canonical != text:
            raise InvalidVersionError(
                text,
                f"Not a normalized Java specification version: '{text}' "
                f"(expected '{canonical}')",
            )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse and normalize a Java specification version string.

        Args:
            version_str: Version in the JEP-223 form ("11") or the legacy form
                ("1.8").

        Returns:
            Normalized version instance.

        Raises:
            MalformedVersionError: If a legacy version has the wrong number of
                segments.
            VersionNumberFormatError: If the major version is not an integer.
        """
        return super().parse(normalize_version(version_str))

    @classmethod
    def for_current_platform(cls, read_property: PropertyReader | None = None) -> Self:
        """Get the Java specification version of the current platform.

        Args:
            read_property: Function returning the value of a platform property,
                or None if it is not set. Defaults to reading the environment
                override and then querying the Java executable.

        Returns:
            Version reported by the platform.

        Raises:
            MissingPlatformPropertyError: If the platform does not expose
                ``java.specification.version``.
            InvalidVersionError: If the reported version cannot be parsed.
        """
        reader = read_property or system_property
        value = reader(JAVA_SPEC_VERSION_PROPERTY_NAME)
        if value is None:
            raise MissingPlatformPropertyError(JAVA_SPEC_VERSION_PROPERTY_NAME)
        return cls.parse(value)

    @property
    def major(self: Self) -> int:
        """Major feature release number, e.g. 8 for "1.8" and 11 for "11"."""
        if self.components[0] == 1 and len(self.components) > 1:
            return self.components[1]
        return self.components[0]


JAVA_5: Final = JavaSpecificationVersion.parse("1.5")
JAVA_6: Final = JavaSpecificationVersion.parse("1.6")
JAVA_7: Final = JavaSpecificationVersion.parse("1.7")
JAVA_8: Final = JavaSpecificationVersion.parse("1.8")
JAVA_9: Final = JavaSpecificationVersion.parse("9")
JAVA_10: Final = JavaSpecificationVersion.parse("10")
JAVA_11: Final = JavaSpecificationVersion.parse("11")
JAVA_12: Final = JavaSpecificationVersion.parse("12")

KNOWN_VERSIONS: Final = (
    JAVA_5,
    JAVA_6,
    JAVA_7,
    JAVA_8,
    JAVA_9,
    JAVA_10,
    JAVA_11,
    JAVA_12,
)
