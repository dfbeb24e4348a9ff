"""Models a dotted numeric version such as "1.8" or "11.0.2"."""

from dataclasses import dataclass, field
from typing import Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import InvalidVersionError
from .types import VersionComponents


@dataclass(frozen=True, order=True)
class VersionNumber:
    """Dotted numeric version representation.

    Versions compare component by component, left to right. Trailing zero
    components are ignored, so "9" equals "9.0".

    Attributes:
        components: Non-negative version numbers, most significant first.
    """

    components: VersionComponents = field(compare=False)
    _key: VersionComponents = field(init=False, repr=False)

    def __post_init__(self: Self) -> None:
        """Validate the components and compute the comparison key.

        Raises:
            InvalidVersionError: If there are no components or one of them
                is not a non-negative integer.
        """
        components = tuple(self.components)
        if not components or any(
            not isinstance(c, int) or isinstance(c, bool) or c < 0
            for c in components
        ):
            raise InvalidVersionError(".".join(str(c) for c in components))
        object.__setattr__(self, "components", components)

        key = list(components)
        while key and key[-1] == 0:
            key.pop()
        object.__setattr__(self, "_key", tuple(key))

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a dotted version string.

        Args:
            version_str: Version string such as "1.8" or "11.0.2".

        Returns:
            Parsed version instance.

        Raises:
            InvalidVersionError: If a segment is empty or not a number.
        """
        parts = version_str.strip().split(".")
        if any(not part.isascii() or not part.isdigit() for part in parts):
            raise InvalidVersionError(version_str)
        return cls(tuple(int(part) for part in parts))

    def digit_at(self: Self, index: int) -> int:
        """Return the component at a given position.

        Args:
            index: Zero-based component position.

        Returns:
            The component, 0 when the version has fewer components, or -1
            for a negative index.
        """
        if index < 0:
            return -1
        if index >= len(self.components):
            return 0
        return self.components[index]

    def is_older_than(self: Self, other: Self) -> bool:
        """Return True if this version sorts before other."""
        return self < other

    def is_older_than_or_equal_to(self: Self, other: Self) -> bool:
        """Return True if this version sorts before or equal to other."""
        return self <= other

    def is_newer_than(self: Self, other: Self) -> bool:
        """Return True if this version sorts after other."""
        return self > other

    def is_newer_than_or_equal_to(self: Self, other: Self) -> bool:
        """Return True if this version sorts after or equal to other."""
        return self >= other

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Allow the version to be used as a Pydantic field type.

        Strings are parsed with ``parse``; instances pass through unchanged.
        Values serialize to their string form.
        """
        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Components joined with ".".
        """
        return ".".join(str(c) for c in self.components)

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"{type(self).__name__}('{self}')"
