"""Type aliases needed in the package."""

from collections.abc import Callable, Mapping
from typing import TypeAlias

PropertyName: TypeAlias = str
PropertyValue: TypeAlias = str
PropertyReader: TypeAlias = Callable[[PropertyName], PropertyValue | None]
Properties: TypeAlias = dict[PropertyName, PropertyValue]
Environ: TypeAlias = Mapping[str, str]

VersionComponents: TypeAlias = tuple[int, ...]
