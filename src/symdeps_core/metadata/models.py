"""Pydantic models for extracted decorator metadata."""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from symdeps_core.metadata.nodes import ObjectMember


# A single resolved metadata entry: a qualified name, literal text,
# printed fallback, or a boolean flag such as ``standalone: true``.
MetadataValue = Union[str, bool]


class Classification(str, Enum):
    """Semantic category guessed from a qualified name.

    Declaration order is the matching precedence used by ``classify``.
    """

    COMPONENT = "component"
    PIPE = "pipe"
    MODULE = "module"
    DIRECTIVE = "directive"


class ParsedIdentifier(BaseModel):
    """A dotted name split on its first segment and classified."""

    model_config = ConfigDict(frozen=True)

    namespace: Optional[str] = Field(
        default=None,
        description="First segment of a dotted name (e.g., 'Shared' in 'Shared.Module')"
    )
    name: str = Field(..., description="Full original name")
    classification: Optional[Classification] = Field(
        default=None,
        description="Category guessed from the full name"
    )


class DecoratorLocation(BaseModel):
    """Location of a decorated class in its source file (0-indexed lines)."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(..., ge=0)
    end_line: int = Field(..., ge=0)


class DecoratedClass(BaseModel):
    """A class declaration carrying a metadata decorator call."""

    model_config = ConfigDict(frozen=True)

    class_name: str = Field(..., min_length=1, description="Declared class name")
    decorator_name: str = Field(..., min_length=1, description="Decorator name (e.g., 'NgModule')")
    file_path: str = Field(..., description="Path of the source file")
    location: DecoratorLocation
    properties: List[ObjectMember] = Field(
        default_factory=list,
        description="Members of the decorator's object-literal argument"
    )


class ClassDependencies(BaseModel):
    """Resolved metadata of one decorated class.

    ``dependencies`` maps each configured metadata property present on the
    decorator to its resolved values; ``identifiers`` holds the string
    values of those properties split and classified.
    """

    class_name: str = Field(..., min_length=1)
    decorator_name: str = Field(..., min_length=1)
    file_path: str
    location: DecoratorLocation
    dependencies: Dict[str, List[MetadataValue]] = Field(default_factory=dict)
    identifiers: Dict[str, List[ParsedIdentifier]] = Field(default_factory=dict)

    @property
    def total_dependencies(self) -> int:
        return sum(len(values) for values in self.dependencies.values())


__all__ = [
    "MetadataValue",
    "Classification",
    "ParsedIdentifier",
    "DecoratorLocation",
    "DecoratedClass",
    "ClassDependencies",
]
