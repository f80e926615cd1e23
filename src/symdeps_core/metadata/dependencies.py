"""Dependency lookup over the properties of a decorator's metadata literal."""

from typing import Any, List, Optional, Sequence

from symdeps_core.metadata.models import MetadataValue
from symdeps_core.metadata.nodes import SyntaxNode, declared_name
from symdeps_core.metadata.values import MetadataValueParser


class DependencyExtractor:
    """Facade returning the values of one named metadata property."""

    def __init__(self, value_parser: Optional[MetadataValueParser] = None) -> None:
        self._value_parser = value_parser or MetadataValueParser()

    def get_dependencies(
        self,
        properties: Sequence[SyntaxNode],
        target_name: str,
        source_context: Any = None,
    ) -> List[MetadataValue]:
        """Return the resolved values of ``target_name``.

        Every property with that name is parsed and the last one wins,
        as for duplicate keys in an object literal. A missing property or
        an unrecognised value shape gives an empty list.
        """
        matches = self.get_raw_dependency_nodes(properties, target_name)
        if not matches:
            return []

        parsed = [self._value_parser.parse_metadata_value(node, source_context) for node in matches]
        result = parsed[-1]
        return result if result is not None else []

    def get_raw_dependency_nodes(
        self, properties: Sequence[SyntaxNode], target_name: str
    ) -> List[SyntaxNode]:
        """Return the unparsed properties named ``target_name``, in order."""
        return [node for node in properties if declared_name(node) == target_name]

    get_symbol_deps = get_dependencies
    get_symbol_deps_raw = get_raw_dependency_nodes


__all__ = ["DependencyExtractor"]
