"""
Conversion of tree-sitter TypeScript/JavaScript nodes into metadata nodes.

Only the expression shapes the metadata extractor distinguishes are
modelled; every other node becomes an OpaqueExpression carrying its
verbatim source.
"""

from typing import List, Optional, Set

import structlog
from tree_sitter import Node

from symdeps_core.metadata.nodes import (
    ArrayLiteralExpression,
    CallExpression,
    Expression,
    FalseLiteral,
    Identifier,
    NumericLiteral,
    ObjectLiteralExpression,
    ObjectMember,
    OpaqueExpression,
    PropertyAccessExpression,
    PropertyAssignment,
    ShorthandPropertyAssignment,
    SpreadElement,
    StringLiteral,
    TemplateLiteral,
    TrueLiteral,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# Tree-sitter node types
# =============================================================================

IDENTIFIER_TYPES: Set[str] = {
    "identifier",
    "property_identifier",
    "type_identifier",
    "shorthand_property_identifier",
}

# Wrappers that do not change the value of the wrapped expression:
# (x), x as T, x satisfies T, x!
TRANSPARENT_TYPES: Set[str] = {
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "non_null_expression",
}


class NodeConverter:
    """
    Converts tree-sitter nodes of one source file into metadata nodes.

    Example:
        >>> converter = NodeConverter(source_bytes)
        >>> converter.convert(array_node)
        ArrayLiteralExpression(elements=(Identifier(text='CommonModule'), ...))
    """

    def __init__(self, source: bytes) -> None:
        self._source = source

    def convert(self, node: Node) -> Expression:
        """Convert an expression node."""
        if node.is_missing:
            return self._opaque(node)

        node_type = node.type

        if node_type in TRANSPARENT_TYPES:
            inner = self._first_named(node)
            return self.convert(inner) if inner is not None else self._opaque(node)

        if node_type in IDENTIFIER_TYPES:
            return Identifier(text=self._text(node))

        if node_type == "string":
            raw = self._text(node)
            return StringLiteral(text=raw[1:-1], quote=raw[0])

        if node_type == "template_string":
            return TemplateLiteral(text=self._text(node)[1:-1])

        if node_type == "number":
            return NumericLiteral(text=self._text(node))

        if node_type == "true":
            return TrueLiteral()

        if node_type == "false":
            return FalseLiteral()

        if node_type == "member_expression":
            target = node.child_by_field_name("object")
            member = node.child_by_field_name("property")
            if target is None or member is None or member.is_missing:
                return self._opaque(node)
            return PropertyAccessExpression(
                expression=self.convert(target), name=self._text(member)
            )

        if node_type == "call_expression":
            function = node.child_by_field_name("function")
            arguments = node.child_by_field_name("arguments")
            # Tagged templates carry a template_string instead of arguments
            if function is None or arguments is None or arguments.type != "arguments":
                return self._opaque(node)
            return CallExpression(
                expression=self.convert(function),
                arguments=tuple(self.convert(arg) for arg in self._named(arguments)),
            )

        if node_type == "spread_element":
            operand = self._first_named(node)
            if operand is None:
                return self._opaque(node)
            return SpreadElement(expression=self.convert(operand))

        if node_type == "array":
            return ArrayLiteralExpression(
                elements=tuple(self.convert(element) for element in self._named(node))
            )

        if node_type == "object":
            return ObjectLiteralExpression(
                properties=tuple(self.convert_member(member) for member in self._named(node))
            )

        return self._opaque(node)

    def convert_member(self, node: Node) -> ObjectMember:
        """Convert one member of an object literal."""
        if node.type == "pair":
            key = node.child_by_field_name("key")
            value = node.child_by_field_name("value")
            if key is None or value is None:
                return self._opaque(node)
            return PropertyAssignment(name=self._property_name(key), initializer=self.convert(value))

        if node.type == "shorthand_property_identifier":
            return ShorthandPropertyAssignment(name=self._text(node))

        if node.type == "spread_element":
            return self.convert(node)

        # method_definition, getters, setters
        return self._opaque(node)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _property_name(self, key: Node) -> str:
        text = self._text(key)
        if key.type == "string":
            return text[1:-1]
        return text

    def _text(self, node: Node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _opaque(self, node: Node) -> OpaqueExpression:
        logger.debug("opaque_expression", node_type=node.type, line=node.start_point[0])
        return OpaqueExpression(source=self._text(node), node_type=node.type)

    @staticmethod
    def _named(node: Node) -> List[Node]:
        return [child for child in node.named_children if child.type != "comment"]

    def _first_named(self, node: Node) -> Optional[Node]:
        named = self._named(node)
        return named[0] if named else None


__all__ = [
    "IDENTIFIER_TYPES",
    "TRANSPARENT_TYPES",
    "NodeConverter",
]
