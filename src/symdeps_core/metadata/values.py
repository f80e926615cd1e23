"""Metadata property value parsing.

Kinds handled for array elements:
    CallExpression            => "RouterModule.forRoot(args)"
    Identifier                => "RouterModule" "TodoStore"
    StringLiteral             => "./app.component.css"
    PropertyAccessExpression  => "Shared.Module"
    SpreadElement             => "MODULES" (resolved later by a file-wide pass)
    ObjectLiteralExpression   => provider record, see providers.py

Kinds handled for property initializers: arrays, string and template
literals, booleans, property accesses, and (for plain property
assignments) identifiers and numbers.
"""

from typing import Any, List, Optional

import structlog

from symdeps_core.metadata.interfaces import LocalBindingResolver
from symdeps_core.metadata.models import MetadataValue
from symdeps_core.metadata.naming import build_qualified_name
from symdeps_core.metadata.nodes import (
    ArrayLiteralExpression,
    CallExpression,
    FalseLiteral,
    Identifier,
    NumericLiteral,
    PropertyAccessExpression,
    PropertyAssignment,
    ShorthandPropertyAssignment,
    SpreadElement,
    StringLiteral,
    SyntaxNode,
    TemplateLiteral,
    TrueLiteral,
    VariableDeclaration,
    leaf_text,
)
from symdeps_core.metadata.providers import ProviderConfigParser

logger = structlog.get_logger(__name__)

# Placeholder for call arguments, which are never resolved individually
ARGS_MARKER = "args"


class MetadataValueParser:
    """Turns one metadata property into a list of resolved values.

    Args:
        provider_parser: Parser for object-literal elements.
        binding_resolver: Resolver for shorthand properties. Without one,
            shorthand properties produce no value.
    """

    def __init__(
        self,
        provider_parser: Optional[ProviderConfigParser] = None,
        binding_resolver: Optional[LocalBindingResolver] = None,
    ) -> None:
        self._provider_parser = provider_parser or ProviderConfigParser()
        self._binding_resolver = binding_resolver

    def parse_symbol_element(self, node: SyntaxNode) -> str:
        """Render one array element of a metadata property."""
        match node:
            case CallExpression(expression=PropertyAccessExpression() as callee, arguments=arguments):
                # e.g. AngularFireModule.initializeApp(firebaseConfig)
                function_args = ARGS_MARKER if arguments else ""
                return f"{build_qualified_name(callee)}({function_args})"
            case PropertyAccessExpression():
                return build_qualified_name(node)
            case SpreadElement(expression=operand) if leaf_text(operand):
                return leaf_text(operand)

        text = leaf_text(node)
        if text:
            return text
        return self._provider_parser.parse_provider_config(node)

    parse_symbol_elements = parse_symbol_element

    def parse_metadata_value(
        self, node: SyntaxNode, source_context: Any = None
    ) -> Optional[List[MetadataValue]]:
        """Resolve a metadata property to its values.

        Shorthand properties are first resolved to the binding they stand
        for. Returns None for value shapes that are not recognised and for
        shorthand names with no file-level binding.
        """
        if isinstance(node, ShorthandPropertyAssignment):
            node = self._resolve_shorthand(node, source_context)
            if node is None:
                return None

        match node:
            case PropertyAssignment(initializer=initializer):
                is_assignment = True
            case VariableDeclaration(initializer=initializer) if initializer is not None:
                is_assignment = False
            case _:
                logger.debug("metadata_binding_without_value", node_kind=node.kind)
                return None

        match initializer:
            case ArrayLiteralExpression(elements=elements):
                return [self.parse_symbol_element(element) for element in elements]
            case StringLiteral(text=text) | TemplateLiteral(text=text):
                return [text]
            case Identifier(text=text) | NumericLiteral(text=text) if is_assignment:
                return [text]
            case TrueLiteral():
                return [True]
            case FalseLiteral():
                return [False]
            case PropertyAccessExpression():
                return [self.parse_symbol_element(initializer)]
            case _:
                logger.debug("metadata_value_unsupported", value_kind=initializer.kind)
                return None

    parse_symbols = parse_metadata_value

    def _resolve_shorthand(
        self, node: ShorthandPropertyAssignment, source_context: Any
    ) -> Optional[SyntaxNode]:
        if self._binding_resolver is None:
            logger.debug("shorthand_without_resolver", name=node.name)
            return None

        binding = self._binding_resolver.resolve(node.name, source_context)
        if binding is None:
            logger.debug("shorthand_binding_unresolved", name=node.name)
        return binding


__all__ = [
    "ARGS_MARKER",
    "MetadataValueParser",
]
