"""Decorator metadata extraction.

Resolves the values of decorator metadata properties (``providers``,
``imports``, ``declarations``, ...) into dependency names, without
evaluating any expression.

Key components:
- nodes: Closed syntax-node model supplied by a front end
- naming: Qualified-name rendering (ExpressionNameBuilder)
- classifier: Keyword classification and namespace splitting
- providers: Provider record parsing
- values: Metadata property value parsing
- dependencies: Property lookup facade
- symbol_helper: Single-object facade over all of the above
"""

from symdeps_core.metadata.classifier import classify, get_type, parse_deep_identifier
from symdeps_core.metadata.dependencies import DependencyExtractor
from symdeps_core.metadata.interfaces import ExpressionPrinter, LocalBindingResolver
from symdeps_core.metadata.models import (
    ClassDependencies,
    Classification,
    DecoratedClass,
    DecoratorLocation,
    MetadataValue,
    ParsedIdentifier,
)
from symdeps_core.metadata.naming import UNKNOWN, build_identifier_name, build_qualified_name
from symdeps_core.metadata.printer import CanonicalPrinter
from symdeps_core.metadata.providers import ProviderConfigParser
from symdeps_core.metadata.symbol_helper import SymbolHelper
from symdeps_core.metadata.values import ARGS_MARKER, MetadataValueParser

__all__ = [
    # Functions
    "classify",
    "get_type",
    "parse_deep_identifier",
    "build_qualified_name",
    "build_identifier_name",
    # Constants
    "UNKNOWN",
    "ARGS_MARKER",
    # Components
    "CanonicalPrinter",
    "ProviderConfigParser",
    "MetadataValueParser",
    "DependencyExtractor",
    "SymbolHelper",
    # Interfaces
    "ExpressionPrinter",
    "LocalBindingResolver",
    # Models
    "Classification",
    "ParsedIdentifier",
    "MetadataValue",
    "DecoratorLocation",
    "DecoratedClass",
    "ClassDependencies",
]
