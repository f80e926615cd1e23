"""SymbolHelper: one object exposing the whole metadata extraction surface.

Wires the printer, binding resolver and interceptor tokens into the
provider, value and dependency parsers, and re-exports the pure naming
and classification functions as methods.
"""

from typing import Any, Iterable, List, Optional, Sequence

import structlog

from symdeps_core.metadata.classifier import classify, parse_deep_identifier
from symdeps_core.metadata.dependencies import DependencyExtractor
from symdeps_core.metadata.interfaces import ExpressionPrinter, LocalBindingResolver
from symdeps_core.metadata.models import Classification, MetadataValue, ParsedIdentifier
from symdeps_core.metadata.naming import build_qualified_name
from symdeps_core.metadata.nodes import SyntaxNode
from symdeps_core.metadata.providers import DEFAULT_INTERCEPTOR_TOKENS, ProviderConfigParser
from symdeps_core.metadata.values import MetadataValueParser

logger = structlog.get_logger(__name__)


class SymbolHelper:
    """
    Facade over the metadata extraction components.

    Example:
        >>> helper = SymbolHelper()
        >>> helper.get_symbol_deps(properties, "providers")
        ['ServiceA', "{ provide: 'T', useValue: 1 }"]
    """

    def __init__(
        self,
        printer: Optional[ExpressionPrinter] = None,
        binding_resolver: Optional[LocalBindingResolver] = None,
        interceptor_tokens: Iterable[str] = DEFAULT_INTERCEPTOR_TOKENS,
    ) -> None:
        self._provider_parser = ProviderConfigParser(
            printer=printer, interceptor_tokens=interceptor_tokens
        )
        self._value_parser = MetadataValueParser(
            provider_parser=self._provider_parser, binding_resolver=binding_resolver
        )
        self._extractor = DependencyExtractor(self._value_parser)
        self._log = logger.bind(helper="SymbolHelper")

    def parse_deep_identifier(self, name: str) -> ParsedIdentifier:
        return parse_deep_identifier(name)

    def get_type(self, name: str) -> Optional[Classification]:
        return classify(name)

    def build_identifier_name(self, node: SyntaxNode, name: Optional[str] = None) -> str:
        return build_qualified_name(node, name)

    def parse_provider_configuration(self, node: SyntaxNode) -> str:
        return self._provider_parser.parse_provider_config(node)

    def parse_symbol_elements(self, node: SyntaxNode) -> str:
        return self._value_parser.parse_symbol_element(node)

    def parse_symbols(
        self, node: SyntaxNode, source_context: Any = None
    ) -> Optional[List[MetadataValue]]:
        return self._value_parser.parse_metadata_value(node, source_context)

    def get_symbol_deps(
        self,
        props: Sequence[SyntaxNode],
        type: str,
        source_context: Any = None,
    ) -> List[MetadataValue]:
        """Resolved values of the ``type`` property; ``[]`` when absent."""
        deps = self._extractor.get_dependencies(props, type, source_context)
        self._log.debug("symbol_deps_resolved", property=type, count=len(deps))
        return deps

    def get_symbol_deps_raw(self, props: Sequence[SyntaxNode], type: str) -> List[SyntaxNode]:
        """Unparsed properties named ``type``."""
        return self._extractor.get_raw_dependency_nodes(props, type)


__all__ = ["SymbolHelper"]
