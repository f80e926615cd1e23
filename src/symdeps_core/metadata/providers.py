"""Dependency-injection provider record parsing.

Handles object-literal entries of a ``providers`` array such as::

    { provide: APP_BASE_HREF, useValue: '/' }
    { provide: 'Date', useFactory: (d1, d2) => new Date(), deps: ['d1', 'd2'] }
    { provide: HTTP_INTERCEPTORS, useClass: AuthInterceptor, multi: true }

Only the interceptor-registration shape is special-cased; every other
record is returned as printed source.
"""

from typing import Iterable, Optional

import structlog

from symdeps_core.metadata.interfaces import ExpressionPrinter
from symdeps_core.metadata.nodes import (
    ObjectLiteralExpression,
    PropertyAssignment,
    SyntaxNode,
    leaf_text,
)
from symdeps_core.metadata.printer import CanonicalPrinter

logger = structlog.get_logger(__name__)

DEFAULT_INTERCEPTOR_TOKENS = ("HTTP_INTERCEPTORS",)

# Provider keys naming the class that implements the token
IMPLEMENTATION_KEYS = ("useClass", "useExisting")


class ProviderConfigParser:
    """Reduces provider records to an implementation name or printed source.

    Args:
        printer: Fallback printer; defaults to CanonicalPrinter.
        interceptor_tokens: ``provide`` tokens marking an interceptor
            registration.
    """

    def __init__(
        self,
        printer: Optional[ExpressionPrinter] = None,
        interceptor_tokens: Iterable[str] = DEFAULT_INTERCEPTOR_TOKENS,
    ) -> None:
        self._printer = printer or CanonicalPrinter()
        self._interceptor_tokens = frozenset(interceptor_tokens)

    @property
    def printer(self) -> ExpressionPrinter:
        return self._printer

    def parse_provider_config(self, node: SyntaxNode) -> str:
        """Return the interceptor implementation name, or the printed node.

        Scans the property assignments of an object literal (other member
        kinds are ignored). When ``provide`` names an interceptor token, the
        text of the last ``useClass``/``useExisting`` initializer is
        returned. Anything else prints as canonical source.
        """
        match node:
            case ObjectLiteralExpression(properties=properties):
                pass
            case _:
                return self._printer.print(node)

        has_interceptor = False
        implementation_name: Optional[str] = None

        for member in properties:
            match member:
                case PropertyAssignment(name="provide", initializer=initializer):
                    if leaf_text(initializer) in self._interceptor_tokens:
                        has_interceptor = True
                case PropertyAssignment(name=name, initializer=initializer) if name in IMPLEMENTATION_KEYS:
                    implementation_name = leaf_text(initializer)

        if has_interceptor and implementation_name:
            logger.debug("interceptor_provider_found", implementation=implementation_name)
            return implementation_name

        return self._printer.print(node)

    parse_provider_configuration = parse_provider_config


__all__ = [
    "DEFAULT_INTERCEPTOR_TOKENS",
    "IMPLEMENTATION_KEYS",
    "ProviderConfigParser",
]
