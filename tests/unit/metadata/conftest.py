"""Pytest fixtures for metadata extraction tests."""

import pytest

from symdeps_core.metadata.nodes import (
    ArrayLiteralExpression,
    CallExpression,
    Identifier,
    NumericLiteral,
    ObjectLiteralExpression,
    OpaqueExpression,
    PropertyAccessExpression,
    PropertyAssignment,
    StringLiteral,
    TrueLiteral,
)


def _access(*segments: str):
    node = Identifier(text=segments[0])
    for name in segments[1:]:
        node = PropertyAccessExpression(expression=node, name=name)
    return node


def _prop(name: str, initializer):
    return PropertyAssignment(name=name, initializer=initializer)


@pytest.fixture
def access():
    """Build a property-access chain: access("A", "B", "c") is A.B.c."""
    return _access


@pytest.fixture
def prop():
    """Build a property assignment."""
    return _prop


@pytest.fixture
def interceptor_provider():
    """{ provide: HTTP_INTERCEPTORS, useClass: AuthInterceptor, multi: true }"""
    return ObjectLiteralExpression(
        properties=[
            _prop("provide", Identifier(text="HTTP_INTERCEPTORS")),
            _prop("useClass", Identifier(text="AuthInterceptor")),
            _prop("multi", TrueLiteral()),
        ]
    )


@pytest.fixture
def factory_provider():
    """{ provide: 'Date', useFactory: (d1, d2) => new Date(), deps: ['d1', 'd2'] }"""
    return ObjectLiteralExpression(
        properties=[
            _prop("provide", StringLiteral(text="Date")),
            _prop(
                "useFactory",
                OpaqueExpression(source="(d1, d2) => new Date()", node_type="arrow_function"),
            ),
            _prop(
                "deps",
                ArrayLiteralExpression(elements=[StringLiteral(text="d1"), StringLiteral(text="d2")]),
            ),
        ]
    )


@pytest.fixture
def value_provider():
    """{ provide: 'T', useValue: 1 }"""
    return ObjectLiteralExpression(
        properties=[
            _prop("provide", StringLiteral(text="T")),
            _prop("useValue", NumericLiteral(text="1")),
        ]
    )


@pytest.fixture
def router_for_root():
    """RouterModule.forRoot(routes)"""
    return CallExpression(
        expression=_access("RouterModule", "forRoot"),
        arguments=[Identifier(text="routes")],
    )
