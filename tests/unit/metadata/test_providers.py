"""Tests for provider record parsing."""

import pytest

from symdeps_core.metadata.nodes import (
    ArrayLiteralExpression,
    Identifier,
    ObjectLiteralExpression,
    ShorthandPropertyAssignment,
    StringLiteral,
)
from symdeps_core.metadata.printer import CanonicalPrinter
from symdeps_core.metadata.providers import ProviderConfigParser


class RecordingPrinter:
    """Printer stub returning a fixed marker and recording its inputs."""

    def __init__(self):
        self.printed = []

    def print(self, node):
        self.printed.append(node)
        return "<printed>"


@pytest.fixture
def parser():
    return ProviderConfigParser()


class TestInterceptorPattern:
    """Tests for interceptor registrations."""

    def test_use_class(self, parser, interceptor_provider):
        """Test { provide: HTTP_INTERCEPTORS, useClass: AuthInterceptor }."""
        assert parser.parse_provider_config(interceptor_provider) == "AuthInterceptor"

    def test_use_existing(self, parser, prop):
        """Test useExisting is accepted as implementation."""
        node = ObjectLiteralExpression(
            properties=[
                prop("provide", Identifier(text="HTTP_INTERCEPTORS")),
                prop("useExisting", Identifier(text="LoggingInterceptor")),
            ]
        )
        assert parser.parse_provider_config(node) == "LoggingInterceptor"

    def test_order_independent(self, parser, prop):
        """Test useClass may appear before provide."""
        node = ObjectLiteralExpression(
            properties=[
                prop("useClass", Identifier(text="AuthInterceptor")),
                prop("provide", Identifier(text="HTTP_INTERCEPTORS")),
            ]
        )
        assert parser.parse_provider_config(node) == "AuthInterceptor"

    def test_last_implementation_wins(self, parser, prop):
        """Test the last useClass/useExisting is reported."""
        node = ObjectLiteralExpression(
            properties=[
                prop("provide", Identifier(text="HTTP_INTERCEPTORS")),
                prop("useClass", Identifier(text="First")),
                prop("useExisting", Identifier(text="Second")),
            ]
        )
        assert parser.parse_provider_config(node) == "Second"

    def test_custom_tokens(self, prop):
        """Test configured interceptor tokens."""
        parser = ProviderConfigParser(interceptor_tokens=["APP_INITIALIZER"])
        node = ObjectLiteralExpression(
            properties=[
                prop("provide", Identifier(text="APP_INITIALIZER")),
                prop("useClass", Identifier(text="Bootstrapper")),
            ]
        )
        assert parser.parse_provider_config(node) == "Bootstrapper"

    def test_default_token_not_matched_with_custom_tokens(self, interceptor_provider):
        """Test custom tokens replace the default."""
        parser = ProviderConfigParser(interceptor_tokens=["APP_INITIALIZER"])
        assert parser.parse_provider_config(interceptor_provider).startswith("{ provide: HTTP_INTERCEPTORS")

    def test_implementation_without_text_falls_back(self, parser, prop, access):
        """Test a qualified implementation name prints the record."""
        node = ObjectLiteralExpression(
            properties=[
                prop("provide", Identifier(text="HTTP_INTERCEPTORS")),
                prop("useClass", access("auth", "AuthInterceptor")),
            ]
        )
        assert (
            parser.parse_provider_config(node)
            == "{ provide: HTTP_INTERCEPTORS, useClass: auth.AuthInterceptor }"
        )


class TestPrintedFallback:
    """Tests for records printed as source."""

    def test_factory_provider(self, parser, factory_provider):
        """Test a factory record prints its canonical text."""
        assert parser.parse_provider_config(factory_provider) == CanonicalPrinter().print(factory_provider)
        assert (
            parser.parse_provider_config(factory_provider)
            == "{ provide: 'Date', useFactory: (d1, d2) => new Date(), deps: ['d1', 'd2'] }"
        )

    def test_string_token_matches_by_text(self, parser, prop):
        """Test a quoted token is compared by its text."""
        node = ObjectLiteralExpression(
            properties=[
                prop("provide", StringLiteral(text="HTTP_INTERCEPTORS")),
                prop("useClass", Identifier(text="AuthInterceptor")),
            ]
        )
        assert parser.parse_provider_config(node) == "AuthInterceptor"

    def test_shorthand_members_ignored(self, parser, prop):
        """Test only property assignments are scanned."""
        node = ObjectLiteralExpression(
            properties=[
                ShorthandPropertyAssignment(name="provide"),
                prop("useClass", Identifier(text="AuthInterceptor")),
            ]
        )
        assert parser.parse_provider_config(node) == "{ provide, useClass: AuthInterceptor }"

    def test_non_object_delegates_to_printer(self):
        """Test non-object nodes go straight to the printer."""
        printer = RecordingPrinter()
        parser = ProviderConfigParser(printer=printer)
        node = ArrayLiteralExpression(elements=[Identifier(text="A")])

        assert parser.parse_provider_config(node) == "<printed>"
        assert printer.printed == [node]

    def test_custom_printer_used_for_fallback(self, factory_provider):
        """Test the injected printer renders unrecognised records."""
        printer = RecordingPrinter()
        parser = ProviderConfigParser(printer=printer)

        assert parser.parse_provider_config(factory_provider) == "<printed>"
        assert parser.printer is printer

    def test_alias(self, parser, interceptor_provider):
        """Test parse_provider_configuration is the same operation."""
        assert parser.parse_provider_configuration(interceptor_provider) == "AuthInterceptor"
