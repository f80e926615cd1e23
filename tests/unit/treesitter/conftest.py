"""Pytest fixtures for tree-sitter front end tests."""

import pytest

from symdeps_core.treesitter.converter import NodeConverter
from symdeps_core.treesitter.decorators import DecoratorMetadataExtractor
from symdeps_core.treesitter.parser import SourceParser


@pytest.fixture
def source_parser():
    """Create a SourceParser with default limits."""
    return SourceParser()


@pytest.fixture
def parse(source_parser):
    """Parse a source snippet into a SourceFile."""

    def _parse(code, file_path="app.module.ts"):
        return source_parser.parse(code, file_path)

    return _parse


@pytest.fixture
def convert_expression(parse):
    """Convert the initializer of ``const x = <code>;``."""

    def _convert(code):
        source_file = parse(f"const x = {code};")
        declaration = source_file.root.named_children[0]
        declarator = next(c for c in declaration.named_children if c.type == "variable_declarator")
        return NodeConverter(source_file.source).convert(declarator.child_by_field_name("value"))

    return _convert


@pytest.fixture
def extractor():
    """Create a DecoratorMetadataExtractor with default settings."""
    return DecoratorMetadataExtractor()


@pytest.fixture
def app_module_source():
    """A root NgModule exercising every element kind."""
    return """\
import { NgModule } from '@angular/core';
import * as Shared from './shared';

const COMPONENTS = [HeaderComponent, FooterComponent];
const routes = [];

@NgModule({
  declarations: [AppComponent, ...COMPONENTS],
  imports: [BrowserModule, RouterModule.forRoot(routes), Shared.SharedModule],
  providers: [
    AuthService,
    { provide: HTTP_INTERCEPTORS, useClass: AuthInterceptor, multi: true },
    { provide: 'Date', useValue: 1 },
  ],
  bootstrap: [AppComponent],
})
export class AppModule {}
"""
