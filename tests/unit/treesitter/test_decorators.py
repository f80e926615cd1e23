"""Unit tests for decorated class scanning and metadata extraction."""

import pytest

from symdeps_core.exceptions import ProcessingError, ValidationError
from symdeps_core.metadata.models import Classification, ParsedIdentifier
from symdeps_core.metadata.nodes import PropertyAssignment, StringLiteral
from symdeps_core.treesitter.decorators import DecoratedClassScanner, DecoratorMetadataExtractor
from symdeps_core.treesitter.exceptions import LanguageNotSupportedError, ParseError
from symdeps_core.treesitter.parser import SourceParser


class TestDecoratedClassScanner:
    """Tests for finding decorated classes."""

    def test_empty_names_rejected(self):
        """Test the scanner needs at least one decorator name."""
        with pytest.raises(ValidationError) as exc_info:
            DecoratedClassScanner(decorator_names=[])

        assert exc_info.value.error_code == "VAL_001"

    def test_exported_class(self, parse, app_module_source):
        """Test decorators written before export are found."""
        [decorated] = DecoratedClassScanner().scan(parse(app_module_source))

        assert decorated.class_name == "AppModule"
        assert decorated.decorator_name == "NgModule"
        assert decorated.file_path == "app.module.ts"
        assert [p.name for p in decorated.properties] == [
            "declarations",
            "imports",
            "providers",
            "bootstrap",
        ]

    def test_plain_class(self, parse):
        """Test a non-exported class."""
        [decorated] = DecoratedClassScanner().scan(parse("@Injectable()\nclass AuthService {}"))

        assert decorated.class_name == "AuthService"
        assert decorated.properties == []
        assert decorated.location.start_line == 0

    def test_member_decorator(self, parse):
        """Test @core.NgModule is matched by its last segment."""
        source_file = parse("@core.NgModule({ imports: [A] })\nexport class M {}")

        [decorated] = DecoratedClassScanner().scan(source_file)
        assert decorated.decorator_name == "NgModule"

    def test_unknown_decorator_ignored(self, parse):
        """Test decorators outside the configured names."""
        source_file = parse("@Custom({ imports: [A] })\nexport class M {}")
        assert DecoratedClassScanner().scan(source_file) == []

    def test_bare_decorator_ignored(self, parse):
        """Test decorators that are not calls."""
        assert DecoratedClassScanner().scan(parse("@NgModule\nexport class M {}")) == []

    def test_non_literal_argument_skipped(self, parse):
        """Test a metadata argument that is not an object literal."""
        source_file = parse("const config = {};\n@NgModule(config)\nexport class M {}")
        assert DecoratedClassScanner().scan(source_file) == []

    def test_undecorated_class(self, parse):
        """Test plain classes produce nothing."""
        assert DecoratedClassScanner().scan(parse("export class Plain {}")) == []

    def test_custom_names(self, parse):
        """Test a custom decorator list."""
        scanner = DecoratedClassScanner(decorator_names=["Entity"])
        source_file = parse("@Entity({ name: 'users' })\nexport class User {}")

        [decorated] = scanner.scan(source_file)
        assert decorated.decorator_name == "Entity"
        assert decorated.properties == [
            PropertyAssignment(name="name", initializer=StringLiteral(text="users"))
        ]

    def test_source_order(self, parse):
        """Test several classes are reported in source order."""
        source_file = parse(
            "@Pipe({ name: 'a' }) export class APipe {}\n"
            "@Directive({ selector: '[b]' }) export abstract class BDirective {}\n"
            "@Component({ selector: 'c' }) export class CComponent {}\n"
        )

        names = [d.class_name for d in DecoratedClassScanner().scan(source_file)]
        assert names == ["APipe", "BDirective", "CComponent"]


class TestDecoratorMetadataExtractor:
    """Tests for end-to-end extraction."""

    def test_app_module(self, extractor, app_module_source):
        """Test every element kind of a root module."""
        [result] = extractor.extract_source(app_module_source, "app.module.ts")

        assert result.class_name == "AppModule"
        assert result.dependencies == {
            "declarations": ["AppComponent", "COMPONENTS"],
            "imports": ["BrowserModule", "RouterModule.forRoot(args)", "Shared.SharedModule"],
            "providers": ["AuthService", "AuthInterceptor", "{ provide: 'Date', useValue: 1 }"],
            "bootstrap": ["AppComponent"],
        }
        assert result.total_dependencies == 9

    def test_identifiers(self, extractor, app_module_source):
        """Test string values are split and classified."""
        [result] = extractor.extract_source(app_module_source, "app.module.ts")

        assert result.identifiers["imports"][2] == ParsedIdentifier(
            namespace="Shared",
            name="Shared.SharedModule",
            classification=Classification.MODULE,
        )
        assert result.identifiers["declarations"][0].classification is Classification.COMPONENT

    def test_shorthand_from_local_variable(self, extractor):
        """Test { declarations } resolves through a file-level const."""
        source = (
            "const declarations = [AComponent, BComponent];\n"
            "@NgModule({ declarations })\n"
            "export class FeatureModule {}\n"
        )

        [result] = extractor.extract_source(source, "feature.module.ts")
        assert result.dependencies == {"declarations": ["AComponent", "BComponent"]}

    def test_shorthand_from_import(self, extractor):
        """Test imported shorthand bindings are present but empty."""
        source = (
            "import { providers } from './providers';\n"
            "@NgModule({ providers })\n"
            "export class FeatureModule {}\n"
        )

        [result] = extractor.extract_source(source, "feature.module.ts")
        assert result.dependencies == {"providers": []}

    def test_component_scalars(self):
        """Test string and boolean properties."""
        extractor = DecoratorMetadataExtractor(
            metadata_properties=["selector", "standalone", "imports"]
        )
        source = (
            "@Component({\n"
            "  selector: 'app-root',\n"
            "  standalone: true,\n"
            "  imports: [CommonModule],\n"
            "})\n"
            "export class AppComponent {}\n"
        )

        [result] = extractor.extract_source(source, "app.component.ts")
        assert result.dependencies == {
            "selector": ["app-root"],
            "standalone": [True],
            "imports": ["CommonModule"],
        }
        assert result.identifiers["standalone"] == []

    def test_javascript(self):
        """Test decorators in JavaScript sources."""
        extractor = DecoratorMetadataExtractor(metadata_properties=["selector"])
        source = "@Component({ selector: 'app-root' })\nexport class AppComponent {}\n"

        [result] = extractor.extract_source(source, "app.component.js")
        assert result.dependencies == {"selector": ["app-root"]}

    def test_empty_decorator(self, extractor):
        """Test @Injectable() yields no dependencies."""
        [result] = extractor.extract_source("@Injectable()\nexport class S {}", "s.service.ts")

        assert result.decorator_name == "Injectable"
        assert result.dependencies == {}
        assert result.total_dependencies == 0

    def test_extract_file(self, extractor, tmp_path, app_module_source):
        """Test extraction from disk."""
        path = tmp_path / "app.module.ts"
        path.write_text(app_module_source, encoding="utf-8")

        [result] = extractor.extract_file(path)
        assert result.file_path == str(path)
        assert result.dependencies["bootstrap"] == ["AppComponent"]

    def test_extract_file_errors(self, extractor, tmp_path):
        """Test reading errors propagate."""
        with pytest.raises(ProcessingError):
            extractor.extract_file(tmp_path / "missing.ts")

        script = tmp_path / "tool.py"
        script.write_text("x = 1", encoding="utf-8")
        with pytest.raises(LanguageNotSupportedError):
            extractor.extract_file(script)

    def test_strict_parser(self, tmp_path):
        """Test an injected parser controls syntax error handling."""

        class StrictParser(SourceParser):
            def parse(self, source, file_path, language=None, strict=False):
                return super().parse(source, file_path, language=language, strict=True)

        extractor = DecoratorMetadataExtractor(parser=StrictParser())

        with pytest.raises(ParseError):
            extractor.extract_source("const x = ;", "broken.ts")
