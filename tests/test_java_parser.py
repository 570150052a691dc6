"""Tests for the tree-sitter based Java parser."""

import textwrap
from pathlib import Path

import pytest

from source_notes.errors import SourceReadError, UnsupportedFileKindError
from source_notes.generators.code_blocks import CodeBlockRenderer
from source_notes.parsers.java_parser import JavaParser
from source_notes.parsers.structure import DeclarationKind


@pytest.fixture
def parser() -> JavaParser:
    """Create a JavaParser instance for testing."""
    return JavaParser()


def _field_text(field) -> str:
    return "".join(f.text for f in field.fragments if not f.is_doc_comment)


class TestParseSource:
    """Tests for parsing Java source strings."""

    def test_empty_source(self, parser: JavaParser) -> None:
        result = parser.parse_source("", "Empty.java")
        assert result.name == "Empty.java"
        assert result.types == []

    def test_line_count(self, parser: JavaParser, counter_source: str) -> None:
        result = parser.parse_source(counter_source, "Counter.java")
        assert result.line_count == 7

    def test_counter(self, parser: JavaParser, counter_source: str) -> None:
        result = parser.parse_source(counter_source, "Counter.java")
        assert len(result.types) == 1
        counter = result.types[0]
        assert counter.name == "Counter"
        assert counter.kind == DeclarationKind.CLASS
        assert counter.doc_comment is None
        assert [f.name for f in counter.fields] == ["x"]
        assert _field_text(counter.fields[0]) == "private int x;"
        method = counter.methods[0]
        assert method.name == "get"
        assert method.modifiers == "public"
        assert method.return_type == "int"
        assert method.parameter_list == "()"
        assert method.body == "{ return x; }"
        assert method.nesting_depth == 0

    def test_package_and_imports_ignored(self, parser: JavaParser) -> None:
        source = "package a.b;\nimport java.util.List;\nclass A {}\n"
        result = parser.parse_source(source, "A.java")
        assert [t.name for t in result.types] == ["A"]


class TestKinds:
    """Tests for declaration kind detection."""

    def test_interface(self, parser: JavaParser) -> None:
        source = "public interface Greeter {\n    String greet(String name);\n}\n"
        greeter = parser.parse_source(source, "Greeter.java").types[0]
        assert greeter.kind == DeclarationKind.INTERFACE
        method = greeter.methods[0]
        assert method.name == "greet"
        assert method.modifiers == ""
        assert method.return_type == "String"
        assert method.parameter_list == "(String name)"
        assert method.body is None

    def test_interface_constant(self, parser: JavaParser) -> None:
        source = "interface Limits {\n    int MAX = 3;\n}\n"
        limits = parser.parse_source(source, "Limits.java").types[0]
        assert [f.name for f in limits.fields] == ["MAX"]
        assert _field_text(limits.fields[0]) == "int MAX = 3;"

    def test_enum(self, parser: JavaParser) -> None:
        source = "public enum Color {\n    RED, GREEN;\n    void paint() {}\n}\n"
        color = parser.parse_source(source, "Color.java").types[0]
        assert color.kind == DeclarationKind.ENUM
        assert color.name == "Color"
        assert color.fields == []
        assert color.methods == []

    def test_annotation(self, parser: JavaParser) -> None:
        source = "public @interface Marker {\n    String value();\n}\n"
        marker = parser.parse_source(source, "Marker.java").types[0]
        assert marker.kind == DeclarationKind.ANNOTATION
        assert marker.name == "Marker"


class TestDocComments:
    """Tests for Javadoc attachment."""

    def test_class_and_member_docs(self, parser: JavaParser) -> None:
        source = textwrap.dedent("""\
            /**
             * A counter.
             */
            public class Counter {
                /** The value. */
                private int x;

                /**
                 * Returns the value.
                 */
                public int get() { return x; }
            }
        """)
        counter = parser.parse_source(source, "Counter.java").types[0]
        assert counter.doc_comment == "/**\n * A counter.\n */"
        assert counter.fields[0].doc_comment == "/** The value. */"
        assert counter.methods[0].doc_comment == (
            "/**\n     * Returns the value.\n     */"
        )

    def test_plain_block_comment_not_attached(self, parser: JavaParser) -> None:
        source = "class A {\n    /* not javadoc */\n    int a;\n}\n"
        field = parser.parse_source(source, "A.java").types[0].fields[0]
        assert field.doc_comment is None

    def test_line_comment_not_attached(self, parser: JavaParser) -> None:
        source = "class A {\n    // note\n    void f() {}\n}\n"
        method = parser.parse_source(source, "A.java").types[0].methods[0]
        assert method.doc_comment is None

    def test_field_fragments_with_doc(self, parser: JavaParser) -> None:
        source = "class A {\n    /** Doc. */\n    private int a;\n}\n"
        field = parser.parse_source(source, "A.java").types[0].fields[0]
        assert field.fragments[0].is_doc_comment
        assert field.fragments[0].text == "/** Doc. */"
        assert field.fragments[1].text == "\n    "
        assert _field_text(field) == "\n    private int a;"
        rendered = CodeBlockRenderer().render_field(field)
        assert rendered == "```java\n    private int a;\n```\n"

    def test_doc_touching_field(self, parser: JavaParser) -> None:
        source = "class A {\n/** The x. */int x;\n}\n"
        field = parser.parse_source(source, "A.java").types[0].fields[0]
        assert field.doc_comment == "/** The x. */"
        assert all(fragment.text for fragment in field.fragments)
        rendered = CodeBlockRenderer().render_field(field)
        assert rendered == "```java\nint x;\n```\n"


class TestMembers:
    """Tests for field and method extraction."""

    def test_multiple_declarators(self, parser: JavaParser) -> None:
        source = "class A {\n    int a, b = 2;\n}\n"
        field = parser.parse_source(source, "A.java").types[0].fields[0]
        assert field.name == "a, b"
        assert _field_text(field) == "int a, b = 2;"

    def test_constructor(self, parser: JavaParser) -> None:
        source = "class A {\n    public A(int v) { }\n}\n"
        ctor = parser.parse_source(source, "A.java").types[0].methods[0]
        assert ctor.name == "A"
        assert ctor.return_type is None
        assert ctor.parameter_list == "(int v)"
        assert ctor.body == "{ }"

    def test_generic_method_with_throws(self, parser: JavaParser) -> None:
        source = textwrap.dedent("""\
            abstract class Reader {
                public abstract <T> T read(Class<T> type) throws java.io.IOException;
            }
        """)
        method = parser.parse_source(source, "Reader.java").types[0].methods[0]
        assert method.modifiers == "public abstract"
        assert method.type_parameters == "<T>"
        assert method.return_type == "T"
        assert method.throws == "throws java.io.IOException"
        assert method.body is None

    def test_annotated_method_keeps_annotation(self, parser: JavaParser) -> None:
        source = "class A {\n    @Override\n    public String toString() { return \"\"; }\n}\n"
        method = parser.parse_source(source, "A.java").types[0].methods[0]
        assert method.modifiers.startswith("@Override")
        assert method.modifiers.endswith("public")

    def test_fields_and_methods_keep_order(self, parser: JavaParser) -> None:
        source = textwrap.dedent("""\
            class A {
                void b() {}
                int z;
                void a() {}
                int y;
            }
        """)
        decl = parser.parse_source(source, "A.java").types[0]
        assert [f.name for f in decl.fields] == ["z", "y"]
        assert [m.name for m in decl.methods] == ["b", "a"]


class TestNestedTypes:
    """Tests for member type extraction."""

    def test_nesting_depth(self, parser: JavaParser) -> None:
        source = textwrap.dedent("""\
            class Outer {
                void top() {}
                static class Inner {
                    void mid() {}
                    interface Deep {
                        void low();
                    }
                }
            }
        """)
        outer = parser.parse_source(source, "Outer.java").types[0]
        inner = outer.nested_types[0]
        deep = inner.nested_types[0]
        assert inner.name == "Inner"
        assert deep.kind == DeclarationKind.INTERFACE
        assert outer.methods[0].nesting_depth == 0
        assert inner.methods[0].nesting_depth == 1
        assert deep.methods[0].nesting_depth == 2

    def test_nested_enum_recorded(self, parser: JavaParser) -> None:
        source = "class A {\n    enum Mode { ON, OFF }\n}\n"
        nested = parser.parse_source(source, "A.java").types[0].nested_types
        assert [(t.name, t.kind) for t in nested] == [("Mode", DeclarationKind.ENUM)]


class TestParseFile:
    """Tests for parsing files from disk."""

    def test_parse_file(self, parser: JavaParser, counter_file: Path) -> None:
        result = parser.parse_file(str(counter_file))
        assert result.name == "Counter.java"
        assert result.path == str(counter_file)
        assert result.types[0].name == "Counter"

    def test_non_java_rejected(self, parser: JavaParser, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("class A {}")
        with pytest.raises(UnsupportedFileKindError):
            parser.parse_file(str(path))

    def test_missing_file(self, parser: JavaParser, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            parser.parse_file(str(tmp_path / "Missing.java"))

    def test_undecodable_file(self, parser: JavaParser, tmp_path: Path) -> None:
        path = tmp_path / "Latin.java"
        path.write_bytes("class Caf\u00e9 {}\n".encode("latin-1"))
        with pytest.raises(SourceReadError, match="Could not read Latin.java"):
            parser.parse_file(str(path))

    def test_directory_with_java_suffix(self, parser: JavaParser, tmp_path: Path) -> None:
        path = tmp_path / "Folder.java"
        path.mkdir()
        with pytest.raises(SourceReadError):
            parser.parse_file(str(path))

    def test_crlf_source(self, parser: JavaParser, tmp_path: Path) -> None:
        path = tmp_path / "Win.java"
        path.write_bytes(b"class Win {\r\n    /** Doc. */\r\n    int a;\r\n}\r\n")
        field = parser.parse_file(str(path)).types[0].fields[0]
        assert _field_text(field) == "\n    int a;"

    def test_is_supported(self, parser: JavaParser) -> None:
        assert parser.is_supported("A.java")
        assert parser.is_supported("A.JAVA")
        assert not parser.is_supported("A.kt")
