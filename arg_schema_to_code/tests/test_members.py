import re

import pytest

from arg_schema_to_code.pipeline.analyzer import ShapeKind
from arg_schema_to_code.pipeline.ast_backends.csharp_members import (
    render_accessor,
    render_doc_summary,
    render_assignment,
    render_group_close,
    render_group_open,
    render_storage,
)
from arg_schema_to_code.utils import capitalize, decapitalize, escape_doc_text, snake_to_pascal_case, unescape_doc_text


class TestStorage:
    def test_with_default(self):
        assert render_storage("int", "count", "5") == ["private int count = 5;", ""]

    def test_without_default(self):
        assert render_storage("string[]", "names", None) == ["private string[] names;", ""]


class TestAccessor:
    def test_layout(self):
        assert render_accessor("int", "count", False, "Number of items") == [
            "/// <summary> Gets or sets Number of items </summary>",
            "public int Count",
            "{",
            "    get { return count; }",
            "    set { count = value; }",
            "}",
            "",
        ]

    def test_boolean_phrasing(self):
        lines = render_accessor("bool", "normalize", True, "Normalize the features")
        assert lines[0] == "/// <summary> Gets or sets a value indicating whether Normalize the features </summary>"

    def test_help_falls_back_to_name(self):
        lines = render_accessor("int", "maxRows_sub", False, None)
        assert lines[0] == "/// <summary> Gets or sets maxRows_sub </summary>"
        assert lines[1] == "public int MaxRows_sub"

    def test_help_is_escaped(self):
        lines = render_accessor("int", "k", False, "a < b && c > d")
        assert lines[0] == "/// <summary> Gets or sets a &lt; b &amp;&amp; c &gt; d </summary>"

    def test_multi_line_help_keeps_comment_prefix(self):
        lines = render_accessor("int", "a", False, "line1\r\nline2\n\nline3")
        assert lines[:5] == [
            "/// <summary> Gets or sets line1",
            "/// line2",
            "///",
            "/// line3 </summary>",
            "public int A",
        ]

    def test_accessor_name_inverts_to_storage_name(self):
        for name in ["count", "l2Weight", "x_sub_inner", "a"]:
            lines = render_accessor("int", name, False, None)
            public_name = re.match(r"public int (\S+)$", lines[1]).group(1)
            assert public_name != name
            assert decapitalize(public_name) == name
            assert f"get {{ return {name}; }}" in lines[3]


class TestAssignment:
    def test_scalar(self):
        assert render_assignment(ShapeKind.SCALAR, "count", "count") == "args.count = count;"

    def test_column_collection_parses_each_element(self):
        statement = render_assignment(ShapeKind.COLUMN_COLLECTION, "cols", "cols", column_type="Column")
        assert statement == "args.cols = cols.Select(Column.Parse).ToArray();"

    def test_string_collection_is_assigned_directly(self):
        assert render_assignment(ShapeKind.STRING_COLLECTION, "names", "names") == "args.names = names;"

    def test_generic_collection_wraps_single_value(self):
        assert render_assignment(ShapeKind.GENERIC_COLLECTION, "bins", "bins") == "args.bins = new[] { bins };"

    def test_generic_collection_without_lift_is_copied(self):
        statement = render_assignment(ShapeKind.GENERIC_COLLECTION, "bins", "bins", lift=False)
        assert statement == "args.bins = bins;"

    def test_suffix_targets_nested_arguments(self):
        statement = render_assignment(ShapeKind.SCALAR, "x", "x_sub", suffix="_sub")
        assert statement == "args_sub.x = x_sub;"

    def test_group_statements(self):
        assert render_group_open("SubArguments", "_sub") == "var args_sub = new SubArguments();"
        assert render_group_close("sub", "", "_sub") == "args.sub = args_sub;"


class TestNaming:
    @pytest.mark.parametrize(
        "name, expected",
        [("count", "Count"), ("l2Weight", "L2Weight"), ("Already", "Already"), ("", ""), ("x_sub", "X_sub")],
    )
    def test_capitalize_only_touches_first_character(self, name, expected):
        assert capitalize(name) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("plain", "plain"),
            ("a & b", "a &amp; b"),
            ("<tag>", "&lt;tag&gt;"),
            ("&lt;", "&amp;lt;"),
        ],
    )
    def test_escape_doc_text(self, text, expected):
        assert escape_doc_text(text) == expected

    @pytest.mark.parametrize("text", ["a & b", "<x> & </x>", "&amp;", "&lt;already&gt;", "no markup"])
    def test_escape_then_unescape_restores_text(self, text):
        assert unescape_doc_text(escape_doc_text(text)) == text

    def test_snake_to_pascal_case(self):
        assert snake_to_pascal_case("text_normalizer") == "TextNormalizer"
        assert snake_to_pascal_case("linearSvm") == "LinearSvm"
        assert snake_to_pascal_case("") == ""


class TestDocSummary:
    def test_single_line(self):
        assert render_doc_summary("Counts & sums") == ["/// <summary> Counts &amp; sums </summary>"]

    def test_every_line_is_a_comment(self):
        lines = render_doc_summary("first\nsecond <b>\nthird")
        assert lines == ["/// <summary> first", "/// second &lt;b&gt;", "/// third </summary>"]
        assert all(line.startswith("///") for line in lines)
