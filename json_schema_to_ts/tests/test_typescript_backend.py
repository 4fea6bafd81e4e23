"""
Tests for rendering type trees as TypeScript.
"""

from __future__ import annotations

import pytest

from json_schema_to_ts.pipeline import GeneratorOptions, generate_typescript
from json_schema_to_ts.pipeline.schema_ast import (
    AnyNode,
    ArrayNode,
    ConstNode,
    EnumNode,
    IntersectionNode,
    LiteralNode,
    NeverNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDefinition,
    TupleNode,
    UnionNode,
)

STRING = PrimitiveNode(type_name="string")
NUMBER = PrimitiveNode(type_name="number")
NULL = PrimitiveNode(type_name="null")


def obj(**props: PropertyDefinition) -> ObjectNode:
    return ObjectNode(properties=dict(props))


class TestSimpleNodes:
    @pytest.mark.parametrize(
        "node, expected",
        [
            (STRING, "string"),
            (NUMBER, "number"),
            (PrimitiveNode(type_name="boolean"), "boolean"),
            (NULL, "null"),
            (AnyNode(), "any"),
            (NeverNode(), "never"),
            (ConstNode(value="active"), '"active"'),
            (ConstNode(value=42), "42"),
            (ConstNode(value=1.5), "1.5"),
            (ConstNode(value=2.0), "2"),
            (ConstNode(value=True), "true"),
            (ConstNode(value=None), "null"),
            (LiteralNode(value='say "hi"'), '"say \\"hi\\""'),
            (LiteralNode(value=False), "false"),
        ],
    )
    def test_render(self, node, expected):
        assert generate_typescript(node) == expected

    def test_enum_single_line(self):
        assert generate_typescript(EnumNode(values=("a", 1, True))) == '"a" | 1 | true'


class TestUnions:
    def test_empty_union_is_never(self):
        assert generate_typescript(UnionNode(types=())) == "never"

    def test_single_member_unwraps(self):
        assert generate_typescript(UnionNode(types=(STRING,))) == "string"

    def test_simple_members(self):
        node = UnionNode(types=(STRING, ConstNode(value="x"), AnyNode(), NeverNode()))
        assert generate_typescript(node) == 'string | "x" | any | never'

    def test_multiline_object_member_is_parenthesized(self):
        node = UnionNode(types=(obj(a=PropertyDefinition(type=STRING, required=True)), NULL))
        assert generate_typescript(node) == "({\n  a: string;\n}) | null"

    def test_empty_object_member_is_not_parenthesized(self):
        assert generate_typescript(UnionNode(types=(ObjectNode(), NULL))) == "{} | null"

    def test_array_member_is_not_parenthesized(self):
        node = UnionNode(types=(ArrayNode(items=STRING), NULL))
        assert generate_typescript(node) == "string[] | null"


class TestIntersections:
    def test_empty_intersection_is_never(self):
        assert generate_typescript(IntersectionNode(types=())) == "never"

    def test_single_member_unwraps(self):
        assert generate_typescript(IntersectionNode(types=(NUMBER,))) == "number"

    def test_union_member_is_parenthesized(self):
        node = IntersectionNode(types=(UnionNode(types=(STRING, NUMBER)), AnyNode()))
        assert generate_typescript(node) == "(string | number) & any"

    def test_objects_are_parenthesized(self):
        node = IntersectionNode(
            types=(
                obj(a=PropertyDefinition(type=STRING, required=True)),
                obj(b=PropertyDefinition(type=NUMBER)),
            )
        )
        assert generate_typescript(node) == "({\n  a: string;\n}) & ({\n  b?: number;\n})"


class TestArrays:
    @pytest.mark.parametrize(
        "items, expected",
        [
            (STRING, "string[]"),
            (AnyNode(), "any[]"),
            (NeverNode(), "never[]"),
            (ConstNode(value="x"), '"x"[]'),
            (EnumNode(values=("a", "b")), '("a" | "b")[]'),
            (UnionNode(types=(STRING, NUMBER)), "(string | number)[]"),
            (IntersectionNode(types=(ObjectNode(), ObjectNode())), "({} & {})[]"),
            (ArrayNode(items=NUMBER), "number[][]"),
            (TupleNode(items=(STRING, NUMBER)), "[string, number][]"),
            (ObjectNode(), "{}[]"),
        ],
    )
    def test_array_items(self, items, expected):
        assert generate_typescript(ArrayNode(items=items)) == expected

    def test_array_of_objects(self):
        node = ArrayNode(items=obj(id=PropertyDefinition(type=NUMBER, required=True)))
        assert generate_typescript(node) == "{\n  id: number;\n}[]"


class TestTuples:
    def test_empty_tuple(self):
        assert generate_typescript(TupleNode(items=())) == "[]"

    def test_nested_tuple_stays_on_one_line(self):
        node = TupleNode(items=(STRING, TupleNode(items=(NUMBER, NUMBER)), ArrayNode(items=STRING)))
        assert generate_typescript(node) == "[string, [number, number], string[]]"


class TestObjects:
    def test_empty_object(self):
        assert generate_typescript(ObjectNode()) == "{}"

    def test_forbidden_additional_properties_is_empty_object(self):
        assert generate_typescript(ObjectNode(additional_properties=False)) == "{}"

    def test_any_additional_properties(self):
        assert generate_typescript(ObjectNode(additional_properties=True)) == "{\n  [key: string]: any;\n}"

    def test_typed_additional_properties(self):
        node = ObjectNode(
            properties={"name": PropertyDefinition(type=STRING, required=True)},
            additional_properties=NUMBER,
        )
        assert generate_typescript(node) == "{\n  name: string;\n  [key: string]: number;\n}"

    def test_quoted_keys(self):
        node = ObjectNode(
            properties={
                "first-name": PropertyDefinition(type=STRING),
                "123": PropertyDefinition(type=STRING),
                "with space": PropertyDefinition(type=STRING),
                "$valid_1": PropertyDefinition(type=STRING),
            }
        )
        expected = '{\n  "first-name"?: string;\n  "123"?: string;\n  "with space"?: string;\n  $valid_1?: string;\n}'
        assert generate_typescript(node) == expected

    def test_nested_objects_are_indented(self):
        inner = obj(city=PropertyDefinition(type=STRING, required=True))
        node = obj(address=PropertyDefinition(type=inner, required=True))
        assert generate_typescript(node) == "{\n  address: {\n    city: string;\n  };\n}"

    def test_base_indent(self):
        node = obj(a=PropertyDefinition(type=STRING, required=True))
        assert generate_typescript(node, GeneratorOptions(indent=2)) == "{\n      a: string;\n    }"


class TestDeclarations:
    def test_type_alias_for_object(self):
        node = obj(a=PropertyDefinition(type=STRING, required=True))
        assert generate_typescript(node, GeneratorOptions(type_name="A")) == "export type A = {\n  a: string;\n};"

    def test_interface_for_object(self):
        node = obj(a=PropertyDefinition(type=STRING, required=True))
        options = GeneratorOptions(type_name="A", use_type_alias=False)
        assert generate_typescript(node, options) == "export interface A {\n  a: string;\n};"

    def test_interface_is_only_used_for_objects(self):
        options = GeneratorOptions(type_name="Name", use_type_alias=False)
        assert generate_typescript(STRING, options) == "export type Name = string;"

    def test_empty_name_renders_body(self):
        assert generate_typescript(STRING, GeneratorOptions(type_name="")) == "string"

    def test_options_from_dict(self):
        assert generate_typescript(NUMBER, {"typeName": "N"}) == "export type N = number;"

    def test_add_comments_has_no_effect(self):
        node = obj(a=PropertyDefinition(type=STRING, required=True))
        with_comments = generate_typescript(node, GeneratorOptions(type_name="A", add_comments=True))
        assert with_comments == generate_typescript(node, GeneratorOptions(type_name="A"))
