"""Tests for the function descriptor normalizer."""

from option2class.transformer.rules.function_rules import (
    create_method_member,
    normalize_method_body,
    parse_func_node,
    render_params,
    to_arrow_function,
)


def test_method_shorthand(member):
    ctx, node = member("export default { foo(a, b) { return a + b; } }")

    info = parse_func_node(node, ctx)

    assert info.name == "foo"
    assert render_params(info, ctx) == ["a", "b"]
    assert info.body["type"] == "BlockStatement"
    assert ctx.text(info.body) == "{ return a + b; }"


def test_function_keyword(member):
    ctx, node = member("export default { foo: function (x) { return x; } }")

    info = parse_func_node(node, ctx)

    assert info.name == "foo"
    assert render_params(info, ctx) == ["x"]
    assert info.body["type"] == "BlockStatement"


def test_arrow_with_implicit_return(member):
    ctx, node = member("export default { foo: x => x + 1 }")

    info = parse_func_node(node, ctx)

    assert info.body["type"] == "BinaryExpression"
    assert normalize_method_body(info.body, ctx) == "{\n    return x + 1;\n}"


def test_arrow_returning_parenthesized_object(member):
    ctx, node = member("export default { foo: () => ({ a: 1 }) }")

    info = parse_func_node(node, ctx)

    assert info.body["type"] == "ObjectExpression"
    assert ctx.text(info.body) == "{ a: 1 }"
    assert to_arrow_function(info, ctx) == "() => ({ a: 1 })"


def test_non_function_values_are_not_functions(component_members):
    ctx, members = component_members("const bar = 1;\nexport default { foo: bar, bar }")

    assert parse_func_node(members[0], ctx) is None
    assert parse_func_node(members[1], ctx) is None
    assert parse_func_node(None, ctx) is None


def test_name_does_not_carry_leading_comment(member):
    ctx, node = member(
        """
        export default {
          // the answer
          foo() { return 42; }
        }
        """
    )

    info = parse_func_node(node, ctx)

    assert info.name == "foo"


def test_string_key_reads_as_its_value(member):
    ctx, node = member('export default { "obj.id"(val) {} }')

    assert parse_func_node(node, ctx).name == "obj.id"


def test_async_and_generator_methods(component_members):
    ctx, members = component_members("export default { async load() {}, *items() {} }")

    load = create_method_member(parse_func_node(members[0], ctx), ctx, access_modifier="private")
    items = create_method_member(parse_func_node(members[1], ctx), ctx, access_modifier="private")

    assert load.modifiers == ["private", "async"]
    assert items.is_generator
