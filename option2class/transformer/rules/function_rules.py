"""
Normalizes the function-like shapes an option value can take.

An object member can hold a function in four ways:

    aaa: function () {}
    aaa: () => x          (implicit return)
    aaa: () => ({ ... })  (implicit return of an object literal)
    aaa() {}

All of them become one ``FuncInfo``. Anything else (``aaa: bbb``,
shorthand ``aaa``) is not a function and yields None.
"""

from typing import Any, Dict, List, Optional

from ..component_info import FuncInfo, MethodMember
from ..context import TransformContext
from ...utils.string_utils import reindent

Node = Dict[str, Any]

FUNCTION_TYPES = ("FunctionExpression", "ArrowFunctionExpression")


def get_source_text(node: Optional[Node], ctx: TransformContext) -> str:
    """
    Text of a name-like node.

    Identifiers and string literals give their value, not their source, so
    ``"obj.id"`` reads as ``obj.id``. Other nodes give their source text.
    """
    if not node:
        return ""
    node_type = node.get("type")
    if node_type == "Identifier":
        return node.get("name", "")
    if node_type == "Literal" and isinstance(node.get("value"), str):
        return node["value"]
    if node_type == "Literal":
        return node.get("raw") or ctx.text(node)
    return ctx.text(node)


def property_name(prop: Node, ctx: TransformContext) -> str:
    """
    Name of an object member, rebuilt from the key's value.

    The key is never sliced together with its surroundings: a comment
    sitting on the line above the key would otherwise travel into the new
    member name and be hoisted in front of the modifiers.
    """
    key = prop.get("key")
    if prop.get("computed"):
        return f"[{ctx.text(key)}]"
    return get_source_text(key, ctx)


def is_async(func: Node) -> bool:
    return bool(func.get("isAsync") or func.get("async"))


def create_func_info(func: Node, name: str, body: Optional[Node]) -> FuncInfo:
    return FuncInfo(
        name=name,
        params=list(func.get("params") or []),
        body=body,
        modifiers=["async"] if is_async(func) else [],
        is_async=is_async(func),
        is_generator=bool(func.get("generator")),
    )


def parse_func_node(node: Optional[Node], ctx: TransformContext) -> Optional[FuncInfo]:
    """Return the FuncInfo for a function-valued object member, or None."""
    if not node or node.get("type") != "Property":
        return None
    # `get x() {}` / `set x(v) {}` are accessors, not option values
    if node.get("kind") in ("get", "set"):
        return None

    name = property_name(node, ctx)
    value = node.get("value") or {}

    if node.get("method"):
        # aaa() {}
        return create_func_info(value, name, value.get("body"))

    if value.get("type") == "ArrowFunctionExpression":
        # esprima already drops the parentheses of `() => ({})`, the body
        # node is the object literal itself
        return create_func_info(value, name, value.get("body"))

    if value.get("type") == "FunctionExpression":
        return create_func_info(value, name, value.get("body"))

    return None


def is_function_node(node: Optional[Node]) -> bool:
    return bool(node) and node.get("type") in FUNCTION_TYPES


# ----------------------------------------------------------------------
# Rendering helpers shared by the handlers
# ----------------------------------------------------------------------
def render_params(func_info: FuncInfo, ctx: TransformContext) -> List[str]:
    return [ctx.text(p) for p in func_info.params]


def render_expression(node: Node, ctx: TransformContext) -> str:
    """Expression source, parenthesized when it would read as a block."""
    text = ctx.text(node)
    if node.get("type") == "ObjectExpression":
        return f"({text})"
    return text


def normalize_method_body(body: Optional[Node], ctx: TransformContext) -> str:
    """Turn a FuncInfo body into a ``{ ... }`` block: expressions get an explicit return."""
    if not body:
        return "{\n}"
    if body.get("type") == "BlockStatement":
        return ctx.text(body)
    expression = reindent(ctx.text(body), "    ")
    return "{\n    return " + expression + ";\n}"


def to_arrow_function(func_info: FuncInfo, ctx: TransformContext) -> str:
    """Rebuild ``(params) => body`` from a FuncInfo."""
    params = ", ".join(render_params(func_info, ctx))
    prefix = "async " if func_info.is_async else ""
    body = func_info.body
    if body and body.get("type") != "BlockStatement":
        return f"{prefix}({params}) => {render_expression(body, ctx)}"
    return f"{prefix}({params}) => {normalize_method_body(body, ctx)}"


def create_method_member(
    func_info: FuncInfo,
    ctx: TransformContext,
    access_modifier: Optional[str] = None,
    decorators: Optional[List[str]] = None,
    accessor: Optional[str] = None,
) -> MethodMember:
    modifiers = ([access_modifier] if access_modifier else []) + list(func_info.modifiers)
    return MethodMember(
        name=func_info.name,
        params=render_params(func_info, ctx),
        body=normalize_method_body(func_info.body, ctx),
        decorators=list(decorators or []),
        modifiers=modifiers,
        accessor=accessor,
        is_generator=func_info.is_generator,
    )
