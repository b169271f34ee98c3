"""
Rules for the `data` option.

Handled forms:
1. data() {}
2. data: () => {}
3. data: () => ({})
4. data: function () {}

Statements before the `return` are hoisted to the top level of the output
module; each member of the returned object becomes a private field.
"""

from typing import Any, Dict, List

from ..component_info import PropertyInfo
from ..context import TransformContext
from .function_rules import parse_func_node, property_name
from ...utils.logger import get_logger
from ...utils.string_utils import to_property_name

logger = get_logger(__name__)

Node = Dict[str, Any]


class DataRules:
    def transform(self, node: Node, ctx: TransformContext) -> None:
        func_info = parse_func_node(node, ctx)
        if not func_info or not func_info.body:
            ctx.warn(node, "unsupported data declaration, data must be a function")
            return

        body = func_info.body
        if body.get("type") == "BlockStatement":
            statements = body.get("body", [])
            hoisted = [ctx.text(stmt) for stmt in statements if stmt.get("type") != "ReturnStatement"]
            if hoisted:
                ctx.component.set("statement_in_data_scope", hoisted)

            returned = next((s for s in statements if s.get("type") == "ReturnStatement"), None)
            returned_object = (returned or {}).get("argument")
        else:
            # data: () => ({ ... })
            returned_object = body

        if not returned_object or returned_object.get("type") != "ObjectExpression":
            ctx.warn(node, "unsupported data declaration, data must return an object literal")
            return

        data = self._extract_fields(returned_object, ctx)
        logger.debug(f"data: {len(data)} field(s), {len(ctx.component.statement_in_data_scope)} hoisted statement(s)")
        ctx.component.set("data", data)

    def _extract_fields(self, returned_object: Node, ctx: TransformContext) -> List[PropertyInfo]:
        data = []
        for prop in returned_object.get("properties", []):
            if prop.get("type") != "Property" or prop.get("method") or prop.get("kind", "init") != "init":
                ctx.warn(prop, f"unsupported data member: {ctx.text(prop)}")
                continue

            # The name is rebuilt rather than copied so a comment above the
            # key does not end up between `private` and the name
            name = to_property_name(property_name(prop, ctx))
            initializer = name if prop.get("shorthand") else ctx.text(prop.get("value"))
            data.append(PropertyInfo(name=name, modifiers=["private"], initializer=initializer))
        return data
