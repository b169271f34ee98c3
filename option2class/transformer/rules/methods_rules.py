"""
Rules for the `methods` option.
"""

from typing import Any, Dict, List, Optional

from ..component_info import PropertyInfo
from ..context import TransformContext
from .function_rules import create_method_member, parse_func_node, property_name
from .store_rules import StoreRules
from ...utils.string_utils import to_property_name

Node = Dict[str, Any]


class MethodsRules:
    def __init__(self, store_rules: Optional[StoreRules] = None):
        self.store_rules = store_rules or StoreRules()

    def transform(self, node: Node, ctx: TransformContext) -> None:
        value = node.get("value") or {}
        if value.get("type") != "ObjectExpression":
            ctx.warn(node, f"unsupported methods declaration: {ctx.text(node)}")
            return

        methods: List[Any] = []
        for prop in value.get("properties", []):
            if prop.get("type") == "SpreadElement":
                self.store_rules.transform(prop, ctx)
                continue

            func_info = parse_func_node(prop, ctx)
            if func_info:
                func_info.name = to_property_name(func_info.name)
                methods.append(create_method_member(func_info, ctx, access_modifier="private"))
                continue

            # methods: { aaa: axios, axios, bbb: this.aaa }
            # a value that is not a function keeps its identity: it stays an
            # assignment instead of being wrapped in a new function
            if prop.get("type") == "Property" and prop.get("kind", "init") == "init":
                name = to_property_name(property_name(prop, ctx))
                initializer = name if prop.get("shorthand") else ctx.text(prop.get("value"))
                methods.append(PropertyInfo(name=name, modifiers=["private"], initializer=initializer))
            else:
                ctx.warn(prop, f"unsupported method: {ctx.text(prop)}")

        if methods:
            ctx.component.append("methods", *methods)
