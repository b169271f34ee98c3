"""
Rules for the `computed` option.

    computed: {
        ...mapState(["count"]),      -> StoreRules
        total() { ... },             -> private get total()
        double: () => this.n * 2,    -> private get double()
        full: {                      -> private get full() / private set full(v)
            get() { ... },
            set(v) { ... },
        },
    }
"""

from typing import Any, Dict, Optional

from ..context import TransformContext
from .function_rules import create_method_member, parse_func_node, property_name
from .store_rules import StoreRules
from ...utils.string_utils import to_property_name

Node = Dict[str, Any]


class ComputedRules:
    def __init__(self, store_rules: Optional[StoreRules] = None):
        self.store_rules = store_rules or StoreRules()

    def transform(self, node: Node, ctx: TransformContext, recursing: bool = False) -> None:
        value = node.get("value") or {}
        if not recursing and value.get("type") != "ObjectExpression":
            ctx.warn(node, f"unsupported computed declaration: {ctx.text(node)}")
            return

        properties = value.get("properties", []) if value.get("type") == "ObjectExpression" else []
        for prop in properties:
            if prop.get("type") == "SpreadElement":
                self.store_rules.transform(prop, ctx)
                continue

            # aaa: { get() {}, set() {} }
            if not recursing and (prop.get("value") or {}).get("type") == "ObjectExpression":
                self.transform(prop, ctx, recursing=True)
                continue

            func_info = parse_func_node(prop, ctx)
            if not func_info:
                if not recursing:
                    ctx.warn(prop, f"unsupported computed property: {ctx.text(prop)}")
                continue

            if func_info.is_async or func_info.is_generator:
                # an accessor can be neither
                ctx.warn(prop, f"unsupported computed property, async or generator: {ctx.text(prop)}")
                continue

            is_get_or_set = func_info.name in ("get", "set")
            # only get/set count one level down
            if recursing and not is_get_or_set:
                continue

            accessor = "set" if recursing and func_info.name == "set" else "get"
            # one level down the accessor takes the name of the parent key
            if recursing:
                func_info.name = property_name(node, ctx)
            func_info.name = to_property_name(func_info.name)

            ctx.component.append(
                "computed",
                create_method_member(func_info, ctx, access_modifier="private", accessor=accessor),
            )
