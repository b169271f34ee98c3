"""
Rules for the `watch` option.

Two entry forms are supported:

    onTrial(val) { ... }                     simple form
    editInfo: { handler(obj) {}, deep: true } complex form

where the complex form's handler may also be `handler: function () {}` or an
arrow function. Every watcher becomes a method named after the watched path:

    "obj.id" -> @Watch("obj.id") private onObjIdChange(...)
"""

from typing import Any, Dict, List, Optional

from ..component_info import MethodMember, WatchInfo
from ..context import TransformContext
from .function_rules import create_method_member, get_source_text, parse_func_node, property_name
from ...utils.string_utils import capitalize, strip_non_alnum, to_string_literal

Node = Dict[str, Any]


def to_on_change_func_name(path: str) -> str:
    """`obj.id` -> `onObjIdChange`"""
    return "on" + "".join(capitalize(strip_non_alnum(part)) for part in path.split(".")) + "Change"


class WatchRules:
    def transform(self, node: Node, ctx: TransformContext) -> None:
        value = node.get("value") or {}
        if value.get("type") != "ObjectExpression":
            ctx.warn(node, "unsupported watch declaration, only the object form is converted")
            return

        watchers: List[MethodMember] = []
        for prop in value.get("properties", []):
            watch_info = self._parse_watch_entry(prop, ctx)
            if watch_info:
                watchers.append(self.create_watch_method(watch_info, ctx))

        ctx.component.set("watch", watchers)

    def _parse_watch_entry(self, prop: Node, ctx: TransformContext) -> Optional[WatchInfo]:
        if prop.get("type") != "Property":
            ctx.warn(prop, f"unsupported watcher: {ctx.text(prop)}")
            return None

        config = prop.get("value") or {}
        if not prop.get("method") and config.get("type") == "ObjectExpression":
            handler = None
            options = []
            for option in config.get("properties", []):
                if handler is None and option.get("type") == "Property" and get_source_text(option.get("key"), ctx) == "handler":
                    handler = option
                else:
                    options.append(option)

            func_info = parse_func_node(handler, ctx)
            if not func_info:
                ctx.warn(prop, f"watcher dropped, no handler function found: {property_name(prop, ctx)}")
                return None
            func_info.name = property_name(prop, ctx)
            return WatchInfo(func_info=func_info, options=options)

        func_info = parse_func_node(prop, ctx)
        if not func_info:
            ctx.warn(prop, f"watcher dropped, unsupported handler: {ctx.text(prop)}")
            return None
        return WatchInfo(func_info=func_info)

    def create_watch_method(self, watch_info: WatchInfo, ctx: TransformContext) -> MethodMember:
        func_info = watch_info.func_info
        watched = func_info.name

        args = [to_string_literal(watched)]
        if watch_info.options:
            args.append("{ " + ", ".join(ctx.text(o) for o in watch_info.options) + " }")

        func_info.name = to_on_change_func_name(watched)
        return create_method_member(
            func_info,
            ctx,
            access_modifier="private",
            decorators=[f"@Watch({', '.join(args)})"],
        )
