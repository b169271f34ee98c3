"""
Rules for the `props` option.

    props: ["aaa", "bbb"]           -> @Prop({ required: false }) public aaa;
    props: { aaa: String }          -> @Prop({ required: false, type: String }) public aaa;
    props: { aaa: { type: ... } }   -> @Prop({ type: ... }) public aaa;
"""

from typing import Any, Dict, List, Optional

from ..component_info import PropertyInfo
from ..context import TransformContext
from .function_rules import property_name
from ...utils.string_utils import reindent, to_property_name

Node = Dict[str, Any]

NOT_REQUIRED = "required: false"


class PropsRules:
    def transform(self, node: Node, ctx: TransformContext) -> None:
        value = node.get("value") or {}
        value_type = value.get("type")

        if value_type == "ArrayExpression":
            props = self._from_array(value, ctx)
        elif value_type == "ObjectExpression":
            props = self._from_object(value, ctx)
        else:
            ctx.warn(node, "unsupported props declaration")
            return

        ctx.component.set("props", props)

    def _from_array(self, node: Node, ctx: TransformContext) -> List[PropertyInfo]:
        props = []
        for element in node.get("elements", []):
            if not element or element.get("type") != "Literal" or not isinstance(element.get("value"), str):
                ctx.warn(element or node, f"unsupported prop: {ctx.text(element)}")
                continue
            props.append(self._create_prop(to_property_name(element["value"]), None))
        return props

    def _from_object(self, node: Node, ctx: TransformContext) -> List[PropertyInfo]:
        props = []
        for prop in node.get("properties", []):
            if prop.get("type") != "Property" or prop.get("method") or prop.get("shorthand"):
                ctx.warn(prop, f"unsupported prop: {ctx.text(prop)}")
                continue

            config = prop.get("value") or {}
            if config.get("type") == "ObjectExpression":
                options = reindent(ctx.text(config), "")
            else:
                # a bare type reference: String, [String, Number], ...
                options = None
            props.append(self._create_prop(to_property_name(property_name(prop, ctx)), options, ctx.text(config)))
        return props

    def _create_prop(self, name: str, options: Optional[str], prop_type: Optional[str] = None) -> PropertyInfo:
        if options is None:
            entries = [NOT_REQUIRED] + ([f"type: {prop_type}"] if prop_type else [])
            options = "{ " + ", ".join(entries) + " }"
        return PropertyInfo(name=name, decorators=[f"@Prop({options})"], modifiers=["public"])
