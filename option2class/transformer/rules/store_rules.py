"""
Rules for vuex helper spreads inside `computed` / `methods`.

    computed: {
        ...mapState({ isPartner: state => state.me.partner }),
        ...topologyStore.mapState(["connectivity"]),
    }

Each mapped name becomes a ``StoreInfo``; the generator turns those into
``@State(...)`` / ``@topologyStore.State(...)`` fields.
"""

from typing import Any, Dict, List, Optional

from ..component_info import StoreInfo
from ..context import TransformContext
from ..mappings import VuexClassTool
from .function_rules import get_source_text, parse_func_node, property_name, to_arrow_function
from ...utils.logger import get_logger

logger = get_logger(__name__)

Node = Dict[str, Any]


class StoreRules:
    """Resolves `...[ns.]mapX(...)` spreads, whichever option they sit in."""

    def transform(self, node: Node, ctx: TransformContext) -> List[StoreInfo]:
        stores = self.resolve(node, ctx)
        if stores:
            ctx.component.append("stores", *stores)
        return stores

    def resolve(self, node: Node, ctx: TransformContext) -> List[StoreInfo]:
        expression = node.get("argument") or {}
        if expression.get("type") != "CallExpression":
            ctx.warn(node, f"unsupported spread: {ctx.text(node)}")
            return []

        callee = expression.get("callee") or {}
        is_member = callee.get("type") == "MemberExpression" and not callee.get("computed")
        helper = get_source_text(callee.get("property") if is_member else callee, ctx)

        if not ctx.mappings.is_map_helper(helper):
            ctx.warn(node, f"unsupported spread: {ctx.text(node)}")
            return []

        map_tool = ctx.mappings.get_vuex_mapping(helper)
        # ...meStoreNS.mapState({...}) keeps `meStoreNS` as the namespace
        namespace = ctx.text(callee.get("object")) if is_member else None

        args = expression.get("arguments") or []
        first = args[0] if args else {}
        if first.get("type") == "ObjectExpression":
            stores = self._parse_object_argument(first, map_tool, namespace, ctx)
        elif first.get("type") == "ArrayExpression":
            stores = self._parse_array_argument(first, map_tool, namespace, ctx)
        else:
            ctx.warn(node, f"unsupported {helper} arguments: {ctx.text(expression)}")
            stores = []

        logger.debug(f"{helper} resolved {len(stores)} store binding(s)")
        return stores

    # ------------------------------------------------------------------
    def _parse_object_argument(
        self,
        node: Node,
        map_tool: VuexClassTool,
        namespace: Optional[str],
        ctx: TransformContext,
    ) -> List[StoreInfo]:
        """`mapState({ isPartner: state => state.me.partner, me: meGetter })`"""
        stores = []
        for prop in node.get("properties", []):
            func_info = parse_func_node(prop, ctx)
            value = prop.get("value") or {}
            if func_info:
                name, getter = func_info.name, to_arrow_function(func_info, ctx)
            elif prop.get("type") == "Property" and value.get("type") == "Identifier":
                name, getter = property_name(prop, ctx), value["name"]
            else:
                # countAlias: "count" and friends
                ctx.warn(prop, f"unsupported store mapping, only functions are converted: {ctx.text(prop)}")
                continue
            stores.append(StoreInfo(map_tool=map_tool, name=name, namespace=namespace, getter=getter))
        return stores

    def _parse_array_argument(
        self,
        node: Node,
        map_tool: VuexClassTool,
        namespace: Optional[str],
        ctx: TransformContext,
    ) -> List[StoreInfo]:
        """`mapState(["connectivity"])`"""
        stores = []
        for element in node.get("elements", []):
            if not element or element.get("type") != "Literal" or not isinstance(element.get("value"), str):
                ctx.warn(element or node, f"unsupported store mapping: {ctx.text(element)}")
                continue
            stores.append(StoreInfo(
                map_tool=map_tool,
                name=element["value"],
                namespace=namespace,
                getter=ctx.text(element),
            ))
        return stores
