"""
Rules for the component-level options that need no restructuring:
`name`, `components` / `directives` / `filters`, lifecycle hooks, and
options the converter does not understand.
"""

from typing import Any, Dict

from ..context import TransformContext
from .function_rules import create_method_member, get_source_text, parse_func_node, property_name
from ...utils.logger import get_logger
from ...utils.string_utils import reindent

logger = get_logger(__name__)

Node = Dict[str, Any]


class ComponentRules:
    """
    Extracts:
    - Component name (later used as the class name)
    - components / directives / filters registrations
    - Lifecycle hooks
    """

    def transform_name(self, node: Node, ctx: TransformContext) -> None:
        ctx.component.set("name", get_source_text(node.get("value"), ctx))

    def transform_registrations(self, field_name: str, node: Node, ctx: TransformContext) -> None:
        """
        Keep `components: { ... }` (or directives / filters) as is; it is
        merged into the `@Component({...})` argument.
        """
        ctx.component.set(field_name, reindent(ctx.text(node), ""))

        value = node.get("value") or {}
        if value.get("type") == "ObjectExpression":
            # { aaa() {}, bbb: function () {}, Ccc }
            names = [property_name(p, ctx) for p in value.get("properties", []) if p.get("type") == "Property"]
            ctx.component.set("registered_names", ctx.component.registered_names + names)

    def transform_lifecycle_hook(self, node: Node, ctx: TransformContext) -> None:
        func_info = parse_func_node(node, ctx)
        if not func_info:
            # created: someFunction
            self.transform_unsupported(node, ctx)
            return
        ctx.component.append("lifecycle_hooks", create_method_member(func_info, ctx, access_modifier="protected"))

    def transform_unsupported(self, node: Node, ctx: TransformContext) -> None:
        """
        Report an option the converter cannot restructure. Unless disabled
        it is carried into the `@Component({...})` options unchanged, which
        vue-class-component hands through to the component definition.
        """
        text = ctx.text(node)
        if ctx.keep_unsupported_options:
            ctx.warn(node, f"unsupported option api, kept in @Component options: {text}")
            ctx.component.set("unsupported_options", ctx.component.unsupported_options + [reindent(text, "")])
        else:
            ctx.warn(node, f"unsupported option api, dropped: {text}")
        logger.debug(f"unsupported option at line {ctx.line(node)}")
