"""
Walks a component script AST and collects the component's shape.

The walk is selective: it only descends through the nodes that can lead to
the component options object

    Program
    export default { ... }
    export default Vue.extend({ ... })
    { ... }

and hands every member of that object to the rule for its option. The
rules never let the walk descend further; they read whatever nested
structure they need themselves.
"""

from collections import deque
from typing import Any, Callable, Dict, List, Optional

from .classifier import OptionKind, classify
from .component_info import ComponentInfo
from .context import TransformContext
from .mappings import VueClassMappings
from .rules.component_rules import ComponentRules
from .rules.computed_rules import ComputedRules
from .rules.data_rules import DataRules
from .rules.methods_rules import MethodsRules
from .rules.props_rules import PropsRules
from .rules.store_rules import StoreRules
from .rules.watch_rules import WatchRules
from ..utils.diagnostics import Diagnostics
from ..utils.logger import get_logger

logger = get_logger(__name__)

Node = Dict[str, Any]


class OptionTransformer:
    """Transforms an option API script AST into a ComponentInfo."""

    def __init__(self, keep_unsupported_options: bool = True):
        self.keep_unsupported_options = keep_unsupported_options
        self.mappings = VueClassMappings()
        self.store_rules = StoreRules()
        self.component_rules = ComponentRules()
        self.data_rules = DataRules()
        self.computed_rules = ComputedRules(self.store_rules)
        self.methods_rules = MethodsRules(self.store_rules)
        self.props_rules = PropsRules()
        self.watch_rules = WatchRules()

        self._handlers: Dict[OptionKind, Callable[[Node, TransformContext], None]] = {
            OptionKind.NAME: self.component_rules.transform_name,
            OptionKind.DATA: self.data_rules.transform,
            OptionKind.COMPONENTS: lambda n, c: self.component_rules.transform_registrations("components", n, c),
            OptionKind.DIRECTIVES: lambda n, c: self.component_rules.transform_registrations("directives", n, c),
            OptionKind.FILTERS: lambda n, c: self.component_rules.transform_registrations("filters", n, c),
            OptionKind.COMPUTED: self.computed_rules.transform,
            OptionKind.METHODS: self.methods_rules.transform,
            OptionKind.PROPS: self.props_rules.transform,
            OptionKind.WATCH: self.watch_rules.transform,
            OptionKind.LIFECYCLE_HOOK: self.component_rules.transform_lifecycle_hook,
            OptionKind.UNRECOGNIZED: self.component_rules.transform_unsupported,
        }

    # ---------------------------------------------------------
    # MAIN TRANSFORM
    # ---------------------------------------------------------
    def transform(
        self,
        ast: Node,
        source: str,
        file_uri: str = "",
        diagnostics: Optional[Diagnostics] = None,
    ) -> ComponentInfo:
        """
        Collect the component options found in ``ast``.

        Args:
            ast: Program node produced by the script parser
            source: The script text ``ast`` was parsed from
            file_uri: File identifier used in diagnostics
            diagnostics: Warning channel, a fresh one if omitted

        Returns:
            A new ComponentInfo with watcher names already de-duplicated
        """
        ctx = TransformContext(
            source=source,
            file_uri=file_uri,
            component=ComponentInfo(),
            diagnostics=diagnostics if diagnostics is not None else Diagnostics(),
            mappings=self.mappings,
            keep_unsupported_options=self.keep_unsupported_options,
            tokens=ast.get("tokens") or [],
        )
        logger.debug(f"Starting option api traversal for {file_uri or '<snippet>'}")

        self.visit(ast, ctx)
        ctx.component.update_watch_method_names()

        logger.debug(f"Completed traversal, conversion required: {ctx.component.is_conversion_required}")
        return ctx.component

    def visit(self, root: Node, ctx: TransformContext) -> None:
        """Breadth-first walk from ``root``, in document order within each level."""
        queue = deque([root])
        while queue:
            node = queue.popleft()
            if self.is_container(node, ctx):
                queue.extend(self.children(node))
                continue
            if node.get("type") == "ImportDeclaration":
                continue

            # only members of the component object classify as options
            kind = classify(node)
            if kind is OptionKind.NONE:
                continue
            logger.debug(f"{kind.value} option at line {ctx.line(node)}")
            self._handlers[kind](node, ctx)

    # ---------------------------------------------------------
    def is_container(self, node: Node, ctx: TransformContext) -> bool:
        """Whether the walk should descend into ``node`` instead of classifying it."""
        node_type = node.get("type")
        if node_type in ("Program", "ObjectExpression"):
            return True
        if node_type == "ExportDefaultDeclaration":
            declaration = node.get("declaration") or {}
            return declaration.get("type") in ("ObjectExpression", "CallExpression")
        if node_type == "CallExpression":
            callee = node.get("callee") or {}
            return (
                callee.get("type") == "MemberExpression"
                and ctx.text(callee).lower() == self.mappings.BASE_OBJECT_FACTORY
            )
        return False

    def children(self, node: Node) -> List[Node]:
        node_type = node.get("type")
        if node_type == "Program":
            children = node.get("body", [])
        elif node_type == "ObjectExpression":
            children = node.get("properties", [])
        elif node_type == "ExportDefaultDeclaration":
            children = [node.get("declaration")]
        elif node_type == "CallExpression":
            children = [node.get("callee")] + list(node.get("arguments", []))
        else:
            children = []
        return [c for c in children if c]
