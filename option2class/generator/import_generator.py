"""
Builds the import block of a converted component.
"""

from typing import Any, Dict, List, Optional

from .trivia import statement_bounds
from ..transformer.component_info import ComponentInfo
from ..transformer.mappings import VueClassMappings, VuexClassTool


class ImportGenerator:
    def __init__(self, mappings: Optional[VueClassMappings] = None):
        self.mappings = mappings or VueClassMappings()

    def generate(self, ast: Dict[str, Any], source: str, component: ComponentInfo) -> List[str]:
        lines = [
            f'import * as tsx from "{self.mappings.TSX_MODULE}";',
            self._decorator_import(component),
        ]
        vuex_import = self._vuex_class_import(component)
        if vuex_import:
            lines.append(vuex_import)
        lines.extend(self._carried_imports(ast, source))
        return lines

    # ----------------------------------------------------------------------
    def _decorator_import(self, component: ComponentInfo) -> str:
        bindings = ["Component", self.mappings.BASE_CLASS]
        if component.props:
            bindings.append("Prop")
        if component.watch:
            bindings.append("Watch")
        return self.create_import(bindings, self.mappings.DECORATOR_MODULE)

    def _vuex_class_import(self, component: ComponentInfo) -> Optional[str]:
        stores = component.stores
        if not stores:
            return None

        # mapState(...) without a namespace imports the decorator itself,
        # ns.mapState(...) only needs `namespace`
        bindings: List[str] = []
        for store in stores:
            if not store.namespace and store.map_tool.value not in bindings:
                bindings.append(store.map_tool.value)
        if any(store.namespace for store in stores):
            bindings.append(VuexClassTool.NAMESPACE.value)
        return self.create_import(bindings, self.mappings.VUEX_CLASS_MODULE)

    def _carried_imports(self, ast: Dict[str, Any], source: str) -> List[str]:
        """Every original import except those from vue / vuex."""
        carried = []
        for index, stmt in enumerate(ast.get("body", [])):
            if stmt.get("type") != "ImportDeclaration":
                continue
            module = str((stmt.get("source") or {}).get("value", ""))
            if module.lower() in self.mappings.FRAMEWORK_MODULES:
                # its comments go with it
                continue
            start, end = statement_bounds(ast, source, index)
            carried.append(source[start:end])
        return carried

    @staticmethod
    def create_import(bindings: List[str], module: str) -> str:
        return f'import {{ {", ".join(bindings)} }} from "{module}";'
