"""
Class API code generator:
- passes the script through untouched when no option API was found,
- carries non-vue imports and top-level statements over, with their
  comments (file header comments stay on top),
- rewrites `createNamespacedHelpers("x")` to vuex-class `namespace("x")`,
- hoists statements found in `data()` before the class,
- emits members in a fixed order: _tsx, stores, data, computed, props,
  watchers, methods, lifecycle hooks.
"""

import os
from typing import Any, Dict, List, Optional

from .import_generator import ImportGenerator
from .trivia import header_comments, leading_start, statement_bounds
from ..transformer.component_info import ComponentInfo, MethodMember, PropertyInfo, StoreInfo
from ..transformer.mappings import VueClassMappings, VuexClassTool, VuexMapTool
from ..utils.logger import get_logger
from ..utils.string_utils import (
    capitalize,
    is_identifier,
    reindent,
    restore_line_breaks,
    to_pascal_case,
    to_property_name,
)

logger = get_logger(__name__)

INDENT = "    "

Node = Dict[str, Any]


class ClassGenerator:
    def __init__(self, default_component_name: str = "Component"):
        self.default_component_name = default_component_name
        self.mappings = VueClassMappings()
        self.import_generator = ImportGenerator(self.mappings)

    # ----------------------------------------------------------------------
    def generate(self, ast: Node, source: str, component: ComponentInfo, file_uri: str = "") -> str:
        if not component.is_conversion_required:
            # no option api: the script is moved over exactly as written
            logger.debug("No option api found, passing script through")
            return source

        class_name = self._class_name(component, file_uri)
        logger.debug(f"Generating class component {class_name}")

        header = header_comments(ast, source)
        imports = self.import_generator.generate(ast, source, component)
        top_level = self._generate_top_level(ast, source)
        hoisted = [reindent(stmt, "") for stmt in component.statement_in_data_scope]
        class_code = self._class_comments(ast, source) + self._generate_class(class_name, component)

        code = "\n".join(([header] if header else []) + imports + top_level + hoisted + [class_code]) + "\n"
        return restore_line_breaks(code, component.line_break_marker)

    # ----------------------------------------------------------------------
    def _class_name(self, component: ComponentInfo, file_uri: str) -> str:
        name = component.name
        if not name and file_uri:
            base_name = os.path.splitext(os.path.basename(file_uri))[0]
            name = capitalize(base_name)
        if name and not is_identifier(name):
            name = to_pascal_case(name)
        return name or self.default_component_name

    # ----------------------------------------------------------------------
    # TOP LEVEL STATEMENTS
    # ----------------------------------------------------------------------
    def _generate_top_level(self, ast: Node, source: str) -> List[str]:
        """Statements between the imports and `export default`, e.g. `const navStore = namespace("nav")`."""
        out = []
        for index, stmt in enumerate(ast.get("body", [])):
            if stmt.get("type") in ("ImportDeclaration", "ExportDefaultDeclaration"):
                continue
            text_start, text_end = statement_bounds(ast, source, index)
            out.append(self._rewrite_store_namespace(stmt, source[text_start:text_end], text_start))
        return out

    def _class_comments(self, ast: Node, source: str) -> str:
        """Comments above `export default`, moved above the class decorator."""
        for index, stmt in enumerate(ast.get("body", [])):
            if stmt.get("type") == "ExportDefaultDeclaration":
                start = leading_start(ast, source, index)
                comments = source[start:stmt["range"][0]].rstrip()
                return comments + "\n" if comments else ""
        return ""

    def _rewrite_store_namespace(self, stmt: Node, text: str, start: int) -> str:
        """
        `const meStoreNS = createNamespacedHelpers("me")` -> `const meStoreNS = namespace("me")`

        ``text`` is the statement with its comments, beginning at ``start``.
        """
        declaration = stmt
        if stmt.get("type") == "ExportNamedDeclaration":
            declaration = stmt.get("declaration") or {}
        if declaration.get("type") != "VariableDeclaration":
            return text

        callees = []
        for declarator in declaration.get("declarations", []):
            init = declarator.get("init") or {}
            callee = init.get("callee") or {}
            if init.get("type") == "CallExpression" and callee.get("name") == VuexMapTool.NAMESPACE.value:
                callees.append(callee["range"])

        # splice from the end so earlier offsets stay valid
        for callee_start, callee_end in sorted(callees, reverse=True):
            text = (
                text[:callee_start - start]
                + VuexClassTool.NAMESPACE.value
                + text[callee_end - start:]
            )
        return text

    # ----------------------------------------------------------------------
    # CLASS
    # ----------------------------------------------------------------------
    def _generate_class(self, class_name: str, component: ComponentInfo) -> str:
        members = [INDENT + self.mappings.TSX_FIELD]
        members += [self._generate_property(self._store_property(s)) for s in component.stores]
        members += [self._generate_property(p) for p in component.data]
        members += [self._generate_method(m) for m in component.computed]
        members += [self._generate_property(p) for p in component.props]
        members += [self._generate_method(m) for m in component.watch]
        members += [self._generate_member(m) for m in component.methods]
        members += [self._generate_method(m) for m in component.lifecycle_hooks]

        return (
            f"{self._generate_decorator(component)}\n"
            f"export default class {class_name} extends {self.mappings.BASE_CLASS} {{\n"
            + "\n".join(members)
            + "\n}"
        )

    def _generate_decorator(self, component: ComponentInfo) -> str:
        options = [o for o in (component.components, component.filters, component.directives) if o]
        options += component.unsupported_options
        if not options:
            return "@Component"
        body = ",\n".join(INDENT + reindent(o, INDENT) for o in options)
        return "@Component({\n" + body + "\n})"

    # ----------------------------------------------------------------------
    def _store_property(self, store: StoreInfo) -> PropertyInfo:
        tool = store.map_tool.value
        decorator = f"@{store.namespace}.{tool}" if store.namespace else f"@{tool}"
        return PropertyInfo(
            name=to_property_name(store.name),
            modifiers=["private"],
            decorators=[f"{decorator}({store.getter})"],
        )

    def _generate_member(self, member: Any) -> str:
        if isinstance(member, MethodMember):
            return self._generate_method(member)
        return self._generate_property(member)

    def _generate_property(self, prop: PropertyInfo) -> str:
        lines = [INDENT + reindent(d, INDENT) for d in prop.decorators]
        line = INDENT + " ".join(prop.modifiers + [prop.name])
        if prop.initializer:
            line += " = " + reindent(prop.initializer, INDENT)
        lines.append(line + ";")
        return "\n".join(lines)

    def _generate_method(self, method: MethodMember) -> str:
        lines = [INDENT + reindent(d, INDENT) for d in method.decorators]
        head = list(method.modifiers)
        if method.accessor:
            head.append(method.accessor)
        name = ("*" if method.is_generator else "") + method.name
        params = ", ".join(method.params)
        lines.append(INDENT + " ".join(head + [f"{name}({params})"]) + " " + reindent(method.body, INDENT))
        return "\n".join(lines)
