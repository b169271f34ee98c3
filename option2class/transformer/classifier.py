"""
Decides which option a component-object member is.
"""

from enum import Enum
from typing import Any, Dict, Optional

from .mappings import VueClassMappings
from ..utils.string_utils import is_identifier

Node = Dict[str, Any]

_mappings = VueClassMappings()


class OptionKind(Enum):
    NAME = "name"
    DATA = "data"
    COMPONENTS = "components"
    COMPUTED = "computed"
    METHODS = "methods"
    PROPS = "props"
    WATCH = "watch"
    DIRECTIVES = "directives"
    FILTERS = "filters"
    LIFECYCLE_HOOK = "lifecycleHook"
    # a member of the component object that no handler understands
    UNRECOGNIZED = "unrecognized"
    # not an object member at all (statements, callees, ...)
    NONE = "none"


# options that must be written `key: value`; `data` may also be `data() {}`
_VALUE_ONLY = {
    "name": OptionKind.NAME,
    "components": OptionKind.COMPONENTS,
    "computed": OptionKind.COMPUTED,
    "methods": OptionKind.METHODS,
    "props": OptionKind.PROPS,
    "watch": OptionKind.WATCH,
    "directives": OptionKind.DIRECTIVES,
    "filters": OptionKind.FILTERS,
}


def option_key(node: Node) -> Optional[str]:
    """Static key of an object member (`data`, `"data"`), None for `[expr]`."""
    if node.get("computed"):
        return None
    key = node.get("key") or {}
    if key.get("type") == "Identifier":
        return key.get("name")
    if key.get("type") == "Literal" and isinstance(key.get("value"), str):
        return key["value"]
    return None


def is_plain_property(node: Node) -> bool:
    """`key: value`, as opposed to methods, accessors and shorthand members."""
    return (
        node.get("type") == "Property"
        and not node.get("method")
        and not node.get("shorthand")
        and node.get("kind", "init") == "init"
    )


def classify(node: Optional[Node]) -> OptionKind:
    """
    Classify one node reached by the traversal.

    Each object member maps to exactly one kind; spreads and members whose
    key or shape is not on the allow-list are UNRECOGNIZED.
    """
    if not node:
        return OptionKind.NONE

    node_type = node.get("type")
    if node_type == "SpreadElement":
        return OptionKind.UNRECOGNIZED
    if node_type != "Property":
        return OptionKind.NONE

    key = option_key(node)
    if key is None or not is_identifier(key):
        return OptionKind.UNRECOGNIZED

    if key in _VALUE_ONLY:
        return _VALUE_ONLY[key] if is_plain_property(node) else OptionKind.UNRECOGNIZED

    if key == "data":
        if node.get("method") or is_plain_property(node):
            return OptionKind.DATA
        return OptionKind.UNRECOGNIZED

    if _mappings.is_lifecycle_hook(key) and node.get("kind", "init") == "init":
        return OptionKind.LIFECYCLE_HOOK

    return OptionKind.UNRECOGNIZED
