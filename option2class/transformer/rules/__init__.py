"""Transformation rules, one per option kind."""

from .component_rules import ComponentRules
from .computed_rules import ComputedRules
from .data_rules import DataRules
from .function_rules import parse_func_node
from .methods_rules import MethodsRules
from .props_rules import PropsRules
from .store_rules import StoreRules
from .watch_rules import WatchRules

__all__ = [
    "ComponentRules",
    "ComputedRules",
    "DataRules",
    "MethodsRules",
    "PropsRules",
    "StoreRules",
    "WatchRules",
    "parse_func_node",
]
