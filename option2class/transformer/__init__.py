"""Transformer module for collecting option API components into class members."""

from .ast_transformer import OptionTransformer
from .classifier import OptionKind, classify
from .component_info import ComponentInfo, FuncInfo, StoreInfo, WatchInfo, resolve_unique_name
from .mappings import VueClassMappings, VuexClassTool, VuexMapTool

__all__ = [
    "OptionTransformer",
    "OptionKind",
    "classify",
    "ComponentInfo",
    "FuncInfo",
    "StoreInfo",
    "WatchInfo",
    "resolve_unique_name",
    "VueClassMappings",
    "VuexClassTool",
    "VuexMapTool",
]
