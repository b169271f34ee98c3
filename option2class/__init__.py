"""Convert Vue option API components into vue-property-decorator class components."""

from .config import TranspilerConfig, load_config
from .transpiler import ConversionResult, Transpiler, convert_script

__all__ = ["ConversionResult", "Transpiler", "TranspilerConfig", "convert_script", "load_config"]
